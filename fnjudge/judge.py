import logging
import time
from typing import Iterable, List, Optional, Union

import fnjudge.compilation as compilation

from .evaluation import expected_output
from .models import Score, TaskInfo, TestCase, TestCaseResult
from .reference import references
from .verdict import Verdict

logger = logging.getLogger(__name__)


def judge(source_code: str, task_info: TaskInfo, test_cases: Iterable[TestCase],
          function_name: Optional[str] = None) -> Union[Verdict, List[TestCaseResult]]:
    """Judge submitted source code, one child process per test case.

    Unlike ``evaluate``, a submission that raises, crashes or runs past the
    time limit gets a verdict for that test case instead of taking the caller
    down with it. The limits are resource limits, not a security sandbox.
    """
    start_time = time.perf_counter()
    function_name = function_name or task_info.function_name
    reference = references[task_info.reference]

    logger.info(f'task {task_info.task_id}: compiling')
    try:
        compilation.compile_source(source_code)
    except compilation.CompilationError:
        return Verdict.CE

    logger.info(f'task {task_info.task_id}: running and judging')
    test_case_results = []
    for i, test_case in enumerate(test_cases, 1):
        run_result = compilation.run(source_code,
                                     function_name,
                                     list(test_case.input),
                                     task_info.time_limit,
                                     task_info.memory_limit)
        if run_result.verdict in (Verdict.CE, Verdict.SE):
            logger.info(f'task {task_info.task_id}: test case {i} gave {run_result.verdict.name}')
            return run_result.verdict

        test_case_result = TestCaseResult(
            test_case=i,
            verdict=run_result.verdict,
            score=0,
            max_score=test_case.weight,
            time_used=min(run_result.time_used, task_info.time_limit))

        if run_result.verdict == Verdict.AC:  # returned within limits
            if run_result.output == expected_output(test_case, reference):
                test_case_result.score = test_case.weight
            else:
                test_case_result.verdict = Verdict.WA

        logger.debug(f'task {task_info.task_id}: {test_case_result}')
        test_case_results.append(test_case_result)

    end_time = time.perf_counter()
    logger.info(f'task {task_info.task_id}: completed in {end_time - start_time:.4f}s')
    return test_case_results


def total_score(test_case_results: Iterable[TestCaseResult]) -> Score:
    candidate_score = 0
    max_score = 0
    for test_case_result in test_case_results:
        candidate_score += test_case_result.score
        max_score += test_case_result.max_score
    return Score(candidate_score, max_score)
