from fnjudge.judge import judge, total_score
from fnjudge.models import Score, TaskInfo, TestCase, TestCaseResult
from fnjudge.test_case_manager import sample_test_cases
from fnjudge.verdict import Verdict

from .conftest import CONSTANT_SOURCE, CORRECT_SOURCE

SUM_TASK = TaskInfo(task_id='sum', time_limit=5)


def test_correct_source_scores_full_marks():
    results = judge(CORRECT_SOURCE, SUM_TASK, sample_test_cases())
    assert [result.verdict for result in results] == [Verdict.AC] * 3
    assert total_score(results) == (100, 100)


def test_constant_source_scores_empty_case_only():
    results = judge(CONSTANT_SOURCE, SUM_TASK, sample_test_cases())
    assert [result.verdict for result in results] == [Verdict.AC, Verdict.WA, Verdict.WA]
    assert [result.score for result in results] == [10, 0, 0]
    assert total_score(results) == (10, 100)


def test_stored_output_is_used():
    test_cases = [TestCase(input=(1, 2), weight=3, output=4)]
    results = judge(CORRECT_SOURCE, SUM_TASK, test_cases)
    assert results[0].verdict == Verdict.WA
    assert total_score(results) == (0, 3)


def test_runtime_error_only_loses_that_case():
    source = (
        'def solution_func(values):\n'
        '    if not values:\n'
        '        raise ValueError("empty")\n'
        '    return sum(values)\n'
    )
    results = judge(source, SUM_TASK, sample_test_cases())
    assert [result.verdict for result in results] == [Verdict.RE, Verdict.AC, Verdict.AC]
    assert total_score(results) == (90, 100)


def test_time_limit_exceeded():
    source = 'def solution_func(values):\n    while True:\n        pass\n'
    task_info = TaskInfo(task_id='sum', time_limit=0.2)
    results = judge(source, task_info, [TestCase(input=(1,), weight=7)])
    assert results[0].verdict == Verdict.TLE
    assert results[0].time_used == 0.2
    assert total_score(results) == (0, 7)


def test_syntax_error_is_compilation_error():
    assert judge('def solution_func(:\n', SUM_TASK, sample_test_cases()) == Verdict.CE


def test_missing_function_is_compilation_error():
    assert judge(CORRECT_SOURCE, SUM_TASK, sample_test_cases(), function_name='other') == Verdict.CE


def test_function_name_from_task_info():
    source = 'def add_all(values):\n    return sum(values)\n'
    task_info = TaskInfo(task_id='sum', function_name='add_all', time_limit=5)
    results = judge(source, task_info, [TestCase(input=(1, 2), weight=1)])
    assert total_score(results) == (1, 1)


def test_total_score():
    results = [
        TestCaseResult(test_case=1, verdict=Verdict.AC, score=10, max_score=10, time_used=0.0),
        TestCaseResult(test_case=2, verdict=Verdict.TLE, score=0, max_score=30, time_used=1.0),
    ]
    assert total_score(results) == Score(10, 40)
    assert total_score([]) == Score(0, 0)
