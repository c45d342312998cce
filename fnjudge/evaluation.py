import logging
from typing import Callable, Iterable, Optional, Sequence

from .models import Candidate, Score, TestCase
from .reference import reference_sum
from .test_case_manager import sample_test_cases

logger = logging.getLogger(__name__)


def expected_output(test_case: TestCase, reference: Callable[[Sequence[int]], int]) -> int:
    if test_case.output is not None:
        return test_case.output
    return reference(list(test_case.input))


def evaluate(candidate: Candidate,
             test_cases: Optional[Iterable[TestCase]] = None,
             reference: Callable[[Sequence[int]], int] = reference_sum) -> Score:
    """Score ``candidate`` against ``test_cases`` in order.

    Returns ``(achieved, maximum)``. The candidate is called in-process with no
    time limit: whatever it raises propagates, and if it never returns neither
    does this. Use ``fnjudge.judge.judge`` for untrusted source code.
    """
    if test_cases is None:
        test_cases = sample_test_cases()

    candidate_score = 0
    max_score = 0
    for i, test_case in enumerate(test_cases, 1):
        # Each call gets its own copy so a mutating candidate cannot leak state
        passed = candidate(list(test_case.input)) == expected_output(test_case, reference)
        if passed:
            candidate_score += test_case.weight
        max_score += test_case.weight
        logger.debug(f'test case {i}: {"passed" if passed else "failed"} (weight {test_case.weight})')

    return Score(candidate_score, max_score)
