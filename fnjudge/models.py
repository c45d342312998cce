from dataclasses import dataclass
from typing import Callable, List, NamedTuple, Optional, Tuple

from pydantic import BaseModel, field_validator

import fnjudge.constants as constants

from .reference import references
from .verdict import Verdict

Candidate = Callable[[List[int]], int]

# FastAPI models


class TaskInfo(BaseModel):
    task_id: str
    reference: str = 'sum'  # key into reference.references
    function_name: str = constants.DEFAULT_FUNCTION_NAME
    time_limit: float = constants.DEFAULT_TIME_LIMIT  # seconds
    memory_limit: Optional[int] = None  # megabytes

    @field_validator('reference')
    @classmethod
    def check_reference(cls, reference: str) -> str:
        if reference not in references:
            raise ValueError(f'unknown reference solver {reference!r}')
        return reference


class EvaluationRequest(BaseModel):
    task_id: str
    source_code: str
    function_name: Optional[str] = None  # overrides TaskInfo.function_name


# Other models


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class TestCase:
    __test__ = False

    input: Tuple[int, ...]
    weight: int
    output: Optional[int] = None  # None if checked against the reference solver

    def __post_init__(self):
        if not _is_int(self.weight) or self.weight <= 0:
            raise ValueError(f'test case weight must be a positive integer, got {self.weight!r}')
        if not all(_is_int(value) for value in self.input):
            raise ValueError(f'test case input must be integers, got {self.input!r}')
        if self.output is not None and not _is_int(self.output):
            raise ValueError(f'test case output must be an integer, got {self.output!r}')


class Score(NamedTuple):
    achieved: int
    maximum: int


@dataclass
class TestCaseResult:
    __test__ = False

    test_case: int
    verdict: Verdict
    score: int
    max_score: int
    time_used: float

    def to_dict(self):
        return {
            "test_case": self.test_case,
            "verdict": self.verdict,
            "score": self.score,
            "max_score": self.max_score,
            "time_used": self.time_used
        }
