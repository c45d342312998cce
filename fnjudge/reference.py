from typing import Callable, Dict, Sequence


def reference_sum(values: Sequence[int]) -> int:
    total = 0
    for value in values:
        total += value
    return total


references: Dict[str, Callable[[Sequence[int]], int]] = {
    'sum': reference_sum,
}
