from typing import List


# Demo candidate for the sum problem
def solution_func(input_vector: List[int]) -> int:
    return 0
