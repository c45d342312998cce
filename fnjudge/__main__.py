import logging

import fnjudge.constants as constants

from .evaluation import evaluate
from .submission import solution_func


def main():
    logging.basicConfig(
        level=logging.DEBUG if constants.DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True
    )

    print("Evaluating candidate's solution function...")
    score = evaluate(solution_func)
    print(f"Candidate's score: {score.achieved}/{score.maximum}")


if __name__ == '__main__':
    main()
