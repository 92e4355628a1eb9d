from enum import IntEnum

from .errors import ContractViolation


class Rating(IntEnum):
    AGAIN = 1
    HARD = 2
    GOOD = 3
    EASY = 4

RATING_LABELS = {
    Rating.AGAIN: "Again",
    Rating.HARD: "Hard",
    Rating.GOOD: "Good",
    Rating.EASY: "Easy",
}


def srs_rating(value) -> Rating:
    """Full four-point rating given by the learner after flipping a card."""
    if isinstance(value, bool):
        raise ContractViolation(f"rating must be an integer 1-4, got {value!r}")
    try:
        return Rating(value)
    except ValueError:
        raise ContractViolation(f"rating must be an integer 1-4, got {value!r}") from None


def correctness_rating(is_correct: bool) -> Rating:
    """Binary MCQ outcome: a correct answer counts as Good, a wrong one as Again."""
    return Rating.GOOD if is_correct else Rating.AGAIN
