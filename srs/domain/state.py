from dataclasses import dataclass
from datetime import datetime

from ..config import DEFAULT_EASE_FACTOR


@dataclass(frozen=True)
class CardScheduleState:
    interval: int
    ease_factor: float
    next_review_at: datetime
    repetitions: int = 0
    suspended: bool = False


def new_card_state(now: datetime) -> CardScheduleState:
    """State for a card the user has never seen: due immediately."""
    return CardScheduleState(
        interval=0,
        ease_factor=DEFAULT_EASE_FACTOR,
        next_review_at=now,
        repetitions=0,
        suspended=False,
    )
