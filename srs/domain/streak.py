from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from .logic import round_half_up


@dataclass(frozen=True)
class StreakResult:
    new_streak: int
    last_study_date: date
    is_new_day: bool


def calculate_streak(last_study_date: Optional[date], current_streak: int, today: date) -> StreakResult:
    """
    Consecutive study days after a review made on ``today``.

    - first review ever: 1
    - same calendar day: unchanged
    - the day after: +1
    - anything else (a gap, or a date before the last one): back to 1
    """
    if last_study_date is None:
        return StreakResult(new_streak=1, last_study_date=today, is_new_day=True)

    gap = (today - last_study_date).days
    if gap == 0:
        return StreakResult(new_streak=current_streak, last_study_date=last_study_date, is_new_day=False)
    if gap == 1:
        return StreakResult(new_streak=current_streak + 1, last_study_date=today, is_new_day=True)
    return StreakResult(new_streak=1, last_study_date=today, is_new_day=True)


def update_longest_streak(current_streak: int, longest_streak: int) -> int:
    return max(current_streak, longest_streak)


def increment_total_reviews(total_reviews: int) -> int:
    return total_reviews + 1


def compute_progress_percent(completed_today: int, daily_goal: Optional[int]) -> Optional[int]:
    """Share of the daily goal reached, capped at 100. None when no goal is set."""
    if daily_goal is None or daily_goal <= 0:
        return None
    return min(100, round_half_up(Decimal(completed_today * 100) / Decimal(daily_goal)))
