from dataclasses import dataclass
from datetime import date
from typing import Optional

import structlog

from ..config import DEFAULT_DAILY_GOAL
from ..data.repos import (
    get_or_create_stats_for_update,
    get_stats,
    get_study_log,
    increment_study_log,
)
from ..domain.streak import (
    calculate_streak,
    compute_progress_percent,
    increment_total_reviews,
    update_longest_streak,
)
from ..utils.time import study_date

logger = structlog.get_logger()


@dataclass(frozen=True)
class UserProgress:
    current_streak: int
    longest_streak: int
    total_reviews: int
    last_study_date: Optional[date]
    daily_goal: int
    completed_today: int
    progress_percent: Optional[int]


def record_study_activity(user_id, now):
    """
    Count one review towards the user's streak, totals and today's log.
    Call inside the review transaction.
    """
    today = study_date(now)
    stats = get_or_create_stats_for_update(user_id)

    streak = calculate_streak(stats.last_study_date, stats.current_streak, today)
    stats.current_streak = streak.new_streak
    stats.longest_streak = update_longest_streak(streak.new_streak, stats.longest_streak)
    stats.total_reviews = increment_total_reviews(stats.total_reviews)
    stats.last_study_date = streak.last_study_date
    stats.save(update_fields=[
        "current_streak", "longest_streak", "total_reviews", "last_study_date", "updated_at",
    ])

    increment_study_log(user_id, today)

    logger.info("study_activity_recorded",
        user_id=str(user_id),
        study_date=today.isoformat(),
        current_streak=stats.current_streak,
        longest_streak=stats.longest_streak,
        total_reviews=stats.total_reviews,
        new_day=streak.is_new_day,
    )
    return stats


def get_user_progress(user_id, now) -> UserProgress:
    stats = get_stats(user_id)
    log = get_study_log(user_id, study_date(now))
    completed = log.cards_reviewed if log else 0
    goal = stats.daily_goal if stats else DEFAULT_DAILY_GOAL

    return UserProgress(
        current_streak=stats.current_streak if stats else 0,
        longest_streak=stats.longest_streak if stats else 0,
        total_reviews=stats.total_reviews if stats else 0,
        last_study_date=stats.last_study_date if stats else None,
        daily_goal=goal,
        completed_today=completed,
        progress_percent=compute_progress_percent(completed, goal),
    )
