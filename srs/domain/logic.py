import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal, ROUND_HALF_UP

from .enums import Rating, srs_rating
from .errors import ContractViolation
from ..config import (
    EASE_DELTA,
    EASY_BONUS,
    FIRST_INTERVAL,
    HARD_GROWTH,
    MIN_EASE_FACTOR,
    RELEARN_INTERVAL_DAYS,
    SECOND_INTERVAL_DAYS,
)


@dataclass(frozen=True)
class ScheduleResult:
    interval: int
    ease_factor: float
    next_review_at: datetime


def _dec(value) -> Decimal:
    # str() keeps 2.35 as 2.35 instead of its binary expansion
    return Decimal(str(value))


def round_half_up(value) -> int:
    """Round to the nearest whole number, halves going up (7.5 -> 8)."""
    return int(_dec(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def _check_inputs(rating, interval, ease_factor, now) -> Rating:
    rating = srs_rating(rating)
    if isinstance(interval, bool) or not isinstance(interval, int) or interval < 0:
        raise ContractViolation(f"interval must be a non-negative integer, got {interval!r}")
    if isinstance(ease_factor, bool) or not isinstance(ease_factor, (int, float)):
        raise ContractViolation(f"ease_factor must be a number, got {ease_factor!r}")
    if not math.isfinite(ease_factor) or ease_factor < MIN_EASE_FACTOR:
        raise ContractViolation(
            f"ease_factor must be finite and >= {MIN_EASE_FACTOR}, got {ease_factor!r}"
        )
    if not isinstance(now, datetime) or now.tzinfo is None:
        raise ContractViolation("now must be a timezone-aware datetime")
    return rating


def next_interval(rating: Rating, interval: int, ease_factor: float) -> int:
    if rating == Rating.AGAIN:
        return RELEARN_INTERVAL_DAYS

    if interval == 0:
        return FIRST_INTERVAL[int(rating)]

    if rating == Rating.HARD:
        proposed = max(1, round_half_up(_dec(interval) * _dec(HARD_GROWTH)))
    else:
        if interval == 1:
            base = Decimal(SECOND_INTERVAL_DAYS)
        else:
            base = _dec(interval) * _dec(ease_factor)
        if rating == Rating.EASY:
            base *= _dec(EASY_BONUS)
        # One rounding over the whole product
        proposed = round_half_up(base)

    return proposed


def next_ease_factor(rating: Rating, ease_factor: float) -> float:
    delta = EASE_DELTA[int(rating)]
    if not delta:
        return float(ease_factor)
    adjusted = float(_dec(ease_factor) + _dec(delta))
    return max(MIN_EASE_FACTOR, adjusted)


def schedule_next(rating, interval: int, ease_factor: float, now: datetime) -> ScheduleResult:
    """
    SM-2 style transition for one (user, card) pair.

    Growth is always computed from the stored interval and ease factor,
    never from an intermediate value. The due date is ``now`` plus the new
    interval in whole days.
    """
    rating = _check_inputs(rating, interval, ease_factor, now)

    new_interval = next_interval(rating, interval, ease_factor)
    try:
        next_review_at = now + timedelta(days=new_interval)
    except OverflowError as e:
        raise ContractViolation(
            f"interval of {new_interval} days from {now.isoformat()} is past the last representable date"
        ) from e

    return ScheduleResult(
        interval=new_interval,
        ease_factor=next_ease_factor(rating, ease_factor),
        next_review_at=next_review_at,
    )
