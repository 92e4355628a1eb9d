from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.utils import timezone
import structlog
from ..data.repos import (
    due_schedules,
    ensure_schedules,
    get_existing_idempotent,
    get_or_create_schedule_for_update,
    get_stats,
    persist_review,
)
from ..domain.enums import Rating, correctness_rating, srs_rating
from ..domain.logic import schedule_next
from ..utils.time import to_local_iso
from .stats import record_study_activity

logger = structlog.get_logger()


@dataclass(frozen=True)
class ReviewOutcome:
    card_id: UUID
    rating: Rating
    interval: int
    ease_factor: float
    next_review_at: datetime
    idempotent: bool
    current_streak: int
    next_card_id: Optional[UUID]
    remaining_count: int


def _up_next(user_id, card_id, now):
    # Next card to show after this one, and how many are still waiting
    qs = due_schedules(user_id, now, exclude_card_id=card_id)
    first = qs.values_list("card_id", flat=True).first()
    return first, qs.count()


def _replay(user_id, card_id, log, now):
    logger.info("idempotent_reuse",
        user_id=str(user_id),
        card_id=str(card_id),
        next_review_utc=log.next_review_at.isoformat(),
        next_review_local=to_local_iso(log.next_review_at),
    )
    stats = get_stats(user_id)
    next_card_id, remaining = _up_next(user_id, card_id, now)
    return ReviewOutcome(
        card_id=card_id,
        rating=Rating(log.rating),
        interval=log.interval,
        ease_factor=log.ease_factor,
        next_review_at=log.next_review_at,
        idempotent=True,
        current_streak=stats.current_streak if stats else 0,
        next_card_id=next_card_id,
        remaining_count=remaining,
    )


def record_review(user_id, card_id, rating, idempotency_key: str, now=None) -> ReviewOutcome:
    rating = srs_rating(rating)
    now = now or timezone.now()
    logger.info("review_received",
        user_id=str(user_id),
        card_id=str(card_id),
        rating=int(rating),
        idempotency_key=idempotency_key,
    )

    with transaction.atomic():
        # Fast path: return previous result if same idempotency_key
        existing = get_existing_idempotent(user_id, card_id, idempotency_key)
        if existing:
            return _replay(user_id, card_id, existing, now)

        # Serialize schedule update per (user, card)
        sched = get_or_create_schedule_for_update(user_id, card_id, now)

        # A duplicate may have committed while we waited for the lock
        existing = get_existing_idempotent(user_id, card_id, idempotency_key)
        if existing:
            return _replay(user_id, card_id, existing, now)

        result = schedule_next(rating, sched.interval, sched.ease_factor, now)

        log, was_idempotent = persist_review(
            user_id, card_id, rating, idempotency_key, result, now
        )
        if was_idempotent:
            return _replay(user_id, card_id, log, now)

        # Update schedule state
        old_interval = sched.interval
        sched.interval = result.interval
        sched.ease_factor = result.ease_factor
        sched.next_review_at = result.next_review_at
        sched.last_answered_at = now
        sched.repetitions += 1
        sched.total_attempts += 1
        if rating >= Rating.GOOD:
            sched.correct_count += 1
        sched.save(update_fields=[
            "interval", "ease_factor", "next_review_at", "last_answered_at",
            "repetitions", "total_attempts", "correct_count",
        ])

        stats = record_study_activity(user_id, now)
        next_card_id, remaining = _up_next(user_id, card_id, now)

    logger.info("review_scheduled",
        user_id=str(user_id),
        card_id=str(card_id),
        rating=int(rating),
        old_interval=old_interval,
        interval=result.interval,
        ease_factor=result.ease_factor,
        next_review_utc=result.next_review_at.isoformat(),
        next_review_local=to_local_iso(result.next_review_at),
        remaining_count=remaining,
    )

    return ReviewOutcome(
        card_id=card_id,
        rating=rating,
        interval=result.interval,
        ease_factor=result.ease_factor,
        next_review_at=result.next_review_at,
        idempotent=False,
        current_streak=stats.current_streak,
        next_card_id=next_card_id,
        remaining_count=remaining,
    )


def record_answer(user_id, card_id, is_correct: bool, idempotency_key: str, now=None) -> ReviewOutcome:
    """MCQ answers only carry right/wrong, mapped onto Good/Again."""
    return record_review(
        user_id, card_id, correctness_rating(is_correct), idempotency_key, now=now
    )


def make_cards_visible(user_id, card_ids, deck_id=None, now=None) -> int:
    now = now or timezone.now()
    created = ensure_schedules(user_id, card_ids, now, deck_id=deck_id)
    logger.info("schedules_created",
        user_id=str(user_id),
        deck_id=str(deck_id) if deck_id else None,
        requested=len(card_ids),
        created=created,
    )
    return created
