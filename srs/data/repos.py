from django.db import transaction, IntegrityError
from django.db.models import F
from ..domain.state import new_card_state
from .models import CardSchedule, ReviewLog, StudyLog, UserStats

def _schedule_defaults(now):
    state = new_card_state(now)
    return dict(
        interval=state.interval,
        ease_factor=state.ease_factor,
        repetitions=state.repetitions,
        next_review_at=state.next_review_at,
        suspended=state.suspended,
    )

def get_or_create_schedule_for_update(user_id, card_id, now):
    """
    Fetch schedule row and lock it for update to avoid races.
    Create it with new-card defaults if missing.
    Must run inside the caller's transaction so the lock is held until commit.
    """
    try:
        return (CardSchedule.objects
                .select_for_update()
                .get(user_id=user_id, card_id=card_id))
    except CardSchedule.DoesNotExist:
        pass

    try:
        with transaction.atomic():
            CardSchedule.objects.create(
                user_id=user_id, card_id=card_id, **_schedule_defaults(now)
            )
    except IntegrityError:
        # Another request created the row first; lock theirs below
        pass
    return (CardSchedule.objects
            .select_for_update()
            .get(user_id=user_id, card_id=card_id))

def ensure_schedules(user_id, card_ids, now, deck_id=None):
    """
    Create default rows for cards that just became visible to the user.
    Existing rows are left alone. Returns how many rows were created.
    """
    card_ids = list(dict.fromkeys(card_ids))
    existing = set(
        CardSchedule.objects
        .filter(user_id=user_id, card_id__in=card_ids)
        .values_list("card_id", flat=True)
    )
    created = 0
    for card_id in card_ids:
        if card_id in existing:
            continue
        # get_or_create reports created=False if a concurrent request won the insert
        _, was_created = CardSchedule.objects.get_or_create(
            user_id=user_id, card_id=card_id,
            defaults=dict(deck_id=deck_id, **_schedule_defaults(now)),
        )
        created += was_created
    return created

def due_schedules(user_id, until, deck_id=None, exclude_card_id=None):
    """
    Unsuspended schedules with next_review_at <= until, earliest first.
    card_id breaks ties so repeated queries return the same order.
    """
    qs = CardSchedule.objects.filter(
        user_id=user_id, suspended=False, next_review_at__lte=until
    )
    if deck_id is not None:
        qs = qs.filter(deck_id=deck_id)
    if exclude_card_id is not None:
        qs = qs.exclude(card_id=exclude_card_id)
    return qs.order_by("next_review_at", "card_id")

def get_existing_idempotent(user_id, card_id, idem_key):
    return ReviewLog.objects.filter(
        user_id=user_id, card_id=card_id, idempotency_key=idem_key
    ).first()

def persist_review(user_id, card_id, rating, idem_key, result, created_at):
    """
    Insert ReviewLog; if a concurrent duplicate slips in, return the existing one.
    """
    try:
        with transaction.atomic():
            return ReviewLog.objects.create(
                user_id=user_id, card_id=card_id, rating=int(rating),
                idempotency_key=idem_key, created_at=created_at,
                interval=result.interval, ease_factor=result.ease_factor,
                next_review_at=result.next_review_at,
            ), False
    except IntegrityError:
        # Duplicate idempotency key safeguard
        existing = get_existing_idempotent(user_id, card_id, idem_key)
        return existing, True

def get_or_create_stats_for_update(user_id):
    try:
        return UserStats.objects.select_for_update().get(user_id=user_id)
    except UserStats.DoesNotExist:
        pass

    try:
        with transaction.atomic():
            UserStats.objects.create(user_id=user_id)
    except IntegrityError:
        # created concurrently
        pass
    return UserStats.objects.select_for_update().get(user_id=user_id)

def get_stats(user_id):
    return UserStats.objects.filter(user_id=user_id).first()

def increment_study_log(user_id, day):
    """Add one review to the user's log for ``day``, creating the row on first use."""
    bump = dict(cards_reviewed=F("cards_reviewed") + 1)
    if StudyLog.objects.filter(user_id=user_id, study_date=day).update(**bump):
        return
    try:
        with transaction.atomic():
            StudyLog.objects.create(user_id=user_id, study_date=day, cards_reviewed=1)
    except IntegrityError:
        StudyLog.objects.filter(user_id=user_id, study_date=day).update(**bump)

def get_study_log(user_id, day):
    return StudyLog.objects.filter(user_id=user_id, study_date=day).first()
