from django.db import models
from django.utils import timezone

from ..config import DEFAULT_DAILY_GOAL, DEFAULT_EASE_FACTOR


class CardSchedule(models.Model):
    user_id = models.UUIDField()
    card_id = models.UUIDField()
    deck_id = models.UUIDField(null=True, blank=True)
    interval = models.PositiveIntegerField(default=0)  # days, 0 = new card
    ease_factor = models.FloatField(default=DEFAULT_EASE_FACTOR)
    repetitions = models.PositiveIntegerField(default=0)
    next_review_at = models.DateTimeField(default=timezone.now)  # UTC
    last_answered_at = models.DateTimeField(null=True, blank=True)
    suspended = models.BooleanField(default=False)
    correct_count = models.PositiveIntegerField(default=0)
    total_attempts = models.PositiveIntegerField(default=0)

    class Meta:
        app_label = "srs"
        unique_together = (("user_id", "card_id"),)
        indexes = [
            models.Index(fields=["user_id", "next_review_at"], name="srs_sched_user_due_idx"),
        ]

class ReviewLog(models.Model):
    user_id = models.UUIDField()
    card_id = models.UUIDField()
    rating = models.SmallIntegerField()
    idempotency_key = models.CharField(max_length=64)
    created_at = models.DateTimeField(default=timezone.now)
    interval = models.PositiveIntegerField()
    ease_factor = models.FloatField()
    next_review_at = models.DateTimeField()

    class Meta:
        app_label = "srs"
        unique_together = (("user_id", "card_id", "idempotency_key"),)
        indexes = [
            models.Index(fields=["user_id", "card_id", "created_at"], name="srs_review_user_card_idx"),
        ]

class UserStats(models.Model):
    user_id = models.UUIDField(unique=True)
    last_study_date = models.DateField(null=True, blank=True)
    current_streak = models.PositiveIntegerField(default=0)
    longest_streak = models.PositiveIntegerField(default=0)
    total_reviews = models.PositiveIntegerField(default=0)
    daily_goal = models.PositiveIntegerField(default=DEFAULT_DAILY_GOAL)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "srs"

class StudyLog(models.Model):
    user_id = models.UUIDField()
    study_date = models.DateField()
    cards_reviewed = models.PositiveIntegerField(default=0)

    class Meta:
        app_label = "srs"
        unique_together = (("user_id", "study_date"),)
