from zoneinfo import ZoneInfo

from django.conf import settings
from django.utils import timezone


def display_tz():
    return ZoneInfo(settings.SRS_DISPLAY_TIMEZONE)


def study_tz():
    return ZoneInfo(settings.SRS_STUDY_TIMEZONE)


def to_local_iso(dt_utc):
    return dt_utc.astimezone(display_tz()).isoformat()


def study_date(dt):
    """Calendar day a review at ``dt`` counts towards for streaks and logs."""
    return timezone.localdate(dt, study_tz())
