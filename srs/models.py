from .data.models import CardSchedule, ReviewLog, StudyLog, UserStats  # noqa: F401
