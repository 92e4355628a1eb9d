from django.urls import path
from .views import (
    AnswerView,
    DueCardsView,
    DueCountView,
    ReviewView,
    SchedulesView,
    StatsView,
)

urlpatterns = [
    path("reviews", ReviewView.as_view(), name="review"),
    path("answers", AnswerView.as_view(), name="answer"),
    path("users/<uuid:user_id>/due-cards", DueCardsView.as_view(), name="due-cards"),
    path("users/<uuid:user_id>/due-count", DueCountView.as_view(), name="due-count"),
    path("users/<uuid:user_id>/schedules", SchedulesView.as_view(), name="schedules"),
    path("users/<uuid:user_id>/stats", StatsView.as_view(), name="user-stats"),
]
