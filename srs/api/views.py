from django.utils import timezone
from rest_framework import views, status
from rest_framework.response import Response
import structlog
import uuid
from ..data.repos import due_schedules
from ..domain.enums import RATING_LABELS
from ..services.reviews import make_cards_visible, record_answer, record_review
from ..services.stats import get_user_progress
from ..utils.time import to_local_iso
from .serializers import (
    AnswerInSerializer,
    CardScheduleSerializer,
    DueQuerySerializer,
    ReviewInSerializer,
    ScheduleInSerializer,
)

base_logger = structlog.get_logger()


def _request_logger():
    # Create a unique request_id
    return base_logger.bind(request_id=str(uuid.uuid4()))


def _review_response(logger, event, outcome):
    status_code = status.HTTP_200_OK if outcome.idempotent else status.HTTP_201_CREATED

    logger.info(
        event,
        card_id=str(outcome.card_id),
        rating=int(outcome.rating),
        idempotent=outcome.idempotent,
        interval=outcome.interval,
        next_review_utc=outcome.next_review_at.isoformat(),
        next_review_local=to_local_iso(outcome.next_review_at),
        status=status_code,
    )

    return Response(
        {
            "interval": outcome.interval,
            "ease_factor": outcome.ease_factor,
            "next_review_utc": outcome.next_review_at.isoformat(),
            "next_review_local": to_local_iso(outcome.next_review_at),
            "rating": int(outcome.rating),
            "rating_label": RATING_LABELS[outcome.rating],
            "idempotent": outcome.idempotent,
            "current_streak": outcome.current_streak,
            "next_card_id": outcome.next_card_id,
            "remaining_count": outcome.remaining_count,
        },
        status=status_code,
    )


class ReviewView(views.APIView):
    def post(self, request):
        logger = _request_logger()

        s = ReviewInSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        outcome = record_review(
            s.validated_data["user_id"],
            s.validated_data["card_id"],
            s.validated_data["rating"],
            s.validated_data["idempotency_key"],
        )
        return _review_response(
            logger.bind(user_id=str(s.validated_data["user_id"])),
            "review_api_response",
            outcome,
        )


class AnswerView(views.APIView):
    def post(self, request):
        logger = _request_logger()

        s = AnswerInSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        outcome = record_answer(
            s.validated_data["user_id"],
            s.validated_data["card_id"],
            s.validated_data["is_correct"],
            s.validated_data["idempotency_key"],
        )
        return _review_response(
            logger.bind(user_id=str(s.validated_data["user_id"])),
            "answer_api_response",
            outcome,
        )


class DueCardsView(views.APIView):
    def get(self, request, user_id):
        logger = _request_logger()

        qs = DueQuerySerializer(data=request.query_params)
        qs.is_valid(raise_exception=True)
        until = qs.validated_data.get("until") or timezone.now()
        limit = qs.validated_data.get("limit")

        due = due_schedules(user_id, until, deck_id=qs.validated_data.get("deck_id"))
        due_count = due.count()
        schedules = list(due[:limit] if limit else due)

        logger.info(
            "due_cards_api_response",
            user_id=str(user_id),
            until_utc=until.isoformat(),
            until_local=to_local_iso(until),
            due_count=due_count,
            card_count=len(schedules),
        )

        return Response(
            {
                "user_id": str(user_id),
                "until_utc": until.isoformat(),
                "until_local": to_local_iso(until),
                "due_count": due_count,
                "card_ids": [s.card_id for s in schedules],
                "cards": CardScheduleSerializer(schedules, many=True).data,
            }
        )


class DueCountView(views.APIView):
    def get(self, request, user_id):
        logger = _request_logger()

        qs = DueQuerySerializer(data=request.query_params)
        qs.is_valid(raise_exception=True)
        until = qs.validated_data.get("until") or timezone.now()

        due_count = due_schedules(user_id, until, deck_id=qs.validated_data.get("deck_id")).count()

        logger.info(
            "due_count_api_response",
            user_id=str(user_id),
            until_utc=until.isoformat(),
            due_count=due_count,
        )

        return Response(
            {
                "user_id": str(user_id),
                "until_utc": until.isoformat(),
                "due_count": due_count,
            }
        )


class SchedulesView(views.APIView):
    def post(self, request, user_id):
        logger = _request_logger()

        s = ScheduleInSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        created = make_cards_visible(
            user_id, s.validated_data["card_ids"], deck_id=s.validated_data.get("deck_id")
        )

        logger.info("schedules_api_response", user_id=str(user_id), created=created)

        return Response(
            {"user_id": str(user_id), "created": created},
            status=status.HTTP_201_CREATED,
        )


class StatsView(views.APIView):
    def get(self, request, user_id):
        logger = _request_logger()

        progress = get_user_progress(user_id, timezone.now())

        logger.info(
            "stats_api_response",
            user_id=str(user_id),
            current_streak=progress.current_streak,
            total_reviews=progress.total_reviews,
            completed_today=progress.completed_today,
        )

        return Response(
            {
                "user_id": str(user_id),
                "current_streak": progress.current_streak,
                "longest_streak": progress.longest_streak,
                "total_reviews": progress.total_reviews,
                "last_study_date": progress.last_study_date,
                "daily_goal": progress.daily_goal,
                "completed_today": progress.completed_today,
                "progress_percent": progress.progress_percent,
            }
        )
