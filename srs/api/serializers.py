from rest_framework import serializers

from ..data.models import CardSchedule

class ReviewInSerializer(serializers.Serializer):
    user_id = serializers.UUIDField()
    card_id = serializers.UUIDField()
    rating = serializers.IntegerField(min_value=1, max_value=4)
    idempotency_key = serializers.CharField(max_length=64)

class AnswerInSerializer(serializers.Serializer):
    user_id = serializers.UUIDField()
    card_id = serializers.UUIDField()
    is_correct = serializers.BooleanField()
    idempotency_key = serializers.CharField(max_length=64)

class DueQuerySerializer(serializers.Serializer):
    until = serializers.DateTimeField(required=False)  # ISO-8601, defaults to now
    deck_id = serializers.UUIDField(required=False)
    limit = serializers.IntegerField(required=False, min_value=1, max_value=1000)

class ScheduleInSerializer(serializers.Serializer):
    card_ids = serializers.ListField(child=serializers.UUIDField(), allow_empty=False, max_length=1000)
    deck_id = serializers.UUIDField(required=False, allow_null=True)

class CardScheduleSerializer(serializers.ModelSerializer):
    class Meta:
        model = CardSchedule
        fields = [
            "card_id", "deck_id", "interval", "ease_factor", "repetitions",
            "next_review_at", "last_answered_at", "suspended",
        ]
