import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="CardSchedule",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("user_id", models.UUIDField()),
                ("card_id", models.UUIDField()),
                ("deck_id", models.UUIDField(blank=True, null=True)),
                ("interval", models.PositiveIntegerField(default=0)),
                ("ease_factor", models.FloatField(default=2.5)),
                ("repetitions", models.PositiveIntegerField(default=0)),
                ("next_review_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("last_answered_at", models.DateTimeField(blank=True, null=True)),
                ("suspended", models.BooleanField(default=False)),
                ("correct_count", models.PositiveIntegerField(default=0)),
                ("total_attempts", models.PositiveIntegerField(default=0)),
            ],
            options={
                "indexes": [models.Index(fields=["user_id", "next_review_at"], name="srs_sched_user_due_idx")],
                "unique_together": {("user_id", "card_id")},
            },
        ),
        migrations.CreateModel(
            name="ReviewLog",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("user_id", models.UUIDField()),
                ("card_id", models.UUIDField()),
                ("rating", models.SmallIntegerField()),
                ("idempotency_key", models.CharField(max_length=64)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("interval", models.PositiveIntegerField()),
                ("ease_factor", models.FloatField()),
                ("next_review_at", models.DateTimeField()),
            ],
            options={
                "indexes": [models.Index(fields=["user_id", "card_id", "created_at"], name="srs_review_user_card_idx")],
                "unique_together": {("user_id", "card_id", "idempotency_key")},
            },
        ),
        migrations.CreateModel(
            name="UserStats",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("user_id", models.UUIDField(unique=True)),
                ("last_study_date", models.DateField(blank=True, null=True)),
                ("current_streak", models.PositiveIntegerField(default=0)),
                ("longest_streak", models.PositiveIntegerField(default=0)),
                ("total_reviews", models.PositiveIntegerField(default=0)),
                ("daily_goal", models.PositiveIntegerField(default=20)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
        ),
        migrations.CreateModel(
            name="StudyLog",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("user_id", models.UUIDField()),
                ("study_date", models.DateField()),
                ("cards_reviewed", models.PositiveIntegerField(default=0)),
            ],
            options={
                "unique_together": {("user_id", "study_date")},
            },
        ),
    ]
