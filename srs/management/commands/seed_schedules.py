import json
import uuid
from django.core.management.base import BaseCommand, CommandError
from srs.services.reviews import make_cards_visible


class Command(BaseCommand):
    help = "Create schedule rows for cards that became visible to a user"

    def add_arguments(self, parser):
        parser.add_argument(
            "--file", required=True, help="JSON file with user_id, deck_id and card_ids"
        )

    def handle(self, *args, **options):
        file_name = options["file"]
        try:
            with open(file_name) as json_file:
                data = json.load(json_file)
            user_id = uuid.UUID(data["user_id"])
            deck_id = uuid.UUID(data["deck_id"]) if data.get("deck_id") else None
            card_ids = [uuid.UUID(c) for c in data["card_ids"]]
        except (OSError, ValueError, KeyError, TypeError) as e:
            raise CommandError(f"Error loading {file_name}: {e}") from e

        created = make_cards_visible(user_id, card_ids, deck_id=deck_id)

        self.stdout.write(
            self.style.SUCCESS(
                f"Created {created} of {len(card_ids)} schedules for user {user_id}"
            )
        )
