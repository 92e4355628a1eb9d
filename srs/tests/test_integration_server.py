import pytest
import requests
import uuid
import logging
from datetime import datetime, timedelta, timezone

BASE_URL = "http://127.0.0.1:8000"
logger = logging.getLogger(__name__)

def post_review(user_id, card_id, rating, idem):
    """Helper for POST /reviews"""
    payload = {
        "user_id": str(user_id),
        "card_id": str(card_id),
        "rating": rating,
        "idempotency_key": idem,
    }
    r = requests.post(f"{BASE_URL}/reviews", json=payload)
    data = r.json()
    logger.info(
        "POST /reviews rating=%s (%s) → status=%s interval=%s idempotent=%s",
        rating,
        data.get("rating_label"),
        r.status_code,
        data.get("interval"),
        data.get("idempotent"),
    )
    return r


def get_due(user_id, until):
    """Helper for GET /users/{id}/due-cards"""
    r = requests.get(f"{BASE_URL}/users/{user_id}/due-cards", params={"until": until.isoformat()})
    data = r.json()
    logger.info(
        "GET /due-cards until=%s → status=%s card_count=%s",
        until.isoformat(),
        r.status_code,
        len(data["card_ids"]),
    )
    return r


@pytest.mark.integration
def test_again_relearns_next_day_live():
    """rating=1 → back tomorrow"""
    user_id, card_id = uuid.uuid4(), uuid.uuid4()
    r = post_review(user_id, card_id, 1, "idem-live-again")
    d = r.json()
    assert r.status_code == 201
    assert d["interval"] == 1
    assert d["rating_label"] == "Again"
    logger.info("✓ Passed: Again scheduled for the next day")


@pytest.mark.integration
def test_good_sequence_live():
    """Good x3 on a new card → 1, 6, 15 days"""
    user_id, card_id = uuid.uuid4(), uuid.uuid4()
    intervals = [
        post_review(user_id, card_id, 3, f"idem-live-good-{i}").json()["interval"]
        for i in range(3)
    ]
    assert intervals == [1, 6, 15]
    logger.info("✓ Passed: Good sequence %s", intervals)


@pytest.mark.integration
def test_idempotency_live():
    """Identical requests should reuse result with 200 + idempotent=True"""
    user_id, card_id = uuid.uuid4(), uuid.uuid4()

    first = post_review(user_id, card_id, 4, "idem-live-same")
    d1 = first.json()
    assert first.status_code == 201
    assert d1["idempotent"] is False

    second = post_review(user_id, card_id, 4, "idem-live-same")
    d2 = second.json()
    assert second.status_code == 200
    assert d2["idempotent"] is True
    assert d1["next_review_utc"] == d2["next_review_utc"]

    logger.info("✓ Passed: idempotency verified (201 then 200)")


@pytest.mark.integration
def test_due_cards_includes_and_excludes_live():
    """Due-cards should include due items and exclude future ones"""
    user_id, card_due, card_future = uuid.uuid4(), uuid.uuid4(), uuid.uuid4()

    # Again → due tomorrow
    post_review(user_id, card_due, 1, "idem-live-due")
    # Easy → due in four days
    post_review(user_id, card_future, 4, "idem-live-future")

    until_due = datetime.now(timezone.utc) + timedelta(days=2)
    until_past = datetime.now(timezone.utc) - timedelta(days=1)

    r1 = get_due(user_id, until_due)
    assert r1.json()["card_ids"] == [str(card_due)]

    r2 = get_due(user_id, until_past)
    assert r2.json()["card_ids"] == []

    logger.info("✓ Passed: due-cards includes/excludes correctly")
