from datetime import datetime, timedelta, timezone

from srs.domain.due import due_cards, due_count, is_due
from srs.domain.state import CardScheduleState, new_card_state

NOW = datetime(2026, 3, 14, 9, 30, tzinfo=timezone.utc)


def state(offset_minutes, suspended=False, interval=1):
    return CardScheduleState(
        interval=interval,
        ease_factor=2.5,
        next_review_at=NOW + timedelta(minutes=offset_minutes),
        suspended=suspended,
    )


def test_new_card_is_due_immediately():
    s = new_card_state(NOW)
    assert (s.interval, s.ease_factor, s.repetitions, s.suspended) == (0, 2.5, 0, False)
    assert is_due(s, NOW)


def test_boundary_counts_as_due():
    assert is_due(state(0), NOW)
    assert not is_due(state(1), NOW)


def test_suspended_cards_are_never_due():
    assert not is_due(state(-10_000, suspended=True), NOW)


def test_due_cards_ordered_earliest_first():
    cards = [state(-5), state(30), state(-60), state(-1, suspended=True), state(0)]

    result = due_cards(cards, NOW)

    assert result == [cards[2], cards[0], cards[4]]


def test_ties_keep_input_order():
    a, b, c = state(-5, interval=1), state(-5, interval=2), state(-5, interval=3)

    assert due_cards([b, a, c], NOW) == [b, a, c]
    assert due_cards([b, a, c], NOW) == due_cards([b, a, c], NOW)


def test_predicate_partitions_the_input():
    cards = [state(m, suspended=(m % 3 == 0)) for m in range(-20, 21, 2)]

    result = due_cards(cards, NOW)

    for c in result:
        assert c.next_review_at <= NOW and not c.suspended
    for c in cards:
        if c not in result:
            assert c.next_review_at > NOW or c.suspended


def test_count_matches_filtered_length():
    cards = [state(m, suspended=(m % 4 == 0)) for m in range(-30, 31, 3)]

    for when in (NOW - timedelta(hours=1), NOW, NOW + timedelta(hours=1)):
        assert due_count(cards, when) == len(due_cards(cards, when))


def test_empty_input():
    assert due_cards([], NOW) == []
    assert due_count([], NOW) == 0


def test_evaluation_leaves_input_untouched():
    cards = [state(10), state(-10)]
    before = list(cards)

    due_cards(cards, NOW)
    due_count(cards, NOW)

    assert cards == before
