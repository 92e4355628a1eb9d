def is_due(state, now) -> bool:
    return not state.suspended and state.next_review_at <= now


def due_cards(states, now) -> list:
    """
    Due subset of ``states`` ordered earliest-due first.

    ``sorted`` is stable, so ties keep the order they were given in.
    """
    return sorted(
        (s for s in states if is_due(s, now)),
        key=lambda s: s.next_review_at,
    )


def due_count(states, now) -> int:
    return sum(1 for s in states if is_due(s, now))
