from datetime import timedelta

from braingym.sm2 import Card, build_session_queue, due_cards, due_count, is_due
from braingym.utils import EPOCH


def _card(card_id, due_at):
    return Card(id=card_id, front=card_id, back=card_id, due_at=due_at)


def test_is_due_boundary(now):
    assert is_due(_card("a", now), now)
    assert is_due(_card("a", now - timedelta(seconds=1)), now)
    assert not is_due(_card("a", now + timedelta(seconds=1)), now)


def test_card_without_due_date_is_due(now):
    assert is_due(_card("a", None), now)


def test_due_cards_keep_deck_order(now):
    cards = [
        _card("late", now - timedelta(days=1)),
        _card("future", now + timedelta(days=3)),
        _card("ancient", EPOCH),
        _card("none", None),
    ]
    assert [c.id for c in due_cards(cards, now)] == ["late", "ancient", "none"]
    assert due_count(cards, now) == 3


def test_session_queue_is_capped_at_twenty(now):
    cards = [_card(f"c{i}", EPOCH) for i in range(30)]
    queue = build_session_queue(cards, now)
    assert len(queue) == 20
    assert [c.id for c in queue] == [f"c{i}" for i in range(20)]


def test_session_queue_custom_limit(now):
    cards = [_card(f"c{i}", EPOCH) for i in range(5)]
    assert len(build_session_queue(cards, now, limit=2)) == 2
    assert build_session_queue(cards, now, limit=0) == ()


def test_session_queue_empty_when_nothing_due(now):
    cards = [_card("a", now + timedelta(days=1))]
    assert build_session_queue(cards, now) == ()


def test_naive_reference_time_is_read_as_utc(now):
    naive = now.replace(tzinfo=None)
    assert is_due(_card("a", now), naive)
    assert not is_due(_card("a", now + timedelta(seconds=1)), naive)
    assert due_count([_card("a", EPOCH), _card("b", None)], naive) == 2
