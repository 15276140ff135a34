"""
Due-set selection for review sessions.
"""

from __future__ import annotations
from datetime import datetime
from typing import Iterable

from braingym.sm2.card_state import Card
from braingym.sm2.constants import SESSION_CARD_LIMIT
from braingym.utils import ensure_aware


def is_due(card: Card, ref: datetime) -> bool:
    """
    True when the card's due date is at or before ref.

    Cards without a due date are treated as due since the epoch. Naive
    datetimes are read as UTC.
    """
    if card.due_at is None:
        return True
    return ensure_aware(card.due_at) <= ensure_aware(ref)


def due_cards(cards: Iterable[Card], ref: datetime) -> list[Card]:
    """
    Due cards in deck order (no reordering by urgency).
    """
    return [c for c in cards if is_due(c, ref)]


def due_count(cards: Iterable[Card], ref: datetime) -> int:
    return sum(1 for c in cards if is_due(c, ref))


def build_session_queue(
    cards: Iterable[Card],
    ref: datetime,
    limit: int = SESSION_CARD_LIMIT
) -> tuple[Card, ...]:
    """
    First `limit` due cards in deck order, computed once at session start.
    """
    return tuple(due_cards(cards, ref)[:max(0, limit)])
