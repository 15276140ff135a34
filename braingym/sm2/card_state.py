"""
Card State - SM-2 scheduling state for flashcards.

Key concepts:
- Ease (E): multiplier controlling interval growth, kept in [1.3, 2.8]
- Repetitions (n): consecutive successful recalls, reset on failure
- Interval (I): days between the last grade and the next due date
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from braingym.sm2.constants import EASE_DEFAULT
from braingym.utils import EPOCH, make_id


@dataclass(frozen=True)
class Card:
    """
    A flashcard and its scheduling state.

    A card with due_at=None is treated as due since the epoch.
    """
    id: str
    front: str
    back: str

    ease: Optional[float] = EASE_DEFAULT
    repetitions: Optional[int] = 0
    interval_days: Optional[int] = 0

    due_at: Optional[datetime] = EPOCH
    last_quality: Optional[int] = None

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class Deck:
    """
    A named, ordered collection of cards. Order is review order.
    """
    id: str
    name: str
    cards: tuple[Card, ...] = field(default_factory=tuple)
    color: str = "bg-muted"

    def find_card(self, card_id: str) -> Optional[Card]:
        return next((c for c in self.cards if c.id == card_id), None)


def new_card(
    front: str,
    back: str,
    now: datetime,
    card_id: Optional[str] = None
) -> Card:
    """
    Initialize a card that has never been reviewed.

    New cards are immediately due (due_at = epoch).

    Args:
        front: Prompt text
        back: Answer text
        now: Creation timestamp
        card_id: Identifier to use (generated when omitted)

    Returns:
        New Card with default scheduling state
    """
    return Card(
        id=card_id or make_id("card"),
        front=front.strip(),
        back=back.strip(),
        ease=EASE_DEFAULT,
        repetitions=0,
        interval_days=0,
        due_at=EPOCH,
        last_quality=None,
        created_at=now,
        updated_at=now,
    )
