"""
SM-2 - spaced repetition scheduling for flashcard decks.

Quick start:
    from braingym import sm2

    card = sm2.new_card("Question?", "Answer.", now)
    card = sm2.schedule(card, sm2.RecallGrade.GOOD, now)

    queue = sm2.build_session_queue(deck.cards, now)
"""

# Core scheduler API (algorithm logic)
from braingym.sm2.scheduler import (
    schedule,
    clamp_quality,
    next_interval,
    update_ease,
)

# Due-set selection
from braingym.sm2.due import (
    is_due,
    due_cards,
    due_count,
    build_session_queue,
)

# Card state
from braingym.sm2.card_state import (
    Card,
    Deck,
    new_card,
)

# Constants and parameters
from braingym.sm2.constants import (
    RecallGrade,
    EASE_DEFAULT,
    EASE_MIN,
    EASE_MAX,
    PASSING_QUALITY,
    SESSION_CARD_LIMIT,
)


__all__ = [
    # Core algorithm
    "schedule",
    "clamp_quality",
    "next_interval",
    "update_ease",

    # Due-set selection
    "is_due",
    "due_cards",
    "due_count",
    "build_session_queue",

    # Card state
    "Card",
    "Deck",
    "new_card",

    # Enums
    "RecallGrade",

    # Parameters
    "EASE_DEFAULT",
    "EASE_MIN",
    "EASE_MAX",
    "PASSING_QUALITY",
    "SESSION_CARD_LIMIT",
]
