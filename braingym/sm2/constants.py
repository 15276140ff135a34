"""
SM-2 Constants and Parameters

All tunable parameters for card scheduling in one place.
"""

from enum import IntEnum


# ---- Recall Grades ----

class RecallGrade(IntEnum):
    """Recall quality reported after looking at a card's back."""
    BLACKOUT = 0   # Nothing recalled
    WRONG = 1      # Wrong, answer familiar once seen
    HARD = 2       # Failed, but close
    MEDIUM = 3     # Recalled with serious effort
    GOOD = 4       # Recalled after some hesitation
    EASY = 5       # Recalled fluently


# ---- Grade Bounds ----

QUALITY_MIN = 0
QUALITY_MAX = 5
PASSING_QUALITY = 3  # Grades below this reset progress


# ---- Ease Factor ----

EASE_DEFAULT = 2.5
EASE_MIN = 1.3
EASE_MAX = 2.8


# ---- Interval Ladder ----
# Fixed intervals for the first successful repetitions; after that the
# previous interval is multiplied by the ease factor.

FIRST_INTERVAL_DAYS = 1
SECOND_INTERVAL_DAYS = 6
FAILED_INTERVAL_DAYS = 1


# ---- Review Sessions ----

SESSION_CARD_LIMIT = 20  # Due cards per session, in deck order
