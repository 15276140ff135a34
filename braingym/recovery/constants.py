"""
Readiness and study-block tuning constants.

Product-tuning values; changing them changes recommendations but not the
shape of the algorithms.
"""

from enum import Enum


# ---- Readiness ----

SLEEP_FLOOR_HOURS = 4.0   # Sleep score 0
SLEEP_RANGE_HOURS = 5.0   # Sleep score 1 at floor + range (9h)
SCALE_MIN = 1             # Stress / soreness best value
SCALE_SPAN = 9            # Stress / soreness worst value = min + span

SLEEP_WEIGHT = 0.5
STRESS_WEIGHT = 0.3
SORENESS_WEIGHT = 0.2


# ---- Study Block ----

DEFAULT_MAX_STUDY_MINUTES = 35
MIN_STUDY_MINUTES = 10

RPE_BASELINE = 6.0            # No penalty at or below this RPE
PENALTY_PER_RPE_POINT = 4.0   # Minutes lost per RPE point above baseline
MAX_INTENSITY_PENALTY = 18.0

READINESS_MIDPOINT = 60
BONUS_PER_READINESS_POINT = 0.2
MAX_READINESS_BONUS = 8.0     # Symmetric: [-8, +8]

HARD_WORKOUT_RPE = 8.0        # Switches mode and cooldown
HARD_WORKOUT_COOLDOWN_MINUTES = 45
LIGHT_WORKOUT_COOLDOWN_MINUTES = 25

LIGHT_FOCUS_BELOW = 40
NORMAL_FOCUS_BELOW = 70

REST_DAY_ACTIVE_RECALL_BELOW = 50  # Rest-day plans: readiness threshold for recall mode

DEFAULT_SESSION_RPE = 7  # Used when a workout carries no RPE at all


# ---- Recommendation Values ----

class StudyMode(str, Enum):
    """Recall strategy for a study block."""
    ACTIVE_RECALL = "active recall"
    MIXED = "mixed (flashcards + short case)"


class FocusLevel(str, Enum):
    """Cognitive intensity for a study block."""
    LIGHT = "light"
    NORMAL = "normal"
    INTENSIVE = "intensive"
