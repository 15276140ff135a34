"""
Readiness - composite recovery score from the daily check-in.

Formula:
    readiness = round(100 * (0.5 * sleep + 0.3 * stress + 0.2 * soreness))

Where each sub-score is normalized to [0, 1]:
- sleep:    4h -> 0, 9h -> 1 (linear)
- stress:   1 -> 1, 10 -> 0 (inverted)
- soreness: 1 -> 1, 10 -> 0 (inverted)
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from braingym.recovery.constants import (
    SCALE_MIN,
    SCALE_SPAN,
    SLEEP_FLOOR_HOURS,
    SLEEP_RANGE_HOURS,
    SLEEP_WEIGHT,
    SORENESS_WEIGHT,
    STRESS_WEIGHT,
)
from braingym.utils import clamp, round_half_up


@dataclass(frozen=True)
class RecoverySignals:
    """
    Current recovery check-in. Only the latest snapshot is kept.
    """
    sleep_hours: float = 7.5
    stress: int = 5      # 1..10
    soreness: int = 4    # 1..10
    updated_at: Optional[datetime] = None


def sleep_score(sleep_hours: float) -> float:
    return clamp((sleep_hours - SLEEP_FLOOR_HOURS) / SLEEP_RANGE_HOURS, 0.0, 1.0)


def inverted_scale_score(value: float) -> float:
    """1 for the best value on a 1-10 scale, 0 for the worst."""
    return 1.0 - clamp((value - SCALE_MIN) / SCALE_SPAN, 0.0, 1.0)


def readiness(recovery: RecoverySignals) -> int:
    """
    Readiness score in [0, 100].

    Inputs outside their expected range are clamped, never rejected.
    """
    weighted = (
        sleep_score(recovery.sleep_hours) * SLEEP_WEIGHT
        + inverted_scale_score(recovery.stress) * STRESS_WEIGHT
        + inverted_scale_score(recovery.soreness) * SORENESS_WEIGHT
    )
    return round_half_up(weighted * 100)
