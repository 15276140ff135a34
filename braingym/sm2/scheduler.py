"""
Scheduler - SM-2 Algorithm Logic

Pure card scheduling (no storage calls, no clock reads).

Main workflow:
1. Clamp the recall grade into [0, 5]
2. Advance or reset the repetition ladder
3. Update the ease factor
4. Return a new card with its next due date

Persisting the returned card is the caller's responsibility.
"""

from __future__ import annotations
from dataclasses import replace
from datetime import datetime

from braingym.sm2.card_state import Card
from braingym.sm2.constants import (
    EASE_DEFAULT,
    EASE_MAX,
    EASE_MIN,
    FAILED_INTERVAL_DAYS,
    FIRST_INTERVAL_DAYS,
    PASSING_QUALITY,
    QUALITY_MAX,
    QUALITY_MIN,
    SECOND_INTERVAL_DAYS,
)
from braingym.utils import add_days, clamp, ensure_aware, round_half_up


def clamp_quality(quality: int) -> int:
    """Clamp any grade into the valid [0, 5] range."""
    return int(clamp(quality, QUALITY_MIN, QUALITY_MAX))


def next_interval(repetitions: int, previous_interval: int, ease: float) -> int:
    """
    Interval in days after a successful recall.

    Args:
        repetitions: Repetition count after this recall (1-based)
        previous_interval: Interval before this recall
        ease: Ease factor before this recall

    Returns:
        Interval in days
    """
    if repetitions == 1:
        return FIRST_INTERVAL_DAYS
    if repetitions == 2:
        return SECOND_INTERVAL_DAYS
    return round_half_up(previous_interval * ease)


def update_ease(ease: float, quality: int) -> float:
    """
    Update the ease factor.

    Formula:
        E' = E + (0.1 - (5 - q) * (0.08 + (5 - q) * 0.02))

    Applied for every grade, passing or not. q=4 leaves ease unchanged,
    q=5 raises it by 0.1, q=0 lowers it by 0.8 (before clamping).

    Returns:
        New ease clamped to [1.3, 2.8]
    """
    miss = QUALITY_MAX - quality
    return clamp(ease + (0.1 - miss * (0.08 + miss * 0.02)), EASE_MIN, EASE_MAX)


def schedule(card: Card, quality: int, now: datetime) -> Card:
    """
    Apply a recall grade to a card and return its next scheduling state.

    Out-of-range grades are clamped, never rejected. Missing scheduling
    fields default to a fresh card (ease 2.5, no repetitions, no interval).
    A stored ease outside [1.3, 2.8] is clamped before use, and a passing
    grade never schedules less than one day ahead.

    Args:
        card: Card to grade (not modified)
        quality: Recall grade, nominally 0-5
        now: Grading timestamp

    Returns:
        New Card with updated ease, repetitions, interval and due date
    """
    q = clamp_quality(quality)
    now = ensure_aware(now)

    ease = card.ease if card.ease is not None else EASE_DEFAULT
    ease = clamp(ease, EASE_MIN, EASE_MAX)
    repetitions = max(0, card.repetitions or 0)
    interval_days = max(0, card.interval_days or 0)

    if q < PASSING_QUALITY:
        repetitions = 0
        interval_days = FAILED_INTERVAL_DAYS
    else:
        repetitions += 1
        interval_days = max(FIRST_INTERVAL_DAYS, next_interval(repetitions, interval_days, ease))

    return replace(
        card,
        ease=update_ease(ease, q),
        repetitions=repetitions,
        interval_days=interval_days,
        due_at=add_days(now, interval_days),
        updated_at=now,
        last_quality=q,
    )
