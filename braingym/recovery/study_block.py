"""
Study Block - post-workout review recommendation.

Intensity and readiness act as independent, clamped adjustments around the
user's maximum study duration:

    penalty = clamp((mean_rpe - 6) * 4, 0, 18)
    bonus   = clamp((readiness - 60) * 0.2, -8, 8)
    minutes = clamp(round(max - penalty + bonus), 10, max)

Hard workouts (mean RPE >= 8) switch to active recall and push the start
back to give a longer cooldown.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Sequence

from braingym.recovery.constants import (
    BONUS_PER_READINESS_POINT,
    DEFAULT_MAX_STUDY_MINUTES,
    HARD_WORKOUT_COOLDOWN_MINUTES,
    HARD_WORKOUT_RPE,
    LIGHT_FOCUS_BELOW,
    LIGHT_WORKOUT_COOLDOWN_MINUTES,
    MAX_INTENSITY_PENALTY,
    MAX_READINESS_BONUS,
    MIN_STUDY_MINUTES,
    NORMAL_FOCUS_BELOW,
    PENALTY_PER_RPE_POINT,
    READINESS_MIDPOINT,
    REST_DAY_ACTIVE_RECALL_BELOW,
    RPE_BASELINE,
    FocusLevel,
    StudyMode,
)
from braingym.recovery.workout import Workout, intensity_proxy
from braingym.utils import clamp, round_half_up


@dataclass(frozen=True)
class StudyPlan:
    """
    A recommended review block. Computed on demand, never stored.
    """
    minutes: int
    start_in_minutes: int
    mode: StudyMode
    focus: FocusLevel
    mean_rpe: Optional[float]  # None when no workout was involved


def intensity_penalty(mean_rpe: float) -> float:
    return clamp((mean_rpe - RPE_BASELINE) * PENALTY_PER_RPE_POINT, 0.0, MAX_INTENSITY_PENALTY)


def readiness_bonus(readiness: int) -> float:
    return clamp(
        (readiness - READINESS_MIDPOINT) * BONUS_PER_READINESS_POINT,
        -MAX_READINESS_BONUS,
        MAX_READINESS_BONUS,
    )


def focus_for(readiness: int) -> FocusLevel:
    if readiness < LIGHT_FOCUS_BELOW:
        return FocusLevel.LIGHT
    if readiness < NORMAL_FOCUS_BELOW:
        return FocusLevel.NORMAL
    return FocusLevel.INTENSIVE


def _resolve_max(max_minutes: Optional[int]) -> int:
    return DEFAULT_MAX_STUDY_MINUTES if max_minutes is None else max_minutes


def recommend(
    mean_rpe: float,
    readiness: int,
    max_minutes: Optional[int] = DEFAULT_MAX_STUDY_MINUTES
) -> StudyPlan:
    """
    Size and shape a review block after a workout.

    Args:
        mean_rpe: Workout intensity proxy (0-10)
        readiness: Readiness score (0-100)
        max_minutes: User's maximum study duration (None -> 35)

    Returns:
        StudyPlan; minutes never drop below the 10-minute floor
    """
    ceiling = _resolve_max(max_minutes)
    raw = ceiling - intensity_penalty(mean_rpe) + readiness_bonus(readiness)
    minutes = int(clamp(round_half_up(raw), MIN_STUDY_MINUTES, ceiling))

    hard = mean_rpe >= HARD_WORKOUT_RPE
    return StudyPlan(
        minutes=minutes,
        start_in_minutes=HARD_WORKOUT_COOLDOWN_MINUTES if hard else LIGHT_WORKOUT_COOLDOWN_MINUTES,
        mode=StudyMode.ACTIVE_RECALL if hard else StudyMode.MIXED,
        focus=focus_for(readiness),
        mean_rpe=round_half_up(mean_rpe * 10) / 10,
    )


def recommend_after(
    workout: Workout,
    readiness: int,
    max_minutes: Optional[int] = DEFAULT_MAX_STUDY_MINUTES
) -> StudyPlan:
    return recommend(intensity_proxy(workout), readiness, max_minutes)


def rest_day_plan(readiness: int, max_minutes: Optional[int] = DEFAULT_MAX_STUDY_MINUTES) -> StudyPlan:
    """
    Plan for a day without a logged workout: scaled by readiness, start now.
    """
    ceiling = _resolve_max(max_minutes)
    minutes = int(clamp(round_half_up(ceiling * (readiness / 100)), MIN_STUDY_MINUTES, ceiling))
    mode = StudyMode.ACTIVE_RECALL if readiness < REST_DAY_ACTIVE_RECALL_BELOW else StudyMode.MIXED
    return StudyPlan(
        minutes=minutes,
        start_in_minutes=0,
        mode=mode,
        focus=focus_for(readiness),
        mean_rpe=None,
    )


def plan_for_today(
    workouts_today: Sequence[Workout],
    readiness: int,
    max_minutes: Optional[int] = DEFAULT_MAX_STUDY_MINUTES
) -> StudyPlan:
    """
    Recommend after the most recent workout today (first in the log),
    or fall back to a rest-day plan.
    """
    if not workouts_today:
        return rest_day_plan(readiness, max_minutes)
    return recommend_after(workouts_today[0], readiness, max_minutes)
