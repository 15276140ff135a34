"""
Workout log entries and the intensity proxy derived from them.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from braingym.recovery.constants import DEFAULT_SESSION_RPE
from braingym.utils import format_date, make_id, round_half_up


@dataclass(frozen=True)
class Exercise:
    name: str
    sets: int = 1
    reps: str = ""
    rpe: Optional[float] = None  # 0-10


@dataclass(frozen=True)
class WorkoutTemplate:
    """
    A reusable workout plan the user logs with one action.
    """
    id: str
    name: str
    est_minutes: int
    target: str
    exercises: tuple[Exercise, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Workout:
    """
    A logged workout. `date` is the calendar day (YYYY-MM-DD) of the logging
    timestamp in that timestamp's own zone; the default controller clock is UTC.
    """
    id: str
    date: str
    name: str
    started_at: Optional[datetime] = None
    target: str = ""
    est_minutes: int = 0
    session_rpe: Optional[float] = None
    exercises: tuple[Exercise, ...] = field(default_factory=tuple)
    notes: str = ""


def _exercise_rpes(exercises) -> list[float]:
    return [
        e.rpe for e in exercises
        if isinstance(e.rpe, (int, float)) and not isinstance(e.rpe, bool)
    ]


def intensity_proxy(workout: Workout) -> float:
    """
    Mean exercise RPE, falling back to the session RPE, then to 7.
    """
    rpes = _exercise_rpes(workout.exercises)
    if rpes:
        return sum(rpes) / len(rpes)
    if workout.session_rpe is not None:
        return workout.session_rpe
    return DEFAULT_SESSION_RPE


def workout_from_template(
    template: WorkoutTemplate,
    now: datetime,
    workout_id: Optional[str] = None
) -> Workout:
    """
    Log a workout from a template, dated on now's calendar day.

    Session RPE is the rounded mean of exercise RPEs (missing RPE counts as 7).
    """
    exercises = tuple(template.exercises)
    if exercises:
        total = sum(e.rpe if e.rpe is not None else DEFAULT_SESSION_RPE for e in exercises)
        session_rpe = round_half_up(total / len(exercises))
    else:
        session_rpe = DEFAULT_SESSION_RPE

    return Workout(
        id=workout_id or make_id("log"),
        date=format_date(now),
        started_at=now,
        name=template.name,
        target=template.target,
        est_minutes=template.est_minutes,
        session_rpe=session_rpe,
        exercises=exercises,
        notes="",
    )
