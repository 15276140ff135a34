"""
Recovery-aware study recommendations.

Readiness feeds the study-block recommender:
    score = recovery.readiness(signals)
    plan = recovery.recommend(recovery.intensity_proxy(workout), score, 35)
"""

from braingym.recovery.constants import FocusLevel, StudyMode
from braingym.recovery.readiness import RecoverySignals, readiness
from braingym.recovery.study_block import (
    StudyPlan,
    plan_for_today,
    recommend,
    recommend_after,
    rest_day_plan,
)
from braingym.recovery.workout import (
    Exercise,
    Workout,
    WorkoutTemplate,
    intensity_proxy,
    workout_from_template,
)

__all__ = [
    "FocusLevel",
    "StudyMode",
    "RecoverySignals",
    "readiness",
    "StudyPlan",
    "plan_for_today",
    "recommend",
    "recommend_after",
    "rest_day_plan",
    "Exercise",
    "Workout",
    "WorkoutTemplate",
    "intensity_proxy",
    "workout_from_template",
]
