"""
Service layer to assemble the overview dashboard.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

from braingym.analytics.frames import deck_summary_df, workout_log_df
from braingym.analytics.metrics import (
    build_day_index,
    compute_mean_rpe_daily,
    compute_training_minutes_daily,
)
from braingym.analytics.types import DashboardData
from braingym.recovery.workout import Workout
from braingym.sm2.card_state import Deck


def build_dashboard(
    decks: Iterable[Deck],
    workouts: Iterable[Workout],
    now: datetime
) -> DashboardData:
    """
    Build all KPI values and series for the overview page.
    """
    decks_df = deck_summary_df(decks, now)
    workouts_df = workout_log_df(workouts)
    day_index = build_day_index(workouts_df)

    return DashboardData(
        total_cards=int(decks_df["cards"].sum()) if not decks_df.empty else 0,
        total_due=int(decks_df["due"].sum()) if not decks_df.empty else 0,
        deck_summary=decks_df,
        workouts_logged=len(workouts_df),
        training_minutes_daily=compute_training_minutes_daily(workouts_df, day_index),
        mean_rpe_daily=compute_mean_rpe_daily(workouts_df, day_index),
    )
