"""
Types for analytics dashboards.
"""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd


@dataclass(frozen=True)
class DashboardData:
    """
    Precomputed figures and series for the overview dashboard.
    """
    total_cards: int
    total_due: int
    deck_summary: pd.DataFrame          # one row per deck
    workouts_logged: int
    training_minutes_daily: pd.Series   # estimated minutes per day
    mean_rpe_daily: pd.Series           # mean session RPE per day (NaN on rest days)
