"""
Metric computations for analytics dashboards.
"""

from __future__ import annotations

import pandas as pd


def build_day_index(workouts_df: pd.DataFrame) -> pd.DatetimeIndex:
    """
    Build a dense day index spanning the workout log.
    """
    if workouts_df.empty:
        return pd.DatetimeIndex([])
    start = workouts_df["day"].min()
    end = workouts_df["day"].max()
    return pd.date_range(start=start, end=end, freq="D")


def compute_training_minutes_daily(
    workouts_df: pd.DataFrame,
    day_index: pd.DatetimeIndex
) -> pd.Series:
    """
    Estimated training minutes per day; rest days are 0.
    """
    if workouts_df.empty or len(day_index) == 0:
        return pd.Series(dtype="float64")

    daily = workouts_df.groupby("day")["est_minutes"].sum()
    return daily.reindex(day_index, fill_value=0).astype("float64")


def compute_mean_rpe_daily(
    workouts_df: pd.DataFrame,
    day_index: pd.DatetimeIndex
) -> pd.Series:
    """
    Mean workout intensity per day; rest days are NaN.
    """
    if workouts_df.empty or len(day_index) == 0:
        return pd.Series(dtype="float64")

    daily = workouts_df.groupby("day")["mean_rpe"].mean()
    return daily.reindex(day_index).astype("float64")
