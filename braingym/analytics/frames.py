"""
Dataframe builders for analytics.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

import pandas as pd

from braingym.recovery.workout import Workout, intensity_proxy
from braingym.sm2.card_state import Deck
from braingym.sm2.due import is_due


DECK_COLUMNS = ["deck_id", "name", "cards", "due", "mean_ease", "mean_interval_days"]
WORKOUT_COLUMNS = ["workout_id", "day", "name", "target", "est_minutes", "session_rpe", "mean_rpe"]


def deck_summary_df(decks: Iterable[Deck], now: datetime) -> pd.DataFrame:
    """
    One row per deck: card count, due count, mean ease and mean interval.
    """
    rows = []
    for deck in decks:
        eases = [c.ease for c in deck.cards if c.ease is not None]
        intervals = [c.interval_days or 0 for c in deck.cards]
        rows.append({
            "deck_id": deck.id,
            "name": deck.name,
            "cards": len(deck.cards),
            "due": sum(1 for c in deck.cards if is_due(c, now)),
            "mean_ease": sum(eases) / len(eases) if eases else float("nan"),
            "mean_interval_days": sum(intervals) / len(intervals) if intervals else float("nan"),
        })
    if not rows:
        return pd.DataFrame(columns=DECK_COLUMNS)
    return pd.DataFrame(rows, columns=DECK_COLUMNS)


def workout_log_df(workouts: Iterable[Workout]) -> pd.DataFrame:
    """
    Workout log as a dataframe sorted by day, with a `day` datetime column.
    """
    rows = [
        {
            "workout_id": w.id,
            "day": w.date,
            "name": w.name,
            "target": w.target,
            "est_minutes": w.est_minutes,
            "session_rpe": w.session_rpe,
            "mean_rpe": intensity_proxy(w),
        }
        for w in workouts
    ]
    if not rows:
        return pd.DataFrame(columns=WORKOUT_COLUMNS)

    df = pd.DataFrame(rows, columns=WORKOUT_COLUMNS)
    df["day"] = pd.to_datetime(df["day"], format="%Y-%m-%d", errors="coerce")
    df = df.dropna(subset=["day"])
    df = df.sort_values("day", kind="mergesort").reset_index(drop=True)
    return df
