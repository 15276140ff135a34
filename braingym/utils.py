"""
Numeric and date helpers shared by the engine.
"""

from __future__ import annotations

import math
import uuid
from datetime import datetime, timedelta, timezone
from typing import Union


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

Number = Union[int, float]


def clamp(n: Number, lo: Number, hi: Number) -> Number:
    """
    Clamp n into [lo, hi]. When lo > hi the lower bound wins.
    """
    return max(lo, min(hi, n))


def round_half_up(x: float) -> int:
    """
    Round to the nearest integer, halves toward +infinity (2.5 -> 3, -2.5 -> -2).
    """
    return int(math.floor(x + 0.5))


def ensure_aware(dt: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def add_days(dt: datetime, days: int) -> datetime:
    """
    Calendar-day addition.

    Aware datetime arithmetic in Python is wall-clock arithmetic, so the
    time of day is kept and month/year rollover follows the calendar.
    """
    return dt + timedelta(days=days)


def format_date(dt: datetime) -> str:
    return dt.strftime("%Y-%m-%d")


def human_time(minutes: int) -> str:
    """
    Format a duration in minutes: "25 min", "1 h", "1 h 10 min".
    """
    hours, mins = divmod(int(minutes), 60)
    if hours <= 0:
        return f"{mins} min"
    if mins == 0:
        return f"{hours} h"
    return f"{hours} h {mins} min"


def minutes_between(a: datetime, b: datetime) -> int:
    return round_half_up((b - a).total_seconds() / 60.0)


def make_id(prefix: str = "id") -> str:
    return f"{prefix}_{uuid.uuid4().hex[:12]}"
