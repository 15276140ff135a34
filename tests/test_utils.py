from datetime import datetime, timedelta, timezone

from braingym.utils import (
    add_days,
    clamp,
    ensure_aware,
    format_date,
    human_time,
    make_id,
    minutes_between,
    round_half_up,
)


def test_clamp_inside_and_outside():
    assert clamp(5, 0, 10) == 5
    assert clamp(-3, 0, 10) == 0
    assert clamp(42, 0, 10) == 10


def test_clamp_lower_bound_wins_when_bounds_cross():
    assert clamp(8, 10, 5) == 10


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(82.5) == 83
    assert round_half_up(2.4999) == 2
    assert round_half_up(-2.5) == -2


def test_add_days_rolls_over_month_and_keeps_time():
    start = datetime(2024, 1, 31, 22, 15, tzinfo=timezone.utc)
    assert add_days(start, 1) == datetime(2024, 2, 1, 22, 15, tzinfo=timezone.utc)
    assert add_days(start, 30) == datetime(2024, 3, 1, 22, 15, tzinfo=timezone.utc)


def test_format_date():
    assert format_date(datetime(2024, 3, 5, 23, 59)) == "2024-03-05"


def test_human_time():
    assert human_time(25) == "25 min"
    assert human_time(60) == "1 h"
    assert human_time(70) == "1 h 10 min"
    assert human_time(0) == "0 min"


def test_minutes_between():
    a = datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)
    assert minutes_between(a, a + timedelta(minutes=14, seconds=31)) == 15
    assert minutes_between(a, a + timedelta(seconds=20)) == 0


def test_ensure_aware_treats_naive_as_utc():
    naive = datetime(2024, 3, 15, 12, 0)
    assert ensure_aware(naive).tzinfo == timezone.utc
    aware = datetime(2024, 3, 15, 12, 0, tzinfo=timezone(timedelta(hours=2)))
    assert ensure_aware(aware) is aware


def test_make_id_is_prefixed_and_unique():
    a, b = make_id("card"), make_id("card")
    assert a.startswith("card_")
    assert a != b
