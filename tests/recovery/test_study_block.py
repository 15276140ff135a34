import pytest

from braingym.recovery import (
    Exercise,
    FocusLevel,
    StudyMode,
    Workout,
    WorkoutTemplate,
    intensity_proxy,
    plan_for_today,
    recommend,
    recommend_after,
    rest_day_plan,
    workout_from_template,
)
from braingym.recovery.study_block import intensity_penalty, readiness_bonus


def _workout(rpes, session_rpe=None):
    return Workout(
        id="w",
        date="2024-03-15",
        name="Session",
        session_rpe=session_rpe,
        exercises=tuple(Exercise(name=f"e{i}", rpe=r) for i, r in enumerate(rpes)),
    )


def test_hard_workout_scenario():
    workout = _workout([8, 8, 9, 8])
    mean_rpe = intensity_proxy(workout)
    assert mean_rpe == pytest.approx(8.25)
    assert intensity_penalty(mean_rpe) == pytest.approx(9)
    assert readiness_bonus(60) == 0

    plan = recommend(mean_rpe, readiness=60, max_minutes=35)
    assert plan.minutes == 26
    assert plan.mode == StudyMode.ACTIVE_RECALL
    assert plan.mode.value == "active recall"
    assert plan.start_in_minutes == 45
    assert plan.focus == FocusLevel.NORMAL
    assert plan.mean_rpe == 8.3


def test_light_workout_gets_mixed_mode_and_short_cooldown():
    plan = recommend(6.0, readiness=80, max_minutes=35)
    assert plan.mode == StudyMode.MIXED
    assert plan.mode.value == "mixed (flashcards + short case)"
    assert plan.start_in_minutes == 25
    assert plan.focus == FocusLevel.INTENSIVE
    # bonus +4 is cut by the ceiling
    assert plan.minutes == 35


def test_minutes_stay_within_floor_and_ceiling():
    for rpe in [0, 3, 6, 7.5, 8, 9, 10, 12]:
        for score in range(0, 101, 5):
            plan = recommend(rpe, score, 35)
            assert 10 <= plan.minutes <= 35


def test_max_intensity_and_no_readiness():
    # penalty (10 - 6) * 4 = 16, bonus capped at -8: 35 - 16 - 8 = 11
    plan = recommend(10, 0, 35)
    assert plan.minutes == 11
    assert plan.focus == FocusLevel.LIGHT


def test_penalty_saturates():
    assert intensity_penalty(10.5) == 18
    assert intensity_penalty(14) == 18
    assert intensity_penalty(5) == 0


def test_bonus_is_symmetric_and_capped():
    assert readiness_bonus(100) == 8
    assert readiness_bonus(0) == -8
    assert readiness_bonus(70) == pytest.approx(2)


def test_floor_wins_over_small_ceiling():
    assert recommend(9, 10, max_minutes=5).minutes == 10


def test_missing_max_minutes_uses_default():
    assert recommend(6, 60, None).minutes == 35


@pytest.mark.parametrize("score, focus", [(0, FocusLevel.LIGHT), (39, FocusLevel.LIGHT),
                                          (40, FocusLevel.NORMAL), (69, FocusLevel.NORMAL),
                                          (70, FocusLevel.INTENSIVE), (100, FocusLevel.INTENSIVE)])
def test_focus_thresholds(score, focus):
    assert recommend(7, score, 35).focus == focus


def test_mode_threshold_is_inclusive():
    assert recommend(8.0, 60, 35).mode == StudyMode.ACTIVE_RECALL
    assert recommend(7.99, 60, 35).mode == StudyMode.MIXED


def test_intensity_proxy_fallbacks():
    assert intensity_proxy(_workout([], session_rpe=9)) == 9
    assert intensity_proxy(_workout([])) == 7
    assert intensity_proxy(_workout([None, 6, None, 8])) == 7


def test_workout_from_template(now):
    template = WorkoutTemplate(
        id="t",
        name="Upper",
        est_minutes=60,
        target="Strength",
        exercises=(Exercise("Bench", 5, "3-5", 8), Exercise("Raises", 3, "12", 7), Exercise("Curl")),
    )
    workout = workout_from_template(template, now)
    assert workout.date == "2024-03-15"
    assert workout.started_at == now
    # (8 + 7 + 7) / 3 = 7.33
    assert workout.session_rpe == 7
    assert workout.name == "Upper"
    assert workout.id.startswith("log_")


def test_recommend_after_uses_intensity_proxy():
    plan = recommend_after(_workout([8, 8, 9, 8]), 60, 35)
    assert plan.minutes == 26


def test_rest_day_plan():
    plan = rest_day_plan(65, 35)
    assert plan.minutes == 23  # round(35 * 0.65) = 22.75
    assert plan.start_in_minutes == 0
    assert plan.mode == StudyMode.MIXED
    assert plan.mean_rpe is None

    tired = rest_day_plan(20, 35)
    assert tired.minutes == 10
    assert tired.mode == StudyMode.ACTIVE_RECALL
    assert tired.focus == FocusLevel.LIGHT


def test_plan_for_today_prefers_latest_workout():
    latest = _workout([9, 9])
    earlier = _workout([5])
    plan = plan_for_today([latest, earlier], 60, 35)
    assert plan.mean_rpe == 9.0
    assert plan.start_in_minutes == 45

    assert plan_for_today([], 60, 35).mean_rpe is None
