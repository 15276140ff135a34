import json
import logging
from datetime import timedelta, timezone

from braingym.sm2 import is_due, schedule
from companion import actions
from companion.snapshot import dump_snapshot, dumps_snapshot, load_snapshot
from companion.state import initial_state


WEB_APP_BLOB = {
    "profile": {"name": "Alex", "maxStudyMinutes": 40},
    "recovery": {"sleepHours": 6, "stress": 7},
    "decks": [
        {
            "id": "deck_x",
            "name": "Cardio",
            "color": "bg-muted",
            "cards": [
                {
                    "id": "k1",
                    "front": "VO2max?",
                    "back": "Max oxygen uptake.",
                    "ease": 2.36,
                    "repetitions": 2,
                    "intervalDays": 6,
                    "dueAt": "2024-03-20T08:00:00.000Z",
                    "lastQuality": 3,
                    "updatedAt": "2024-03-14T08:00:00.000Z",
                },
                {"id": "k2", "front": "HRmax?", "back": "220 - age (rough)."},
            ],
        }
    ],
    "workoutLog": [
        {
            "id": "log_1",
            "date": "2024-03-15",
            "name": "Run",
            "sessionRpe": 6,
            "exercises": [{"name": "Tempo", "sets": 1, "reps": 30, "rpe": 7}],
        }
    ],
    "notifications": [
        {"id": "n1", "createdAt": "2024-03-15T07:00:00Z", "type": "tip", "text": "hi", "read": True}
    ],
    "somethingNew": {"ignored": True},
}


def test_load_web_app_blob(now):
    state = load_snapshot(WEB_APP_BLOB, now)

    assert state.profile.name == "Alex"
    assert state.profile.max_study_minutes == 40
    assert state.profile.jokes_enabled is True  # merged default
    assert state.recovery.sleep_hours == 6
    assert state.recovery.soreness == 4  # merged default

    card = state.find_deck("deck_x").find_card("k1")
    assert card.interval_days == 6
    assert card.due_at.tzinfo is not None
    assert card.due_at.astimezone(timezone.utc).hour == 8

    legacy = state.find_deck("deck_x").find_card("k2")
    assert legacy.due_at is None
    assert actions.due_counts_by_deck(state, now) == {"deck_x": 1}

    assert state.workout_log[0].exercises[0].reps == "30"
    assert state.notifications[0].kind == "tip"
    assert state.notifications[0].read is True
    # sections left out come from a fresh install
    assert [t.id for t in state.workout_templates] == ["w_upper", "w_lower", "w_end"]
    assert state.session is None


def test_missing_or_broken_blob_starts_fresh(now, caplog):
    assert load_snapshot(None, now).decks == initial_state(now).decks

    with caplog.at_level(logging.WARNING, logger="companion.snapshot"):
        assert load_snapshot("{not json", now).decks == initial_state(now).decks
        assert load_snapshot("[1, 2]", now).decks == initial_state(now).decks
        assert load_snapshot({"decks": [{"name": "no id"}]}, now).decks == initial_state(now).decks
    assert caplog.text.count("starting fresh") == 3


def test_null_sections_use_defaults(now):
    state = load_snapshot({"profile": None, "recovery": None}, now)
    assert state.profile.max_study_minutes == 35
    assert state.recovery.sleep_hours == 7.5


def test_round_trip_keeps_schedule_and_drops_session(now):
    state = initial_state(now)
    state = actions.begin_review(state, "deck_ibd", now)
    state = actions.grade(state, 4, now)
    state, _ = actions.log_workout_from_template(state, "w_upper", now)

    blob = dumps_snapshot(state)
    data = json.loads(blob)
    assert "intervalDays" in data["decks"][0]["cards"][0]
    assert data["notifications"][0]["type"] in {"joke", "plan"}
    assert "session" not in data

    restored = load_snapshot(blob, now + timedelta(hours=1))
    assert restored.session is None
    assert restored.decks == state.decks
    assert restored.workout_log == state.workout_log
    assert restored.profile == state.profile
    assert dump_snapshot(restored) == dump_snapshot(state)


def test_loaded_cards_are_normalized_before_scheduling(now):
    state = load_snapshot(
        {
            "decks": [
                {
                    "id": "d",
                    "name": "D",
                    "cards": [
                        {"id": "c", "front": "f", "back": "b", "repetitions": 2},
                        {"id": "e", "front": "f", "back": "b", "ease": 9.0,
                         "repetitions": 3, "intervalDays": 10},
                    ],
                }
            ]
        },
        now,
    )
    deck = state.find_deck("d")

    graded = schedule(deck.find_card("c"), 4, now)
    assert graded.interval_days == 1
    assert not is_due(graded, now)

    steep = deck.find_card("e")
    assert steep.ease == 2.8
    assert schedule(steep, 4, now).interval_days == 28
