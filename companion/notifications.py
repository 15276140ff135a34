"""
In-app notification feed: message text and feed updates.

Delivery (toasts, push, badges) belongs to the UI.
"""

from __future__ import annotations

import random
from dataclasses import replace
from datetime import datetime
from typing import Optional

from braingym.recovery.study_block import StudyPlan
from braingym.recovery.workout import Workout
from braingym.utils import make_id
from braingym.config import DEFAULT_NOTIFICATION_LIMIT
from companion.sample_data import DEFAULT_JOKES
from companion.state import AppState, Notification


def pick_joke(rng: Optional[random.Random] = None) -> str:
    return (rng or random).choice(DEFAULT_JOKES)


def push_notification(
    state: AppState,
    kind: str,
    text: str,
    now: datetime,
    limit: int = DEFAULT_NOTIFICATION_LIMIT
) -> AppState:
    """
    Prepend a notification, keeping only the newest `limit` entries.
    """
    entry = Notification(id=make_id("n"), created_at=now, kind=kind, text=text)
    return replace(state, notifications=((entry,) + state.notifications)[:limit])


def mark_all_read(state: AppState) -> AppState:
    return replace(
        state,
        notifications=tuple(replace(n, read=True) for n in state.notifications),
    )


def unread_count(state: AppState) -> int:
    return sum(1 for n in state.notifications if not n.read)


# ---- Message text ----

def plan_message(workout: Workout, plan: StudyPlan) -> str:
    return (
        f"Workout logged: {workout.name}. Review suggested in {plan.start_in_minutes} min"
        f" · {plan.minutes} min · {plan.mode.value} ({plan.focus.value})."
    )


def plan_speech(plan: StudyPlan) -> str:
    return (
        f"Workout saved. Review suggested in {plan.start_in_minutes} minutes, "
        f"for {plan.minutes} minutes."
    )


def deck_created_message(deck_name: str) -> str:
    return f"Deck created: {deck_name}. Add 5 cards and start a mini session."


def no_cards_due_message(deck_name: str) -> str:
    return f"No cards due in “{deck_name}”. Add cards or come back tomorrow."


def session_started_message(count: int, deck_name: str) -> str:
    return f"Session started: {count} cards (deck: {deck_name})."


def session_started_speech(count: int) -> str:
    return f"Flashcard session. {count} cards."


def session_done_message(count: int, minutes: int) -> str:
    return f"Session complete ✅ ({count} cards, ~{minutes} min)."
