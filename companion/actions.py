"""
State actions (reducers).

Each action receives the prior AppState and returns the next one; nothing
here mutates its inputs or reads the clock. Unknown ids leave the state
unchanged.
"""

from __future__ import annotations

import logging
import random
from dataclasses import replace
from datetime import datetime
from typing import Optional

from braingym.config import DEFAULT_NOTIFICATION_LIMIT
from braingym.recovery.readiness import readiness
from braingym.recovery.study_block import StudyPlan, plan_for_today, recommend_after
from braingym.recovery.workout import Workout, workout_from_template
from braingym.session import (
    current_card,
    elapsed_minutes,
    grade_current,
    last_graded,
    reveal_back,
    start_session,
    toggle_back,
)
from braingym.sm2.card_state import Card, Deck, new_card
from braingym.sm2.constants import SESSION_CARD_LIMIT
from braingym.sm2.due import due_count
from braingym.utils import format_date, make_id
from companion.notifications import (
    deck_created_message,
    no_cards_due_message,
    pick_joke,
    plan_message,
    push_notification,
    session_done_message,
    session_started_message,
)
from companion.state import AppState, initial_state

logger = logging.getLogger(__name__)

DEFAULT_DECK_NAME = "New deck"


# ---- Profile & recovery ----

def update_profile(state: AppState, **patch) -> AppState:
    return replace(state, profile=replace(state.profile, **patch))


def update_recovery(state: AppState, now: datetime, **patch) -> AppState:
    """Overwrite the current check-in; there is no history."""
    return replace(state, recovery=replace(state.recovery, **{**patch, "updated_at": now}))


# ---- Workouts ----

def log_workout_from_template(
    state: AppState,
    template_id: str,
    now: datetime,
    rng: Optional[random.Random] = None,
    notification_limit: int = DEFAULT_NOTIFICATION_LIMIT
) -> tuple[AppState, Optional[StudyPlan]]:
    """
    Log a workout from a template and recommend a review block for it.

    Returns:
        (next_state, plan); plan is None when the template does not exist
    """
    template = state.find_template(template_id)
    if template is None:
        logger.debug("Unknown workout template %s", template_id)
        return state, None

    workout = workout_from_template(template, now)
    plan = recommend_after(workout, readiness(state.recovery), state.profile.max_study_minutes)

    state = replace(state, workout_log=(workout,) + state.workout_log)
    state = push_notification(state, "plan", plan_message(workout, plan), now, notification_limit)
    if state.profile.jokes_enabled:
        state = push_notification(state, "joke", pick_joke(rng), now, notification_limit)
    return state, plan


def delete_workout(state: AppState, workout_id: str) -> AppState:
    return replace(
        state,
        workout_log=tuple(w for w in state.workout_log if w.id != workout_id),
    )


# ---- Decks & cards ----

def create_deck(
    state: AppState,
    name: str,
    now: datetime,
    notification_limit: int = DEFAULT_NOTIFICATION_LIMIT
) -> AppState:
    deck = Deck(id=make_id("deck"), name=name.strip() or DEFAULT_DECK_NAME)
    state = replace(state, decks=(deck,) + state.decks)
    return push_notification(state, "tip", deck_created_message(deck.name), now, notification_limit)


def delete_deck(state: AppState, deck_id: str) -> AppState:
    """
    Remove a deck. If it was the preferred study deck, the first remaining
    deck becomes preferred (or none).
    """
    remaining = tuple(d for d in state.decks if d.id != deck_id)
    profile = state.profile
    if profile.preferred_study_deck_id == deck_id:
        fallback = remaining[0].id if remaining else ""
        profile = replace(profile, preferred_study_deck_id=fallback)
    return replace(state, decks=remaining, profile=profile)


def _map_deck(state: AppState, deck_id: str, fn) -> AppState:
    if state.find_deck(deck_id) is None:
        logger.debug("Unknown deck %s", deck_id)
        return state
    return replace(
        state,
        decks=tuple(fn(d) if d.id == deck_id else d for d in state.decks),
    )


def add_card(state: AppState, deck_id: str, front: str, back: str, now: datetime) -> AppState:
    """New cards go to the top of the deck and are due immediately."""
    card = new_card(front, back, now)
    return _map_deck(state, deck_id, lambda d: replace(d, cards=(card,) + d.cards))


def update_card(state: AppState, deck_id: str, card_id: str, now: datetime, **patch) -> AppState:
    def _update(deck: Deck) -> Deck:
        return replace(
            deck,
            cards=tuple(
                replace(c, **{**patch, "updated_at": now}) if c.id == card_id else c
                for c in deck.cards
            ),
        )
    return _map_deck(state, deck_id, _update)


def store_card(state: AppState, deck_id: str, card: Card) -> AppState:
    """Replace a card by id with a rescheduled copy."""
    return _map_deck(
        state,
        deck_id,
        lambda d: replace(d, cards=tuple(card if c.id == card.id else c for c in d.cards)),
    )


def delete_card(state: AppState, deck_id: str, card_id: str) -> AppState:
    return _map_deck(
        state,
        deck_id,
        lambda d: replace(d, cards=tuple(c for c in d.cards if c.id != card_id)),
    )


# ---- Review sessions ----

def begin_review(
    state: AppState,
    deck_id: str,
    now: datetime,
    limit: int = SESSION_CARD_LIMIT,
    notification_limit: int = DEFAULT_NOTIFICATION_LIMIT
) -> AppState:
    """
    Start a review session for a deck. An empty queue still opens a
    (complete) session and posts a "nothing due" tip.
    """
    deck = state.find_deck(deck_id)
    if deck is None:
        logger.debug("Unknown deck %s", deck_id)
        return state

    session = start_session(deck, now, limit)
    state = replace(state, session=session)
    if session.total == 0:
        text = no_cards_due_message(deck.name)
    else:
        text = session_started_message(session.total, deck.name)
    return push_notification(state, "tip", text, now, notification_limit)


def reveal(state: AppState) -> AppState:
    if state.session is None:
        return state
    return replace(state, session=reveal_back(state.session))


def toggle_reveal(state: AppState) -> AppState:
    if state.session is None:
        return state
    return replace(state, session=toggle_back(state.session))


def grade(
    state: AppState,
    quality: int,
    now: datetime,
    rng: Optional[random.Random] = None,
    notification_limit: int = DEFAULT_NOTIFICATION_LIMIT
) -> AppState:
    """
    Grade the current card, store its new schedule in the deck and advance.

    No-op when no card is waiting (no session, empty queue, or finished).
    """
    session = state.session
    if current_card(session) is None:
        return state

    session = grade_current(session, quality, now)
    state = store_card(state, session.deck_id, last_graded(session))
    state = replace(state, session=session)

    if session.is_complete:
        minutes = elapsed_minutes(session, now)
        state = push_notification(
            state, "done", session_done_message(session.total, minutes), now, notification_limit
        )
        if state.profile.jokes_enabled:
            state = push_notification(state, "joke", pick_joke(rng), now, notification_limit)
    return state


def close_review(state: AppState) -> AppState:
    return replace(state, session=None)


def reset(now: datetime) -> AppState:
    return initial_state(now)


# ---- Derived values ----

def readiness_of(state: AppState) -> int:
    return readiness(state.recovery)


def due_counts_by_deck(state: AppState, now: datetime) -> dict[str, int]:
    return {d.id: due_count(d.cards, now) for d in state.decks}


def total_due(state: AppState, now: datetime) -> int:
    return sum(due_counts_by_deck(state, now).values())


def workouts_on(state: AppState, day: str) -> list[Workout]:
    """Workouts logged on a YYYY-MM-DD day, most recent first."""
    return [w for w in state.workout_log if w.date == day]


def suggested_deck_id(state: AppState) -> str:
    if state.profile.preferred_study_deck_id:
        return state.profile.preferred_study_deck_id
    return state.decks[0].id if state.decks else ""


def todays_plan(state: AppState, now: datetime) -> StudyPlan:
    return plan_for_today(
        workouts_on(state, format_date(now)),
        readiness_of(state),
        state.profile.max_study_minutes,
    )
