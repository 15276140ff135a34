"""
Snapshot <-> AppState conversion.

The storage layer owns where and how the blob is kept; this module only
turns a loaded blob into state and state back into a JSON-ready dict.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any, Optional, Union

from pydantic import ValidationError

from braingym.recovery.readiness import RecoverySignals
from braingym.recovery.workout import Exercise, Workout, WorkoutTemplate
from braingym.sm2.card_state import Card, Deck
from braingym.sm2.constants import EASE_MAX, EASE_MIN
from braingym.utils import clamp, ensure_aware
from companion.schemas import (
    CardDoc,
    DeckDoc,
    ExerciseDoc,
    NotificationDoc,
    ProfileDoc,
    RecoveryDoc,
    SnapshotDoc,
    WorkoutDoc,
    WorkoutTemplateDoc,
)
from companion.state import AppState, Notification, Profile, initial_state

logger = logging.getLogger(__name__)

RawSnapshot = Union[str, bytes, dict, None]


def _aware(dt: Optional[datetime]) -> Optional[datetime]:
    return ensure_aware(dt) if dt is not None else None


# ---- Document -> domain ----

def _card(doc: CardDoc) -> Card:
    return Card(
        id=doc.id,
        front=doc.front,
        back=doc.back,
        ease=clamp(doc.ease, EASE_MIN, EASE_MAX) if doc.ease is not None else None,
        repetitions=doc.repetitions,
        interval_days=doc.interval_days,
        due_at=_aware(doc.due_at),
        last_quality=doc.last_quality,
        created_at=_aware(doc.created_at),
        updated_at=_aware(doc.updated_at),
    )


def _deck(doc: DeckDoc) -> Deck:
    return Deck(id=doc.id, name=doc.name, color=doc.color, cards=tuple(_card(c) for c in doc.cards))


def _exercises(docs: list[ExerciseDoc]) -> tuple[Exercise, ...]:
    return tuple(Exercise(name=e.name, sets=e.sets, reps=e.reps, rpe=e.rpe) for e in docs)


def _template(doc: WorkoutTemplateDoc) -> WorkoutTemplate:
    return WorkoutTemplate(
        id=doc.id,
        name=doc.name,
        est_minutes=doc.est_minutes,
        target=doc.target,
        exercises=_exercises(doc.exercises),
    )


def _workout(doc: WorkoutDoc) -> Workout:
    return Workout(
        id=doc.id,
        date=doc.date,
        name=doc.name,
        started_at=_aware(doc.started_at),
        target=doc.target,
        est_minutes=doc.est_minutes,
        session_rpe=doc.session_rpe,
        exercises=_exercises(doc.exercises),
        notes=doc.notes,
    )


def _notification(doc: NotificationDoc) -> Notification:
    return Notification(
        id=doc.id,
        created_at=ensure_aware(doc.created_at),
        kind=doc.kind,
        text=doc.text,
        read=doc.read,
    )


def snapshot_to_state(doc: SnapshotDoc, now: datetime) -> AppState:
    """
    Build state from a validated snapshot. Missing sections come from a
    fresh install; the review session is never restored.
    """
    fresh = initial_state(now)
    return AppState(
        profile=Profile(**doc.profile.model_dump()),
        recovery=RecoverySignals(
            sleep_hours=doc.recovery.sleep_hours,
            stress=doc.recovery.stress,
            soreness=doc.recovery.soreness,
            updated_at=_aware(doc.recovery.updated_at) or now,
        ),
        decks=fresh.decks if doc.decks is None else tuple(_deck(d) for d in doc.decks),
        workout_templates=(
            fresh.workout_templates if doc.workout_templates is None
            else tuple(_template(t) for t in doc.workout_templates)
        ),
        workout_log=() if doc.workout_log is None else tuple(_workout(w) for w in doc.workout_log),
        notifications=(
            fresh.notifications if doc.notifications is None
            else tuple(_notification(n) for n in doc.notifications)
        ),
        session=None,
    )


# ---- Domain -> document ----

def _exercise_docs(exercises) -> list[ExerciseDoc]:
    return [ExerciseDoc(name=e.name, sets=e.sets, reps=e.reps, rpe=e.rpe) for e in exercises]


def state_to_snapshot(state: AppState) -> SnapshotDoc:
    profile = state.profile
    recovery = state.recovery
    return SnapshotDoc(
        profile=ProfileDoc(
            name=profile.name,
            goal=profile.goal,
            jokes_enabled=profile.jokes_enabled,
            voice_enabled=profile.voice_enabled,
            preferred_study_deck_id=profile.preferred_study_deck_id,
            max_study_minutes=profile.max_study_minutes,
        ),
        recovery=RecoveryDoc(
            sleep_hours=recovery.sleep_hours,
            stress=recovery.stress,
            soreness=recovery.soreness,
            updated_at=recovery.updated_at,
        ),
        decks=[
            DeckDoc(
                id=d.id,
                name=d.name,
                color=d.color,
                cards=[
                    CardDoc(
                        id=c.id,
                        front=c.front,
                        back=c.back,
                        ease=c.ease,
                        repetitions=c.repetitions,
                        interval_days=c.interval_days,
                        due_at=c.due_at,
                        last_quality=c.last_quality,
                        created_at=c.created_at,
                        updated_at=c.updated_at,
                    )
                    for c in d.cards
                ],
            )
            for d in state.decks
        ],
        workout_templates=[
            WorkoutTemplateDoc(
                id=t.id,
                name=t.name,
                est_minutes=t.est_minutes,
                target=t.target,
                exercises=_exercise_docs(t.exercises),
            )
            for t in state.workout_templates
        ],
        workout_log=[
            WorkoutDoc(
                id=w.id,
                date=w.date,
                name=w.name,
                started_at=w.started_at,
                target=w.target,
                est_minutes=w.est_minutes,
                session_rpe=w.session_rpe,
                exercises=_exercise_docs(w.exercises),
                notes=w.notes,
            )
            for w in state.workout_log
        ],
        notifications=[
            NotificationDoc(id=n.id, created_at=n.created_at, kind=n.kind, text=n.text, read=n.read)
            for n in state.notifications
        ],
    )


# ---- Public API ----

def load_snapshot(raw: RawSnapshot, now: datetime) -> AppState:
    """
    Turn a stored blob into state.

    Args:
        raw: JSON text, an already-decoded dict, or None (nothing stored)
        now: Current time, used for defaults

    Returns:
        AppState; a fresh install when the blob is missing or unusable
    """
    if raw is None:
        return initial_state(now)

    data: Any = raw
    if isinstance(raw, (str, bytes)):
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.warning("Snapshot is not valid JSON, starting fresh: %s", exc)
            return initial_state(now)

    if not isinstance(data, dict):
        logger.warning("Snapshot is not an object (got %s), starting fresh", type(data).__name__)
        return initial_state(now)

    try:
        doc = SnapshotDoc.model_validate(data)
    except ValidationError as exc:
        logger.warning("Snapshot failed validation, starting fresh: %s", exc)
        return initial_state(now)

    return snapshot_to_state(doc, now)


def dump_snapshot(state: AppState) -> dict:
    """JSON-ready dict with camelCase keys."""
    return state_to_snapshot(state).model_dump(mode="json", by_alias=True)


def dumps_snapshot(state: AppState) -> str:
    return json.dumps(dump_snapshot(state))
