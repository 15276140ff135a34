"""
Application state container.

A single immutable AppState is the source of truth. Every action in
companion.actions takes the prior state and returns the next one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from braingym.recovery.constants import DEFAULT_MAX_STUDY_MINUTES
from braingym.recovery.readiness import RecoverySignals
from braingym.recovery.workout import Workout, WorkoutTemplate
from braingym.session import ReviewSession
from braingym.sm2.card_state import Deck
from braingym.utils import make_id
from companion.sample_data import sample_decks, sample_workout_templates


WELCOME_TEXT = (
    "Welcome to BrainGym. Log a workout and let the app propose an "
    "optimized review session."
)


@dataclass(frozen=True)
class Profile:
    name: str = ""
    goal: str = "Strength + Endurance"
    jokes_enabled: bool = True
    voice_enabled: bool = False
    preferred_study_deck_id: str = "deck_ibd"
    max_study_minutes: int = DEFAULT_MAX_STUDY_MINUTES


@dataclass(frozen=True)
class Notification:
    """
    One entry in the in-app feed. kind: tip | plan | joke | done
    """
    id: str
    created_at: datetime
    kind: str
    text: str
    read: bool = False


@dataclass(frozen=True)
class AppState:
    profile: Profile = field(default_factory=Profile)
    recovery: RecoverySignals = field(default_factory=RecoverySignals)
    decks: tuple[Deck, ...] = field(default_factory=tuple)
    workout_templates: tuple[WorkoutTemplate, ...] = field(default_factory=tuple)
    workout_log: tuple[Workout, ...] = field(default_factory=tuple)
    notifications: tuple[Notification, ...] = field(default_factory=tuple)
    session: Optional[ReviewSession] = None  # Never persisted

    def find_deck(self, deck_id: str) -> Optional[Deck]:
        return next((d for d in self.decks if d.id == deck_id), None)

    def find_template(self, template_id: str) -> Optional[WorkoutTemplate]:
        return next((t for t in self.workout_templates if t.id == template_id), None)


def initial_state(now: datetime) -> AppState:
    """
    Fresh install: sample decks, workout templates and a welcome tip.
    """
    return AppState(
        profile=Profile(),
        recovery=RecoverySignals(updated_at=now),
        decks=sample_decks(),
        workout_templates=sample_workout_templates(),
        workout_log=(),
        notifications=(
            Notification(id=make_id("n"), created_at=now, kind="tip", text=WELCOME_TEXT),
        ),
    )
