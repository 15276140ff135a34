"""
Pydantic models for the persisted application snapshot.

These define the shape of the opaque blob the storage layer saves and
loads. Keys are camelCase on the wire (snake_case is also accepted), so a
blob written by the BrainGym web app loads unchanged.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from braingym.recovery.constants import DEFAULT_MAX_STUDY_MINUTES
from braingym.sm2.constants import EASE_DEFAULT


class SnapshotModel(BaseModel):
    """Shared configuration for snapshot documents."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


# ---- Flashcards ----

class CardDoc(SnapshotModel):
    id: str
    front: str = ""
    back: str = ""
    ease: Optional[float] = EASE_DEFAULT
    repetitions: Optional[int] = 0
    interval_days: Optional[int] = 0
    due_at: Optional[datetime] = None  # missing -> due since epoch
    last_quality: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class DeckDoc(SnapshotModel):
    id: str
    name: str
    color: str = "bg-muted"
    cards: list[CardDoc] = Field(default_factory=list)


# ---- Workouts ----

class ExerciseDoc(SnapshotModel):
    name: str
    sets: int = 1
    reps: str = ""  # free text: "3-5", "AMRAP", "45 min"
    rpe: Optional[float] = None

    @field_validator("reps", mode="before")
    @classmethod
    def _reps_as_text(cls, value: Any) -> str:
        return "" if value is None else str(value)


class WorkoutTemplateDoc(SnapshotModel):
    id: str
    name: str
    est_minutes: int = 0
    target: str = ""
    exercises: list[ExerciseDoc] = Field(default_factory=list)


class WorkoutDoc(SnapshotModel):
    id: str
    date: str  # YYYY-MM-DD
    name: str
    started_at: Optional[datetime] = None
    target: str = ""
    est_minutes: int = 0
    session_rpe: Optional[float] = None
    exercises: list[ExerciseDoc] = Field(default_factory=list)
    notes: str = ""


# ---- Profile & recovery ----

class ProfileDoc(SnapshotModel):
    """Missing fields fall back to defaults (older snapshots)."""
    name: str = ""
    goal: str = "Strength + Endurance"
    jokes_enabled: bool = True
    voice_enabled: bool = False
    preferred_study_deck_id: str = "deck_ibd"
    max_study_minutes: int = DEFAULT_MAX_STUDY_MINUTES


class RecoveryDoc(SnapshotModel):
    sleep_hours: float = 7.5
    stress: float = 5
    soreness: float = 4
    updated_at: Optional[datetime] = None


# ---- Notifications ----

class NotificationDoc(SnapshotModel):
    id: str
    created_at: datetime
    kind: str = Field(default="tip", alias="type")
    text: str = ""
    read: bool = False


# ---- Snapshot ----

class SnapshotDoc(SnapshotModel):
    """
    Whole-app snapshot. Top-level sections left out of a blob are None and
    get filled from a fresh install on load.
    """
    profile: ProfileDoc = Field(default_factory=ProfileDoc)
    recovery: RecoveryDoc = Field(default_factory=RecoveryDoc)
    decks: Optional[list[DeckDoc]] = None
    workout_templates: Optional[list[WorkoutTemplateDoc]] = None
    workout_log: Optional[list[WorkoutDoc]] = None
    notifications: Optional[list[NotificationDoc]] = None

    @field_validator("profile", "recovery", mode="before")
    @classmethod
    def _null_section_as_defaults(cls, value: Any) -> Any:
        return {} if value is None else value
