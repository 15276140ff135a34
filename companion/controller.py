"""
Controller binding the state container to its side effects.

Holds the current AppState, an injected clock, an optional speech port and
the RNG used for jokes. Every state change goes through companion.actions.
"""

from __future__ import annotations

import logging
import random
from datetime import datetime, timezone
from typing import Callable, Optional

from braingym.analytics import DashboardData, build_dashboard
from braingym.config import Settings
from braingym.recovery.study_block import StudyPlan
from braingym.session import ReviewSession, current_card, is_first_reveal
from braingym.sm2.card_state import Card
from braingym.utils import ensure_aware
from companion import actions
from companion.notifications import mark_all_read, plan_speech, session_started_speech
from companion.ports import SpeechError, SpeechPort
from companion.state import AppState, initial_state

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CompanionController:
    """
    Single-user facade over the state container. Callers serialize access.
    """

    def __init__(
        self,
        state: Optional[AppState] = None,
        settings: Optional[Settings] = None,
        speech: Optional[SpeechPort] = None,
        clock: Callable[[], datetime] = utc_now,
        rng: Optional[random.Random] = None,
    ):
        self.settings = settings or Settings()
        self.speech = speech
        self.clock = clock
        self.rng = rng or random.Random()
        self.state = state if state is not None else self._fresh_state()

    def now(self) -> datetime:
        """Current time from the injected clock; naive readings are UTC."""
        return ensure_aware(self.clock())

    def _fresh_state(self) -> AppState:
        state = initial_state(self.now())
        return actions.update_profile(
            state,
            max_study_minutes=self.settings.max_study_minutes,
            jokes_enabled=self.settings.jokes_enabled,
            voice_enabled=self.settings.voice_enabled,
        )

    # ---- Side effects ----

    @property
    def voice_available(self) -> bool:
        return (
            self.state.profile.voice_enabled
            and self.speech is not None
            and bool(getattr(self.speech, "supported", False))
        )

    def _speak(self, text: str) -> None:
        if not self.voice_available:
            return
        try:
            self.speech.speak(text)
        except SpeechError as exc:
            logger.warning("Speech failed: %s", exc)

    # ---- Queries ----

    @property
    def session(self) -> Optional[ReviewSession]:
        return self.state.session

    @property
    def current_card(self) -> Optional[Card]:
        return current_card(self.state.session)

    def readiness(self) -> int:
        return actions.readiness_of(self.state)

    def todays_plan(self) -> StudyPlan:
        return actions.todays_plan(self.state, self.now())

    def due_counts(self) -> dict[str, int]:
        return actions.due_counts_by_deck(self.state, self.now())

    def dashboard(self) -> DashboardData:
        return build_dashboard(self.state.decks, self.state.workout_log, self.now())

    # ---- Commands ----

    def update_recovery(self, **patch) -> None:
        self.state = actions.update_recovery(self.state, self.now(), **patch)

    def update_profile(self, **patch) -> None:
        self.state = actions.update_profile(self.state, **patch)

    def log_workout(self, template_id: str) -> Optional[StudyPlan]:
        self.state, plan = actions.log_workout_from_template(
            self.state,
            template_id,
            self.now(),
            rng=self.rng,
            notification_limit=self.settings.notification_limit,
        )
        if plan is not None:
            logger.info("Workout %s logged, plan %s min", template_id, plan.minutes)
            self._speak(plan_speech(plan))
        return plan

    def start_session(self, deck_id: str) -> Optional[ReviewSession]:
        self.state = actions.begin_review(
            self.state,
            deck_id,
            self.now(),
            limit=self.settings.session_card_limit,
            notification_limit=self.settings.notification_limit,
        )
        session = self.state.session
        if session is not None and session.deck_id == deck_id and session.total > 0:
            self._speak(session_started_speech(session.total))
        return session

    def toggle_back(self) -> None:
        """Show or hide the back; only the first reveal of a card is spoken."""
        before = self.state.session
        self.state = actions.toggle_reveal(self.state)
        after = self.state.session
        if before is not None and after is not None and is_first_reveal(before, after):
            self._speak(current_card(after).back)

    def reveal_back(self) -> None:
        before = self.state.session
        self.state = actions.reveal(self.state)
        after = self.state.session
        if before is not None and after is not None and is_first_reveal(before, after):
            self._speak(current_card(after).back)

    def grade(self, quality: int) -> None:
        was_waiting = self.current_card is not None
        self.state = actions.grade(
            self.state,
            quality,
            self.now(),
            rng=self.rng,
            notification_limit=self.settings.notification_limit,
        )
        session = self.state.session
        if was_waiting and session is not None and session.is_complete:
            logger.info("Session on %s complete (%d cards)", session.deck_id, session.total)

    def close_session(self) -> None:
        self.state = actions.close_review(self.state)

    def mark_all_read(self) -> None:
        self.state = mark_all_read(self.state)

    def reset(self) -> None:
        self.state = self._fresh_state()
