"""
Review session state machine.

States:
    (no session) -> ACTIVE -> COMPLETE

- start_session computes the due queue once; it is not refreshed while
  the session runs.
- Within ACTIVE each card is either hidden or revealed. Revealing is
  idempotent and reversible; `revealed_once` marks that the first reveal
  of the current card already happened.
- grade_current reschedules the current card, records the updated card in
  `graded` and moves on, completing the session after the last card.
- A session started with no due cards is COMPLETE from the start, and
  grading it is a no-op.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Optional

from braingym.sm2.card_state import Card, Deck
from braingym.sm2.constants import SESSION_CARD_LIMIT
from braingym.sm2.due import build_session_queue
from braingym.sm2.scheduler import schedule
from braingym.utils import minutes_between


class SessionPhase(str, Enum):
    ACTIVE = "active"
    COMPLETE = "complete"


@dataclass(frozen=True)
class ReviewSession:
    """
    One pass over a deck's due queue.
    """
    deck_id: str
    deck_name: str
    queue: tuple[Card, ...]
    started_at: datetime
    position: int = 0
    show_back: bool = False
    revealed_once: bool = False
    phase: SessionPhase = SessionPhase.ACTIVE
    graded: tuple[Card, ...] = field(default_factory=tuple)

    @property
    def total(self) -> int:
        return len(self.queue)

    @property
    def is_complete(self) -> bool:
        return self.phase == SessionPhase.COMPLETE

    @property
    def remaining(self) -> int:
        if self.is_complete:
            return 0
        return self.total - self.position


def start_session(
    deck: Deck,
    now: datetime,
    limit: int = SESSION_CARD_LIMIT
) -> ReviewSession:
    """
    Start a session over the deck's due cards as of now.
    """
    queue = build_session_queue(deck.cards, now, limit)
    return ReviewSession(
        deck_id=deck.id,
        deck_name=deck.name,
        queue=queue,
        started_at=now,
        phase=SessionPhase.ACTIVE if queue else SessionPhase.COMPLETE,
    )


def current_card(session: Optional[ReviewSession]) -> Optional[Card]:
    if session is None or session.is_complete:
        return None
    if session.position >= len(session.queue):
        return None
    return session.queue[session.position]


def reveal_back(session: ReviewSession) -> ReviewSession:
    if current_card(session) is None:
        return session
    return replace(session, show_back=True, revealed_once=True)


def hide_back(session: ReviewSession) -> ReviewSession:
    if current_card(session) is None:
        return session
    return replace(session, show_back=False)


def toggle_back(session: ReviewSession) -> ReviewSession:
    if session.show_back:
        return hide_back(session)
    return reveal_back(session)


def is_first_reveal(before: ReviewSession, after: ReviewSession) -> bool:
    """
    True when the transition before -> after is the first time the current
    card's back was shown. One-shot side effects key off this.
    """
    return (
        after.show_back
        and after.revealed_once
        and not before.revealed_once
        and before.position == after.position
    )


def grade_current(session: ReviewSession, quality: int, now: datetime) -> ReviewSession:
    """
    Grade the current card and advance.

    Args:
        session: Active session
        quality: Recall grade (clamped by the scheduler)
        now: Grading timestamp

    Returns:
        Next session state; unchanged when there is no current card
    """
    card = current_card(session)
    if card is None:
        return session

    updated = schedule(card, quality, now)
    next_position = session.position + 1
    finished = next_position >= len(session.queue)

    return replace(
        session,
        position=next_position,
        show_back=False,
        revealed_once=False,
        phase=SessionPhase.COMPLETE if finished else SessionPhase.ACTIVE,
        graded=session.graded + (updated,),
    )


def last_graded(session: ReviewSession) -> Optional[Card]:
    return session.graded[-1] if session.graded else None


def elapsed_minutes(session: ReviewSession, now: datetime) -> int:
    """Whole minutes since the session started, at least 1."""
    return max(1, minutes_between(session.started_at, now))
