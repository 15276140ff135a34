from datetime import datetime, timezone

import pytest

from braingym.sm2.card_state import Card, Deck
from braingym.utils import EPOCH
from companion.ports import SpeechError


NOW = datetime(2024, 3, 15, 18, 30, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def fresh_card():
    return Card(id="c1", front="Q1", back="A1")


@pytest.fixture
def due_deck():
    """Three cards, all due since the epoch."""
    return Deck(
        id="deck_1",
        name="Deck 1",
        cards=(
            Card(id="c1", front="Q1", back="A1", due_at=EPOCH),
            Card(id="c2", front="Q2", back="A2", due_at=EPOCH),
            Card(id="c3", front="Q3", back="A3", due_at=EPOCH),
        ),
    )


class FakeSpeech:
    """Records what would have been spoken."""

    def __init__(self, supported=True, fail=False):
        self.supported = supported
        self.fail = fail
        self.spoken = []

    def speak(self, text):
        if self.fail:
            raise SpeechError("no audio device")
        self.spoken.append(text)


@pytest.fixture
def speech():
    return FakeSpeech()
