"""
Optional platform capabilities.

The engine never depends on these; the controller uses them when present.
"""

from __future__ import annotations

from typing import Protocol


class SpeechError(RuntimeError):
    """Raised by a speech port when synthesis fails."""


class SpeechPort(Protocol):
    supported: bool

    def speak(self, text: str) -> None:
        """Say text, replacing anything currently being spoken."""
        ...
