"""
Configuration from environment variables.

A .env file in the working directory is read by load_settings
(python-dotenv); real environment variables take precedence.
"""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from braingym.recovery.constants import DEFAULT_MAX_STUDY_MINUTES
from braingym.sm2.constants import SESSION_CARD_LIMIT


DEFAULT_NOTIFICATION_LIMIT = 80

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


@dataclass(frozen=True)
class Settings:
    max_study_minutes: int = DEFAULT_MAX_STUDY_MINUTES
    session_card_limit: int = SESSION_CARD_LIMIT
    notification_limit: int = DEFAULT_NOTIFICATION_LIMIT
    log_level: str = "WARNING"
    jokes_enabled: bool = True
    voice_enabled: bool = False


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(
            f"{name} must be an integer (got {raw!r})"
        ) from None


def _get_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be true/false (got {raw!r})")


def load_settings(dotenv: bool = True) -> Settings:
    """
    Build Settings from BRAINGYM_* environment variables.

    Args:
        dotenv: Read a .env file from the working directory first

    Raises:
        ValueError: When a variable is set to a malformed value
    """
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    return Settings(
        max_study_minutes=_get_int("BRAINGYM_MAX_STUDY_MINUTES", DEFAULT_MAX_STUDY_MINUTES),
        session_card_limit=_get_int("BRAINGYM_SESSION_CARD_LIMIT", SESSION_CARD_LIMIT),
        notification_limit=_get_int("BRAINGYM_NOTIFICATION_LIMIT", DEFAULT_NOTIFICATION_LIMIT),
        log_level=os.getenv("BRAINGYM_LOG_LEVEL", "WARNING").upper(),
        jokes_enabled=_get_bool("BRAINGYM_JOKES_ENABLED", True),
        voice_enabled=_get_bool("BRAINGYM_VOICE_ENABLED", False),
    )


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
