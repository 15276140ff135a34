import logging

import pytest

from braingym.config import Settings, configure_logging, load_settings


ENV_VARS = [
    "BRAINGYM_MAX_STUDY_MINUTES",
    "BRAINGYM_SESSION_CARD_LIMIT",
    "BRAINGYM_NOTIFICATION_LIMIT",
    "BRAINGYM_LOG_LEVEL",
    "BRAINGYM_JOKES_ENABLED",
    "BRAINGYM_VOICE_ENABLED",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # setenv first so teardown also removes values written by load_dotenv
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_defaults():
    assert load_settings(dotenv=False) == Settings()
    settings = Settings()
    assert settings.max_study_minutes == 35
    assert settings.session_card_limit == 20
    assert settings.notification_limit == 80


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("BRAINGYM_MAX_STUDY_MINUTES", "50")
    monkeypatch.setenv("BRAINGYM_SESSION_CARD_LIMIT", "10")
    monkeypatch.setenv("BRAINGYM_LOG_LEVEL", "debug")
    monkeypatch.setenv("BRAINGYM_JOKES_ENABLED", "no")
    monkeypatch.setenv("BRAINGYM_VOICE_ENABLED", "1")

    settings = load_settings(dotenv=False)
    assert settings.max_study_minutes == 50
    assert settings.session_card_limit == 10
    assert settings.log_level == "DEBUG"
    assert settings.jokes_enabled is False
    assert settings.voice_enabled is True


def test_malformed_integer_names_the_variable(monkeypatch):
    monkeypatch.setenv("BRAINGYM_MAX_STUDY_MINUTES", "half an hour")
    with pytest.raises(ValueError, match="BRAINGYM_MAX_STUDY_MINUTES"):
        load_settings(dotenv=False)


def test_malformed_boolean(monkeypatch):
    monkeypatch.setenv("BRAINGYM_VOICE_ENABLED", "maybe")
    with pytest.raises(ValueError, match="BRAINGYM_VOICE_ENABLED"):
        load_settings(dotenv=False)


def test_dotenv_file_is_read(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("BRAINGYM_NOTIFICATION_LIMIT=12\n")
    monkeypatch.chdir(tmp_path)
    assert load_settings().notification_limit == 12


def test_configure_logging_accepts_level(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
    configure_logging(Settings(log_level="INFO"))
    assert calls["level"] == logging.INFO
