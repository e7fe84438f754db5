"""Test the configuration module."""

import pytest

from utilkit.config import get_settings


def test_log_level_defaults_to_warning(monkeypatch: pytest.MonkeyPatch) -> None:
    """UTILKIT_LOG_LEVEL should default to WARNING."""
    monkeypatch.delenv("UTILKIT_LOG_LEVEL", raising=False)
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.log_level == "WARNING"


def test_log_level_can_be_overridden_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """UTILKIT_LOG_LEVEL env var should override the default."""
    monkeypatch.setenv("UTILKIT_LOG_LEVEL", "DEBUG")
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.log_level == "DEBUG"
