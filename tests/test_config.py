from __future__ import annotations

import pytest

from lottery_api.config import DEFAULT_USER_AGENT, DevelopmentConfig, ProductionConfig, get_config


def test_defaults_without_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("APP_ENV", "CACHE_MAX_AGE_SECONDS", "FETCH_TIMEOUT_SECONDS", "FETCH_MAX_REDIRECTS", "FETCH_USER_AGENT"):
        monkeypatch.delenv(name, raising=False)

    config = get_config()

    assert isinstance(config, DevelopmentConfig)
    assert config.DEBUG is True
    assert config.CACHE_MAX_AGE_SECONDS == 900
    assert config.FETCH_TIMEOUT_SECONDS == 8.0
    assert config.FETCH_MAX_REDIRECTS == 5
    assert config.FETCH_USER_AGENT == DEFAULT_USER_AGENT


def test_environment_set_after_import_is_picked_up(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("CACHE_MAX_AGE_SECONDS", "42")
    monkeypatch.setenv("FETCH_MAX_REDIRECTS", "3")

    config = get_config()

    assert isinstance(config, ProductionConfig)
    assert config.CACHE_MAX_AGE_SECONDS == 42.0
    assert config.FETCH_MAX_REDIRECTS == 3


def test_malformed_numbers_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FETCH_TIMEOUT_SECONDS", "soon")
    monkeypatch.setenv("FETCH_MAX_REDIRECTS", "many")

    config = get_config()

    assert config.FETCH_TIMEOUT_SECONDS == 8.0
    assert config.FETCH_MAX_REDIRECTS == 5
