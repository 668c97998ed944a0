"""Environment-based configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Callable


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
)


def _env(name: str, default: Any, cast: Callable[[str], Any] = str) -> Any:
    """Config field read from the environment when the config is built.

    Malformed values fall back to ``default``.
    """

    def read() -> Any:
        raw = os.getenv(name)
        if not raw:
            return default
        try:
            return cast(raw)
        except ValueError:
            return default

    return field(default_factory=read)


@dataclass(frozen=True)
class BaseConfig:
    """Base configuration shared by all environments."""

    APP_ENV: str = _env("APP_ENV", "development")
    LOG_LEVEL: str = _env("LOG_LEVEL", "INFO")

    # Result cache freshness window (seconds).
    CACHE_MAX_AGE_SECONDS: float = _env("CACHE_MAX_AGE_SECONDS", 15 * 60, float)

    # Upstream fetching
    FETCH_TIMEOUT_SECONDS: float = _env("FETCH_TIMEOUT_SECONDS", 8.0, float)
    FETCH_MAX_REDIRECTS: int = _env("FETCH_MAX_REDIRECTS", 5, int)
    FETCH_USER_AGENT: str = _env("FETCH_USER_AGENT", DEFAULT_USER_AGENT)

    CORS_ORIGINS: str = _env("CORS_ORIGINS", "*")


@dataclass(frozen=True)
class DevelopmentConfig(BaseConfig):
    """Development configuration."""

    DEBUG: bool = True


@dataclass(frozen=True)
class ProductionConfig(BaseConfig):
    """Production configuration."""

    DEBUG: bool = False


def get_config() -> BaseConfig:
    """Build the configuration for APP_ENV from the current environment."""

    env = os.getenv("APP_ENV", "development").lower().strip()
    if env == "production":
        return ProductionConfig()
    return DevelopmentConfig()
