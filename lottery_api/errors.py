"""Custom exceptions for centralized error handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class AppError(Exception):
    """Base application error."""

    code: str
    message: str
    status_code: int
    details: Any | None = None


class NotSupportedError(AppError):
    """Lottery identifier has no mapped source."""

    def __init__(self, message: str = "Lottery not supported", details: Any | None = None) -> None:
        super().__init__(code="not_supported", message=message, status_code=404, details=details)


class UnavailableError(AppError):
    """Every mapped source failed for this request."""

    def __init__(self, message: str = "Lottery data temporarily unavailable", details: Any | None = None) -> None:
        super().__init__(code="unavailable", message=message, status_code=503, details=details)


class FetchError(Exception):
    """A single source attempt failed at the transport/HTTP level."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(f"{message} ({url})")
        self.url = url


class TransportError(FetchError):
    """Connection, TLS or protocol failure."""


class FetchTimeout(FetchError):
    """The request did not finish within its time budget."""


class HttpStatusError(FetchError):
    """Terminal response was not 2xx."""

    def __init__(self, url: str, status_code: int) -> None:
        super().__init__(url, f"Unexpected HTTP status {status_code}")
        self.status_code = status_code


class TooManyRedirects(FetchError):
    """Redirect chain exceeded the hop limit."""


class ExtractionError(Exception):
    """Unexpected fault while extracting fields from a document."""
