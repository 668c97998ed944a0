"""Centralized error handlers."""

from __future__ import annotations

import logging

from flask import Flask
from werkzeug.exceptions import HTTPException

from lottery_api.errors import AppError
from lottery_api.utils.responses import fail

logger = logging.getLogger(__name__)


def register_error_handlers(app: Flask) -> None:
    """Map application errors to the JSON error envelope.

    NotSupported -> 404, Unavailable -> 503, anything unexpected -> 500.
    """

    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        if exc.status_code >= 500:
            logger.warning("%s: %s %s", exc.code, exc.message, exc.details or "")
        return fail(exc.code, exc.message, exc.status_code, exc.details)

    @app.errorhandler(HTTPException)
    def _handle_http_exception(exc: HTTPException):
        status = int(getattr(exc, "code", 500) or 500)
        if status == 404:
            return fail("not_found", "Not found", 404)

        return fail(
            "http_error",
            getattr(exc, "description", "HTTP error"),
            status,
            details={"name": getattr(exc, "name", "HTTPException")},
        )

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        logger.exception("Unhandled exception")
        return fail("internal_error", "Failed to fetch lottery data", 500)
