"""Flask application package."""

from __future__ import annotations

from flask import Flask
from dotenv import load_dotenv


def create_app(overrides: dict | None = None) -> Flask:
    """Application factory.

    Args:
        overrides: Config values applied after the environment config (tests).

    Returns:
        Configured Flask application.
    """
    load_dotenv()

    from flask_cors import CORS

    from lottery_api.config import get_config
    from lottery_api.error_handlers import register_error_handlers
    from lottery_api.logging_config import configure_logging
    from lottery_api.routes.health import health_bp
    from lottery_api.routes.lottery import lottery_bp
    from lottery_api.routes.web import web_bp
    from lottery_api.services.extractor import LotteryExtractor
    from lottery_api.services.fetch_client import FetchClient, build_http_session
    from lottery_api.services.lottery_service import LotteryService
    from lottery_api.services.result_cache import ResultCache

    app = Flask(__name__)
    app.config.from_object(get_config())
    if overrides:
        app.config.update(overrides)

    configure_logging(app)
    register_error_handlers(app)
    CORS(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}})

    service = app.config.get("LOTTERY_SERVICE")
    if service is None:
        fetch_client = FetchClient(
            session=build_http_session(app.config["FETCH_USER_AGENT"]),
            timeout_seconds=float(app.config["FETCH_TIMEOUT_SECONDS"]),
            max_redirects=int(app.config["FETCH_MAX_REDIRECTS"]),
        )
        service = LotteryService(
            cache=ResultCache(float(app.config["CACHE_MAX_AGE_SECONDS"])),
            fetch_client=fetch_client,
            extractor=LotteryExtractor(),
        )
    app.extensions["lottery_service"] = service

    app.register_blueprint(health_bp)
    app.register_blueprint(web_bp)
    app.register_blueprint(lottery_bp, url_prefix="/api")

    return app
