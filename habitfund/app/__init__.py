"""Application factory and app-wide configuration."""

from typing import Optional
from uuid import uuid4

from flask import Flask, g, request
from flask_cors import CORS

from habitfund.app.api.routes import api_bp
from habitfund.config import Settings, load_settings
from habitfund.utils.logging import get_logger, set_request_id, setup_logging

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or load_settings()
    setup_logging(settings.log_level)

    app = Flask(__name__)
    app.config["SETTINGS"] = settings

    CORS(
        app,
        resources={r"/api/*": {"origins": list(settings.cors_origins)}},
        supports_credentials=True,
    )

    @app.before_request
    def _assign_request_id() -> None:
        g.request_id = request.headers.get("X-Request-ID") or uuid4().hex
        set_request_id(g.request_id)

    @app.after_request
    def _echo_request_id(response):
        response.headers["X-Request-ID"] = g.get("request_id", "-")
        logger.info("%s %s -> %s", request.method, request.path, response.status_code)
        return response

    @app.teardown_request
    def _clear_request_id(exc: Optional[BaseException]) -> None:
        set_request_id("-")

    app.register_blueprint(api_bp, url_prefix="/api")
    logger.info("app created env=%s origins=%s", settings.env, ",".join(settings.cors_origins))
    return app
