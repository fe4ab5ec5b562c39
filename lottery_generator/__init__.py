"""Flask application package."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from flask import Flask

try:
    from dotenv import load_dotenv
except Exception:  # pragma: no cover
    load_dotenv = None  # type: ignore[assignment]

def create_app(overrides: Mapping[str, Any] | None = None) -> Flask:
    """Application factory.

    Args:
        overrides: Config values applied after the environment config
            (tests use this for RNG_SEED, MAX_BOARD_TICKETS and friends).

    Returns:
        Configured Flask application.
    """
    if load_dotenv is not None:
        load_dotenv()

    from lottery_generator.config import get_config
    from lottery_generator.error_handlers import register_error_handlers
    from lottery_generator.logging_config import configure_logging
    from lottery_generator.routes.health import health_bp
    from lottery_generator.routes.tickets import tickets_bp
    from lottery_generator.routes.web import web_bp
    from lottery_generator.services.random_source import create_random_source
    from lottery_generator.services.ticket_service import TicketService

    app = Flask(__name__)
    app.config.from_object(get_config())
    if overrides:
        app.config.update(overrides)

    configure_logging(app)
    register_error_handlers(app)

    source = app.config.get("RANDOM_SOURCE") or create_random_source(app.config.get("RNG_SEED"))
    app.extensions["ticket_service"] = TicketService(source)

    app.register_blueprint(health_bp)
    app.register_blueprint(web_bp)
    app.register_blueprint(tickets_bp, url_prefix="/api")

    return app
