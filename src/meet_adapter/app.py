"""Flask application factory for the Google Meet adapter."""

import logging

from flask import Flask, jsonify

from .config import AdapterConfig, get_adapter_config
from .events import EventDispatcher
from .webhook import webhook_bp

logger = logging.getLogger(__name__)


def create_app(
    config: AdapterConfig | None = None,
    dispatcher: EventDispatcher | None = None,
) -> Flask:
    """
    Build the adapter's Flask application.

    Args:
        config: Adapter configuration (defaults to the environment singleton)
        dispatcher: Event dispatcher webhooks are republished on

    Returns:
        Configured Flask app
    """
    config = config or get_adapter_config()

    errors = config.validate()
    for error in errors:
        logger.warning("[googlemeet] Configuration: %s", error)

    app = Flask(__name__)
    app.extensions["googlemeet_config"] = config
    app.extensions["googlemeet_events"] = dispatcher or EventDispatcher()
    app.register_blueprint(webhook_bp)

    @app.route("/health")
    def health():
        return jsonify({"status": "healthy", "config": config.to_dict()})

    return app
