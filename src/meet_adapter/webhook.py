"""
Flask listener for Google Meet webhooks.

Provides:
- /googlemeet - Catch HTTP Google Meet events and republish them as the
  "googlemeet:webhook" event
"""

import logging
from typing import Any

from flask import Blueprint, current_app, jsonify, request

from .events import WEBHOOK_EVENT, EventDispatcher

logger = logging.getLogger(__name__)

WEBHOOK_PATH = "/googlemeet"
WEBHOOK_LABEL = "Catch HTTP Google Meet events"

webhook_bp = Blueprint("googlemeet_webhook", __name__)


def build_event_data() -> dict[str, Any]:
    """Collect the current request into webhook event data."""
    # Signatures are computed over the exact bytes received
    raw_body = request.get_data()
    body = request.get_json(silent=True)
    if body is None:
        body = raw_body.decode("utf-8", errors="replace")

    return {
        "body": body,
        "params": request.args.to_dict(),
        "headers": dict(request.headers),
        "rawBody": raw_body,
    }


@webhook_bp.route(WEBHOOK_PATH, methods=["POST"])
def google_meet_webhook():
    """Catch HTTP Google Meet events."""
    dispatcher: EventDispatcher = current_app.extensions["googlemeet_events"]

    event_data = build_event_data()
    logger.info(
        "[googlemeet] %s: received Google Meet webhook. Processing and triggering a package event.",
        WEBHOOK_LABEL,
    )
    logger.debug("[googlemeet] Webhook event: %s", event_data["body"])

    dispatcher.trigger_event(WEBHOOK_EVENT, event_data)
    return jsonify({"status": "ok"}), 200
