"""
Google Meet Adapter Service
Flask application that receives Google Meet webhooks and republishes them as
package events.
"""

import logging
import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from meet_adapter.app import create_app
from meet_adapter.events import WEBHOOK_EVENT

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = create_app()


def log_webhook(event_data: dict) -> None:
    logger.info("[googlemeet] Webhook event params: %s", event_data.get("params"))


app.extensions["googlemeet_events"].subscribe(WEBHOOK_EVENT, log_webhook)


if __name__ == '__main__':
    port = int(os.getenv("PORT", 8080))
    debug = os.getenv("DEBUG", "false").lower() == "true"

    logger.info("Starting Google Meet adapter on port %s", port)

    app.run(host='0.0.0.0', port=port, debug=debug)
