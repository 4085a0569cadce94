"""
Google Meet integration adapter.

Provides a pre-authorized HTTP verb surface for the Meet REST API, a webhook
listener that republishes Meet events, and helper utilities.
"""

from .client import GoogleMeetClient, check_http_options
from .config import AdapterConfig, build_configuration, get_adapter_config
from .events import WEBHOOK_EVENT, EventDispatcher
from .http_service import HttpError, HttpService
from .oauth import OAuthDependency
from .storage import InMemoryTokenStorage, TokenStorage, access_token_key

__all__ = [
    "AdapterConfig",
    "EventDispatcher",
    "GoogleMeetClient",
    "HttpError",
    "HttpService",
    "InMemoryTokenStorage",
    "OAuthDependency",
    "TokenStorage",
    "WEBHOOK_EVENT",
    "access_token_key",
    "build_configuration",
    "check_http_options",
    "get_adapter_config",
]
