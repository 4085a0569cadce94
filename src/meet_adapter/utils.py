"""
Helpers exposed to package users: dates, configuration access, query
strings, dict merging and webhook signature checks.
"""

import hashlib
import hmac
import json
import logging
from datetime import UTC, date, datetime
from typing import Any

from .config import AdapterConfig

logger = logging.getLogger(__name__)


def from_date_to_timestamp(value: Any) -> dict[str, int] | None:
    """
    Convert a date to an epoch timestamp in milliseconds.

    Args:
        value: Epoch milliseconds, ISO 8601 string, date or datetime.
            Naive values are taken as UTC.

    Returns:
        {"timestamp": <ms>} or None if value is empty

    Raises:
        ValueError: If a string is not a valid ISO 8601 date
    """
    if not value:
        return None

    if isinstance(value, bool):
        raise ValueError(f"Not a date: {value!r}")
    if isinstance(value, (int, float)):
        return {"timestamp": int(value)}

    if isinstance(value, str):
        value = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    elif isinstance(value, date) and not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)

    if not isinstance(value, datetime):
        raise ValueError(f"Not a date: {value!r}")

    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return {"timestamp": int(value.timestamp() * 1000)}


def from_timestamp_to_date(timestamp: int | float) -> datetime:
    """Convert epoch milliseconds to a UTC datetime."""
    return datetime.fromtimestamp(timestamp / 1000, tz=UTC)


def get_configuration(config: AdapterConfig, property: str | None = None) -> Any:
    """
    Read a configuration property.

    Without a property the entire configuration is returned as a JSON string.
    """
    if not property:
        logger.debug("[googlemeet] Get configuration")
        return json.dumps(config.get())
    logger.debug("[googlemeet] Get property: %s", property)
    return config.get(property)


def concat_query(path: str | None, key: str, value: Any) -> str:
    """
    Append a query parameter to a path.

    Values are not URL encoded.
    """
    path = path or ""
    separator = "&" if "?" in path else "?"
    return f"{path}{separator}{key}={value}"


def merge_json(json1: dict[str, Any] | None, json2: dict[str, Any] | None) -> dict[str, Any]:
    """Shallow merge into a new dict; keys from ``json2`` win."""
    result: dict[str, Any] = {}
    result.update(json1 or {})
    result.update(json2 or {})
    return result


def _hmac_matches(body: bytes, signature: str, secret: str, digestmod: Any) -> bool:
    expected = hmac.new(secret.encode(), body, digestmod).hexdigest()
    return hmac.compare_digest(expected.encode(), signature.strip().lower().encode())


def verify_signature(
    body: str | bytes | None,
    signature: str | None,
    signature256: str | None,
    secret: str | None,
) -> bool:
    """
    Verify a webhook body against its HMAC signatures.

    Args:
        body: Raw request body
        signature: HMAC-SHA1 hex digest, optionally prefixed with "sha1="
        signature256: HMAC-SHA256 hex digest, optionally prefixed with "sha256="
        secret: Shared webhook secret

    Returns:
        True if either signature is valid
    """
    logger.info("[googlemeet] Checking signature")
    if not body:
        logger.warning("[googlemeet] The body is null or empty")
        return False

    payload = body.encode() if isinstance(body, str) else body

    verified = bool(
        secret
        and signature
        and _hmac_matches(payload, signature.removeprefix("sha1="), secret, hashlib.sha1)
    )
    if not verified:
        logger.warning("[googlemeet] Invalid signature sha1")

    verified256 = bool(
        secret
        and signature256
        and _hmac_matches(payload, signature256.removeprefix("sha256="), secret, hashlib.sha256)
    )
    if not verified256:
        logger.warning("[googlemeet] Invalid signature sha256")

    return verified or verified256


class Utils:
    """Utility functions bound to an adapter configuration."""

    def __init__(self, config: AdapterConfig) -> None:
        self.config = config

    from_date_to_timestamp = staticmethod(from_date_to_timestamp)
    from_timestamp_to_date = staticmethod(from_timestamp_to_date)
    concat_query = staticmethod(concat_query)
    merge_json = staticmethod(merge_json)

    def get_configuration(self, property: str | None = None) -> Any:
        return get_configuration(self.config, property)

    def verify_signature(
        self,
        body: str | bytes | None,
        signature: str | None,
        signature256: str | None = None,
    ) -> bool:
        """Verify a webhook body with the configured ``webhookSecret``."""
        return verify_signature(body, signature, signature256, self.config.webhook_secret)
