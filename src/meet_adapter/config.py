"""
Configuration for the Google Meet adapter.

Settings use the same names the automation platform exposes to the package,
so they can be passed straight through as overrides.

Environment variables:
    GOOGLE_MEET_AUTHENTICATION_METHOD: "oAuth2" (default)
    GOOGLE_MEET_CLIENT_ID: OAuth 2.0 client ID
    GOOGLE_MEET_CLIENT_SECRET: OAuth 2.0 client secret
    GOOGLE_MEET_AUTH_SCOPES: Space separated OAuth scopes
    GOOGLE_MEET_OAUTH_CALLBACK: OAuth redirect URI registered with Google
    GOOGLE_MEET_API_BASE_URL: Meet REST API root (default: v2 endpoint)
    GOOGLE_MEET_WEBHOOK_SECRET: Shared secret for webhook signatures
"""

import os
from typing import Any

GOOGLE_AUTH_URL = "https://accounts.google.com/o/oauth2/auth"
GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
DEFAULT_API_BASE_URL = "https://meet.googleapis.com/v2"

OAUTH2_METHOD = "oAuth2"
OAUTH_METHODS = ("oauth2", "oauth")

# Default OAuth scopes for the Meet REST API
GOOGLE_MEET_SCOPES = [
    "https://www.googleapis.com/auth/meetings.space.created",
    "https://www.googleapis.com/auth/meetings.space.readonly",
]

# Configuration key -> environment variable
_ENV_KEYS = {
    "authenticationMethod": "GOOGLE_MEET_AUTHENTICATION_METHOD",
    "clientId": "GOOGLE_MEET_CLIENT_ID",
    "clientSecret": "GOOGLE_MEET_CLIENT_SECRET",
    "authScopes": "GOOGLE_MEET_AUTH_SCOPES",
    "oauthCallback": "GOOGLE_MEET_OAUTH_CALLBACK",
    "GOOGLE_MEET_API_BASE_URL": "GOOGLE_MEET_API_BASE_URL",
    "webhookSecret": "GOOGLE_MEET_WEBHOOK_SECRET",
}

_DEFAULTS = {
    "authenticationMethod": OAUTH2_METHOD,
    "authScopes": " ".join(GOOGLE_MEET_SCOPES),
    "GOOGLE_MEET_API_BASE_URL": DEFAULT_API_BASE_URL,
}

_SECRET_KEYS = ("clientSecret", "webhookSecret")


def installation_id(user_id: str) -> str:
    """Identifier the platform uses for a user's OAuth installation."""
    return f"installationInfo-googlemeet-User-{user_id}"


class AdapterConfig:
    """
    Key/value settings for the adapter.

    Values come from the environment, explicit overrides win. The object is
    built once and read throughout the adapter through ``get``.
    """

    def __init__(self, overrides: dict[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = {}
        for key, env_name in _ENV_KEYS.items():
            self._values[key] = os.getenv(env_name, _DEFAULTS.get(key, ""))

        if overrides:
            self._values.update(overrides)

    def get(self, property: str | None = None) -> Any:
        """
        Read a configuration value.

        Args:
            property: Name of the setting. When empty, the whole
                configuration is returned.

        Returns:
            The value (None if unknown), or a copy of all settings
        """
        if not property:
            return dict(self._values)
        return self._values.get(property)

    def set(self, property: str, value: Any) -> None:
        self._values[property] = value

    @property
    def authentication_method(self) -> str:
        return self._values.get("authenticationMethod") or ""

    @property
    def is_oauth(self) -> bool:
        """True when requests are authorized with OAuth tokens."""
        return self.authentication_method.lower() in OAUTH_METHODS

    @property
    def api_base_url(self) -> str:
        return self._values.get("GOOGLE_MEET_API_BASE_URL") or ""

    @property
    def webhook_secret(self) -> str:
        return self._values.get("webhookSecret") or ""

    def validate(self) -> list[str]:
        """
        Validate configuration and return list of errors.

        Returns:
            List of error strings (empty if valid)
        """
        errors = []

        if self.is_oauth:
            if not self._values.get("clientId"):
                errors.append("GOOGLE_MEET_CLIENT_ID is required")
            if not self._values.get("clientSecret"):
                errors.append("GOOGLE_MEET_CLIENT_SECRET is required")
        if not self.api_base_url:
            errors.append("GOOGLE_MEET_API_BASE_URL is required")

        return errors

    def to_dict(self) -> dict[str, Any]:
        """Return safe (no secrets) configuration summary."""
        summary = {
            key: value
            for key, value in self._values.items()
            if key not in _SECRET_KEYS and key != "oauth"
        }
        summary["clientId"] = "***" if self._values.get("clientId") else ""
        summary["webhookSecretConfigured"] = bool(self.webhook_secret)
        return summary

    def build(self, user_id: str) -> "AdapterConfig":
        """Apply the configuration builder for the given platform user."""
        build_configuration(self._values, user_id)
        return self


def build_configuration(config: dict[str, Any], user_id: str) -> dict[str, Any]:
    """
    Add the ``oauth`` block consumed by the platform OAuth dependency.

    Only the ``oAuth2`` authentication method gets the block; any other
    configuration is returned untouched.

    Args:
        config: Package configuration (modified in place)
        user_id: Current platform user ID

    Returns:
        The same configuration dict
    """
    if config.get("authenticationMethod") == OAUTH2_METHOD:
        config["oauth"] = {
            "id": installation_id(user_id),
            "authUrl": GOOGLE_AUTH_URL,
            "accessTokenUrl": GOOGLE_TOKEN_URL,
            "clientId": config.get("clientId"),
            "clientSecret": config.get("clientSecret"),
            "scope": config.get("authScopes"),
            "oauthCallback": config.get("oauthCallback"),
        }
    return config


# Singleton instance
_config: AdapterConfig | None = None


def get_adapter_config() -> AdapterConfig:
    """Get the adapter config singleton."""
    global _config
    if _config is None:
        _config = AdapterConfig()
    return _config


def reset_adapter_config() -> None:
    """Drop the cached singleton so the next read picks up the environment."""
    global _config
    _config = None
