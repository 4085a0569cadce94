"""
Token storage seam.

The platform owns token storage; the adapter only reads the access token
saved under the user's installation key. ``InMemoryTokenStorage`` is used
for development and tests.
"""

from abc import ABC, abstractmethod
from typing import Any

from .config import installation_id


def access_token_key(user_id: str) -> str:
    """Storage key of a user's OAuth access token."""
    return f"{installation_id(user_id)} - access_token"


class TokenStorage(ABC):
    """Base class for the platform's key/value storage."""

    @abstractmethod
    def get(self, key: str, decrypt: bool = False) -> Any:
        """
        Read a stored value.

        Args:
            key: Storage key
            decrypt: Whether the value is stored encrypted

        Returns:
            The value, or None if the key is unknown
        """
        pass

    @abstractmethod
    def put(self, key: str, value: Any) -> None:
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        pass


class InMemoryTokenStorage(TokenStorage):
    """Dict-backed storage (dev only, not shared across processes)."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = dict(initial or {})

    def get(self, key: str, decrypt: bool = False) -> Any:
        return self._values.get(key)

    def put(self, key: str, value: Any) -> None:
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)
