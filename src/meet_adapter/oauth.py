"""
OAuth dependency seam.

Connecting users, refreshing tokens and disconnecting are performed by the
platform's OAuth dependency. The adapter only asks for these operations and
names the events the platform fires when they complete.
"""

from abc import ABC, abstractmethod
from typing import Any

USER_CONNECTED_EVENT = "googlemeet:userConnected"
USER_DISCONNECTED_EVENT = "googlemeet:disconnectUser"
REFRESH_TOKEN_EVENT = "googlemeet:refreshToken"


class OAuthDependency(ABC):
    """Operations exposed by the platform OAuth dependency."""

    @abstractmethod
    def connect_user(self, event: str) -> Any:
        """
        Start the authorization flow for the current user.

        Args:
            event: Event triggered once the user has connected
        """
        pass

    @abstractmethod
    def disconnect_user(self, event: str) -> Any:
        """Remove the current user's tokens from storage."""
        pass

    @abstractmethod
    def refresh_token(self, event: str) -> Any:
        """Refresh the stored access token for the current user."""
        pass
