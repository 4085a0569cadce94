"""
Google Meet REST API client wrapper.

Exposes the HTTP verbs pre-wired with the configured API base URL, a JSON
content type and the user's OAuth bearer token. Every verb is wrapped so an
HTTP 401 triggers a token refresh through the platform OAuth dependency and
a single retry.

API docs: https://developers.google.com/workspace/meet/api/guides/overview
"""

import logging
from collections.abc import Callable
from typing import Any

from .config import AdapterConfig
from .http_service import HTTP_METHODS, HttpError, HttpService
from .oauth import (
    REFRESH_TOKEN_EVENT,
    USER_CONNECTED_EVENT,
    USER_DISCONNECTED_EVENT,
    OAuthDependency,
)
from .storage import TokenStorage, access_token_key
from .utils import Utils, merge_json

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}

RequestFn = Callable[[dict[str, Any]], Any]

REQUEST_FORMAT_KEYS = ("path", "params", "body")


def _is_set(value: Any) -> bool:
    """Empty dicts and lists still count as set, so ``{"body": {}}`` is a request."""
    return isinstance(value, (dict, list)) or bool(value)


def check_http_options(path: Any, options: Any = None) -> dict[str, Any]:
    """
    Normalize the (path, options) pair accepted by the verb functions.

    - A dict passed as ``path`` is used as the options.
    - Options already in request format (with ``path``, ``params`` or
      ``body``) get the path set.
    - Anything else passed as options becomes the request body.

    Args:
        path: API path relative to the base URL, or a full options dict
        options: Request options or a request body

    Returns:
        A new request options dict
    """
    if not path:
        return dict(options) if isinstance(options, dict) else {}

    if isinstance(path, dict):
        return dict(path)

    if isinstance(options, dict) and any(
        _is_set(options.get(key)) for key in REQUEST_FORMAT_KEYS
    ):
        return {**options, "path": path}

    if options:
        return {"path": path, "body": options}
    return {"path": path}


class GoogleMeetClient:
    """
    HTTP verb surface for the Google Meet API.

    Token storage and refresh belong to the platform; the client reads the
    current token from storage on every request.
    """

    def __init__(
        self,
        config: AdapterConfig,
        oauth: OAuthDependency,
        storage: TokenStorage,
        user_id: str,
        http: HttpService | None = None,
    ) -> None:
        self.config = config
        self.oauth = oauth
        self.storage = storage
        self.user_id = user_id
        self.http = http or HttpService()
        self.utils = Utils(config)

        self._http_service: dict[str, RequestFn] = {
            verb: self._create_wrapper_function(getattr(self.http, verb))
            for verb in HTTP_METHODS
        }

    # -----------------------------------------------------------------------
    # Access token
    # -----------------------------------------------------------------------

    def get_access_token(self) -> Any:
        """Ask the OAuth dependency to connect the current user."""
        logger.info("[googlemeet] Getting access token from oauth")
        return self.oauth.connect_user(USER_CONNECTED_EVENT)

    def remove_access_token(self) -> Any:
        """Ask the OAuth dependency to drop the current user's token."""
        logger.info("[googlemeet] Removing access token from oauth")
        return self.oauth.disconnect_user(USER_DISCONNECTED_EVENT)

    # -----------------------------------------------------------------------
    # Public API - generic functions
    # -----------------------------------------------------------------------

    def get(self, path: Any, http_options: Any = None, callback_data: Any = None,
            callbacks: dict[str, Callable] | None = None) -> Any:
        """
        Send a GET request.

        Args:
            path: Path relative to the API base URL, or a full options dict
            http_options: Request options (headers, params, body...) or a body
            callback_data: Passed through to the callbacks
            callbacks: Optional "success"/"fail" callables

        Returns:
            The decoded response
        """
        return self._send("get", path, http_options, callback_data, callbacks)

    def post(self, path: Any, http_options: Any = None, callback_data: Any = None,
             callbacks: dict[str, Callable] | None = None) -> Any:
        """Send a POST request. See ``get`` for the arguments."""
        return self._send("post", path, http_options, callback_data, callbacks)

    def put(self, path: Any, http_options: Any = None, callback_data: Any = None,
            callbacks: dict[str, Callable] | None = None) -> Any:
        """Send a PUT request. See ``get`` for the arguments."""
        return self._send("put", path, http_options, callback_data, callbacks)

    def patch(self, path: Any, http_options: Any = None, callback_data: Any = None,
              callbacks: dict[str, Callable] | None = None) -> Any:
        """Send a PATCH request. See ``get`` for the arguments."""
        return self._send("patch", path, http_options, callback_data, callbacks)

    def delete(self, path: Any, http_options: Any = None, callback_data: Any = None,
               callbacks: dict[str, Callable] | None = None) -> Any:
        """Send a DELETE request. See ``get`` for the arguments."""
        return self._send("delete", path, http_options, callback_data, callbacks)

    def head(self, path: Any, http_options: Any = None, callback_data: Any = None,
             callbacks: dict[str, Callable] | None = None) -> Any:
        """Send a HEAD request. See ``get`` for the arguments."""
        return self._send("head", path, http_options, callback_data, callbacks)

    def options(self, path: Any, http_options: Any = None, callback_data: Any = None,
                callbacks: dict[str, Callable] | None = None) -> Any:
        """Send an OPTIONS request. See ``get`` for the arguments."""
        return self._send("options", path, http_options, callback_data, callbacks)

    # -----------------------------------------------------------------------
    # Request dispatch
    # -----------------------------------------------------------------------

    def _send(
        self,
        verb: str,
        path: Any,
        http_options: Any,
        callback_data: Any,
        callbacks: dict[str, Callable] | None,
    ) -> Any:
        options = check_http_options(path, http_options)
        request_fn = self._http_service[verb]

        try:
            response = request_fn(self._google_meet(options))
        except HttpError as e:
            fail = (callbacks or {}).get("fail")
            if fail is None:
                raise
            fail(e, callback_data)
            return None

        success = (callbacks or {}).get("success")
        if success is not None:
            success(response, callback_data)
        return response

    def _create_wrapper_function(self, request_fn: RequestFn) -> RequestFn:
        def wrapper(options: dict[str, Any]) -> Any:
            return self._handle_request_with_retry(request_fn, options)

        return wrapper

    def _handle_request_with_retry(self, request_fn: RequestFn, options: dict[str, Any]) -> Any:
        """
        Run a request, refreshing the token and retrying once on HTTP 401.

        Raises:
            HttpError: If the request fails with any other status, or the
                retry fails too
        """
        try:
            return request_fn(options)
        except HttpError as e:
            logger.info("[googlemeet] Handling request error: %s (status %s)", e, e.status)
            if e.status != 401:
                raise

            if not self.config.is_oauth:
                logger.warning(
                    "[googlemeet] Got 401 with authentication method %r, refreshing through oauth",
                    self.config.authentication_method,
                )
            self.oauth.refresh_token(REFRESH_TOKEN_EVENT)
            return request_fn(self._set_authorization(options))

    # -----------------------------------------------------------------------
    # Request shaping
    # -----------------------------------------------------------------------

    def _google_meet(self, options: dict[str, Any]) -> dict[str, Any]:
        options = self._set_api_uri(options)
        options = self._set_request_headers(options)
        options = self._set_authorization(options)
        return options

    def _set_api_uri(self, options: dict[str, Any]) -> dict[str, Any]:
        path = options.get("path") or ""
        options["url"] = f"{self.config.api_base_url}{path}"
        logger.debug("[googlemeet] Set url: %s -> %s", path, options["url"])
        return options

    def _set_request_headers(self, options: dict[str, Any]) -> dict[str, Any]:
        options["headers"] = merge_json(options.get("headers"), JSON_HEADERS)
        return options

    def _set_authorization(self, options: dict[str, Any]) -> dict[str, Any]:
        logger.debug("[googlemeet] Setting authorization for user %s", self.user_id)
        access_token = self.storage.get(access_token_key(self.user_id), decrypt=True)
        options["authorization"] = merge_json(
            options.get("authorization"),
            {
                "type": "oauth2",
                "accessToken": access_token,
                "headerPrefix": "Bearer",
            },
        )
        return options
