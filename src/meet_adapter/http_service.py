"""
HTTP service used by the adapter to reach Google APIs.

Requests are described with a plain options dict:

    {
        "url": "https://meet.googleapis.com/v2/spaces",
        "headers": {"Content-Type": "application/json"},
        "params": {"pageSize": 100},
        "body": {...},
        "authorization": {
            "type": "oauth2",
            "accessToken": "...",
            "headerPrefix": "Bearer"
        },
        "fullResponse": False,
        "timeout": 30
    }
"""

import logging
from typing import Any

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30

HTTP_METHODS = ("get", "post", "put", "patch", "delete", "head", "options")


class HttpError(Exception):
    """Raised when a request fails or returns a non-2xx status."""

    def __init__(
        self,
        message: str,
        status: int | None = None,
        additional_info: dict[str, Any] | None = None,
        response: requests.Response | None = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.additional_info = additional_info or {"status": status}
        self.response = response


class HttpService:
    """Dispatches request option dicts through a ``requests`` session."""

    def __init__(self, session: requests.Session | None = None) -> None:
        self.session = session or requests.Session()

    def request(self, method: str, options: dict[str, Any]) -> Any:
        """
        Send a request described by an options dict.

        Args:
            method: HTTP verb (case-insensitive)
            options: Request options, see module docstring

        Returns:
            Decoded response body, or a dict with status, headers and body
            when ``fullResponse`` is set

        Raises:
            HttpError: If the request fails or the status is not 2xx
        """
        method = method.upper()
        url = options.get("url")
        if not url:
            raise ValueError("Request options must contain a 'url'")

        headers = dict(options.get("headers") or {})
        auth_header = _authorization_header(options.get("authorization"))
        if auth_header:
            headers["Authorization"] = auth_header

        kwargs: dict[str, Any] = {
            "headers": headers,
            "params": options.get("params"),
            "timeout": options.get("timeout", DEFAULT_TIMEOUT),
        }
        body = options.get("body")
        if isinstance(body, (dict, list)):
            kwargs["json"] = body
        elif body is not None:
            kwargs["data"] = body

        try:
            resp = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            raise HttpError(f"{method} {url} failed: {e}") from e

        if not 200 <= resp.status_code < 300:
            raise HttpError(
                f"{method} {url} returned {resp.status_code}",
                status=resp.status_code,
                additional_info={
                    "status": resp.status_code,
                    "headers": dict(resp.headers),
                    "body": _decode_body(resp),
                },
                response=resp,
            )

        if options.get("fullResponse"):
            return {
                "status": resp.status_code,
                "headers": dict(resp.headers),
                "body": _decode_body(resp),
            }
        return _decode_body(resp)

    def get(self, options: dict[str, Any]) -> Any:
        return self.request("GET", options)

    def post(self, options: dict[str, Any]) -> Any:
        return self.request("POST", options)

    def put(self, options: dict[str, Any]) -> Any:
        return self.request("PUT", options)

    def patch(self, options: dict[str, Any]) -> Any:
        return self.request("PATCH", options)

    def delete(self, options: dict[str, Any]) -> Any:
        return self.request("DELETE", options)

    def head(self, options: dict[str, Any]) -> Any:
        return self.request("HEAD", options)

    def options(self, options: dict[str, Any]) -> Any:
        return self.request("OPTIONS", options)


def _authorization_header(authorization: dict[str, Any] | None) -> str | None:
    if not authorization or authorization.get("type") != "oauth2":
        return None
    token = authorization.get("accessToken")
    if not token:
        return None
    prefix = authorization.get("headerPrefix") or "Bearer"
    return f"{prefix} {token}"


def _decode_body(resp: requests.Response) -> Any:
    if not resp.content:
        return None
    content_type = resp.headers.get("Content-Type", "")
    if "json" in content_type:
        try:
            return resp.json()
        except ValueError:
            logger.debug("[googlemeet] Response declared JSON but did not parse", exc_info=True)
    return resp.text
