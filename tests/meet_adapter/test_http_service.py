"""Tests for the options-driven HTTP service."""

from unittest.mock import MagicMock

import pytest
import requests

from meet_adapter.http_service import HttpError, HttpService


def _response(status_code: int = 200, json_body=None, text: str = "", content_type: str = "application/json"):
    resp = MagicMock()
    resp.status_code = status_code
    resp.headers = {"Content-Type": content_type}
    if json_body is not None:
        resp.content = b"x"
        resp.json.return_value = json_body
        resp.text = ""
    else:
        resp.content = text.encode()
        resp.text = text
        resp.json.side_effect = ValueError("no json")
    return resp


@pytest.fixture
def session() -> MagicMock:
    return MagicMock()


@pytest.fixture
def service(session: MagicMock) -> HttpService:
    return HttpService(session=session)


class TestRequest:
    """Tests for HttpService.request."""

    def test_json_body_and_bearer_header(self, service, session) -> None:
        session.request.return_value = _response(json_body={"name": "spaces/abc"})

        result = service.post({
            "url": "https://meet.googleapis.com/v2/spaces",
            "headers": {"Content-Type": "application/json"},
            "body": {"config": {}},
            "authorization": {"type": "oauth2", "accessToken": "tok", "headerPrefix": "Bearer"},
        })

        assert result == {"name": "spaces/abc"}
        method, url = session.request.call_args.args
        kwargs = session.request.call_args.kwargs
        assert method == "POST"
        assert url == "https://meet.googleapis.com/v2/spaces"
        assert kwargs["json"] == {"config": {}}
        assert kwargs["headers"]["Authorization"] == "Bearer tok"
        assert kwargs["timeout"] == 30

    def test_string_body_sent_as_data(self, service, session) -> None:
        session.request.return_value = _response(text="ok", content_type="text/plain")

        result = service.put({"url": "https://x", "body": "raw"})

        assert result == "ok"
        assert session.request.call_args.kwargs["data"] == "raw"
        assert "json" not in session.request.call_args.kwargs

    def test_params_passed_through(self, service, session) -> None:
        session.request.return_value = _response(json_body={})

        service.get({"url": "https://x", "params": {"pageSize": 100}})

        assert session.request.call_args.kwargs["params"] == {"pageSize": 100}

    def test_no_authorization_header_without_token(self, service, session) -> None:
        session.request.return_value = _response(json_body={})

        service.get({"url": "https://x", "authorization": {"type": "oauth2", "accessToken": None}})

        assert "Authorization" not in session.request.call_args.kwargs["headers"]

    def test_empty_body_returns_none(self, service, session) -> None:
        session.request.return_value = _response(status_code=204, text="")

        assert service.delete({"url": "https://x"}) is None

    def test_full_response(self, service, session) -> None:
        session.request.return_value = _response(json_body={"a": 1})

        result = service.head({"url": "https://x", "fullResponse": True})

        assert result["status"] == 200
        assert result["body"] == {"a": 1}
        assert result["headers"]["Content-Type"] == "application/json"

    def test_missing_url_raises(self, service) -> None:
        with pytest.raises(ValueError, match="url"):
            service.get({"path": "/spaces"})


class TestErrors:
    """Tests for HttpError mapping."""

    def test_non_2xx_raises_with_status(self, service, session) -> None:
        session.request.return_value = _response(status_code=401, json_body={"error": "unauthenticated"})

        with pytest.raises(HttpError) as exc_info:
            service.get({"url": "https://x"})

        assert exc_info.value.status == 401
        assert exc_info.value.additional_info["status"] == 401
        assert exc_info.value.additional_info["body"] == {"error": "unauthenticated"}

    def test_transport_error(self, service, session) -> None:
        session.request.side_effect = requests.ConnectionError("boom")

        with pytest.raises(HttpError) as exc_info:
            service.options({"url": "https://x"})

        assert exc_info.value.status is None
        assert exc_info.value.additional_info == {"status": None}
