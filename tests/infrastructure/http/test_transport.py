"""Tests for the retrying raw HTTP sender."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests
from requests import Response

from topcheck.app.config import ClientConfig, SessionState
from topcheck.infrastructure.http import transport as transport_module
from topcheck.errors import TopcheckError, TransportError
from topcheck.infrastructure.http.transport import HttpTransport, basic_auth_header


def _make_response(text: str, status_code: int = 200) -> Response:
    resp = Response()
    resp._content = text.encode("utf-8")
    resp.status_code = status_code
    resp.encoding = "utf-8"
    return resp


def _transport(session: MagicMock | None = None, **server) -> HttpTransport:
    config = ClientConfig.build("login", "password", server or None)
    return HttpTransport(config, SessionState(), session=session)


def test_basic_auth_header() -> None:
    assert basic_auth_header("httplogin", "httppassword") == "Basic aHR0cGxvZ2luOmh0dHBwYXNzd29yZA=="


def test_succeeds_on_third_attempt() -> None:
    session = MagicMock()
    session.request.side_effect = [
        requests.ConnectTimeout("connect timeout"),
        requests.ConnectionError("refused"),
        _make_response('{"status": "SUCCESS"}'),
    ]

    body = _transport(session).post("https://example.test/api/v1/login", "{}")

    assert body == '{"status": "SUCCESS"}'
    assert session.request.call_count == 3
    first, third = session.request.call_args_list[0], session.request.call_args_list[2]
    assert first == third


def test_raises_after_three_failures() -> None:
    session = MagicMock()
    session.request.side_effect = requests.ConnectionError("unreachable")

    with pytest.raises(TransportError) as excinfo:
        _transport(session).post("https://example.test/x", "")

    assert session.request.call_count == 3
    assert excinfo.value.attempts == 3
    assert isinstance(excinfo.value.cause, requests.ConnectionError)


def test_http_error_status_is_not_retried() -> None:
    session = MagicMock()
    session.request.return_value = _make_response('{"status": "ERROR"}', status_code=500)

    body = _transport(session).post("https://example.test/x", "")

    assert body == '{"status": "ERROR"}'
    session.request.assert_called_once()


def test_get_sends_no_body() -> None:
    session = MagicMock()
    session.request.return_value = _make_response("ok")

    assert _transport(session).get("https://example.test/ping") == "ok"
    args, kwargs = session.request.call_args
    assert args == ("GET", "https://example.test/ping")
    assert kwargs["data"] is None


def test_headers_follow_session_state() -> None:
    transport = _transport(host="https://qa", htlogin="a", htpass="b")
    assert transport.build_headers() == {
        "authorization": basic_auth_header("a", "b"),
        "Content-type": "application/json",
    }

    transport.session_state.set("tok")
    assert transport.build_headers()["access-token"] == "tok"

    transport.session_state.clear()
    assert "access-token" not in transport.build_headers()


def test_token_only_headers_without_basic_auth() -> None:
    transport = _transport(host="https://qa", htlogin="only-login")
    transport.session_state.set("tok")

    assert transport.build_headers() == {"access-token": "tok"}


def test_injected_session_is_not_closed() -> None:
    session = MagicMock()
    session.request.return_value = _make_response("ok")

    _transport(session).post("https://example.test/x", "")

    session.close.assert_not_called()


@pytest.mark.parametrize(
    "outcome",
    [_make_response("ok"), requests.ConnectionError("down")],
)
def test_owned_session_is_always_closed(monkeypatch, outcome) -> None:
    owned = MagicMock()
    if isinstance(outcome, BaseException):
        owned.request.side_effect = outcome
    else:
        owned.request.return_value = outcome
    monkeypatch.setattr(transport_module.requests, "Session", lambda: owned)

    try:
        _transport().post("https://example.test/x", "")
    except TransportError:
        pass

    owned.close.assert_called_once()


def test_unexpected_exception_still_closes_owned_session(monkeypatch) -> None:
    owned = MagicMock()
    owned.request.side_effect = RuntimeError("boom")
    monkeypatch.setattr(transport_module.requests, "Session", lambda: owned)

    with pytest.raises(RuntimeError):
        _transport().post("https://example.test/x", "")

    owned.request.assert_called_once()
    owned.close.assert_called_once()


def test_transport_error_is_a_topcheck_error() -> None:
    assert issubclass(TransportError, TopcheckError)
    import topcheck

    assert topcheck.TransportError is TransportError
    assert issubclass(topcheck.PayloadEncodingError, topcheck.TopcheckError)
