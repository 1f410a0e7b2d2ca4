"""Tests for client configuration and session state."""

import json

from topcheck.app.config import ClientConfig, SessionState, load_config


def test_production_when_no_descriptor() -> None:
    for descriptor in (None, {}, {"htlogin": "a", "htpass": "b"}, {"host": None}):
        config = ClientConfig.build("l", "p", descriptor)
        assert config.server_test is False
        assert config.api_url == "https://topcheck.com.ng/api/v1/"
        assert config.basic_auth is None


def test_test_server_with_basic_auth() -> None:
    config = ClientConfig.build(
        "l", "p", {"host": "https://qa.example", "htlogin": "u", "htpass": "pw"}
    )
    assert config.server_test is True
    assert config.api_url == "https://qa.example/api/v1/"
    assert config.basic_auth == ("u", "pw")


def test_basic_auth_needs_both_parts() -> None:
    config = ClientConfig.build("l", "p", {"host": "https://qa", "htpass": "pw"})
    assert config.server_test is True
    assert config.basic_auth is None
    assert config.ht_pass is None


def test_repr_hides_secrets() -> None:
    config = ClientConfig.build("l", "hunter2", {"host": "https://qa", "htlogin": "u", "htpass": "pw"})
    assert "hunter2" not in repr(config)
    assert "pw" not in repr(config)


def test_session_state_lifecycle() -> None:
    state = SessionState()
    assert not state.has_token
    state.set("abc")
    assert state.token == "abc"
    assert "abc" not in repr(state)
    state.clear()
    assert state.token is None


def test_load_config(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"login": "x"}), encoding="utf-8")
    assert load_config(path) == {"login": "x"}
