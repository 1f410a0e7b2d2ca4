"""Configuration utilities for the TopCheck API client.

Provides the immutable client configuration, the per-client session state and
a helper for loading configuration from JSON files.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping

PRODUCTION_HOST = "https://topcheck.com.ng"
API_PATH = "/api/v1/"


@dataclass(frozen=True)
class ClientConfig:
    """Credentials and target server for one client instance.

    ``server_test`` is True iff an alternate host was supplied. The basic-auth
    pair is only set in test mode, and only when both parts were given.
    """

    login: str
    password: str
    base_url: str = PRODUCTION_HOST
    server_test: bool = False
    ht_login: str | None = None
    ht_pass: str | None = None

    @classmethod
    def build(
        cls,
        login: str,
        password: str,
        test_server: Mapping[str, Any] | None = None,
    ) -> "ClientConfig":
        """Create a configuration from credentials and an optional test-server descriptor.

        Args:
            login: The login for the TopCheck API server.
            password: The password for the TopCheck API server.
            test_server: Optional mapping with ``host`` (full address including
                protocol) and the optional ``htlogin``/``htpass`` basic-auth pair.
                The production server is used when it is missing, empty or has
                no ``host``.
        """
        if not isinstance(test_server, Mapping) or test_server.get("host") is None:
            return cls(login=login, password=password)

        ht_login = test_server.get("htlogin")
        ht_pass = test_server.get("htpass")
        if ht_login is None or ht_pass is None:
            ht_login = ht_pass = None
        return cls(
            login=login,
            password=password,
            base_url=test_server["host"],
            server_test=True,
            ht_login=ht_login,
            ht_pass=ht_pass,
        )

    @property
    def api_url(self) -> str:
        """Base path every endpoint is resolved against: ``<host>/api/v1/``."""
        return f"{self.base_url}{API_PATH}"

    @property
    def basic_auth(self) -> tuple[str, str] | None:
        if self.ht_login is None or self.ht_pass is None:
            return None
        return self.ht_login, self.ht_pass

    def __repr__(self) -> str:
        # Password and basic-auth values are omitted.
        return (
            f"ClientConfig(login={self.login!r}, base_url={self.base_url!r}, "
            f"server_test={self.server_test!r}, basic_auth={self.basic_auth is not None!r})"
        )


@dataclass
class SessionState:
    """Holds the access token granted by the server, if any."""

    token: str | None = None

    @property
    def has_token(self) -> bool:
        return self.token is not None

    def set(self, token: str | None) -> None:
        self.token = token

    def clear(self) -> None:
        self.token = None

    def __repr__(self) -> str:
        return f"SessionState(has_token={self.has_token!r})"


def load_config(path: str | Path) -> Dict[str, Any]:
    """Load configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file.

    Returns:
        A dictionary of configuration values.
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


__all__ = [
    "API_PATH",
    "ClientConfig",
    "PRODUCTION_HOST",
    "SessionState",
    "load_config",
]
