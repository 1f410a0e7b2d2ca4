"""Raw HTTP sender for the TopCheck API.

Issues a single request with bounded retries on transport failures. The body
of any completed exchange is handed back undecoded whatever its HTTP status;
only connection problems and timeouts are retried.
"""

from __future__ import annotations

import base64
from contextlib import contextmanager
from typing import Iterator

import requests
from requests import Session

from topcheck.app.config import ClientConfig, SessionState
from topcheck.errors import TransportError
from topcheck.infrastructure.observability.logging import get_logger

logger = get_logger(__name__)

DEFAULT_ATTEMPTS = 3
# (connect, read) in seconds
DEFAULT_TIMEOUT: tuple[float, float] = (10.0, 10.0)


def basic_auth_header(login: str, password: str) -> str:
    """Return the ``Basic`` authorization value for ``login:password``."""
    raw = f"{login}:{password}".encode("utf-8")
    return "Basic " + base64.b64encode(raw).decode("ascii")


class HttpTransport:
    """Sends requests on behalf of one client instance.

    Reads the access token from the shared :class:`SessionState` at send time,
    so a token cleared by the client is never attached afterwards.
    """

    def __init__(
        self,
        config: ClientConfig,
        session_state: SessionState,
        *,
        session: Session | None = None,
        attempts: int = DEFAULT_ATTEMPTS,
        timeout: tuple[float, float] = DEFAULT_TIMEOUT,
    ) -> None:
        self.config = config
        self.session_state = session_state
        self.attempts = attempts
        self.timeout = timeout
        self._session = session

    @contextmanager
    def _open_session(self) -> Iterator[Session]:
        """Yield an HTTP session, closing it on exit unless it was injected."""
        if self._session is not None:
            yield self._session
            return
        session = requests.Session()
        try:
            yield session
        finally:
            session.close()

    def build_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {}
        basic_auth = self.config.basic_auth
        if basic_auth is not None:
            headers["authorization"] = basic_auth_header(*basic_auth)
            headers["Content-type"] = "application/json"
        if self.session_state.token is not None:
            headers["access-token"] = self.session_state.token
        return headers

    def post(self, url: str, body: str) -> str:
        """POST ``body`` to ``url`` and return the raw response text.

        Raises:
            TransportError: If all attempts failed at the transport level.
        """
        return self._send("POST", url, body)

    def get(self, url: str) -> str:
        """GET ``url`` and return the raw response text.

        Raises:
            TransportError: If all attempts failed at the transport level.
        """
        return self._send("GET", url, None)

    def _send(self, method: str, url: str, body: str | None) -> str:
        headers = self.build_headers()
        verify = not self.config.server_test
        last_exc: BaseException | None = None
        with self._open_session() as session:
            for attempt in range(1, self.attempts + 1):
                try:
                    response = session.request(
                        method,
                        url,
                        data=body,
                        headers=headers,
                        timeout=self.timeout,
                        verify=verify,
                    )
                except requests.RequestException as exc:
                    last_exc = exc
                    logger.warning(
                        "%s %s attempt %d/%d failed: %s",
                        method, url, attempt, self.attempts, exc,
                    )
                    continue
                logger.debug(
                    "%s %s -> %s (attempt %d)", method, url, response.status_code, attempt
                )
                return response.text
        logger.error("%s %s gave up after %d attempts", method, url, self.attempts)
        raise TransportError(method, url, self.attempts, last_exc)


__all__ = [
    "DEFAULT_ATTEMPTS",
    "DEFAULT_TIMEOUT",
    "HttpTransport",
    "basic_auth_header",
]
