"""HTTP client with token session handling for the TopCheck loans API.

This module centralises communication with the TopCheck RESTful API server. It
logs in with the client's credentials on demand, attaches the granted access
token to every loan request and recovers once from a server-side token
rejection. Every public method returns an :class:`ApiResponse`; transport
failures and invalid input are reported as error envelopes, never raised.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from requests import Session

from topcheck.app.config import ClientConfig, SessionState, load_config
from topcheck.errors import PayloadEncodingError, TransportError
from topcheck.infrastructure.http.transport import HttpTransport
from topcheck.infrastructure.observability.logging import (
    get_logger,
    log_context,
    log_exception,
)
from topcheck.services.dto import ConversionPayload, Payload, StatusPayload, encode_payload
from topcheck.services.envelopes import (
    INTERNAL_EMPTY_TCID,
    INTERNAL_UNABLE_TO_LOGIN,
    INTERNAL_UNABLE_TO_SEND,
    ApiResponse,
)

logger = get_logger(__name__)


class TopcheckApiClient:
    """Pushes loan order status updates to the TopCheck API server.

    Usage::

        client = TopcheckApiClient("login", "password")
        result = client.set_converted(
            "577638D868907",
            {"loanAmountGranted": 1000000, "tenure": 5, "conversionDate": "2016-04-25"},
        )
        if not result.is_success:
            print(result.error_code, result.message)

    Pass ``test_server={"host": ..., "htlogin": ..., "htpass": ...}`` to talk
    to a test server; ``htlogin``/``htpass`` enable HTTP basic authentication
    and only take effect together.
    """

    def __init__(
        self,
        login: str,
        password: str,
        test_server: Mapping[str, Any] | None = None,
        *,
        session: Session | None = None,
    ) -> None:
        self.config = ClientConfig.build(login, password, test_server)
        self.session_state = SessionState()
        self.transport = HttpTransport(self.config, self.session_state, session=session)

    @classmethod
    def from_config_file(
        cls, path: str | Path, *, session: Session | None = None
    ) -> "TopcheckApiClient":
        """Build a client from a JSON file with ``login``, ``password`` and an
        optional ``test_server`` object."""
        data = load_config(path)
        return cls(
            data["login"],
            data["password"],
            data.get("test_server"),
            session=session,
        )

    @property
    def token(self) -> str | None:
        """The access token currently held, if any."""
        return self.session_state.token

    # -------------------- auth workflow --------------------
    def authenticate(self) -> ApiResponse:
        """Log in and store the granted access token.

        Any held token is dropped first, whatever the outcome.
        """
        self.session_state.clear()
        body = json.dumps({"login": self.config.login, "password": self.config.password})
        try:
            raw = self.transport.post(self.config.api_url + "login", body)
        except TransportError as exc:
            log_exception(logger, "Unable to send login request", exc)
            return ApiResponse.error(INTERNAL_UNABLE_TO_LOGIN)

        result = ApiResponse.from_body(raw)
        if result.is_success:
            self.session_state.set(result.access_token)
            logger.info("Logged in to %s as %s", self.config.base_url, self.config.login)
        else:
            logger.warning("Login rejected: %s", result.error_code)
        return result

    def _send_authorized(self, url: str, body: str) -> ApiResponse:
        try:
            raw = self.transport.post(url, body)
        except TransportError as exc:
            log_exception(logger, "Unable to send request", exc)
            return ApiResponse.error(INTERNAL_UNABLE_TO_SEND)
        return ApiResponse.from_body(raw)

    def _execute_authorized(self, url: str, body: str) -> ApiResponse:
        """POST ``body`` to ``url`` with a session token.

        Logs in first when no token is held. If the server reports the token
        as invalid, the token is dropped and the request is re-sent exactly
        once, without logging in again.
        """
        if not self.session_state.has_token:
            login_result = self.authenticate()
            if not login_result.is_success:
                return login_result

        result = self._send_authorized(url, body)
        if result.is_token_invalid:
            logger.warning("Access token rejected by server, re-sending once")
            self.session_state.clear()
            result = self._send_authorized(url, body)
        return result

    # -------------------- loan operations --------------------
    def _loan_request(self, tc_id: str, suffix: str, payload: Payload | None) -> ApiResponse:
        if not tc_id or tc_id == "0":
            return ApiResponse.error(INTERNAL_EMPTY_TCID)
        url = f"{self.config.api_url}loans/{tc_id}{suffix}"
        with log_context(tc_id=tc_id):
            try:
                body = encode_payload(payload)
            except PayloadEncodingError as exc:
                log_exception(logger, "Sending loan update with an empty body", exc)
                body = ""
            result = self._execute_authorized(url, body)
            if not result.is_success:
                logger.warning("Loan update failed: %s", result.error_code)
        return result

    def set_status(self, tc_id: str, status: StatusPayload | Mapping[str, bool]) -> ApiResponse:
        """Set an order's progress status flags.

        Args:
            tc_id: TopCheck ID of the order.
            status: Flags to set, any of ``isBvnSuccessful``, ``isCbSuccessful``,
                ``isBsSuccessful``, ``isAddressCorrect``, ``isDocumentationComplete``.
        """
        return self._loan_request(tc_id, "", status)

    def set_converted(
        self, tc_id: str, info: ConversionPayload | Mapping[str, Any]
    ) -> ApiResponse:
        """Mark an order as converted.

        Args:
            tc_id: TopCheck ID of the order.
            info: ``loanAmountGranted`` and ``tenure`` (numbers) and
                ``conversionDate`` (``YYYY-MM-DD``).
        """
        return self._loan_request(tc_id, "/convert", info)

    def set_rejected(self, tc_id: str) -> ApiResponse:
        """Mark an order as rejected."""
        return self._loan_request(tc_id, "/reject", None)


__all__ = ["TopcheckApiClient"]
