"""Response envelopes returned by every TopCheck client operation.

The TopCheck API answers with a uniform JSON envelope::

    {"status": "SUCCESS", ...}
    {"status": "ERROR", "errorCode": "TOKEN_NOT_EXIST", "msg": "..."}

Local failures (empty order id, exhausted transport retries) are reported in
exactly the same shape so callers deal with a single result type.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

STATUS_SUCCESS = "SUCCESS"
STATUS_ERROR = "ERROR"

TOKEN_NOT_EXIST = "TOKEN_NOT_EXIST"

INTERNAL_UNABLE_TO_LOGIN = "INTERNAL_UNABLE_TO_LOGIN"
INTERNAL_UNABLE_TO_SEND = "INTERNAL_UNABLE_TO_SEND"
INTERNAL_EMPTY_TCID = "INTERNAL_EMPTY_TCID"

ERROR_MESSAGES: Mapping[str, str] = MappingProxyType(
    {
        INTERNAL_UNABLE_TO_LOGIN: "Unable to send login request.",
        INTERNAL_UNABLE_TO_SEND: "Unable to send request.",
        INTERNAL_EMPTY_TCID: "Empty TcId.",
    }
)


def is_success_response(data: Any) -> bool:
    """Return True if ``data`` is a mapping whose ``status`` is exactly SUCCESS."""
    return isinstance(data, Mapping) and data.get("status") == STATUS_SUCCESS


@dataclass(frozen=True)
class ApiResponse:
    """Decoded response envelope.

    ``data`` holds the decoded JSON body unchanged. It is normally a dict but
    may be any JSON value, or ``None`` when the server answered with a body
    that is not JSON at all. Anything that is not a success envelope is
    treated as a failure.
    """

    data: Any

    @classmethod
    def from_body(cls, body: str | bytes | None) -> "ApiResponse":
        """Decode a raw response body."""
        if body is None:
            return cls(None)
        try:
            return cls(json.loads(body))
        except ValueError:
            return cls(None)

    @classmethod
    def error(cls, code: str) -> "ApiResponse":
        """Build a locally generated error envelope for a known ``code``."""
        return cls(
            {
                "status": STATUS_ERROR,
                "errorCode": code,
                "msg": ERROR_MESSAGES[code],
            }
        )

    @property
    def is_success(self) -> bool:
        return is_success_response(self.data)

    def _get(self, key: str) -> Any:
        if isinstance(self.data, Mapping):
            return self.data.get(key)
        return None

    @property
    def status(self) -> str | None:
        return self._get("status")

    @property
    def error_code(self) -> str | None:
        return self._get("errorCode")

    @property
    def message(self) -> str | None:
        return self._get("msg")

    @property
    def access_token(self) -> str | None:
        return self._get("access_token")

    @property
    def is_token_invalid(self) -> bool:
        """True when the server rejected the session token."""
        return self.error_code == TOKEN_NOT_EXIST

    def to_dict(self) -> dict[str, Any]:
        """Return the envelope as a plain dict (empty if the body was not a mapping)."""
        if isinstance(self.data, Mapping):
            return dict(self.data)
        return {}


__all__ = [
    "ApiResponse",
    "ERROR_MESSAGES",
    "INTERNAL_EMPTY_TCID",
    "INTERNAL_UNABLE_TO_LOGIN",
    "INTERNAL_UNABLE_TO_SEND",
    "STATUS_ERROR",
    "STATUS_SUCCESS",
    "TOKEN_NOT_EXIST",
    "is_success_response",
]
