"""
Payload models sent to the TopCheck loans endpoints.
"""

from __future__ import annotations

import datetime as dt
import json
from collections.abc import Mapping
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field

from topcheck.errors import PayloadEncodingError


class StatusPayload(BaseModel):
    """Sub-check outcomes for a loan order.

    Every flag is optional; only the flags that were supplied are sent.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    is_bvn_successful: bool | None = Field(default=None, alias="isBvnSuccessful")
    is_cb_successful: bool | None = Field(default=None, alias="isCbSuccessful")
    is_bs_successful: bool | None = Field(default=None, alias="isBsSuccessful")
    is_address_correct: bool | None = Field(default=None, alias="isAddressCorrect")
    is_documentation_complete: bool | None = Field(
        default=None, alias="isDocumentationComplete"
    )


class ConversionPayload(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    loan_amount_granted: float = Field(alias="loanAmountGranted")
    tenure: float
    conversion_date: dt.date = Field(alias="conversionDate")


Payload = Union[BaseModel, Mapping[str, Any]]


def _json_default(value: Any) -> Any:
    if isinstance(value, (dt.date, dt.datetime)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_payload(payload: Payload | None) -> str:
    """JSON-encode a payload model or plain mapping for the request body.

    Integral numbers in models are rendered without a fractional part so
    ``1000000`` goes over the wire as ``1000000`` rather than ``1000000.0``.

    Raises:
        PayloadEncodingError: If the payload is not a mapping or holds values
            JSON cannot represent.
    """
    if payload is None:
        return ""
    if isinstance(payload, BaseModel):
        data = payload.model_dump(mode="json", by_alias=True, exclude_none=True)
        data = {
            key: int(value) if isinstance(value, float) and value.is_integer() else value
            for key, value in data.items()
        }
        return json.dumps(data)
    try:
        return json.dumps(dict(payload), default=_json_default)
    except (TypeError, ValueError) as exc:
        raise PayloadEncodingError(f"Cannot encode payload: {exc}") from exc


__all__ = ["ConversionPayload", "Payload", "StatusPayload", "encode_payload"]
