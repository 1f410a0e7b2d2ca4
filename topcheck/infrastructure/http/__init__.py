"""HTTP adapters for the TopCheck API.

This package provides the raw transport and the token-authenticated client
used to push loan order updates.
"""

from topcheck.errors import TransportError

from .client import TopcheckApiClient
from .transport import HttpTransport, basic_auth_header

__all__ = [
    "HttpTransport",
    "TopcheckApiClient",
    "TransportError",
    "basic_auth_header",
]
