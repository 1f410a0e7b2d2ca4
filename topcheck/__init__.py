"""
TopCheck API client package initializer.

This package pushes loan order status updates to the TopCheck RESTful API
server, logging in transparently whenever its access token is missing or
rejected.

The package exposes a ``__version__`` attribute indicating the installed
version. The version is read from pyproject.toml via importlib.metadata.
"""

import logging
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("topcheck-api-client")
except PackageNotFoundError:
    # Package is not installed (running from source without pip install -e .)
    __version__ = "0.0.0.dev"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from topcheck.app.config import ClientConfig, SessionState
from topcheck.errors import PayloadEncodingError, TopcheckError, TransportError
from topcheck.infrastructure.http import TopcheckApiClient
from topcheck.services import ApiResponse, ConversionPayload, StatusPayload

__all__: list[str] = [
    "ApiResponse",
    "ClientConfig",
    "ConversionPayload",
    "PayloadEncodingError",
    "SessionState",
    "StatusPayload",
    "TopcheckError",
    "TopcheckApiClient",
    "TransportError",
    "__version__",
]
