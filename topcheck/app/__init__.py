"""Client configuration and session state."""

from .config import API_PATH, PRODUCTION_HOST, ClientConfig, SessionState, load_config

__all__ = [
    "API_PATH",
    "ClientConfig",
    "PRODUCTION_HOST",
    "SessionState",
    "load_config",
]
