"""HTTP API for calendar accounts and events."""

from .server import create_app, run_local_server

__all__ = [
    "create_app",
    "run_local_server",
]
