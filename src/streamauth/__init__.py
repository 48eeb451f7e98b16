from __future__ import annotations

from .core import Entry, KeyRegistry, Settings, UnauthorizedError
from .runtime.server import StreamAuthServer, run, serve
from .sdk.client import StreamAuthClient

__all__ = [
    "run",
    "serve",
    "Entry",
    "KeyRegistry",
    "Settings",
    "StreamAuthClient",
    "StreamAuthServer",
    "UnauthorizedError",
]
