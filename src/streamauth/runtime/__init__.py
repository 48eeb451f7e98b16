from __future__ import annotations

from .app import app, create_app
from .server import StreamAuthServer, run, serve

__all__ = ["app", "create_app", "StreamAuthServer", "run", "serve"]
