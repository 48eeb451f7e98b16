from __future__ import annotations

from fastapi import FastAPI

from ..api import create_api_app
from ..core.registry import KeyRegistry


def create_app(registry: KeyRegistry | None = None) -> FastAPI:
    """Create the full app. Each call owns its own registry unless one is passed."""

    return create_api_app(registry)


# Convenience for uvicorn: `uvicorn streamauth.runtime.app:app`
app = create_app()
