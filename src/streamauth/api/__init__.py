from __future__ import annotations

from fastapi import FastAPI, Request
from starlette.responses import Response

from ..core.errors import UnauthorizedError
from ..core.registry import KeyRegistry
from .parsing import AuthRequest, parse_auth_body


def create_api_app(registry: KeyRegistry | None = None) -> FastAPI:
    """Build the auth API around `registry` (a fresh one if omitted)."""

    app = FastAPI(title="streamauth", version="0.1.0")
    app.state.registry = registry if registry is not None else KeyRegistry()

    @app.get("/healthz")
    def healthz() -> dict[str, bool]:
        return {"ok": True}

    @app.get("/new")
    def new_stream(request: Request) -> dict[str, str]:
        reg: KeyRegistry = request.app.state.registry
        entry = reg.issue()
        return {"streamKey": entry.stream_key, "manifestID": entry.manifest_id}

    @app.post("/auth")
    async def auth(request: Request):
        reg: KeyRegistry = request.app.state.registry
        body = parse_auth_body(await request.body())
        # Runs on the event loop; the registry lock only guards a dict lookup.
        try:
            manifest_id = reg.resolve(body.stream_key)
        except UnauthorizedError:
            # Same empty 401 for missing and unknown keys.
            return Response(status_code=401)
        return {"ManifestID": manifest_id}

    return app


__all__ = ["AuthRequest", "create_api_app", "parse_auth_body"]
