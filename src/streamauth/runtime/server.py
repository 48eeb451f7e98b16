from __future__ import annotations

import contextlib
import logging
import socket
import threading
import time
from dataclasses import dataclass

import uvicorn

from ..core.config import DEFAULT_HOST, DEFAULT_PORT, Settings
from ..core.registry import KeyRegistry
from ..sdk.client import StreamAuthClient
from .app import create_app

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StreamAuthServer:
    host: str
    port: int
    url: str

    def client(self) -> StreamAuthClient:
        return StreamAuthClient(self.url.rstrip("/"))


def _find_free_port(host: str) -> int:
    with contextlib.closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
        s.bind((host, 0))
        return int(s.getsockname()[1])


def run(
    *,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    log_level: str = "info",
    access_log: bool = False,
    registry: KeyRegistry | None = None,
    startup_timeout_s: float = 10.0,
) -> StreamAuthServer:
    """Start the service on a background thread and return once it accepts requests.

    Notes:
    - `port=0` means "pick a free port".
    - The thread is a daemon; the server lives as long as the calling process.
    """

    if port == 0:
        port = _find_free_port(host)

    app = create_app(registry)

    config = uvicorn.Config(app, host=host, port=port, log_level=log_level, access_log=access_log)
    server = uvicorn.Server(config)

    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    deadline = time.monotonic() + startup_timeout_s
    while not server.started:
        if not thread.is_alive():
            raise RuntimeError(f"streamauth server failed to start on {host}:{port}")
        if time.monotonic() > deadline:
            raise RuntimeError(f"Timed out waiting for streamauth server on {host}:{port}")
        time.sleep(0.01)

    url = f"http://{host}:{port}/"
    logger.info("streamauth listening on %s", url)
    return StreamAuthServer(host=host, port=port, url=url)


def serve(settings: Settings | None = None) -> None:
    """Serve in the foreground until the process is stopped."""

    s = settings if settings is not None else Settings.from_env()
    logger.info("Auth server running on http://%s:%d/", s.host, s.port)
    uvicorn.run(
        create_app(),
        host=s.host,
        port=s.port,
        log_level=s.log_level,
        access_log=s.access_log,
    )
