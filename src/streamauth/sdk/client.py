from __future__ import annotations

from ..core.errors import UnauthorizedError
from ..core.registry import Entry


class StreamAuthClient:
    """HTTP client for a running streamauth server.

    Contract:
    - GET  /new    -> {"streamKey": ..., "manifestID": ...}
    - POST /auth   {"StreamKey": ...} -> {"ManifestID": ...} or an empty 401
    """

    def __init__(self, base_url: str = "http://127.0.0.1:8001", *, transport: object | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        # Optional httpx transport (e.g. `httpx.MockTransport`); None uses the network.
        self.transport = transport

    def _http(self, timeout_s: float):
        import httpx

        return httpx.Client(base_url=self.base_url, timeout=timeout_s, transport=self.transport)

    def new_stream(self, *, timeout_s: float = 10.0) -> Entry:
        """Mint a fresh (stream key, manifest id) pair on the server."""

        with self._http(timeout_s) as client:
            res = client.get("/new")
            if res.status_code >= 400:
                raise RuntimeError(f"New stream request failed: {res.status_code} {res.text}")
            try:
                data = res.json()
            except ValueError:
                raise RuntimeError(f"New stream request returned invalid response: {res.text}")

        stream_key = data.get("streamKey") if isinstance(data, dict) else None
        manifest_id = data.get("manifestID") if isinstance(data, dict) else None
        if not stream_key or not manifest_id:
            raise RuntimeError(f"New stream request returned invalid response: {data}")
        return Entry(stream_key=str(stream_key), manifest_id=str(manifest_id))

    def authenticate(self, stream_key: str, *, timeout_s: float = 10.0) -> str:
        """Resolve `stream_key` to its manifest id.

        Raises `UnauthorizedError` if the server rejects the key.
        """

        with self._http(timeout_s) as client:
            res = client.post("/auth", json={"StreamKey": stream_key})
            if res.status_code == 401:
                raise UnauthorizedError()
            if res.status_code >= 400:
                raise RuntimeError(f"Auth request failed: {res.status_code} {res.text}")
            try:
                data = res.json()
            except ValueError:
                raise RuntimeError(f"Auth request returned invalid response: {res.text}")

        manifest_id = data.get("ManifestID") if isinstance(data, dict) else None
        if not manifest_id:
            raise RuntimeError(f"Auth request returned invalid response: {data}")
        return str(manifest_id)

    def is_alive(self, *, timeout_s: float = 0.2) -> bool:
        """Best-effort probe of `/healthz`."""

        import httpx

        try:
            with self._http(timeout_s) as client:
                r = client.get("/healthz")
                if r.status_code != 200:
                    return False
                data = r.json()
                return isinstance(data, dict) and bool(data.get("ok"))
        except (httpx.HTTPError, ValueError):
            return False
