from __future__ import annotations

import json
from dataclasses import dataclass


@dataclass(frozen=True)
class AuthRequest:
    stream_key: str | None


def parse_auth_body(raw: bytes) -> AuthRequest:
    """Parse a `POST /auth` body.

    Never raises: malformed JSON, a non-object payload and a missing, empty or
    non-string `StreamKey` all come back as `AuthRequest(stream_key=None)`.
    """

    if not raw:
        return AuthRequest(stream_key=None)
    try:
        body = json.loads(raw)
    except (UnicodeDecodeError, ValueError, RecursionError):
        return AuthRequest(stream_key=None)
    if not isinstance(body, dict):
        return AuthRequest(stream_key=None)

    stream_key = body.get("StreamKey")
    if not isinstance(stream_key, str) or not stream_key:
        return AuthRequest(stream_key=None)
    return AuthRequest(stream_key=stream_key)
