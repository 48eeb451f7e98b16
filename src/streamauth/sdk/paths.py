"""Ingest URL path helpers.

An RTMP publisher connects to `/stream/<streamKey>`; HLS players fetch
`/stream/<manifestID>.m3u8`, `/stream/<manifestID>_<variant>.m3u8` and
`/stream/<segment>.ts`. The publish side resolves the stream key through
`/auth` before anything is recorded.
"""

from __future__ import annotations

import logging
import re

from ..core.errors import UnauthorizedError
from .client import StreamAuthClient

logger = logging.getLogger(__name__)

_RTMP_STREAM_KEY = re.compile(r"/stream/[A-Za-z0-9-]*")
_HLS_MANIFEST_ID = re.compile(r"/stream/([A-Za-z0-9-]*)_?.*(?:\.m3u8|\.ts)")
_HLS_SEGMENT_NAME = re.compile(r"/stream/.*\.ts")


def parse_rtmp_stream_key(path: str) -> str | None:
    m = _RTMP_STREAM_KEY.search(path)
    if m is None:
        return None
    return m.group(0).replace("/stream/", "")


def parse_hls_manifest_id(path: str) -> str | None:
    m = _HLS_MANIFEST_ID.search(path)
    if m is None:
        return None
    return m.group(1)


def parse_hls_segment_name(path: str) -> str | None:
    m = _HLS_SEGMENT_NAME.search(path)
    if m is None:
        return None
    return m.group(0).replace("/stream/", "")


def authenticate_publish(client: StreamAuthClient, path: str, *, timeout_s: float = 10.0) -> str:
    """Resolve the stream key carried by an RTMP publish path to its manifest id."""

    stream_key = parse_rtmp_stream_key(path)
    if not stream_key:
        logger.error("Empty stream key during RTMP authentication")
        raise UnauthorizedError()
    return client.authenticate(stream_key, timeout_s=timeout_s)
