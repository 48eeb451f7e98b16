from __future__ import annotations

from .client import StreamAuthClient
from .paths import (
    authenticate_publish,
    parse_hls_manifest_id,
    parse_hls_segment_name,
    parse_rtmp_stream_key,
)

__all__ = [
    "StreamAuthClient",
    "authenticate_publish",
    "parse_hls_manifest_id",
    "parse_hls_segment_name",
    "parse_rtmp_stream_key",
]
