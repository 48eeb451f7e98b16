from __future__ import annotations

import pytest

from streamauth.core.errors import UnauthorizedError
from streamauth.sdk.paths import (
    authenticate_publish,
    parse_hls_manifest_id,
    parse_hls_segment_name,
    parse_rtmp_stream_key,
)


def test_rtmp_stream_key() -> None:
    assert parse_rtmp_stream_key("/stream/abc-123") == "abc-123"
    assert parse_rtmp_stream_key("/live/stream/Key-9/extra") == "Key-9"
    assert parse_rtmp_stream_key("/stream/key_with_underscore") == "key"
    assert parse_rtmp_stream_key("/stream/") == ""
    assert parse_rtmp_stream_key("/other/abc") is None


def test_hls_manifest_id() -> None:
    assert parse_hls_manifest_id("/stream/mf-1.m3u8") == "mf-1"
    assert parse_hls_manifest_id("/stream/mf-1_variant-2.m3u8") == "mf-1"
    assert parse_hls_manifest_id("/stream/mf-1_variant-2_7.ts") == "mf-1"
    assert parse_hls_manifest_id("/stream/mf-1") is None


def test_hls_segment_name() -> None:
    assert parse_hls_segment_name("/stream/mf-1_v_3.ts") == "mf-1_v_3.ts"
    assert parse_hls_segment_name("/stream/mf-1.m3u8") is None


class _FakeClient:
    def __init__(self) -> None:
        self.calls: list[str] = []

    def authenticate(self, stream_key: str, *, timeout_s: float = 10.0) -> str:
        self.calls.append(stream_key)
        return "mf-" + stream_key


def test_authenticate_publish_uses_key_from_path() -> None:
    client = _FakeClient()
    assert authenticate_publish(client, "/stream/sk-1") == "mf-sk-1"  # type: ignore[arg-type]
    assert client.calls == ["sk-1"]


@pytest.mark.parametrize("path", ["/stream/", "/live/abc"])
def test_authenticate_publish_without_key(path: str) -> None:
    client = _FakeClient()
    with pytest.raises(UnauthorizedError):
        authenticate_publish(client, path)  # type: ignore[arg-type]
    assert client.calls == []
