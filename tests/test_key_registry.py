from __future__ import annotations

import threading

import pytest

from streamauth.core import KeyRegistry, UnauthorizedError, generate_id


def test_generate_id_is_canonical_uuid4() -> None:
    value = generate_id()
    assert len(value) == 36
    assert value[14] == "4"
    assert value.count("-") == 4


def test_issue_then_resolve_round_trip() -> None:
    reg = KeyRegistry()
    entry = reg.issue()

    assert entry.stream_key != entry.manifest_id
    assert reg.resolve(entry.stream_key) == entry.manifest_id


def test_issued_stream_keys_are_distinct_and_resolvable() -> None:
    reg = KeyRegistry()
    entries = [reg.issue() for _ in range(200)]

    assert len({e.stream_key for e in entries}) == 200
    assert len(reg) == 200
    for e in entries:
        assert reg.resolve(e.stream_key) == e.manifest_id


def test_issue_draws_manifest_then_stream_key() -> None:
    ids = iter(["mf-1", "sk-1"])
    reg = KeyRegistry(id_factory=lambda: next(ids))

    entry = reg.issue()
    assert entry.manifest_id == "mf-1"
    assert entry.stream_key == "sk-1"
    assert "sk-1" in reg
    assert "mf-1" not in reg


@pytest.mark.parametrize("stream_key", [None, "", "unknown"])
def test_resolve_rejects_missing_empty_and_unknown_keys_alike(stream_key: str | None) -> None:
    reg = KeyRegistry()
    reg.issue()

    with pytest.raises(UnauthorizedError) as exc_info:
        reg.resolve(stream_key)
    assert str(exc_info.value) == "Unauthorized"


def test_resolve_does_not_mutate() -> None:
    reg = KeyRegistry()
    entry = reg.issue()
    other = reg.issue()

    for _ in range(5):
        assert reg.resolve(entry.stream_key) == entry.manifest_id
    with pytest.raises(UnauthorizedError):
        reg.resolve("unknown")

    assert len(reg) == 2
    assert reg.get(other.stream_key) == other
    assert reg.get("unknown") is None


def test_concurrent_issue_keeps_every_entry() -> None:
    reg = KeyRegistry()
    results: list[list[str]] = [[] for _ in range(8)]

    def worker(slot: int) -> None:
        for _ in range(100):
            results[slot].append(reg.issue().stream_key)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    keys = [k for chunk in results for k in chunk]
    assert len(keys) == 800
    assert len(reg) == 800
    assert all(k in reg for k in keys)
