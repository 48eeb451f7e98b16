from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import dataclass
from typing import Callable

from .errors import UnauthorizedError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Entry:
    stream_key: str
    manifest_id: str


def generate_id() -> str:
    """Return a random (v4) UUID in its canonical string form."""
    return str(uuid.uuid4())


class KeyRegistry:
    """In-memory stream key -> manifest id association.

    Entries are created by `issue()` and never updated or removed; they live as
    long as the registry object does.
    """

    def __init__(self, id_factory: Callable[[], str] = generate_id) -> None:
        self._lock = threading.RLock()
        self._entries: dict[str, Entry] = {}
        self._id_factory = id_factory

    def issue(self) -> Entry:
        manifest_id = self._id_factory()
        stream_key = self._id_factory()
        entry = Entry(stream_key=stream_key, manifest_id=manifest_id)
        with self._lock:
            self._entries[stream_key] = entry
        logger.info("Issued stream key for manifest %s", manifest_id)
        return entry

    def get(self, stream_key: str | None) -> Entry | None:
        if not stream_key:
            return None
        with self._lock:
            return self._entries.get(stream_key)

    def resolve(self, stream_key: str | None) -> str:
        """Return the manifest id for `stream_key`.

        Missing, empty and unknown keys all raise the same `UnauthorizedError`.
        """
        entry = self.get(stream_key)
        if entry is None:
            logger.info("Rejected stream key resolution")
            raise UnauthorizedError()
        return entry.manifest_id

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, stream_key: object) -> bool:
        if not isinstance(stream_key, str):
            return False
        with self._lock:
            return stream_key in self._entries
