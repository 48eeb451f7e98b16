from __future__ import annotations

from .config import Settings
from .errors import UnauthorizedError
from .registry import Entry, KeyRegistry, generate_id

__all__ = [
    "Entry",
    "KeyRegistry",
    "Settings",
    "UnauthorizedError",
    "generate_id",
]
