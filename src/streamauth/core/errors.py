from __future__ import annotations


class UnauthorizedError(Exception):
    """Raised when a stream key is missing, empty or unknown.

    The message never says which of those it was.
    """

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)
