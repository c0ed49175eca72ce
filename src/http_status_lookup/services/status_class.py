"""Shared status class taxonomy, keyed by the leading digit of a code."""

from __future__ import annotations

from enum import Enum


class StatusClass(Enum):
    """Enumerate the five HTTP status classes."""

    INFORMATIONAL = 1
    SUCCESS = 2
    REDIRECTION = 3
    CLIENT_ERROR = 4
    SERVER_ERROR = 5

    @classmethod
    def for_status(cls, status: int) -> "StatusClass":
        """Return the class for a three-digit status code."""

        return cls(status // 100)

    @property
    def is_error(self) -> bool:
        return self in (StatusClass.CLIENT_ERROR, StatusClass.SERVER_ERROR)
