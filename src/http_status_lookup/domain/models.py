"""Core entities without I/O for HTTP status lookups."""

from __future__ import annotations

from dataclasses import dataclass

from ..services.status_class import StatusClass


@dataclass(frozen=True)
class StatusRecord:
    """One HTTP status: numeric status, symbolic code and a readable message."""

    status: int
    code: str
    message: str

    @property
    def name(self) -> str:
        """Symbolic name of the status, e.g. ``NOT_FOUND``."""

        return self.code

    @property
    def status_class(self) -> StatusClass:
        return StatusClass.for_status(self.status)

    def to_mapping(self) -> dict[str, object]:
        return {
            "status": self.status,
            "code": self.code,
            "message": self.message,
        }
