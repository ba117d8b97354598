from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get(self, identity: str, day: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def upsert(self, *, identity: str, day: int, present: bool, updated_by: str) -> AttendanceRecord:
        """Write ``present`` for ``(identity, day)``, replacing any prior value."""

        raise NotImplementedError

    def get_recent_for_identity(self, identity: str, limit: int) -> Sequence[AttendanceRecord]:
        """Newest day first."""

        raise NotImplementedError

    def delete_for_identity(self, identity: str) -> int:
        """Remove every record of ``identity``; returns the number removed."""

        raise NotImplementedError
