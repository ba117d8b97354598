from __future__ import annotations

from dataclasses import replace
from threading import RLock
from typing import Dict, Optional, Sequence

from ..attendance.repository import AttendanceRepository
from .model import Participant
from .repository import ParticipantRepository


class InMemoryParticipantRepository(ParticipantRepository):
    """Process-local participant table.

    Every read-modify-write runs under one lock so competing registrations
    for the same identity are applied in a total order. Pass the attendance
    store (built on the same lock) to let eviction purge its rows atomically.
    """

    def __init__(self, lock: Optional[RLock] = None, attendance: Optional[AttendanceRepository] = None):
        self._lock = lock or RLock()
        self._attendance = attendance
        self._rows: Dict[str, Participant] = {}

    def get(self, identity: str) -> Optional[Participant]:
        with self._lock:
            return self._rows.get(identity)

    def create_or_reactivate(
        self,
        *,
        identity: str,
        display_name: str,
        registered_at: int,
        allow_reactivate: bool = True,
    ) -> Optional[Participant]:
        with self._lock:
            existing = self._rows.get(identity)
            if existing is not None and (existing.registered or not allow_reactivate):
                return None

            participant = Participant(
                identity=identity,
                display_name=display_name,
                registered=True,
                registered_at=int(registered_at),
            )
            self._rows[identity] = participant
            return participant

    def deactivate(self, identity: str, *, purge_attendance: bool = False) -> bool:
        if purge_attendance and self._attendance is None:
            raise ValueError("purge_attendance needs an attendance store sharing this lock")

        with self._lock:
            existing = self._rows.get(identity)
            if existing is None or not existing.registered:
                return False
            self._rows[identity] = replace(existing, registered=False)
            if purge_attendance:
                self._attendance.delete_for_identity(identity)
            return True

    def list_all(self, *, include_evicted: bool = False) -> Sequence[Participant]:
        with self._lock:
            rows = [p for p in self._rows.values() if include_evicted or p.registered]
        return sorted(rows, key=lambda p: p.identity)
