from __future__ import annotations

from threading import RLock
from typing import Dict, Optional, Sequence, Tuple

from .model import AttendanceRecord
from .repository import AttendanceRepository


class InMemoryAttendanceRepository(AttendanceRepository):
    """Process-local attendance table keyed by ``(identity, day)``."""

    def __init__(self, lock: Optional[RLock] = None):
        self._lock = lock or RLock()
        self._rows: Dict[Tuple[str, int], AttendanceRecord] = {}

    def get(self, identity: str, day: int) -> Optional[AttendanceRecord]:
        with self._lock:
            return self._rows.get((identity, int(day)))

    def upsert(self, *, identity: str, day: int, present: bool, updated_by: str) -> AttendanceRecord:
        record = AttendanceRecord(identity=identity, day=int(day), present=bool(present), updated_by=updated_by)
        with self._lock:
            self._rows[record.key] = record
        return record

    def get_recent_for_identity(self, identity: str, limit: int) -> Sequence[AttendanceRecord]:
        with self._lock:
            items = [r for r in self._rows.values() if r.identity == identity]
        items.sort(key=lambda r: r.day, reverse=True)
        return items[: int(limit)]

    def delete_for_identity(self, identity: str) -> int:
        with self._lock:
            keys = [k for k in self._rows if k[0] == identity]
            for k in keys:
                del self._rows[k]
        return len(keys)
