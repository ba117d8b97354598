from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository


def _to_record(row: dict) -> AttendanceRecord:
    return AttendanceRecord(
        identity=row["identity"],
        day=int(row["day_key"]),
        present=bool(row["present"]),
        updated_by=row.get("updated_by"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, identity: str, day: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT identity, day_key, present, updated_by
                FROM attendance_records
                WHERE identity=%s AND day_key=%s
                """,
                (identity, int(day)),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def upsert(self, *, identity: str, day: int, present: bool, updated_by: str) -> AttendanceRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(identity, day_key, present, updated_by)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE present=VALUES(present), updated_by=VALUES(updated_by)
                """,
                (identity, int(day), 1 if present else 0, updated_by),
            )
        return AttendanceRecord(identity=identity, day=int(day), present=bool(present), updated_by=updated_by)

    def get_recent_for_identity(self, identity: str, limit: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT identity, day_key, present, updated_by
                FROM attendance_records
                WHERE identity=%s
                ORDER BY day_key DESC
                LIMIT %s
                """,
                (identity, int(limit)),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def delete_for_identity(self, identity: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_records WHERE identity=%s", (identity,))
            return int(cur.rowcount)
