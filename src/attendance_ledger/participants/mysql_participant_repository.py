from __future__ import annotations

from typing import Optional, Sequence

import mysql.connector

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Participant
from .repository import ParticipantRepository


def _to_participant(row: dict) -> Participant:
    registered_at = row.get("registered_at")
    return Participant(
        identity=row["identity"],
        display_name=row["display_name"],
        registered=bool(row["registered"]),
        registered_at=int(registered_at) if registered_at is not None else None,
    )


class MySQLParticipantRepository(ParticipantRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, identity: str) -> Optional[Participant]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT identity, display_name, registered, registered_at
                FROM participants
                WHERE identity=%s
                """,
                (identity,),
            )
            row = fetchone(cur)
            return _to_participant(row) if row else None

    def create_or_reactivate(
        self,
        *,
        identity: str,
        display_name: str,
        registered_at: int,
        allow_reactivate: bool = True,
    ) -> Optional[Participant]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                # Row lock serializes competing registrations of one identity.
                cur.execute(
                    "SELECT registered FROM participants WHERE identity=%s FOR UPDATE",
                    (identity,),
                )
                existing = fetchone(cur)
                if existing is None:
                    cur.execute(
                        """
                        INSERT INTO participants(identity, display_name, registered, registered_at)
                        VALUES(%s,%s,1,%s)
                        """,
                        (identity, display_name, int(registered_at)),
                    )
                elif bool(existing["registered"]) or not allow_reactivate:
                    return None
                else:
                    cur.execute(
                        """
                        UPDATE participants
                        SET display_name=%s, registered=1, registered_at=%s
                        WHERE identity=%s AND registered=0
                        """,
                        (display_name, int(registered_at), identity),
                    )
                    if cur.rowcount == 0:
                        return None
        except mysql.connector.IntegrityError:
            # Lost the race to a concurrent INSERT of the same identity.
            return None

        return Participant(
            identity=identity,
            display_name=display_name,
            registered=True,
            registered_at=int(registered_at),
        )

    def deactivate(self, identity: str, *, purge_attendance: bool = False) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE participants SET registered=0 WHERE identity=%s AND registered=1",
                (identity,),
            )
            if cur.rowcount == 0:
                return False
            # Same transaction as the UPDATE above.
            if purge_attendance:
                cur.execute("DELETE FROM attendance_records WHERE identity=%s", (identity,))
            return True

    def list_all(self, *, include_evicted: bool = False) -> Sequence[Participant]:
        where = "" if include_evicted else "WHERE registered=1"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT identity, display_name, registered, registered_at
                FROM participants
                {where}
                ORDER BY identity ASC
                """
            )
            return [_to_participant(r) for r in fetchall(cur)]
