from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import RLock
from typing import Optional

from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.repository import AttendanceRepository
from .core.enums import EvictionPolicy
from .database.connection import DatabaseConnection, DBConfig
from .identity.resolver import RoleResolver
from .ledger.service import AttendanceLedger
from .participants.memory_participant_repository import InMemoryParticipantRepository
from .participants.repository import ParticipantRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    participants_repo: ParticipantRepository
    attendance_repo: AttendanceRepository

    resolver: RoleResolver
    ledger: AttendanceLedger


def build_container(
    *,
    admin_identity: str,
    storage_backend: str = "memory",
    db_config: Optional[dict] = None,
    eviction_policy: str | EvictionPolicy = EvictionPolicy.RETAIN,
    allow_reregistration: bool = True,
    strict_override: bool = False,
) -> Container:
    backend = (storage_backend or "memory").lower()
    conn: Optional[DatabaseConnection] = None

    if backend == "memory":
        # One lock for both tables keeps eviction with purge a single step.
        lock = RLock()
        attendance_repo = InMemoryAttendanceRepository(lock)
        participants_repo = InMemoryParticipantRepository(lock, attendance=attendance_repo)
    elif backend == "mysql":
        from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
        from .participants.mysql_participant_repository import MySQLParticipantRepository

        if not db_config:
            raise ValueError("DB_CONFIG is required for the mysql storage backend")
        conn = DatabaseConnection(DBConfig.from_dict(db_config))
        participants_repo = MySQLParticipantRepository(conn)
        attendance_repo = MySQLAttendanceRepository(conn)
    else:
        raise ValueError(f"Unknown storage backend: {storage_backend!r}")

    if not isinstance(eviction_policy, EvictionPolicy):
        eviction_policy = EvictionPolicy(str(eviction_policy).strip().lower())

    resolver = RoleResolver(admin_identity, participants_repo)
    ledger = AttendanceLedger(
        participants_repo,
        attendance_repo,
        resolver,
        eviction_policy=eviction_policy,
        allow_reregistration=allow_reregistration,
        strict_override=strict_override,
    )
    logger.info("Ledger ready (backend=%s, admin=%s)", backend, resolver.admin_identity)

    return Container(
        conn=conn,
        participants_repo=participants_repo,
        attendance_repo=attendance_repo,
        resolver=resolver,
        ledger=ledger,
    )
