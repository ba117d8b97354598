from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import day_of, now_timestamp
from ..common.identity import normalize_identity
from ..common.validators import require_display_name
from ..core.constants import DEFAULT_HISTORY_LIMIT, MAX_HISTORY_LIMIT
from ..core.enums import EvictionPolicy, Role
from ..core.exceptions import AlreadyRegistered, NotAuthorized, NotRegistered, ValidationError
from ..identity.resolver import RoleResolver
from ..participants.model import Participant
from ..participants.repository import ParticipantRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CallerStatus:
    """What a client shows for the connected identity."""

    identity: str
    role: Role
    is_admin: bool
    is_registered: bool
    display_name: Optional[str]

    def to_dict(self) -> dict:
        return {
            "identity": self.identity,
            "role": self.role.value,
            "is_admin": self.is_admin,
            "is_registered": self.is_registered,
            "name": self.display_name,
        }


class AttendanceLedger:
    """Use case: participant registration and per-day attendance.

    Every operation checks its guard (role, then record state) before the
    single write it performs, so a rejected call never changes state.
    """

    def __init__(
        self,
        participants: ParticipantRepository,
        attendance: AttendanceRepository,
        resolver: RoleResolver,
        *,
        eviction_policy: EvictionPolicy = EvictionPolicy.RETAIN,
        allow_reregistration: bool = True,
        strict_override: bool = False,
        clock: Callable[[], int] = now_timestamp,
    ):
        self._participants = participants
        self._attendance = attendance
        self._resolver = resolver
        self._eviction_policy = EvictionPolicy(eviction_policy)
        self._allow_reregistration = bool(allow_reregistration)
        self._strict_override = bool(strict_override)
        self._clock = clock

    @property
    def admin_identity(self) -> str:
        return self._resolver.admin_identity

    @property
    def eviction_policy(self) -> EvictionPolicy:
        return self._eviction_policy

    def is_admin(self, identity: str) -> bool:
        return self._resolver.is_admin(identity)

    def is_registered(self, identity: str) -> bool:
        return self._resolver.is_registered(identity)

    def _require_admin(self, identity: str, action: str) -> str:
        caller = normalize_identity(identity)
        if not self._resolver.is_admin(caller):
            logger.warning("Rejected %s by non-admin %s", action, caller)
            raise NotAuthorized(f"Only the administrator may {action}")
        return caller

    # ----- participant operations -----

    def register_participant(self, identity: str, display_name: str) -> Participant:
        who = normalize_identity(identity)
        name = require_display_name(display_name)

        participant = self._participants.create_or_reactivate(
            identity=who,
            display_name=name,
            registered_at=self._clock(),
            allow_reactivate=self._allow_reregistration,
        )
        if participant is None:
            logger.warning("Rejected registration of %s: already registered", who)
            raise AlreadyRegistered("Identity is already registered")

        logger.info("Registered participant %s", who)
        return participant

    def get_profile(self, identity: str) -> Optional[Participant]:
        return self._participants.get(normalize_identity(identity))

    def caller_status(self, identity: str) -> CallerStatus:
        who = normalize_identity(identity)
        participant = self._participants.get(who)
        is_registered = participant is not None and participant.registered

        return CallerStatus(
            identity=who,
            role=self._resolver.resolve_role(who),
            is_admin=self._resolver.is_admin(who),
            is_registered=is_registered,
            display_name=participant.display_name if is_registered else None,
        )

    def list_participants(self, admin_identity: str, *, include_evicted: bool = False) -> Sequence[Participant]:
        self._require_admin(admin_identity, "list participants")
        return self._participants.list_all(include_evicted=include_evicted)

    def evict_user(self, admin_identity: str, target_identity: str) -> None:
        caller = self._require_admin(admin_identity, "evict participants")
        target = normalize_identity(target_identity)

        # Unknown and already-evicted targets are a silent no-op.
        purge = self._eviction_policy == EvictionPolicy.PURGE
        evicted = self._participants.deactivate(target, purge_attendance=purge)

        logger.info("Eviction of %s by %s (changed=%s, purged=%s)", target, caller, evicted, evicted and purge)

    # ----- attendance operations -----

    def mark_own_attendance(self, identity: str, timestamp: float) -> AttendanceRecord:
        who = normalize_identity(identity)
        day = day_of(timestamp)

        if not self._resolver.is_registered(who):
            logger.warning("Rejected attendance mark by unregistered %s", who)
            raise NotRegistered("Register before marking attendance")

        record = self._attendance.upsert(identity=who, day=day, present=True, updated_by=who)
        logger.info("Marked %s present on day %d", who, day)
        return record

    def check_attendance(self, identity: str, timestamp: float) -> Optional[bool]:
        """Recorded ``present`` value, or None when nothing was ever written."""
        record = self._attendance.get(normalize_identity(identity), day_of(timestamp))
        return record.present if record else None

    def attendance_history(self, identity: str, *, limit: int = DEFAULT_HISTORY_LIMIT) -> Sequence[AttendanceRecord]:
        if isinstance(limit, bool) or not isinstance(limit, int) or not 1 <= limit <= MAX_HISTORY_LIMIT:
            raise ValidationError(f"limit must be between 1 and {MAX_HISTORY_LIMIT}")
        return self._attendance.get_recent_for_identity(normalize_identity(identity), limit)

    def modify_attendance(
        self,
        admin_identity: str,
        target_identity: str,
        timestamp: float,
        present: bool,
    ) -> AttendanceRecord:
        caller = self._require_admin(admin_identity, "modify attendance")
        target = normalize_identity(target_identity)
        day = day_of(timestamp)
        if not isinstance(present, bool):
            raise ValidationError("present must be a boolean")

        if self._strict_override and not self._resolver.is_registered(target):
            logger.warning("Rejected override for unregistered %s", target)
            raise NotRegistered("Target identity is not registered")

        record = self._attendance.upsert(identity=target, day=day, present=present, updated_by=caller)
        logger.info("Override: %s set %s present=%s on day %d", caller, target, present, day)
        return record
