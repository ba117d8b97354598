from __future__ import annotations

from ..common.identity import normalize_identity
from ..core.enums import Role
from ..participants.repository import ParticipantRepository


class RoleResolver:
    """Use case: classify a caller identity. Pure lookup, never mutates."""

    def __init__(self, admin_identity: str, participants: ParticipantRepository):
        self._admin = normalize_identity(admin_identity)
        self._participants = participants

    @property
    def admin_identity(self) -> str:
        return self._admin

    def is_admin(self, identity: str) -> bool:
        return normalize_identity(identity) == self._admin

    def is_registered(self, identity: str) -> bool:
        participant = self._participants.get(normalize_identity(identity))
        return participant is not None and participant.registered

    def resolve_role(self, identity: str) -> Role:
        if self.is_admin(identity):
            return Role.ADMIN
        if self.is_registered(identity):
            return Role.PARTICIPANT
        return Role.GUEST
