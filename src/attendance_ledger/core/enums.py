from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Role of a caller identity, used for access control."""

    ADMIN = "admin"
    PARTICIPANT = "participant"
    GUEST = "guest"


class ParticipantState(str, Enum):
    """Lifecycle of a single identity (the administrator excluded)."""

    UNREGISTERED = "UNREGISTERED"
    REGISTERED = "REGISTERED"
    EVICTED = "EVICTED"


class EvictionPolicy(str, Enum):
    """What eviction does with the evicted identity's attendance history."""

    RETAIN = "retain"
    PURGE = "purge"
