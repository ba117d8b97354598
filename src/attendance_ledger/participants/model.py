from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import ParticipantState


@dataclass(frozen=True)
class Participant:
    """Domain entity: one registration record per identity.

    Note: Plain data object, no storage access. An evicted participant keeps
    its row with ``registered=False``.
    """

    identity: str
    display_name: str
    registered: bool = True
    registered_at: Optional[int] = None

    @property
    def state(self) -> ParticipantState:
        return ParticipantState.REGISTERED if self.registered else ParticipantState.EVICTED

    def to_dict(self) -> dict:
        return {
            "identity": self.identity,
            "name": self.display_name,
            "registered": self.registered,
            "registered_at": self.registered_at,
            "state": self.state.value,
        }
