from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Participant


class ParticipantRepository(Protocol):
    """Repository interface for Participant.

    Note (DIP): the service layer depends on this interface, not on a concrete store.
    Identities passed in are already normalized.
    """

    def get(self, identity: str) -> Optional[Participant]:
        raise NotImplementedError

    def create_or_reactivate(
        self,
        *,
        identity: str,
        display_name: str,
        registered_at: int,
        allow_reactivate: bool = True,
    ) -> Optional[Participant]:
        """Atomically register ``identity``.

        Creates the row, or replaces an evicted one when ``allow_reactivate``.
        Returns None (and changes nothing) when an active row exists, or an
        evicted row exists and reactivation is not allowed.
        """

        raise NotImplementedError

    def deactivate(self, identity: str, *, purge_attendance: bool = False) -> bool:
        """Clear ``registered``. Returns False (and changes nothing) when no active row existed.

        With ``purge_attendance`` the identity's attendance rows are deleted in the
        same atomic step, so no write can land between the two.
        """

        raise NotImplementedError

    def list_all(self, *, include_evicted: bool = False) -> Sequence[Participant]:
        raise NotImplementedError
