from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.datetime_utils import day_to_date


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: attendance of one identity on one calendar day."""

    identity: str
    day: int
    present: bool
    updated_by: Optional[str] = None

    @property
    def key(self) -> tuple[str, int]:
        return (self.identity, self.day)

    def to_dict(self) -> dict:
        return {
            "identity": self.identity,
            "day": self.day,
            "date": day_to_date(self.day).isoformat(),
            "present": self.present,
            "updated_by": self.updated_by,
        }
