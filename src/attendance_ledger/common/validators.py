from __future__ import annotations

from ..core.exceptions import InvalidName


def require_display_name(value: object) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidName("Display name must not be empty")
    return value.strip()
