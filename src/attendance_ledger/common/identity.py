from __future__ import annotations

from ..core.constants import MAX_IDENTITY_LENGTH
from ..core.exceptions import InvalidIdentity

def normalize_identity(value: object) -> str:
    """Return the canonical form of an external identity.

    Identities are opaque and compared case-insensitively, so the canonical
    form is the trimmed, lower-cased string. Empty values, embedded
    whitespace or control characters and over-long values are rejected.
    """
    if not isinstance(value, str):
        raise InvalidIdentity("Identity must be a string")

    identity = value.strip()
    if not identity:
        raise InvalidIdentity("Identity must not be empty")
    if len(identity) > MAX_IDENTITY_LENGTH:
        raise InvalidIdentity(f"Identity exceeds {MAX_IDENTITY_LENGTH} characters")
    if any(ch.isspace() or not ch.isprintable() for ch in identity):
        raise InvalidIdentity("Identity must not contain whitespace or control characters")

    return identity.lower()
