from __future__ import annotations

import math
import time
from datetime import date

from ..core.constants import MAX_TIMESTAMP, MIN_TIMESTAMP, SECONDS_PER_DAY
from ..core.exceptions import InvalidTimestamp

_EPOCH = date(1970, 1, 1)


def require_timestamp(value: object) -> float:
    """Validate a point in time given as seconds since the Unix epoch."""
    # bool is an int subclass; True is not a timestamp.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidTimestamp("Timestamp must be a number of seconds since the epoch")
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidTimestamp("Timestamp must be finite")
    if not MIN_TIMESTAMP <= value < MAX_TIMESTAMP:
        raise InvalidTimestamp("Timestamp must fall between years 0001 and 9999 (seconds, not milliseconds)")
    return value


def day_of(timestamp: object) -> int:
    """Truncate a timestamp to its UTC calendar day (days since the epoch)."""
    ts = require_timestamp(timestamp)
    return int(ts // SECONDS_PER_DAY)


def day_to_date(day: int) -> date:
    return date.fromordinal(_EPOCH.toordinal() + int(day))


def now_timestamp() -> int:
    """Current time in whole seconds.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return int(time.time())
