"""Clock-time arithmetic shared by punches, overtime rules and validation.

Every function here is pure: the rule engine and the weekly cascade call them
repeatedly over the same inputs and rely on getting identical results.
"""

from __future__ import annotations

import math
import re
from datetime import time
from typing import Union

from ..core.exceptions import MalformedTime

MINUTES_PER_DAY = 24 * 60

_CLOCK_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})(?::(\d{2}))?\s*$")

ClockValue = Union[str, time]


def to_minutes(value: ClockValue) -> int:
    """Convert ``HH:MM`` (optionally ``HH:MM:SS``) to minutes since midnight.

    Seconds are accepted because database TIME columns render that way, but
    they do not contribute to the result.
    """
    if isinstance(value, time):
        return value.hour * 60 + value.minute

    if not isinstance(value, str):
        raise MalformedTime(f"Invalid clock time: {value!r}")

    m = _CLOCK_RE.match(value)
    if not m:
        raise MalformedTime(f"Invalid clock time: {value!r}")

    hours, minutes = int(m.group(1)), int(m.group(2))
    seconds = int(m.group(3) or 0)
    if hours > 23 or minutes > 59 or seconds > 59:
        raise MalformedTime(f"Invalid clock time: {value!r}")
    return hours * 60 + minutes


def elapsed_hours(time_in: ClockValue, time_out: ClockValue, break_hours: float | None = 0) -> float:
    """Hours between two clock times minus the break, never below zero.

    A clock-out earlier than the clock-in is an overnight shift.
    """
    in_minutes = to_minutes(time_in)
    out_minutes = to_minutes(time_out)
    if out_minutes < in_minutes:
        out_minutes += MINUTES_PER_DAY

    hours = (out_minutes - in_minutes) / 60 - float(break_hours or 0)
    return max(hours, 0.0)


def round4(hours) -> float:
    """Round to the nearest quarter hour, halves away from zero.

    Anything that is not a finite number rounds to 0.
    """
    if isinstance(hours, bool) or not isinstance(hours, (int, float)):
        return 0.0
    if not math.isfinite(hours):
        return 0.0

    quarters = math.floor(abs(hours) * 4 + 0.5)
    return math.copysign(quarters / 4, hours) if quarters else 0.0


def format_duration(hours: float) -> str:
    """Human readable duration, e.g. ``7h 30m``, ``45m`` or ``8h``."""
    total_minutes = int(round(max(float(hours or 0), 0.0) * 60))
    whole_hours, minutes = divmod(total_minutes, 60)
    if whole_hours == 0:
        return f"{minutes}m"
    if minutes == 0:
        return f"{whole_hours}h"
    return f"{whole_hours}h {minutes}m"
