from __future__ import annotations

from typing import Optional

from ..core.exceptions import MalformedTime
from .time_arithmetic import ClockValue, to_minutes


def is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def try_minutes(value: ClockValue, field_name: str, errors: list[str]) -> Optional[int]:
    """Parse a clock value, appending a readable error instead of raising."""
    try:
        return to_minutes(value)
    except MalformedTime:
        errors.append(f"{field_name} must be a valid HH:MM time")
        return None


def try_float(value, field_name: str, errors: list[str]) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        errors.append(f"{field_name} must be a number")
        return None
