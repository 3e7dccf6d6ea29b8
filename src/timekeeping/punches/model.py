from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import ClockStatus, PunchType


@dataclass(frozen=True)
class Punch:
    """Thực thể miền (domain): Một lần chấm công (in/break/out)."""

    type: PunchType
    timestamp: datetime


@dataclass(frozen=True)
class StatusSnapshot:
    status: ClockStatus
    can_clock_in: bool
    can_take_break: bool
    can_clock_out: bool
    last_action: Optional[str] = None
    last_time: Optional[datetime] = None


@dataclass(frozen=True)
class TransitionCheck:
    valid: bool
    message: str = ""


@dataclass(frozen=True)
class PunchSummary:
    """Read-model for "who is working" panels."""

    status: ClockStatus
    worked_hours: float
    break_hours: float
    working_since: Optional[datetime] = None
    on_break_since: Optional[datetime] = None

