"""Clock status derivation and punch sequence validation.

States are OUT (start of every day), IN and BREAK; the latest punch of the
day decides the current state.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import ClockStatus, PunchType
from ..core.exceptions import InvalidTransition
from .model import Punch, PunchSummary, StatusSnapshot, TransitionCheck

_TRANSITIONS: dict[tuple[ClockStatus, PunchType], ClockStatus] = {
    (ClockStatus.OUT, PunchType.IN): ClockStatus.IN,
    (ClockStatus.IN, PunchType.BREAK): ClockStatus.BREAK,
    (ClockStatus.IN, PunchType.OUT): ClockStatus.OUT,
    (ClockStatus.BREAK, PunchType.IN): ClockStatus.IN,
    (ClockStatus.BREAK, PunchType.OUT): ClockStatus.OUT,
}

_REJECTIONS = {
    PunchType.IN: "already clocked in",
    PunchType.BREAK: "must be clocked in to break",
    PunchType.OUT: "not clocked in",
}

_LAST_ACTIONS = {
    PunchType.IN: "Clocked in",
    PunchType.BREAK: "On break",
    PunchType.OUT: "Clocked out",
}

_STATUS_BY_PUNCH = {
    PunchType.IN: ClockStatus.IN,
    PunchType.BREAK: ClockStatus.BREAK,
    PunchType.OUT: ClockStatus.OUT,
}


def ordered(punches: Sequence[Punch]) -> list[Punch]:
    return sorted(punches, key=lambda p: p.timestamp)


def current_status(punches: Sequence[Punch]) -> StatusSnapshot:
    if not punches:
        return StatusSnapshot(status=ClockStatus.OUT, can_clock_in=True, can_take_break=False, can_clock_out=False)

    last = ordered(punches)[-1]
    status = _STATUS_BY_PUNCH[last.type]
    return StatusSnapshot(
        status=status,
        can_clock_in=(status, PunchType.IN) in _TRANSITIONS,
        can_take_break=(status, PunchType.BREAK) in _TRANSITIONS,
        can_clock_out=(status, PunchType.OUT) in _TRANSITIONS,
        last_action=_LAST_ACTIONS[last.type],
        last_time=last.timestamp,
    )


def validate_transition(punches: Sequence[Punch], attempted_type) -> TransitionCheck:
    try:
        punch_type = PunchType(attempted_type)
    except ValueError:
        return TransitionCheck(valid=False, message="invalid punch type")

    status = current_status(punches).status
    if (status, punch_type) not in _TRANSITIONS:
        return TransitionCheck(valid=False, message=_REJECTIONS[punch_type])
    return TransitionCheck(valid=True)


def assert_transition(punches: Sequence[Punch], attempted_type) -> ClockStatus:
    """Return the state after ``attempted_type`` or raise InvalidTransition."""
    check = validate_transition(punches, attempted_type)
    if not check.valid:
        raise InvalidTransition(check.message)
    return _TRANSITIONS[(current_status(punches).status, PunchType(attempted_type))]


def summarize(punches: Sequence[Punch], *, now: datetime) -> PunchSummary:
    """Worked and break time of a day's punches.

    Break intervals never count as worked time; clocking out straight from a
    break closes the break without crediting it. An open IN interval runs
    until ``now``.
    """
    worked = 0.0
    on_break = 0.0
    open_in: Optional[datetime] = None
    break_start: Optional[datetime] = None

    for p in ordered(punches):
        if p.type == PunchType.IN:
            if break_start is not None:
                on_break += (p.timestamp - break_start).total_seconds()
                break_start = None
            if open_in is None:
                open_in = p.timestamp
        elif p.type == PunchType.BREAK:
            if open_in is not None:
                worked += (p.timestamp - open_in).total_seconds()
                open_in = None
                break_start = p.timestamp
        elif p.type == PunchType.OUT:
            if open_in is not None:
                worked += (p.timestamp - open_in).total_seconds()
                open_in = None
            elif break_start is not None:
                on_break += (p.timestamp - break_start).total_seconds()
                break_start = None

    if open_in is not None:
        worked += max((now - open_in).total_seconds(), 0.0)
    if break_start is not None:
        on_break += max((now - break_start).total_seconds(), 0.0)

    status = current_status(punches).status
    return PunchSummary(
        status=status,
        worked_hours=max(worked, 0.0) / 3600,
        break_hours=max(on_break, 0.0) / 3600,
        working_since=open_in if status == ClockStatus.IN else None,
        on_break_since=break_start if status == ClockStatus.BREAK else None,
    )


def worked_hours(punches: Sequence[Punch], *, now: datetime) -> float:
    return summarize(punches, now=now).worked_hours
