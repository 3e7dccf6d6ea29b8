from __future__ import annotations

from datetime import date
from typing import Optional, Sequence


class DomainError(Exception):
    """Base exception for business rule violations."""


class MalformedTime(DomainError):
    """Raised when a clock string is not a valid HH:MM value."""


class InvalidTransition(DomainError):
    """Raised when a punch is not legal from the current clock status."""


class EmployeeLookupFailed(DomainError):
    """Raised when the employee directory cannot produce a profile.

    ``transient`` is True when the directory itself failed (retry later) and
    False when the employee is unknown.
    """

    def __init__(self, message: str, *, transient: bool = False):
        self.transient = transient
        super().__init__(message)


class StoreUnavailable(DomainError):
    """Raised on transient read/write failures of an external store.

    Safe to retry: every calculation is idempotent for identical inputs.
    """


class ValidationFailed(DomainError):
    """Raised when a timesheet entry violates one or more entry rules."""

    def __init__(self, errors: Sequence[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "Invalid timesheet entry")


class CascadeIncomplete(DomainError):
    """Raised when a weekly recalculation stops partway.

    Days up to ``last_written_date`` hold new values, later days are stale.
    Retry the whole week rather than resuming.
    """

    def __init__(self, message: str, *, last_written_date: Optional[date], updated: Sequence = ()):
        self.last_written_date = last_written_date
        self.updated = list(updated)
        super().__init__(message)
