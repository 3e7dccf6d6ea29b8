from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import date
from typing import Iterator, Optional

from ..core.exceptions import StoreUnavailable


@dataclass
class _Slot:
    lock: threading.Lock = field(default_factory=threading.Lock)
    users: int = 0


class WeekLockRegistry:
    """In-process single-writer locks keyed by (employee_id, week_start).

    A second caller for the same key waits until the first one releases, or
    gets StoreUnavailable once ``timeout`` seconds pass. A key is dropped as
    soon as nobody holds or waits for it.
    """

    def __init__(self, *, timeout: Optional[float] = None):
        self._timeout = timeout
        self._guard = threading.Lock()
        self._slots: dict[tuple[str, date], _Slot] = {}

    def __len__(self) -> int:
        with self._guard:
            return len(self._slots)

    def _checkout(self, key: tuple[str, date]) -> threading.Lock:
        with self._guard:
            slot = self._slots.get(key)
            if slot is None:
                slot = self._slots[key] = _Slot()
            slot.users += 1
            return slot.lock

    def _checkin(self, key: tuple[str, date]) -> None:
        with self._guard:
            slot = self._slots[key]
            slot.users -= 1
            if slot.users == 0:
                del self._slots[key]

    @contextmanager
    def hold(self, employee_id: str, week_start: date) -> Iterator[None]:
        key = (str(employee_id), week_start)
        lock = self._checkout(key)
        try:
            acquired = lock.acquire(timeout=self._timeout) if self._timeout is not None else lock.acquire()
            if not acquired:
                raise StoreUnavailable(f"Week {week_start} of {employee_id} is being recalculated")
            try:
                yield
            finally:
                lock.release()
        finally:
            self._checkin(key)
