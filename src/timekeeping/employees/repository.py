from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol


class EmployeeDirectory(Protocol):
    """Giao diện directory nhân viên (Employee Directory).

    Returns the raw attribute row, or None when the id is unknown. Transport
    or database failures are raised, never swallowed.
    """

    def get(self, employee_id: str) -> Optional[Mapping[str, Any]]:
        raise NotImplementedError
