from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Read side of the employee master.

    Note: services depend on this interface, not on a concrete DB.
    """

    def list_employees(self, *, department: Optional[str] = None) -> Sequence[Employee]:
        raise NotImplementedError
