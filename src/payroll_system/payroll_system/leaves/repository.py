from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveStatus
from .model import Leave


class LeaveRepository(Protocol):
    def list_leaves(self, *, status: Optional[LeaveStatus] = None) -> Sequence[Leave]:
        raise NotImplementedError
