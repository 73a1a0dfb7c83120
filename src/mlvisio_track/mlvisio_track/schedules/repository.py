from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Schedule


class ScheduleRepository(Protocol):
    def list_active(
        self,
        *,
        department: Optional[str] = None,
        year: Optional[str] = None,
        day_of_week: Optional[str] = None,
    ) -> Sequence[Schedule]:
        raise NotImplementedError

    def get_by_id(self, schedule_id: str) -> Optional[Schedule]:
        raise NotImplementedError

    def save(self, schedule_id: str, data: dict) -> None:
        """Create or overwrite the schedule document."""

        raise NotImplementedError

    def update(self, schedule_id: str, fields: dict) -> None:
        raise NotImplementedError

    def soft_delete(self, schedule_id: str, *, deleted_at: datetime) -> None:
        raise NotImplementedError
