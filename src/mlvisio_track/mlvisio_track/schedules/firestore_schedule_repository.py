from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..core.constants import SCHEDULES
from ..database.record_store import RecordStore
from .model import Schedule
from .repository import ScheduleRepository


class FirestoreScheduleRepository(ScheduleRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def list_active(
        self,
        *,
        department: Optional[str] = None,
        year: Optional[str] = None,
        day_of_week: Optional[str] = None,
    ) -> Sequence[Schedule]:
        filters = [("isActive", "==", True)]
        if day_of_week:
            filters.append(("dayOfWeek", "==", day_of_week))
        if department:
            filters.append(("department", "==", department))
        if year:
            filters.append(("year", "==", year))
        return [Schedule.from_document(d) for d in self._store.query(SCHEDULES, filters=filters)]

    def get_by_id(self, schedule_id: str) -> Optional[Schedule]:
        doc = self._store.get(SCHEDULES, schedule_id)
        return Schedule.from_document(doc) if doc else None

    def save(self, schedule_id: str, data: dict) -> None:
        self._store.set(SCHEDULES, schedule_id, data)

    def update(self, schedule_id: str, fields: dict) -> None:
        self._store.update(SCHEDULES, schedule_id, fields)

    def soft_delete(self, schedule_id: str, *, deleted_at: datetime) -> None:
        self._store.update(SCHEDULES, schedule_id, {"isActive": False, "deletedAt": deleted_at})
