from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import ATTENDANCE
from ..database.record_store import RecordStore
from .model import AttendanceRecord
from .repository import AttendanceRepository


class FirestoreAttendanceRepository(AttendanceRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def _query(self, **kwargs) -> list[AttendanceRecord]:
        return [AttendanceRecord.from_document(d) for d in self._store.query(ATTENDANCE, **kwargs)]

    def list_for_date(self, day: str) -> Sequence[AttendanceRecord]:
        return self._query(filters=[("date", "==", day)])

    def list_for_student(self, registration_number: str) -> Sequence[AttendanceRecord]:
        return self._query(filters=[("registrationNumber", "==", registration_number)])

    def list_for_vertex_label(self, vertex_label: str) -> Sequence[AttendanceRecord]:
        return self._query(filters=[("vertexLabel", "==", vertex_label)])

    def list_for_student_newest_first(self, registration_number: str) -> Sequence[AttendanceRecord]:
        return self._query(
            filters=[("registrationNumber", "==", registration_number)],
            order_by="date",
            descending=True,
        )

    def list_range(
        self,
        *,
        registration_number: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        filters = []
        if registration_number:
            filters.append(("registrationNumber", "==", registration_number))
        if start_date:
            filters.append(("date", ">=", start_date))
        if end_date:
            filters.append(("date", "<=", end_date))
        return self._query(filters=filters, order_by="date", descending=True)

    def list_recent(self, limit: int) -> Sequence[AttendanceRecord]:
        return self._query(order_by="timestamp", descending=True, limit=limit)

    def save(self, record_id: str, data: dict) -> None:
        self._store.set(ATTENDANCE, record_id, data)
