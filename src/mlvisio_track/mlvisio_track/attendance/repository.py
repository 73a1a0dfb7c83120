from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_for_date(self, day: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_student(self, registration_number: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_vertex_label(self, vertex_label: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_student_newest_first(self, registration_number: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_range(
        self,
        *,
        registration_number: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        """Records within the inclusive date range, newest first."""

        raise NotImplementedError

    def list_recent(self, limit: int) -> Sequence[AttendanceRecord]:
        """Most recently captured records (by timestamp)."""

        raise NotImplementedError

    def save(self, record_id: str, data: dict) -> None:
        """Create or overwrite; the composite id makes repeated marks idempotent."""

        raise NotImplementedError
