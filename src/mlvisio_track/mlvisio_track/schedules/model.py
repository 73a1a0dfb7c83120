from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..database.record_store import StoredDocument


@dataclass(frozen=True)
class Schedule:
    """A weekly class slot. Times are HH:MM strings, so they sort lexically."""

    schedule_id: str
    subject_code: Optional[str]
    day_of_week: Optional[str]
    start_time: Optional[str]
    end_time: Optional[str]
    room: Optional[str]
    year: Optional[str]
    lecturer_id: Optional[str]
    department: Optional[str]
    is_active: bool = True

    @classmethod
    def from_document(cls, doc: StoredDocument) -> "Schedule":
        return cls(
            schedule_id=doc.id,
            subject_code=doc.get("subjectCode"),
            day_of_week=doc.get("dayOfWeek"),
            start_time=doc.get("startTime"),
            end_time=doc.get("endTime"),
            room=doc.get("room"),
            year=doc.get("year"),
            lecturer_id=doc.get("lecturerId"),
            department=doc.get("department"),
            is_active=bool(doc.get("isActive", True)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.schedule_id,
            "subjectCode": self.subject_code,
            "dayOfWeek": self.day_of_week,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "room": self.room,
            "year": self.year,
            "lecturerId": self.lecturer_id,
            "department": self.department,
        }
