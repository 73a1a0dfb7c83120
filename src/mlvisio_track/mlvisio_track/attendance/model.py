from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..common.datetime_utils import format_hhmm, to_iso
from ..database.record_store import StoredDocument


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's status for one subject on one day."""

    record_id: str
    registration_number: Optional[str]
    subject_code: Optional[str]
    date: Optional[str]
    status: Optional[str]
    location: Optional[str] = None
    confidence: Optional[float] = None
    timestamp: Optional[datetime] = None
    arrival_time: Optional[str] = None
    remarks: Optional[str] = None
    student_review: Optional[str] = None
    vertex_label: Optional[str] = None

    @classmethod
    def from_document(cls, doc: StoredDocument) -> "AttendanceRecord":
        confidence = doc.get("confidence")
        return cls(
            record_id=doc.id,
            registration_number=doc.get("registrationNumber"),
            subject_code=doc.get("subjectCode"),
            date=doc.get("date"),
            status=doc.get("status"),
            location=doc.get("location"),
            confidence=float(confidence) if confidence is not None else None,
            timestamp=doc.get("timestamp"),
            arrival_time=doc.get("arrivalTime"),
            remarks=doc.get("remarks"),
            student_review=doc.get("studentReview"),
            vertex_label=doc.get("vertexLabel"),
        )

    @property
    def display_arrival_time(self) -> str:
        """Explicit arrival time when one was recorded, else the capture time."""
        return self.arrival_time or format_hhmm(self.timestamp)

    def to_day_view(self) -> dict[str, Any]:
        return {
            "id": self.record_id,
            "registrationNumber": self.registration_number,
            "status": self.status,
            "subjectCode": self.subject_code,
            "timestamp": to_iso(self.timestamp),
            "location": self.location,
        }

    def to_student_view(self) -> dict[str, Any]:
        return {
            "id": self.record_id,
            "date": self.date,
            "status": self.status,
            "subjectCode": self.subject_code,
            "arrivalTime": self.display_arrival_time,
            "location": self.location,
            "confidence": self.confidence,
        }

    def to_report_view(self, student_info: dict[str, Any]) -> dict[str, Any]:
        row = {
            "id": self.record_id,
            "registrationNumber": self.registration_number,
            "studentInfo": student_info,
            "date": self.date,
            "status": self.status,
            "subjectCode": self.subject_code,
            "arrivalTime": self.display_arrival_time,
            "location": self.location,
            "confidence": self.confidence,
        }
        if self.timestamp is not None:
            row["timestamp"] = to_iso(self.timestamp)
        return row
