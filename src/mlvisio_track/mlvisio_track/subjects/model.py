from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..database.record_store import StoredDocument


@dataclass(frozen=True)
class Subject:
    subject_id: str
    course_code: Optional[str]
    course_name: Optional[str]
    semester: Optional[str]
    credits: Optional[int]
    department: Optional[str]
    lecturer_id: Optional[str]
    is_active: Optional[bool]

    @classmethod
    def from_document(cls, doc: StoredDocument, *, department: Optional[str] = None) -> "Subject":
        """``department`` overrides the stored field (hierarchical docs may lack it)."""
        credits = doc.get("credits")
        return cls(
            subject_id=doc.id,
            course_code=doc.get("courseCode"),
            course_name=doc.get("courseName"),
            semester=doc.get("semester"),
            credits=int(credits) if credits is not None else None,
            department=department or doc.get("department"),
            lecturer_id=doc.get("lecturerId"),
            is_active=doc.get("isActive"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.subject_id,
            "courseCode": self.course_code,
            "courseName": self.course_name,
            "semester": self.semester,
            "credits": self.credits,
            "department": self.department,
            "isActive": self.is_active,
            "lecturerId": self.lecturer_id,
        }
