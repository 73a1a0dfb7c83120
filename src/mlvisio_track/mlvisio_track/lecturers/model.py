from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..database.record_store import StoredDocument


@dataclass(frozen=True)
class Lecturer:
    doc_id: str
    lecturer_id: Optional[str]
    name: Optional[str]
    email: Optional[str]
    department: Optional[str]

    @classmethod
    def from_document(cls, doc: StoredDocument) -> "Lecturer":
        return cls(
            doc_id=doc.id,
            lecturer_id=doc.get("lecturerId"),
            name=doc.get("name"),
            email=doc.get("email"),
            department=doc.get("department"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.doc_id,
            "lecturerId": self.lecturer_id,
            "name": self.name,
            "email": self.email,
            "department": self.department,
        }
