from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..core.constants import DEFAULT_GOAL_DESCRIPTION, DEFAULT_REQUIRED_PERCENTAGE
from ..database.record_store import StoredDocument


@dataclass(frozen=True)
class AttendanceGoal:
    required_percentage: int = DEFAULT_REQUIRED_PERCENTAGE
    description: str = DEFAULT_GOAL_DESCRIPTION

    @classmethod
    def from_document(cls, doc: StoredDocument) -> "AttendanceGoal":
        required = doc.get("requiredPercentage")
        return cls(
            required_percentage=int(required) if required is not None else DEFAULT_REQUIRED_PERCENTAGE,
            description=doc.get("description") or DEFAULT_GOAL_DESCRIPTION,
        )

    def to_dict(self) -> dict[str, Any]:
        return {"requiredPercentage": self.required_percentage, "description": self.description}
