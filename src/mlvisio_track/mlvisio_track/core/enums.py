from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account role stored on the user document."""

    STUDENT = "student"
    ADMIN = "admin"


class AttendanceStatus(str, Enum):
    """Status values written by the mark-attendance flow."""

    PRESENT = "Present"
    ABSENT = "Absent"
    LATE = "Late"


class StudyMode(str, Enum):
    FULL_TIME = "Full Time"
    PART_TIME = "Part Time"

    @classmethod
    def parse(cls, value: str | None) -> "StudyMode":
        """Unknown or missing values count as full time."""
        if value and value.strip().lower() == cls.PART_TIME.value.lower():
            return cls.PART_TIME
        return cls.FULL_TIME
