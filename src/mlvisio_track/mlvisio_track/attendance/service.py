from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Optional, Sequence

from ..common.datetime_utils import now_utc, parse_iso_date, to_iso, today_iso
from ..common.validators import is_blank, require_fields, sanitize_document_id
from ..core.constants import DEFAULT_MARK_CONFIDENCE, DEFAULT_MARK_LOCATION, DEFAULT_STUDENT_REVIEW
from ..core.enums import AttendanceStatus, Role
from ..core.exceptions import NotFoundError, ValidationError
from ..users.model import User
from ..users.repository import UserRepository
from .model import AttendanceRecord
from .repository import AttendanceRepository
from .streak import calculate_streak

logger = logging.getLogger(__name__)

MARK_FIELDS = ("registrationNumber", "subjectCode")
UNKNOWN_STUDENT_NAME = "Unknown Student"
UNKNOWN_STUDENT_EMAIL = "unknown@example.com"
UNKNOWN_DEPARTMENT = "Unknown"


def attendance_record_id(registration_number: str, day: str, subject_code: str) -> str:
    """Composite key: one document per (student, date, subject).

    Only the registration number is sanitised (it may contain slashes). The
    date and subject code are appended unchanged, matching ids already stored.
    """
    return f"{sanitize_document_id(registration_number)}_{day}_{subject_code}"


def _in_range(day: Optional[str], start_date: Optional[str], end_date: Optional[str]) -> bool:
    if day is None:
        return True
    if start_date and day < start_date:
        return False
    if end_date and day > end_date:
        return False
    return True


def _student_info(registration_number: Optional[str], student: Optional[User]) -> dict[str, Any]:
    if student is None:
        return {
            "name": UNKNOWN_STUDENT_NAME,
            "email": UNKNOWN_STUDENT_EMAIL,
            "registrationNumber": registration_number,
            "department": UNKNOWN_DEPARTMENT,
        }
    return {
        "name": student.name,
        "email": student.email,
        "registrationNumber": student.registration_number,
        "department": student.department,
    }


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, users: UserRepository):
        self._attendance = attendance
        self._users = users

    def records_for_date(self, day: Optional[str] = None, *, today: Optional[date] = None) -> tuple[str, list[dict]]:
        day = day or today_iso(today)
        return day, [r.to_day_view() for r in self._attendance.list_for_date(day)]

    def _require_student(self, email: Optional[str], *, role: Optional[str] = None) -> User:
        if is_blank(email):
            raise ValidationError("Student email is required")
        student = self._users.get_by_email(email.strip(), role=role)
        if student is None:
            raise NotFoundError("Student not found")
        return student

    def student_history(
        self,
        email: Optional[str],
        *,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> list[dict]:
        student = self._require_student(email, role=Role.STUDENT.value)

        records: Sequence[AttendanceRecord] = []
        if student.registration_number:
            records = self._attendance.list_for_student(student.registration_number)
        if not records and student.vertex_label:
            logger.info("No records by registration number for %s, trying vertex label", student.email)
            records = self._attendance.list_for_vertex_label(student.vertex_label)

        filtered = [r for r in records if _in_range(r.date, start_date or None, end_date or None)]
        filtered.sort(key=lambda r: r.date or "", reverse=True)
        return [r.to_student_view() for r in filtered]

    def streak(self, email: Optional[str]) -> int:
        student = self._require_student(email)
        if not student.registration_number:
            return 0
        records = self._attendance.list_for_student_newest_first(student.registration_number)
        return calculate_streak((r.date, r.status) for r in records)

    def report(
        self,
        *,
        email: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        department: Optional[str] = None,
    ) -> list[dict]:
        # An unknown email leaves the report unfiltered by student.
        registration_number = None
        if not is_blank(email):
            student = self._users.get_by_email(email.strip())
            if student is not None:
                registration_number = student.registration_number

        records = self._attendance.list_range(
            registration_number=registration_number,
            start_date=start_date or None,
            end_date=end_date or None,
        )
        students = self._users.get_by_registration_numbers(
            r.registration_number for r in records if r.registration_number
        )

        rows = []
        for r in records:
            student = students.get(r.registration_number)
            # Records of unknown students are kept whatever the department filter.
            if department and student is not None and student.department != department:
                continue
            rows.append(r.to_report_view(_student_info(r.registration_number, student)))
        return rows

    def mark(self, payload: dict, *, today: Optional[date] = None, now: Optional[datetime] = None) -> dict:
        require_fields(payload, MARK_FIELDS, "Registration number and subject code are required")
        registration_number = str(payload["registrationNumber"]).strip()
        subject_code = str(payload["subjectCode"]).strip()
        if "/" in subject_code:
            raise ValidationError("Subject code must not contain '/'")

        status = payload.get("status") or AttendanceStatus.PRESENT.value
        if status not in {s.value for s in AttendanceStatus}:
            raise ValidationError(f"Invalid status: {status}")

        day = payload.get("date") or today_iso(today)
        try:
            # Normalised so "2024-5-3" and "2024-05-03" share one document.
            day = parse_iso_date(day).isoformat()
        except (TypeError, ValueError):
            raise ValidationError(f"Invalid date: {day}") from None

        ts = now or now_utc()
        record_id = attendance_record_id(registration_number, day, subject_code)
        data: dict[str, Any] = {
            "registrationNumber": registration_number,
            "vertexLabel": registration_number,
            "subjectCode": subject_code,
            "status": status,
            "location": payload.get("location") or DEFAULT_MARK_LOCATION,
            "date": day,
            "timestamp": ts,
            "confidence": DEFAULT_MARK_CONFIDENCE,
            "studentReview": DEFAULT_STUDENT_REVIEW,
            "createdAt": ts,
        }
        if not is_blank(payload.get("arrivalTime")):
            data["arrivalTime"] = payload["arrivalTime"]
        if not is_blank(payload.get("remarks")):
            data["remarks"] = payload["remarks"]

        self._attendance.save(record_id, data)
        logger.info("Marked %s for %s on %s (%s)", status, registration_number, day, subject_code)
        return {"id": record_id, **{k: to_iso(v) for k, v in data.items()}}
