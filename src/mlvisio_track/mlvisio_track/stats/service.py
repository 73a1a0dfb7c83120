from __future__ import annotations

import math
from collections import Counter
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import today_iso
from ..core.enums import AttendanceStatus, StudyMode
from ..attendance.repository import AttendanceRepository
from ..subjects.repository import SubjectRepository
from ..users.repository import UserRepository


def percentage(part: int, total: int) -> int:
    """Rounded share in percent (half up), 0 when there is nothing to divide by."""
    if total <= 0:
        return 0
    return int(math.floor(part / total * 100 + 0.5))


class DashboardService:
    def __init__(
        self,
        users: UserRepository,
        attendance: AttendanceRepository,
        subjects: SubjectRepository,
        departments: Sequence[str],
    ):
        self._users = users
        self._attendance = attendance
        self._subjects = subjects
        self._departments = tuple(departments)

    def dashboard(self, *, today: Optional[date] = None) -> dict:
        students = self._users.list_active_students()
        records = self._attendance.list_for_date(today_iso(today))

        present = {
            r.registration_number
            for r in records
            if r.registration_number and r.status == AttendanceStatus.PRESENT.value
        }
        absent = {
            r.registration_number
            for r in records
            if r.registration_number and r.status == AttendanceStatus.ABSENT.value
        }

        return {
            "totalStudents": len(students),
            "presentToday": len(present),
            "absentToday": len(absent),
            "attendanceRate": percentage(len(present), len(students)),
            "totalCourses": sum(self._subjects.count_hierarchical(d) for d in self._departments),
            "departmentAttendance": self._department_attendance(students, present),
            "studyModeCounts": self._study_mode_counts(students),
        }

    def _department_attendance(self, students, present: set[str]) -> list[dict]:
        totals = Counter(s.department for s in students if s.department)

        departments = {s.registration_number: s.department for s in students if s.registration_number}
        unresolved = [reg for reg in present if reg not in departments]
        if unresolved:
            for reg, user in self._users.get_by_registration_numbers(unresolved).items():
                departments[reg] = user.department
        present_by_dept = Counter(departments[reg] for reg in present if departments.get(reg))

        return [
            {"department": dept, "rate": percentage(present_by_dept[dept], totals[dept])}
            for dept in sorted(totals)
        ]

    @staticmethod
    def _study_mode_counts(students) -> dict:
        modes = Counter(s.study_mode for s in students)
        return {"fullTime": modes[StudyMode.FULL_TIME], "partTime": modes[StudyMode.PART_TIME]}
