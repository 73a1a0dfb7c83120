from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import NO_LECTURER_ASSIGNED, UNKNOWN_LECTURER
from ..lecturers.repository import LecturerRepository
from .repository import SubjectRepository


class SubjectService:
    def __init__(self, subjects: SubjectRepository, lecturers: LecturerRepository, departments: Sequence[str]):
        self._subjects = subjects
        self._lecturers = lecturers
        self._departments = tuple(departments)

    def list_subjects(self, department: Optional[str] = None) -> list[dict]:
        departments = [department] if department else list(self._departments)
        subjects = [s for dept in departments for s in self._subjects.list_for_department(dept)]

        lecturers = self._lecturers.get_many(s.lecturer_id for s in subjects if s.lecturer_id)

        out: list[dict] = []
        for s in subjects:
            row = s.to_dict()
            if not s.lecturer_id:
                row["lecturerName"] = NO_LECTURER_ASSIGNED
            elif s.lecturer_id in lecturers:
                row["lecturerName"] = lecturers[s.lecturer_id].name
                row["lecturerEmail"] = lecturers[s.lecturer_id].email
            else:
                row["lecturerName"] = UNKNOWN_LECTURER
            out.append(row)
        return out
