from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local, now_utc, to_iso, weekday_name
from ..common.validators import require_fields
from ..core.constants import DEFAULT_SCHEDULE_YEAR, UNKNOWN_LECTURER, WEEK_DAYS
from ..core.exceptions import NotFoundError
from ..lecturers.repository import LecturerRepository
from .model import Schedule
from .repository import ScheduleRepository

CREATE_FIELDS = ("subject", "department", "day", "startTime", "endTime", "room")


def _by_start_time(row: dict) -> str:
    return row.get("startTime") or ""


class ScheduleService:
    def __init__(self, schedules: ScheduleRepository, lecturers: LecturerRepository):
        self._schedules = schedules
        self._lecturers = lecturers

    def _with_lecturer_names(self, schedules: Sequence[Schedule], *, missing: Optional[str] = None) -> list[dict]:
        """Rows without ``dayOfWeek``, named by lecturer.

        A dangling lecturer id gets ``missing`` as its name, or no name at all when None.
        """
        lecturers = self._lecturers.get_many(s.lecturer_id for s in schedules if s.lecturer_id)
        rows = []
        for s in schedules:
            row = s.to_dict()
            row.pop("dayOfWeek")
            lec = lecturers.get(s.lecturer_id) if s.lecturer_id else None
            if lec:
                row["lecturerName"] = lec.name
            elif s.lecturer_id and missing:
                row["lecturerName"] = missing
            rows.append(row)
        return rows

    def list_all(self) -> list[dict]:
        return [s.to_dict() for s in self._schedules.list_active()]

    def today(self, *, today: Optional[date] = None) -> tuple[str, list[dict]]:
        day = weekday_name(today or now_local().date())
        rows = self._with_lecturer_names(
            self._schedules.list_active(day_of_week=day), missing=UNKNOWN_LECTURER
        )
        rows.sort(key=_by_start_time)
        return day, rows

    def week(self, *, department: Optional[str] = None, year: Optional[str] = None) -> dict[str, list[dict]]:
        week: dict[str, list[dict]] = {day: [] for day in WEEK_DAYS}
        schedules = [
            s
            for s in self._schedules.list_active(department=department or None, year=year or None)
            if s.day_of_week in week
        ]
        for s, row in zip(schedules, self._with_lecturer_names(schedules)):
            week[s.day_of_week].append(row)
        for rows in week.values():
            rows.sort(key=_by_start_time)
        return week

    def create(self, payload: dict, *, now: Optional[datetime] = None) -> dict:
        require_fields(
            payload,
            CREATE_FIELDS,
            "Missing required fields: subject, department, day, startTime, endTime, room",
        )
        subject_code = payload["subject"]
        day = payload["day"]
        start_time = str(payload["startTime"])

        lecturer_id = None
        if payload.get("lecturer"):
            lecturer = self._lecturers.find_by_name(payload["lecturer"])
            if lecturer:
                lecturer_id = lecturer.lecturer_id or lecturer.doc_id

        data = {
            "subjectCode": subject_code,
            "dayOfWeek": day,
            "startTime": start_time,
            "endTime": payload["endTime"],
            "room": payload["room"],
            "year": payload.get("year") or DEFAULT_SCHEDULE_YEAR,
            "lecturerId": lecturer_id,
            "department": payload["department"],
            "isActive": True,
            "createdAt": now or now_utc(),
        }
        schedule_id = f"{subject_code}_{day}_{start_time.replace(':', '')}"
        self._schedules.save(schedule_id, data)
        return {"id": schedule_id, **{k: to_iso(v) for k, v in data.items()}}

    def update(self, schedule_id: str, fields: dict) -> None:
        data = dict(fields)
        data.pop("id", None)
        try:
            self._schedules.update(schedule_id, data)
        except NotFoundError:
            raise NotFoundError("Schedule not found")

    def delete(self, schedule_id: str, *, now: Optional[datetime] = None) -> None:
        try:
            self._schedules.soft_delete(schedule_id, deleted_at=now or now_utc())
        except NotFoundError:
            raise NotFoundError("Schedule not found")
