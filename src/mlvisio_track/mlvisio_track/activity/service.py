from __future__ import annotations

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import to_iso
from ..core.constants import RECENT_ACTIVITY_LIMIT
from ..core.enums import AttendanceStatus


def to_activity(record: AttendanceRecord) -> dict:
    subject = record.subject_code
    if record.status == AttendanceStatus.PRESENT.value:
        kind, details = "check-in", f"Checked in for {subject} class"
    elif record.status == AttendanceStatus.ABSENT.value:
        kind, details = "check-out", f"Marked absent for {subject} class"
    else:
        kind, details = "check-in", f"Attendance recorded for {subject} class"
    return {"id": record.record_id, "type": kind, "details": details, "timestamp": to_iso(record.timestamp)}


class ActivityService:
    def __init__(self, attendance: AttendanceRepository, limit: int = RECENT_ACTIVITY_LIMIT):
        self._attendance = attendance
        self._limit = limit

    def recent(self) -> list[dict]:
        return [to_activity(r) for r in self._attendance.list_recent(self._limit)]
