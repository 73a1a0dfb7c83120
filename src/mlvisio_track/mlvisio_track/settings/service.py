from __future__ import annotations

from ..core.exceptions import NotFoundError
from .model import AttendanceGoal
from .repository import SettingsRepository

ATTENDANCE_GOAL_KEY = "attendanceGoal"


class SettingsService:
    def __init__(self, settings: SettingsRepository):
        self._settings = settings

    def attendance_goal(self) -> AttendanceGoal:
        return self._settings.get_attendance_goal() or AttendanceGoal()

    def get(self, key: str) -> dict:
        if key != ATTENDANCE_GOAL_KEY:
            raise NotFoundError("Endpoint not found")
        return self.attendance_goal().to_dict()
