from __future__ import annotations

from typing import Optional

from ..core.constants import SETTINGS
from ..database.record_store import RecordStore
from .model import AttendanceGoal
from .repository import SettingsRepository

ATTENDANCE_GOAL_DOC = "attendanceGoal"


class FirestoreSettingsRepository(SettingsRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def get_attendance_goal(self) -> Optional[AttendanceGoal]:
        doc = self._store.get(SETTINGS, ATTENDANCE_GOAL_DOC)
        return AttendanceGoal.from_document(doc) if doc else None
