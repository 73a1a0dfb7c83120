from __future__ import annotations

from typing import Optional, Protocol

from .model import AttendanceGoal


class SettingsRepository(Protocol):
    def get_attendance_goal(self) -> Optional[AttendanceGoal]:
        """Stored goal, or None when the settings document has not been written."""

        raise NotImplementedError
