from __future__ import annotations

from typing import Iterable, Optional

from ..common.datetime_utils import is_previous_day
from ..core.enums import AttendanceStatus


def calculate_streak(history: Iterable[tuple[Optional[str], Optional[str]]]) -> int:
    """Count consecutive Present days, walking back from the most recent record.

    ``history`` is ``(date, status)`` pairs already sorted newest first. The
    first non-Present status or calendar gap ends the streak. A second record
    for the same date is not one day earlier, so it also ends the run.
    """
    streak = 0
    previous: Optional[str] = None
    for day, status in history:
        if status != AttendanceStatus.PRESENT.value:
            break
        if previous is not None and not is_previous_day(day, previous):
            break
        streak += 1
        previous = day
    return streak
