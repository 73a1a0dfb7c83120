from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Any, Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def now_utc() -> datetime:
    """Timezone-aware timestamp for values persisted in Firestore."""
    return datetime.now(timezone.utc)


def today_iso(today: Optional[date] = None) -> str:
    return (today or now_local().date()).isoformat()


def weekday_name(day: date) -> str:
    """English weekday name as stored in schedule documents (e.g. 'Monday')."""
    return day.strftime("%A")


def is_previous_day(candidate: Optional[str], reference: Optional[str]) -> bool:
    """True when ``candidate`` is exactly one calendar day before ``reference``.

    Both values are YYYY-MM-DD strings; anything unparsable is never consecutive.
    """
    try:
        return parse_iso_date(candidate) + timedelta(days=1) == parse_iso_date(reference)
    except (TypeError, ValueError):
        return False


def format_hhmm(value: Any) -> str:
    """Render a stored timestamp as local HH:MM, or '-' when absent."""
    if not isinstance(value, datetime):
        return "-"
    return value.astimezone().strftime("%H:%M")


def to_iso(value: Any) -> Any:
    """Serialize datetimes for JSON payloads; other values pass through."""
    if isinstance(value, datetime):
        return value.isoformat()
    return value
