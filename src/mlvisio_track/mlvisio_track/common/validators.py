from __future__ import annotations

import re
from typing import Any

from ..core.exceptions import ValidationError

_ILLEGAL_ID_CHARS = re.compile(r"[^a-zA-Z0-9_\-]")


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def require_non_empty(value: Any, field_name: str) -> str:
    if is_blank(value):
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_fields(payload: dict, fields: tuple[str, ...], message: str) -> None:
    """Raise one ValidationError carrying ``message`` if any field is missing."""
    if any(is_blank(payload.get(f)) for f in fields):
        raise ValidationError(message)


def sanitize_document_id(value: str) -> str:
    """Replace characters Firestore does not accept in document ids (e.g. '/')."""
    return _ILLEGAL_ID_CHARS.sub("_", value)
