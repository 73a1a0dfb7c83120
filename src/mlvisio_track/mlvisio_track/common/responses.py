from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Optional

from flask import jsonify

from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def ok(data: Any = None, *, message: Optional[str] = None, status: int = 200, **extra: Any):
    """Standard success envelope: {success, message?, data?, ...extra}."""
    body: dict[str, Any] = {"success": True}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    body.update(extra)
    return jsonify(body), status


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def handle_errors(context: str):
    """Wrap a view so failures always come back in the JSON envelope.

    Domain errors keep their own message and status code. Anything else is
    logged with its traceback and reported as ``500 "<context>: <error>"``.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except DomainError as e:
                return fail(str(e), e.status_code)
            except Exception as e:
                logger.exception("%s", context)
                return fail(f"{context}: {e}", 500)

        return wrapper

    return decorator
