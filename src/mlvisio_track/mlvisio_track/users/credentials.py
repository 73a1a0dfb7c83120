"""Credential verifier: password hashing and the login session token."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

import bcrypt
from werkzeug.security import check_password_hash

from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)

_BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")
BCRYPT_ROUNDS = 12


def hash_password(password: str, *, rounds: int = BCRYPT_ROUNDS) -> str:
    """bcrypt hash, the format every client of the user collection verifies."""
    try:
        return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds)).decode("utf-8")
    except ValueError as e:
        # bcrypt refuses secrets longer than 72 bytes.
        raise ValidationError(f"Invalid password: {e}") from e


def verify_password(stored_hash: Optional[str], password: str) -> bool:
    """Check ``password`` against a werkzeug or bcrypt hash.

    New accounts carry bcrypt hashes. Older werkzeug hashes still verify.
    A malformed hash never verifies.
    """
    if not stored_hash or password is None:
        return False

    try:
        if stored_hash.startswith(_BCRYPT_PREFIXES):
            return bcrypt.checkpw(password.encode("utf-8"), stored_hash.encode("utf-8"))
        return check_password_hash(stored_hash, password)
    except ValueError:
        logger.warning("Unreadable password hash, treating as mismatch")
        return False


def issue_session_token(now: Optional[datetime] = None) -> str:
    """Opaque time-based placeholder token.

    Not signed and not verified anywhere; callers must not rely on it for
    authorization.
    """
    now = now or datetime.now()
    return f"jwt-token-{int(now.timestamp() * 1000)}"
