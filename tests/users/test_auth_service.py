from datetime import datetime, timezone

import bcrypt
import pytest
from werkzeug.security import generate_password_hash

from mlvisio_track.core.exceptions import AuthenticationError, ValidationError
from mlvisio_track.users.credentials import hash_password, issue_session_token, verify_password
from mlvisio_track.users.service import INVALID_CREDENTIALS


def test_new_hashes_are_bcrypt():
    hashed = hash_password("secret")

    assert hashed.startswith("$2b$12$")
    assert bcrypt.checkpw(b"secret", hashed.encode())
    assert verify_password(hashed, "secret")
    assert not verify_password(hashed, "nope")


def test_hash_password_rejects_overlong_secret():
    with pytest.raises(ValidationError):
        hash_password("x" * 100, rounds=4)


def test_verify_password_accepts_werkzeug_and_bcrypt():
    assert verify_password(generate_password_hash("secret"), "secret")
    assert not verify_password(generate_password_hash("secret"), "nope")

    legacy = bcrypt.hashpw(b"HNDIT/PT/2024/001", bcrypt.gensalt(4)).decode()
    assert verify_password(legacy, "HNDIT/PT/2024/001")
    assert not verify_password(legacy, "wrong")


def test_verify_password_never_raises_on_garbage():
    assert not verify_password(None, "x")
    assert not verify_password("", "x")
    assert not verify_password("$2b$not-a-hash", "x")
    assert not verify_password("plain-text", "plain-text")


def test_session_token_is_time_based():
    now = datetime(2024, 5, 3, tzinfo=timezone.utc)
    assert issue_session_token(now) == f"jwt-token-{int(now.timestamp() * 1000)}"


def test_login_success(container, add_user, fixed_now):
    add_user("s1@x.com", email="s1@x.com", name="One", password=hash_password("pw"), registrationNumber="S1")

    result = container.auth_service.authenticate("s1@x.com", "pw", now=fixed_now)

    assert result.user.user_id == "s1@x.com"
    assert result.token.startswith("jwt-token-")
    view = result.to_dict()["user"]
    assert view["registrationNumber"] == "S1"
    assert "password" not in view


@pytest.mark.parametrize(
    "email,password",
    [("ghost@x.com", "pw"), ("s1@x.com", "bad"), ("off@x.com", "bad")],
)
def test_login_failures_share_one_message(container, add_user, email, password):
    add_user("u1", email="s1@x.com", password=hash_password("pw"))
    add_user("u2", email="off@x.com", password=hash_password("pw"), isActive=False)

    with pytest.raises(AuthenticationError) as exc:
        container.auth_service.authenticate(email, password)
    assert str(exc.value) == INVALID_CREDENTIALS


def test_inactive_account_can_still_log_in(container, add_user):
    add_user("u2", email="off@x.com", password=hash_password("pw", rounds=4), isActive=False)

    result = container.auth_service.authenticate("off@x.com", "pw")

    assert result.user.user_id == "u2"
    assert result.user.is_active is False


def test_login_requires_both_fields(container):
    with pytest.raises(ValidationError):
        container.auth_service.authenticate("", "pw")
    with pytest.raises(ValidationError):
        container.auth_service.authenticate("a@x.com", None)
