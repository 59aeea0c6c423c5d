from datetime import datetime, timedelta

import pytest

from bowen_hooks.domain.entities.user import User
from bowen_hooks.domain.enums import UserRole
from bowen_hooks.domain.events.user_events import UserLockedOut, UserRegistered
from bowen_hooks.domain.value_objects.email import Email

NOW = datetime(2025, 3, 10, 12, 0, 0)


def make_user(now=NOW):
    return User.create(
        email=Email("Ada@Uni.edu"),
        password_hash="hash",
        verification_token="verify-me",
        verification_expires_in=timedelta(hours=24),
        now=now,
    )


def test_create_user_defaults():
    user = make_user()
    assert str(user.email) == "ada@uni.edu"
    assert user.role == UserRole.USER
    assert not user.is_verified
    assert user.is_active
    assert user.verification_token_expires == NOW + timedelta(hours=24)
    events = user.get_events()
    assert isinstance(events[0], UserRegistered)
    assert user.get_events() == []


def test_invalid_email_rejected():
    with pytest.raises(ValueError):
        Email("not-an-email")


def test_lock_after_max_attempts():
    user = make_user()
    for _ in range(4):
        assert user.register_failed_login(5, timedelta(minutes=30), NOW) is False
    assert not user.is_account_locked(NOW)

    assert user.register_failed_login(5, timedelta(minutes=30), NOW) is True
    assert user.account_locked
    assert user.locked_until == NOW + timedelta(minutes=30)
    assert user.is_account_locked(NOW + timedelta(minutes=29))
    assert any(isinstance(e, UserLockedOut) for e in user.get_events())


def test_expired_lock_clears_once():
    user = make_user()
    for _ in range(5):
        user.register_failed_login(5, timedelta(minutes=30), NOW)

    assert user.clear_expired_lock(NOW + timedelta(minutes=10)) is False
    later = NOW + timedelta(minutes=31)
    assert user.clear_expired_lock(later) is True
    assert not user.account_locked
    assert user.locked_until is None
    assert user.failed_login_attempts == 0
    assert user.clear_expired_lock(later) is False


def test_login_streak():
    user = make_user()
    user.record_login(NOW)
    assert user.login_streak == 1

    user.record_login(NOW + timedelta(hours=2))
    assert user.login_streak == 1

    user.record_login(NOW + timedelta(days=1))
    assert user.login_streak == 2

    user.record_login(NOW + timedelta(days=4))
    assert user.login_streak == 1
    assert user.last_login == NOW + timedelta(days=4)


def test_streak_counts_calendar_days():
    user = make_user()
    user.record_login(datetime(2025, 3, 10, 23, 50))
    user.record_login(datetime(2025, 3, 11, 0, 10))
    assert user.login_streak == 2


def test_verify_email_clears_token():
    user = make_user()
    assert not user.is_verification_token_expired(NOW + timedelta(hours=23))
    assert user.is_verification_token_expired(NOW + timedelta(hours=25))

    user.verify_email(NOW)
    assert user.is_verified
    assert user.verification_token is None
    assert user.verification_token_expires is None


def test_reset_password_lifts_lockout():
    user = make_user()
    for _ in range(5):
        user.register_failed_login(5, timedelta(minutes=30), NOW)
    user.set_password_reset_token("reset", timedelta(hours=1), NOW)
    assert not user.is_password_reset_token_expired(NOW + timedelta(minutes=59))
    assert user.is_password_reset_token_expired(NOW + timedelta(minutes=61))

    user.reset_password("new-hash", NOW)
    assert user.password_hash == "new-hash"
    assert user.password_reset_token is None
    assert not user.account_locked
    assert user.failed_login_attempts == 0


def test_premium_expiry():
    user = make_user()
    assert user.expire_premium_if_due(NOW) is False

    user.is_premium = True
    user.premium_expires_at = NOW + timedelta(days=1)
    assert user.expire_premium_if_due(NOW) is False
    assert user.is_premium

    assert user.expire_premium_if_due(NOW + timedelta(days=2)) is True
    assert not user.is_premium


def test_soft_delete():
    user = make_user()
    user.soft_delete(NOW)
    assert user.deleted_at == NOW
    assert not user.is_active


def test_token_claims():
    user = make_user()
    user.role = UserRole.MODERATOR
    assert user.token_claims() == {"id": str(user.id), "email": "ada@uni.edu", "role": "moderator"}
    assert not user.is_admin
