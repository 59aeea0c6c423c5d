"""User entity with credential and session business logic"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional, List

from ..value_objects.email import Email
from ..value_objects.entity_ids import UserId
from ..enums import UserRole
from ..events.user_events import (
    UserRegistered, UserEmailVerified, UserLockedOut, UserPasswordReset, PremiumExpired
)


@dataclass
class User:
    id: UserId
    email: Email
    password_hash: str
    phone: Optional[str] = None
    role: UserRole = UserRole.USER

    is_verified: bool = False
    is_photo_verified: bool = False
    is_active: bool = True
    is_premium: bool = False
    premium_expires_at: Optional[datetime] = None

    last_login: Optional[datetime] = None
    login_streak: int = 0

    # Lockout
    failed_login_attempts: int = 0
    account_locked: bool = False
    locked_until: Optional[datetime] = None

    graduation_year: Optional[int] = None

    verification_token: Optional[str] = None
    verification_token_expires: Optional[datetime] = None
    password_reset_token: Optional[str] = None
    password_reset_expires: Optional[datetime] = None

    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)
    deleted_at: Optional[datetime] = None

    # Domain events
    _events: List = field(default_factory=list, init=False, repr=False, compare=False)

    @classmethod
    def create(
        cls,
        email: Email,
        password_hash: str,
        verification_token: str,
        verification_expires_in: timedelta,
        now: Optional[datetime] = None,
    ) -> 'User':
        """Factory method to create a new, unverified user"""
        now = now or datetime.utcnow()
        user = cls(
            id=UserId.generate(),
            email=email,
            password_hash=password_hash,
            verification_token=verification_token,
            verification_token_expires=now + verification_expires_in,
            created_at=now,
            updated_at=now,
        )
        user._events.append(UserRegistered(user_id=user.id, email=email, registered_at=now))
        return user

    # Lockout

    def clear_expired_lock(self, now: Optional[datetime] = None) -> bool:
        """Lift a lock whose ``locked_until`` has passed.

        Returns True when the lock was cleared and the user needs saving.
        """
        now = now or datetime.utcnow()
        if not self.account_locked:
            return False
        if self.locked_until is not None and self.locked_until > now:
            return False
        self.account_locked = False
        self.locked_until = None
        self.failed_login_attempts = 0
        self.updated_at = now
        return True

    def is_account_locked(self, now: Optional[datetime] = None) -> bool:
        now = now or datetime.utcnow()
        return (
            self.account_locked
            and self.locked_until is not None
            and self.locked_until > now
        )

    def register_failed_login(
        self,
        max_attempts: int,
        lockout_duration: timedelta,
        now: Optional[datetime] = None,
    ) -> bool:
        """Count a bad password; lock once the threshold is reached.

        Returns True when this attempt locked the account.
        """
        now = now or datetime.utcnow()
        self.failed_login_attempts += 1
        self.updated_at = now

        if self.failed_login_attempts >= max_attempts:
            self.account_locked = True
            self.locked_until = now + lockout_duration
            self._events.append(UserLockedOut(user_id=self.id, locked_until=self.locked_until))
            return True
        return False

    def reset_failed_logins(self) -> None:
        self.failed_login_attempts = 0
        self.account_locked = False
        self.locked_until = None

    # Login streak

    def record_login(self, now: Optional[datetime] = None) -> None:
        """Update ``last_login`` and the consecutive-day login streak"""
        now = now or datetime.utcnow()

        if self.last_login is None:
            self.login_streak = 1
        else:
            days = (now.date() - self.last_login.date()).days
            if days == 1:
                self.login_streak += 1
            elif days > 1:
                self.login_streak = 1
            # same day: unchanged

        self.last_login = now
        self.updated_at = now

    # Email verification

    def is_verification_token_expired(self, now: Optional[datetime] = None) -> bool:
        now = now or datetime.utcnow()
        return (
            self.verification_token_expires is not None
            and self.verification_token_expires < now
        )

    def verify_email(self, now: Optional[datetime] = None) -> None:
        """Business logic: verify user email"""
        now = now or datetime.utcnow()
        self.is_verified = True
        self.verification_token = None
        self.verification_token_expires = None
        self.updated_at = now

        self._events.append(UserEmailVerified(
            user_id=self.id,
            email=self.email,
            verified_at=now
        ))

    # Password reset

    def set_password_reset_token(
        self,
        token: str,
        expires_in: timedelta,
        now: Optional[datetime] = None,
    ) -> None:
        now = now or datetime.utcnow()
        self.password_reset_token = token
        self.password_reset_expires = now + expires_in
        self.updated_at = now

    def is_password_reset_token_expired(self, now: Optional[datetime] = None) -> bool:
        now = now or datetime.utcnow()
        return (
            self.password_reset_expires is not None
            and self.password_reset_expires < now
        )

    def reset_password(self, password_hash: str, now: Optional[datetime] = None) -> None:
        """Replace the hash, consume the reset token and lift any lockout"""
        now = now or datetime.utcnow()
        self.password_hash = password_hash
        self.password_reset_token = None
        self.password_reset_expires = None
        self.reset_failed_logins()
        self.updated_at = now

        self._events.append(UserPasswordReset(user_id=self.id, reset_at=now))

    # Premium

    def expire_premium_if_due(self, now: Optional[datetime] = None) -> bool:
        """Flip ``is_premium`` off once ``premium_expires_at`` has passed.

        Returns True when the flag changed and the user needs saving.
        """
        now = now or datetime.utcnow()
        if not self.is_premium or self.premium_expires_at is None:
            return False
        if self.premium_expires_at >= now:
            return False
        self.is_premium = False
        self.updated_at = now
        self._events.append(PremiumExpired(user_id=self.id, expired_at=now))
        return True

    def soft_delete(self, now: Optional[datetime] = None) -> None:
        now = now or datetime.utcnow()
        self.deleted_at = now
        self.is_active = False
        self.updated_at = now

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def token_claims(self) -> dict:
        """Claims embedded in both access and refresh tokens"""
        return {"id": str(self.id.value), "email": str(self.email), "role": self.role.value}

    def get_events(self) -> List:
        """Get and clear domain events"""
        events = self._events.copy()
        self._events.clear()
        return events
