"""User domain events"""

from dataclasses import dataclass
from datetime import datetime

from ..value_objects.email import Email
from ..value_objects.entity_ids import UserId


@dataclass(frozen=True)
class UserRegistered:
    user_id: UserId
    email: Email
    registered_at: datetime


@dataclass(frozen=True)
class UserEmailVerified:
    user_id: UserId
    email: Email
    verified_at: datetime


@dataclass(frozen=True)
class UserLockedOut:
    user_id: UserId
    locked_until: datetime


@dataclass(frozen=True)
class UserPasswordReset:
    user_id: UserId
    reset_at: datetime


@dataclass(frozen=True)
class PremiumExpired:
    user_id: UserId
    expired_at: datetime
