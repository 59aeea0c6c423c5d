"""Ephemeral content: bomb messages, spot drops, vibe statuses and time capsules

Each record carries an absolute deadline. ``time_remaining`` style helpers
return a ``timedelta`` clamped at zero.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID, uuid4

from ..value_objects.entity_ids import UserId
from ..enums import BombType


BOMB_DEFAULT_DURATIONS = {
    BombType.QUICK_FUSE: timedelta(seconds=30),
    BombType.TIME_BOMB: timedelta(hours=24),
    BombType.SLOW_BURN: timedelta(days=3),
}

SPOT_DROP_DEFAULT_TTL = timedelta(hours=24)
VIBE_STATUS_DEFAULT_TTL = timedelta(hours=3)

VIBE_MESSAGES = {
    "study_buddy": "Looking for study partner 📚",
    "food_run": "Want to grab food? 🍔",
    "party_mode": "Ready to party! 🎉",
    "bored_af": "Bored, anyone free? 😴",
    "deep_convos": "Deep conversations only 💭",
    "workout_buddy": "Need workout partner 💪",
    "coffee_chat": "Coffee & chat time ☕",
    "gaming_session": "Anyone gaming? 🎮",
}


def _remaining(deadline: datetime, now: Optional[datetime]) -> timedelta:
    now = now or datetime.utcnow()
    return max(timedelta(0), deadline - now)


@dataclass
class BombMessage:
    match_id: UUID
    sender_id: UserId
    receiver_id: UserId
    content: str
    bomb_type: BombType = BombType.TIME_BOMB
    duration_seconds: Optional[int] = None
    explodes_at: Optional[datetime] = None
    is_read: bool = False
    is_exploded: bool = False
    screenshot_taken: bool = False
    screenshot_at: Optional[datetime] = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self):
        if not self.duration_seconds:
            self.duration_seconds = int(BOMB_DEFAULT_DURATIONS[self.bomb_type].total_seconds())
        if self.explodes_at is None:
            self.explodes_at = self.created_at + timedelta(seconds=self.duration_seconds)

    def time_remaining(self, now: Optional[datetime] = None) -> timedelta:
        return _remaining(self.explodes_at, now)

    def is_active(self, now: Optional[datetime] = None) -> bool:
        return not self.is_exploded and self.time_remaining(now) > timedelta(0)

    def mark_as_read(self) -> None:
        self.is_read = True

    def mark_screenshot_taken(self, now: Optional[datetime] = None) -> None:
        self.screenshot_taken = True
        self.screenshot_at = now or datetime.utcnow()

    def explode(self) -> None:
        self.is_exploded = True


@dataclass
class SpotDrop:
    user_id: UserId
    latitude: float
    longitude: float
    message: str
    radius_meters: int = 10
    is_anonymous: bool = True
    expires_at: Optional[datetime] = None
    view_count: int = 0
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self):
        if self.expires_at is None:
            self.expires_at = self.created_at + SPOT_DROP_DEFAULT_TTL

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        now = now or datetime.utcnow()
        return now >= self.expires_at

    def time_remaining(self, now: Optional[datetime] = None) -> timedelta:
        return _remaining(self.expires_at, now)

    def increment_view_count(self) -> None:
        self.view_count += 1


@dataclass
class VibeStatus:
    user_id: UserId
    vibe_type: str
    custom_message: Optional[str] = None
    expires_at: Optional[datetime] = None
    is_active: bool = True
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self):
        if self.expires_at is None:
            self.expires_at = self.created_at + VIBE_STATUS_DEFAULT_TTL

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        now = now or datetime.utcnow()
        return now >= self.expires_at

    def time_remaining(self, now: Optional[datetime] = None) -> timedelta:
        return _remaining(self.expires_at, now)

    def deactivate(self) -> None:
        self.is_active = False

    def display_message(self) -> str:
        return self.custom_message or VIBE_MESSAGES.get(self.vibe_type) or self.vibe_type


@dataclass
class TimeCapsule:
    sender_id: UserId
    content: str
    send_at: datetime
    receiver_id: Optional[UserId] = None
    media_url: Optional[str] = None
    is_sent: bool = False
    sent_at: Optional[datetime] = None
    id: UUID = field(default_factory=uuid4)

    def is_ready_to_send(self, now: Optional[datetime] = None) -> bool:
        now = now or datetime.utcnow()
        return not self.is_sent and now >= self.send_at

    def mark_as_sent(self, now: Optional[datetime] = None) -> None:
        self.is_sent = True
        self.sent_at = now or datetime.utcnow()

    def time_until_send(self, now: Optional[datetime] = None) -> timedelta:
        return _remaining(self.send_at, now)

    def is_future_message(self, now: Optional[datetime] = None) -> bool:
        now = now or datetime.utcnow()
        return self.send_at > now
