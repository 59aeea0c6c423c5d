"""In-app notifications"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from ..value_objects.entity_ids import UserId

NOTIFICATION_ICONS = {
    "match": "💕",
    "message": "💬",
    "like": "👍",
    "super_like": "⭐",
    "event": "🎉",
    "confession": "🗣️",
    "bomb_message": "💣",
    "spark_match": "⚡",
    "vibe_match": "🎯",
    "challenge_winner": "🏆",
}
DEFAULT_NOTIFICATION_ICON = "🔔"


@dataclass
class Notification:
    user_id: UserId
    type: str
    title: str
    message: str
    data: Optional[dict] = None
    is_read: bool = False
    read_at: Optional[datetime] = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)

    def mark_as_read(self, now: Optional[datetime] = None) -> None:
        self.is_read = True
        self.read_at = now or datetime.utcnow()

    def icon(self) -> str:
        return NOTIFICATION_ICONS.get(self.type, DEFAULT_NOTIFICATION_ICON)

    def time_since_created(self, now: Optional[datetime] = None) -> str:
        now = now or datetime.utcnow()
        elapsed = now - self.created_at
        minutes = int(elapsed.total_seconds() // 60)
        if minutes < 1:
            return "Just now"
        if minutes < 60:
            return f"{minutes}m ago"
        hours = minutes // 60
        if hours < 24:
            return f"{hours}h ago"
        if elapsed.days == 1:
            return "Yesterday"
        return f"{elapsed.days}d ago"
