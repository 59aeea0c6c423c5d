"""Achievement badges and the users who earned them

A badge is earned once the user's stat named by ``requirement_type``
reaches ``requirement_value``. Unknown requirement types never match.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from ..value_objects.entity_ids import UserId
from ..enums import BadgeType


BADGE_RARITY_COLORS = {
    BadgeType.BRONZE: "#CD7F32",
    BadgeType.SILVER: "#C0C0C0",
    BadgeType.GOLD: "#FFD700",
    BadgeType.PLATINUM: "#E5E4E2",
    BadgeType.SPECIAL: "#FF69B4",
}

# requirement_type -> UserStats attribute
BADGE_REQUIREMENTS = {
    "matches_count": "matches_count",
    "login_streak": "login_streak",
    "event_attendance": "events_attended",
    "messages_sent": "messages_sent",
    "rizz_score": "rizz_score",
}


@dataclass
class UserStats:
    """Counters a badge requirement is checked against"""
    matches_count: int = 0
    login_streak: int = 0
    events_attended: int = 0
    messages_sent: int = 0
    rizz_score: int = 0


@dataclass
class Badge:
    name: str
    badge_type: BadgeType = BadgeType.BRONZE
    description: Optional[str] = None
    icon_url: Optional[str] = None
    requirement_type: Optional[str] = None
    requirement_value: Optional[int] = None
    id: UUID = field(default_factory=uuid4)

    def rarity_color(self) -> str:
        return BADGE_RARITY_COLORS[self.badge_type]

    def is_earned_by(self, stats: UserStats) -> bool:
        attribute = BADGE_REQUIREMENTS.get(self.requirement_type)
        if attribute is None:
            return False
        return getattr(stats, attribute) >= (self.requirement_value or 0)


@dataclass
class UserBadge:
    user_id: UserId
    badge_id: UUID
    earned_at: datetime = field(default_factory=datetime.utcnow)
    id: UUID = field(default_factory=uuid4)

    def time_since_earned(self, now: Optional[datetime] = None) -> str:
        now = now or datetime.utcnow()
        days = (now - self.earned_at).days
        if days <= 0:
            return "Today"
        if days == 1:
            return "Yesterday"
        if days < 7:
            return f"{days} days ago"
        if days < 30:
            return f"{days // 7} weeks ago"
        return f"{days // 30} months ago"
