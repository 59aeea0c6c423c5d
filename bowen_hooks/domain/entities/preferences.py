"""Per-user privacy, notification, discovery and safety settings"""

from dataclasses import dataclass, field
from typing import Optional
from uuid import UUID, uuid4

from ..value_objects.entity_ids import UserId
from ..enums import ShowMe, Visibility

DISCOVERY_MIN_AGE = 18
DISCOVERY_MAX_AGE = 100
# metres
DISCOVERY_MIN_DISTANCE = 100
DISCOVERY_MAX_DISTANCE = 50_000


@dataclass
class UserSettings:
    user_id: UserId

    show_online_status: bool = True
    show_location: bool = True
    allow_anonymous_messages: bool = True
    visible_to: Visibility = Visibility.EVERYONE

    push_notifications: bool = True
    email_notifications: bool = True
    sms_notifications: bool = False
    match_notifications: bool = True
    message_notifications: bool = True
    event_notifications: bool = True

    age_min: int = 18
    age_max: int = 30
    max_distance: int = 1000
    show_me: ShowMe = ShowMe.EVERYONE

    buddy_system_enabled: bool = False
    emergency_contact_1: Optional[str] = None
    emergency_contact_2: Optional[str] = None

    id: UUID = field(default_factory=uuid4)

    def validate_age_range(self) -> bool:
        return DISCOVERY_MIN_AGE <= self.age_min <= self.age_max <= DISCOVERY_MAX_AGE

    def validate_distance(self) -> bool:
        return DISCOVERY_MIN_DISTANCE <= self.max_distance <= DISCOVERY_MAX_DISTANCE

    def discovery_settings(self) -> dict:
        return {
            "age_min": self.age_min,
            "age_max": self.age_max,
            "max_distance": self.max_distance,
            "show_me": self.show_me,
        }

    def privacy_settings(self) -> dict:
        return {
            "show_online_status": self.show_online_status,
            "show_location": self.show_location,
            "allow_anonymous_messages": self.allow_anonymous_messages,
            "visible_to": self.visible_to,
        }

    def notification_settings(self) -> dict:
        return {
            "push_notifications": self.push_notifications,
            "email_notifications": self.email_notifications,
            "sms_notifications": self.sms_notifications,
            "match_notifications": self.match_notifications,
            "message_notifications": self.message_notifications,
            "event_notifications": self.event_notifications,
        }

    def safety_settings(self) -> dict:
        return {
            "buddy_system_enabled": self.buddy_system_enabled,
            "emergency_contact_1": self.emergency_contact_1,
            "emergency_contact_2": self.emergency_contact_2,
        }
