"""
Domain Enums - Business domain enumerations
"""

from enum import Enum


class UserRole(str, Enum):
    USER = "user"
    ADMIN = "admin"
    MODERATOR = "moderator"


class PresenceStatus(str, Enum):
    ONLINE = "online"
    OFFLINE = "offline"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    NON_BINARY = "non_binary"
    OTHER = "other"
    PREFER_NOT_TO_SAY = "prefer_not_to_say"


class LookingFor(str, Enum):
    FRIENDSHIP = "friendship"
    DATING = "dating"
    RELATIONSHIP = "relationship"
    NETWORKING = "networking"
    STUDY_BUDDY = "study_buddy"
    ANYTHING = "anything"


class RelationshipStatus(str, Enum):
    SINGLE = "single"
    IN_RELATIONSHIP = "in_relationship"
    COMPLICATED = "complicated"
    PREFER_NOT_TO_SAY = "prefer_not_to_say"


class MatchType(str, Enum):
    MUTUAL_LIKE = "mutual_like"
    SUPER_LIKE = "super_like"
    SPARK_MATCH = "spark_match"
    MYSTERY_MATCH = "mystery_match"
    VIBE_MATCH = "vibe_match"


class MatchStatus(str, Enum):
    PENDING = "pending"
    MATCHED = "matched"
    UNMATCHED = "unmatched"
    EXPIRED = "expired"


class MessageType(str, Enum):
    TEXT = "text"
    IMAGE = "image"
    VOICE = "voice"
    QUESTION_GAME = "question_game"
    TIME_CAPSULE = "time_capsule"


class BombType(str, Enum):
    QUICK_FUSE = "quick_fuse"
    TIME_BOMB = "time_bomb"
    SLOW_BURN = "slow_burn"


class EventType(str, Enum):
    QUICK_MEET = "quick_meet"
    STUDY_SESSION = "study_session"
    PARTY = "party"
    SPORTS = "sports"
    FOOD = "food"
    OTHER = "other"


class EventStatus(str, Enum):
    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class AttendeeStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"
    ATTENDED = "attended"
    NO_SHOW = "no_show"


class LikeType(str, Enum):
    LIKE = "like"
    SUPER_LIKE = "super_like"
    PASS = "pass"


class VoteType(str, Enum):
    UPVOTE = "upvote"
    DOWNVOTE = "downvote"


class BadgeType(str, Enum):
    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"
    PLATINUM = "platinum"
    SPECIAL = "special"


class SparkStatus(str, Enum):
    WAITING = "waiting"
    ACTIVE = "active"
    COMPLETED = "completed"
    SKIPPED = "skipped"
    MATCHED = "matched"


class ChallengeStatus(str, Enum):
    UPCOMING = "upcoming"
    ACTIVE = "active"
    VOTING = "voting"
    COMPLETED = "completed"


class LocationType(str, Enum):
    LIBRARY = "library"
    CAFETERIA = "cafeteria"
    HOSTEL = "hostel"
    SPORTS = "sports"
    ACADEMIC = "academic"
    OTHER = "other"


class ReportReason(str, Enum):
    HARASSMENT = "harassment"
    INAPPROPRIATE_CONTENT = "inappropriate_content"
    SPAM = "spam"
    FAKE_PROFILE = "fake_profile"
    UNDERAGE = "underage"
    OTHER = "other"


class ReportStatus(str, Enum):
    PENDING = "pending"
    REVIEWING = "reviewing"
    RESOLVED = "resolved"
    DISMISSED = "dismissed"


class ContentType(str, Enum):
    USER = "user"
    MESSAGE = "message"
    CONFESSION = "confession"
    EVENT = "event"
    PHOTO = "photo"


class VoiceFilter(str, Enum):
    NORMAL = "normal"
    DEEP = "deep"
    CHIPMUNK = "chipmunk"
    ROBOT = "robot"
    ECHO = "echo"
    REVERB = "reverb"


class Visibility(str, Enum):
    EVERYONE = "everyone"
    MATCHES_ONLY = "matches_only"
    NONE = "none"


class ShowMe(str, Enum):
    EVERYONE = "everyone"
    MEN = "men"
    WOMEN = "women"
    NON_BINARY = "non_binary"
