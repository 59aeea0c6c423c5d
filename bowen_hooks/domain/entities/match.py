"""Likes, matches and the messages exchanged inside them"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from ..value_objects.entity_ids import UserId
from ..enums import LikeType, MatchStatus, MatchType, MessageType, VoiceFilter


@dataclass
class Match:
    user1_id: UserId
    user2_id: UserId
    match_type: MatchType = MatchType.MUTUAL_LIKE
    status: MatchStatus = MatchStatus.PENDING
    is_mystery: bool = False
    reveal_at: Optional[datetime] = None
    matched_at: Optional[datetime] = None
    conversation_started: bool = False
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self):
        if self.status == MatchStatus.MATCHED and self.matched_at is None:
            self.matched_at = self.created_at

    def mark_as_matched(self, now: Optional[datetime] = None) -> None:
        self.status = MatchStatus.MATCHED
        self.matched_at = now or datetime.utcnow()

    def start_conversation(self) -> None:
        self.conversation_started = True

    def other_user_id(self, current_user_id: UserId) -> UserId:
        return self.user2_id if self.user1_id == current_user_id else self.user1_id

    def is_revealed(self, now: Optional[datetime] = None) -> bool:
        """Mystery matches stay hidden until ``reveal_at``"""
        if not self.is_mystery:
            return True
        now = now or datetime.utcnow()
        return self.reveal_at is not None and self.reveal_at <= now


@dataclass
class Message:
    match_id: UUID
    sender_id: UserId
    receiver_id: UserId
    content: Optional[str] = None
    message_type: MessageType = MessageType.TEXT
    media_url: Optional[str] = None
    is_read: bool = False
    read_at: Optional[datetime] = None
    is_anonymous: bool = False
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)

    def mark_as_read(self, now: Optional[datetime] = None) -> None:
        self.is_read = True
        self.read_at = now or datetime.utcnow()


@dataclass
class Like:
    from_user_id: UserId
    to_user_id: UserId
    like_type: LikeType = LikeType.LIKE
    is_anonymous: bool = False
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)

    def is_like(self) -> bool:
        return self.like_type == LikeType.LIKE

    def is_super_like(self) -> bool:
        return self.like_type == LikeType.SUPER_LIKE

    def is_pass(self) -> bool:
        return self.like_type == LikeType.PASS

    def is_mutual_with(self, other: 'Like') -> bool:
        """``other`` is a plain like sent back the opposite way"""
        return (
            other.from_user_id == self.to_user_id
            and other.to_user_id == self.from_user_id
            and other.is_like()
        )


@dataclass
class VoiceNote:
    sender_id: UserId
    receiver_id: UserId
    audio_url: str
    duration_seconds: int
    match_id: Optional[UUID] = None
    filter_type: VoiceFilter = VoiceFilter.NORMAL
    transcription: Optional[str] = None
    is_played: bool = False
    played_at: Optional[datetime] = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)

    def mark_as_played(self, now: Optional[datetime] = None) -> None:
        self.is_played = True
        self.played_at = now or datetime.utcnow()

    def filtered_audio_url(self) -> str:
        if self.filter_type == VoiceFilter.NORMAL:
            return self.audio_url
        return f"{self.audio_url}?filter={self.filter_type.value}"
