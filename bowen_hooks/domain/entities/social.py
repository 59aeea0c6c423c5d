"""Confessions, campus events and their attendees"""

import math
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID, uuid4

from ..value_objects.entity_ids import UserId
from ..enums import AttendeeStatus, EventStatus, EventType, VoteType

TRENDING_MIN_VIEWS = 50
TRENDING_MIN_NET_VOTES = 10


@dataclass
class Confession:
    user_id: UserId
    content: str
    location_tag: Optional[str] = None
    upvotes: int = 0
    downvotes: int = 0
    comment_count: int = 0
    view_count: int = 0
    is_trending: bool = False
    is_reported: bool = False
    is_approved: bool = True
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def net_votes(self) -> int:
        return self.upvotes - self.downvotes

    def increment_view_count(self) -> None:
        self.view_count += 1
        if self.view_count > TRENDING_MIN_VIEWS and self.net_votes > TRENDING_MIN_NET_VOTES:
            self.is_trending = True

    def apply_vote_counts(self, upvotes: int, downvotes: int) -> None:
        self.upvotes = upvotes
        self.downvotes = downvotes

    def popularity_score(self, now: Optional[datetime] = None) -> float:
        """Votes and comments, decayed logarithmically with age in hours"""
        now = now or datetime.utcnow()
        age_hours = max(0.0, (now - self.created_at).total_seconds() / 3600)
        time_factor = 1 / (1 + math.log(1 + age_hours))
        return (self.net_votes * 2 + self.comment_count) * time_factor


@dataclass
class ConfessionVote:
    confession_id: UUID
    user_id: UserId
    vote_type: VoteType
    id: UUID = field(default_factory=uuid4)

    def is_upvote(self) -> bool:
        return self.vote_type == VoteType.UPVOTE

    def is_downvote(self) -> bool:
        return self.vote_type == VoteType.DOWNVOTE


@dataclass
class Event:
    creator_id: UserId
    title: str
    start_time: datetime
    event_type: EventType = EventType.OTHER
    description: Optional[str] = None
    location_name: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    end_time: Optional[datetime] = None
    max_attendees: Optional[int] = None
    is_public: bool = True
    is_anonymous: bool = False
    rsvp_deadline: Optional[datetime] = None
    status: EventStatus = EventStatus.UPCOMING
    id: UUID = field(default_factory=uuid4)

    def is_full(self, accepted_count: int) -> bool:
        if not self.max_attendees:
            return False
        return accepted_count >= self.max_attendees

    def can_rsvp(self, now: Optional[datetime] = None) -> bool:
        now = now or datetime.utcnow()
        if self.rsvp_deadline and now > self.rsvp_deadline:
            return False
        return self.status == EventStatus.UPCOMING

    def refresh_status(self, now: Optional[datetime] = None) -> EventStatus:
        # Cancelled is terminal and never recomputed
        if self.status == EventStatus.CANCELLED:
            return self.status
        now = now or datetime.utcnow()
        if self.start_time > now:
            self.status = EventStatus.UPCOMING
        elif self.end_time and self.end_time < now:
            self.status = EventStatus.COMPLETED
        else:
            self.status = EventStatus.ONGOING
        return self.status

    def time_until_start(self, now: Optional[datetime] = None) -> timedelta:
        now = now or datetime.utcnow()
        return max(timedelta(0), self.start_time - now)


@dataclass
class EventAttendee:
    event_id: UUID
    user_id: UserId
    status: AttendeeStatus = AttendeeStatus.PENDING
    is_anonymous: bool = False
    rsvp_at: Optional[datetime] = None
    attended_at: Optional[datetime] = None
    id: UUID = field(default_factory=uuid4)

    def accept_rsvp(self, now: Optional[datetime] = None) -> None:
        self.status = AttendeeStatus.ACCEPTED
        self.rsvp_at = now or datetime.utcnow()

    def decline_rsvp(self, now: Optional[datetime] = None) -> None:
        self.status = AttendeeStatus.DECLINED
        self.rsvp_at = now or datetime.utcnow()

    def mark_attended(self, now: Optional[datetime] = None) -> None:
        self.status = AttendeeStatus.ATTENDED
        self.attended_at = now or datetime.utcnow()

    def mark_no_show(self) -> None:
        self.status = AttendeeStatus.NO_SHOW

    def is_confirmed(self) -> bool:
        return self.status in (AttendeeStatus.ACCEPTED, AttendeeStatus.ATTENDED)
