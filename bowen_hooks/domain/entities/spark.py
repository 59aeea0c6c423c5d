"""Spark sessions: one-minute blind video calls between two users"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID, uuid4

from ..value_objects.entity_ids import UserId
from ..enums import SparkStatus

SPARK_MAX_DURATION = timedelta(seconds=60)


@dataclass
class SparkSession:
    user1_id: UserId
    user2_id: UserId
    room_id: str = field(default_factory=lambda: uuid4().hex)
    status: SparkStatus = SparkStatus.WAITING
    user1_sparked: bool = False
    user2_sparked: bool = False
    both_sparked: bool = False
    duration_seconds: Optional[int] = None
    started_at: Optional[datetime] = None
    ended_at: Optional[datetime] = None
    id: UUID = field(default_factory=uuid4)

    def start(self, now: Optional[datetime] = None) -> None:
        self.status = SparkStatus.ACTIVE
        self.started_at = now or datetime.utcnow()

    def end(self, now: Optional[datetime] = None) -> None:
        self.status = SparkStatus.COMPLETED
        self.ended_at = now or datetime.utcnow()
        if self.started_at:
            self.duration_seconds = int((self.ended_at - self.started_at).total_seconds())

    def spark(self, user_id: UserId) -> None:
        """Record that ``user_id`` wants to connect; both sparking makes a match"""
        if user_id == self.user1_id:
            self.user1_sparked = True
        elif user_id == self.user2_id:
            self.user2_sparked = True

        if self.user1_sparked and self.user2_sparked:
            self.both_sparked = True
            self.status = SparkStatus.MATCHED

    def other_user_id(self, current_user_id: UserId) -> UserId:
        return self.user2_id if self.user1_id == current_user_id else self.user1_id

    def is_user_in_session(self, user_id: UserId) -> bool:
        return user_id in (self.user1_id, self.user2_id)

    def time_remaining(self, now: Optional[datetime] = None) -> timedelta:
        if not self.started_at or self.status != SparkStatus.ACTIVE:
            return timedelta(0)
        now = now or datetime.utcnow()
        return max(timedelta(0), self.started_at + SPARK_MAX_DURATION - now)
