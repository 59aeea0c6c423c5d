"""Daily photo challenges

A challenge accepts submissions until ``submission_deadline`` and votes
until ``voting_deadline``; after that it is completed.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID, uuid4

from ..value_objects.entity_ids import UserId
from ..enums import ChallengeStatus


@dataclass
class PhotoChallenge:
    title: str
    challenge_date: datetime
    submission_deadline: datetime
    voting_deadline: datetime
    description: Optional[str] = None
    status: ChallengeStatus = ChallengeStatus.UPCOMING
    total_submissions: int = 0
    id: UUID = field(default_factory=uuid4)

    def update_status(self, now: Optional[datetime] = None) -> ChallengeStatus:
        now = now or datetime.utcnow()
        if now < self.submission_deadline:
            self.status = ChallengeStatus.ACTIVE
        elif now < self.voting_deadline:
            self.status = ChallengeStatus.VOTING
        else:
            self.status = ChallengeStatus.COMPLETED
        return self.status

    def can_submit(self, now: Optional[datetime] = None) -> bool:
        now = now or datetime.utcnow()
        return now <= self.submission_deadline and self.status == ChallengeStatus.ACTIVE

    def can_vote(self, now: Optional[datetime] = None) -> bool:
        now = now or datetime.utcnow()
        return (
            self.submission_deadline < now <= self.voting_deadline
            and self.status == ChallengeStatus.VOTING
        )

    def time_until_submission_deadline(self, now: Optional[datetime] = None) -> timedelta:
        now = now or datetime.utcnow()
        return max(timedelta(0), self.submission_deadline - now)

    def time_until_voting_deadline(self, now: Optional[datetime] = None) -> timedelta:
        now = now or datetime.utcnow()
        return max(timedelta(0), self.voting_deadline - now)


@dataclass
class ChallengeSubmission:
    challenge_id: UUID
    user_id: UserId
    photo_url: str
    caption: Optional[str] = None
    vote_count: int = 0
    is_winner: bool = False
    winner_rank: Optional[int] = None
    id: UUID = field(default_factory=uuid4)
    submitted_at: datetime = field(default_factory=datetime.utcnow)

    def increment_vote_count(self) -> None:
        self.vote_count += 1

    def decrement_vote_count(self) -> None:
        self.vote_count = max(0, self.vote_count - 1)

    def mark_as_winner(self, rank: int) -> None:
        self.is_winner = True
        self.winner_rank = rank


@dataclass
class ChallengeVote:
    submission_id: UUID
    user_id: UserId
    id: UUID = field(default_factory=uuid4)
    voted_at: datetime = field(default_factory=datetime.utcnow)
