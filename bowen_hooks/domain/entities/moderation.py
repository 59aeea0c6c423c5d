"""User reports and blocks"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from ..value_objects.entity_ids import UserId
from ..enums import ContentType, ReportReason, ReportStatus


@dataclass
class Report:
    reporter_id: UserId
    reported_content_type: ContentType
    reason: ReportReason
    reported_user_id: Optional[UserId] = None
    reported_content_id: Optional[UUID] = None
    description: Optional[str] = None
    status: ReportStatus = ReportStatus.PENDING
    reviewed_by: Optional[UserId] = None
    reviewed_at: Optional[datetime] = None
    action_taken: Optional[str] = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)

    def assign_for_review(self, admin_id: UserId, now: Optional[datetime] = None) -> None:
        self.status = ReportStatus.REVIEWING
        self.reviewed_by = admin_id
        self.reviewed_at = now or datetime.utcnow()

    def resolve(self, action: str) -> None:
        self.status = ReportStatus.RESOLVED
        self.action_taken = action

    def dismiss(self) -> None:
        self.status = ReportStatus.DISMISSED

    def is_pending(self) -> bool:
        return self.status == ReportStatus.PENDING

    def days_since_report(self, now: Optional[datetime] = None) -> int:
        now = now or datetime.utcnow()
        return (now - self.created_at).days


@dataclass
class Block:
    blocker_id: UserId
    blocked_id: UserId
    reason: Optional[str] = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)

    def is_mutual_with(self, other: 'Block') -> bool:
        return other.blocker_id == self.blocked_id and other.blocked_id == self.blocker_id
