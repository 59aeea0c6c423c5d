"""Rizz scores and login streak history"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID, uuid4

from ..value_objects.entity_ids import UserId

RIZZ_LEVELS = (
    (90, "Campus Legend 🐐"),
    (80, "Smooth Operator 😎"),
    (70, "Social Butterfly 🦋"),
    (60, "Friendly Vibes 👍"),
    (50, "Getting There 💪"),
)
RIZZ_DEFAULT_LEVEL = "Rizz in Progress 🌱"

STREAK_MILESTONES = (3, 7, 14, 30, 60, 90)
STREAK_FINAL_MILESTONE = 100


@dataclass
class RizzScore:
    user_id: UserId
    total_score: int = 0
    response_rate: float = 0.0
    average_conversation_length: float = 0.0
    match_rate: float = 0.0
    event_attendance: int = 0
    login_streak_bonus: int = 0
    weekly_rank: Optional[int] = None
    all_time_rank: Optional[int] = None
    last_calculated: Optional[datetime] = None
    id: UUID = field(default_factory=uuid4)

    def calculate_total_score(self, now: Optional[datetime] = None) -> int:
        base_score = (
            self.response_rate * 0.3
            + self.average_conversation_length * 0.2
            + self.match_rate * 0.3
            + self.event_attendance * 2
            + self.login_streak_bonus * 5
        )
        self.total_score = round(max(0, min(100, base_score)))
        self.last_calculated = now or datetime.utcnow()
        return self.total_score

    def rizz_level(self) -> str:
        for threshold, label in RIZZ_LEVELS:
            if self.total_score >= threshold:
                return label
        return RIZZ_DEFAULT_LEVEL

    def update_response_rate(self, responded_count: int, total_messages: int) -> int:
        if total_messages > 0:
            self.response_rate = responded_count / total_messages * 100
        return self.calculate_total_score()

    def update_match_rate(self, matches_count: int, likes_sent: int) -> int:
        if likes_sent > 0:
            self.match_rate = matches_count / likes_sent * 100
        return self.calculate_total_score()

    def add_event_attendance_bonus(self) -> None:
        self.event_attendance += 1

    def add_login_streak_bonus(self, streak: int) -> None:
        # One point per full week, capped at 10
        self.login_streak_bonus = min(10, streak // 7)


@dataclass
class LoginStreak:
    user_id: UserId
    current_streak: int = 0
    longest_streak: int = 0
    last_login_date: Optional[datetime] = None
    total_logins: int = 0
    id: UUID = field(default_factory=uuid4)

    def record_login(self, now: Optional[datetime] = None) -> bool:
        """Returns False when the user already logged in on this calendar day"""
        now = now or datetime.utcnow()
        today = now.date()

        if self.last_login_date is not None:
            last = self.last_login_date.date()
            if last == today:
                return False
            if last == today - timedelta(days=1):
                self.current_streak += 1
            else:
                self.current_streak = 1
        else:
            self.current_streak = 1

        self.longest_streak = max(self.longest_streak, self.current_streak)
        self.last_login_date = now
        self.total_logins += 1
        return True

    def streak_bonus(self) -> int:
        if self.current_streak >= 30:
            return 50
        if self.current_streak >= 7:
            return 20
        if self.current_streak >= 3:
            return 10
        return 0

    def is_streak_active(self, now: Optional[datetime] = None) -> bool:
        if self.last_login_date is None:
            return False
        now = now or datetime.utcnow()
        return self.last_login_date >= now - timedelta(days=1)

    def next_milestone(self) -> int:
        for milestone in STREAK_MILESTONES:
            if self.current_streak < milestone:
                return milestone
        return STREAK_FINAL_MILESTONE

    def days_until_next_bonus(self) -> int:
        return self.next_milestone() - self.current_streak
