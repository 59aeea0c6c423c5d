from datetime import datetime, time, timedelta
from uuid import uuid4

import pytest

from bowen_hooks.domain.entities.badges import Badge, UserBadge, UserStats
from bowen_hooks.domain.entities.campus import HotZone, Location
from bowen_hooks.domain.entities.challenges import ChallengeSubmission, PhotoChallenge
from bowen_hooks.domain.entities.match import Like, VoiceNote
from bowen_hooks.domain.entities.moderation import Block, Report
from bowen_hooks.domain.entities.notification import Notification
from bowen_hooks.domain.entities.preferences import UserSettings
from bowen_hooks.domain.entities.profile import Photo
from bowen_hooks.domain.entities.social import ConfessionVote, EventAttendee
from bowen_hooks.domain.entities.spark import SparkSession
from bowen_hooks.domain.enums import (
    AttendeeStatus,
    BadgeType,
    ChallengeStatus,
    ContentType,
    LikeType,
    ReportReason,
    ReportStatus,
    SparkStatus,
    VoiceFilter,
    VoteType,
)
from bowen_hooks.domain.value_objects.entity_ids import UserId

NOW = datetime(2025, 3, 10, 12, 0, 0)
ALICE = UserId.generate()
BOB = UserId.generate()


# Badges

def test_badge_rarity_colors():
    assert Badge(name="First Match").rarity_color() == "#CD7F32"
    assert Badge(name="Legend", badge_type=BadgeType.GOLD).rarity_color() == "#FFD700"
    assert Badge(name="Founder", badge_type=BadgeType.SPECIAL).rarity_color() == "#FF69B4"


@pytest.mark.parametrize("requirement_type, stats", [
    ("matches_count", UserStats(matches_count=10)),
    ("login_streak", UserStats(login_streak=10)),
    ("event_attendance", UserStats(events_attended=10)),
    ("messages_sent", UserStats(messages_sent=10)),
    ("rizz_score", UserStats(rizz_score=10)),
])
def test_badge_requirements(requirement_type, stats):
    badge = Badge(name="Ten", requirement_type=requirement_type, requirement_value=10)
    assert badge.is_earned_by(stats)
    assert not badge.is_earned_by(UserStats())


def test_badge_with_unknown_requirement_is_never_earned():
    assert not Badge(name="Mystery", requirement_type="photos_uploaded", requirement_value=1).is_earned_by(
        UserStats(matches_count=100)
    )
    assert Badge(name="Welcome", requirement_type="login_streak").is_earned_by(UserStats())


@pytest.mark.parametrize("elapsed, label", [
    (timedelta(hours=5), "Today"),
    (timedelta(days=1, hours=2), "Yesterday"),
    (timedelta(days=3), "3 days ago"),
    (timedelta(days=15), "2 weeks ago"),
    (timedelta(days=65), "2 months ago"),
])
def test_user_badge_time_since_earned(elapsed, label):
    user_badge = UserBadge(user_id=ALICE, badge_id=uuid4(), earned_at=NOW)
    assert user_badge.time_since_earned(NOW + elapsed) == label


# Spark sessions

def test_spark_session_countdown():
    session = SparkSession(user1_id=ALICE, user2_id=BOB)
    assert session.status == SparkStatus.WAITING
    assert session.time_remaining(NOW) == timedelta(0)

    session.start(NOW)
    assert session.status == SparkStatus.ACTIVE
    assert session.time_remaining(NOW + timedelta(seconds=20)) == timedelta(seconds=40)
    assert session.time_remaining(NOW + timedelta(seconds=90)) == timedelta(0)

    session.end(NOW + timedelta(seconds=45))
    assert session.status == SparkStatus.COMPLETED
    assert session.duration_seconds == 45
    assert session.time_remaining(NOW + timedelta(seconds=50)) == timedelta(0)


def test_both_users_sparking_makes_a_match():
    session = SparkSession(user1_id=ALICE, user2_id=BOB)
    session.start(NOW)

    session.spark(ALICE)
    session.spark(UserId.generate())
    assert session.user1_sparked and not session.user2_sparked
    assert session.status == SparkStatus.ACTIVE

    session.spark(BOB)
    assert session.both_sparked
    assert session.status == SparkStatus.MATCHED


def test_spark_session_participants():
    session = SparkSession(user1_id=ALICE, user2_id=BOB)
    assert session.is_user_in_session(ALICE)
    assert not session.is_user_in_session(UserId.generate())
    assert session.other_user_id(BOB) == ALICE


# Photo challenges

@pytest.fixture
def challenge():
    return PhotoChallenge(
        title="Best sunset",
        challenge_date=NOW,
        submission_deadline=NOW + timedelta(hours=1),
        voting_deadline=NOW + timedelta(hours=2),
    )


def test_challenge_phases(challenge):
    assert not challenge.can_submit(NOW)

    assert challenge.update_status(NOW) == ChallengeStatus.ACTIVE
    assert challenge.can_submit(NOW)
    assert not challenge.can_vote(NOW)
    assert challenge.time_until_submission_deadline(NOW) == timedelta(hours=1)

    voting_time = NOW + timedelta(minutes=90)
    assert challenge.update_status(voting_time) == ChallengeStatus.VOTING
    assert not challenge.can_submit(voting_time)
    assert challenge.can_vote(voting_time)
    assert challenge.time_until_voting_deadline(voting_time) == timedelta(minutes=30)

    done = NOW + timedelta(hours=3)
    assert challenge.update_status(done) == ChallengeStatus.COMPLETED
    assert not challenge.can_vote(done)
    assert challenge.time_until_voting_deadline(done) == timedelta(0)


def test_submission_votes_and_winner(challenge):
    submission = ChallengeSubmission(challenge_id=challenge.id, user_id=ALICE, photo_url="https://cdn/p.jpg")
    submission.increment_vote_count()
    submission.increment_vote_count()
    submission.decrement_vote_count()
    assert submission.vote_count == 1

    submission.decrement_vote_count()
    submission.decrement_vote_count()
    assert submission.vote_count == 0

    submission.mark_as_winner(1)
    assert submission.is_winner and submission.winner_rank == 1


# Campus

def test_hot_zone_peak_time():
    zone = HotZone(name="Main Library", latitude=7.6, longitude=4.2)
    assert not zone.is_peak_time(NOW)

    zone.peak_time_start = time(12, 0)
    zone.peak_time_end = time(14, 0)
    assert zone.is_peak_time(datetime(2025, 3, 10, 12, 30, 15, 500))
    assert zone.is_peak_time(datetime(2025, 3, 10, 14, 0, 0, 900))
    assert not zone.is_peak_time(datetime(2025, 3, 10, 15, 0))


@pytest.mark.parametrize("count, level", [(0, "low"), (1, "medium"), (5, "medium"), (6, "high")])
def test_hot_zone_popularity(count, level):
    zone = HotZone(name="Cafeteria", latitude=7.6, longitude=4.2)
    zone.update_user_count(count)
    assert zone.popularity_level() == level


def test_location_freshness_and_ghost_mode():
    location = Location(user_id=ALICE, latitude=7.6, longitude=4.2)
    assert not location.is_recent(now=NOW)

    location.update(7.61, 4.21, accuracy=5.0, now=NOW)
    assert location.accuracy == 5.0
    assert location.is_recent(now=NOW + timedelta(minutes=10))
    assert not location.is_recent(now=NOW + timedelta(minutes=11))
    assert location.is_recent(max_age=timedelta(minutes=15), now=NOW + timedelta(minutes=11))

    location.enable_ghost_mode()
    assert location.is_ghost_mode
    location.disable_ghost_mode()
    assert not location.is_ghost_mode


# Moderation

def test_report_review_flow():
    admin = UserId.generate()
    report = Report(
        reporter_id=ALICE,
        reported_user_id=BOB,
        reported_content_type=ContentType.USER,
        reason=ReportReason.FAKE_PROFILE,
        created_at=NOW,
    )
    assert report.is_pending()

    report.assign_for_review(admin, NOW + timedelta(hours=1))
    assert report.status == ReportStatus.REVIEWING
    assert report.reviewed_by == admin
    assert report.reviewed_at == NOW + timedelta(hours=1)

    report.resolve("Profile removed")
    assert report.status == ReportStatus.RESOLVED
    assert report.action_taken == "Profile removed"
    assert report.days_since_report(NOW + timedelta(days=3, hours=5)) == 3


def test_report_dismiss():
    report = Report(reporter_id=ALICE, reported_content_type=ContentType.MESSAGE, reason=ReportReason.SPAM)
    report.dismiss()
    assert report.status == ReportStatus.DISMISSED
    assert not report.is_pending()


def test_mutual_block():
    block = Block(blocker_id=ALICE, blocked_id=BOB)
    assert block.is_mutual_with(Block(blocker_id=BOB, blocked_id=ALICE))
    assert not block.is_mutual_with(Block(blocker_id=BOB, blocked_id=UserId.generate()))


# Notifications

@pytest.mark.parametrize("elapsed, label", [
    (timedelta(seconds=30), "Just now"),
    (timedelta(minutes=5), "5m ago"),
    (timedelta(hours=3), "3h ago"),
    (timedelta(days=1, hours=2), "Yesterday"),
    (timedelta(days=4), "4d ago"),
])
def test_notification_time_since_created(elapsed, label):
    notification = Notification(user_id=ALICE, type="match", title="New match", message="Say hi", created_at=NOW)
    assert notification.time_since_created(NOW + elapsed) == label


def test_notification_icon_and_read():
    notification = Notification(user_id=ALICE, type="spark_match", title="Spark!", message="You both sparked")
    assert notification.icon() == "⚡"
    assert Notification(user_id=ALICE, type="system", title="t", message="m").icon() == "🔔"

    notification.mark_as_read(NOW)
    assert notification.is_read and notification.read_at == NOW


# Likes, RSVPs and votes

def test_like_kinds():
    assert Like(from_user_id=ALICE, to_user_id=BOB).is_like()
    assert Like(from_user_id=ALICE, to_user_id=BOB, like_type=LikeType.SUPER_LIKE).is_super_like()
    assert Like(from_user_id=ALICE, to_user_id=BOB, like_type=LikeType.PASS).is_pass()


def test_mutual_like():
    like = Like(from_user_id=ALICE, to_user_id=BOB)
    assert like.is_mutual_with(Like(from_user_id=BOB, to_user_id=ALICE))
    assert not like.is_mutual_with(Like(from_user_id=BOB, to_user_id=ALICE, like_type=LikeType.PASS))
    assert not like.is_mutual_with(Like(from_user_id=ALICE, to_user_id=BOB))


def test_event_attendee_rsvp():
    attendee = EventAttendee(event_id=uuid4(), user_id=ALICE)
    assert attendee.status == AttendeeStatus.PENDING
    assert not attendee.is_confirmed()

    attendee.accept_rsvp(NOW)
    assert attendee.rsvp_at == NOW
    assert attendee.is_confirmed()

    attendee.mark_attended(NOW + timedelta(days=1))
    assert attendee.status == AttendeeStatus.ATTENDED
    assert attendee.attended_at == NOW + timedelta(days=1)
    assert attendee.is_confirmed()


def test_event_attendee_decline_and_no_show():
    attendee = EventAttendee(event_id=uuid4(), user_id=ALICE)
    attendee.decline_rsvp(NOW)
    assert attendee.status == AttendeeStatus.DECLINED
    assert not attendee.is_confirmed()

    attendee.mark_no_show()
    assert attendee.status == AttendeeStatus.NO_SHOW


def test_confession_vote_direction():
    vote = ConfessionVote(confession_id=uuid4(), user_id=ALICE, vote_type=VoteType.UPVOTE)
    assert vote.is_upvote() and not vote.is_downvote()


# Settings

def test_default_settings_are_valid():
    user_settings = UserSettings(user_id=ALICE)
    assert user_settings.validate_age_range()
    assert user_settings.validate_distance()


@pytest.mark.parametrize("age_min, age_max, valid", [
    (18, 100, True),
    (17, 30, False),
    (40, 30, False),
    (18, 101, False),
])
def test_age_range_validation(age_min, age_max, valid):
    assert UserSettings(user_id=ALICE, age_min=age_min, age_max=age_max).validate_age_range() is valid


@pytest.mark.parametrize("distance, valid", [(99, False), (100, True), (50_000, True), (50_001, False)])
def test_distance_validation(distance, valid):
    assert UserSettings(user_id=ALICE, max_distance=distance).validate_distance() is valid


def test_grouped_settings():
    user_settings = UserSettings(user_id=ALICE, emergency_contact_1="+2348000000000")
    assert user_settings.discovery_settings() == {
        "age_min": 18, "age_max": 30, "max_distance": 1000, "show_me": user_settings.show_me,
    }
    assert user_settings.notification_settings()["sms_notifications"] is False
    assert user_settings.privacy_settings()["visible_to"] == user_settings.visible_to
    assert user_settings.safety_settings()["emergency_contact_1"] == "+2348000000000"


# Media

def test_photo_blur_and_primary():
    photo = Photo(user_id=ALICE, url="https://cdn/a.jpg", blur_level=60)
    assert photo.blurred_url() == "https://cdn/a.jpg?blur=60"
    photo.blur_level = 0
    assert photo.blurred_url() == "https://cdn/a.jpg"

    current = Photo(user_id=ALICE, url="https://cdn/b.jpg", is_primary=True)
    photo.set_primary([current, photo])
    assert photo.is_primary
    assert not current.is_primary


def test_voice_note():
    note = VoiceNote(sender_id=ALICE, receiver_id=BOB, audio_url="https://cdn/v.ogg", duration_seconds=12)
    assert note.filtered_audio_url() == "https://cdn/v.ogg"
    note.filter_type = VoiceFilter.ROBOT
    assert note.filtered_audio_url() == "https://cdn/v.ogg?filter=robot"

    note.mark_as_played(NOW)
    assert note.is_played and note.played_at == NOW
