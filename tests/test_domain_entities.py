import math
from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from bowen_hooks.domain.entities.ephemeral import BombMessage, SpotDrop, TimeCapsule, VibeStatus
from bowen_hooks.domain.entities.gamification import LoginStreak, RizzScore
from bowen_hooks.domain.entities.match import Match, Message
from bowen_hooks.domain.entities.social import Confession, Event
from bowen_hooks.domain.enums import BombType, EventStatus, MatchStatus
from bowen_hooks.domain.value_objects.entity_ids import UserId

NOW = datetime(2025, 3, 10, 12, 0, 0)
ALICE = UserId.generate()
BOB = UserId.generate()


def test_match_lifecycle():
    match = Match(user1_id=ALICE, user2_id=BOB, created_at=NOW)
    assert match.matched_at is None
    assert match.other_user_id(ALICE) == BOB
    assert match.other_user_id(BOB) == ALICE

    match.mark_as_matched(NOW)
    assert match.status == MatchStatus.MATCHED
    assert match.matched_at == NOW


def test_mystery_match_reveal():
    match = Match(user1_id=ALICE, user2_id=BOB, is_mystery=True, reveal_at=NOW + timedelta(hours=1))
    assert not match.is_revealed(NOW)
    assert match.is_revealed(NOW + timedelta(hours=1))


def test_message_read():
    message = Message(match_id=uuid4(), sender_id=ALICE, receiver_id=BOB, content="hey")
    message.mark_as_read(NOW)
    assert message.is_read and message.read_at == NOW


@pytest.mark.parametrize("bomb_type, duration", [
    (BombType.QUICK_FUSE, timedelta(seconds=30)),
    (BombType.TIME_BOMB, timedelta(hours=24)),
    (BombType.SLOW_BURN, timedelta(days=3)),
])
def test_bomb_default_durations(bomb_type, duration):
    bomb = BombMessage(match_id=uuid4(), sender_id=ALICE, receiver_id=BOB, content="boom",
                       bomb_type=bomb_type, created_at=NOW)
    assert bomb.explodes_at == NOW + duration


def test_bomb_countdown():
    bomb = BombMessage(match_id=uuid4(), sender_id=ALICE, receiver_id=BOB, content="boom",
                       bomb_type=BombType.QUICK_FUSE, created_at=NOW)
    assert bomb.time_remaining(NOW + timedelta(seconds=10)) == timedelta(seconds=20)
    assert bomb.is_active(NOW)
    assert bomb.time_remaining(NOW + timedelta(minutes=5)) == timedelta(0)
    assert not bomb.is_active(NOW + timedelta(minutes=5))

    bomb.mark_screenshot_taken(NOW)
    assert bomb.screenshot_taken and bomb.screenshot_at == NOW
    bomb.explode()
    assert not bomb.is_active(NOW)


def test_spot_drop_expiry():
    drop = SpotDrop(user_id=ALICE, latitude=7.6, longitude=4.2, message="hi", created_at=NOW)
    assert drop.radius_meters == 10
    assert drop.expires_at == NOW + timedelta(hours=24)
    assert not drop.is_expired(NOW + timedelta(hours=23))
    assert drop.is_expired(NOW + timedelta(hours=24))
    drop.increment_view_count()
    assert drop.view_count == 1


def test_vibe_status():
    vibe = VibeStatus(user_id=ALICE, vibe_type="coffee_chat", created_at=NOW)
    assert vibe.expires_at == NOW + timedelta(hours=3)
    assert vibe.display_message() == "Coffee & chat time ☕"
    assert VibeStatus(user_id=ALICE, vibe_type="coffee_chat", custom_message="latte?").display_message() == "latte?"
    assert vibe.is_expired(NOW + timedelta(hours=3))


def test_time_capsule():
    capsule = TimeCapsule(sender_id=ALICE, content="future me", send_at=NOW + timedelta(days=7))
    assert capsule.is_future_message(NOW)
    assert not capsule.is_ready_to_send(NOW)
    assert capsule.time_until_send(NOW) == timedelta(days=7)
    assert capsule.is_ready_to_send(NOW + timedelta(days=7))

    capsule.mark_as_sent(NOW + timedelta(days=7))
    assert not capsule.is_ready_to_send(NOW + timedelta(days=8))


def test_confession_trending():
    confession = Confession(user_id=ALICE, content="secret", upvotes=20, downvotes=5, view_count=50)
    assert confession.net_votes == 15
    confession.increment_view_count()
    assert confession.is_trending

    quiet = Confession(user_id=ALICE, content="meh", upvotes=5, view_count=100)
    quiet.increment_view_count()
    assert not quiet.is_trending


def test_confession_popularity_decays():
    confession = Confession(user_id=ALICE, content="secret", upvotes=10, comment_count=4, created_at=NOW)
    assert confession.popularity_score(NOW) == pytest.approx(24)
    expected = 24 / (1 + math.log(1 + 10))
    assert confession.popularity_score(NOW + timedelta(hours=10)) == pytest.approx(expected)


def test_event_status():
    event = Event(creator_id=ALICE, title="Study night", start_time=NOW + timedelta(hours=1),
                  end_time=NOW + timedelta(hours=3), max_attendees=2)
    assert event.refresh_status(NOW) == EventStatus.UPCOMING
    assert event.can_rsvp(NOW)
    assert event.refresh_status(NOW + timedelta(hours=2)) == EventStatus.ONGOING
    assert not event.can_rsvp(NOW + timedelta(hours=2))
    assert event.refresh_status(NOW + timedelta(hours=4)) == EventStatus.COMPLETED

    assert event.is_full(2)
    assert not event.is_full(1)
    assert not Event(creator_id=ALICE, title="Open", start_time=NOW).is_full(500)

    event.status = EventStatus.CANCELLED
    assert event.refresh_status(NOW) == EventStatus.CANCELLED


def test_event_rsvp_deadline():
    event = Event(creator_id=ALICE, title="Party", start_time=NOW + timedelta(days=2),
                  rsvp_deadline=NOW + timedelta(days=1))
    assert event.can_rsvp(NOW)
    assert not event.can_rsvp(NOW + timedelta(days=1, hours=1))


def test_rizz_score():
    score = RizzScore(user_id=ALICE, response_rate=80, average_conversation_length=50,
                      match_rate=40, event_attendance=3, login_streak_bonus=2)
    # 24 + 10 + 12 + 6 + 10
    assert score.calculate_total_score(NOW) == 62
    assert score.last_calculated == NOW
    assert score.rizz_level() == "Friendly Vibes 👍"

    score.event_attendance = 100
    assert score.calculate_total_score(NOW) == 100
    assert score.rizz_level() == "Campus Legend 🐐"

    assert RizzScore(user_id=ALICE).rizz_level() == "Rizz in Progress 🌱"


def test_rizz_rates_and_streak_bonus():
    score = RizzScore(user_id=ALICE)
    score.update_response_rate(3, 4)
    assert score.response_rate == 75
    score.update_match_rate(1, 0)
    assert score.match_rate == 0

    score.add_login_streak_bonus(15)
    assert score.login_streak_bonus == 2
    score.add_login_streak_bonus(200)
    assert score.login_streak_bonus == 10


def test_login_streak():
    streak = LoginStreak(user_id=ALICE)
    assert streak.record_login(NOW) is True
    assert streak.record_login(NOW + timedelta(hours=1)) is False
    for day in range(1, 7):
        streak.record_login(NOW + timedelta(days=day))
    assert streak.current_streak == 7
    assert streak.streak_bonus() == 20
    assert streak.next_milestone() == 14
    assert streak.days_until_next_bonus() == 7

    streak.record_login(NOW + timedelta(days=10))
    assert streak.current_streak == 1
    assert streak.longest_streak == 7
    assert streak.total_logins == 8
    assert streak.streak_bonus() == 0
    assert streak.is_streak_active(NOW + timedelta(days=10, hours=5))
    assert not streak.is_streak_active(NOW + timedelta(days=12))


def test_streak_bonus_tiers_and_final_milestone():
    assert LoginStreak(user_id=ALICE, current_streak=3).streak_bonus() == 10
    assert LoginStreak(user_id=ALICE, current_streak=30).streak_bonus() == 50
    assert LoginStreak(user_id=ALICE, current_streak=95).next_milestone() == 100
