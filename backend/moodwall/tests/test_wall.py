"""
Tests for the mood wall and encouragements.
"""
from datetime import datetime, timedelta, timezone
from moodwall.core.errors import ErrorKind
from moodwall.models.wall import Encouragement, MoodWallPost
from moodwall.services.checkin_service import record_checkin
from moodwall.services.wall_service import (
    ALREADY_SENT_MESSAGE, list_posts, send_encouragement
)

NOW = datetime(2026, 10, 19, 12, tzinfo=timezone.utc)


def post_moods(db, user, values):
    """Anonymous check-ins, one minute apart, oldest first."""
    for index, value in enumerate(values):
        record_checkin(
            db, user.id, value, "😊", notes=f"mood {value}", is_anonymous=True,
            timestamp=NOW - timedelta(minutes=len(values) - index)
        )


def test_list_all_newest_first(db, make_user):
    """Test listing every post, newest first."""
    user = make_user()
    post_moods(db, user, [2, 9, 5, 8])

    result = list_posts(db, "all", 100, now=NOW)

    assert result.ok
    assert [post["mood_value"] for post in result.data] == [8, 5, 9, 2]
    assert result.data[0]["time_ago"] == "1 minute ago"
    assert result.data[-1]["time_ago"] == "4 minutes ago"
    assert "user_id" not in result.data[0]


def test_list_happy_filter(db, make_user):
    """The happy filter only returns intensities 8 to 10."""
    user = make_user()
    post_moods(db, user, [1, 4, 7, 8, 9, 10])

    result = list_posts(db, "happy", 100, now=NOW)

    assert sorted(post["mood_value"] for post in result.data) == [8, 9, 10]


def test_overlapping_filters(db, make_user):
    """Calm and neutral both include 6 and 7."""
    user = make_user()
    post_moods(db, user, [5, 6, 7])

    calm = [p["mood_value"] for p in list_posts(db, "calm", now=NOW).data]
    neutral = [p["mood_value"] for p in list_posts(db, "neutral", now=NOW).data]

    assert sorted(calm) == [6, 7]
    assert sorted(neutral) == [5, 6, 7]


def test_unknown_filter_lists_everything(db, make_user):
    user = make_user()
    post_moods(db, user, [1, 10])
    assert len(list_posts(db, "bored", now=NOW).data) == 2


def test_limit(db, make_user):
    user = make_user()
    post_moods(db, user, [1, 2, 3, 4, 5])

    result = list_posts(db, "all", 2, now=NOW)

    assert [post["mood_value"] for post in result.data] == [5, 4]


def test_list_failure_is_surfaced(db, monkeypatch, store_failure):
    """Wall reads fail fast with the store error."""
    def broken_query(*args, **kwargs):
        raise store_failure()

    monkeypatch.setattr(db, "query", broken_query)
    result = list_posts(db, "all")

    assert not result.ok
    assert result.error.kind == ErrorKind.UNKNOWN


def test_encouragement_updates_counter(db, make_user):
    """The database keeps encouragement_count in step with inserts."""
    author = make_user()
    fans = [make_user(), make_user()]
    post_moods(db, author, [3])
    post_id = db.query(MoodWallPost).one().id

    for fan in fans:
        result = send_encouragement(db, fan.id, post_id, "Sending hugs")
        assert result.ok
        assert result.notice is None
        assert result.data.message == "Sending hugs"

    post = list_posts(db, "all", now=NOW).data[0]
    assert post["encouragement_count"] == 2


def test_duplicate_encouragement_is_benign(db, make_user):
    """The second send from the same user is reported, not raised, and stores nothing."""
    author = make_user()
    fan = make_user()
    post_moods(db, author, [3])
    post_id = db.query(MoodWallPost).one().id

    first = send_encouragement(db, fan.id, post_id)
    second = send_encouragement(db, fan.id, post_id)

    assert first.ok and first.data is not None
    assert second.ok
    assert second.data is None
    assert second.notice == ALREADY_SENT_MESSAGE
    assert db.query(Encouragement).count() == 1
    assert list_posts(db, "all", now=NOW).data[0]["encouragement_count"] == 1


def test_encouraging_missing_post(db, make_user):
    """Test encouragement for a post that does not exist."""
    fan = make_user()

    result = send_encouragement(db, fan.id, "missing-post")

    assert not result.ok
    assert result.error.kind == ErrorKind.NOT_FOUND
