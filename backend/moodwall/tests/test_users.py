"""
Tests for profiles, guest mode and account deletion.
"""
from moodwall.core.errors import ErrorKind
from moodwall.models.checkin import MoodCheckin
from moodwall.models.user import User
from moodwall.models.wall import Encouragement, MoodWallPost
from moodwall.services.checkin_service import record_checkin
from moodwall.services.user_service import (
    convert_guest_to_user, delete_account, get_or_create_guest,
    get_or_create_profile, update_profile
)
from moodwall.services.wall_service import send_encouragement


def test_profile_created_on_first_sign_in(db):
    """Test profile creation for a new auth identity."""
    result = get_or_create_profile(db, "auth-1")

    assert result.ok
    assert result.data.auth_user_id == "auth-1"
    assert result.data.is_guest is False
    assert result.data.preferences == {}


def test_existing_profile_is_reused(db):
    """Signing in again returns the same row; a username is applied if given."""
    first = get_or_create_profile(db, "auth-1").data
    again = get_or_create_profile(db, "auth-1", username="sunny").data

    assert again.id == first.id
    assert again.username_optional == "sunny"
    assert db.query(User).count() == 1


def test_guest_is_created_and_resumed(db):
    """A remembered guest id resumes the same guest."""
    guest = get_or_create_guest(db).data

    assert guest.is_guest
    assert guest.username_optional.startswith("Guest_")
    assert guest.preferences == {"is_guest": True}

    resumed = get_or_create_guest(db, guest.id).data
    assert resumed.id == guest.id


def test_unknown_guest_id_starts_new_guest(db):
    guest = get_or_create_guest(db, "forgotten-id").data
    assert guest.id != "forgotten-id"
    assert db.query(User).count() == 1


def test_registered_profile_is_not_a_guest(db):
    """A registered profile id cannot be resumed as a guest."""
    profile = get_or_create_profile(db, "auth-1").data
    guest = get_or_create_guest(db, profile.id).data
    assert guest.id != profile.id


def test_convert_guest_keeps_history(db):
    """Converting re-points the auth link; check-ins stay with the same profile id."""
    guest = get_or_create_guest(db).data
    record_checkin(db, guest.id, 6, "😌")

    result = convert_guest_to_user(db, "auth-9", guest.id)

    assert result.ok
    assert result.data.id == guest.id
    assert result.data.auth_user_id == "auth-9"
    assert db.query(MoodCheckin).filter(MoodCheckin.user_id == guest.id).count() == 1


def test_convert_missing_guest(db):
    result = convert_guest_to_user(db, "auth-9", "missing")
    assert result.error.kind == ErrorKind.NOT_FOUND


def test_convert_when_identity_has_profile(db):
    """An identity can only be linked to one profile."""
    get_or_create_profile(db, "auth-9")
    guest = get_or_create_guest(db).data

    result = convert_guest_to_user(db, "auth-9", guest.id)

    assert result.error.kind == ErrorKind.CONFLICT


def test_update_profile_merges_preferences(db, make_user):
    """Test display name and preference updates."""
    user = make_user(auth_user_id="auth-1")
    update_profile(db, user.id, preferences={"theme": "dark"})

    result = update_profile(db, user.id, username="Robin", preferences={"reminders": True})

    assert result.data.username_optional == "Robin"
    assert result.data.preferences == {"theme": "dark", "reminders": True}


def test_delete_account_cascades(db, make_user):
    """Deleting a user removes their check-ins, wall posts and encouragements."""
    leaving = make_user(auth_user_id="auth-leaving")
    staying = make_user(auth_user_id="auth-staying")
    leaving_id, staying_id = leaving.id, staying.id

    record_checkin(db, leaving_id, 2, "😢", notes="rough", is_anonymous=True)
    record_checkin(db, leaving_id, 5, "😌")
    record_checkin(db, staying_id, 8, "😊", is_anonymous=True)
    leaving_post = db.query(MoodWallPost).filter(MoodWallPost.user_id == leaving_id).one()
    staying_post = db.query(MoodWallPost).filter(MoodWallPost.user_id == staying_id).one()
    staying_post_id = staying_post.id

    send_encouragement(db, leaving_id, staying_post_id)
    send_encouragement(db, staying_id, leaving_post.id)

    result = delete_account(db, leaving_id)

    assert result.ok
    db.expire_all()
    assert db.get(User, leaving_id) is None
    assert db.query(MoodCheckin).filter(MoodCheckin.user_id == leaving_id).count() == 0
    assert db.query(MoodWallPost).filter(MoodWallPost.user_id == leaving_id).count() == 0
    assert db.query(Encouragement).count() == 0
    assert db.query(MoodCheckin).filter(MoodCheckin.user_id == staying_id).count() == 1
    assert db.get(MoodWallPost, staying_post_id).encouragement_count == 0


def test_delete_missing_account(db):
    result = delete_account(db, "missing")
    assert result.error.kind == ErrorKind.NOT_FOUND
