"""
User service: registered and guest profiles, guest conversion and account deletion.
"""
import logging
import uuid
from typing import Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from moodwall.core.errors import ErrorKind, Result, classify_store_error
from moodwall.models.user import User

logger = logging.getLogger(__name__)

PROFILE_FAILED_MESSAGE = "Failed to load profile. Please try again."
GUEST_FAILED_MESSAGE = "Failed to start guest session. Please try again."
GUEST_NOT_FOUND_MESSAGE = "Guest profile not found"
ALREADY_LINKED_MESSAGE = "This account already has a profile"
USER_NOT_FOUND_MESSAGE = "User not found"
DELETE_FAILED_MESSAGE = "Failed to delete profile. Please try again."
UPDATE_FAILED_MESSAGE = "Failed to update profile. Please try again."


def get_profile_by_auth_id(db: Session, auth_user_id: str) -> Optional[User]:
    return db.query(User).filter(User.auth_user_id == auth_user_id).first()


def get_guest(db: Session, guest_user_id: str) -> Optional[User]:
    """Guest profile by id; registered profiles never match."""
    return db.query(User).filter(
        User.id == guest_user_id,
        User.auth_user_id.is_(None)
    ).first()


def get_or_create_profile(db: Session, auth_user_id: str, username: Optional[str] = None) -> Result:
    """
    Profile for an auth identity, created on first sign-in.
    An existing profile only has its username updated when one is given.
    """
    try:
        profile = get_profile_by_auth_id(db, auth_user_id)
        if profile:
            if username:
                profile.username_optional = username
                db.commit()
                db.refresh(profile)
            return Result.success(profile)

        profile = User(auth_user_id=auth_user_id, username_optional=username, preferences={})
        db.add(profile)
        db.commit()
        db.refresh(profile)
        return Result.success(profile)
    except SQLAlchemyError as e:
        db.rollback()
        kind = classify_store_error(e)
        if kind == ErrorKind.CONFLICT:
            # created concurrently by another request for the same identity
            existing = get_profile_by_auth_id(db, auth_user_id)
            if existing:
                return Result.success(existing)
        logger.error("Error creating profile for auth user %s: %s", auth_user_id, e)
        return Result.failure(kind, PROFILE_FAILED_MESSAGE, e)


def get_or_create_guest(db: Session, guest_user_id: Optional[str] = None) -> Result:
    """Reuse the guest profile the client remembers, or start a new one."""
    try:
        if guest_user_id:
            guest = get_guest(db, guest_user_id)
            if guest:
                return Result.success(guest)

        guest = User(
            auth_user_id=None,
            username_optional=f"Guest_{uuid.uuid4().hex[:6]}",
            preferences={"is_guest": True}
        )
        db.add(guest)
        db.commit()
        db.refresh(guest)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Error getting/creating guest user: %s", e)
        return Result.failure(classify_store_error(e), GUEST_FAILED_MESSAGE, e)

    logger.info("Created guest profile %s", guest.id)
    return Result.success(guest)


def convert_guest_to_user(db: Session, auth_user_id: str, guest_user_id: str) -> Result:
    """
    Link a guest profile to an auth identity.

    Check-ins, posts and encouragements reference the profile id, so
    re-pointing auth_user_id is the whole conversion.
    """
    try:
        guest = get_guest(db, guest_user_id)
        if not guest:
            return Result.failure(ErrorKind.NOT_FOUND, GUEST_NOT_FOUND_MESSAGE)

        guest.auth_user_id = auth_user_id
        db.commit()
        db.refresh(guest)
    except SQLAlchemyError as e:
        db.rollback()
        kind = classify_store_error(e)
        logger.error("Error converting guest %s: %s", guest_user_id, e)
        if kind == ErrorKind.CONFLICT:
            return Result.failure(kind, ALREADY_LINKED_MESSAGE, e)
        return Result.failure(kind, PROFILE_FAILED_MESSAGE, e)

    return Result.success(guest)


def update_profile(
    db: Session,
    user_id: str,
    username: Optional[str] = None,
    preferences: Optional[dict] = None
) -> Result:
    """Update display name and/or merge preference keys."""
    try:
        user = db.get(User, user_id)
        if not user:
            return Result.failure(ErrorKind.NOT_FOUND, USER_NOT_FOUND_MESSAGE)

        if username is not None:
            user.username_optional = username.strip() or None
        if preferences is not None:
            user.preferences = {**(user.preferences or {}), **preferences}
        db.commit()
        db.refresh(user)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Error updating profile %s: %s", user_id, e)
        return Result.failure(classify_store_error(e), UPDATE_FAILED_MESSAGE, e)

    return Result.success(user)


def delete_account(db: Session, user_id: str) -> Result:
    """
    Delete a profile. The database cascades the delete to its check-ins,
    wall posts and encouragements.
    """
    try:
        user = db.get(User, user_id)
        if not user:
            return Result.failure(ErrorKind.NOT_FOUND, USER_NOT_FOUND_MESSAGE)
        db.delete(user)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Error deleting profile %s: %s", user_id, e)
        return Result.failure(classify_store_error(e), DELETE_FAILED_MESSAGE, e)

    logger.info("Deleted profile %s", user_id)
    return Result.success(user_id)
