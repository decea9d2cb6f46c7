"""
Mood wall service: reading public posts and sending encouragement.
"""
import logging
from datetime import datetime
from typing import Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from moodwall.core.errors import ErrorKind, Result, classify_store_error
from moodwall.core.utils import time_ago, utcnow
from moodwall.models.wall import Encouragement, MoodWallPost
from moodwall.services.taxonomy import ALL_FILTER, filter_range

logger = logging.getLogger(__name__)

ALREADY_SENT_MESSAGE = "You already sent support to this post"
WALL_FAILED_MESSAGE = "Failed to load mood wall"
ENCOURAGEMENT_FAILED_MESSAGE = "Failed to send support"
POST_NOT_FOUND_MESSAGE = "Post not found"


def serialize_post(post: MoodWallPost, now: Optional[datetime] = None) -> dict:
    """Public view of a wall post: no owner, plus a relative age."""
    return {
        "id": post.id,
        "mood_value": post.mood_value,
        "emoji": post.emoji,
        "message_optional": post.message_optional,
        "timestamp": post.timestamp,
        "encouragement_count": post.encouragement_count or 0,
        "time_ago": time_ago(post.timestamp, now),
    }


def list_posts(
    db: Session,
    filter_name: str = ALL_FILTER,
    limit: int = 100,
    now: Optional[datetime] = None
) -> Result:
    """
    Wall posts newest first, optionally limited to a mood filter's range.
    Unknown filter names list everything, same as "all".
    """
    mood_range = filter_range(filter_name)
    try:
        query = db.query(MoodWallPost)
        if mood_range:
            low, high = mood_range
            query = query.filter(
                MoodWallPost.mood_value >= low,
                MoodWallPost.mood_value <= high
            )
        posts = query.order_by(
            MoodWallPost.timestamp.desc(),
            MoodWallPost.created_at.desc()
        ).limit(limit).all()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Error fetching mood wall posts (filter=%s): %s", filter_name, e)
        return Result.failure(classify_store_error(e), WALL_FAILED_MESSAGE, e)

    now = now or utcnow()
    return Result.success([serialize_post(post, now) for post in posts])


def send_encouragement(
    db: Session,
    sender_id: str,
    post_id: str,
    message: Optional[str] = None
) -> Result:
    """
    Record one encouragement from a sender to a post.

    A second attempt for the same (sender, post) pair is not an error:
    it returns a successful result with no data and an "already sent" notice.
    """
    encouragement = Encouragement(
        from_user_id=sender_id,
        to_post_id=post_id,
        message=(message or "").strip() or None,
        timestamp=utcnow()
    )
    try:
        db.add(encouragement)
        db.commit()
        db.refresh(encouragement)
    except SQLAlchemyError as e:
        db.rollback()
        kind = classify_store_error(e)
        if kind == ErrorKind.CONFLICT:
            logger.info("Duplicate encouragement from %s to post %s", sender_id, post_id)
            return Result.success(None, notice=ALREADY_SENT_MESSAGE)
        logger.error("Error sending encouragement to post %s: %s", post_id, e)
        if kind == ErrorKind.NOT_FOUND:
            return Result.failure(kind, POST_NOT_FOUND_MESSAGE, e)
        return Result.failure(kind, ENCOURAGEMENT_FAILED_MESSAGE, e)

    return Result.success(encouragement)
