"""
Check-in service: recording check-ins, history, streaks and today status.
"""
import logging
from datetime import date, datetime, timedelta, timezone
from typing import Iterable, List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from moodwall.core.errors import ErrorKind, Result, classify_store_error
from moodwall.core.utils import ensure_aware, local_day_bounds, local_today, to_local_date, utcnow
from moodwall.models.checkin import MoodCheckin
from moodwall.models.wall import MoodWallPost

logger = logging.getLogger(__name__)

PERMISSION_DENIED_MESSAGE = "Permission denied. Please make sure you are signed in or using guest mode."
CHECKIN_FAILED_MESSAGE = "Failed to save check-in. Please try again."
HISTORY_FAILED_MESSAGE = "Failed to load check-ins. Please try again."

CHART_DAYS = 7


def record_checkin(
    db: Session,
    user_id: str,
    mood_value: int,
    emoji: str,
    notes: Optional[str] = None,
    is_anonymous: bool = False,
    timestamp: Optional[datetime] = None
) -> Result:
    """
    Insert a check-in and, for anonymous check-ins, mirror it to the mood wall.

    The check-in is the source of truth: it is committed before the wall
    post is attempted, and a failed wall post does not undo it.
    """
    timestamp = ensure_aware(timestamp or utcnow()).astimezone(timezone.utc)
    notes = (notes or "").strip() or None

    checkin = MoodCheckin(
        user_id=user_id,
        mood_value=mood_value,
        emoji=emoji,
        notes=notes,
        is_anonymous=is_anonymous,
        timestamp=timestamp
    )
    try:
        db.add(checkin)
        db.commit()
        db.refresh(checkin)
    except SQLAlchemyError as e:
        db.rollback()
        kind = classify_store_error(e)
        logger.error("Check-in error for user %s (%s): %s", user_id, kind.value, e)
        if kind == ErrorKind.PERMISSION_DENIED:
            return Result.failure(kind, PERMISSION_DENIED_MESSAGE, e)
        return Result.failure(kind, CHECKIN_FAILED_MESSAGE, e)

    if is_anonymous:
        # detached, so a rolled-back wall post cannot expire the committed check-in
        db.expunge(checkin)
        post_to_wall(db, checkin)

    return Result.success(checkin)


def post_to_wall(db: Session, checkin: MoodCheckin) -> Optional[MoodWallPost]:
    """Best-effort wall post for an anonymous check-in; failures are only logged."""
    checkin_id = checkin.id
    post = MoodWallPost(
        user_id=checkin.user_id,
        mood_value=checkin.mood_value,
        emoji=checkin.emoji,
        message_optional=checkin.notes,
        timestamp=checkin.timestamp
    )
    try:
        db.add(post)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Error creating mood wall post for check-in %s: %s", checkin_id, e)
        return None
    return post


def list_checkins(db: Session, user_id: str, limit: int = 30) -> Result:
    """Most recent check-ins for a user, newest first."""
    try:
        checkins = db.query(MoodCheckin).filter(
            MoodCheckin.user_id == user_id
        ).order_by(MoodCheckin.timestamp.desc()).limit(limit).all()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Error fetching mood check-ins for user %s: %s", user_id, e)
        return Result.failure(classify_store_error(e), HISTORY_FAILED_MESSAGE, e)
    return Result.success(checkins)


def calculate_streak(timestamps: Iterable[datetime], today: Optional[date] = None) -> int:
    """
    Count consecutive calendar days, ending today, with at least one check-in.

    Days are de-duplicated before walking, so several check-ins on one day
    count once. A day without a check-in today means a streak of 0.
    """
    today = today or local_today()
    days = sorted({to_local_date(ts) for ts in timestamps}, reverse=True)

    streak = 0
    for day in days:
        if day > today:
            continue
        expected = today - timedelta(days=streak)
        if day == expected:
            streak += 1
        else:
            break
    return streak


def get_checkin_streak(db: Session, user_id: str, today: Optional[date] = None) -> int:
    """Current streak for a user; any failure degrades to 0."""
    try:
        rows = db.query(MoodCheckin.timestamp).filter(
            MoodCheckin.user_id == user_id
        ).order_by(MoodCheckin.timestamp.desc()).all()
        return calculate_streak((row[0] for row in rows), today)
    except Exception:
        db.rollback()
        logger.exception("Error calculating streak for user %s", user_id)
        return 0


def has_checked_in_today(db: Session, user_id: str, now: Optional[datetime] = None) -> bool:
    """Whether the user has a check-in within today's local calendar day."""
    start, end = local_day_bounds(local_today(now))
    try:
        found = db.query(MoodCheckin.id).filter(
            MoodCheckin.user_id == user_id,
            MoodCheckin.timestamp >= start,
            MoodCheckin.timestamp < end
        ).limit(1).first()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Error checking today check-in for user %s: %s", user_id, e)
        return False
    return found is not None


def weekly_chart(checkins: List[MoodCheckin], today: Optional[date] = None) -> List[dict]:
    """
    Seven-day mood series ending today.
    Days without a check-in have value None; otherwise the latest value of the day.
    """
    today = today or local_today()
    days = [today - timedelta(days=offset) for offset in range(CHART_DAYS - 1, -1, -1)]
    chart = {
        day: {"date": f"{day.strftime('%b')} {day.day}", "date_key": day.isoformat(), "value": None}
        for day in days
    }

    for checkin in sorted(checkins, key=lambda c: ensure_aware(c.timestamp)):
        day = to_local_date(checkin.timestamp)
        if day in chart:
            chart[day]["value"] = checkin.mood_value

    return [chart[day] for day in days]
