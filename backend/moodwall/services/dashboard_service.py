"""
Dashboard aggregation: recent check-ins, streak and today status loaded concurrently.
"""
import asyncio
import logging
from datetime import date
from typing import Callable, Optional
from sqlalchemy.orm import sessionmaker
from starlette.concurrency import run_in_threadpool
from moodwall.core.config import settings
from moodwall.services.checkin_service import (
    get_checkin_streak, has_checked_in_today, list_checkins, weekly_chart
)

logger = logging.getLogger(__name__)


def _with_session(session_factory: sessionmaker, fn: Callable, *args):
    """Run one read on its own session; sessions are not shared across threads."""
    db = session_factory()
    try:
        return fn(db, *args)
    finally:
        db.close()


async def load_dashboard(
    session_factory: sessionmaker,
    user_id: str,
    today: Optional[date] = None
) -> dict:
    """
    Fan out the three dashboard reads and wait for all of them.
    Each section falls back to its empty value on its own.
    """
    checkins_result, streak, checked_in_today = await asyncio.gather(
        run_in_threadpool(_with_session, session_factory, list_checkins, user_id, settings.CHECKIN_HISTORY_LIMIT),
        run_in_threadpool(_with_session, session_factory, get_checkin_streak, user_id, today),
        run_in_threadpool(_with_session, session_factory, has_checked_in_today, user_id),
        return_exceptions=True
    )

    checkins = []
    if isinstance(checkins_result, BaseException):
        logger.error("Dashboard check-ins failed for user %s: %s", user_id, checkins_result)
    elif checkins_result.ok:
        checkins = checkins_result.data

    if isinstance(streak, BaseException):
        logger.error("Dashboard streak failed for user %s: %s", user_id, streak)
        streak = 0

    if isinstance(checked_in_today, BaseException):
        logger.error("Dashboard today status failed for user %s: %s", user_id, checked_in_today)
        checked_in_today = False

    return {
        "checkins": checkins,
        "total_checkins": len(checkins),
        "streak": streak,
        "checked_in_today": checked_in_today,
        "chart": weekly_chart(checkins, today),
    }
