"""
Mood check-in routes.
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List
from moodwall.api.dependencies import SessionContext, require_actor
from moodwall.core.config import settings
from moodwall.core.errors import raise_for_error
from moodwall.db.session import get_db
from moodwall.schemas.checkin import (
    MoodCheckinCreate, MoodCheckinResponse, StreakResponse, TodayStatusResponse
)
from moodwall.services.checkin_service import (
    get_checkin_streak, has_checked_in_today, list_checkins, record_checkin
)

router = APIRouter(prefix="/checkins", tags=["checkins"])


@router.post("", response_model=MoodCheckinResponse, status_code=status.HTTP_201_CREATED)
async def create_checkin(
    payload: MoodCheckinCreate,
    context: SessionContext = Depends(require_actor),
    db: Session = Depends(get_db)
):
    """Record a check-in; anonymous check-ins are also posted to the mood wall."""
    return raise_for_error(record_checkin(
        db,
        context.current_user_id,
        mood_value=payload.mood_value,
        emoji=payload.mood_emoji,
        notes=payload.notes,
        is_anonymous=payload.is_anonymous
    ))


@router.get("", response_model=List[MoodCheckinResponse])
async def get_checkins(
    limit: int = Query(default=settings.CHECKIN_HISTORY_LIMIT, ge=1, le=365),
    context: SessionContext = Depends(require_actor),
    db: Session = Depends(get_db)
):
    """List recent check-ins (newest first)."""
    return raise_for_error(list_checkins(db, context.current_user_id, limit))


@router.get("/streak", response_model=StreakResponse)
async def get_streak(
    context: SessionContext = Depends(require_actor),
    db: Session = Depends(get_db)
):
    """Get the consecutive-day check-in streak."""
    return StreakResponse(streak=get_checkin_streak(db, context.current_user_id))


@router.get("/today", response_model=TodayStatusResponse)
async def get_today_status(
    context: SessionContext = Depends(require_actor),
    db: Session = Depends(get_db)
):
    """Whether the user already checked in today."""
    return TodayStatusResponse(checked_in_today=has_checked_in_today(db, context.current_user_id))
