"""
Mood wall routes: public feed and peer encouragement.
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
from moodwall.api.dependencies import SessionContext, require_actor
from moodwall.core.config import settings
from moodwall.core.errors import raise_for_error
from moodwall.db.session import get_db
from moodwall.schemas.wall import (
    EncouragementCreate, EncouragementResponse, EncouragementResult, MoodWallPostResponse
)
from moodwall.services.wall_service import list_posts, send_encouragement

router = APIRouter(prefix="/wall", tags=["wall"])


@router.get("", response_model=List[MoodWallPostResponse])
async def get_wall(
    mood_filter: str = Query(default="all", alias="filter"),
    limit: int = Query(default=settings.WALL_DEFAULT_LIMIT, ge=1, le=500),
    db: Session = Depends(get_db)
):
    """Get mood wall posts (latest first), optionally filtered by mood."""
    return raise_for_error(list_posts(db, mood_filter, limit))


@router.post(
    "/{post_id}/encouragements",
    response_model=EncouragementResult,
    status_code=status.HTTP_200_OK
)
async def encourage_post(
    post_id: str,
    payload: Optional[EncouragementCreate] = None,
    context: SessionContext = Depends(require_actor),
    db: Session = Depends(get_db)
):
    """Send support to a post. Sending twice is reported as already sent."""
    message = payload.message if payload else None
    result = send_encouragement(db, context.current_user_id, post_id, message)
    encouragement = raise_for_error(result)

    if result.notice:
        return EncouragementResult(message=result.notice, already_sent=True)
    return EncouragementResult(
        message="Support sent! 💜",
        encouragement=EncouragementResponse.model_validate(encouragement)
    )
