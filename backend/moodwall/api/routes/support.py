"""
Supportive message routes.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from moodwall.db.session import get_db
from moodwall.schemas.support import SupportRequest, SupportResponse
from moodwall.services.support_service import get_support_message
from moodwall.services.taxonomy import category_of

router = APIRouter(prefix="/support", tags=["support"])


@router.post("", response_model=SupportResponse)
async def get_support(payload: SupportRequest, db: Session = Depends(get_db)):
    """Get a supportive message for a mood. Call again for another one."""
    result = get_support_message(db, payload.mood_value, payload.mood_emoji)
    return SupportResponse(
        message=result.data,
        mood_category=category_of(payload.mood_value).value
    )
