"""
User profile routes.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from moodwall.api.dependencies import SessionContext, require_actor
from moodwall.core.errors import raise_for_error
from moodwall.db.session import get_db
from moodwall.schemas.user import UserResponse, UserUpdate
from moodwall.services.user_service import delete_account, update_profile

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(context: SessionContext = Depends(require_actor)):
    """Get current user information."""
    return context.profile


@router.patch("/me", response_model=UserResponse)
async def update_current_user(
    payload: UserUpdate,
    context: SessionContext = Depends(require_actor),
    db: Session = Depends(get_db)
):
    """Update display name and preferences."""
    return raise_for_error(update_profile(
        db,
        context.current_user_id,
        username=payload.username_optional,
        preferences=payload.preferences
    ))


@router.delete("/me")
async def delete_current_user(
    context: SessionContext = Depends(require_actor),
    db: Session = Depends(get_db)
):
    """Delete the profile and everything it owns; the client should then sign out."""
    raise_for_error(delete_account(db, context.current_user_id))
    return {"message": "Profile deleted successfully", "clear_guest_id": True}
