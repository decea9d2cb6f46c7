"""
Session routes: current actor, guest mode, guest conversion and sign-out.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from moodwall.api.dependencies import SessionContext, get_session_context, require_token_identity
from moodwall.core.errors import raise_for_error
from moodwall.db.session import get_db
from moodwall.schemas.user import (
    ConvertGuestRequest, GuestSessionRequest, SessionResponse, SignOutResponse, UserResponse
)
from moodwall.services.user_service import convert_guest_to_user, get_or_create_guest, update_profile

router = APIRouter(prefix="/session", tags=["session"])


@router.get("", response_model=SessionResponse)
async def get_session(context: SessionContext = Depends(get_session_context)):
    """Get the resolved actor for this request."""
    return SessionResponse(
        user=UserResponse.model_validate(context.profile) if context.profile else None,
        is_guest=context.is_guest,
        is_authenticated=context.auth_user_id is not None
    )


@router.post("/guest", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def start_guest_session(
    payload: GuestSessionRequest,
    db: Session = Depends(get_db)
):
    """
    Enter guest mode.
    The client keeps the returned id and sends it back in the guest header.
    """
    return raise_for_error(get_or_create_guest(db, payload.guest_user_id))


@router.post("/convert", response_model=UserResponse)
async def convert_guest(
    payload: ConvertGuestRequest,
    auth_user_id: str = Depends(require_token_identity),
    db: Session = Depends(get_db)
):
    """Link a guest profile (and all its history) to the signed-in identity."""
    profile = raise_for_error(convert_guest_to_user(db, auth_user_id, payload.guest_user_id))
    if payload.username:
        profile = raise_for_error(update_profile(db, profile.id, username=payload.username))
    return profile


@router.post("/signout", response_model=SignOutResponse)
async def sign_out():
    """Sign out. Sessions are stateless here; the client drops its token and guest id."""
    return SignOutResponse(message="Signed out successfully", clear_guest_id=True)
