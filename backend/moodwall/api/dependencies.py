"""
Request dependencies: resolving the acting user for each request.
"""
import logging
from dataclasses import dataclass
from typing import Optional
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session
from moodwall.core.config import settings
from moodwall.core.errors import raise_for_error
from moodwall.core.security import get_auth_user_id
from moodwall.db.session import get_db
from moodwall.models.user import User
from moodwall.services.user_service import get_guest, get_or_create_profile

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


@dataclass
class SessionContext:
    """
    The acting user for one request.

    Built per request from the bearer token or the guest header and passed
    explicitly into every operation; nothing about it outlives the request.
    """
    current_user_id: Optional[str] = None
    is_guest: bool = False
    auth_user_id: Optional[str] = None
    profile: Optional[User] = None

    @property
    def is_anonymous(self) -> bool:
        return self.current_user_id is None


async def get_token_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)
) -> Optional[str]:
    """Auth identity from a bearer token, None when no token was sent."""
    if credentials is None:
        return None
    auth_user_id = get_auth_user_id(credentials.credentials)
    if not auth_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return auth_user_id


async def require_token_identity(
    auth_user_id: Optional[str] = Depends(get_token_identity)
) -> str:
    if auth_user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return auth_user_id


async def get_session_context(
    request: Request,
    auth_user_id: Optional[str] = Depends(get_token_identity),
    db: Session = Depends(get_db)
) -> SessionContext:
    """Resolve the caller as a registered user, a guest, or anonymous."""
    if auth_user_id:
        profile = raise_for_error(get_or_create_profile(db, auth_user_id))
        return SessionContext(
            current_user_id=profile.id,
            is_guest=False,
            auth_user_id=auth_user_id,
            profile=profile
        )

    guest_user_id = request.headers.get(settings.GUEST_HEADER)
    if guest_user_id:
        guest = get_guest(db, guest_user_id)
        if guest:
            return SessionContext(current_user_id=guest.id, is_guest=True, profile=guest)
        logger.warning("Unknown guest id %s, treating request as anonymous", guest_user_id)

    return SessionContext()


async def require_actor(
    context: SessionContext = Depends(get_session_context)
) -> SessionContext:
    """Require a registered or guest user."""
    if context.is_anonymous:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Please sign in or continue as guest"
        )
    return context
