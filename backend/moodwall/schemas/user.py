"""
Pydantic schemas for User entity and session resolution.
"""
from pydantic import BaseModel, Field
from typing import Any, Dict, Optional
from datetime import datetime


class UserResponse(BaseModel):
    """Schema for user response."""
    id: str
    username_optional: Optional[str] = None
    preferences: Dict[str, Any] = {}
    is_guest: bool
    created_at: datetime

    class Config:
        from_attributes = True


class UserUpdate(BaseModel):
    """Schema for user update."""
    username_optional: Optional[str] = Field(default=None, max_length=50)
    preferences: Optional[Dict[str, Any]] = None


class SessionResponse(BaseModel):
    """Resolved actor for the current request."""
    user: Optional[UserResponse] = None
    is_guest: bool = False
    is_authenticated: bool = False


class GuestSessionRequest(BaseModel):
    """Schema for entering guest mode, optionally resuming a remembered guest id."""
    guest_user_id: Optional[str] = None


class ConvertGuestRequest(BaseModel):
    """Schema for linking a guest profile to the signed-in identity."""
    guest_user_id: str
    username: Optional[str] = Field(default=None, max_length=50)


class SignOutResponse(BaseModel):
    message: str
    clear_guest_id: bool = True
