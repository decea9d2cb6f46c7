"""
Pydantic schemas for the mood wall.
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class MoodWallPostResponse(BaseModel):
    """Public wall post; carries no owner information."""
    id: str
    mood_value: int
    emoji: str
    message_optional: Optional[str] = None
    timestamp: datetime
    encouragement_count: int = 0
    time_ago: str


class EncouragementCreate(BaseModel):
    """Schema for encouragement creation."""
    message: Optional[str] = Field(default=None, max_length=280)


class EncouragementResponse(BaseModel):
    """Schema for encouragement response."""
    id: str
    to_post_id: str
    message: Optional[str] = None
    timestamp: datetime

    class Config:
        from_attributes = True


class EncouragementResult(BaseModel):
    """Outcome of sending support; a repeat send is reported, not failed."""
    message: str
    already_sent: bool = False
    encouragement: Optional[EncouragementResponse] = None
