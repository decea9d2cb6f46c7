"""
Pydantic schemas for MoodCheckin entity.
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
from moodwall.core.config import settings


class MoodCheckinCreate(BaseModel):
    """Schema for check-in creation."""
    mood_value: int = Field(ge=1, le=10)
    mood_emoji: str = Field(min_length=1, max_length=16)
    notes: Optional[str] = None
    is_anonymous: bool = False

    @field_validator("notes", mode="before")
    @classmethod
    def truncate_notes(cls, v):
        """Strip notes and cut them to the maximum note length."""
        if v is None:
            return None
        v = str(v).strip()
        return v[:settings.NOTE_MAX_LENGTH] or None


class MoodCheckinResponse(BaseModel):
    """Schema for check-in response."""
    id: str
    user_id: str
    mood_value: int
    emoji: str
    notes: Optional[str] = None
    is_anonymous: bool
    timestamp: datetime

    class Config:
        from_attributes = True


class StreakResponse(BaseModel):
    streak: int


class TodayStatusResponse(BaseModel):
    checked_in_today: bool
