"""
Pydantic schemas for supportive messages.
"""
from pydantic import BaseModel, Field


class SupportRequest(BaseModel):
    mood_value: int = Field(ge=1, le=10)
    mood_emoji: str = Field(default="", max_length=16)


class SupportResponse(BaseModel):
    message: str
    mood_category: str
