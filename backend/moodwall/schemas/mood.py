"""
Pydantic schemas for the mood taxonomy.
"""
from pydantic import BaseModel
from typing import List


class MoodOption(BaseModel):
    """One entry of the emoji picker."""
    id: str
    emoji: str
    label: str


class MoodFilter(BaseModel):
    """Mood wall filter and its inclusive intensity range."""
    id: str
    min: int
    max: int


class MoodTaxonomyResponse(BaseModel):
    moods: List[MoodOption]
    filters: List[MoodFilter]
