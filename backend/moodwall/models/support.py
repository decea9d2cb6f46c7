"""
Cached supportive messages keyed by mood category and intensity range.
"""
from sqlalchemy import Column, String, Integer, Text
from moodwall.db.base import BaseModel


class SupportMessageTemplate(BaseModel):
    """Pre-written supportive message; usage_count biases selection to the least used."""
    __tablename__ = "ai_responses"

    mood_category = Column(String(20), nullable=False, index=True)
    mood_range_start = Column(Integer, nullable=False)
    mood_range_end = Column(Integer, nullable=False)
    message = Column(Text, nullable=False)
    usage_count = Column(Integer, default=0, nullable=False)
