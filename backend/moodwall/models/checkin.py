"""
Mood check-in model for daily mood tracking.
"""
from sqlalchemy import Column, String, Integer, Boolean, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from moodwall.core.utils import utcnow
from moodwall.db.base import BaseModel


class MoodCheckin(BaseModel):
    """A single mood record. Never updated; a new check-in is a new row."""
    __tablename__ = "mood_checkins"

    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    mood_value = Column(Integer, nullable=False)
    emoji = Column(String(16), nullable=False)
    notes = Column(String(100), nullable=True)
    is_anonymous = Column(Boolean, default=False, nullable=False)
    timestamp = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)

    # Relationships
    user = relationship("User", back_populates="checkins")

    __table_args__ = (
        CheckConstraint("mood_value BETWEEN 1 AND 10", name="ck_checkin_mood_value"),
    )
