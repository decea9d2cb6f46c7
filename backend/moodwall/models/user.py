"""
User model for registered and guest profiles.
"""
from sqlalchemy import Column, String, JSON
from sqlalchemy.orm import relationship
from moodwall.db.base import BaseModel


class User(BaseModel):
    """
    Profile row. `auth_user_id` links to the external auth identity;
    it is null for guests.
    """
    __tablename__ = "users"

    auth_user_id = Column(String(36), unique=True, nullable=True, index=True)
    username_optional = Column(String(50), nullable=True)
    preferences = Column(JSON, default=dict, nullable=False)

    # Relationships (rows are removed by the database's ON DELETE CASCADE)
    checkins = relationship(
        "MoodCheckin", back_populates="user",
        cascade="all, delete-orphan", passive_deletes=True
    )
    wall_posts = relationship(
        "MoodWallPost", back_populates="user",
        cascade="all, delete-orphan", passive_deletes=True
    )
    encouragements_sent = relationship(
        "Encouragement", back_populates="sender",
        cascade="all, delete-orphan", passive_deletes=True
    )

    @property
    def is_guest(self) -> bool:
        return self.auth_user_id is None
