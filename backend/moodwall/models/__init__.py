"""Models package - Import all models for SQLAlchemy registration."""
from moodwall.models.user import User
from moodwall.models.checkin import MoodCheckin
from moodwall.models.wall import MoodWallPost, Encouragement
from moodwall.models.support import SupportMessageTemplate

__all__ = [
    "User",
    "MoodCheckin",
    "MoodWallPost",
    "Encouragement",
    "SupportMessageTemplate",
]
