"""
Mood wall models: anonymous public posts and peer encouragements.
"""
from sqlalchemy import (
    Column, String, Integer, DateTime, Text, ForeignKey, UniqueConstraint, DDL, event
)
from sqlalchemy.orm import relationship
from moodwall.core.utils import utcnow
from moodwall.db.base import BaseModel


class MoodWallPost(BaseModel):
    """Public, identity-stripped mirror of an anonymous check-in."""
    __tablename__ = "mood_wall_posts"

    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    mood_value = Column(Integer, nullable=False, index=True)
    emoji = Column(String(16), nullable=False)
    message_optional = Column(String(100), nullable=True)
    timestamp = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
    # Maintained by the encouragement triggers below, never written by the app
    encouragement_count = Column(Integer, default=0, server_default="0", nullable=False)

    # Relationships
    user = relationship("User", back_populates="wall_posts")
    encouragements = relationship(
        "Encouragement", back_populates="post",
        cascade="all, delete-orphan", passive_deletes=True
    )


class Encouragement(BaseModel):
    """Peer support sent to a wall post."""
    __tablename__ = "encouragements"

    from_user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    to_post_id = Column(String(36), ForeignKey("mood_wall_posts.id", ondelete="CASCADE"), nullable=False, index=True)
    message = Column(Text, nullable=True)
    timestamp = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Relationships
    sender = relationship("User", back_populates="encouragements_sent")
    post = relationship("MoodWallPost", back_populates="encouragements")

    # One encouragement per sender per post
    __table_args__ = (
        UniqueConstraint("from_user_id", "to_post_id", name="uq_encouragement_sender_post"),
    )


# Counter triggers, created together with the encouragements table
_pg_function = DDL("""
CREATE OR REPLACE FUNCTION update_encouragement_count() RETURNS trigger AS $$
BEGIN
    IF TG_OP = 'INSERT' THEN
        UPDATE mood_wall_posts SET encouragement_count = encouragement_count + 1
        WHERE id = NEW.to_post_id;
        RETURN NEW;
    ELSIF TG_OP = 'DELETE' THEN
        UPDATE mood_wall_posts SET encouragement_count = GREATEST(encouragement_count - 1, 0)
        WHERE id = OLD.to_post_id;
        RETURN OLD;
    END IF;
    RETURN NULL;
END;
$$ LANGUAGE plpgsql
""")

_pg_trigger = DDL("""
CREATE TRIGGER trg_encouragement_count
AFTER INSERT OR DELETE ON encouragements
FOR EACH ROW EXECUTE FUNCTION update_encouragement_count()
""")

_sqlite_insert_trigger = DDL("""
CREATE TRIGGER IF NOT EXISTS trg_encouragement_count_insert
AFTER INSERT ON encouragements
BEGIN
    UPDATE mood_wall_posts SET encouragement_count = encouragement_count + 1
    WHERE id = NEW.to_post_id;
END
""")

_sqlite_delete_trigger = DDL("""
CREATE TRIGGER IF NOT EXISTS trg_encouragement_count_delete
AFTER DELETE ON encouragements
BEGIN
    UPDATE mood_wall_posts SET encouragement_count = MAX(encouragement_count - 1, 0)
    WHERE id = OLD.to_post_id;
END
""")

event.listen(Encouragement.__table__, "after_create", _pg_function.execute_if(dialect="postgresql"))
event.listen(Encouragement.__table__, "after_create", _pg_trigger.execute_if(dialect="postgresql"))
event.listen(Encouragement.__table__, "after_create", _sqlite_insert_trigger.execute_if(dialect="sqlite"))
event.listen(Encouragement.__table__, "after_create", _sqlite_delete_trigger.execute_if(dialect="sqlite"))
