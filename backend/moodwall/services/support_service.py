"""
Supportive message selection.

Messages come from the `ai_responses` cache when a matching entry exists
(least used first); otherwise one of the static templates below is picked
at random. Selection never fails: every error degrades to a template.
"""
import logging
import random
from typing import Dict, List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from moodwall.core.errors import Result
from moodwall.models.support import SupportMessageTemplate
from moodwall.services.taxonomy import MoodCategory, category_of

logger = logging.getLogger(__name__)

FALLBACK_MESSAGES: Dict[MoodCategory, List[str]] = {
    MoodCategory.VERY_LOW: [
        "I see you're going through a really tough time right now {emoji}. Your feelings are "
        "completely valid, and it takes courage to acknowledge them. You're not alone in this. "
        "These difficult moments will pass. Consider reaching out to someone you trust, or try "
        "some gentle self-care like a warm bath, calming music, or a few minutes in nature. "
        "Be patient and kind with yourself - every small step forward matters.",
        "It sounds like things are feeling really heavy for you today {emoji}. Your emotions are "
        "important and deserve to be felt. Sometimes the hardest part is just getting through the "
        "day, and you're doing it. When you're ready, try a grounding exercise: take three deep "
        "breaths, notice five things you can see, four you can touch, three you can hear. "
        "People care about you, and professional support is always available if you need it.",
    ],
    MoodCategory.LOW: [
        "I hear that you're feeling down today {emoji}. These feelings are real and valid. "
        "It's okay to not be okay sometimes. Maybe a favorite song, a walk outside, or a chat "
        "with someone you care about could help a little. This feeling won't last forever - "
        "take things one moment at a time.",
        "You're navigating through some difficult feelings right now {emoji}. That takes strength. "
        "Consider doing something kind for yourself today, even if it's small - a warm drink, "
        "a cozy blanket, or writing down something you're grateful for. Small acts of self-care "
        "can make a difference.",
    ],
    MoodCategory.NEUTRAL: [
        "You're in a balanced space today {emoji}. That's a gift. This can be a good time for "
        "reflection, trying something new, or simply appreciating the calm. Maybe reach out to "
        "a friend, start a small project, or do something creative.",
        "A steady day can feel like a breath of fresh air {emoji}. It might be a good time to "
        "check in with yourself about what you need - rest, connection, creativity or movement. "
        "Listen to what your body and mind are asking for.",
    ],
    MoodCategory.POSITIVE: [
        "It's wonderful to see you're feeling good today {emoji}! This positive energy is worth "
        "celebrating. Share it with others or do something that brings you joy. These good "
        "moments help build resilience for tougher days.",
        "Your positive mood is shining through {emoji}! Consider what's contributing to this "
        "feeling and how you can nurture it. Good days remind us that good days are possible, "
        "even after difficult ones.",
    ],
    MoodCategory.VERY_POSITIVE: [
        "You're radiating positivity today {emoji}! Celebrate this moment and notice what made "
        "it special. It's a perfect time to spread some of that joy - reach out to someone who "
        "might need support, or simply be present in this good feeling.",
        "What an incredible feeling {emoji}! You're on top of the world, and that's beautiful. "
        "Remember this feeling - it's a reminder that you're capable of experiencing joy. "
        "Let this energy fuel you, and maybe share it with someone who could use a lift.",
    ],
}


def generate_support_message(
    mood_value: int,
    mood_emoji: str,
    chooser: Optional[random.Random] = None
) -> str:
    """Pick a static template for the mood's category and fill in the emoji."""
    category = category_of(mood_value)
    templates = FALLBACK_MESSAGES.get(category, FALLBACK_MESSAGES[MoodCategory.NEUTRAL])
    template = (chooser or random).choice(templates)
    return template.format(emoji=mood_emoji)


def find_cached_message(db: Session, mood_value: int) -> Optional[SupportMessageTemplate]:
    """Least used cache entry whose category and range match the intensity."""
    category = category_of(mood_value)
    return db.query(SupportMessageTemplate).filter(
        SupportMessageTemplate.mood_category == category.value,
        SupportMessageTemplate.mood_range_start <= mood_value,
        SupportMessageTemplate.mood_range_end >= mood_value
    ).order_by(
        SupportMessageTemplate.usage_count.asc(),
        SupportMessageTemplate.id.asc()
    ).first()


def _increment_usage(db: Session, template_id: str) -> None:
    """Best effort; a failed increment is logged and otherwise ignored."""
    try:
        db.query(SupportMessageTemplate).filter(
            SupportMessageTemplate.id == template_id
        ).update(
            {SupportMessageTemplate.usage_count: SupportMessageTemplate.usage_count + 1},
            synchronize_session=False
        )
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.warning("Could not bump usage count for support message %s: %s", template_id, e)


def get_support_message(
    db: Session,
    mood_value: int,
    mood_emoji: str,
    chooser: Optional[random.Random] = None
) -> Result:
    """
    Resolve a supportive message for a mood.

    Always returns a successful Result with non-empty text.
    """
    try:
        cached = find_cached_message(db, mood_value)
        if cached and cached.message:
            message = cached.message
            _increment_usage(db, cached.id)
            return Result.success(message)
    except Exception:
        db.rollback()
        logger.exception("Error getting support message, falling back to templates")

    return Result.success(generate_support_message(mood_value, mood_emoji, chooser))
