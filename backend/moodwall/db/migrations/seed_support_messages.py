"""
Migration script to seed the ai_responses cache with the built-in support messages.
Safe to run more than once: categories that already have messages are skipped.
"""
from moodwall.db.session import SessionLocal
from moodwall.models.support import SupportMessageTemplate
from moodwall.services.support_service import FALLBACK_MESSAGES
from moodwall.services.taxonomy import MoodCategory

# Intensity range covered by each category (matches category_of thresholds)
CATEGORY_RANGES = {
    MoodCategory.VERY_LOW: (1, 1),
    MoodCategory.LOW: (2, 3),
    MoodCategory.NEUTRAL: (4, 5),
    MoodCategory.POSITIVE: (6, 7),
    MoodCategory.VERY_POSITIVE: (8, 10),
}


def seed(db) -> int:
    """Insert missing messages; returns the number of rows added."""
    added = 0
    for category, templates in FALLBACK_MESSAGES.items():
        exists = db.query(SupportMessageTemplate).filter(
            SupportMessageTemplate.mood_category == category.value
        ).first()
        if exists:
            print(f"{category.value}: already seeded, skipping")
            continue

        start, end = CATEGORY_RANGES[category]
        for template in templates:
            # cached messages are stored without an emoji
            db.add(SupportMessageTemplate(
                mood_category=category.value,
                mood_range_start=start,
                mood_range_end=end,
                message=template.format(emoji="").replace(" .", ".").replace(" !", "!"),
                usage_count=0
            ))
            added += 1
    db.commit()
    return added


def migrate():
    db = SessionLocal()
    try:
        added = seed(db)
        print(f"Seeded {added} support messages")
    except Exception as e:
        db.rollback()
        print(f"Migration failed: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    migrate()
