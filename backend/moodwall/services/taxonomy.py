"""
Mood taxonomy: the emoji picker table, intensity categories and
the intensity ranges used to filter the mood wall.
"""
import enum
from typing import Dict, List, Optional, Tuple


class MoodCategory(str, enum.Enum):
    """Intensity buckets, declared from lowest to highest."""
    VERY_LOW = "very_low"
    LOW = "low"
    NEUTRAL = "neutral"
    POSITIVE = "positive"
    VERY_POSITIVE = "very_positive"

    @property
    def rank(self) -> int:
        return list(MoodCategory).index(self)


MOOD_EMOJIS: List[Dict[str, str]] = [
    {"id": "happy", "emoji": "😊", "label": "Happy"},
    {"id": "calm", "emoji": "😌", "label": "Calm"},
    {"id": "anxious", "emoji": "😰", "label": "Anxious"},
    {"id": "sad", "emoji": "😢", "label": "Sad"},
    {"id": "angry", "emoji": "😠", "label": "Angry"},
    {"id": "excited", "emoji": "🤩", "label": "Excited"},
    {"id": "tired", "emoji": "😴", "label": "Tired"},
    {"id": "overwhelmed", "emoji": "😵", "label": "Overwhelmed"},
]

# Inclusive intensity ranges per wall filter. Ranges overlap on purpose
# (calm and neutral share 6-7), the wall just shows whatever falls inside.
WALL_FILTERS: Dict[str, Tuple[int, int]] = {
    "happy": (8, 10),
    "excited": (8, 10),
    "calm": (6, 7),
    "neutral": (5, 7),
    "anxious": (3, 5),
    "sad": (1, 4),
    "angry": (1, 4),
    "tired": (3, 5),
    "overwhelmed": (1, 4),
}

ALL_FILTER = "all"


def category_of(intensity: int) -> MoodCategory:
    """Bucket a mood intensity into a category."""
    if intensity >= 8:
        return MoodCategory.VERY_POSITIVE
    if intensity >= 6:
        return MoodCategory.POSITIVE
    if intensity >= 4:
        return MoodCategory.NEUTRAL
    if intensity >= 2:
        return MoodCategory.LOW
    return MoodCategory.VERY_LOW


def emoji_for(mood_id: Optional[str]) -> Dict[str, str]:
    """Look up a mood by id; unknown ids get the first entry."""
    for mood in MOOD_EMOJIS:
        if mood["id"] == mood_id:
            return mood
    return MOOD_EMOJIS[0]


def filter_range(name: str) -> Optional[Tuple[int, int]]:
    """Intensity range for a wall filter, or None for "all" and unknown names."""
    if name == ALL_FILTER:
        return None
    return WALL_FILTERS.get(name)
