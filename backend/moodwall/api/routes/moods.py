"""
Mood taxonomy routes.
"""
from fastapi import APIRouter
from moodwall.schemas.mood import MoodFilter, MoodOption, MoodTaxonomyResponse
from moodwall.services.taxonomy import MOOD_EMOJIS, WALL_FILTERS

router = APIRouter(prefix="/moods", tags=["moods"])


@router.get("", response_model=MoodTaxonomyResponse)
async def get_moods():
    """Emoji picker entries and mood wall filters."""
    return MoodTaxonomyResponse(
        moods=[MoodOption(**mood) for mood in MOOD_EMOJIS],
        filters=[
            MoodFilter(id=name, min=low, max=high)
            for name, (low, high) in WALL_FILTERS.items()
        ]
    )
