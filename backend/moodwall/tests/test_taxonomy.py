"""
Tests for the mood taxonomy.
"""
import pytest
from moodwall.services.taxonomy import (
    MOOD_EMOJIS, WALL_FILTERS, MoodCategory, category_of, emoji_for, filter_range
)


@pytest.mark.parametrize("intensity,expected", [
    (1, MoodCategory.VERY_LOW),
    (2, MoodCategory.LOW),
    (3, MoodCategory.LOW),
    (4, MoodCategory.NEUTRAL),
    (5, MoodCategory.NEUTRAL),
    (6, MoodCategory.POSITIVE),
    (7, MoodCategory.POSITIVE),
    (8, MoodCategory.VERY_POSITIVE),
    (10, MoodCategory.VERY_POSITIVE),
])
def test_category_thresholds(intensity, expected):
    """Test intensity thresholds."""
    assert category_of(intensity) == expected


def test_category_is_monotonic():
    """Categories never go down as intensity goes up."""
    ranks = [category_of(value).rank for value in range(1, 11)]
    assert ranks == sorted(ranks)


def test_category_is_total():
    """Out-of-range integers still get a category."""
    assert category_of(-5) == MoodCategory.VERY_LOW
    assert category_of(0) == MoodCategory.VERY_LOW
    assert category_of(42) == MoodCategory.VERY_POSITIVE


def test_emoji_lookup():
    """Test emoji table lookup."""
    assert len(MOOD_EMOJIS) == 8
    assert emoji_for("sad")["emoji"] == "😢"
    assert emoji_for("overwhelmed")["label"] == "Overwhelmed"


def test_unknown_emoji_falls_back_to_first_entry():
    """Unknown mood ids are not an error."""
    assert emoji_for("bored") == MOOD_EMOJIS[0]
    assert emoji_for(None)["id"] == "happy"


def test_filter_ranges():
    """Test wall filter ranges, overlaps included."""
    assert filter_range("happy") == (8, 10)
    assert filter_range("calm") == (6, 7)
    assert filter_range("neutral") == (5, 7)
    assert filter_range("all") is None
    assert filter_range("unknown") is None
    assert set(WALL_FILTERS) == {
        "happy", "excited", "calm", "neutral", "anxious",
        "sad", "angry", "tired", "overwhelmed"
    }
