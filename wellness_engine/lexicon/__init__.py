"""Static lexicon data: situation keywords, phrase banks, distress cues, tag vocabulary."""

from .phrases import ACTIVITY_BENEFITS, CALMING_PHRASES, CONFRONTATION_PHRASES
from .situations import (
    CLASSIFICATION_PRIORITY,
    FALLBACK_CATEGORY,
    GENERAL_SUBTYPE,
    SITUATION_LEXICON,
    SUBTYPE_KEYWORDS,
    SituationProfile,
    get_situation_profile,
)

__all__ = [
    "ACTIVITY_BENEFITS",
    "CALMING_PHRASES",
    "CLASSIFICATION_PRIORITY",
    "CONFRONTATION_PHRASES",
    "FALLBACK_CATEGORY",
    "GENERAL_SUBTYPE",
    "SITUATION_LEXICON",
    "SUBTYPE_KEYWORDS",
    "SituationProfile",
    "get_situation_profile",
]
