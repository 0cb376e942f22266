"""
Situation classification — transcript -> Situation.

Counts, per category, how many lexicon keywords occur as substrings of the
lowercased transcript. Categories are evaluated in CLASSIFICATION_PRIORITY order and a
later category replaces the leader only on a strictly higher count. A second
category-specific pass assigns the subtype.

Pure and deterministic: no randomness, no I/O.
"""

from typing import List, Optional, Tuple

from ..lexicon import (
    CLASSIFICATION_PRIORITY,
    GENERAL_SUBTYPE,
    SITUATION_LEXICON,
    SUBTYPE_KEYWORDS,
)
from ..models.situation import Situation, SituationCategory, fallback_situation

# Keywords listed in the context note.
CONTEXT_KEYWORD_LIMIT = 3
# Matches needed for full confidence.
FULL_CONFIDENCE_MATCHES = 3


def matched_keywords(text: str, keywords) -> List[str]:
    """Keywords occurring as substrings of text (text must already be lowercased)."""
    return [kw for kw in keywords if kw.lower() in text]


def _best_category(text: str) -> Optional[Tuple[str, List[str]]]:
    best: Optional[Tuple[str, List[str]]] = None
    for category in CLASSIFICATION_PRIORITY:
        matches = matched_keywords(text, SITUATION_LEXICON[category].keywords)
        if matches and (best is None or len(matches) > len(best[1])):
            best = (category, matches)
    return best


def detect_subtype(category: str, text: str) -> str:
    """First subtype group of the category with a keyword in text, else 'general'."""
    for subtype, keywords in SUBTYPE_KEYWORDS.get(category, ()):
        if any(kw in text for kw in keywords):
            return subtype
    return GENERAL_SUBTYPE


def classify_situation(transcript: str) -> Situation:
    """
    Classify a transcript into one of the four situation categories.

    Zero keyword matches returns the fallback situation (perceived incompetence,
    subtype 'general', confidence 0.3). Otherwise confidence = min(matches / 3, 1).
    """
    text = (transcript or "").lower()
    best = _best_category(text)
    if best is None:
        return fallback_situation()
    category, matches = best
    return Situation(
        category=SituationCategory(category),
        subtype=detect_subtype(category, text),
        context="Detectado: " + ", ".join(matches[:CONTEXT_KEYWORD_LIMIT]),
        confidence=min(len(matches) / FULL_CONFIDENCE_MATCHES, 1.0),
    )
