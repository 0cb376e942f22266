"""
Situation model — the classified emotional context of a conversation.

Created once per transcript by stages.classification and read-only afterwards.
"""

from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from ..lexicon import situations as lex


class SituationCategory(str, Enum):
    """Closed set of situation categories. Values are the tags stored on catalog items."""

    BEREAVEMENT = lex.BEREAVEMENT
    ECONOMIC_HARDSHIP = lex.ECONOMIC_HARDSHIP
    PERCEIVED_INCOMPETENCE = lex.PERCEIVED_INCOMPETENCE
    BREAKUP = lex.BREAKUP


class Situation(BaseModel):
    """Category, subtype, diagnostic context note and confidence in [0, 1]."""

    model_config = ConfigDict(frozen=True)

    category: SituationCategory = Field(validation_alias=AliasChoices("category", "type"))
    subtype: str = lex.GENERAL_SUBTYPE
    context: str = ""
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)


FALLBACK_CONTEXT = "Sin situación específica detectada - asumiendo necesidad de apoyo general"
FALLBACK_CONFIDENCE = 0.3


def fallback_situation() -> Situation:
    """Situation used when a transcript matches no lexicon keyword."""
    return Situation(
        category=SituationCategory(lex.FALLBACK_CATEGORY),
        subtype=lex.GENERAL_SUBTYPE,
        context=FALLBACK_CONTEXT,
        confidence=FALLBACK_CONFIDENCE,
    )


def category_value(situation: Situation) -> str:
    """Plain category string (tolerates unvalidated situations built with model_construct)."""
    category: Any = situation.category
    return category.value if isinstance(category, Enum) else str(category)
