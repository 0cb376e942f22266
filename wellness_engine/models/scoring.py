"""
Scoring models — per-item score breakdown and the assembled recommendation result.

Contains:
- ProductScore: score and reasons for a single item (output of score_product)
- ScoredItem: a catalog item with its score and reasons (output of rank_products)
- RecommendationResult: the unit returned to every caller
"""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field

from .catalog import CatalogItem
from .profile import Profile
from .situation import Situation


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string with a Z suffix."""
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


class ProductScore(BaseModel):
    score: float = 0
    reasons: List[str] = []


class ScoredItem(BaseModel):
    """A catalog item with its recommendation score and human-readable reasons."""

    item: CatalogItem = Field(validation_alias=AliasChoices("item", "product"))
    score: float
    reasons: List[str] = []


class RecommendationResult(BaseModel):
    """Situation, ranked items, empathic message and the profile they were computed for."""

    situation: Situation
    recommendations: List[ScoredItem] = []
    empathic_message: str
    message_length: int
    profile: Profile
    timestamp: str = Field(default_factory=utc_now_iso)

    @property
    def top_item(self) -> Optional[ScoredItem]:
        return self.recommendations[0] if self.recommendations else None
