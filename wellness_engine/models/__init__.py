"""Data models for the wellness recommendation engine."""

from .catalog import CatalogItem, ensure_items
from .config import DEFAULT_CONFIG, EngineConfig, resolve_config
from .profile import AgeBracket, Profile, classify_age
from .records import (
    RecommendationRecordInput,
    RequestStatus,
    WellnessRequest,
    build_wellness_request,
    make_transcript_excerpt,
)
from .scoring import ProductScore, RecommendationResult, ScoredItem
from .situation import Situation, SituationCategory, fallback_situation

__all__ = [
    "AgeBracket",
    "CatalogItem",
    "DEFAULT_CONFIG",
    "EngineConfig",
    "ProductScore",
    "Profile",
    "RecommendationRecordInput",
    "RecommendationResult",
    "RequestStatus",
    "ScoredItem",
    "Situation",
    "SituationCategory",
    "WellnessRequest",
    "build_wellness_request",
    "classify_age",
    "ensure_items",
    "fallback_situation",
    "make_transcript_excerpt",
    "resolve_config",
]
