"""
Wellness Recommendation Engine — situation classification and activity recommendations

Single entry point for the engine package:
- lexicon/: situation keywords, phrase banks, distress cues, tag vocabulary
- models/: EngineConfig, Profile, Situation, CatalogItem, ScoredItem, RecommendationResult, records
- stages/: classification, ranking, message, distress, orchestrator
- utils/: onboarding profile adapter, catalog tag inference
"""

import random
from typing import Optional

from .models import (
    DEFAULT_CONFIG,
    CatalogItem,
    EngineConfig,
    Profile,
    RecommendationResult,
    ScoredItem,
    Situation,
    SituationCategory,
    WellnessRequest,
    resolve_config,
)
from .stages import (
    analyze_distress,
    build_crisis_alert,
    classify_situation,
    compose_message,
    get_recommendations,
    rank_products,
    score_product,
)
from .stages.orchestrator import CatalogReader, RecordWriter
from .utils import onboarding_to_profile


async def recommend_for_transcript(
    profile: Profile,
    transcript: str,
    *,
    catalog: CatalogReader,
    records: Optional[RecordWriter] = None,
    top_n: Optional[int] = None,
    anonymous_token: Optional[str] = None,
    persist: bool = False,
    rng: Optional[random.Random] = None,
    config: Optional[EngineConfig] = None,
) -> RecommendationResult:
    """
    Classify the transcript, then run get_recommendations for the resulting situation.
    Used by the HTTP layer, which only ever receives transcript + profile.
    """
    situation = classify_situation(transcript)
    return await get_recommendations(
        profile,
        situation,
        transcript,
        catalog=catalog,
        records=records,
        top_n=top_n,
        anonymous_token=anonymous_token,
        persist=persist,
        rng=rng,
        config=config,
    )


__all__ = [
    "CatalogItem",
    "CatalogReader",
    "DEFAULT_CONFIG",
    "EngineConfig",
    "Profile",
    "RecommendationResult",
    "RecordWriter",
    "ScoredItem",
    "Situation",
    "SituationCategory",
    "WellnessRequest",
    "analyze_distress",
    "build_crisis_alert",
    "classify_situation",
    "compose_message",
    "get_recommendations",
    "onboarding_to_profile",
    "rank_products",
    "recommend_for_transcript",
    "resolve_config",
    "score_product",
]
