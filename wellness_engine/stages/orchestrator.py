"""
Pipeline orchestrator — fetches candidates, ranks them, composes the message and
optionally persists the top recommendation.

The main entry point is get_recommendations. Catalog and record collaborators are
passed in explicitly; failures in either are logged and never fail the result.
"""

import logging
import random
from typing import Any, List, Optional, Protocol

from ..models.catalog import CatalogItem, ensure_items
from ..models.config import EngineConfig, resolve_config
from ..models.profile import Profile
from ..models.records import RecommendationRecordInput, make_transcript_excerpt
from ..models.scoring import RecommendationResult, ScoredItem
from ..models.situation import Situation, category_value
from .message import compose_message
from .ranking import rank_products

logger = logging.getLogger(__name__)


class CatalogReader(Protocol):
    """Catalog collaborator. May be called twice per request (filtered, then full)."""

    async def fetch_items_by_situation_tag(self, tag: str) -> List[CatalogItem]:
        ...

    async def fetch_all_items(self) -> List[CatalogItem]:
        ...


class RecordWriter(Protocol):
    """Persistence collaborator for recommendation records."""

    async def create_recommendation_record(self, data: RecommendationRecordInput) -> Any:
        ...


def merge_candidates(primary: List[CatalogItem], extra: List[CatalogItem]) -> List[CatalogItem]:
    """Primary items followed by extra items whose id is not already present."""
    seen = {item.id for item in primary}
    merged = list(primary)
    for item in extra:
        if item.id not in seen:
            seen.add(item.id)
            merged.append(item)
    return merged


async def _fetch_candidates(
    catalog: CatalogReader,
    situation: Situation,
    top_n: int,
    config: EngineConfig,
) -> List[CatalogItem]:
    """Situation-filtered items, topped up with the full catalog when too few come back."""
    tag = category_value(situation)
    try:
        items = ensure_items(await catalog.fetch_items_by_situation_tag(tag))
        if len(items) < top_n * config.candidate_pool_factor:
            everything = ensure_items(await catalog.fetch_all_items())
            items = merge_candidates(items, everything)
        return items
    except Exception:
        logger.exception("[catalog_fallback] CATALOG_FETCH_FAILED tag=%s", tag)
        return []


async def _persist_top(
    records: RecordWriter,
    anonymous_token: str,
    situation: Situation,
    profile: Profile,
    top: ScoredItem,
    message: str,
    transcript: str,
    config: EngineConfig,
) -> None:
    data = RecommendationRecordInput(
        anonymous_token=anonymous_token,
        situation=situation,
        profile=profile,
        top_recommendation=top,
        empathic_message=message,
        transcript_excerpt=make_transcript_excerpt(transcript or "", config.transcript_excerpt_limit),
    )
    try:
        await records.create_recommendation_record(data)
        logger.info("[persist] RECORD_CREATED token=%s item=%s", anonymous_token, top.item.id)
    except Exception:
        logger.exception("[persist] RECORD_CREATE_FAILED token=%s", anonymous_token)


async def get_recommendations(
    profile: Profile,
    situation: Situation,
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
    Produce the recommendation result for a classified situation (fetch -> rank -> compose -> persist).

    Persistence happens only when persist is set, a token and a record writer are given,
    and at least one recommendation exists. Catalog and persistence errors are swallowed:
    the worst case is zero recommendations and the holding message.
    """
    # Resolve config (use defaults when None)
    config = resolve_config(config)
    if top_n is None:
        top_n = config.top_n
    if rng is None and config.random_seed is not None:
        rng = random.Random(config.random_seed)

    # Candidates
    candidates = await _fetch_candidates(catalog, situation, top_n, config)

    # Rank and compose
    recommendations = rank_products(candidates, situation, profile, top_n)
    top_item = recommendations[0].item if recommendations else None
    message = compose_message(profile, situation, top_item, rng=rng)

    # Persist
    if persist and anonymous_token and records is not None and recommendations:
        await _persist_top(
            records, anonymous_token, situation, profile, recommendations[0],
            message, transcript, config,
        )

    return RecommendationResult(
        situation=situation,
        recommendations=recommendations,
        empathic_message=message,
        message_length=len(message),
        profile=profile,
    )
