"""
Ranking: score every candidate, keep positive scores, sort descending, truncate to top_n.

Python's sort is stable, so items with equal scores keep their input order.
"""

import logging
from typing import List

from ...models.catalog import CatalogItem
from ...models.profile import Profile
from ...models.scoring import ScoredItem
from ...models.situation import Situation
from .product_scoring import score_product

logger = logging.getLogger(__name__)

DEFAULT_TOP_N = 4


def rank_products(
    items: List[CatalogItem],
    situation: Situation,
    profile: Profile,
    top_n: int = DEFAULT_TOP_N,
) -> List[ScoredItem]:
    """
    Rank candidate items for a situation and profile.

    Returns at most top_n ScoredItems with score > 0, non-increasing by score.
    An empty list is a valid outcome (no candidates, or every score <= 0).
    """
    if top_n <= 0:
        return []

    # 1) Score each candidate
    scored: List[ScoredItem] = []
    for item in items:
        result = score_product(item, situation, profile)
        scored.append(ScoredItem(item=item, score=result.score, reasons=result.reasons))

    # 2) Sort by score (stable)
    scored.sort(key=lambda s: s.score, reverse=True)

    # 3) Drop non-positive scores, then truncate
    ranked = [s for s in scored if s.score > 0][:top_n]
    logger.debug(
        "[ranking] candidates=%d positive=%d returned=%d",
        len(items), sum(1 for s in scored if s.score > 0), len(ranked),
    )
    return ranked
