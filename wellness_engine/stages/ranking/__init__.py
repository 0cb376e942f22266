"""Ranking: per-item scoring and top-N selection."""

from .core import DEFAULT_TOP_N, rank_products
from .product_scoring import score_product

__all__ = ["DEFAULT_TOP_N", "rank_products", "score_product"]
