#!/usr/bin/env python3
"""
Ranking Tests

rank_products keeps positive scores only, sorts descending (stable on ties)
and truncates to top_n.

Run:
----
    pytest tests/test_ranking.py -v
"""

from wellness_engine.models.profile import Profile
from wellness_engine.models.situation import Situation, SituationCategory
from wellness_engine.stages.ranking import DEFAULT_TOP_N, rank_products

from .conftest import make_item

BEREAVEMENT = Situation(category=SituationCategory.BEREAVEMENT)


class TestRankProducts:
    def test_reference_catalog_order(self, catalog_items, profile):
        ranked = rank_products(catalog_items, BEREAVEMENT, profile)
        assert [s.item.id for s in ranked] == ["yoga-1", "curso-python", "futbol-1"]
        assert [s.score for s in ranked] == [135, 20, 10]

    def test_non_positive_scores_dropped(self):
        items = [make_item(id="zero"), make_item(id="neg", profile_tags=["fiesta"])]
        assert rank_products(items, BEREAVEMENT, Profile(name="Ana")) == []

    def test_ties_keep_input_order(self):
        items = [
            make_item(id=f"tag-{i}", situation_tags=["muerte_familiar"]) for i in range(3)
        ]
        ranked = rank_products(items, BEREAVEMENT, Profile(name="Ana"))
        assert [s.item.id for s in ranked] == ["tag-0", "tag-1", "tag-2"]

    def test_truncates_to_top_n(self):
        items = [make_item(id=f"p{i}", price_from=1000) for i in range(10)]
        assert len(rank_products(items, BEREAVEMENT, Profile(name="Ana"))) == DEFAULT_TOP_N
        assert len(rank_products(items, BEREAVEMENT, Profile(name="Ana"), top_n=2)) == 2

    def test_top_n_zero_returns_empty(self, catalog_items, profile):
        assert rank_products(catalog_items, BEREAVEMENT, profile, top_n=0) == []

    def test_empty_candidates(self, profile):
        assert rank_products([], BEREAVEMENT, profile) == []
