#!/usr/bin/env python3
"""
Recommendation Pipeline Tests

get_recommendations: candidate fetching with full-catalog top-up and
de-duplication, ranking, message composition, optional persistence, and
swallowing of catalog / persistence failures.

Run:
----
    pytest tests/test_orchestrator.py -v
"""

import asyncio
import random

import pytest

from wellness_engine import recommend_for_transcript
from wellness_engine.models.config import EngineConfig
from wellness_engine.models.situation import Situation, SituationCategory
from wellness_engine.stages.orchestrator import get_recommendations, merge_candidates

from .conftest import BEREAVEMENT_TRANSCRIPT, make_item

BEREAVEMENT = Situation(category=SituationCategory.BEREAVEMENT, subtype="padres")


class FakeCatalog:
    def __init__(self, items):
        self.items = list(items)
        self.tag_calls = []
        self.full_calls = 0

    async def fetch_items_by_situation_tag(self, tag):
        self.tag_calls.append(tag)
        return [i for i in self.items if tag in i.situation_tags]

    async def fetch_all_items(self):
        self.full_calls += 1
        return list(self.items)


class FailingCatalog:
    async def fetch_items_by_situation_tag(self, tag):
        raise RuntimeError("catalog unavailable")

    async def fetch_all_items(self):
        raise RuntimeError("catalog unavailable")


class FakeRecords:
    def __init__(self):
        self.created = []

    async def create_recommendation_record(self, data):
        self.created.append(data)
        return data


class FailingRecords:
    async def create_recommendation_record(self, data):
        raise RuntimeError("write failed")


def run(coro):
    return asyncio.run(coro)


class TestCandidates:
    def test_merge_keeps_primary_order_and_dedups(self):
        a, b, c = make_item(id="a"), make_item(id="b"), make_item(id="c")
        assert [i.id for i in merge_candidates([a, b], [b, c, a])] == ["a", "b", "c"]

    def test_few_tagged_items_top_up_from_full_catalog(self, catalog_items, profile):
        catalog = FakeCatalog(catalog_items)
        result = run(get_recommendations(profile, BEREAVEMENT, "", catalog=catalog))
        assert catalog.tag_calls == ["muerte_familiar"]
        assert catalog.full_calls == 1
        assert [s.item.id for s in result.recommendations] == ["yoga-1", "curso-python", "futbol-1"]

    def test_enough_tagged_items_skip_full_catalog(self, profile):
        items = [make_item(id=f"t{i}", situation_tags=["muerte_familiar"]) for i in range(8)]
        catalog = FakeCatalog(items)
        result = run(get_recommendations(profile, BEREAVEMENT, "", catalog=catalog, top_n=4))
        assert catalog.full_calls == 0
        assert len(result.recommendations) == 4

    def test_catalog_failure_yields_holding_message(self, profile):
        result = run(get_recommendations(profile, BEREAVEMENT, "", catalog=FailingCatalog()))
        assert result.recommendations == []
        assert result.empathic_message.startswith("Ana, estamos buscando")
        assert result.message_length == len(result.empathic_message)


class TestResult:
    def test_result_fields(self, catalog_items, profile):
        result = run(get_recommendations(
            profile, BEREAVEMENT, "", catalog=FakeCatalog(catalog_items), rng=random.Random(0),
        ))
        assert result.situation == BEREAVEMENT
        assert result.profile == profile
        assert result.top_item.item.id == "yoga-1"
        assert "pérdida de tus padres" in result.empathic_message
        assert result.message_length <= 500
        assert result.timestamp.endswith("Z")

    def test_seed_from_config_is_reproducible(self, catalog_items, profile):
        config = EngineConfig(random_seed=11)
        messages = {
            run(get_recommendations(
                profile, BEREAVEMENT, "", catalog=FakeCatalog(catalog_items), config=config,
            )).empathic_message
            for _ in range(3)
        }
        assert len(messages) == 1

    def test_top_n_from_config(self, catalog_items, profile):
        result = run(get_recommendations(
            profile, BEREAVEMENT, "", catalog=FakeCatalog(catalog_items), config=EngineConfig(top_n=1),
        ))
        assert len(result.recommendations) == 1

    def test_recommend_for_transcript_classifies_first(self, catalog_items, profile):
        result = run(recommend_for_transcript(
            profile, BEREAVEMENT_TRANSCRIPT, catalog=FakeCatalog(catalog_items),
        ))
        assert result.situation.category == SituationCategory.BEREAVEMENT
        assert result.situation.subtype == "padres"


class TestPersistence:
    def test_persists_top_recommendation(self, catalog_items, profile):
        records = FakeRecords()
        transcript = "x" * 600
        run(get_recommendations(
            profile, BEREAVEMENT, transcript,
            catalog=FakeCatalog(catalog_items), records=records,
            anonymous_token="anon_1_abc", persist=True,
        ))
        assert len(records.created) == 1
        data = records.created[0]
        assert data.anonymous_token == "anon_1_abc"
        assert data.top_recommendation.item.id == "yoga-1"
        assert len(data.transcript_excerpt) == 500
        assert data.transcript_excerpt.endswith("...")

    @pytest.mark.parametrize(
        "persist,token",
        [(False, "anon_1_abc"), (True, None), (True, "")],
    )
    def test_no_persist_without_flag_or_token(self, catalog_items, profile, persist, token):
        records = FakeRecords()
        run(get_recommendations(
            profile, BEREAVEMENT, "",
            catalog=FakeCatalog(catalog_items), records=records,
            anonymous_token=token, persist=persist,
        ))
        assert records.created == []

    def test_no_persist_without_recommendations(self, profile):
        records = FakeRecords()
        run(get_recommendations(
            profile, BEREAVEMENT, "", catalog=FakeCatalog([]), records=records,
            anonymous_token="anon_1_abc", persist=True,
        ))
        assert records.created == []

    def test_persistence_failure_is_swallowed(self, catalog_items, profile):
        result = run(get_recommendations(
            profile, BEREAVEMENT, "",
            catalog=FakeCatalog(catalog_items), records=FailingRecords(),
            anonymous_token="anon_1_abc", persist=True,
        ))
        assert result.top_item.item.id == "yoga-1"
