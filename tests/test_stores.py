#!/usr/bin/env python3
"""
Store Tests

Catalog stores (in-memory, JSON file) and wellness request stores
(in-memory, JSON file): record creation, anonymity of snapshots, listing,
and the pending -> approved / rejected review lifecycle.

Run:
----
    pytest tests/test_stores.py -v
"""

import asyncio
import json

import pytest

from wellness_engine.models.records import RecommendationRecordInput, RequestStatus, WellnessRequest
from wellness_engine.models.scoring import ScoredItem
from wellness_engine.models.situation import Situation, SituationCategory
from wellness_server.services import (
    InMemoryCatalogStore,
    InMemoryRecommendationStore,
    InvalidTransitionError,
    JsonCatalogStore,
    JsonRecommendationStore,
    RequestNotFoundError,
)


def run(coro):
    return asyncio.run(coro)


def record_input(catalog_items, profile, token="anon_1_abc") -> RecommendationRecordInput:
    return RecommendationRecordInput(
        anonymous_token=token,
        situation=Situation(category=SituationCategory.BEREAVEMENT, subtype="padres", confidence=0.67),
        profile=profile,
        top_recommendation=ScoredItem(item=catalog_items[0], score=135, reasons=["Precio accesible"]),
        empathic_message="Ana, sé que hoy te toca...",
        transcript_excerpt="Mi padre murió",
    )


def alert(created_at: str, status=RequestStatus.PENDING) -> WellnessRequest:
    return WellnessRequest(
        id="",
        anonymous_token="anon_2_xyz",
        situation_type="emotional_distress",
        recommended_product_id="CRISIS_SUPPORT",
        recommended_product_name="Crisis Support",
        status=status,
        created_at=created_at,
    )


class TestCatalogStores:
    def test_in_memory_filters_by_exact_tag(self, catalog_rows):
        store = InMemoryCatalogStore(catalog_rows)
        items = run(store.fetch_items_by_situation_tag("causa_economica"))
        assert [i.id for i in items] == ["curso-python"]
        assert run(store.fetch_items_by_situation_tag("causa")) == []
        assert len(run(store.fetch_all_items())) == 4

    def test_get_item(self, catalog_rows):
        store = InMemoryCatalogStore(catalog_rows)
        assert run(store.get_item("yoga-1")).name == "Clase de Yoga Restaurativa"
        assert run(store.get_item("missing")) is None

    def test_json_store_reads_spanish_rows(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({
            "items": [{
                "id": 7,
                "nombre": "Caminata ecológica",
                "descripcion": None,
                "precio_desde": "20000",
                "categoria_principal": "Naturaleza",
                "subcategoria": None,
                "profile_tags": ["naturaleza"],
                "situation_tags": ["muerte_familiar"],
            }]
        }))
        store = JsonCatalogStore(path)
        [item] = run(store.fetch_items_by_situation_tag("muerte_familiar"))
        assert item.id == "7"
        assert item.name == "Caminata ecológica"
        assert item.price_from == 20000
        assert item.subcategory == "General"
        assert item.description == ""

    def test_json_store_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            JsonCatalogStore(tmp_path / "missing.json")


class TestRecommendationStore:
    @pytest.fixture(autouse=True)
    def setup(self, catalog_items, profile):
        self.store = InMemoryRecommendationStore()
        self.catalog_items = catalog_items
        self.profile = profile

    def test_create_record_is_pending_and_anonymous(self):
        record = run(self.store.create_recommendation_record(record_input(self.catalog_items, self.profile)))
        assert record.id
        assert record.status == RequestStatus.PENDING
        assert record.situation_type == "muerte_familiar"
        assert record.recommended_product_id == "yoga-1"
        assert record.recommended_product_price == 45000
        assert "name" not in record.profile_snapshot
        assert "user_id" not in record.profile_snapshot
        assert record.profile_snapshot["age"] == 35
        assert run(self.store.get_request(record.id)) == record

    def test_list_newest_first_with_status_filter(self):
        old = run(self.store.create_alert_record(alert("2026-01-01T00:00:00Z")))
        new = run(self.store.create_alert_record(alert("2026-02-01T00:00:00Z", RequestStatus.URGENT_REVIEW)))
        assert [r.id for r in run(self.store.list_requests())] == [new.id, old.id]
        assert [r.id for r in run(self.store.list_requests(RequestStatus.URGENT_REVIEW))] == [new.id]

    def test_alert_record_gets_new_id(self):
        saved = run(self.store.create_alert_record(alert("2026-01-01T00:00:00Z")))
        assert saved.id != ""
        assert len(self.store) == 1

    def test_approve(self):
        record = run(self.store.create_recommendation_record(record_input(self.catalog_items, self.profile)))
        approved = run(self.store.approve_request(record.id, "hr-1"))
        assert approved.status == RequestStatus.APPROVED
        assert approved.reviewed_by == "hr-1"
        assert approved.reviewed_at
        assert approved.rejection_reason is None

    def test_reject_with_reason(self):
        record = run(self.store.create_recommendation_record(record_input(self.catalog_items, self.profile)))
        rejected = run(self.store.reject_request(record.id, "hr-1", "Fuera de presupuesto"))
        assert rejected.status == RequestStatus.REJECTED
        assert rejected.rejection_reason == "Fuera de presupuesto"

    def test_urgent_review_can_be_approved(self):
        saved = run(self.store.create_alert_record(alert("2026-01-01T00:00:00Z", RequestStatus.URGENT_REVIEW)))
        assert run(self.store.approve_request(saved.id, "hr-1")).status == RequestStatus.APPROVED

    def test_reviewed_request_cannot_transition(self):
        record = run(self.store.create_recommendation_record(record_input(self.catalog_items, self.profile)))
        run(self.store.approve_request(record.id, "hr-1"))
        with pytest.raises(InvalidTransitionError) as exc_info:
            run(self.store.reject_request(record.id, "hr-2"))
        assert exc_info.value.status == RequestStatus.APPROVED
        assert exc_info.value.target == RequestStatus.REJECTED

    def test_unknown_request(self):
        with pytest.raises(RequestNotFoundError):
            run(self.store.approve_request("nope", "hr-1"))
        assert run(self.store.get_request("nope")) is None


class TestJsonRecommendationStore:
    def test_records_survive_reload(self, tmp_path, catalog_items, profile):
        path = tmp_path / "data" / "requests.json"
        store = JsonRecommendationStore(path)
        record = run(store.create_recommendation_record(record_input(catalog_items, profile)))
        run(store.approve_request(record.id, "hr-1"))

        reloaded = JsonRecommendationStore(path)
        saved = run(reloaded.get_request(record.id))
        assert saved.status == RequestStatus.APPROVED
        assert saved.reviewed_by == "hr-1"
        assert json.loads(path.read_text())["requests"][0]["id"] == record.id

    def test_unreadable_file_starts_empty(self, tmp_path):
        path = tmp_path / "requests.json"
        path.write_text("{not json")
        assert len(JsonRecommendationStore(path)) == 0
