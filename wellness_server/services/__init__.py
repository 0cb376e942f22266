"""Backing logic: catalog and wellness request stores."""

from .catalog_store import CatalogStore, InMemoryCatalogStore, JsonCatalogStore
from .firestore_catalog_store import FirestoreCatalogStore
from .firestore_request_store import FirestoreRecommendationStore
from .request_store import (
    InMemoryRecommendationStore,
    InvalidTransitionError,
    JsonRecommendationStore,
    RecommendationStore,
    RequestNotFoundError,
    WellnessStoreError,
)

__all__ = [
    "CatalogStore",
    "FirestoreCatalogStore",
    "FirestoreRecommendationStore",
    "InMemoryCatalogStore",
    "InMemoryRecommendationStore",
    "InvalidTransitionError",
    "JsonCatalogStore",
    "JsonRecommendationStore",
    "RecommendationStore",
    "RequestNotFoundError",
    "WellnessStoreError",
]
