"""Root and health endpoints."""

from fastapi import APIRouter

from ..state import get_state

router = APIRouter()

API_NAME = "Wellness Recommendation API"
API_VERSION = "1.0.0"


@router.get("/")
def root():
    state = get_state()
    return {
        "name": API_NAME,
        "version": API_VERSION,
        "status": "ready",
        "data_source": state.config.data_source,
        "endpoints": {
            "recommendations": ["/api/recommendations", "/api/classify", "/api/analyze-transcript"],
            "wellness": [
                "/api/wellness/requests",
                "/api/wellness/requests/{id}",
                "/api/wellness/requests/{id}/approve",
                "/api/wellness/requests/{id}/reject",
            ],
            "catalog": ["/api/catalog"],
            "profiles": ["/api/profile/from-onboarding"],
        },
    }


@router.get("/api/health")
def health():
    state = get_state()
    return {
        "status": "healthy",
        "data_source": state.config.data_source,
        "catalog_store": type(state.catalog_store).__name__,
        "request_store": type(state.request_store).__name__,
        "engine": {
            "top_n": state.engine_config.top_n,
            "persist_recommendations": state.engine_config.persist_recommendations,
        },
    }
