"""Pydantic request/response models for the API."""

from .recommendations import ClassifyRequest, RecommendationRequest, TranscriptAnalysisRequest
from .wellness import CreateWellnessRequest, ReviewDecisionRequest

__all__ = [
    "ClassifyRequest",
    "CreateWellnessRequest",
    "RecommendationRequest",
    "ReviewDecisionRequest",
    "TranscriptAnalysisRequest",
]
