"""Recommendation, classification and transcript-analysis request models."""

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from wellness_engine.models.profile import Profile


class RecommendationRequest(BaseModel):
    """Body of POST /api/recommendations. transcript and profile are checked by the route (400)."""

    model_config = ConfigDict(populate_by_name=True)

    transcript: Optional[str] = None
    profile: Optional[Profile] = None
    anonymous_token: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("anonymous_token", "anonymousToken")
    )
    top_n: Optional[int] = Field(
        default=None, ge=0, le=50, validation_alias=AliasChoices("top_n", "topN")
    )


class ClassifyRequest(BaseModel):
    transcript: str


class TranscriptAnalysisRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    transcript: Optional[str] = None
    profile: Optional[Profile] = None
    anonymous_token: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("anonymous_token", "anonymousToken")
    )
    session_id: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("session_id", "sessionId")
    )
