"""
Wellness request records — what gets persisted for HR review.

A record carries the anonymous token, the classified situation, a profile snapshot
without identifying fields, the top recommendation and the composed message.
Records move pending -> approved / rejected; crisis alerts for critical distress
start in urgent_review.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .profile import Profile
from .scoring import ScoredItem, utc_now_iso
from .situation import Situation, category_value

TRANSCRIPT_EXCERPT_LIMIT = 500
ELLIPSIS = "..."


class RequestStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    URGENT_REVIEW = "urgent_review"


# Statuses an HR reviewer may still act on.
REVIEWABLE_STATUSES = (RequestStatus.PENDING, RequestStatus.URGENT_REVIEW)


def make_transcript_excerpt(transcript: str, limit: int = TRANSCRIPT_EXCERPT_LIMIT) -> str:
    """Transcript cut to at most limit characters, with a trailing ellipsis when cut."""
    if len(transcript) <= limit:
        return transcript
    return transcript[: limit - len(ELLIPSIS)] + ELLIPSIS


class RecommendationRecordInput(BaseModel):
    """Everything the persistence collaborator needs to store one recommendation."""

    model_config = ConfigDict(populate_by_name=True)

    anonymous_token: str = Field(
        min_length=1, validation_alias=AliasChoices("anonymous_token", "anonymousToken")
    )
    situation: Situation
    profile: Profile
    top_recommendation: ScoredItem = Field(
        validation_alias=AliasChoices("top_recommendation", "topRecommendation")
    )
    empathic_message: str = Field(
        default="", validation_alias=AliasChoices("empathic_message", "empathicMessage")
    )
    transcript_excerpt: str = Field(
        default="", validation_alias=AliasChoices("transcript_excerpt", "transcriptExcerpt")
    )


class WellnessRequest(BaseModel):
    """Stored recommendation record as read back by the HR review surface."""

    model_config = ConfigDict(extra="allow")

    id: str
    anonymous_token: str
    situation_type: str
    situation_subtype: str = "general"
    situation_context: str = ""
    situation_confidence: float = 0.0
    profile_snapshot: Dict[str, Any] = {}
    transcript_excerpt: str = ""
    recommended_product_id: str
    recommended_product_name: str
    recommended_product_price: float = 0
    recommended_product_category: str = ""
    recommended_product_subcategory: str = ""
    product_snapshot: Dict[str, Any] = {}
    recommendation_score: float = 0
    recommendation_reasons: List[str] = []
    empathic_message: str = ""
    estimated_productivity_uplift_percent: Optional[float] = None
    status: RequestStatus = RequestStatus.PENDING
    created_at: str = ""
    reviewed_at: Optional[str] = None
    reviewed_by: Optional[str] = None
    rejection_reason: Optional[str] = None


def build_wellness_request(request_id: str, data: RecommendationRecordInput) -> WellnessRequest:
    """Flatten a record input into a pending WellnessRequest."""
    top = data.top_recommendation
    item = top.item
    return WellnessRequest(
        id=request_id,
        anonymous_token=data.anonymous_token,
        situation_type=category_value(data.situation),
        situation_subtype=data.situation.subtype,
        situation_context=data.situation.context,
        situation_confidence=data.situation.confidence,
        profile_snapshot=data.profile.snapshot(),
        transcript_excerpt=make_transcript_excerpt(data.transcript_excerpt),
        recommended_product_id=item.id,
        recommended_product_name=item.name,
        recommended_product_price=item.price_from,
        recommended_product_category=item.category,
        recommended_product_subcategory=item.subcategory,
        product_snapshot=item.model_dump(mode="json"),
        recommendation_score=top.score,
        recommendation_reasons=list(top.reasons),
        empathic_message=data.empathic_message,
        status=RequestStatus.PENDING,
        created_at=utc_now_iso(),
    )
