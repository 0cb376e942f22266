"""HR review request models."""

from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from wellness_engine.models.records import RecommendationRecordInput

from ..schema import normalize_catalog_row


class CreateWellnessRequest(RecommendationRecordInput):
    """Body of POST /api/wellness/requests. The recommended item may use the Spanish export columns."""

    @field_validator("top_recommendation", mode="before")
    @classmethod
    def _normalize_item(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        value = dict(value)
        for key in ("item", "product"):
            if isinstance(value.get(key), dict):
                value[key] = normalize_catalog_row(value[key])
        return value


class ReviewDecisionRequest(BaseModel):
    """Body of approve / reject. reason is only used on reject."""

    model_config = ConfigDict(populate_by_name=True)

    reviewer_id: str = Field(
        min_length=1,
        validation_alias=AliasChoices("reviewer_id", "adminUserId", "admin_user_id"),
    )
    reason: Optional[str] = None
