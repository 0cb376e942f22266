"""
Profile model — anonymous-friendly user descriptor used for personalization.

Built from onboarding answers (utils.onboarding) or sent directly by callers.
Accepts the camelCase field names used by the web client (userId, ageCategory, ...).
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

# Fields never written to a stored recommendation record.
IDENTIFYING_FIELDS = ("user_id", "name")


class AgeBracket(str, Enum):
    YOUNG = "joven"
    ADULT = "adulto"
    SENIOR = "mayor"


def classify_age(age: int) -> AgeBracket:
    """Age bracket: young < 30, adult < 50, senior otherwise."""
    if age < 30:
        return AgeBracket.YOUNG
    if age < 50:
        return AgeBracket.ADULT
    return AgeBracket.SENIOR


class Profile(BaseModel):
    """User profile: identity, optional demographics, hobby and goal tags."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    user_id: str = Field(default="", validation_alias=AliasChoices("user_id", "userId"))
    name: str
    age: Optional[int] = None
    age_bracket: Optional[AgeBracket] = Field(
        default=None,
        validation_alias=AliasChoices("age_bracket", "ageCategory", "age_category"),
    )
    gender: Optional[str] = None
    hobbies: List[str] = []
    goals: List[str] = []
    emotional_history: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("emotional_history", "emotionalHistory"),
    )
    location: Optional[str] = None
    economic_situation: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("economic_situation", "economicSituation"),
    )

    @field_validator("hobbies", "goals", mode="before")
    @classmethod
    def _drop_non_strings(cls, value: Any) -> List[str]:
        if not value:
            return []
        if isinstance(value, str):
            return [value]
        return [v for v in value if isinstance(v, str) and v]

    def snapshot(self) -> Dict[str, Any]:
        """Profile as a dict without identifying fields, for storage next to an anonymous token."""
        data = self.model_dump(mode="json")
        for key in IDENTIFYING_FIELDS:
            data.pop(key, None)
        return data
