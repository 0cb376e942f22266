"""
Onboarding adapter: onboarding answers -> Profile.

Parses the age answer ("18-25" -> 18), derives the age bracket, and normalizes
free-form hobby and goal answers against the controlled vocabulary.
"""

import re
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

from ..lexicon.vocabulary import GOAL_RULES, HOBBY_RULES
from ..models.profile import Profile, classify_age

_FIRST_NUMBER = re.compile(r"(\d+)")


class OnboardingAnswers(BaseModel):
    """Answers stored by the onboarding flow."""

    model_config = ConfigDict(extra="ignore")

    user_id: str = ""
    human_name: str
    human_age: Optional[str] = None
    human_gender: Optional[str] = None
    life_axes: List[str] = []
    ten_year_goals: List[str] = []
    short_term_goals: List[str] = []
    hobbies: List[str] = []
    emotional_history: Optional[str] = None

    @field_validator("life_axes", "ten_year_goals", "short_term_goals", "hobbies", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return value or []


def parse_age(answer: Optional[str]) -> Optional[int]:
    """First integer in the answer, or None."""
    if not answer:
        return None
    match = _FIRST_NUMBER.search(str(answer))
    return int(match.group(1)) if match else None


def normalize_tag(value: str, rules: Tuple[Tuple[str, Tuple[str, ...]], ...]) -> str:
    """Canonical tag for the first rule with a substring in value; value itself when none match."""
    lowered = value.lower()
    for tag, needles in rules:
        if any(n in lowered for n in needles):
            return tag
    return value


def _dedupe(values: List[str]) -> List[str]:
    return list(dict.fromkeys(values))


def onboarding_to_profile(answers: OnboardingAnswers) -> Profile:
    age = parse_age(answers.human_age)
    goals = [*answers.life_axes, *answers.short_term_goals, *answers.ten_year_goals]
    return Profile(
        user_id=answers.user_id,
        name=answers.human_name,
        age=age,
        age_bracket=classify_age(age) if age is not None else None,
        gender=answers.human_gender,
        hobbies=[normalize_tag(h, HOBBY_RULES) for h in answers.hobbies],
        goals=_dedupe([normalize_tag(g, GOAL_RULES) for g in goals]),
        emotional_history=answers.emotional_history or None,
    )
