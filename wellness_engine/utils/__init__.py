"""Helpers around the engine: onboarding profile adapter and catalog tag inference."""

from .onboarding import OnboardingAnswers, onboarding_to_profile, parse_age
from .tagging import infer_profile_tags, infer_situation_tags, retag_item

__all__ = [
    "OnboardingAnswers",
    "infer_profile_tags",
    "infer_situation_tags",
    "onboarding_to_profile",
    "parse_age",
    "retag_item",
]
