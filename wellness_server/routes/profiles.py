"""Onboarding answers -> recommendation profile."""

from fastapi import APIRouter

from wellness_engine.utils import OnboardingAnswers, onboarding_to_profile

from ..utils import success_envelope

router = APIRouter()


@router.post("/from-onboarding")
def profile_from_onboarding(answers: OnboardingAnswers):
    """Normalize raw onboarding answers into the Profile the engine ranks with."""
    profile = onboarding_to_profile(answers)
    return success_envelope(profile.model_dump(mode="json"))
