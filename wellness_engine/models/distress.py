"""Distress analysis model — severity grading output used to decide on HR escalation."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from .situation import SituationCategory


class Severity(str, Enum):
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"
    CRITICAL = "critical"


class RecommendedAction(str, Enum):
    MONITOR = "monitor"
    RECOMMEND_WELLNESS = "recommend_wellness"
    ESCALATE_TO_HR = "escalate_to_hr"
    URGENT_INTERVENTION = "urgent_intervention"


class EmotionalIndicators(BaseModel):
    """Indicator scores, each 0-100."""

    desperation: int = Field(default=0, ge=0, le=100)
    hopelessness: int = Field(default=0, ge=0, le=100)
    anxiety: int = Field(default=0, ge=0, le=100)
    depression: int = Field(default=0, ge=0, le=100)
    anger: int = Field(default=0, ge=0, le=100)


class DistressAnalysis(BaseModel):
    severity: Severity
    confidence: float
    situation_type: Optional[SituationCategory] = None
    trigger_keywords: List[str] = []
    risk_factors: List[str] = []
    needs_immediate_attention: bool = False
    recommended_action: RecommendedAction = RecommendedAction.MONITOR
    emotional_indicators: EmotionalIndicators = EmotionalIndicators()

    @property
    def is_escalation(self) -> bool:
        """Severe and critical analyses raise an HR crisis alert."""
        return self.severity in (Severity.SEVERE, Severity.CRITICAL)
