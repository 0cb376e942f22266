"""
Distress analysis — grades how urgently a conversation needs human attention.

Severity rules, first match wins:
- any critical phrase                                  -> critical
- >= 2 severe phrases, or 1 in a transcript > 200 chars -> severe
- >= 2 moderate words                                  -> moderate
- >= 1 mild phrase                                     -> mild
- nothing                                              -> mild, low confidence, baseline indicators

Also builds the crisis-alert record raised for severe and critical analyses.
"""

from typing import Dict, List, Optional

from ..lexicon import SITUATION_LEXICON
from ..lexicon.distress import (
    ALERT_PRIORITY,
    BASELINE_INDICATORS,
    CRISIS_MESSAGES,
    CRITICAL_KEYWORDS,
    CRITICAL_RISK_FACTORS,
    INDICATOR_BASE_SCORES,
    INDICATOR_BOOSTS,
    MILD_KEYWORDS,
    MODERATE_KEYWORDS,
    RISK_FACTOR_CUES,
    SEVERE_KEYWORDS,
    SEVERE_SINGLE_MATCH_MIN_LENGTH,
)
from ..models.distress import DistressAnalysis, EmotionalIndicators, RecommendedAction, Severity
from ..models.records import RequestStatus, WellnessRequest, make_transcript_excerpt
from ..models.scoring import RecommendationResult, utc_now_iso
from ..models.situation import SituationCategory
from .classification import matched_keywords

# Keyword hits needed before a category is reported as the distress situation type.
SITUATION_TYPE_MIN_MATCHES = 2
MAX_INDICATOR = 100

ALERT_SUBTYPE = "crisis_alert"
ALERT_SITUATION_FALLBACK = "emotional_distress"
ALERT_PRODUCT_ID = "CRISIS_SUPPORT"
ALERT_PRODUCT_NAME = "Crisis Support"
ALERT_SCORE = 100


def detect_situation_type(text: str) -> Optional[SituationCategory]:
    """First category (lexicon order) with at least two keyword hits, else None."""
    for category, profile in SITUATION_LEXICON.items():
        if len(matched_keywords(text, profile.keywords)) >= SITUATION_TYPE_MIN_MATCHES:
            return SituationCategory(category)
    return None


def analyze_risk_factors(text: str) -> List[str]:
    return [factor for factor, cues in RISK_FACTOR_CUES if any(c in text for c in cues)]


def emotional_indicators(text: str, severity: Severity) -> EmotionalIndicators:
    """Per-severity base scores with keyword boosts, each capped at 100."""
    scores: Dict[str, int] = dict(INDICATOR_BASE_SCORES.get(severity.value) or INDICATOR_BASE_SCORES["mild"])
    for indicator, cues, boost in INDICATOR_BOOSTS:
        if any(c in text for c in cues):
            scores[indicator] = min(MAX_INDICATOR, scores[indicator] + boost)
    return EmotionalIndicators(**scores)


def _graded(
    severity: Severity,
    confidence: float,
    text: str,
    triggers: List[str],
    risk_factors: List[str],
    action: RecommendedAction,
    needs_attention: bool,
) -> DistressAnalysis:
    return DistressAnalysis(
        severity=severity,
        confidence=confidence,
        situation_type=detect_situation_type(text),
        trigger_keywords=triggers,
        risk_factors=risk_factors,
        needs_immediate_attention=needs_attention,
        recommended_action=action,
        emotional_indicators=emotional_indicators(text, severity),
    )


def analyze_distress(transcript: str) -> DistressAnalysis:
    """Grade a transcript's emotional distress."""
    raw = transcript or ""
    text = raw.lower()

    critical = matched_keywords(text, CRITICAL_KEYWORDS)
    if critical:
        return _graded(
            Severity.CRITICAL, 0.95, text, critical, list(CRITICAL_RISK_FACTORS),
            RecommendedAction.URGENT_INTERVENTION, True,
        )

    severe = matched_keywords(text, SEVERE_KEYWORDS)
    if len(severe) >= 2 or (severe and len(raw) > SEVERE_SINGLE_MATCH_MIN_LENGTH):
        return _graded(
            Severity.SEVERE, 0.85, text, severe, analyze_risk_factors(text),
            RecommendedAction.ESCALATE_TO_HR, True,
        )

    moderate = matched_keywords(text, MODERATE_KEYWORDS)
    if len(moderate) >= 2:
        return _graded(
            Severity.MODERATE, 0.75, text, moderate, analyze_risk_factors(text),
            RecommendedAction.RECOMMEND_WELLNESS, False,
        )

    mild = matched_keywords(text, MILD_KEYWORDS)
    if mild:
        return _graded(
            Severity.MILD, 0.65, text, mild, [],
            RecommendedAction.MONITOR, False,
        )

    return DistressAnalysis(
        severity=Severity.MILD,
        confidence=0.3,
        situation_type=None,
        recommended_action=RecommendedAction.MONITOR,
        emotional_indicators=EmotionalIndicators(**BASELINE_INDICATORS),
    )


def alert_priority(severity: Severity) -> str:
    """critical -> urgent, severe -> high, moderate -> medium, otherwise low."""
    return ALERT_PRIORITY.get(severity.value, "low")


def crisis_message(analysis: DistressAnalysis) -> str:
    """HR-facing alert text for the severity, with identified risk factors appended."""
    message = CRISIS_MESSAGES.get(analysis.severity.value) or CRISIS_MESSAGES["mild"]
    if analysis.risk_factors:
        message += "\n\nRisk factors identified: " + ", ".join(analysis.risk_factors)
    return message


def build_crisis_alert(
    analysis: DistressAnalysis,
    transcript: str,
    anonymous_token: str,
    recommendation: Optional[RecommendationResult] = None,
    session_id: Optional[str] = None,
    request_id: str = "",
) -> WellnessRequest:
    """
    Crisis-alert record for the HR review queue.

    Critical alerts start in urgent_review, everything else in pending. When a
    recommendation was produced its top item is attached; otherwise the alert
    points at a generic crisis-support placeholder. Stores assign request_id on insert.
    """
    top = recommendation.top_item if recommendation else None
    priority = alert_priority(analysis.severity)
    situation_type = analysis.situation_type.value if analysis.situation_type else ALERT_SITUATION_FALLBACK
    return WellnessRequest(
        id=request_id,
        anonymous_token=anonymous_token,
        situation_type=situation_type,
        situation_subtype=ALERT_SUBTYPE,
        situation_context=f"Emotional distress detected - {analysis.severity.value} severity",
        situation_confidence=analysis.confidence,
        profile_snapshot={"alert_type": "emotional_crisis", "session_id": session_id},
        transcript_excerpt=make_transcript_excerpt(transcript or ""),
        recommended_product_id=top.item.id if top else ALERT_PRODUCT_ID,
        recommended_product_name=top.item.name if top else ALERT_PRODUCT_NAME,
        recommended_product_price=top.item.price_from if top else 0,
        recommended_product_category="emotional_support",
        recommended_product_subcategory="crisis_intervention",
        product_snapshot={
            "alert_priority": priority,
            "risk_factors": list(analysis.risk_factors),
            "emotional_indicators": analysis.emotional_indicators.model_dump(),
            "trigger_keywords": list(analysis.trigger_keywords),
            "needs_immediate_attention": analysis.needs_immediate_attention,
        },
        recommendation_score=ALERT_SCORE,
        recommendation_reasons=[
            f"{analysis.severity.value} emotional distress requiring immediate attention"
        ],
        empathic_message=crisis_message(analysis),
        estimated_productivity_uplift_percent=0,
        status=RequestStatus.URGENT_REVIEW if analysis.severity == Severity.CRITICAL else RequestStatus.PENDING,
        created_at=utc_now_iso(),
    )
