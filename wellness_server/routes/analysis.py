"""Transcript analysis endpoint: distress grading, optional recommendation, HR crisis alerts."""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, HTTPException

from wellness_engine import analyze_distress, build_crisis_alert, recommend_for_transcript
from wellness_engine.models.distress import DistressAnalysis, Severity
from wellness_engine.models.scoring import RecommendationResult
from wellness_engine.stages.distress import alert_priority

from ..models import TranscriptAnalysisRequest
from ..state import AppState, get_state
from ..utils import anonymous_token, log_event, success_envelope

logger = logging.getLogger(__name__)

router = APIRouter()


def _analysis_summary(analysis: DistressAnalysis) -> Dict[str, Any]:
    return {
        "severity": analysis.severity.value,
        "confidence": analysis.confidence,
        "needs_attention": analysis.needs_immediate_attention,
        "recommended_action": analysis.recommended_action.value,
        "emotional_profile": analysis.emotional_indicators.model_dump(),
        "risk_factors": list(analysis.risk_factors),
        "situation_type": analysis.situation_type.value if analysis.situation_type else None,
    }


async def _create_dashboard_alert(
    state: AppState,
    analysis: DistressAnalysis,
    transcript: str,
    token: str,
    recommendation: Optional[RecommendationResult],
    session_id: Optional[str],
) -> Dict[str, Any]:
    """Persist a crisis alert; failures are reported as created=False, never raised."""
    priority = alert_priority(analysis.severity)
    try:
        record = build_crisis_alert(analysis, transcript, token, recommendation, session_id)
        saved = await state.request_store.create_alert_record(record)
    except Exception as e:
        logger.exception("[alerts] ALERT_CREATE_FAILED token=%s severity=%s", token, analysis.severity.value)
        return {"created": False, "error": str(e), "priority": priority}
    log_event("alerts", f"created alert_id={saved.id} priority={priority}")
    return {"created": True, "alert_id": saved.id, "priority": priority}


@router.post("/analyze-transcript")
async def analyze_transcript(request: TranscriptAnalysisRequest):
    """
    Grade a transcript's distress. Non-mild transcripts with a profile also get a
    recommendation; severe and critical ones raise an HR crisis alert.
    """
    if not request.transcript:
        raise HTTPException(status_code=400, detail="Missing required field: transcript")
    try:
        state = get_state()
        analysis = analyze_distress(request.transcript)
        token = request.anonymous_token or anonymous_token()
        log_event("analysis", f"severity={analysis.severity.value} token={token!r}")

        recommendation: Optional[RecommendationResult] = None
        if analysis.severity != Severity.MILD and request.profile is not None:
            recommendation = await recommend_for_transcript(
                request.profile,
                request.transcript,
                catalog=state.catalog_store,
                records=state.request_store,
                top_n=state.engine_config.top_n,
                anonymous_token=token,
                persist=True,
                config=state.engine_config,
            )

        dashboard_alert = None
        if analysis.is_escalation:
            dashboard_alert = await _create_dashboard_alert(
                state, analysis, request.transcript, token, recommendation, request.session_id
            )

        return success_envelope(
            analysis=_analysis_summary(analysis),
            recommendation=recommendation.model_dump(mode="json") if recommendation else None,
            dashboard_alert=dashboard_alert,
        )
    except HTTPException:
        raise
    except Exception as e:
        log_event("analysis", f"failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))
