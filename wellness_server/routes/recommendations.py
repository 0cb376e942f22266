"""Recommendation and classification endpoints."""

from fastapi import APIRouter, HTTPException

from wellness_engine import classify_situation, recommend_for_transcript

from ..models import ClassifyRequest, RecommendationRequest
from ..state import get_state
from ..utils import anonymous_token, log_event, success_envelope

router = APIRouter()


def _log_recommendations(msg: str) -> None:
    log_event("recommendations", msg)


@router.post("/recommendations")
async def create_recommendations(request: RecommendationRequest):
    """
    Classify the transcript and return ranked recommendations plus the empathic message.
    The top recommendation is persisted as a pending wellness request under an anonymous token.
    """
    if not request.transcript or request.profile is None:
        raise HTTPException(status_code=400, detail="Missing required fields: transcript and profile")
    try:
        state = get_state()
        engine_config = state.engine_config
        token = request.anonymous_token or anonymous_token()
        top_n = request.top_n if request.top_n is not None else engine_config.top_n
        _log_recommendations(f"started: token={token!r}, top_n={top_n}")

        result = await recommend_for_transcript(
            request.profile,
            request.transcript,
            catalog=state.catalog_store,
            records=state.request_store,
            top_n=top_n,
            anonymous_token=token,
            persist=engine_config.persist_recommendations,
            config=engine_config,
        )
        _log_recommendations(
            f"done: situation={result.situation.category.value}/{result.situation.subtype}, "
            f"recommendations={len(result.recommendations)}, message_length={result.message_length}"
        )
        return success_envelope(result.model_dump(mode="json"))
    except HTTPException:
        raise
    except Exception as e:
        _log_recommendations(f"failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/classify")
def classify(request: ClassifyRequest):
    """Classify a transcript without ranking (diagnostics and the chat UI preview)."""
    situation = classify_situation(request.transcript)
    return success_envelope(situation.model_dump(mode="json"))
