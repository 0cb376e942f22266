"""
HR review queue: create and list wellness requests, approve / reject them.

Store errors propagate; the app maps RequestNotFoundError to 404 and
InvalidTransitionError to 409.
"""

from typing import Optional

from fastapi import APIRouter, Query

from wellness_engine.models.records import RequestStatus

from ..models import CreateWellnessRequest, ReviewDecisionRequest
from ..services import RequestNotFoundError
from ..state import get_state
from ..utils import log_event, success_envelope

router = APIRouter()


@router.get("/requests")
async def list_requests(status: Optional[RequestStatus] = Query(None)):
    """Wellness requests, newest first, optionally filtered by status."""
    requests = await get_state().request_store.list_requests(status)
    return success_envelope(
        [r.model_dump(mode="json") for r in requests],
        count=len(requests),
    )


@router.post("/requests", status_code=201)
async def create_request(body: CreateWellnessRequest):
    """Store a recommendation computed elsewhere as a pending request."""
    request = await get_state().request_store.create_recommendation_record(body)
    log_event("wellness", f"created id={request.id} token={request.anonymous_token}")
    return success_envelope(request.model_dump(mode="json"))


@router.get("/requests/{request_id}")
async def get_request(request_id: str):
    request = await get_state().request_store.get_request(request_id)
    if request is None:
        raise RequestNotFoundError(request_id)
    return success_envelope(request.model_dump(mode="json"))


@router.post("/requests/{request_id}/approve")
async def approve_request(request_id: str, body: ReviewDecisionRequest):
    request = await get_state().request_store.approve_request(request_id, body.reviewer_id)
    log_event("wellness", f"approved id={request_id} by={body.reviewer_id}")
    return success_envelope(request.model_dump(mode="json"))


@router.post("/requests/{request_id}/reject")
async def reject_request(request_id: str, body: ReviewDecisionRequest):
    request = await get_state().request_store.reject_request(request_id, body.reviewer_id, body.reason)
    log_event("wellness", f"rejected id={request_id} by={body.reviewer_id}")
    return success_envelope(request.model_dump(mode="json"))
