"""
Recommendation (wellness request) store abstraction.

Persists recommendation records and crisis alerts for HR review, and moves them
through pending -> approved / rejected. Implementations: in-memory, JSON file,
Firestore. Records carry an anonymous token and a profile snapshot, never the
user's id or name.
"""

import json
import logging
import uuid
from pathlib import Path
from typing import Dict, List, Optional, Protocol, Union

from wellness_engine.models.records import (
    REVIEWABLE_STATUSES,
    RecommendationRecordInput,
    RequestStatus,
    WellnessRequest,
    build_wellness_request,
)
from wellness_engine.models.scoring import utc_now_iso

logger = logging.getLogger(__name__)


class WellnessStoreError(Exception):
    """Base error for wellness request store operations."""


class RequestNotFoundError(WellnessStoreError):
    def __init__(self, request_id: str):
        super().__init__(f"Wellness request not found: {request_id}")
        self.request_id = request_id


class InvalidTransitionError(WellnessStoreError):
    def __init__(self, request_id: str, status: RequestStatus, target: RequestStatus):
        super().__init__(
            f"Wellness request {request_id} is {status.value}; cannot move to {target.value}"
        )
        self.request_id = request_id
        self.status = status
        self.target = target


def new_request_id() -> str:
    return uuid.uuid4().hex


def apply_review(
    request: WellnessRequest,
    target: RequestStatus,
    reviewer_id: str,
    reason: Optional[str] = None,
) -> WellnessRequest:
    """Reviewed copy of a request; raises InvalidTransitionError unless it is still reviewable."""
    if request.status not in REVIEWABLE_STATUSES:
        raise InvalidTransitionError(request.id, request.status, target)
    update = {"status": target, "reviewed_at": utc_now_iso(), "reviewed_by": reviewer_id}
    if target == RequestStatus.REJECTED:
        update["rejection_reason"] = reason
    return request.model_copy(update=update)


class RecommendationStore(Protocol):
    """Protocol for wellness request persistence. Implement for in-memory, JSON file or Firestore."""

    async def create_recommendation_record(self, data: RecommendationRecordInput) -> WellnessRequest:
        """Persist the top recommendation of a result as a pending request."""
        ...

    async def create_alert_record(self, record: WellnessRequest) -> WellnessRequest:
        """Persist a prebuilt record (crisis alerts). The store assigns the id."""
        ...

    async def list_requests(self, status: Optional[RequestStatus] = None) -> List[WellnessRequest]:
        """Requests, newest first, optionally filtered by status."""
        ...

    async def get_request(self, request_id: str) -> Optional[WellnessRequest]:
        ...

    async def approve_request(self, request_id: str, reviewer_id: str) -> WellnessRequest:
        ...

    async def reject_request(
        self, request_id: str, reviewer_id: str, reason: Optional[str] = None
    ) -> WellnessRequest:
        ...


class InMemoryRecommendationStore:
    """Recommendation store held in memory (tests, local runs, startup fallback)."""

    def __init__(self):
        self._requests: Dict[str, WellnessRequest] = {}

    def __len__(self) -> int:
        return len(self._requests)

    def _save(self) -> None:
        """Persistence hook; no-op in memory."""

    def _put(self, request: WellnessRequest) -> WellnessRequest:
        self._requests[request.id] = request
        self._save()
        return request

    async def create_recommendation_record(self, data: RecommendationRecordInput) -> WellnessRequest:
        return self._put(build_wellness_request(new_request_id(), data))

    async def create_alert_record(self, record: WellnessRequest) -> WellnessRequest:
        return self._put(record.model_copy(update={"id": new_request_id()}))

    async def list_requests(self, status: Optional[RequestStatus] = None) -> List[WellnessRequest]:
        out = [r for r in self._requests.values() if status is None or r.status == status]
        out.sort(key=lambda r: r.created_at, reverse=True)
        return out

    async def get_request(self, request_id: str) -> Optional[WellnessRequest]:
        return self._requests.get(request_id)

    async def _review(
        self,
        request_id: str,
        target: RequestStatus,
        reviewer_id: str,
        reason: Optional[str] = None,
    ) -> WellnessRequest:
        current = self._requests.get(request_id)
        if current is None:
            raise RequestNotFoundError(request_id)
        return self._put(apply_review(current, target, reviewer_id, reason))

    async def approve_request(self, request_id: str, reviewer_id: str) -> WellnessRequest:
        return await self._review(request_id, RequestStatus.APPROVED, reviewer_id)

    async def reject_request(
        self, request_id: str, reviewer_id: str, reason: Optional[str] = None
    ) -> WellnessRequest:
        return await self._review(request_id, RequestStatus.REJECTED, reviewer_id, reason)


class JsonRecommendationStore(InMemoryRecommendationStore):
    """Recommendation store backed by a JSON file (e.g. data/wellness_requests.json)."""

    def __init__(self, path: Union[Path, str]):
        super().__init__()
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._load()

    def _load(self) -> None:
        if not self._path.exists():
            return
        try:
            with open(self._path) as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning("[requests] could not read %s: %s; starting empty", self._path, e)
            return
        rows = data.get("requests", []) if isinstance(data, dict) else data
        for row in rows or []:
            request = WellnessRequest.model_validate(row)
            self._requests[request.id] = request

    def _save(self) -> None:
        out = {"requests": [r.model_dump(mode="json") for r in self._requests.values()]}
        with open(self._path, "w") as f:
            json.dump(out, f, indent=2, ensure_ascii=False)
