"""
Firestore recommendation store: wellness requests in the requests collection
(default wellness_requests, document ID = request id).

Used when DATA_SOURCE=firebase. Review transitions run in a transaction so two HR
reviewers cannot both act on the same pending request.
"""

from pathlib import Path
from typing import Any, List, Optional, Union

from google.cloud.firestore import async_transactional
from google.cloud.firestore_v1.base_query import FieldFilter
from google.cloud.firestore_v1.query import Query as FirestoreQuery

from wellness_engine.models.records import (
    RecommendationRecordInput,
    RequestStatus,
    WellnessRequest,
    build_wellness_request,
)

from .firestore_client import create_async_client
from .request_store import RequestNotFoundError, apply_review, new_request_id

# Limit for list_requests (most recent N by created_at)
REQUESTS_READ_LIMIT = 500


class FirestoreRecommendationStore:
    """Recommendation store backed by Firestore, using AsyncClient."""

    def __init__(
        self,
        project_id: Optional[str] = None,
        credentials_path: Optional[Union[Path, str]] = None,
        collection: str = "wellness_requests",
        client: Optional[Any] = None,
    ):
        self._db = client if client is not None else create_async_client(project_id, credentials_path)
        self._collection = collection

    def _coll(self):
        return self._db.collection(self._collection)

    async def _put(self, request: WellnessRequest) -> WellnessRequest:
        try:
            await self._coll().document(request.id).set(request.model_dump(mode="json"))
        except Exception as e:
            print(f"[FirestoreRecommendationStore] write failed for request={request.id!r}: {e}")
            raise
        return request

    async def create_recommendation_record(self, data: RecommendationRecordInput) -> WellnessRequest:
        return await self._put(build_wellness_request(new_request_id(), data))

    async def create_alert_record(self, record: WellnessRequest) -> WellnessRequest:
        return await self._put(record.model_copy(update={"id": new_request_id()}))

    async def list_requests(self, status: Optional[RequestStatus] = None) -> List[WellnessRequest]:
        query = self._coll()
        if status is not None:
            query = query.where(filter=FieldFilter("status", "==", status.value))
        query = query.order_by("created_at", direction=FirestoreQuery.DESCENDING).limit(REQUESTS_READ_LIMIT)
        out = []
        async for doc in query.stream():
            d = doc.to_dict() or {}
            d["id"] = doc.id
            out.append(WellnessRequest.model_validate(d))
        return out

    async def get_request(self, request_id: str) -> Optional[WellnessRequest]:
        doc = await self._coll().document(request_id).get()
        if not doc.exists:
            return None
        d = doc.to_dict() or {}
        d["id"] = doc.id
        return WellnessRequest.model_validate(d)

    async def _review(
        self,
        request_id: str,
        target: RequestStatus,
        reviewer_id: str,
        reason: Optional[str] = None,
    ) -> WellnessRequest:
        doc_ref = self._coll().document(request_id)

        @async_transactional
        async def _txn(transaction):
            snapshot = await doc_ref.get(transaction=transaction)
            if not snapshot.exists:
                raise RequestNotFoundError(request_id)
            d = snapshot.to_dict() or {}
            d["id"] = snapshot.id
            reviewed = apply_review(WellnessRequest.model_validate(d), target, reviewer_id, reason)
            transaction.update(doc_ref, {
                "status": reviewed.status.value,
                "reviewed_at": reviewed.reviewed_at,
                "reviewed_by": reviewed.reviewed_by,
                "rejection_reason": reviewed.rejection_reason,
            })
            return reviewed

        return await _txn(self._db.transaction())

    async def approve_request(self, request_id: str, reviewer_id: str) -> WellnessRequest:
        return await self._review(request_id, RequestStatus.APPROVED, reviewer_id)

    async def reject_request(
        self, request_id: str, reviewer_id: str, reason: Optional[str] = None
    ) -> WellnessRequest:
        return await self._review(request_id, RequestStatus.REJECTED, reviewer_id, reason)
