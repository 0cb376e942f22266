"""Catalog browsing endpoint."""

from typing import Optional

from fastapi import APIRouter, Query

from ..state import get_state
from ..utils import success_envelope

router = APIRouter()


@router.get("")
async def list_catalog(situation: Optional[str] = Query(None)):
    """All catalog items, or only those tagged for a situation category."""
    store = get_state().catalog_store
    if situation:
        items = await store.fetch_items_by_situation_tag(situation)
    else:
        items = await store.fetch_all_items()
    return success_envelope([item.model_dump(mode="json") for item in items], count=len(items))
