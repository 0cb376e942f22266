"""
Firestore catalog store: one document per catalog item in the catalog collection
(default wellness_catalog, document ID = item id).

Used when DATA_SOURCE=firebase. Rows may use either the Spanish column names or the
engine names; the schema adapter normalizes both.
"""

from pathlib import Path
from typing import Any, List, Optional, Union

from google.cloud.firestore_v1.base_query import FieldFilter

from wellness_engine.models.catalog import CatalogItem

from ..schema.catalog_schema_adapter import to_catalog_item
from .firestore_client import create_async_client


class FirestoreCatalogStore:
    """Catalog store backed by a Firestore collection, read with AsyncClient."""

    def __init__(
        self,
        project_id: Optional[str] = None,
        credentials_path: Optional[Union[Path, str]] = None,
        collection: str = "wellness_catalog",
        client: Optional[Any] = None,
    ):
        self._db = client if client is not None else create_async_client(project_id, credentials_path)
        self._collection = collection

    def _coll(self):
        return self._db.collection(self._collection)

    async def fetch_items_by_situation_tag(self, tag: str) -> List[CatalogItem]:
        query = self._coll().where(filter=FieldFilter("situation_tags", "array_contains", tag))
        out = []
        async for doc in query.stream():
            out.append(to_catalog_item(doc.to_dict() or {}, doc.id))
        return out

    async def fetch_all_items(self) -> List[CatalogItem]:
        out = []
        async for doc in self._coll().stream():
            out.append(to_catalog_item(doc.to_dict() or {}, doc.id))
        return out

    async def get_item(self, item_id: str) -> Optional[CatalogItem]:
        doc = await self._coll().document(str(item_id)).get()
        if not doc.exists:
            return None
        return to_catalog_item(doc.to_dict() or {}, doc.id)
