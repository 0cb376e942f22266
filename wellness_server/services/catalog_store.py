"""
Catalog Store abstraction.

Supplies wellness catalog items to the recommendation engine. Implementations:
in-memory (tests, local runs), JSON file, Firestore (production). Swap via
DATA_SOURCE for local vs cloud.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol, Union

from wellness_engine.models.catalog import CatalogItem

from ..schema.catalog_schema_adapter import to_catalog_item

logger = logging.getLogger(__name__)


class CatalogStore(Protocol):
    """Protocol for catalog reads. Implement for in-memory, JSON file or Firestore."""

    async def fetch_items_by_situation_tag(self, tag: str) -> List[CatalogItem]:
        """Items whose situation_tags contain tag (exact match)."""
        ...

    async def fetch_all_items(self) -> List[CatalogItem]:
        """Every item in the catalog."""
        ...

    async def get_item(self, item_id: str) -> Optional[CatalogItem]:
        """One item by id, or None."""
        ...


class InMemoryCatalogStore:
    """
    Catalog store over a list of items held in memory.
    Used for local testing and as the startup fallback when no data source is configured.
    """

    def __init__(self, items: Optional[List[Union[CatalogItem, Dict[str, Any]]]] = None):
        self._items: List[CatalogItem] = [
            i if isinstance(i, CatalogItem) else to_catalog_item(i)
            for i in (items or [])
        ]

    def __len__(self) -> int:
        return len(self._items)

    async def fetch_items_by_situation_tag(self, tag: str) -> List[CatalogItem]:
        return [i for i in self._items if tag in i.situation_tags]

    async def fetch_all_items(self) -> List[CatalogItem]:
        return list(self._items)

    async def get_item(self, item_id: str) -> Optional[CatalogItem]:
        return next((i for i in self._items if i.id == str(item_id)), None)


def _load_rows(path: Path) -> List[Dict[str, Any]]:
    with open(path) as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("items", data.get("products", []))
    if not isinstance(data, list):
        raise ValueError(f"Catalog JSON must be a list of rows or {{'items': [...]}}: {path}")
    return data


class JsonCatalogStore(InMemoryCatalogStore):
    """
    Catalog store backed by a JSON file (list of rows, Spanish or engine columns).
    Used when DATA_SOURCE=json; path comes from CATALOG_JSON_PATH.
    """

    def __init__(self, path: Union[Path, str]):
        self._path = Path(path)
        if not self._path.exists():
            raise FileNotFoundError(f"Catalog JSON not found: {self._path}")
        rows = _load_rows(self._path)
        super().__init__(rows)
        logger.info("[catalog] loaded %d items from %s", len(self), self._path)

    @property
    def path(self) -> Path:
        return self._path
