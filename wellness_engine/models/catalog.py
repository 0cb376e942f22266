"""
Catalog item model — typed representation of a wellness activity/offering.

Owned by an external catalog store; the engine only reads it.
Storage rows in the Spanish export column naming (nombre, descripcion, precio_desde, ...)
are normalized by wellness_server.schema.catalog_schema_adapter before validation.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator


class CatalogItem(BaseModel):
    """
    Catalog entry used across the ranking and message stages.

    All fields except id and name are optional to support partial rows.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    name: str
    description: str = ""
    price_from: float = 0
    category: str = "Otros"
    subcategory: str = "General"
    url: str = ""
    profile_tags: List[str] = []
    situation_tags: List[str] = []
    created_at: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: Any) -> str:
        return str(value) if value is not None else ""

    @field_validator("profile_tags", "situation_tags", mode="before")
    @classmethod
    def _clean_tags(cls, value: Any) -> List[str]:
        # Malformed tag lists degrade to empty rather than failing the row.
        if not value or not isinstance(value, (list, tuple)):
            return []
        return [t for t in value if isinstance(t, str)]

    @property
    def all_tags(self) -> List[str]:
        """Profile tags followed by situation tags."""
        return [*self.profile_tags, *self.situation_tags]

    @property
    def search_text(self) -> str:
        """Lowercased name, subcategory and description, as used for keyword and hobby matching."""
        return f"{self.name} {self.subcategory} {self.description or ''}".lower()

    @property
    def short_text(self) -> str:
        """Lowercased name and subcategory, as used for the message hobby clause."""
        return f"{self.name} {self.subcategory}".lower()


def ensure_items(items: List[Union[Dict[str, Any], "CatalogItem"]]) -> List["CatalogItem"]:
    """Convert list of dicts or CatalogItems to CatalogItem models for use in the pipeline."""
    return [
        CatalogItem.model_validate(i) if isinstance(i, dict) else i
        for i in items
    ]
