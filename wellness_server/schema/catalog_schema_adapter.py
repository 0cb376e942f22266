"""
Catalog schema adapter: convert stored catalog rows -> engine CatalogItem format.

Supports:
- Spanish column format (the provider's export): nombre, descripcion, precio_desde,
  categoria_principal, subcategoria, url, profile_tags, situation_tags, created_at
- engine format: pass-through (name, description, price_from, category, subcategory, ...)

Nulls are replaced with defaults (description "", price 0, subcategory "General",
category "Otros"). Output dict is valid for CatalogItem.model_validate().
"""

from typing import Any, Dict, List, Optional

from wellness_engine.models.catalog import CatalogItem

_DEFAULTS = {
    "description": "",
    "price_from": 0,
    "category": "Otros",
    "subcategory": "General",
    "url": "",
}

# Spanish column -> engine field
_COLUMN_MAP = {
    "nombre": "name",
    "descripcion": "description",
    "precio_desde": "price_from",
    "categoria_principal": "category",
    "subcategoria": "subcategory",
}


def is_spanish_format_row(doc: Dict[str, Any]) -> bool:
    """Detect if a catalog row uses the Spanish column names."""
    return "nombre" in doc or "precio_desde" in doc


def _to_price(value: Any) -> float:
    if value is None or value == "":
        return 0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0


def _to_tags(value: Any) -> List[str]:
    if isinstance(value, str):
        # Comma-separated strings show up in hand-edited exports
        return [t.strip() for t in value.split(",") if t.strip()]
    if isinstance(value, (list, tuple)):
        return [str(t) for t in value if t is not None and str(t).strip()]
    return []


def normalize_catalog_row(doc: Dict[str, Any], doc_id: Optional[str] = None) -> Dict[str, Any]:
    """
    Convert a stored row (either format) to engine format.

    Returns:
        Dict valid for CatalogItem.model_validate(). doc_id wins over a missing id field.
    """
    out: Dict[str, Any] = {}
    for key, value in doc.items():
        out[_COLUMN_MAP.get(key, key)] = value
    for spanish in _COLUMN_MAP:
        out.pop(spanish, None)

    raw_id = out.get("id") if out.get("id") not in (None, "") else doc_id
    out["id"] = str(raw_id) if raw_id is not None else ""
    out["name"] = out.get("name") or ""
    for key, default in _DEFAULTS.items():
        if out.get(key) is None:
            out[key] = default
    out["price_from"] = _to_price(out.get("price_from"))
    out["profile_tags"] = _to_tags(out.get("profile_tags"))
    out["situation_tags"] = _to_tags(out.get("situation_tags"))
    created_at = out.get("created_at")
    out["created_at"] = str(created_at) if created_at is not None else None
    return out


def to_catalog_item(doc: Dict[str, Any], doc_id: Optional[str] = None) -> CatalogItem:
    return CatalogItem.model_validate(normalize_catalog_row(doc, doc_id))


def to_spanish_row(item: CatalogItem) -> Dict[str, Any]:
    """Engine item -> Spanish column row (used when writing back to the provider's format)."""
    return {
        "id": item.id,
        "nombre": item.name,
        "descripcion": item.description,
        "precio_desde": item.price_from,
        "categoria_principal": item.category,
        "subcategoria": item.subcategory,
        "url": item.url,
        "profile_tags": list(item.profile_tags),
        "situation_tags": list(item.situation_tags),
        "created_at": item.created_at,
    }
