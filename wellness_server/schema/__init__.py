"""Schema adapters between stored catalog rows and engine models."""

from .catalog_schema_adapter import (
    is_spanish_format_row,
    normalize_catalog_row,
    to_catalog_item,
    to_spanish_row,
)

__all__ = [
    "is_spanish_format_row",
    "normalize_catalog_row",
    "to_catalog_item",
    "to_spanish_row",
]
