#!/usr/bin/env python3
"""
Upload a wellness activity catalog JSON file to Cloud Firestore.

Rows may use either the Spanish export columns (nombre, precio_desde, ...) or the
engine format; each row is normalized before upload. Document ID = item id.

Requires:
  - A Firebase service account JSON key (--credentials or GOOGLE_APPLICATION_CREDENTIALS).

Usage:
  From repo root:
    python -m wellness_server.scripts.upload_catalog --credentials path/to/serviceAccountKey.json
  Custom file / collection, inferring missing tags:
    python -m wellness_server.scripts.upload_catalog --catalog data/catalog.json --collection wellness_catalog --retag
"""

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Any, Dict, List

import firebase_admin
from firebase_admin import credentials, firestore

from wellness_engine.models.catalog import CatalogItem
from wellness_engine.utils import retag_item

from ..schema import to_catalog_item

_REPO_ROOT = Path(__file__).resolve().parent.parent.parent

BATCH_SIZE = 500  # Firestore batch write limit


def load_catalog_rows(path: Path) -> List[Dict[str, Any]]:
    """Rows from a JSON list, or from the "items" / "products" key of a JSON object."""
    with open(path) as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("items") or data.get("products") or []
    return [row for row in data if isinstance(row, dict)]


def _sanitize_for_firestore(obj):
    """Recursively drop None values (Firestore keeps them as explicit nulls)."""
    if isinstance(obj, dict):
        return {k: _sanitize_for_firestore(v) for k, v in obj.items() if v is not None}
    if isinstance(obj, list):
        return [_sanitize_for_firestore(x) for x in obj]
    return obj


def prepare_items(rows: List[Dict[str, Any]], retag: bool = False) -> List[CatalogItem]:
    """Normalize rows; with retag, rows missing tags get inferred ones. Rows without id are skipped."""
    items = []
    for row in rows:
        item = to_catalog_item(row)
        if not item.id:
            print(f"  skipping row without id: {item.name!r}")
            continue
        if retag and not (item.situation_tags and item.profile_tags):
            item = retag_item(item)
        items.append(item)
    return items


def upload_items(db, collection: str, items: List[CatalogItem]) -> int:
    coll = db.collection(collection)
    total = 0
    for i in range(0, len(items), BATCH_SIZE):
        batch = db.batch()
        chunk = items[i : i + BATCH_SIZE]
        for item in chunk:
            data = _sanitize_for_firestore(item.model_dump(mode="json"))
            batch.set(coll.document(item.id), data)
            total += 1
        batch.commit()
        print(f"  {collection}: committed batch {i // BATCH_SIZE + 1} ({len(chunk)} docs)")
    return total


def main():
    parser = argparse.ArgumentParser(description="Upload the wellness catalog to Firestore")
    parser.add_argument(
        "--catalog",
        type=str,
        default=os.environ.get("CATALOG_JSON_PATH", str(_REPO_ROOT / "data" / "catalog.json")),
        help="Path to catalog JSON (list of rows, or {\"items\": [...]})",
    )
    parser.add_argument(
        "--collection",
        type=str,
        default=os.environ.get("CATALOG_COLLECTION", "wellness_catalog"),
        help="Target Firestore collection",
    )
    parser.add_argument("--retag", action="store_true", help="Infer tags for rows missing them")
    parser.add_argument(
        "--credentials",
        type=str,
        default=None,
        metavar="PATH",
        help="Path to Firebase service account JSON key. Else uses GOOGLE_APPLICATION_CREDENTIALS.",
    )
    args = parser.parse_args()

    catalog_path = Path(args.catalog)
    if not catalog_path.is_file():
        print(f"Catalog file not found: {catalog_path}")
        sys.exit(1)

    cred_path = args.credentials or os.environ.get("GOOGLE_APPLICATION_CREDENTIALS")
    if not cred_path:
        print("Provide --credentials PATH or set GOOGLE_APPLICATION_CREDENTIALS.")
        sys.exit(1)
    cred_path = Path(cred_path)
    if not cred_path.is_absolute():
        cred_path = (_REPO_ROOT / cred_path).resolve()
    if not cred_path.exists():
        print(f"Credentials file not found: {cred_path}")
        sys.exit(1)

    print("Loading catalog...")
    items = prepare_items(load_catalog_rows(catalog_path), retag=args.retag)
    print(f"  {len(items)} items")

    print("Initializing Firebase Admin...")
    if not firebase_admin._apps:
        firebase_admin.initialize_app(credentials.Certificate(str(cred_path)))
    db = firestore.client()

    print("Uploading to Firestore...")
    n = upload_items(db, args.collection, items)
    print(f"Done. {args.collection}={n}")


if __name__ == "__main__":
    main()
