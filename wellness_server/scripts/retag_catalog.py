#!/usr/bin/env python3
"""
Recompute situation_tags and profile_tags for catalog items.

Tags are inferred from each item's name, description, category and subcategory.
Works on a JSON catalog file (rewritten in place, or to --output) or on a Firestore
collection. --dry-run prints the changes without writing anything.

Usage:
  python -m wellness_server.scripts.retag_catalog --catalog data/catalog.json --dry-run
  python -m wellness_server.scripts.retag_catalog --firestore --credentials path/to/serviceAccountKey.json --limit 50
"""

import argparse
import json
import os
import sys
from pathlib import Path
from typing import List, Optional, Tuple

import firebase_admin
from firebase_admin import credentials, firestore

from wellness_engine.models.catalog import CatalogItem
from wellness_engine.utils import retag_item

from ..schema import to_catalog_item, to_spanish_row
from .upload_catalog import BATCH_SIZE, load_catalog_rows

_REPO_ROOT = Path(__file__).resolve().parent.parent.parent

# (before, after) pairs whose tags differ
TagChange = Tuple[CatalogItem, CatalogItem]


def retag_items(items: List[CatalogItem], limit: Optional[int] = None) -> List[TagChange]:
    """Retag up to limit items; returns only the ones whose tags changed."""
    changes = []
    for item in items[:limit] if limit else items:
        updated = retag_item(item)
        if (updated.situation_tags, updated.profile_tags) != (item.situation_tags, item.profile_tags):
            changes.append((item, updated))
    return changes


def print_changes(changes: List[TagChange]) -> None:
    for before, after in changes:
        print(f"  {after.id} {after.name!r}")
        print(f"    situation_tags: {before.situation_tags} -> {after.situation_tags}")
        print(f"    profile_tags:   {before.profile_tags} -> {after.profile_tags}")


def retag_json_file(path: Path, output: Optional[Path], limit: Optional[int], dry_run: bool) -> int:
    """Retag a JSON catalog; rows keep the Spanish column format when they came in with it."""
    rows = load_catalog_rows(path)
    items = [to_catalog_item(row) for row in rows]
    changes = retag_items(items, limit)
    print_changes(changes)
    if dry_run or not changes:
        return len(changes)

    updated = {after.id: after for _, after in changes}
    out_rows = []
    for row, item in zip(rows, items):
        new = updated.get(item.id)
        if new is None:
            out_rows.append(row)
        elif "nombre" in row or "precio_desde" in row:
            out_rows.append({**row, **to_spanish_row(new)})
        else:
            out_rows.append({**row, "situation_tags": new.situation_tags, "profile_tags": new.profile_tags})
    with open(output or path, "w") as f:
        json.dump(out_rows, f, indent=2, ensure_ascii=False)
    print(f"  wrote {output or path}")
    return len(changes)


def retag_firestore(db, collection: str, limit: Optional[int], dry_run: bool) -> int:
    coll = db.collection(collection)
    items = [to_catalog_item(doc.to_dict() or {}, doc.id) for doc in coll.stream()]
    changes = retag_items(items, limit)
    print_changes(changes)
    if dry_run:
        return len(changes)
    for i in range(0, len(changes), BATCH_SIZE):
        batch = db.batch()
        chunk = changes[i : i + BATCH_SIZE]
        for _, after in chunk:
            batch.update(
                coll.document(after.id),
                {"situation_tags": after.situation_tags, "profile_tags": after.profile_tags},
            )
        batch.commit()
        print(f"  {collection}: committed batch {i // BATCH_SIZE + 1} ({len(chunk)} docs)")
    return len(changes)


def main():
    parser = argparse.ArgumentParser(description="Recompute catalog situation/profile tags")
    parser.add_argument(
        "--catalog",
        type=str,
        default=os.environ.get("CATALOG_JSON_PATH", str(_REPO_ROOT / "data" / "catalog.json")),
        help="JSON catalog to retag (ignored with --firestore)",
    )
    parser.add_argument("--output", type=str, default=None, help="Write the JSON result here instead of in place")
    parser.add_argument("--firestore", action="store_true", help="Retag the Firestore collection instead")
    parser.add_argument(
        "--collection",
        type=str,
        default=os.environ.get("CATALOG_COLLECTION", "wellness_catalog"),
    )
    parser.add_argument("--credentials", type=str, default=None, metavar="PATH")
    parser.add_argument("--limit", type=int, default=None, help="Only consider the first N items")
    parser.add_argument("--dry-run", action="store_true", help="Print changes without writing")
    args = parser.parse_args()

    if not args.firestore:
        path = Path(args.catalog)
        if not path.is_file():
            print(f"Catalog file not found: {path}")
            sys.exit(1)
        n = retag_json_file(path, Path(args.output) if args.output else None, args.limit, args.dry_run)
        print(f"Done. changed={n}{' (dry run)' if args.dry_run else ''}")
        return

    cred_path = args.credentials or os.environ.get("GOOGLE_APPLICATION_CREDENTIALS")
    if not cred_path or not Path(cred_path).exists():
        print("Provide --credentials PATH or set GOOGLE_APPLICATION_CREDENTIALS to an existing file.")
        sys.exit(1)
    if not firebase_admin._apps:
        firebase_admin.initialize_app(credentials.Certificate(str(Path(cred_path).resolve())))
    db = firestore.client()
    n = retag_firestore(db, args.collection, args.limit, args.dry_run)
    print(f"Done. changed={n}{' (dry run)' if args.dry_run else ''}")


if __name__ == "__main__":
    main()
