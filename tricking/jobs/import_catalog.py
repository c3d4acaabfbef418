"""
Job to load the trick catalog from a JSON file.

The file holds two lists:

    {
        "categories": [{"id": 1, "name": "Kicks", "parent_id": null}],
        "tricks": [{"slug": "cork", "name": "Cork", "weight": 3, ...}]
    }

Categories are upserted by id and tricks by slug, so the job can be
re-run against the same file. Entries that fail validation are skipped
with a warning. Categories are written parents first so the parent_id
foreign key holds regardless of file order.
"""

import argparse
import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from tricking.db.database import init_db, session_scope
from tricking.db.operations import upsert_category, upsert_trick
from tricking.models.catalog import CatalogCategory, CatalogTrick

logger = logging.getLogger(__name__)


def parse_category(entry: Any) -> CatalogCategory | None:
    """Validate one category entry; None if it is malformed."""
    try:
        return CatalogCategory.model_validate(entry)
    except ValidationError as e:
        logger.warning("Skipping malformed category %r: %s", entry, e.errors())
        return None


def parse_trick(entry: Any) -> CatalogTrick | None:
    """Validate one trick entry; None if it is malformed."""
    try:
        return CatalogTrick.model_validate(entry)
    except ValidationError as e:
        logger.warning("Skipping malformed trick %r: %s", entry, e.errors())
        return None


def order_categories(categories: list[CatalogCategory]) -> list[CatalogCategory]:
    """
    Order categories so every parent in the file precedes its children.

    Parents outside the file are assumed to exist already. Entries caught
    in a parent cycle keep their file order at the end.
    """
    ordered: list[CatalogCategory] = []
    pending = list(categories)

    while pending:
        waiting_on = {c.id for c in pending}
        ready = [c for c in pending if c.parent_id is None or c.parent_id not in waiting_on]
        if not ready:
            logger.warning("Category parent cycle among ids %s", sorted(waiting_on))
            ordered.extend(pending)
            break
        ordered.extend(ready)
        pending = [c for c in pending if c not in ready]

    return ordered


def load_catalog(path: Path) -> tuple[list[CatalogCategory], list[CatalogTrick]]:
    """
    Read and parse a catalog file.

    Raises:
        FileNotFoundError: path does not exist
        json.JSONDecodeError: file is not valid JSON
    """
    raw = json.loads(path.read_text(encoding="utf-8"))

    categories = [c for c in map(parse_category, raw.get("categories", [])) if c is not None]
    tricks = [t for t in map(parse_trick, raw.get("tricks", [])) if t is not None]
    return categories, tricks


async def import_catalog(path: Path) -> dict[str, int]:
    """
    Upsert every category and trick from a catalog file.

    Returns:
        Dict with the number of categories and tricks written
    """
    categories, tricks = load_catalog(path)
    logger.info(
        "Loaded %d categories and %d tricks from %s", len(categories), len(tricks), path
    )

    async with session_scope() as session:
        for category in order_categories(categories):
            await upsert_category(session, category)
        for trick in tricks:
            await upsert_trick(session, trick)

    logger.info("Catalog import complete")
    return {"categories": len(categories), "tricks": len(tricks)}


def main() -> None:
    """CLI entry point for importing a catalog file."""
    parser = argparse.ArgumentParser(description="Import the trick catalog from JSON")
    parser.add_argument("path", type=Path, help="Catalog JSON file")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    async def _run() -> None:
        await init_db()
        await import_catalog(args.path)

    asyncio.run(_run())


if __name__ == "__main__":
    main()
