#!/usr/bin/env python
"""Seed the VUFS taxonomy from a JSON file.

This script:
1. Creates missing tables (optional)
2. Builds category and brand hierarchies (find-or-create, safe to re-run)
3. Bulk-imports flat vocabularies, attribute types/values and settings

Seed file format:
    {
        "categories": [["Apparel", "Tops", "T-Shirts", "Crew Neck"], ...],
        "brands": [["Nike", "Air Jordan"], ...],
        "vocabularies": {"colors": ["Red", "Blue"], "materials": ["Cotton"]},
        "attributes": {"Fabric Weight": ["Light", "Medium", "Heavy"]},
        "settings": {"default_currency": "BRL"}
    }

Usage:
    # Seed from a file
    python scripts/seed_taxonomy.py --file seed.json

    # Create tables first (fresh database)
    python scripts/seed_taxonomy.py --file seed.json --create-schema

    # Show row counts per vocabulary
    python scripts/seed_taxonomy.py --summary
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import func, select

from app.core.errors import ConflictError, TaxonomyError
from app.core.slug import slugify
from app.infra.database import close_db_engine, create_schema, get_db_session
from app.infra.logging import get_logger, setup_logging
from app.models import Base
from app.services.attribute_types import AttributeTypeService
from app.services.bulk_importer import BulkImporter
from app.services.hierarchy_builder import build_brand_hierarchy, build_category_hierarchy
from app.services.settings_store import SettingsStore

setup_logging()
logger = get_logger(__name__)


def load_seed(path: Path) -> dict[str, Any]:
    """Read and sanity-check the seed file."""
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Seed file must contain a JSON object")
    return data


async def seed_hierarchies(data: dict[str, Any]) -> tuple[int, int]:
    """Build every category and brand chain; returns nodes created per tree."""
    categories_created = 0
    brands_created = 0

    async with get_db_session() as session:
        for chain in data.get("categories", []):
            result = await build_category_hierarchy(session, *chain)
            categories_created += len(result.created_ids)

        for chain in data.get("brands", []):
            result = await build_brand_hierarchy(session, *chain)
            brands_created += len(result.created_ids)

    return categories_created, brands_created


async def seed_vocabularies(data: dict[str, Any]) -> dict[str, tuple[int, int, int]]:
    """Bulk import each vocabulary; returns (created, skipped, errors) per type."""
    summary: dict[str, tuple[int, int, int]] = {}

    async with get_db_session() as session:
        importer = BulkImporter(session)
        for type_label, items in data.get("vocabularies", {}).items():
            result = await importer.bulk_add_items(type_label, items)
            summary[type_label] = (
                result.created_count,
                result.skipped_count,
                len(result.errors),
            )
            for error in result.errors:
                logger.warning(
                    "Seed item failed",
                    type=type_label,
                    item=error.item,
                    error=error.message,
                )

    return summary


async def seed_attributes(data: dict[str, Any]) -> dict[str, tuple[int, int, int]]:
    """Create attribute types (if missing) and import their values."""
    summary: dict[str, tuple[int, int, int]] = {}

    async with get_db_session() as session:
        attribute_types = AttributeTypeService(session)
        importer = BulkImporter(session)
        for name, values in data.get("attributes", {}).items():
            try:
                attribute_type = await attribute_types.add_type(name)
            except ConflictError:
                attribute_type = await attribute_types.get_type(slugify(name))
            result = await importer.bulk_add_items("attributes", values, attribute_type.slug)
            summary[attribute_type.slug] = (
                result.created_count,
                result.skipped_count,
                len(result.errors),
            )

    return summary


async def seed_settings(data: dict[str, Any]) -> int:
    async with get_db_session() as session:
        store = SettingsStore(session)
        for key, value in data.get("settings", {}).items():
            await store.set(key, value)
    return len(data.get("settings", {}))


async def table_counts() -> dict[str, int]:
    """Row count of every taxonomy table."""
    counts: dict[str, int] = {}
    async with get_db_session() as session:
        for name, table in sorted(Base.metadata.tables.items()):
            counts[name] = await session.scalar(select(func.count()).select_from(table)) or 0
    return counts


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Seed the VUFS taxonomy from a JSON file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--file",
        type=Path,
        help="Path to the JSON seed file",
    )
    parser.add_argument(
        "--create-schema",
        action="store_true",
        help="Create missing tables before seeding",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print row counts per table and exit",
    )

    return parser.parse_args()


async def run(args: argparse.Namespace) -> int:
    if args.create_schema:
        await create_schema()

    if args.summary:
        print("\nTaxonomy tables:")
        print("-" * 40)
        for name, count in (await table_counts()).items():
            print(f"  {name:<32} {count:>6}")
        return 0

    if not args.file:
        print("Error: --file is required (or use --summary)")
        return 1

    try:
        data = load_seed(args.file)
    except (OSError, ValueError) as e:
        print(f"Error: Cannot read seed file: {e}")
        return 1

    try:
        categories_created, brands_created = await seed_hierarchies(data)
        vocabularies = await seed_vocabularies(data)
        attributes = await seed_attributes(data)
        settings_count = await seed_settings(data)
    except TaxonomyError as e:
        print(f"Error: Seeding failed [{e.code}]: {e.message}")
        return 1

    print("\nSeed complete:")
    print(f"  Categories created: {categories_created}")
    print(f"  Brands created: {brands_created}")
    for label, (created, skipped, errors) in {**vocabularies, **attributes}.items():
        print(f"  {label}: {created} created, {skipped} skipped, {errors} errors")
    print(f"  Settings stored: {settings_count}")
    return 0


async def main() -> int:
    """Main entry point."""
    args = parse_args()
    try:
        return await run(args)
    finally:
        await close_db_engine()


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
