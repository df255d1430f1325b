"""Bulk import, hierarchy builder and item metadata endpoints."""

from dataclasses import asdict

from fastapi import APIRouter

from app.api.deps import DbSession
from app.infra.logging import get_logger
from app.schemas.bulk import (
    BulkRequest,
    BulkResponse,
    BulkResultOut,
    ItemMetadataOut,
    ItemMetadataRequest,
    ItemMetadataResponse,
)
from app.schemas.taxonomy import (
    BrandHierarchyOut,
    BrandHierarchyRequest,
    BrandHierarchyResponse,
    BrandOut,
    CategoryHierarchyOut,
    CategoryHierarchyRequest,
    CategoryHierarchyResponse,
    CategoryOut,
)
from app.services.bulk_importer import BulkImporter
from app.services.hierarchy_builder import build_brand_hierarchy, build_category_hierarchy
from app.services.item_metadata import ColorEntry, CompositionEntry, build_item_metadata

router = APIRouter()
logger = get_logger(__name__)


@router.post("/bulk", response_model=BulkResponse)
async def bulk_add_items(body: BulkRequest, db: DbSession) -> BulkResponse:
    """Create many names of one vocabulary.

    Duplicates are skipped and per-item failures are reported in
    ``result.errors``; the request itself succeeds either way.
    """
    result = await BulkImporter(db).bulk_add_items(body.type, body.items, body.attribute_slug)
    return BulkResponse(
        message=(
            f"Bulk import completed: {result.created_count} created, "
            f"{result.skipped_count} skipped"
        ),
        result=BulkResultOut.model_validate(asdict(result)),
    )


@router.post("/category-hierarchy", response_model=CategoryHierarchyResponse)
async def category_hierarchy(
    body: CategoryHierarchyRequest,
    db: DbSession,
) -> CategoryHierarchyResponse:
    """Find or create page -> blue -> white -> gray and return the chain."""
    result = await build_category_hierarchy(
        db,
        body.page,
        body.blue_subcategory,
        body.white_subcategory,
        body.gray_subcategory,
    )
    path = [CategoryOut.model_validate(node) for node in result.path]
    return CategoryHierarchyResponse(
        message="Category hierarchy built successfully",
        hierarchy=CategoryHierarchyOut(
            deepest=path[-1],
            path=path,
            created_ids=result.created_ids,
        ),
    )


@router.post("/brand-hierarchy", response_model=BrandHierarchyResponse)
async def brand_hierarchy(body: BrandHierarchyRequest, db: DbSession) -> BrandHierarchyResponse:
    """Find or create brand -> line -> collaboration and return the chain."""
    result = await build_brand_hierarchy(db, body.brand, body.line, body.collaboration)
    path = [BrandOut.model_validate(node) for node in result.path]
    return BrandHierarchyResponse(
        message="Brand hierarchy built successfully",
        hierarchy=BrandHierarchyOut(
            deepest=path[-1],
            path=path,
            created_ids=result.created_ids,
        ),
    )


@router.post("/item-metadata", response_model=ItemMetadataResponse)
async def item_metadata(body: ItemMetadataRequest) -> ItemMetadataResponse:
    metadata = build_item_metadata(
        composition=[
            CompositionEntry(material=entry.material, percentage=entry.percentage)
            for entry in body.composition or []
        ],
        colors=[ColorEntry(name=color.name, hex=color.hex) for color in body.colors or []],
        care_instructions=body.care_instructions,
        acquisition_info=body.acquisition_info,
        pricing=body.pricing,
    )
    logger.debug(
        "Item metadata built",
        materials=len(metadata.composition),
        colors=len(metadata.colors),
        care_instructions=len(metadata.care_instructions),
    )
    return ItemMetadataResponse(
        message="Item metadata built successfully",
        metadata=ItemMetadataOut.model_validate(asdict(metadata)),
    )
