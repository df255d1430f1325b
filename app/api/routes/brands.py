"""Brand tree endpoints (brand -> line -> collaboration)."""

from typing import Annotated

from fastapi import APIRouter, Query, status

from app.api.deps import DbSession
from app.schemas.common import MessageResponse
from app.schemas.taxonomy import (
    BrandCreate,
    BrandListResponse,
    BrandOut,
    BrandPathResponse,
    BrandResponse,
    BrandSearchResponse,
    NodeUpdate,
)
from app.services.taxonomy_tree import BRAND_TREE, TaxonomyTree

router = APIRouter()


@router.get("", response_model=BrandListResponse)
async def list_brands(
    db: DbSession,
    type: str | None = None,
    parent_id: Annotated[int | None, Query(alias="parentId")] = None,
) -> BrandListResponse:
    nodes = await TaxonomyTree(db, BRAND_TREE).list_nodes(type, parent_id)
    return BrandListResponse(
        message="Brands retrieved successfully",
        brands=[BrandOut.model_validate(node) for node in nodes],
    )


@router.get("/search", response_model=BrandSearchResponse)
async def search_brands(db: DbSession, q: str | None = None) -> BrandSearchResponse:
    nodes = await TaxonomyTree(db, BRAND_TREE).search(q)
    return BrandSearchResponse(
        message="Brand search completed",
        query=q or "",
        brands=[BrandOut.model_validate(node) for node in nodes],
    )


@router.get("/{brand_id}", response_model=BrandResponse)
async def get_brand(brand_id: int, db: DbSession) -> BrandResponse:
    node = await TaxonomyTree(db, BRAND_TREE).get(brand_id)
    return BrandResponse(
        message="Brand retrieved successfully",
        brand=BrandOut.model_validate(node),
    )


@router.get("/{brand_id}/path", response_model=BrandPathResponse)
async def get_brand_path(brand_id: int, db: DbSession) -> BrandPathResponse:
    path = await TaxonomyTree(db, BRAND_TREE).get_path(brand_id)
    return BrandPathResponse(
        message="Brand path retrieved successfully",
        brand_id=brand_id,
        path=[BrandOut.model_validate(node) for node in path],
    )


@router.post("", response_model=BrandResponse, status_code=status.HTTP_201_CREATED)
async def add_brand(body: BrandCreate, db: DbSession) -> BrandResponse:
    node = await TaxonomyTree(db, BRAND_TREE).add(
        body.name,
        body.type,
        parent_id=body.parent_id,
        description=body.description,
    )
    return BrandResponse(
        message="Brand added successfully",
        brand=BrandOut.model_validate(node),
    )


@router.put("/{brand_id}", response_model=BrandResponse)
async def update_brand(brand_id: int, body: NodeUpdate, db: DbSession) -> BrandResponse:
    node = await TaxonomyTree(db, BRAND_TREE).update(
        brand_id,
        name=body.name,
        parent_id=body.parent_id,
    )
    return BrandResponse(
        message="Brand updated successfully",
        brand=BrandOut.model_validate(node),
    )


@router.delete("/{brand_id}", response_model=MessageResponse)
async def delete_brand(brand_id: int, db: DbSession) -> MessageResponse:
    await TaxonomyTree(db, BRAND_TREE).delete(brand_id)
    return MessageResponse(message="Brand deleted successfully")
