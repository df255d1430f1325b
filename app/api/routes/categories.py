"""Category tree endpoints (page -> blue -> white -> gray)."""

from typing import Annotated

from fastapi import APIRouter, Query, status

from app.api.deps import DbSession
from app.schemas.common import MessageResponse
from app.schemas.taxonomy import (
    CategoryCreate,
    CategoryListResponse,
    CategoryOut,
    CategoryPathResponse,
    CategoryResponse,
    CategorySearchResponse,
    NodeUpdate,
)
from app.services.taxonomy_tree import CATEGORY_TREE, TaxonomyTree

router = APIRouter()


@router.get("", response_model=CategoryListResponse)
async def list_categories(
    db: DbSession,
    level: str | None = None,
    parent_id: Annotated[int | None, Query(alias="parentId")] = None,
) -> CategoryListResponse:
    """List active categories, optionally one level and/or one parent."""
    nodes = await TaxonomyTree(db, CATEGORY_TREE).list_nodes(level, parent_id)
    return CategoryListResponse(
        message="Categories retrieved successfully",
        categories=[CategoryOut.model_validate(node) for node in nodes],
    )


@router.get("/search", response_model=CategorySearchResponse)
async def search_categories(
    db: DbSession,
    q: str | None = None,
) -> CategorySearchResponse:
    nodes = await TaxonomyTree(db, CATEGORY_TREE).search(q)
    return CategorySearchResponse(
        message="Category search completed",
        query=q or "",
        categories=[CategoryOut.model_validate(node) for node in nodes],
    )


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(category_id: int, db: DbSession) -> CategoryResponse:
    node = await TaxonomyTree(db, CATEGORY_TREE).get(category_id)
    return CategoryResponse(
        message="Category retrieved successfully",
        category=CategoryOut.model_validate(node),
    )


@router.get("/{category_id}/path", response_model=CategoryPathResponse)
async def get_category_path(category_id: int, db: DbSession) -> CategoryPathResponse:
    """Breadcrumb from the page category down to ``category_id``."""
    path = await TaxonomyTree(db, CATEGORY_TREE).get_path(category_id)
    return CategoryPathResponse(
        message="Category path retrieved successfully",
        category_id=category_id,
        path=[CategoryOut.model_validate(node) for node in path],
    )


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def add_category(body: CategoryCreate, db: DbSession) -> CategoryResponse:
    node = await TaxonomyTree(db, CATEGORY_TREE).add(
        body.name,
        body.level,
        parent_id=body.parent_id,
        description=body.description,
    )
    return CategoryResponse(
        message="Category added successfully",
        category=CategoryOut.model_validate(node),
    )


@router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: int,
    body: NodeUpdate,
    db: DbSession,
) -> CategoryResponse:
    """Rename and/or move a category under another parent of the level above."""
    node = await TaxonomyTree(db, CATEGORY_TREE).update(
        category_id,
        name=body.name,
        parent_id=body.parent_id,
    )
    return CategoryResponse(
        message="Category updated successfully",
        category=CategoryOut.model_validate(node),
    )


@router.delete("/{category_id}", response_model=MessageResponse)
async def delete_category(category_id: int, db: DbSession) -> MessageResponse:
    await TaxonomyTree(db, CATEGORY_TREE).delete(category_id)
    return MessageResponse(message="Category deleted successfully")
