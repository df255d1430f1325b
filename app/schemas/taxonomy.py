"""Schemas for the category and brand trees."""

from pydantic import Field

from app.schemas.common import CamelModel


class CategoryOut(CamelModel):
    id: int
    name: str
    level: str
    parent_id: int | None = None
    description: str | None = None
    is_active: bool = True


class BrandOut(CamelModel):
    id: int
    name: str
    type: str
    parent_id: int | None = None
    description: str | None = None
    is_active: bool = True


class CategoryCreate(CamelModel):
    """Body of POST /categories.

    Fields are optional here so the service can answer MISSING_FIELDS
    instead of a schema error.
    """

    name: str | None = Field(default=None, max_length=200)
    level: str | None = Field(default=None, description="page, blue, white or gray")
    parent_id: int | None = None
    description: str | None = None


class BrandCreate(CamelModel):
    name: str | None = Field(default=None, max_length=200)
    type: str | None = Field(default=None, description="brand, line or collaboration")
    parent_id: int | None = None
    description: str | None = None


class NodeUpdate(CamelModel):
    """Body of PUT /categories/{id} and PUT /brands/{id}."""

    name: str | None = Field(default=None, max_length=200)
    parent_id: int | None = None


class CategoryResponse(CamelModel):
    message: str
    category: CategoryOut


class CategoryListResponse(CamelModel):
    message: str
    categories: list[CategoryOut]


class CategorySearchResponse(CategoryListResponse):
    query: str


class CategoryPathResponse(CamelModel):
    message: str
    category_id: int
    path: list[CategoryOut]


class BrandResponse(CamelModel):
    message: str
    brand: BrandOut


class BrandListResponse(CamelModel):
    message: str
    brands: list[BrandOut]


class BrandSearchResponse(BrandListResponse):
    query: str


class BrandPathResponse(CamelModel):
    message: str
    brand_id: int
    path: list[BrandOut]


# =============================================================================
# Hierarchy builder
# =============================================================================


class CategoryHierarchyRequest(CamelModel):
    page: str | None = None
    blue_subcategory: str | None = None
    white_subcategory: str | None = None
    gray_subcategory: str | None = None


class BrandHierarchyRequest(CamelModel):
    brand: str | None = None
    line: str | None = None
    collaboration: str | None = None


class CategoryHierarchyOut(CamelModel):
    deepest: CategoryOut
    path: list[CategoryOut]
    created_ids: list[int] = Field(default_factory=list)


class BrandHierarchyOut(CamelModel):
    deepest: BrandOut
    path: list[BrandOut]
    created_ids: list[int] = Field(default_factory=list)


class CategoryHierarchyResponse(CamelModel):
    message: str
    hierarchy: CategoryHierarchyOut


class BrandHierarchyResponse(CamelModel):
    message: str
    hierarchy: BrandHierarchyOut
