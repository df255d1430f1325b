"""Schemas for bulk import and item metadata."""

from typing import Any

from pydantic import Field

from app.schemas.common import CamelModel


class BulkRequest(CamelModel):
    type: str | None = Field(default=None, description="Target vocabulary, e.g. 'Colors'")
    items: list[str] | None = Field(default=None, description="Plain names to create")
    attribute_slug: str | None = Field(
        default=None,
        description="Attribute type receiving the values (attribute imports only)",
    )


class BulkItemErrorOut(CamelModel):
    item: str
    message: str


class BulkResultOut(CamelModel):
    created_count: int
    skipped_count: int
    errors: list[BulkItemErrorOut] = Field(default_factory=list)


class BulkResponse(CamelModel):
    message: str
    result: BulkResultOut


# =============================================================================
# Item metadata
# =============================================================================


class CompositionEntryIn(CamelModel):
    material: str = Field(min_length=1)
    percentage: float = Field(ge=0, le=100)


class ColorEntryIn(CamelModel):
    name: str = Field(min_length=1)
    hex: str | None = Field(default=None, pattern=r"^#[0-9A-Fa-f]{6}$")


class ItemMetadataRequest(CamelModel):
    composition: list[CompositionEntryIn] | None = None
    colors: list[ColorEntryIn] | None = None
    care_instructions: list[str] | None = None
    acquisition_info: dict[str, Any] | None = None
    pricing: dict[str, Any] | None = None


class ItemMetadataOut(CamelModel):
    composition: list[CompositionEntryIn]
    colors: list[ColorEntryIn]
    care_instructions: list[str]
    acquisition_info: dict[str, Any]
    pricing: dict[str, Any]


class ItemMetadataResponse(CamelModel):
    message: str
    metadata: ItemMetadataOut
