"""Schemas for attribute types, attribute values and the attribute matrix."""

from pydantic import Field

from app.schemas.common import CamelModel


class AttributeTypeOut(CamelModel):
    id: int
    slug: str
    name: str
    is_active: bool = True


class AttributeValueOut(CamelModel):
    id: int
    type_slug: str
    name: str
    is_active: bool = True


class AttributeTypeCreate(CamelModel):
    name: str | None = Field(default=None, max_length=120)
    slug: str | None = Field(default=None, max_length=120, description="Derived from name when omitted")


class AttributeTypeUpdate(CamelModel):
    name: str | None = Field(default=None, max_length=120)


class AttributeValueCreate(CamelModel):
    name: str | None = Field(default=None, max_length=120)


class AttributeValueUpdate(AttributeValueCreate):
    pass


class AttributeTypeResponse(CamelModel):
    message: str
    attribute_type: AttributeTypeOut


class AttributeTypeListResponse(CamelModel):
    message: str
    attribute_types: list[AttributeTypeOut]


class AttributeValueResponse(CamelModel):
    message: str
    value: AttributeValueOut


class AttributeValueListResponse(CamelModel):
    message: str
    attribute_slug: str
    values: list[AttributeValueOut]


# =============================================================================
# Attribute matrix
# =============================================================================


class AttributeEntryOut(CamelModel):
    kind: str
    entity_id: int
    attribute_slug: str
    value: str
    attribute_name: str | None = None


class MatrixCellResponse(CamelModel):
    success: bool = True
    attribute: AttributeEntryOut


class MatrixListResponse(CamelModel):
    success: bool = True
    attributes: list[AttributeEntryOut]
