"""Attribute type, attribute value and attribute matrix endpoints."""

from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, status
from pydantic import BaseModel, create_model

from app.api.deps import DbSession
from app.models import AttributeKind
from app.schemas.attributes import (
    AttributeEntryOut,
    AttributeTypeCreate,
    AttributeTypeListResponse,
    AttributeTypeOut,
    AttributeTypeResponse,
    AttributeTypeUpdate,
    AttributeValueCreate,
    AttributeValueListResponse,
    AttributeValueOut,
    AttributeValueResponse,
    AttributeValueUpdate,
    MatrixCellResponse,
    MatrixListResponse,
)
from app.schemas.common import CamelModel, MessageResponse
from app.services.attribute_matrix import MATRICES, AttributeEntry, AttributeMatrix
from app.services.attribute_types import AttributeTypeService

router = APIRouter()


# =============================================================================
# Attribute types
# =============================================================================


@router.get("/attribute-types", response_model=AttributeTypeListResponse)
async def list_attribute_types(db: DbSession) -> AttributeTypeListResponse:
    types = await AttributeTypeService(db).list_types()
    return AttributeTypeListResponse(
        message="Attribute types retrieved successfully",
        attribute_types=[AttributeTypeOut.model_validate(t) for t in types],
    )


@router.post(
    "/attribute-types",
    response_model=AttributeTypeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_attribute_type(body: AttributeTypeCreate, db: DbSession) -> AttributeTypeResponse:
    """Create an attribute type; the slug is derived from the name unless given."""
    attribute_type = await AttributeTypeService(db).add_type(body.name, body.slug)
    return AttributeTypeResponse(
        message="Attribute type added successfully",
        attribute_type=AttributeTypeOut.model_validate(attribute_type),
    )


@router.put("/attribute-types/{slug}", response_model=AttributeTypeResponse)
async def update_attribute_type(
    slug: str,
    body: AttributeTypeUpdate,
    db: DbSession,
) -> AttributeTypeResponse:
    attribute_type = await AttributeTypeService(db).update_type(slug, body.name)
    return AttributeTypeResponse(
        message="Attribute type updated successfully",
        attribute_type=AttributeTypeOut.model_validate(attribute_type),
    )


@router.delete("/attribute-types/{slug}", response_model=MessageResponse)
async def delete_attribute_type(slug: str, db: DbSession) -> MessageResponse:
    await AttributeTypeService(db).delete_type(slug)
    return MessageResponse(message="Attribute type deleted successfully")


# =============================================================================
# Attribute values
# =============================================================================


@router.get("/attribute-types/{slug}/values", response_model=AttributeValueListResponse)
async def list_attribute_values(slug: str, db: DbSession) -> AttributeValueListResponse:
    values = await AttributeTypeService(db).list_values(slug)
    return AttributeValueListResponse(
        message="Attribute values retrieved successfully",
        attribute_slug=slug,
        values=[AttributeValueOut.model_validate(v) for v in values],
    )


@router.post(
    "/attribute-types/{slug}/values",
    response_model=AttributeValueResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_attribute_value(
    slug: str,
    body: AttributeValueCreate,
    db: DbSession,
) -> AttributeValueResponse:
    value = await AttributeTypeService(db).add_value(slug, body.name)
    return AttributeValueResponse(
        message="Attribute value added successfully",
        value=AttributeValueOut.model_validate(value),
    )


@router.put("/attribute-values/{value_id}", response_model=AttributeValueResponse)
async def update_attribute_value(
    value_id: int,
    body: AttributeValueUpdate,
    db: DbSession,
) -> AttributeValueResponse:
    value = await AttributeTypeService(db).update_value(value_id, body.name)
    return AttributeValueResponse(
        message="Attribute value updated successfully",
        value=AttributeValueOut.model_validate(value),
    )


@router.delete("/attribute-values/{value_id}", response_model=MessageResponse)
async def delete_attribute_value(value_id: int, db: DbSession) -> MessageResponse:
    await AttributeTypeService(db).delete_value(value_id)
    return MessageResponse(message="Attribute value deleted successfully")


# =============================================================================
# Attribute matrix (category-, brand- and size-attributes)
# =============================================================================


def _entry_out(entry: AttributeEntry) -> AttributeEntryOut:
    return AttributeEntryOut.model_validate(asdict(entry))


def build_matrix_router(kind: AttributeKind) -> APIRouter:
    """GET/POST ``/<kind>-attributes`` and GET ``/<kind>-attributes/{id}``."""
    matrix_router = APIRouter()
    entity_column = MATRICES[kind].entity_column

    # Body carries the entity id under its own name (categoryId, brandId, sizeId)
    SetAttributeBody: type[BaseModel] = create_model(
        f"Set{kind.value.capitalize()}AttributeRequest",
        __base__=CamelModel,
        attribute_slug=(str | None, None),
        value=(str | None, None),
        **{entity_column: (int | None, None)},
    )

    @matrix_router.get("", response_model=MatrixListResponse)
    async def get_all_attributes(db: DbSession) -> MatrixListResponse:
        entries = await AttributeMatrix(db).get_all_attributes(kind)
        return MatrixListResponse(attributes=[_entry_out(e) for e in entries])

    @matrix_router.post("", response_model=MatrixCellResponse)
    async def set_attribute(body: SetAttributeBody, db: DbSession) -> Any:  # type: ignore[valid-type]
        entry = await AttributeMatrix(db).set_attribute(
            kind,
            getattr(body, entity_column),
            body.attribute_slug,
            body.value,
        )
        return MatrixCellResponse(attribute=_entry_out(entry))

    @matrix_router.get("/{entity_id}", response_model=MatrixListResponse)
    async def get_attributes(entity_id: int, db: DbSession) -> MatrixListResponse:
        entries = await AttributeMatrix(db).get_attributes(kind, entity_id)
        return MatrixListResponse(attributes=[_entry_out(e) for e in entries])

    return matrix_router


for _kind in AttributeKind:
    router.include_router(build_matrix_router(_kind), prefix=f"/{_kind.value}-attributes")
