"""Pydantic schemas for request/response validation."""

from app.schemas.attributes import (
    AttributeEntryOut,
    AttributeTypeOut,
    AttributeValueOut,
)
from app.schemas.bulk import BulkRequest, BulkResponse, ItemMetadataRequest, ItemMetadataResponse
from app.schemas.common import CamelModel, ErrorResponse, HealthResponse, MessageResponse
from app.schemas.taxonomy import BrandOut, CategoryOut

__all__ = [
    "AttributeEntryOut",
    "AttributeTypeOut",
    "AttributeValueOut",
    "BrandOut",
    "BulkRequest",
    "BulkResponse",
    "CamelModel",
    "CategoryOut",
    "ErrorResponse",
    "HealthResponse",
    "ItemMetadataRequest",
    "ItemMetadataResponse",
    "MessageResponse",
]
