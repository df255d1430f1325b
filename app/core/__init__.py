"""Core module - Domain errors and naming helpers."""

from app.core.errors import (
    ConflictError,
    NotFoundError,
    TaxonomyCycleError,
    TaxonomyError,
    UnsupportedTypeError,
    ValidationError,
)
from app.core.slug import slugify

__all__ = [
    "ConflictError",
    "NotFoundError",
    "TaxonomyCycleError",
    "TaxonomyError",
    "UnsupportedTypeError",
    "ValidationError",
    "slugify",
]
