"""Domain exceptions for the taxonomy service.

Every exception carries a machine-readable ``code`` and the HTTP status the
API layer answers with. Handlers in ``app.main`` render them as
``{"error": {"code": ..., "message": ...}}``.

Hierarchy:
    TaxonomyError
    ├── ValidationError (400)
    │   └── UnsupportedTypeError (400)
    ├── NotFoundError (404)
    ├── ConflictError (409)
    └── TaxonomyCycleError (500)
"""

from typing import Any


class TaxonomyError(Exception):
    """Base class for all expected taxonomy failures."""

    status_code: int = 500
    default_code: str = "INTERNAL_SERVER_ERROR"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail = detail

    def to_dict(self) -> dict[str, Any]:
        """Render the error envelope body."""
        return {"error": {"code": self.code, "message": self.message}}


class ValidationError(TaxonomyError):
    """A required field is missing or a value is not acceptable."""

    status_code = 400
    default_code = "MISSING_FIELDS"


class UnsupportedTypeError(ValidationError):
    """Bulk import was asked for an entity type it does not know."""

    default_code = "UNSUPPORTED_TYPE"


class NotFoundError(TaxonomyError):
    """Lookup by id (or slug/key) found nothing."""

    status_code = 404
    default_code = "NOT_FOUND"


class ConflictError(TaxonomyError):
    """A uniqueness rule was violated, or a delete would orphan children."""

    status_code = 409
    default_code = "CONFLICT"


class TaxonomyCycleError(TaxonomyError):
    """A parent chain loops back on itself or exceeds the tree depth."""

    status_code = 500
    default_code = "TAXONOMY_CYCLE"
