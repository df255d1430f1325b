"""Tests for the domain exception hierarchy."""

import pytest

from app.core.errors import (
    ConflictError,
    NotFoundError,
    TaxonomyCycleError,
    TaxonomyError,
    UnsupportedTypeError,
    ValidationError,
)


class TestTaxonomyErrors:
    """Status codes, default codes and the error envelope."""

    @pytest.mark.parametrize(
        "error_class,status_code,code",
        [
            (ValidationError, 400, "MISSING_FIELDS"),
            (UnsupportedTypeError, 400, "UNSUPPORTED_TYPE"),
            (NotFoundError, 404, "NOT_FOUND"),
            (ConflictError, 409, "CONFLICT"),
            (TaxonomyCycleError, 500, "TAXONOMY_CYCLE"),
        ],
    )
    def test_defaults(self, error_class, status_code, code):
        error = error_class("boom")
        assert isinstance(error, TaxonomyError)
        assert error.status_code == status_code
        assert error.code == code
        assert str(error) == "boom"

    def test_code_override(self):
        error = ValidationError("Search query is required", code="MISSING_QUERY")
        assert error.code == "MISSING_QUERY"
        assert error.status_code == 400

    def test_unsupported_type_is_validation_error(self):
        assert issubclass(UnsupportedTypeError, ValidationError)

    def test_to_dict_envelope(self):
        error = ConflictError("Color \"Red\" already exists")
        assert error.to_dict() == {
            "error": {"code": "CONFLICT", "message": "Color \"Red\" already exists"}
        }
