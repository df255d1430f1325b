"""Tests for the shared model base and mixins."""

from sqlalchemy.orm import DeclarativeBase

from app.models import Base, VufsCategory, VufsColor
from app.models.base import ActiveMixin, TimestampMixin


def test_base_is_declarative():
    assert issubclass(Base, DeclarativeBase)


def test_every_table_is_prefixed():
    assert Base.metadata.tables
    assert all(name.startswith("vufs_") for name in Base.metadata.tables)


def test_mixins_add_columns():
    columns = VufsCategory.__table__.columns
    assert {"created_at", "updated_at", "is_active"} <= set(columns.keys())
    assert issubclass(VufsColor, ActiveMixin)
    assert issubclass(VufsCategory, TimestampMixin)


def test_is_active_defaults_true():
    assert VufsColor.__table__.columns["is_active"].default.arg is True
