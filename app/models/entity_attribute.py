"""Sparse attribute matrix rows: (entity, attribute slug) -> value.

``attribute_slug`` is deliberately not a foreign key; values may be stored
for slugs that have no VufsAttributeType row.
"""

from sqlalchemy import ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, TimestampMixin


class VufsCategoryAttribute(Base, TimestampMixin):
    __tablename__ = "vufs_category_attributes"
    __table_args__ = (
        UniqueConstraint("category_id", "attribute_slug", name="uq_vufs_category_attributes"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    category_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("vufs_categories.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    attribute_slug: Mapped[str] = mapped_column(String(120), nullable=False, index=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)


class VufsBrandAttribute(Base, TimestampMixin):
    __tablename__ = "vufs_brand_attributes"
    __table_args__ = (
        UniqueConstraint("brand_id", "attribute_slug", name="uq_vufs_brand_attributes"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    brand_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("vufs_brands.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    attribute_slug: Mapped[str] = mapped_column(String(120), nullable=False, index=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)


class VufsSizeAttribute(Base, TimestampMixin):
    __tablename__ = "vufs_size_attributes"
    __table_args__ = (
        UniqueConstraint("size_id", "attribute_slug", name="uq_vufs_size_attributes"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    size_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("vufs_sizes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    attribute_slug: Mapped[str] = mapped_column(String(120), nullable=False, index=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
