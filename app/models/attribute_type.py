"""Dynamic attribute types and their allowed values."""

from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import ActiveMixin, Base, TimestampMixin


class VufsAttributeType(Base, TimestampMixin, ActiveMixin):
    """Named attribute column of the attribute matrix, keyed by slug."""

    __tablename__ = "vufs_attribute_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    slug: Mapped[str] = mapped_column(String(120), unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False)

    def __repr__(self) -> str:
        return f"<VufsAttributeType(slug='{self.slug}', name='{self.name}')>"


class VufsAttributeValue(Base, ActiveMixin):
    """Allowed value of an attribute type; unique within its type."""

    __tablename__ = "vufs_attribute_values"
    __table_args__ = (
        UniqueConstraint("type_slug", "name", name="uq_vufs_attribute_values_type_name"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    type_slug: Mapped[str] = mapped_column(
        String(120),
        ForeignKey("vufs_attribute_types.slug", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(120), nullable=False)

    def __repr__(self) -> str:
        return f"<VufsAttributeValue(id={self.id}, type='{self.type_slug}', name='{self.name}')>"
