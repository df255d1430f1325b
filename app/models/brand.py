"""VufsBrand model - brand -> line -> collaboration tree."""

from sqlalchemy import ForeignKey, Index, Integer, String, Text, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import ActiveMixin, Base, TimestampMixin


class VufsBrand(Base, TimestampMixin, ActiveMixin):
    """Brand node. ``type`` holds a BrandType value."""

    __tablename__ = "vufs_brands"
    __table_args__ = (
        UniqueConstraint("name", "type", "parent_id", name="uq_vufs_brands_sibling"),
        # NULL parents never collide in the constraint above
        Index(
            "uq_vufs_brands_root",
            "name",
            "type",
            unique=True,
            postgresql_where=text("parent_id IS NULL"),
            sqlite_where=text("parent_id IS NULL"),
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    type: Mapped[str] = mapped_column(String(16), nullable=False, index=True)
    parent_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("vufs_brands.id"),
        nullable=True,
        index=True,
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<VufsBrand(id={self.id}, type='{self.type}', name='{self.name}')>"
