"""VufsCategory model - four-level category tree."""

from sqlalchemy import ForeignKey, Index, Integer, String, Text, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import ActiveMixin, Base, TimestampMixin


class VufsCategory(Base, TimestampMixin, ActiveMixin):
    """Category node (page -> blue -> white -> gray).

    ``level`` holds a CategoryLevel value; ``parent_id`` points at the node
    one level up and is NULL only for page nodes.
    """

    __tablename__ = "vufs_categories"
    __table_args__ = (
        UniqueConstraint("name", "level", "parent_id", name="uq_vufs_categories_sibling"),
        # NULL parents never collide in the constraint above
        Index(
            "uq_vufs_categories_root",
            "name",
            "level",
            unique=True,
            postgresql_where=text("parent_id IS NULL"),
            sqlite_where=text("parent_id IS NULL"),
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    level: Mapped[str] = mapped_column(String(16), nullable=False, index=True)
    parent_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("vufs_categories.id"),
        nullable=True,
        index=True,
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<VufsCategory(id={self.id}, level='{self.level}', name='{self.name}')>"
