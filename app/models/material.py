"""VufsMaterial model - fibre/material vocabulary."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import ActiveMixin, Base
from app.models.enums import MaterialCategory


class VufsMaterial(Base, ActiveMixin):
    """Material grouped as natural, synthetic or blend."""

    __tablename__ = "vufs_materials"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False, index=True)
    category: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=MaterialCategory.NATURAL.value,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<VufsMaterial(id={self.id}, name='{self.name}', category='{self.category}')>"
