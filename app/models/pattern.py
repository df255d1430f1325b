"""VufsPattern model."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import ActiveMixin, Base


class VufsPattern(Base, ActiveMixin):
    """Print/pattern name (stripes, plaid, ...)."""

    __tablename__ = "vufs_patterns"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<VufsPattern(id={self.id}, name='{self.name}')>"
