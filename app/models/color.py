"""VufsColor model - color vocabulary."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import ActiveMixin, Base


class VufsColor(Base, ActiveMixin):
    """Color with hex code for UI swatches."""

    __tablename__ = "vufs_colors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False, index=True)
    hex_code: Mapped[str] = mapped_column(String(7), nullable=False, default="#000000")

    def __repr__(self) -> str:
        return f"<VufsColor(id={self.id}, name='{self.name}', hex='{self.hex_code}')>"
