"""VufsFit model."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import ActiveMixin, Base


class VufsFit(Base, ActiveMixin):
    __tablename__ = "vufs_fits"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<VufsFit(id={self.id}, name='{self.name}')>"
