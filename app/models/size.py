"""VufsSize model - size labels with display ordering."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import ActiveMixin, Base


class VufsSize(Base, ActiveMixin):
    """Size label (XS, S, 38, 10.5, ...).

    ``sort_order`` drives list ordering since size labels do not sort
    alphabetically.
    """

    __tablename__ = "vufs_sizes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False, index=True)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<VufsSize(id={self.id}, name='{self.name}', sort_order={self.sort_order})>"
