"""VufsCareInstruction model."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import ActiveMixin, Base
from app.models.enums import CareCategory


class VufsCareInstruction(Base, ActiveMixin):
    """Care label instruction, grouped by washing/drying/ironing/etc."""

    __tablename__ = "vufs_care_instructions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), unique=True, nullable=False, index=True)
    category: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=CareCategory.WASHING.value,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<VufsCareInstruction(id={self.id}, name='{self.name}')>"
