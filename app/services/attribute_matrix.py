"""Attribute matrix: sparse (entity, attribute slug) -> value overlay.

Categories, brands and sizes can carry arbitrary named attributes without
schema changes. Each (entity, slug) pair holds at most one value and
setting it again overwrites. Slugs are not checked against
``VufsAttributeType``; values for unknown slugs are stored as given.
"""

from dataclasses import dataclass
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import NotFoundError, ValidationError
from app.infra.logging import get_logger
from app.models import (
    AttributeKind,
    VufsAttributeType,
    VufsBrand,
    VufsBrandAttribute,
    VufsCategory,
    VufsCategoryAttribute,
    VufsSize,
    VufsSizeAttribute,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class MatrixDefinition:
    kind: AttributeKind
    model: type[Any]
    entity_model: type[Any]
    entity_column: str


MATRICES: dict[AttributeKind, MatrixDefinition] = {
    AttributeKind.CATEGORY: MatrixDefinition(
        AttributeKind.CATEGORY, VufsCategoryAttribute, VufsCategory, "category_id"
    ),
    AttributeKind.BRAND: MatrixDefinition(
        AttributeKind.BRAND, VufsBrandAttribute, VufsBrand, "brand_id"
    ),
    AttributeKind.SIZE: MatrixDefinition(
        AttributeKind.SIZE, VufsSizeAttribute, VufsSize, "size_id"
    ),
}


@dataclass
class AttributeEntry:
    """One matrix cell as returned to callers."""

    kind: str
    entity_id: int
    attribute_slug: str
    value: str
    attribute_name: str | None = None


class AttributeMatrix:
    """Reads and upserts attribute matrix cells."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _matrix(self, kind: AttributeKind | str) -> MatrixDefinition:
        try:
            return MATRICES[AttributeKind(kind)]
        except ValueError:
            raise ValidationError(
                f"Unknown attribute kind '{kind}'",
                code="VALIDATION_ERROR",
            ) from None

    def _entry(self, matrix: MatrixDefinition, record: Any, name: str | None = None) -> AttributeEntry:
        return AttributeEntry(
            kind=matrix.kind.value,
            entity_id=getattr(record, matrix.entity_column),
            attribute_slug=record.attribute_slug,
            value=record.value,
            attribute_name=name,
        )

    async def _find(self, matrix: MatrixDefinition, entity_id: int, slug: str) -> Any | None:
        stmt = select(matrix.model).where(
            getattr(matrix.model, matrix.entity_column) == entity_id,
            matrix.model.attribute_slug == slug,
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def _overwrite(self, record: Any, value: str) -> None:
        async with self.session.begin_nested():
            record.value = value

    async def set_attribute(
        self,
        kind: AttributeKind | str,
        entity_id: int | None,
        attribute_slug: str | None,
        value: str | None,
    ) -> AttributeEntry:
        """Upsert the value of ``attribute_slug`` on one entity.

        Raises:
            ValidationError: If entity id, slug or value is missing
            NotFoundError: If the entity does not exist
        """
        matrix = self._matrix(kind)
        slug = attribute_slug.strip() if isinstance(attribute_slug, str) else ""
        if entity_id is None or not slug or value is None:
            raise ValidationError(
                f"{matrix.entity_column}, attributeSlug and value are required"
            )

        if await self.session.get(matrix.entity_model, entity_id) is None:
            raise NotFoundError(f"{matrix.kind.value.capitalize()} {entity_id} not found")

        record = await self._find(matrix, entity_id, slug)
        if record is not None:
            await self._overwrite(record, value)
        else:
            record = matrix.model(**{matrix.entity_column: entity_id}, attribute_slug=slug, value=value)
            try:
                async with self.session.begin_nested():
                    self.session.add(record)
            except IntegrityError:
                # Lost an insert race for the same cell; overwrite the winner
                record = await self._find(matrix, entity_id, slug)
                if record is None:
                    raise
                await self._overwrite(record, value)

        logger.info(
            "Attribute set",
            kind=matrix.kind.value,
            entity_id=entity_id,
            attribute_slug=slug,
        )
        return self._entry(matrix, record)

    async def get_attributes(self, kind: AttributeKind | str, entity_id: int) -> list[AttributeEntry]:
        """All cells of one entity, with the attribute type name when it exists."""
        matrix = self._matrix(kind)
        stmt = (
            select(matrix.model, VufsAttributeType.name)
            .outerjoin(VufsAttributeType, VufsAttributeType.slug == matrix.model.attribute_slug)
            .where(getattr(matrix.model, matrix.entity_column) == entity_id)
            .order_by(matrix.model.attribute_slug)
        )
        result = await self.session.execute(stmt)
        return [self._entry(matrix, record, name) for record, name in result.all()]

    async def get_all_attributes(self, kind: AttributeKind | str) -> list[AttributeEntry]:
        """Every cell of one kind, for the matrix grid view."""
        matrix = self._matrix(kind)
        stmt = select(matrix.model).order_by(
            getattr(matrix.model, matrix.entity_column),
            matrix.model.attribute_slug,
        )
        result = await self.session.execute(stmt)
        return [self._entry(matrix, record) for record in result.scalars().all()]
