"""CRUD for the flat VUFS vocabularies.

Colors, materials, patterns, fits, sizes, standards and care instructions
share one shape: a unique ``name`` plus a few optional fields. Name
collisions are detected by the database's unique constraint inside a
SAVEPOINT rather than by a prior lookup, so two concurrent inserts of the
same name resolve to one row and one ``ConflictError``.
"""

from dataclasses import dataclass
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.core.errors import ConflictError, NotFoundError, ValidationError
from app.infra.logging import get_logger
from app.models import (
    VufsCareInstruction,
    VufsColor,
    VufsFit,
    VufsMaterial,
    VufsPattern,
    VufsSize,
    VufsStandard,
)
from app.services.query_utils import LIKE_ESCAPE, contains_pattern, require_query

logger = get_logger(__name__)


@dataclass(frozen=True)
class CatalogEntity:
    """Static description of one flat vocabulary.

    Attributes:
        key: Singular identifier ("color"), also the response envelope key
        plural: Plural identifier ("colors"), used for routes and list envelopes
        label: Display name used in messages
        model: Mapped class
        fields: Optional columns besides ``name`` that callers may set
        filters: Columns that list_items() accepts as equality filters
        order_by: Columns for list ordering
    """

    key: str
    plural: str
    label: str
    model: type[Any]
    fields: tuple[str, ...] = ()
    filters: tuple[str, ...] = ()
    order_by: tuple[str, ...] = ("name",)


COLOR = CatalogEntity("color", "colors", "Color", VufsColor, fields=("hex_code",))
MATERIAL = CatalogEntity(
    "material", "materials", "Material", VufsMaterial,
    fields=("category",), filters=("category",),
)
PATTERN = CatalogEntity("pattern", "patterns", "Pattern", VufsPattern)
FIT = CatalogEntity("fit", "fits", "Fit", VufsFit)
SIZE = CatalogEntity(
    "size", "sizes", "Size", VufsSize,
    fields=("sort_order",), order_by=("sort_order", "name"),
)
STANDARD = CatalogEntity(
    "standard", "standards", "Standard", VufsStandard,
    fields=("label", "region", "category", "approach", "description"),
    filters=("region", "category"),
)
CARE_INSTRUCTION = CatalogEntity(
    "care_instruction", "care_instructions", "Care instruction", VufsCareInstruction,
    fields=("category",), filters=("category",),
)

CATALOG_ENTITIES: dict[str, CatalogEntity] = {
    entity.key: entity
    for entity in (COLOR, MATERIAL, PATTERN, FIT, SIZE, STANDARD, CARE_INSTRUCTION)
}


class CatalogRepository:
    """CRUD operations for one flat vocabulary within a session."""

    def __init__(
        self,
        session: AsyncSession,
        entity: CatalogEntity,
        search_limit: int | None = None,
    ) -> None:
        self.session = session
        self.entity = entity
        self.search_limit = search_limit or settings.search_result_limit

    @property
    def model(self) -> type[Any]:
        return self.entity.model

    def _ordering(self) -> list[Any]:
        return [getattr(self.model, column) for column in self.entity.order_by]

    def _clean_fields(self, fields: dict[str, Any]) -> dict[str, Any]:
        unknown = set(fields) - set(self.entity.fields)
        if unknown:
            raise ValidationError(
                f"Unknown {self.entity.label.lower()} fields: {', '.join(sorted(unknown))}",
                code="VALIDATION_ERROR",
            )
        return {key: value for key, value in fields.items() if value is not None}

    async def list_items(self, **filters: Any) -> list[Any]:
        stmt = select(self.model).where(self.model.is_active.is_(True))
        for column, value in filters.items():
            if column not in self.entity.filters:
                raise ValidationError(
                    f"Cannot filter {self.entity.plural} by {column}",
                    code="VALIDATION_ERROR",
                )
            if value is not None:
                stmt = stmt.where(getattr(self.model, column) == value)
        stmt = stmt.order_by(*self._ordering())

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def search(self, query: str | None) -> list[Any]:
        term = require_query(query)
        stmt = (
            select(self.model)
            .where(
                self.model.is_active.is_(True),
                self.model.name.ilike(contains_pattern(term), escape=LIKE_ESCAPE),
            )
            .order_by(*self._ordering())
            .limit(self.search_limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get(self, item_id: int) -> Any:
        item = await self.session.get(self.model, item_id)
        if item is None:
            raise NotFoundError(f"{self.entity.label} {item_id} not found")
        return item

    async def add(self, name: str | None, **fields: Any) -> Any:
        """Insert a row.

        Raises:
            ValidationError: If name is missing
            ConflictError: If the name is already taken
        """
        name = name.strip() if isinstance(name, str) else ""
        if not name:
            raise ValidationError("name is required")

        item = self.model(name=name, is_active=True, **self._clean_fields(fields))
        try:
            async with self.session.begin_nested():
                self.session.add(item)
        except IntegrityError as e:
            raise ConflictError(f'{self.entity.label} "{name}" already exists') from e

        logger.info(f"{self.entity.label} created", item_id=item.id, name=name)
        return item

    async def update(self, item_id: int, name: str | None = None, **fields: Any) -> Any:
        """Rename a row and/or change its optional fields.

        Raises:
            ValidationError: If nothing is given to change
            NotFoundError: If the id does not exist
            ConflictError: If the new name belongs to another row
        """
        changes = self._clean_fields(fields)
        if name is not None:
            name = name.strip()
            if not name:
                raise ValidationError("name cannot be empty")
            changes["name"] = name
        if not changes:
            raise ValidationError("Nothing to update")

        item = await self.get(item_id)
        try:
            async with self.session.begin_nested():
                for column, value in changes.items():
                    setattr(item, column, value)
        except IntegrityError as e:
            raise ConflictError(
                f'{self.entity.label} "{changes.get("name", item_id)}" already exists'
            ) from e

        logger.info(f"{self.entity.label} updated", item_id=item_id, fields=sorted(changes))
        return item

    async def delete(self, item_id: int) -> None:
        item = await self.get(item_id)
        await self.session.delete(item)
        await self.session.flush()
        logger.info(f"{self.entity.label} deleted", item_id=item_id)
