"""Attribute type and attribute value management."""

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import ConflictError, NotFoundError, ValidationError
from app.core.slug import slugify
from app.infra.logging import get_logger
from app.models import VufsAttributeType, VufsAttributeValue

logger = get_logger(__name__)


def _required_name(name: str | None) -> str:
    name = name.strip() if isinstance(name, str) else ""
    if not name:
        raise ValidationError("name is required")
    return name


class AttributeTypeService:
    """CRUD for attribute types (keyed by slug) and their allowed values."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    # ------------------------------------------------------------------
    # Types
    # ------------------------------------------------------------------

    async def list_types(self) -> list[VufsAttributeType]:
        stmt = select(VufsAttributeType).order_by(VufsAttributeType.name)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_type(self, slug: str) -> VufsAttributeType:
        stmt = select(VufsAttributeType).where(VufsAttributeType.slug == slug)
        attribute_type = (await self.session.execute(stmt)).scalars().first()
        if attribute_type is None:
            raise NotFoundError(f"Attribute type '{slug}' not found")
        return attribute_type

    async def add_type(self, name: str | None, slug: str | None = None) -> VufsAttributeType:
        """Create an attribute type; the slug defaults to one derived from name.

        Raises:
            ValidationError: If name is missing or yields an empty slug
            ConflictError: If the slug is taken
        """
        name = _required_name(name)
        slug = slugify(slug or name)
        if not slug:
            raise ValidationError(
                f"Attribute name '{name}' does not produce a usable slug",
                code="VALIDATION_ERROR",
            )

        attribute_type = VufsAttributeType(slug=slug, name=name, is_active=True)
        try:
            async with self.session.begin_nested():
                self.session.add(attribute_type)
        except IntegrityError as e:
            raise ConflictError(f"Attribute type '{slug}' already exists") from e

        logger.info("Attribute type created", slug=slug, name=name)
        return attribute_type

    async def update_type(self, slug: str, name: str | None) -> VufsAttributeType:
        """Rename an attribute type. The slug never changes."""
        name = _required_name(name)
        attribute_type = await self.get_type(slug)
        async with self.session.begin_nested():
            attribute_type.name = name
        logger.info("Attribute type renamed", slug=slug, name=name)
        return attribute_type

    async def delete_type(self, slug: str) -> None:
        """Delete an attribute type together with its values.

        Matrix cells using the slug are left alone.
        """
        attribute_type = await self.get_type(slug)
        result = await self.session.execute(
            delete(VufsAttributeValue).where(VufsAttributeValue.type_slug == slug)
        )
        await self.session.delete(attribute_type)
        await self.session.flush()
        logger.info("Attribute type deleted", slug=slug, values_deleted=result.rowcount)

    # ------------------------------------------------------------------
    # Values
    # ------------------------------------------------------------------

    async def list_values(self, type_slug: str) -> list[VufsAttributeValue]:
        await self.get_type(type_slug)
        stmt = (
            select(VufsAttributeValue)
            .where(VufsAttributeValue.type_slug == type_slug)
            .order_by(VufsAttributeValue.name)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_value(self, value_id: int) -> VufsAttributeValue:
        value = await self.session.get(VufsAttributeValue, value_id)
        if value is None:
            raise NotFoundError(f"Attribute value {value_id} not found")
        return value

    async def add_value(self, type_slug: str, name: str | None) -> VufsAttributeValue:
        """Add an allowed value to an existing attribute type.

        Raises:
            NotFoundError: If the type does not exist
            ConflictError: If the type already has a value with this name
        """
        name = _required_name(name)
        await self.get_type(type_slug)

        value = VufsAttributeValue(type_slug=type_slug, name=name, is_active=True)
        try:
            async with self.session.begin_nested():
                self.session.add(value)
        except IntegrityError as e:
            raise ConflictError(f'Value "{name}" already exists for this attribute') from e

        logger.info("Attribute value created", type_slug=type_slug, value_id=value.id, name=name)
        return value

    async def update_value(self, value_id: int, name: str | None) -> VufsAttributeValue:
        name = _required_name(name)
        value = await self.get_value(value_id)
        try:
            async with self.session.begin_nested():
                value.name = name
        except IntegrityError as e:
            raise ConflictError(f'Value "{name}" already exists for this attribute') from e

        logger.info("Attribute value renamed", value_id=value_id, name=name)
        return value

    async def delete_value(self, value_id: int) -> None:
        value = await self.get_value(value_id)
        await self.session.delete(value)
        await self.session.flush()
        logger.info("Attribute value deleted", value_id=value_id)
