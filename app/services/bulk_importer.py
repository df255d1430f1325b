"""Bulk import of plain names into one VUFS vocabulary.

The caller's type label is matched against an explicit alias table; unknown
labels are rejected. Every item is attempted on its own: duplicates are
counted as skipped, other failures are collected per item, and one bad item
never prevents the rest of the batch from being written.
"""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import ConflictError, UnsupportedTypeError, ValidationError
from app.infra.logging import get_logger
from app.services.attribute_types import AttributeTypeService
from app.services.catalog import CATALOG_ENTITIES, CatalogRepository
from app.services.taxonomy_tree import BRAND_TREE, CATEGORY_TREE, TaxonomyTree

logger = get_logger(__name__)

ATTRIBUTE_VALUE = "attribute_value"

TYPE_ALIASES: dict[str, str] = {
    "category": "category",
    "categories": "category",
    "brand": "brand",
    "brands": "brand",
    "color": "color",
    "colors": "color",
    "colour": "color",
    "colours": "color",
    "material": "material",
    "materials": "material",
    "pattern": "pattern",
    "patterns": "pattern",
    "fit": "fit",
    "fits": "fit",
    "size": "size",
    "sizes": "size",
    "attribute": ATTRIBUTE_VALUE,
    "attributes": ATTRIBUTE_VALUE,
    "attribute value": ATTRIBUTE_VALUE,
    "attribute values": ATTRIBUTE_VALUE,
    "attribute_value": ATTRIBUTE_VALUE,
    "attribute_values": ATTRIBUTE_VALUE,
}


def normalize_type(type_label: str | None) -> str:
    """Map a loose type label to its internal tag.

    Raises:
        ValidationError: If no label is given
        UnsupportedTypeError: If the label is not in the alias table
    """
    label = type_label.strip().lower() if isinstance(type_label, str) else ""
    if not label:
        raise ValidationError("type is required")
    try:
        return TYPE_ALIASES[label]
    except KeyError:
        raise UnsupportedTypeError(f"Unsupported bulk import type '{type_label}'") from None


@dataclass
class BulkItemError:
    item: str
    message: str


@dataclass
class BulkResult:
    created_count: int = 0
    skipped_count: int = 0
    errors: list[BulkItemError] = field(default_factory=list)


class BulkImporter:
    """Creates many rows of one vocabulary from a list of names."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _creator(
        self,
        tag: str,
        attribute_slug: str | None,
    ) -> Callable[[str], Awaitable[Any]]:
        if tag == "category":
            tree = TaxonomyTree(self.session, CATEGORY_TREE)
            return lambda name: tree.add(name, CATEGORY_TREE.root_tier)

        if tag == "brand":
            tree = TaxonomyTree(self.session, BRAND_TREE)
            return lambda name: tree.add(name, BRAND_TREE.root_tier)

        if tag == ATTRIBUTE_VALUE:
            if not attribute_slug:
                raise ValidationError("attributeSlug is required for attribute values")
            attribute_types = AttributeTypeService(self.session)
            await attribute_types.get_type(attribute_slug)
            return lambda name: attribute_types.add_value(attribute_slug, name)

        repository = CatalogRepository(self.session, CATALOG_ENTITIES[tag])
        return repository.add

    async def bulk_add_items(
        self,
        type_label: str | None,
        items: Sequence[str] | None,
        attribute_slug: str | None = None,
    ) -> BulkResult:
        """Create one row per non-blank item.

        Raises:
            ValidationError: If type or items are missing
            UnsupportedTypeError: If the type label is unknown
            NotFoundError: If ``attribute_slug`` names no attribute type
        """
        tag = normalize_type(type_label)
        if items is None:
            raise ValidationError("items are required")

        create = await self._creator(tag, attribute_slug)
        result = BulkResult()

        for raw in items:
            name = raw.strip() if isinstance(raw, str) else ""
            if not name:
                continue
            try:
                await create(name)
            except ConflictError:
                result.skipped_count += 1
            except Exception as e:
                logger.warning(
                    "Bulk item failed",
                    type=tag,
                    item=name,
                    error_type=type(e).__name__,
                    error=str(e),
                )
                result.errors.append(BulkItemError(item=name, message=str(e)))
            else:
                result.created_count += 1

        logger.info(
            "Bulk import finished",
            type=tag,
            items=len(items),
            created=result.created_count,
            skipped=result.skipped_count,
            errors=len(result.errors),
        )
        return result
