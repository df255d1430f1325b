"""Tree node store and path resolution for the category and brand trees.

Both trees are flat tables with a ``parent_id`` self-reference and a tier
tag (``level`` for categories, ``type`` for brands). A node's tier fixes the
tier its parent must have: one step shallower, or no parent at all for the
root tier. ``TaxonomyTree`` enforces that rule on every write so parent
chains stay acyclic and never deeper than the number of tiers.
"""

from dataclasses import dataclass
from typing import Any

from sqlalchemy import case, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.core.errors import (
    ConflictError,
    NotFoundError,
    TaxonomyCycleError,
    ValidationError,
)
from app.infra.logging import get_logger
from app.models import BrandType, CategoryLevel, VufsBrand, VufsCategory
from app.services.query_utils import LIKE_ESCAPE, contains_pattern, require_query

logger = get_logger(__name__)


@dataclass(frozen=True)
class TreeDefinition:
    """Describes one taxonomy tree.

    Attributes:
        label: Human name used in messages ("Category", "Brand")
        model: Mapped class holding the nodes
        tier_attr: Name of the tier column on the model
        tiers: Tier tags ordered root first
    """

    label: str
    model: type[Any]
    tier_attr: str
    tiers: tuple[str, ...]

    @property
    def root_tier(self) -> str:
        return self.tiers[0]

    @property
    def tier_column(self) -> Any:
        return getattr(self.model, self.tier_attr)

    def depth(self, tier: str) -> int:
        """1-based depth of ``tier``; unknown tiers are a validation error."""
        try:
            return self.tiers.index(tier) + 1
        except ValueError:
            raise ValidationError(
                f"Invalid {self.tier_attr} '{tier}'. Expected one of: {', '.join(self.tiers)}",
                code="VALIDATION_ERROR",
            ) from None

    def parent_tier(self, tier: str) -> str | None:
        depth = self.depth(tier)
        return self.tiers[depth - 2] if depth > 1 else None

    def tier_of(self, node: Any) -> str:
        return getattr(node, self.tier_attr)

    def new_node(
        self,
        name: str,
        tier: str,
        parent_id: int | None,
        description: str | None = None,
    ) -> Any:
        return self.model(
            name=name,
            parent_id=parent_id,
            description=description,
            is_active=True,
            **{self.tier_attr: tier},
        )


CATEGORY_TREE = TreeDefinition(
    label="Category",
    model=VufsCategory,
    tier_attr="level",
    tiers=tuple(level.value for level in CategoryLevel),
)

BRAND_TREE = TreeDefinition(
    label="Brand",
    model=VufsBrand,
    tier_attr="type",
    tiers=tuple(brand_type.value for brand_type in BrandType),
)


class TaxonomyTree:
    """Reads and writes nodes of one taxonomy tree within a session."""

    def __init__(
        self,
        session: AsyncSession,
        definition: TreeDefinition,
        search_limit: int | None = None,
    ) -> None:
        self.session = session
        self.definition = definition
        self.search_limit = search_limit or settings.search_result_limit

    @property
    def model(self) -> type[Any]:
        return self.definition.model

    def _depth_order(self) -> Any:
        tiers = self.definition.tiers
        return case(
            {tier: index for index, tier in enumerate(tiers)},
            value=self.definition.tier_column,
            else_=len(tiers),
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def list_nodes(self, tier: str | None = None, parent_id: int | None = None) -> list[Any]:
        """Active nodes ordered by depth then name, optionally filtered."""
        stmt = select(self.model).where(self.model.is_active.is_(True))
        if tier:
            self.definition.depth(tier)
            stmt = stmt.where(self.definition.tier_column == tier)
        if parent_id is not None:
            stmt = stmt.where(self.model.parent_id == parent_id)
        stmt = stmt.order_by(self._depth_order(), self.model.name)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def search(self, query: str | None) -> list[Any]:
        """Case-insensitive substring search over active node names."""
        term = require_query(query)
        stmt = (
            select(self.model)
            .where(
                self.model.is_active.is_(True),
                self.model.name.ilike(contains_pattern(term), escape=LIKE_ESCAPE),
            )
            .order_by(self._depth_order(), self.model.name)
            .limit(self.search_limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get(self, node_id: int) -> Any:
        node = await self.session.get(self.model, node_id)
        if node is None:
            raise NotFoundError(f"{self.definition.label} {node_id} not found")
        return node

    async def find_child(self, name: str, tier: str, parent_id: int | None) -> Any | None:
        """Exact-match lookup of a node by name, tier and parent."""
        parent_clause = (
            self.model.parent_id.is_(None)
            if parent_id is None
            else self.model.parent_id == parent_id
        )
        stmt = (
            select(self.model)
            .where(
                self.model.name == name,
                self.definition.tier_column == tier,
                parent_clause,
            )
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def has_children(self, node_id: int) -> bool:
        stmt = select(self.model.id).where(self.model.parent_id == node_id).limit(1)
        return (await self.session.scalar(stmt)) is not None

    # ------------------------------------------------------------------
    # Path resolution
    # ------------------------------------------------------------------

    async def get_path(self, node_id: int) -> list[Any]:
        """Breadcrumb for ``node_id``, root first.

        Raises:
            NotFoundError: If the node does not exist
            TaxonomyCycleError: If the parent chain loops or is too deep
        """
        node = await self.get(node_id)
        return await self._chain_to_root(node)

    async def _chain_to_root(self, node: Any) -> list[Any]:
        path = [node]
        seen = {node.id}
        max_depth = len(self.definition.tiers)
        current = node

        while current.parent_id is not None:
            if current.parent_id in seen or len(path) >= max_depth:
                logger.error(
                    "Corrupt parent chain",
                    tree=self.definition.label,
                    node_id=node.id,
                    parent_id=current.parent_id,
                    depth=len(path),
                )
                raise TaxonomyCycleError(
                    f"{self.definition.label} {node.id} has a cyclic or over-deep parent chain"
                )

            parent = await self.session.get(self.model, current.parent_id)
            if parent is None:
                logger.warning(
                    "Dangling parent reference",
                    tree=self.definition.label,
                    node_id=current.id,
                    parent_id=current.parent_id,
                )
                break

            path.insert(0, parent)
            seen.add(parent.id)
            current = parent

        return path

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def _resolve_parent(self, tier: str, parent_id: int | None) -> Any | None:
        """Check ``parent_id`` against the parent rule for ``tier``."""
        expected = self.definition.parent_tier(tier)

        if expected is None:
            if parent_id is not None:
                raise ValidationError(
                    f"A {tier} {self.definition.label.lower()} cannot have a parent",
                    code="INVALID_PARENT",
                )
            return None

        if parent_id is None:
            raise ValidationError(
                f"A {tier} {self.definition.label.lower()} requires a {expected} parent",
                code="INVALID_PARENT",
            )

        parent = await self.get(parent_id)
        if self.definition.tier_of(parent) != expected:
            raise ValidationError(
                f"Parent {parent_id} is a {self.definition.tier_of(parent)} node, "
                f"expected {expected}",
                code="INVALID_PARENT",
            )
        return parent

    async def insert(self, node: Any) -> Any:
        """Flush ``node`` inside a savepoint, mapping uniqueness failures."""
        try:
            async with self.session.begin_nested():
                self.session.add(node)
        except IntegrityError as e:
            raise ConflictError(
                f'{self.definition.label} "{node.name}" already exists at this position'
            ) from e
        return node

    async def add(
        self,
        name: str | None,
        tier: str | None,
        parent_id: int | None = None,
        description: str | None = None,
    ) -> Any:
        """Create a node after validating tier, parent and sibling uniqueness."""
        name = name.strip() if isinstance(name, str) else ""
        if not name or not tier:
            raise ValidationError(f"name and {self.definition.tier_attr} are required")

        await self._resolve_parent(tier, parent_id)

        # NULL parents never collide in a unique index, so check siblings here too
        if await self.find_child(name, tier, parent_id) is not None:
            raise ConflictError(
                f'{self.definition.label} "{name}" already exists at this position'
            )

        node = await self.insert(self.definition.new_node(name, tier, parent_id, description))
        logger.info(
            f"{self.definition.label} created",
            node_id=node.id,
            name=name,
            tier=tier,
            parent_id=parent_id,
        )
        return node

    async def update(
        self,
        node_id: int,
        name: str | None = None,
        parent_id: int | None = None,
    ) -> Any:
        """Rename and/or re-parent a node.

        Re-parenting keeps the node's tier, so the new parent must sit exactly
        one tier above it and must not be the node or one of its descendants.
        """
        if name is None and parent_id is None:
            raise ValidationError("name or parentId is required")

        node = await self.get(node_id)
        tier = self.definition.tier_of(node)

        new_name = node.name
        if name is not None:
            new_name = name.strip()
            if not new_name:
                raise ValidationError("name cannot be empty")

        new_parent_id = node.parent_id
        if parent_id is not None and parent_id != node.parent_id:
            if parent_id == node.id:
                raise ValidationError(
                    f"{self.definition.label} {node_id} cannot be its own parent",
                    code="INVALID_PARENT",
                )
            parent = await self._resolve_parent(tier, parent_id)
            ancestors = await self._chain_to_root(parent)
            if any(ancestor.id == node.id for ancestor in ancestors):
                raise ValidationError(
                    f"Moving {self.definition.label.lower()} {node_id} under {parent_id} "
                    "would create a cycle",
                    code="INVALID_PARENT",
                )
            new_parent_id = parent_id

        if (new_name, new_parent_id) == (node.name, node.parent_id):
            return node

        clash = await self.find_child(new_name, tier, new_parent_id)
        if clash is not None and clash.id != node.id:
            raise ConflictError(
                f'{self.definition.label} "{new_name}" already exists at this position'
            )

        try:
            async with self.session.begin_nested():
                node.name = new_name
                node.parent_id = new_parent_id
        except IntegrityError as e:
            raise ConflictError(
                f'{self.definition.label} "{new_name}" already exists at this position'
            ) from e

        logger.info(
            f"{self.definition.label} updated",
            node_id=node_id,
            name=new_name,
            parent_id=new_parent_id,
        )
        return node

    async def delete(self, node_id: int) -> None:
        """Delete a leaf node. Nodes with children are rejected."""
        node = await self.get(node_id)
        if await self.has_children(node_id):
            raise ConflictError(
                f"{self.definition.label} {node_id} has children; delete or move them first",
                code="HAS_CHILDREN",
            )

        await self.session.delete(node)
        await self.session.flush()
        logger.info(f"{self.definition.label} deleted", node_id=node_id)
