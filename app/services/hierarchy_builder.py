"""Find-or-create builder for category and brand chains.

Given one name per tier (root first) the builder resolves each tier in
order, reusing the existing node with the same name under the previous
tier's node or creating it. Nodes are only ever attached to the node built
for the tier directly above, so every chain it produces satisfies the
parent rule of ``TaxonomyTree``.

Names are stripped of surrounding whitespace and then compared exactly
(case-sensitive).
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import ConflictError, ValidationError
from app.infra.logging import get_logger
from app.services.taxonomy_tree import (
    BRAND_TREE,
    CATEGORY_TREE,
    TaxonomyTree,
    TreeDefinition,
)

logger = get_logger(__name__)


@dataclass
class HierarchyResult:
    """Resolved chain, root first, plus the ids created by this call."""

    path: list[Any] = field(default_factory=list)
    created_ids: list[int] = field(default_factory=list)

    @property
    def deepest(self) -> Any:
        return self.path[-1]


class HierarchyBuilder:
    """Resolves a chain of tier names against one taxonomy tree."""

    def __init__(self, session: AsyncSession, definition: TreeDefinition) -> None:
        self.session = session
        self.definition = definition
        self.tree = TaxonomyTree(session, definition)

    async def build(self, names: Sequence[str | None]) -> HierarchyResult:
        """Find or create one node per provided name.

        Stops at the first empty name; later names are ignored.

        Raises:
            ValidationError: If the root name is empty or too many names are given
        """
        tiers = self.definition.tiers
        if len(names) > len(tiers):
            raise ValidationError(
                f"{self.definition.label} hierarchy has at most {len(tiers)} levels",
                code="VALIDATION_ERROR",
            )

        cleaned = [name.strip() if isinstance(name, str) else "" for name in names]
        if not cleaned or not cleaned[0]:
            raise ValidationError(f"{self.definition.root_tier} is required")

        result = HierarchyResult()
        parent_id: int | None = None

        for tier, name in zip(tiers, cleaned):
            if not name:
                break
            node, created = await self._find_or_create(name, tier, parent_id)
            result.path.append(node)
            if created:
                result.created_ids.append(node.id)
            parent_id = node.id

        logger.info(
            f"{self.definition.label} hierarchy resolved",
            names=[node.name for node in result.path],
            deepest_id=result.deepest.id,
            created=len(result.created_ids),
        )
        return result

    async def _find_or_create(
        self,
        name: str,
        tier: str,
        parent_id: int | None,
    ) -> tuple[Any, bool]:
        existing = await self.tree.find_child(name, tier, parent_id)
        if existing is not None:
            return existing, False

        try:
            node = await self.tree.insert(self.definition.new_node(name, tier, parent_id))
        except ConflictError:
            # A concurrent request created the same node first
            winner = await self.tree.find_child(name, tier, parent_id)
            if winner is None:
                raise
            return winner, False

        logger.debug(
            f"{self.definition.label} node created",
            node_id=node.id,
            name=name,
            tier=tier,
            parent_id=parent_id,
        )
        return node, True


async def build_category_hierarchy(
    session: AsyncSession,
    page: str | None,
    blue: str | None = None,
    white: str | None = None,
    gray: str | None = None,
) -> HierarchyResult:
    """Resolve page -> blue -> white -> gray, creating what is missing."""
    return await HierarchyBuilder(session, CATEGORY_TREE).build([page, blue, white, gray])


async def build_brand_hierarchy(
    session: AsyncSession,
    brand: str | None,
    line: str | None = None,
    collaboration: str | None = None,
) -> HierarchyResult:
    """Resolve brand -> line -> collaboration, creating what is missing."""
    return await HierarchyBuilder(session, BRAND_TREE).build([brand, line, collaboration])
