"""Business logic services."""

from app.services.attribute_matrix import AttributeMatrix
from app.services.attribute_types import AttributeTypeService
from app.services.bulk_importer import BulkImporter, BulkResult, normalize_type
from app.services.catalog import CATALOG_ENTITIES, CatalogRepository
from app.services.hierarchy_builder import (
    HierarchyBuilder,
    HierarchyResult,
    build_brand_hierarchy,
    build_category_hierarchy,
)
from app.services.item_metadata import build_item_metadata
from app.services.settings_store import SettingsStore
from app.services.taxonomy_tree import BRAND_TREE, CATEGORY_TREE, TaxonomyTree

__all__ = [
    "AttributeMatrix",
    "AttributeTypeService",
    "BRAND_TREE",
    "BulkImporter",
    "BulkResult",
    "CATALOG_ENTITIES",
    "CATEGORY_TREE",
    "CatalogRepository",
    "HierarchyBuilder",
    "HierarchyResult",
    "SettingsStore",
    "TaxonomyTree",
    "build_brand_hierarchy",
    "build_category_hierarchy",
    "build_item_metadata",
    "normalize_type",
]
