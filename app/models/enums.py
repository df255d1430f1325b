"""Enumerated tags stored as plain strings in the VUFS tables."""

from enum import Enum


class CategoryLevel(str, Enum):
    """The four fixed depths of the category tree, root first."""

    PAGE = "page"
    BLUE = "blue"
    WHITE = "white"
    GRAY = "gray"


class BrandType(str, Enum):
    """Brand tree tiers, root first."""

    BRAND = "brand"
    LINE = "line"
    COLLABORATION = "collaboration"


class MaterialCategory(str, Enum):
    NATURAL = "natural"
    SYNTHETIC = "synthetic"
    BLEND = "blend"


class CareCategory(str, Enum):
    WASHING = "washing"
    DRYING = "drying"
    IRONING = "ironing"
    DRY_CLEANING = "dry_cleaning"
    STORAGE = "storage"


class AttributeKind(str, Enum):
    """Entities that accept attribute-matrix values."""

    CATEGORY = "category"
    BRAND = "brand"
    SIZE = "size"
