"""SQLAlchemy models for the VUFS taxonomy."""

from app.models.attribute_type import VufsAttributeType, VufsAttributeValue
from app.models.base import ActiveMixin, Base, TimestampMixin
from app.models.brand import VufsBrand
from app.models.care_instruction import VufsCareInstruction
from app.models.category import VufsCategory
from app.models.color import VufsColor
from app.models.entity_attribute import (
    VufsBrandAttribute,
    VufsCategoryAttribute,
    VufsSizeAttribute,
)
from app.models.enums import (
    AttributeKind,
    BrandType,
    CareCategory,
    CategoryLevel,
    MaterialCategory,
)
from app.models.fit import VufsFit
from app.models.global_setting import GlobalSetting
from app.models.material import VufsMaterial
from app.models.pattern import VufsPattern
from app.models.size import VufsSize
from app.models.standard import VufsStandard

__all__ = [
    "Base",
    "TimestampMixin",
    "ActiveMixin",
    "AttributeKind",
    "BrandType",
    "CareCategory",
    "CategoryLevel",
    "MaterialCategory",
    "GlobalSetting",
    "VufsAttributeType",
    "VufsAttributeValue",
    "VufsBrand",
    "VufsBrandAttribute",
    "VufsCareInstruction",
    "VufsCategory",
    "VufsCategoryAttribute",
    "VufsColor",
    "VufsFit",
    "VufsMaterial",
    "VufsPattern",
    "VufsSize",
    "VufsSizeAttribute",
    "VufsStandard",
]
