"""Schemas for the flat VUFS vocabularies."""

from pydantic import Field

from app.models import CareCategory, MaterialCategory
from app.schemas.common import CamelModel

HEX_COLOR = r"^#[0-9A-Fa-f]{6}$"


class CatalogItemOut(CamelModel):
    id: int
    name: str
    is_active: bool = True


class ColorOut(CatalogItemOut):
    hex_code: str


class MaterialOut(CatalogItemOut):
    category: str


class PatternOut(CatalogItemOut):
    pass


class FitOut(CatalogItemOut):
    pass


class SizeOut(CatalogItemOut):
    sort_order: int


class StandardOut(CatalogItemOut):
    label: str | None = None
    region: str | None = None
    category: str | None = None
    approach: str | None = None
    description: str | None = None


class CareInstructionOut(CatalogItemOut):
    category: str


# =============================================================================
# Request bodies
# =============================================================================


class ColorCreate(CamelModel):
    name: str | None = Field(default=None, max_length=100)
    hex_code: str | None = Field(default=None, pattern=HEX_COLOR)


class ColorUpdate(ColorCreate):
    pass


class MaterialCreate(CamelModel):
    name: str | None = Field(default=None, max_length=100)
    category: MaterialCategory | None = None


class MaterialUpdate(MaterialCreate):
    pass


class NameOnlyCreate(CamelModel):
    """Patterns and fits carry nothing but a name."""

    name: str | None = Field(default=None, max_length=100)


class NameOnlyUpdate(NameOnlyCreate):
    pass


class SizeCreate(CamelModel):
    name: str | None = Field(default=None, max_length=50)
    sort_order: int | None = Field(default=None, ge=0)


class SizeUpdate(SizeCreate):
    pass


class StandardCreate(CamelModel):
    name: str | None = Field(default=None, max_length=100)
    label: str | None = Field(default=None, max_length=100)
    region: str | None = Field(default=None, max_length=100)
    category: str | None = Field(default=None, max_length=100)
    approach: str | None = Field(default=None, max_length=100)
    description: str | None = None


class StandardUpdate(StandardCreate):
    pass


class CareInstructionCreate(CamelModel):
    name: str | None = Field(default=None, max_length=200)
    category: CareCategory | None = None


class CareInstructionUpdate(CareInstructionCreate):
    pass
