"""Builder for the descriptive metadata block attached to wardrobe items."""

from dataclasses import dataclass, field
from typing import Any

from app.core.errors import ValidationError


@dataclass
class CompositionEntry:
    material: str
    percentage: float


@dataclass
class ColorEntry:
    name: str
    hex: str | None = None


@dataclass
class ItemMetadata:
    composition: list[CompositionEntry] = field(default_factory=list)
    colors: list[ColorEntry] = field(default_factory=list)
    care_instructions: list[str] = field(default_factory=list)
    acquisition_info: dict[str, Any] = field(default_factory=dict)
    pricing: dict[str, Any] = field(default_factory=dict)


def build_item_metadata(
    composition: list[CompositionEntry] | None = None,
    colors: list[ColorEntry] | None = None,
    care_instructions: list[str] | None = None,
    acquisition_info: dict[str, Any] | None = None,
    pricing: dict[str, Any] | None = None,
) -> ItemMetadata:
    """Assemble item metadata, defaulting every missing part to empty.

    Care instructions are stripped and de-duplicated keeping first-seen
    order. A composition whose percentages add up to more than 100 is
    rejected.
    """
    composition = list(composition or [])
    total = sum(entry.percentage for entry in composition)
    if total > 100:
        raise ValidationError(
            f"Composition percentages add up to {total:g}, more than 100",
            code="VALIDATION_ERROR",
        )

    instructions: list[str] = []
    for instruction in care_instructions or []:
        instruction = instruction.strip()
        if instruction and instruction not in instructions:
            instructions.append(instruction)

    return ItemMetadata(
        composition=composition,
        colors=list(colors or []),
        care_instructions=instructions,
        acquisition_info=dict(acquisition_info or {}),
        pricing=dict(pricing or {}),
    )
