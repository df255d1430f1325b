"""Tests for the VUFS table mappings."""

import pytest
from sqlalchemy import UniqueConstraint

from app.models import (
    AttributeKind,
    BrandType,
    CategoryLevel,
    GlobalSetting,
    VufsAttributeType,
    VufsAttributeValue,
    VufsBrand,
    VufsBrandAttribute,
    VufsCareInstruction,
    VufsCategory,
    VufsCategoryAttribute,
    VufsColor,
    VufsFit,
    VufsMaterial,
    VufsPattern,
    VufsSize,
    VufsSizeAttribute,
    VufsStandard,
)


def _unique_sets(model) -> set[frozenset[str]]:
    sets = set()
    for constraint in model.__table__.constraints:
        if isinstance(constraint, UniqueConstraint):
            sets.add(frozenset(c.name for c in constraint.columns))
    for column in model.__table__.columns:
        if column.unique:
            sets.add(frozenset([column.name]))
    return sets


def test_category_levels_are_ordered_root_first():
    assert [level.value for level in CategoryLevel] == ["page", "blue", "white", "gray"]


def test_brand_types_are_ordered_root_first():
    assert [brand_type.value for brand_type in BrandType] == ["brand", "line", "collaboration"]


def test_attribute_kinds():
    assert {kind.value for kind in AttributeKind} == {"category", "brand", "size"}


class TestTreeTables:
    @pytest.mark.parametrize(
        "model,tablename,tier",
        [
            (VufsCategory, "vufs_categories", "level"),
            (VufsBrand, "vufs_brands", "type"),
        ],
    )
    def test_columns(self, model, tablename, tier):
        assert model.__tablename__ == tablename
        columns = {c.name for c in model.__table__.columns}
        assert {"id", "name", "parent_id", "description", "is_active", tier} <= columns

    @pytest.mark.parametrize("model,tier", [(VufsCategory, "level"), (VufsBrand, "type")])
    def test_siblings_unique(self, model, tier):
        assert frozenset({"name", tier, "parent_id"}) in _unique_sets(model)

    @pytest.mark.parametrize("model,tier", [(VufsCategory, "level"), (VufsBrand, "type")])
    def test_roots_unique(self, model, tier):
        (index,) = [i for i in model.__table__.indexes if i.name.endswith("_root")]
        assert index.unique
        assert {c.name for c in index.columns} == {"name", tier}
        assert str(index.dialect_options["sqlite"]["where"]) == "parent_id IS NULL"
        assert str(index.dialect_options["postgresql"]["where"]) == "parent_id IS NULL"

    @pytest.mark.parametrize("model", [VufsCategory, VufsBrand])
    def test_parent_is_self_reference(self, model):
        foreign_keys = list(model.__table__.c.parent_id.foreign_keys)
        assert len(foreign_keys) == 1
        assert foreign_keys[0].column.table is model.__table__


class TestFlatTables:
    @pytest.mark.parametrize(
        "model",
        [VufsColor, VufsMaterial, VufsPattern, VufsFit, VufsSize, VufsStandard, VufsCareInstruction],
    )
    def test_name_is_unique(self, model):
        assert frozenset({"name"}) in _unique_sets(model)

    def test_color_default_hex(self):
        assert VufsColor.__table__.c.hex_code.default.arg == "#000000"

    def test_material_default_category(self):
        assert VufsMaterial.__table__.c.category.default.arg == "natural"

    def test_size_has_sort_order(self):
        assert "sort_order" in {c.name for c in VufsSize.__table__.columns}


class TestAttributeTables:
    def test_attribute_type_slug_unique(self):
        assert frozenset({"slug"}) in _unique_sets(VufsAttributeType)

    def test_attribute_value_unique_per_type(self):
        assert frozenset({"type_slug", "name"}) in _unique_sets(VufsAttributeValue)

    def test_attribute_value_cascades_with_type(self):
        (foreign_key,) = VufsAttributeValue.__table__.c.type_slug.foreign_keys
        assert foreign_key.ondelete == "CASCADE"

    @pytest.mark.parametrize(
        "model,entity_column",
        [
            (VufsCategoryAttribute, "category_id"),
            (VufsBrandAttribute, "brand_id"),
            (VufsSizeAttribute, "size_id"),
        ],
    )
    def test_matrix_cell_unique(self, model, entity_column):
        assert frozenset({entity_column, "attribute_slug"}) in _unique_sets(model)


def test_global_setting_keyed_by_key():
    assert [c.name for c in GlobalSetting.__table__.primary_key.columns] == ["key"]
