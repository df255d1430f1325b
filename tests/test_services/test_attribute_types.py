"""Tests for attribute type and value management."""

import pytest
from sqlalchemy import func, select

from app.core.errors import ConflictError, NotFoundError, ValidationError
from app.models import VufsAttributeValue
from app.services.attribute_types import AttributeTypeService


class TestAttributeTypes:
    @pytest.mark.asyncio
    async def test_slug_derived_from_name(self, session):
        attribute_type = await AttributeTypeService(session).add_type("Fabric Weight")
        assert attribute_type.slug == "fabric-weight"
        assert attribute_type.name == "Fabric Weight"

    @pytest.mark.asyncio
    async def test_explicit_slug_is_normalised(self, session):
        attribute_type = await AttributeTypeService(session).add_type("Sleeve", slug="Sleeve Length")
        assert attribute_type.slug == "sleeve-length"

    @pytest.mark.asyncio
    async def test_name_without_slug_characters(self, session):
        with pytest.raises(ValidationError) as exc_info:
            await AttributeTypeService(session).add_type("!!!")
        assert exc_info.value.code == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_missing_name(self, session):
        with pytest.raises(ValidationError) as exc_info:
            await AttributeTypeService(session).add_type(None)
        assert exc_info.value.code == "MISSING_FIELDS"

    @pytest.mark.asyncio
    async def test_duplicate_slug_conflicts(self, session):
        service = AttributeTypeService(session)
        await service.add_type("Fabric Weight")
        with pytest.raises(ConflictError):
            await service.add_type("fabric weight")

    @pytest.mark.asyncio
    async def test_list_and_rename(self, session):
        service = AttributeTypeService(session)
        await service.add_type("Origin")
        await service.add_type("Fabric Weight")

        assert [t.slug for t in await service.list_types()] == ["fabric-weight", "origin"]

        renamed = await service.update_type("origin", "Country of Origin")
        assert renamed.slug == "origin"
        assert renamed.name == "Country of Origin"

    @pytest.mark.asyncio
    async def test_get_unknown(self, session):
        with pytest.raises(NotFoundError):
            await AttributeTypeService(session).get_type("nope")

    @pytest.mark.asyncio
    async def test_delete_removes_values(self, session):
        service = AttributeTypeService(session)
        await service.add_type("Fabric Weight")
        value_id = (await service.add_value("fabric-weight", "Light")).id

        await service.delete_type("fabric-weight")

        with pytest.raises(NotFoundError):
            await service.get_type("fabric-weight")
        remaining = await session.scalar(
            select(func.count())
            .select_from(VufsAttributeValue)
            .where(VufsAttributeValue.id == value_id)
        )
        assert remaining == 0


class TestAttributeValues:
    @pytest.mark.asyncio
    async def test_add_and_list(self, session):
        service = AttributeTypeService(session)
        await service.add_type("Fabric Weight")
        await service.add_value("fabric-weight", "Medium")
        await service.add_value("fabric-weight", " Heavy ")

        values = await service.list_values("fabric-weight")
        assert [v.name for v in values] == ["Heavy", "Medium"]
        assert {v.type_slug for v in values} == {"fabric-weight"}

    @pytest.mark.asyncio
    async def test_type_must_exist(self, session):
        service = AttributeTypeService(session)
        with pytest.raises(NotFoundError):
            await service.add_value("nope", "Light")
        with pytest.raises(NotFoundError):
            await service.list_values("nope")

    @pytest.mark.asyncio
    async def test_duplicate_value_conflicts(self, session):
        service = AttributeTypeService(session)
        await service.add_type("Fabric Weight")
        await service.add_value("fabric-weight", "Light")
        with pytest.raises(ConflictError):
            await service.add_value("fabric-weight", "Light")

    @pytest.mark.asyncio
    async def test_same_value_in_other_type(self, session):
        service = AttributeTypeService(session)
        await service.add_type("Fabric Weight")
        await service.add_type("Lining Weight")
        await service.add_value("fabric-weight", "Light")
        value = await service.add_value("lining-weight", "Light")
        assert value.type_slug == "lining-weight"

    @pytest.mark.asyncio
    async def test_update_and_delete(self, session):
        service = AttributeTypeService(session)
        await service.add_type("Fabric Weight")
        light = await service.add_value("fabric-weight", "Light")
        await service.add_value("fabric-weight", "Heavy")

        renamed = await service.update_value(light.id, "Featherweight")
        assert renamed.name == "Featherweight"

        await service.delete_value(light.id)
        assert [v.name for v in await service.list_values("fabric-weight")] == ["Heavy"]

    @pytest.mark.asyncio
    async def test_rename_collision(self, session):
        service = AttributeTypeService(session)
        await service.add_type("Fabric Weight")
        light = await service.add_value("fabric-weight", "Light")
        await service.add_value("fabric-weight", "Heavy")

        with pytest.raises(ConflictError):
            await service.update_value(light.id, "Heavy")

    @pytest.mark.asyncio
    async def test_delete_unknown_value(self, session):
        with pytest.raises(NotFoundError):
            await AttributeTypeService(session).delete_value(999)
