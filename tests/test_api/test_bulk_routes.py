"""Tests for bulk import, hierarchy builder and item metadata endpoints."""

import pytest
from httpx import AsyncClient

PREFIX = "/vufs"


class TestBulkRoute:
    @pytest.mark.asyncio
    async def test_bulk_colors(self, client: AsyncClient):
        response = await client.post(
            f"{PREFIX}/bulk", json={"type": "Colors", "items": ["Red", "Red", "Blue", " "]}
        )
        assert response.status_code == 200
        assert response.json() == {
            "message": "Bulk import completed: 2 created, 1 skipped",
            "result": {"createdCount": 2, "skippedCount": 1, "errors": []},
        }

        response = await client.get(f"{PREFIX}/colors")
        assert [c["name"] for c in response.json()["colors"]] == ["Blue", "Red"]

    @pytest.mark.asyncio
    async def test_bulk_attribute_values(self, client: AsyncClient):
        await client.post(f"{PREFIX}/attribute-types", json={"name": "Fabric Weight"})

        response = await client.post(
            f"{PREFIX}/bulk",
            json={
                "type": "attribute values",
                "items": ["Light", "Heavy"],
                "attributeSlug": "fabric-weight",
            },
        )
        assert response.json()["result"]["createdCount"] == 2

    @pytest.mark.asyncio
    async def test_unsupported_type(self, client: AsyncClient):
        response = await client.post(f"{PREFIX}/bulk", json={"type": "widgets", "items": ["A"]})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "UNSUPPORTED_TYPE"

    @pytest.mark.asyncio
    async def test_missing_items(self, client: AsyncClient):
        response = await client.post(f"{PREFIX}/bulk", json={"type": "colors"})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "MISSING_FIELDS"


class TestHierarchyRoutes:
    @pytest.mark.asyncio
    async def test_category_hierarchy_is_idempotent(self, client: AsyncClient):
        body = {"page": "Apparel", "blueSubcategory": "Tops", "whiteSubcategory": "T-Shirts"}

        response = await client.post(f"{PREFIX}/category-hierarchy", json=body)
        assert response.status_code == 200
        first = response.json()["hierarchy"]
        assert [c["level"] for c in first["path"]] == ["page", "blue", "white"]
        assert first["deepest"]["name"] == "T-Shirts"
        assert len(first["createdIds"]) == 3

        response = await client.post(f"{PREFIX}/category-hierarchy", json=body)
        second = response.json()["hierarchy"]
        assert second["createdIds"] == []
        assert second["deepest"]["id"] == first["deepest"]["id"]

    @pytest.mark.asyncio
    async def test_category_hierarchy_requires_page(self, client: AsyncClient):
        response = await client.post(f"{PREFIX}/category-hierarchy", json={"blueSubcategory": "Tops"})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "MISSING_FIELDS"

    @pytest.mark.asyncio
    async def test_brand_hierarchy(self, client: AsyncClient):
        response = await client.post(
            f"{PREFIX}/brand-hierarchy",
            json={"brand": "Nike", "line": "Air Jordan", "collaboration": "Off-White"},
        )
        hierarchy = response.json()["hierarchy"]
        assert [b["type"] for b in hierarchy["path"]] == ["brand", "line", "collaboration"]
        assert hierarchy["path"][2]["parentId"] == hierarchy["path"][1]["id"]


class TestItemMetadataRoute:
    @pytest.mark.asyncio
    async def test_build(self, client: AsyncClient):
        response = await client.post(
            f"{PREFIX}/item-metadata",
            json={
                "composition": [{"material": "Cotton", "percentage": 95}],
                "colors": [{"name": "Navy", "hex": "#000080"}],
                "careInstructions": ["Machine wash cold", "Machine wash cold"],
            },
        )
        assert response.status_code == 200
        metadata = response.json()["metadata"]
        assert metadata["composition"] == [{"material": "Cotton", "percentage": 95.0}]
        assert metadata["careInstructions"] == ["Machine wash cold"]
        assert metadata["acquisitionInfo"] == {}
        assert metadata["pricing"] == {}

    @pytest.mark.asyncio
    async def test_composition_over_100(self, client: AsyncClient):
        response = await client.post(
            f"{PREFIX}/item-metadata",
            json={
                "composition": [
                    {"material": "Cotton", "percentage": 70},
                    {"material": "Elastane", "percentage": 40},
                ]
            },
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"
