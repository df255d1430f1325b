"""Tests for /vufs/categories and /vufs/brands."""

import pytest
from httpx import AsyncClient

PREFIX = "/vufs"


async def create_category(client: AsyncClient, name: str, level: str, parent_id: int | None = None) -> dict:
    response = await client.post(
        f"{PREFIX}/categories",
        json={"name": name, "level": level, "parentId": parent_id},
    )
    assert response.status_code == 201, response.text
    return response.json()["category"]


class TestCategoryRoutes:
    @pytest.mark.asyncio
    async def test_create_returns_camel_case(self, client: AsyncClient):
        response = await client.post(
            f"{PREFIX}/categories",
            json={"name": "Apparel", "level": "page", "description": "Clothing"},
        )
        assert response.status_code == 201

        data = response.json()
        assert data["message"] == "Category added successfully"
        assert data["category"]["name"] == "Apparel"
        assert data["category"]["level"] == "page"
        assert data["category"]["parentId"] is None
        assert data["category"]["isActive"] is True

    @pytest.mark.asyncio
    async def test_list_filters(self, client: AsyncClient):
        page = await create_category(client, "Apparel", "page")
        await create_category(client, "Tops", "blue", page["id"])
        await create_category(client, "Bottoms", "blue", page["id"])

        response = await client.get(f"{PREFIX}/categories")
        assert [c["name"] for c in response.json()["categories"]] == ["Apparel", "Bottoms", "Tops"]

        response = await client.get(
            f"{PREFIX}/categories", params={"level": "blue", "parentId": page["id"]}
        )
        assert [c["name"] for c in response.json()["categories"]] == ["Bottoms", "Tops"]

    @pytest.mark.asyncio
    async def test_get_and_path(self, client: AsyncClient):
        page = await create_category(client, "Apparel", "page")
        blue = await create_category(client, "Tops", "blue", page["id"])
        white = await create_category(client, "T-Shirts", "white", blue["id"])

        response = await client.get(f"{PREFIX}/categories/{white['id']}")
        assert response.json()["category"]["parentId"] == blue["id"]

        response = await client.get(f"{PREFIX}/categories/{white['id']}/path")
        assert response.status_code == 200
        data = response.json()
        assert data["categoryId"] == white["id"]
        assert [c["name"] for c in data["path"]] == ["Apparel", "Tops", "T-Shirts"]

    @pytest.mark.asyncio
    async def test_search(self, client: AsyncClient):
        await create_category(client, "Apparel", "page")
        await create_category(client, "Accessories", "page")

        response = await client.get(f"{PREFIX}/categories/search", params={"q": "APP"})
        assert response.status_code == 200
        data = response.json()
        assert data["query"] == "APP"
        assert [c["name"] for c in data["categories"]] == ["Apparel"]

    @pytest.mark.asyncio
    async def test_search_without_query(self, client: AsyncClient):
        response = await client.get(f"{PREFIX}/categories/search")
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "MISSING_QUERY"

    @pytest.mark.asyncio
    async def test_missing_fields(self, client: AsyncClient):
        response = await client.post(f"{PREFIX}/categories", json={"level": "page"})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "MISSING_FIELDS"

    @pytest.mark.asyncio
    async def test_invalid_parent(self, client: AsyncClient):
        response = await client.post(
            f"{PREFIX}/categories", json={"name": "Tops", "level": "blue"}
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_PARENT"

    @pytest.mark.asyncio
    async def test_duplicate_conflicts(self, client: AsyncClient):
        await create_category(client, "Apparel", "page")
        response = await client.post(
            f"{PREFIX}/categories", json={"name": "Apparel", "level": "page"}
        )
        assert response.status_code == 409
        assert response.json()["error"]["code"] == "CONFLICT"

    @pytest.mark.asyncio
    async def test_not_found(self, client: AsyncClient):
        for response in (
            await client.get(f"{PREFIX}/categories/999"),
            await client.get(f"{PREFIX}/categories/999/path"),
            await client.delete(f"{PREFIX}/categories/999"),
        ):
            assert response.status_code == 404
            assert response.json()["error"]["code"] == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_update(self, client: AsyncClient):
        apparel = await create_category(client, "Apparel", "page")
        footwear = await create_category(client, "Footwear", "page")
        tops = await create_category(client, "Tops", "blue", apparel["id"])

        response = await client.put(
            f"{PREFIX}/categories/{tops['id']}",
            json={"name": "Sneakers", "parentId": footwear["id"]},
        )
        assert response.status_code == 200
        category = response.json()["category"]
        assert category["name"] == "Sneakers"
        assert category["parentId"] == footwear["id"]

    @pytest.mark.asyncio
    async def test_reparent_onto_self_rejected(self, client: AsyncClient):
        page = await create_category(client, "Apparel", "page")
        tops = await create_category(client, "Tops", "blue", page["id"])

        response = await client.put(
            f"{PREFIX}/categories/{tops['id']}", json={"parentId": tops["id"]}
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_PARENT"

    @pytest.mark.asyncio
    async def test_delete_with_children_rejected(self, client: AsyncClient):
        page = await create_category(client, "Apparel", "page")
        tops = await create_category(client, "Tops", "blue", page["id"])

        response = await client.delete(f"{PREFIX}/categories/{page['id']}")
        assert response.status_code == 409
        assert response.json()["error"]["code"] == "HAS_CHILDREN"

        response = await client.delete(f"{PREFIX}/categories/{tops['id']}")
        assert response.status_code == 200
        assert response.json() == {"message": "Category deleted successfully"}

        response = await client.delete(f"{PREFIX}/categories/{page['id']}")
        assert response.status_code == 200


class TestBrandRoutes:
    @pytest.mark.asyncio
    async def test_brand_family(self, client: AsyncClient):
        response = await client.post(f"{PREFIX}/brands", json={"name": "Nike", "type": "brand"})
        assert response.status_code == 201
        nike = response.json()["brand"]
        assert nike["type"] == "brand"

        response = await client.post(
            f"{PREFIX}/brands",
            json={"name": "Air Jordan", "type": "line", "parentId": nike["id"]},
        )
        jordan = response.json()["brand"]

        response = await client.get(f"{PREFIX}/brands", params={"type": "line"})
        assert [b["name"] for b in response.json()["brands"]] == ["Air Jordan"]

        response = await client.get(f"{PREFIX}/brands/{jordan['id']}/path")
        data = response.json()
        assert data["brandId"] == jordan["id"]
        assert [b["name"] for b in data["path"]] == ["Nike", "Air Jordan"]

        response = await client.get(f"{PREFIX}/brands/search", params={"q": "jordan"})
        assert [b["id"] for b in response.json()["brands"]] == [jordan["id"]]

    @pytest.mark.asyncio
    async def test_unknown_type(self, client: AsyncClient):
        response = await client.post(f"{PREFIX}/brands", json={"name": "Nike", "type": "label"})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"
