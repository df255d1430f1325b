"""Tests for /vufs/settings."""

import pytest
from httpx import AsyncClient

PREFIX = "/vufs"


class TestSettingsRoutes:
    @pytest.mark.asyncio
    async def test_set_then_read(self, client: AsyncClient):
        response = await client.post(
            f"{PREFIX}/settings", json={"key": "default_currency", "value": "BRL"}
        )
        assert response.status_code == 200
        assert response.json() == {
            "message": "Setting updated successfully",
            "key": "default_currency",
            "value": "BRL",
        }

        response = await client.get(f"{PREFIX}/settings", params={"key": "default_currency"})
        assert response.json()["value"] == "BRL"

    @pytest.mark.asyncio
    async def test_read_all(self, client: AsyncClient):
        response = await client.get(f"{PREFIX}/settings")
        assert response.json()["settings"] == {}

        await client.post(f"{PREFIX}/settings", json={"key": "flags", "value": {"bulk": True}})
        await client.post(f"{PREFIX}/settings", json={"key": "flags", "value": {"bulk": False}})

        response = await client.get(f"{PREFIX}/settings")
        assert response.json()["settings"] == {"flags": {"bulk": False}}

    @pytest.mark.asyncio
    async def test_unknown_key(self, client: AsyncClient):
        response = await client.get(f"{PREFIX}/settings", params={"key": "missing"})
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_key_required(self, client: AsyncClient):
        response = await client.post(f"{PREFIX}/settings", json={"value": 1})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "MISSING_FIELDS"
