"""Tests for the health check endpoints."""

import pytest
from httpx import AsyncClient

from app import __version__
from app.config import settings


class TestHealthEndpoints:
    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient):
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json() == {
            "status": "healthy",
            "version": __version__,
            "environment": settings.environment,
            "checks": {},
        }

    @pytest.mark.asyncio
    async def test_live(self, client: AsyncClient):
        response = await client.get("/health/live")
        assert response.json()["checks"] == {"alive": True}

    @pytest.mark.asyncio
    async def test_ready_pings_database(self, client: AsyncClient):
        response = await client.get("/health/ready")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert data["checks"] == {"database": True}

    @pytest.mark.asyncio
    async def test_root(self, client: AsyncClient):
        response = await client.get("/")
        assert response.json() == {
            "service": "VUFS Taxonomy Service",
            "version": __version__,
            "environment": settings.environment,
        }
