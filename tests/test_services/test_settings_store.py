"""Tests for the global settings store."""

import pytest

from app.core.errors import NotFoundError, ValidationError
from app.services.settings_store import SettingsStore


class TestSettingsStore:
    @pytest.mark.asyncio
    async def test_set_and_get(self, session):
        store = SettingsStore(session)
        await store.set("default_currency", "BRL")
        assert await store.get("default_currency") == "BRL"

    @pytest.mark.asyncio
    async def test_json_values(self, session):
        store = SettingsStore(session)
        value = {"enabled": True, "levels": ["page", "blue"], "limit": 5}
        await store.set("feature_flags", value)
        assert await store.get("feature_flags") == value

    @pytest.mark.asyncio
    async def test_set_overwrites(self, session):
        store = SettingsStore(session)
        await store.set("theme", "light")
        await store.set("theme", "dark")
        assert await store.get_all() == {"theme": "dark"}

    @pytest.mark.asyncio
    async def test_get_all(self, session):
        store = SettingsStore(session)
        assert await store.get_all() == {}
        await store.set("b", 2)
        await store.set("a", 1)
        assert await store.get_all() == {"a": 1, "b": 2}

    @pytest.mark.asyncio
    async def test_unknown_key(self, session):
        with pytest.raises(NotFoundError):
            await SettingsStore(session).get("missing")

    @pytest.mark.asyncio
    async def test_key_required(self, session):
        with pytest.raises(ValidationError) as exc_info:
            await SettingsStore(session).set("  ", "x")
        assert exc_info.value.code == "MISSING_FIELDS"

    @pytest.mark.asyncio
    async def test_key_is_trimmed(self, session):
        store = SettingsStore(session)
        await store.set(" theme ", "dark")
        assert await store.get("theme") == "dark"
