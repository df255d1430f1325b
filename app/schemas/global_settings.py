"""Schemas for the global key-value settings."""

from typing import Any

from app.schemas.common import CamelModel


class SettingUpdate(CamelModel):
    key: str | None = None
    value: Any = None


class SettingResponse(CamelModel):
    message: str
    key: str
    value: Any = None


class SettingsResponse(CamelModel):
    message: str
    settings: dict[str, Any]
