"""Key-value store for process-wide VUFS settings.

A ``SettingsStore`` is built per request around the injected session; it
keeps no state of its own and re-reads the table on every call.
"""

from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import NotFoundError, ValidationError
from app.infra.logging import get_logger
from app.models import GlobalSetting

logger = get_logger(__name__)


def _required_key(key: str | None) -> str:
    key = key.strip() if isinstance(key, str) else ""
    if not key:
        raise ValidationError("key is required")
    return key


class SettingsStore:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_all(self) -> dict[str, Any]:
        result = await self.session.execute(select(GlobalSetting).order_by(GlobalSetting.key))
        return {setting.key: setting.value for setting in result.scalars().all()}

    async def get(self, key: str | None) -> Any:
        key = _required_key(key)
        setting = await self.session.get(GlobalSetting, key)
        if setting is None:
            raise NotFoundError(f"Setting '{key}' not found")
        return setting.value

    async def set(self, key: str | None, value: Any) -> Any:
        """Insert or overwrite one setting and return the stored value."""
        key = _required_key(key)

        setting = await self.session.get(GlobalSetting, key)
        if setting is None:
            try:
                async with self.session.begin_nested():
                    self.session.add(GlobalSetting(key=key, value=value))
            except IntegrityError:
                # Inserted concurrently; fall through to overwrite
                setting = await self.session.get(GlobalSetting, key)
                if setting is None:
                    raise

        if setting is not None:
            async with self.session.begin_nested():
                setting.value = value

        logger.info("Setting stored", key=key)
        return value
