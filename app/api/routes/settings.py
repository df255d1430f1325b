"""Global key-value settings endpoints."""

from fastapi import APIRouter

from app.api.deps import DbSession
from app.schemas.global_settings import SettingResponse, SettingsResponse, SettingUpdate
from app.services.settings_store import SettingsStore

router = APIRouter()


@router.get("", response_model=SettingResponse | SettingsResponse)
async def read_settings(
    db: DbSession,
    key: str | None = None,
) -> SettingResponse | SettingsResponse:
    """All settings, or a single one when ``key`` is given."""
    store = SettingsStore(db)
    if key is not None:
        value = await store.get(key)
        return SettingResponse(
            message="Setting retrieved successfully",
            key=key.strip(),
            value=value,
        )

    return SettingsResponse(
        message="Settings retrieved successfully",
        settings=await store.get_all(),
    )


@router.post("", response_model=SettingResponse)
async def set_setting(body: SettingUpdate, db: DbSession) -> SettingResponse:
    value = await SettingsStore(db).set(body.key, body.value)
    return SettingResponse(
        message="Setting updated successfully",
        key=body.key.strip(),
        value=value,
    )
