"""Service configuration.

Values come from environment variables (or a local ``.env``), matched
case-insensitively: ``DB_HOST=db API_PREFIX=/api/vufs uvicorn app.main:app``.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """VUFS taxonomy service settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Service
    environment: Literal["prod", "staging", "dev"] = "dev"
    debug: bool = Field(default=False, description="Echo SQL statements")
    api_prefix: str = Field(default="/vufs", description="Mount point of the taxonomy routes")
    search_result_limit: int = Field(
        default=50,
        ge=1,
        le=500,
        description="Row cap for name searches over categories, brands and vocabularies",
    )

    # Database. ``db_url`` (any SQLAlchemy async URL) beats the individual parts.
    db_url: str | None = None
    db_user: str = "vufs_app"
    db_password: str = ""
    db_name: str = "vufs"
    db_host: str = "localhost"
    db_port: int = 5432
    db_pool_size: int = Field(default=5, ge=1)
    db_pool_max_overflow: int = Field(default=10, ge=0)
    auto_create_schema: bool | None = Field(
        default=None,
        description="Create missing tables at startup; unset means only in dev",
    )

    # Logging
    log_level: str = Field(default="INFO", description="DEBUG, INFO, WARNING or ERROR")
    log_json: bool = Field(default=True, description="JSON log lines outside dev")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        if self.db_url:
            return self.db_url
        return (
            f"postgresql+asyncpg://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

    @property
    def create_schema_on_startup(self) -> bool:
        if self.auto_create_schema is None:
            return self.environment == "dev"
        return self.auto_create_schema


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
