from __future__ import annotations

from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.models import SortField

ROOT_DIR = Path(__file__).resolve().parents[2]
ENV_PATH = ROOT_DIR / ".env"
load_dotenv(ENV_PATH, override=False)


class StoreSettings(BaseModel):
    """Defines where app records are read from."""

    driver: Literal["in_memory", "mongodb"] = "in_memory"
    mongodb_uri: str | None = Field(default=None, repr=False)
    mongodb_database: str | None = None
    mongodb_collection: str = "apps"
    server_selection_timeout_ms: int = 5000
    seed_path: Path | None = None  # JSON array loaded into the in-memory store on start


class QuerySettings(BaseModel):
    """Controls how list queries are normalized and projected."""

    default_sort: SortField = "size"
    # None keeps an absent limit unbounded
    max_limit: int | None = Field(default=None, ge=1)
    tie_break_field: str = "_id"
    projection_exclude: list[str] = Field(default_factory=lambda: ["description", "ratings"])


class Settings(BaseSettings):
    """Global application configuration."""

    app_name: str = "App Catalog"
    log_level: str = "INFO"
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    store: StoreSettings = StoreSettings()
    query: QuerySettings = QuerySettings()

    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="allow",
    )


settings = Settings()
