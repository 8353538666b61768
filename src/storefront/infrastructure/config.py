"""Storefront configuration: environment-driven settings via pydantic-settings.

Every setting can be overridden with a ``STOREFRONT_``-prefixed
environment variable or a ``.env`` file. Lists are given as JSON, e.g.
``STOREFRONT_PRIORITY_FRAGMENTS='["Silver Rakhi", "Pan Rakhi"]'``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from storefront.domain.service.catalog_filter import DEFAULT_PRIORITY_FRAGMENTS

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        env_file=".env",
        extra="ignore",
    )

    catalog_path: Path = _DATA_DIR / "catalog.json"

    # Merchandising: order matters, earlier fragments rank higher
    priority_fragments: list[str] = list(DEFAULT_PRIORITY_FRAGMENTS)

    log_level: str = "WARNING"
    log_format: str = "console"

    @field_validator("priority_fragments")
    @classmethod
    def drop_blank_fragments(cls, v: list[str]) -> list[str]:
        """A blank fragment would match every product name."""
        return [f.strip() for f in v if f and f.strip()]

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("console", "json"):
            raise ValueError("log_format must be 'console' or 'json'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
