#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Application configuration.

All values can be overridden via environment variables or a .env file.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from app._version import __version__ as _pkg_version


# -----------------------------------------------------------------------------

class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Application ────────────────────────────────────────────────────────

    app_name: str = "docsite"
    app_version: str = _pkg_version
    base_url: str = "http://localhost:8000"
    environment: Literal["development", "testing", "production"] = "development"

    # ── Logging ────────────────────────────────────────────────────────────

    log_level: str = "INFO"
    log_format: Literal["text", "json"] = "text"

    # ── Database ───────────────────────────────────────────────────────────

    database_url: str = "sqlite+aiosqlite:///./docsite.db"
    db_echo: bool = False
    db_pool_size: int = 5
    db_max_overflow: int = 10

    # ── Site ───────────────────────────────────────────────────────────────

    site_name: str = "GitHub Docs"     # <title> suffix on non-homepage pages
    brand: str = "GitHub"              # prefixed to version titles lacking it
    default_language: str = "en"
    languages: dict[str, str] = {
        "en": "English",
        "es": "Español",
        "ja": "日本語",
        "pt": "Português do Brasil",
        "zh": "简体中文",
    }

    # ── Versions ───────────────────────────────────────────────────────────

    default_version: str = "free-pro-team@latest"
    versions: dict[str, str] = {
        "free-pro-team@latest": "Free, Pro, & Team",
        "enterprise-cloud@latest": "Enterprise Cloud",
        "enterprise-server@3.6": "Enterprise Server 3.6",
        "enterprise-server@3.5": "Enterprise Server 3.5",
        "github-ae@latest": "GitHub AE",
    }

    # ── Rendering ──────────────────────────────────────────────────────────

    html_cache_max_age: int = 0        # seconds; raise to 60, 300, 600 once stable
    prerendered_root: Path = Path("./data/prerendered")

    # ── CORS ───────────────────────────────────────────────────────────────

    cors_origins: list[str] = [
        "http://localhost:8000",
        "http://localhost:3000",
    ]

    @property
    def is_testing(self) -> bool:
        return self.environment == "testing"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


# -----------------------------------------------------------------------------

@lru_cache
def get_settings() -> Settings:
    return Settings()


# -----------------------------------------------------------------------------
