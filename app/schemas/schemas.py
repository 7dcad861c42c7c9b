#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Pydantic v2 schemas for request validation and response serialisation.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from app.core.config import get_settings


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Shared
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

CONTENT_FORMATS = {"markdown", "rst"}

_MD_INLINE_RES = (
    re.compile(r"\*\*(.+?)\*\*"),
    re.compile(r"(?<!\w)__(.+?)__(?!\w)"),
    re.compile(r"\*(.+?)\*"),
    re.compile(r"(?<!\w)_(.+?)_(?!\w)"),
    re.compile(r"`(.+?)`"),
)
_TAG_RE = re.compile(r"<[^>]+>")


def plain_text(title: str) -> str:
    """Strip inline Markdown emphasis/code markers and HTML tags from *title*."""
    text = _TAG_RE.sub("", title)
    for pattern in _MD_INLINE_RES:
        text = pattern.sub(r"\1", text)
    return " ".join(text.split())


def normalize_path(path: str) -> str:
    """``/graphql/reference/`` → ``graphql/reference``."""
    return "/".join(part for part in path.strip().split("/") if part)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Pages
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class PageCreate(BaseModel):
    language: str = Field(default="en", min_length=2, max_length=8)
    version: Optional[str] = None
    path: str = Field(default="", max_length=512)
    title: str = Field(..., min_length=1, max_length=512)
    content: str = Field(default="", max_length=10_000_000)
    format: str = Field(default="markdown")
    effective_date: Optional[date] = None
    show_mini_toc: bool = True
    mini_toc_max_heading_level: int = Field(default=2, ge=2, le=6)

    @field_validator("language")
    @classmethod
    def known_language(cls, v: str) -> str:
        if v not in get_settings().languages:
            raise ValueError(f"Unknown language '{v}'")
        return v

    @field_validator("version")
    @classmethod
    def known_version(cls, v: str | None) -> str | None:
        if v is not None and v not in get_settings().versions:
            raise ValueError(f"Unknown version '{v}'")
        return v

    @field_validator("path")
    @classmethod
    def clean_path(cls, v: str) -> str:
        return normalize_path(v)

    @field_validator("format")
    @classmethod
    def valid_format(cls, v: str) -> str:
        if v not in CONTENT_FORMATS:
            raise ValueError(f"format must be one of: {', '.join(sorted(CONTENT_FORMATS))}")
        return v


# -----------------------------------------------------------------------------

class PageView(BaseModel):
    """Read-only view of a page row, as seen by the render pipeline."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: str
    language: str
    version: str
    path: str
    title: str
    content: str
    format: str = "markdown"
    effective_date: Optional[date] = None
    show_mini_toc: bool = True
    mini_toc_max_heading_level: int = 2

    @computed_field
    @property
    def title_plain_text(self) -> str:
        return plain_text(self.title)


# -----------------------------------------------------------------------------

class PageSummary(BaseModel):
    id: str
    language: str
    version: str
    path: str
    title: str
    updated_at: datetime

    model_config = {"from_attributes": True}


class PageResponse(PageSummary):
    content: str
    format: str
    effective_date: Optional[date] = None
    show_mini_toc: bool
    mini_toc_max_heading_level: int
    href: str


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Redirects
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class RedirectCreate(BaseModel):
    from_path: str = Field(..., min_length=1, max_length=512)
    to_path: str = Field(..., min_length=1, max_length=512)

    @field_validator("from_path", "to_path")
    @classmethod
    def leading_slash(cls, v: str) -> str:
        return "/" + normalize_path(v)


class RedirectEntry(BaseModel):
    id: str
    from_path: str
    to_path: str

    model_config = {"from_attributes": True}


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Versions / languages
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class VersionCatalogEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    version: str                 # e.g. "enterprise-server@3.5"
    version_title: str           # e.g. "Enterprise Server 3.5"
    plan: str                    # e.g. "enterprise-server"
    release: str                 # e.g. "3.5" or "latest"


class LanguageVariant(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    code: str
    href: str


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Render pipeline values
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class MiniTocItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    href: str
    level: int
    items: list[MiniTocItem] = Field(default_factory=list)


class GraphQLFragments(BaseModel):
    """Prerendered reference HTML for the current version."""

    model_config = ConfigDict(frozen=True)

    objects: str = ""
    input_objects: str = ""
    mutations: str = ""


# -----------------------------------------------------------------------------
