#!/usr/bin/env python
#
#
# ----------------------------------------------------------------------------
"""
ORM Models for docsite
======================

Tables
------
pages       — one row per (language, version, path) document
redirects   — legacy path → current path

``pages.path`` is stored without the language/version prefix and without a
leading slash; the homepage of a language is the empty path.
All primary keys are UUIDs.  Timestamps stored in UTC.
"""
# ----------------------------------------------------------------------------

from __future__ import annotations

import uuid
from datetime import date, datetime, timezone

from sqlalchemy import (
    Boolean, Date, DateTime, Integer, String, Text, UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


# ----------------------------------------------------------------------------

def _uuid_col(primary_key=False, nullable=False, **kw):
    """UUID column stored as String(36) — works for both SQLite and PostgreSQL."""
    return mapped_column(
        String(36),
        primary_key=primary_key,
        nullable=nullable,
        default=lambda: str(uuid.uuid4()),
        **kw,
    )


def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# pages
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class Page(Base):
    __tablename__ = "pages"
    __table_args__ = (
        UniqueConstraint("language", "version", "path", name="uq_page_location"),
    )

    id:         Mapped[str] = _uuid_col(primary_key=True)
    language:   Mapped[str] = mapped_column(String(8),   nullable=False, index=True)
    version:    Mapped[str] = mapped_column(String(64),  nullable=False, index=True)
    path:       Mapped[str] = mapped_column(String(512), nullable=False, default="")
    title:      Mapped[str] = mapped_column(String(512), nullable=False)
    content:    Mapped[str] = mapped_column(Text,        nullable=False, default="")
    format:     Mapped[str] = mapped_column(String(16),  nullable=False, default="markdown")

    effective_date:             Mapped[date | None] = mapped_column(Date, nullable=True)
    show_mini_toc:              Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    mini_toc_max_heading_level: Mapped[int]  = mapped_column(Integer, default=2, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)

    def __repr__(self) -> str:
        return f"<Page /{self.language}/{self.version}/{self.path}>"


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# redirects
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class Redirect(Base):
    __tablename__ = "redirects"

    id:         Mapped[str] = _uuid_col(primary_key=True)
    from_path:  Mapped[str] = mapped_column(String(512), unique=True, nullable=False, index=True)
    to_path:    Mapped[str] = mapped_column(String(512), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)


# ----------------------------------------------------------------------------
