#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Page service
============
Create / read / list documentation pages and redirects.

A page is addressed by (language, version, path).  Its public URL omits the
version segment for the default version::

    /en/graphql/reference/objects                        free-pro-team@latest
    /en/enterprise-server@3.5/graphql/reference/objects  enterprise-server@3.5
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.models import Page, Redirect
from app.schemas import PageCreate, RedirectCreate, normalize_path


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------

def page_href(language: str, version: str, path: str) -> str:
    """Public URL of a page."""
    settings = get_settings()
    parts = [language]
    if version != settings.default_version:
        parts.append(version)
    if path:
        parts.append(path)
    return "/" + "/".join(parts)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Pages
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

async def create_page(db: AsyncSession, data: PageCreate) -> Page:
    settings = get_settings()
    version = data.version or settings.default_version

    if await find_page(db, data.language, version, data.path) is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Page '{page_href(data.language, version, data.path)}' already exists",
        )

    page = Page(
        language=data.language,
        version=version,
        path=data.path,
        title=data.title,
        content=data.content,
        format=data.format,
        effective_date=data.effective_date,
        show_mini_toc=data.show_mini_toc,
        mini_toc_max_heading_level=data.mini_toc_max_heading_level,
    )
    db.add(page)
    await db.flush()
    await db.refresh(page)
    return page


# -----------------------------------------------------------------------------

async def find_page(db: AsyncSession, language: str, version: str, path: str) -> Optional[Page]:
    result = await db.execute(
        select(Page).where(
            Page.language == language,
            Page.version == version,
            Page.path == normalize_path(path),
        )
    )
    return result.scalar_one_or_none()


async def get_page(db: AsyncSession, language: str, version: str, path: str) -> Page:
    page = await find_page(db, language, version, path)
    if page is None:
        raise HTTPException(
            status_code=404,
            detail=f"Page '{page_href(language, version, normalize_path(path))}' not found",
        )
    return page


# -----------------------------------------------------------------------------

async def list_pages(
    db: AsyncSession,
    language: Optional[str] = None,
    version: Optional[str] = None,
    skip: int = 0,
    limit: int = 100,
) -> list[Page]:
    q = select(Page)
    if language:
        q = q.where(Page.language == language)
    if version:
        q = q.where(Page.version == version)
    q = q.order_by(Page.language, Page.version, Page.path).offset(skip).limit(limit)
    result = await db.execute(q)
    return list(result.scalars().all())


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Redirects
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

async def create_redirect(db: AsyncSession, data: RedirectCreate) -> Redirect:
    existing = await find_redirect(db, data.from_path)
    if existing is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Redirect from '{data.from_path}' already exists",
        )
    redirect = Redirect(from_path=data.from_path, to_path=data.to_path)
    db.add(redirect)
    await db.flush()
    return redirect


async def find_redirect(db: AsyncSession, from_path: str) -> Optional[Redirect]:
    result = await db.execute(select(Redirect).where(Redirect.from_path == from_path))
    return result.scalar_one_or_none()


# -----------------------------------------------------------------------------
