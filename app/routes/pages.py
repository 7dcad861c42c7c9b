#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Pages router
============
GET    /api/v1/pages                                 — list pages
POST   /api/v1/pages                                 — create page
GET    /api/v1/pages/{language}/{version}/{path}     — get one page (raw source)
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.models import Page
from app.schemas import PageCreate, PageResponse, PageSummary
from app.services import pages as page_svc


# -----------------------------------------------------------------------------

router = APIRouter(prefix="/pages", tags=["pages"])


# -----------------------------------------------------------------------------

def _page_response(page: Page) -> PageResponse:
    return PageResponse(
        id=page.id,
        language=page.language,
        version=page.version,
        path=page.path,
        title=page.title,
        updated_at=page.updated_at,
        content=page.content,
        format=page.format,
        effective_date=page.effective_date,
        show_mini_toc=page.show_mini_toc,
        mini_toc_max_heading_level=page.mini_toc_max_heading_level,
        href=page_svc.page_href(page.language, page.version, page.path),
    )


# ── List ─────────────────────────────────────────────────────────────────────

@router.get("", response_model=list[PageSummary])
async def list_pages(
    language: Optional[str] = Query(None, max_length=8),
    version:  Optional[str] = Query(None, max_length=64),
    skip:     int           = Query(0, ge=0),
    limit:    int           = Query(100, ge=1, le=500),
    db: AsyncSession        = Depends(get_db),
):
    return await page_svc.list_pages(db, language=language, version=version, skip=skip, limit=limit)


# ── Create ────────────────────────────────────────────────────────────────────

@router.post("", response_model=PageResponse, status_code=201)
async def create_page(data: PageCreate, db: AsyncSession = Depends(get_db)):
    page = await page_svc.create_page(db, data)
    return _page_response(page)


# ── Read ──────────────────────────────────────────────────────────────────────

@router.get("/{language}/{version}/{path:path}", response_model=PageResponse)
async def get_page(language: str, version: str, path: str, db: AsyncSession = Depends(get_db)):
    page = await page_svc.get_page(db, language, version, path)
    return _page_response(page)


# -----------------------------------------------------------------------------
