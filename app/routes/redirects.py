#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Redirects router
================
POST   /api/v1/redirects   — map a legacy docs path to its current location
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.schemas import RedirectCreate, RedirectEntry
from app.services import pages as page_svc


# -----------------------------------------------------------------------------

router = APIRouter(prefix="/redirects", tags=["redirects"])


# -----------------------------------------------------------------------------

@router.post("", response_model=RedirectEntry, status_code=201)
async def create_redirect(data: RedirectCreate, db: AsyncSession = Depends(get_db)):
    return await page_svc.create_redirect(db, data)


# -----------------------------------------------------------------------------
