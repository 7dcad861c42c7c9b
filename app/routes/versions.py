#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Versions router
===============
GET    /api/v1/versions    — the product version catalog
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from fastapi import APIRouter, Request

from app.schemas import VersionCatalogEntry


# -----------------------------------------------------------------------------

router = APIRouter(prefix="/versions", tags=["versions"])


# -----------------------------------------------------------------------------

@router.get("", response_model=list[VersionCatalogEntry])
async def list_versions(request: Request):
    return list(request.app.state.orchestrator.catalog.values())


# -----------------------------------------------------------------------------
