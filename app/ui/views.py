#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Jinja2 UI views (server-rendered HTML pages)
============================================
GET|HEAD /{path}   — a documentation page, e.g. /en/graphql/reference/objects

This router is a catch-all and must be included after every other router.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.core.database import get_db
from app.schemas import normalize_path
from app.services.actions import Delegate, RespondEmpty, RespondJson, RespondNotFound
from app.services.connection import RequestConnectionMonitor
from app.services.context import resolve_request
from app.services.render_page import RenderOrchestrator
from app.services.render_state import RenderState, RequestDescriptor

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

router = APIRouter(tags=["ui"])
templates = Jinja2Templates(directory=str(Path(__file__).parent.parent / "templates"))


class NoResponse(Response):
    """Sends nothing.  Returned when the client has already disconnected."""

    async def __call__(self, scope, receive, send) -> None:
        return None


# -----------------------------------------------------------------------------
# Document handlers
# -----------------------------------------------------------------------------

def render_document(request: Request, state: RenderState) -> HTMLResponse:
    """Full HTML page for a fully populated render context."""
    settings = get_settings()
    return templates.TemplateResponse(
        request,
        "page.html",
        {
            "site_name": settings.site_name,
            "app_version": settings.app_version,
            "state": state,
            "page": state.page,
        },
    )


def render_not_found(request: Request, state: RenderState) -> HTMLResponse:
    settings = get_settings()
    return templates.TemplateResponse(
        request,
        "404.html",
        {
            "site_name": settings.site_name,
            "app_version": settings.app_version,
            "state": state,
            "message": "The page you requested could not be found.",
        },
        status_code=404,
    )


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Docs pages
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@router.api_route("/{full_path:path}", methods=["GET", "HEAD"], response_class=HTMLResponse)
async def view_page(request: Request, full_path: str, db: AsyncSession = Depends(get_db)):
    settings = get_settings()
    orchestrator: RenderOrchestrator = request.app.state.orchestrator

    raw_path = request.url.path
    if raw_path.startswith("/api/"):
        raise HTTPException(status_code=404)

    page_path = "/" + normalize_path(full_path)
    if page_path == "/":
        return RedirectResponse(url=f"/{settings.default_language}", status_code=302)

    resolved = await resolve_request(db, page_path, settings, orchestrator.catalog)

    if resolved.redirect_to:
        return RedirectResponse(url=resolved.redirect_to, status_code=302)

    descriptor = RequestDescriptor(
        method=request.method,
        path=raw_path,
        page_path=page_path if page_path != raw_path else None,
        query=dict(request.query_params),
    )

    try:
        action = await orchestrator.handle(descriptor, resolved.state, RequestConnectionMonitor(request))
    except Exception:
        log.exception("Rendering %s failed", page_path, extra={"path": page_path})
        raise

    if action is None:
        return NoResponse()

    if isinstance(action, RespondNotFound):
        response = render_not_found(request, action.state)
    elif isinstance(action, RespondEmpty):
        response = Response(content=b"", status_code=action.status_code)
    elif isinstance(action, RespondJson):
        response = JSONResponse(content=action.payload)
    elif isinstance(action, Delegate):
        response = render_document(request, action.state)
    else:
        raise TypeError(f"Unhandled render action {action!r}")

    response.headers.update(descriptor.headers)
    return response


# -----------------------------------------------------------------------------
