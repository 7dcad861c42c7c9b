#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Request → render context resolution
===================================
Parses ``/{language}[/{version}][/{rest}]``, loads the page, and follows the
redirect table when the page is missing.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings
from app.schemas import PageView, normalize_path
from app.services import pages as page_svc
from app.services.graphql import load_fragments
from app.services.render_state import RenderState, SiteContext
from app.services.versions import VersionCatalog

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Location:
    language: str
    version: str
    path: str          # page path inside (language, version), no leading slash


def parse_location(path: str, settings: Settings, catalog: VersionCatalog) -> Optional[Location]:
    """Split a request path.  Returns ``None`` when there is no known language."""
    segments = [s for s in path.split("/") if s]
    if not segments or segments[0] not in settings.languages:
        return None
    language, rest = segments[0], segments[1:]
    version = settings.default_version
    if rest and rest[0] in catalog:
        version, rest = rest[0], rest[1:]
    return Location(language=language, version=version, path="/".join(rest))


def site_context(settings: Settings) -> SiteContext:
    return SiteContext(
        name=settings.app_name,
        title_suffix=settings.site_name,
        base_url=settings.base_url,
        languages=dict(settings.languages),
    )


# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ResolvedRequest:
    state: RenderState
    redirect_to: Optional[str] = None


async def resolve_request(
    db: AsyncSession,
    path: str,
    settings: Settings,
    catalog: VersionCatalog,
) -> ResolvedRequest:
    """Build the initial ``RenderState`` for *path*.

    When no page exists but a redirect does, ``redirect_to`` is set if the
    target page exists; otherwise the state carries ``redirect_not_found``.
    """
    location = parse_location(path, settings, catalog)
    site = site_context(settings)
    if location is None:
        return ResolvedRequest(state=RenderState(
            path=path,
            current_language=settings.default_language,
            current_version=settings.default_version,
            site=site,
        ))

    row = await page_svc.find_page(db, location.language, location.version, location.path)
    state = RenderState(
        path=path,
        current_language=location.language,
        current_version=location.version,
        site=site,
        page=PageView.model_validate(row) if row is not None else None,
        graphql=await load_fragments(settings.prerendered_root, location.version),
    )
    if row is not None:
        return ResolvedRequest(state=state)

    redirect = await page_svc.find_redirect(db, "/" + normalize_path(path))
    if redirect is None:
        return ResolvedRequest(state=state)

    target = parse_location(redirect.to_path, settings, catalog)
    if target is not None and await page_svc.find_page(db, target.language, target.version, target.path):
        log.debug("Redirecting %s → %s", path, redirect.to_path)
        return ResolvedRequest(state=state, redirect_to=redirect.to_path)
    return ResolvedRequest(state=state.evolve(redirect_not_found=redirect.to_path))


# -----------------------------------------------------------------------------
