#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Render orchestrator
===================
Turns a resolved ``RenderState`` into exactly one ``TerminalAction``, or
``None`` when the client went away mid-pipeline.

Order matters:

   1. missing page        → no-cache, RespondNotFound
   2. HEAD                → no-cache, RespondEmpty
   3. html cache policy   (headers are final before any awaited work)
   4. Last-Modified       from page.effective_date
   5. language variants
   6. dropped connection? → stop
   7. render + prerendered augmentation
   8. mini-toc            (only when the page asks for one)
   9. dropped connection? → stop
  10. <title>
  11. ?json outside production → RespondJson
  12. Delegate            (the document handler renders the full page)
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, time, timezone
from email.utils import format_datetime
from typing import Mapping, Optional

from app.core.cache_control import CachePolicy
from app.schemas import VersionCatalogEntry
from app.services.actions import (
    Delegate, RespondEmpty, RespondJson, RespondNotFound, TerminalAction,
)
from app.services.augment import PageRenderer, build_rendered_page
from app.services.connection import ConnectionMonitor
from app.services.debug_json import introspect
from app.services.languages import get_language_variants
from app.services.mini_toc import MiniTocExtractor, build_mini_toc_items, get_mini_toc_items
from app.services.render_state import RenderState, RequestDescriptor
from app.services.renderer import render_page
from app.services.title import compose_title

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class RenderOrchestrator:
    no_cache: CachePolicy
    html_cache: CachePolicy
    catalog: Mapping[str, VersionCatalogEntry]
    languages: Mapping[str, str]
    default_version: str
    brand: str
    is_production: bool
    is_testing: bool = False
    renderer: PageRenderer = render_page
    mini_toc_extractor: MiniTocExtractor = get_mini_toc_items

    async def handle(
        self,
        request: RequestDescriptor,
        state: RenderState,
        monitor: ConnectionMonitor,
    ) -> Optional[TerminalAction]:
        page = state.page
        path = request.effective_path

        if page is None:
            self.no_cache.apply(request.headers)
            if not self.is_testing and state.redirect_not_found:
                log.error("Tried to redirect to %s, but that page was not found.",
                          state.redirect_not_found, extra={"path": path})
            return RespondNotFound(state)

        if request.method.upper() == "HEAD":
            self.no_cache.apply(request.headers)
            return RespondEmpty()

        self.html_cache.apply(request.headers)

        if page.effective_date:
            stamp = datetime.combine(page.effective_date, time.min, tzinfo=timezone.utc)
            request.headers["last-modified"] = format_datetime(stamp, usegmt=True)

        state = state.evolve(
            path=path,
            language_variants=get_language_variants(path, self.languages),
        )

        if await monitor.is_dropped():
            log.debug("Connection dropped before render", extra={"path": path})
            return None

        state = state.evolve(rendered_page=await build_rendered_page(state, self.renderer))
        state = state.evolve(mini_toc_items=await build_mini_toc_items(
            page, state.rendered_page, self.mini_toc_extractor,
        ))

        if await monitor.is_dropped():
            log.debug("Connection dropped after render", extra={"path": path})
            return None

        state = state.evolve(full_title=compose_title(
            page.title_plain_text,
            path,
            state.current_version,
            self.catalog,
            state.site.title_suffix,
            default_version=self.default_version,
            brand=self.brand,
        ))

        if "json" in request.query and not self.is_production:
            return RespondJson(introspect(state, request.query.get("json")))

        return Delegate(state)


# -----------------------------------------------------------------------------
