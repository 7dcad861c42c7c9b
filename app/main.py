#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
docsite — FastAPI application factory
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.core.cache_control import cache_control_factory
from app.core.config import Settings, get_settings
from app.core.database import create_all_tables, dispose_db, init_db
from app.core.logging import setup_logging
from app.routes import pages, redirects, versions
from app.services.render_page import RenderOrchestrator
from app.services.versions import build_catalog
from app.ui import views

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup / shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db()
    await create_all_tables()   # safe: CREATE TABLE IF NOT EXISTS
    await _seed_defaults()
    log.info("%s %s started (%s)", settings.app_name, settings.app_version, settings.environment)
    yield
    await dispose_db()
    log.info("%s shutting down", settings.app_name)


# -----------------------------------------------------------------------------

async def _seed_defaults() -> None:
    """Create the default-language homepage if it doesn't exist yet."""
    from app.core.database import get_session_factory
    from app.schemas import PageCreate
    from app.services import pages as page_svc

    settings = get_settings()
    factory = get_session_factory()

    async with factory() as session:
        existing = await page_svc.find_page(
            session, settings.default_language, settings.default_version, "",
        )
        if existing is not None:
            return
        await page_svc.create_page(session, PageCreate(
            language=settings.default_language,
            title=settings.site_name,
            content=(
                "Help for wherever you are on your journey.\n\n"
                "## Get started\n\n"
                "Add pages with `POST /api/v1/pages` and browse them under "
                f"`/{settings.default_language}/<path>`.\n"
            ),
            show_mini_toc=False,
        ))
        await session.commit()
        log.info("Seeded homepage /%s", settings.default_language)


# -----------------------------------------------------------------------------

def build_orchestrator(settings: Settings) -> RenderOrchestrator:
    """The render pipeline and its read-only configuration, built once."""
    warn_on_cookies = not settings.is_production
    return RenderOrchestrator(
        no_cache=cache_control_factory(0, warn_on_cookies=warn_on_cookies),
        html_cache=cache_control_factory(settings.html_cache_max_age, warn_on_cookies=warn_on_cookies),
        catalog=build_catalog(settings.versions),
        languages=dict(settings.languages),
        default_version=settings.default_version,
        brand=settings.brand,
        is_production=settings.is_production,
        is_testing=settings.is_testing,
    )


# -----------------------------------------------------------------------------

def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Versioned, multi-language documentation site.",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )
    app.state.orchestrator = build_orchestrator(settings)

    # ── Static files ──────────────────────────────────────────────────────

    static_dir = Path(__file__).parent / "static"
    app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

    # ── CORS ──────────────────────────────────────────────────────────────

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Global exception handlers ─────────────────────────────────────────

    @app.exception_handler(500)
    async def server_error(request: Request, exc):
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    # ── Health check ──────────────────────────────────────────────────────

    @app.get("/api/health", tags=["system"])
    async def health():
        return {"status": "ok", "version": settings.app_version, "app": settings.app_name}

    # ── API routers ───────────────────────────────────────────────────────

    prefix = "/api/v1"

    app.include_router(pages.router,     prefix=prefix)
    app.include_router(redirects.router, prefix=prefix)
    app.include_router(versions.router,  prefix=prefix)

    # ── Docs pages (catch-all, must come last) ────────────────────────────

    app.include_router(views.router)

    return app


# -----------------------------------------------------------------------------

app = create_app()


# -----------------------------------------------------------------------------
