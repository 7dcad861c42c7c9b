#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Pytest fixtures for docsite tests.
Uses an in-memory SQLite database so no external services are needed.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import os
from pathlib import Path

FIXTURES = Path(__file__).parent / "fixtures"

# Settings are cached on first use; set the test environment before any import.
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("PRERENDERED_ROOT", str(FIXTURES / "prerendered"))

import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402

import app.models  # noqa: E402,F401  — registers all ORM models on Base
from app.core.database import Base, get_db  # noqa: E402
from app.main import create_app  # noqa: E402


# -----------------------------------------------------------------------------

TEST_DB_URL = "sqlite+aiosqlite:///:memory:"


# -----------------------------------------------------------------------------

@pytest_asyncio.fixture(scope="function")
async def db_engine():
    engine = create_async_engine(
        TEST_DB_URL,
        echo=False,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session_factory(db_engine):
    """Shared sessionmaker — both client and db_session use this."""
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture(scope="function")
async def db_session(db_session_factory):
    async with db_session_factory() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def app(db_engine, db_session_factory):
    """Application wired to an isolated in-memory DB."""
    async def override_get_db():
        async with db_session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    application = create_app()
    application.dependency_overrides[get_db] = override_get_db
    return application


@pytest_asyncio.fixture(scope="function")
async def client(app):
    """HTTP test client for the `app` fixture."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


# -----------------------------------------------------------------------------
# Helper functions for tests
# -----------------------------------------------------------------------------

async def create_page(client: AsyncClient, path: str, title: str = "Test Page",
                      content: str = "Some text.\n", **extra) -> dict:
    resp = await client.post("/api/v1/pages", json={
        "path": path,
        "title": title,
        "content": content,
        **extra,
    })
    assert resp.status_code == 201, resp.text
    return resp.json()


# -----------------------------------------------------------------------------

def make_page(**overrides):
    """A ``PageView`` with sensible defaults for pipeline unit tests."""
    from app.schemas import PageView
    fields = {
        "id": "page-1",
        "language": "en",
        "version": "free-pro-team@latest",
        "path": "get-started/quickstart",
        "title": "Quickstart for **GitHub**",
        "content": "## Intro\n\nHello.\n\n## Next steps\n\nMore.\n",
        "format": "markdown",
        "effective_date": None,
        "show_mini_toc": True,
        "mini_toc_max_heading_level": 2,
    }
    fields.update(overrides)
    return PageView(**fields)


def make_state(page=..., **overrides):
    """A ``RenderState`` around *page* (pass ``page=None`` for a missing page)."""
    from app.services.render_state import RenderState, SiteContext
    fields = {
        "path": "/en/get-started/quickstart",
        "current_language": "en",
        "current_version": "free-pro-team@latest",
        "site": SiteContext(name="docsite", title_suffix="GitHub Docs",
                            languages={"en": "English", "ja": "日本語"}),
        "page": make_page() if page is ... else page,
    }
    fields.update(overrides)
    return RenderState(**fields)


# -----------------------------------------------------------------------------
