#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""Tests for mini table-of-contents extraction and the pipeline adapter."""
# -----------------------------------------------------------------------------

from __future__ import annotations

import pytest

from app.schemas import MiniTocItem
from app.services.mini_toc import build_mini_toc_items, get_mini_toc_items
from tests.conftest import make_page


# -----------------------------------------------------------------------------

HTML = (
    '<h1 id="title">Title</h1>'
    '<h2 id="alpha">Alpha</h2><p>a</p>'
    '<h3 id="alpha-one">Alpha <code>one</code></h3>'
    '<h2 id="beta">Beta &amp; more</h2>'
    '<h4 id="deep">Deep</h4>'
    '<h2>No anchor</h2>'
)


# ── Extraction ───────────────────────────────────────────────────────────────

def test_default_depth_is_h2_only():
    items = get_mini_toc_items(HTML)
    assert [i.title for i in items] == ["Alpha", "Beta & more"]
    assert [i.href for i in items] == ["#alpha", "#beta"]
    assert all(i.items == [] for i in items)


def test_h1_is_never_included():
    assert "Title" not in [i.title for i in get_mini_toc_items(HTML, 6)]


def test_deeper_headings_nest():
    items = get_mini_toc_items(HTML, 4)
    alpha, beta = items
    assert [c.title for c in alpha.items] == ["Alpha one"]
    assert alpha.items[0].level == 3
    assert [c.title for c in beta.items] == ["Deep"]


def test_headings_without_id_are_skipped():
    assert "No anchor" not in [i.title for i in get_mini_toc_items(HTML, 6)]


def test_orphan_deep_heading_stays_top_level():
    items = get_mini_toc_items('<h3 id="x">X</h3><h2 id="y">Y</h2>', 3)
    assert [(i.title, i.level) for i in items] == [("X", 3), ("Y", 2)]


def test_heading_scope_skips_earlier_headings():
    html = '<h2 id="before">Before</h2><div id="main"><h2 id="after">After</h2></div>'
    assert [i.title for i in get_mini_toc_items(html, 2, "main")] == ["After"]
    assert get_mini_toc_items(html, 2, "missing") == []


def test_no_headings():
    assert get_mini_toc_items("<p>plain</p>") == []


# ── Adapter ──────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_adapter_skips_when_flag_off():
    calls = []

    def extractor(html, depth, scope):
        calls.append(html)
        return []

    result = await build_mini_toc_items(make_page(show_mini_toc=False), HTML, extractor)
    assert result is None
    assert calls == []


@pytest.mark.asyncio
async def test_adapter_passes_depth_and_empty_scope():
    seen = {}

    def extractor(html, depth, scope):
        seen.update(html=html, depth=depth, scope=scope)
        return [MiniTocItem(title="A", href="#a", level=2)]

    page = make_page(mini_toc_max_heading_level=3)
    result = await build_mini_toc_items(page, "<h2 id='a'>A</h2>", extractor)
    assert seen == {"html": "<h2 id='a'>A</h2>", "depth": 3, "scope": ""}
    assert [i.title for i in result] == ["A"]


@pytest.mark.asyncio
async def test_adapter_propagates_extractor_failure():
    def extractor(html, depth, scope):
        raise ValueError("bad markup")

    with pytest.raises(ValueError, match="bad markup"):
        await build_mini_toc_items(make_page(), HTML, extractor)
