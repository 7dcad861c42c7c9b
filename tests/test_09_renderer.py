"""
Tests for the markup renderer.

Heading anchor IDs are always generated; the mini table of contents links to
them.  All tests use the renderer directly — no HTTP round-trip needed.
"""
from __future__ import annotations

import pytest
from app.services.mini_toc import get_mini_toc_items
from app.services.renderer import _add_heading_anchors, render, render_page, slugify_anchor
from tests.conftest import make_page, make_state


# ── Heading anchors ──────────────────────────────────────────────────────────

@pytest.mark.parametrize("text, slug", [
    ("Creating a repository", "creating-a-repository"),
    ("Use <code>gh</code> here", "use-gh-here"),
    ("Q&amp;A", "qa"),
    ("snake_case  name", "snake-case-name"),
    ("???", "section"),
])
def test_slugify_anchor(text, slug):
    assert slugify_anchor(text) == slug


def test_headings_get_ids():
    html = render("## Alpha\n\n### Beta\n", fmt="markdown")
    assert '<h2 id="alpha">Alpha</h2>' in html
    assert '<h3 id="beta">Beta</h3>' in html


def test_duplicate_headings_get_suffixes():
    html = render("## Setup\n\n## Setup\n\n## Setup\n", fmt="markdown")
    assert 'id="setup"' in html
    assert 'id="setup-1"' in html
    assert 'id="setup-2"' in html


def test_suffixed_ids_do_not_collide_with_later_headings():
    html = render("## Foo\n\n## Foo\n\n## Foo 1\n", fmt="markdown")
    hrefs = [item.href for item in get_mini_toc_items(html)]
    assert hrefs == ["#foo", "#foo-1", "#foo-1-1"]


def test_empty_heading_does_not_swallow_the_next_one():
    html = render("##\n\ntext\n\n## Next\n", fmt="markdown")
    assert '<h2 id="next">Next</h2>' in html
    assert "<p>text</p>" in html
    assert [item.title for item in get_mini_toc_items(html)] == ["Next"]


def test_heading_match_stops_at_its_own_close_tag():
    html = _add_heading_anchors("<h2></h2><p>a</p><h3>Deep</h3>")
    assert html == '<h2 id="section"></h2><p>a</p><h3 id="deep">Deep</h3>'


def test_rst_headings_get_ids():
    rst = "Alpha\n=====\n\nText.\n\nBeta\n====\n\nMore.\n"
    html = render(rst, fmt="rst")
    assert 'id="alpha"' in html
    assert 'id="beta"' in html


# ── Code highlighting ────────────────────────────────────────────────────────

def test_fenced_python_is_highlighted():
    html = render("```python\nx = 1\n```", fmt="markdown")
    assert '<div class="highlight">' in html
    assert "<span" in html


def test_fenced_unknown_language_still_renders():
    html = render("```zzznotalang\nhello\n```", fmt="markdown")
    assert "hello" in html


def test_fenced_no_language_is_plain_pre():
    html = render("```\n<b>plain</b>\n```", fmt="markdown")
    assert "<pre><code>&lt;b&gt;plain&lt;/b&gt;" in html


def test_inline_code_is_escaped():
    html = render("Run `a < b`.", fmt="markdown")
    assert "<code>a &lt; b</code>" in html


# ── Links ────────────────────────────────────────────────────────────────────

def test_external_links_open_in_new_tab():
    html = render("[docs](https://example.com/docs)", fmt="markdown")
    assert 'target="_blank"' in html
    assert 'rel="noopener noreferrer"' in html


def test_internal_links_untouched():
    html = render("[quickstart](/en/get-started/quickstart)", fmt="markdown")
    assert 'href="/en/get-started/quickstart"' in html
    assert 'target="_blank"' not in html


# ── Formats ──────────────────────────────────────────────────────────────────

def test_unknown_format_is_escaped_pre():
    html = render("<script>x</script>", fmt="plain")
    assert html == "<pre>&lt;script&gt;x&lt;/script&gt;</pre>"


def test_markdown_table():
    html = render("| a | b |\n|---|---|\n| 1 | 2 |\n", fmt="markdown")
    assert "<table>" in html


@pytest.mark.asyncio
async def test_render_page_uses_page_format():
    page = make_page(content="Title\n=====\n\nBody.\n", format="rst")
    html = await render_page(page, make_state(page=page))
    assert "Body." in html
    assert "=====" not in html


# ── Context variables ────────────────────────────────────────────────────────

def test_known_variables_are_substituted():
    html = render("Version {{ current_version }} in {{current_language}}.", fmt="markdown",
                  variables={"current_version": "enterprise-server@3.5", "current_language": "ja"})
    assert "Version enterprise-server@3.5 in ja." in html


def test_unknown_variables_are_left_alone():
    html = render("Keep {{ secret }} as written.", fmt="markdown", variables={"path": "/en"})
    assert "Keep {{ secret }} as written." in html


@pytest.mark.asyncio
async def test_render_page_uses_context():
    page = make_page(content="Docs for {{ current_version }} at {{ path }}.\n")
    state = make_state(page=page, path="/en/enterprise-server@3.5/get-started",
                       current_version="enterprise-server@3.5")
    html = await render_page(page, state)
    assert "Docs for enterprise-server@3.5 at /en/enterprise-server@3.5/get-started." in html
