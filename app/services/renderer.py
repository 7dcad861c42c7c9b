#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Markup renderer
===============
Renders page content to HTML.

Supported formats:
  - markdown  : rendered via mistune (with extras: tables, fenced code, strikethrough)
  - rst       : rendered via docutils

Every heading in the output carries a unique ``id`` so the mini table of
contents can link to it.  External links open in a new tab.  Page source may
reference render-context values as ``{{ current_version }}`` and the like.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import asyncio
import html as _html
import re
from typing import Mapping, Optional

from app.schemas import PageView
from app.services.render_state import RenderState


# -----------------------------------------------------------------------------
# Markdown renderer via mistune
# -----------------------------------------------------------------------------

def _highlight_code(code: str, lang: str) -> str:
    """Highlight *code* using Pygments.  Unknown languages fall back to plain text."""
    from pygments import highlight
    from pygments.formatters import HtmlFormatter
    from pygments.lexers import TextLexer, get_lexer_by_name
    from pygments.util import ClassNotFound

    try:
        lexer = get_lexer_by_name(lang.strip(), stripall=True) if lang.strip() else TextLexer()
    except ClassNotFound:
        lexer = TextLexer()
    formatter = HtmlFormatter(nowrap=False, cssclass="highlight")
    return highlight(code, lexer, formatter)


def _make_md_renderer():
    import mistune
    from mistune.plugins.formatting import strikethrough
    from mistune.plugins.table import table
    from mistune.plugins.url import url

    class _HighlightRenderer(mistune.HTMLRenderer):
        def codespan(self, code: str) -> str:
            return f'<code>{_html.escape(code)}</code>'

        def block_code(self, code: str, **kwargs) -> str:
            info = kwargs.get('info') or ''
            lang = info.split()[0] if info else ''
            if lang:
                return _highlight_code(code, lang)
            return f'<pre><code>{_html.escape(code)}</code></pre>'

    return mistune.create_markdown(
        renderer=_HighlightRenderer(escape=False),
        plugins=[table, strikethrough, url],
    )


_md_renderer = None


def _get_md_renderer():
    global _md_renderer
    if _md_renderer is None:
        _md_renderer = _make_md_renderer()
    return _md_renderer


# -----------------------------------------------------------------------------
# RST renderer via docutils
# -----------------------------------------------------------------------------

def _render_rst(content: str) -> str:
    from docutils.core import publish_parts
    parts = publish_parts(
        source=content,
        writer="html5",
        settings_overrides={
            "halt_level": 5,
            "report_level": 5,
            "input_encoding": "unicode",
            "output_encoding": "unicode",
            "syntax_highlight": "short",
            "doctitle_xform": False,
            "sectsubtitle_xform": False,
        },
    )
    return parts["body"]


# -----------------------------------------------------------------------------
# Heading anchors
# -----------------------------------------------------------------------------

_HEADING_RE = re.compile(r'<(h[1-6])(?:\s[^>]*)?>(.*?)</\1>', re.IGNORECASE | re.DOTALL)
_STRIP_TAGS_RE = re.compile(r'<[^>]+>')


def slugify_anchor(text: str) -> str:
    """Convert heading text to a URL-safe anchor ID."""
    text = _STRIP_TAGS_RE.sub('', text)
    text = _html.unescape(text).strip().lower()
    text = re.sub(r'[^\w\s-]', '', text)
    text = re.sub(r'[\s_]+', '-', text)
    text = re.sub(r'-+', '-', text)
    return text.strip('-') or 'section'


def _add_heading_anchors(html: str) -> str:
    """Give every h1-h6 a unique ``id``.  Duplicates get ``-1``, ``-2`` … suffixes."""
    used: set[str] = set()
    next_suffix: dict[str, int] = {}

    def _replace(m: re.Match) -> str:
        tag = m.group(1).lower()
        inner = m.group(2)
        base = slugify_anchor(inner)
        count = next_suffix.get(base, 0)
        anchor = base if count == 0 else f'{base}-{count}'
        # "Foo 1" slugs to the id already given to the second "Foo".
        while anchor in used:
            count += 1
            anchor = f'{base}-{count}'
        next_suffix[base] = count + 1
        used.add(anchor)
        return f'<{tag} id="{anchor}">{inner}</{tag}>'

    return _HEADING_RE.sub(_replace, html)


# -----------------------------------------------------------------------------
# External link post-processor
# -----------------------------------------------------------------------------

_EXT_LINK_RE = re.compile(
    r'<a\s([^>]*href=["\'](?:https?://|//)[^"\'>][^>]*)>',
    re.IGNORECASE,
)


def _add_external_link_targets(html: str) -> str:
    """Add target="_blank" rel="noopener noreferrer" to all external <a> tags."""
    def _patch(m: re.Match) -> str:
        attrs = m.group(1)
        if "target=" in attrs:
            return m.group(0)
        return f'<a {attrs} target="_blank" rel="noopener noreferrer">'
    return _EXT_LINK_RE.sub(_patch, html)


# -----------------------------------------------------------------------------
# Context variables
# -----------------------------------------------------------------------------

# Matches {{ current_version }}, {{current_language}}, etc.
_VARIABLE_RE = re.compile(r'\{\{\s*([a-z_]+)\s*\}\}')


def context_variables(context: RenderState) -> dict[str, str]:
    """Values a page may reference as ``{{ name }}`` in its source."""
    return {
        "current_language": context.current_language,
        "current_version":  context.current_version,
        "path":             context.path,
        "site_name":        context.site.title_suffix,
    }


def _expand_variables(content: str, variables: Mapping[str, str]) -> str:
    """Substitute known ``{{ name }}`` placeholders; unknown ones are left as written."""
    def _sub(m: re.Match) -> str:
        return variables.get(m.group(1), m.group(0))
    return _VARIABLE_RE.sub(_sub, content)


# -----------------------------------------------------------------------------
# Public render functions
# -----------------------------------------------------------------------------

def render(content: str, fmt: str = "markdown", variables: Optional[Mapping[str, str]] = None) -> str:
    """
    Render *content* to HTML.

    Parameters
    ----------
    content   : raw source text
    fmt       : "markdown" or "rst"; anything else is shown as escaped <pre> text
    variables : values for ``{{ name }}`` placeholders, substituted before rendering
    """
    if variables:
        content = _expand_variables(content, variables)

    fmt = fmt.lower()
    if fmt == "markdown":
        html = _get_md_renderer()(content)
    elif fmt == "rst":
        html = _render_rst(content)
    else:
        html = f"<pre>{_html.escape(content)}</pre>"

    return _add_heading_anchors(_add_external_link_targets(html))


async def render_page(page: PageView, context: RenderState) -> str:
    """Render *page* against *context* off the event loop; markup rendering is CPU bound."""
    return await asyncio.to_thread(render, page.content, page.format, context_variables(context))


# -----------------------------------------------------------------------------
