#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Mini table of contents
======================
``get_mini_toc_items`` pulls the in-page headings (h2 down to a configured
depth) out of rendered HTML.  ``build_mini_toc_items`` is what the render
pipeline calls: it skips the work entirely for pages that opt out.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import html as _html
import re
from typing import Callable, Optional, Sequence

from app.schemas import MiniTocItem, PageView


MiniTocExtractor = Callable[[str, int, str], Sequence[MiniTocItem]]

_HEADING_RE = re.compile(
    r'<h([2-6])\s[^>]*?id="([^"]+)"[^>]*>(.*?)</h\1>',
    re.IGNORECASE | re.DOTALL,
)
_STRIP_TAGS_RE = re.compile(r'<[^>]+>')


# -----------------------------------------------------------------------------

def get_mini_toc_items(
    html: str,
    max_heading_level: int = 2,
    heading_scope: str = "",
) -> list[MiniTocItem]:
    """Return the nested heading list for *html*.

    Only headings with an ``id`` are linkable, so others are skipped.  When
    *heading_scope* names an element id, headings before that element are
    ignored.  A deeper heading nests under the nearest preceding shallower one;
    a deeper heading with no such parent is kept at the top level.
    """
    if heading_scope:
        start = html.find(f'id="{heading_scope}"')
        if start < 0:
            return []
        html = html[start:]

    flat: list[tuple[int, str, str]] = []
    for m in _HEADING_RE.finditer(html):
        level = int(m.group(1))
        if level > max_heading_level:
            continue
        title = " ".join(_html.unescape(_STRIP_TAGS_RE.sub("", m.group(3))).split())
        if title:
            flat.append((level, m.group(2), title))

    return _nest(flat)


def _nest(flat: list[tuple[int, str, str]]) -> list[MiniTocItem]:
    # Build bottom-up: collect children for each index, then freeze into models.
    children: dict[int, list[int]] = {i: [] for i in range(len(flat))}
    roots: list[int] = []
    stack: list[int] = []
    for i, (level, _, _) in enumerate(flat):
        while stack and flat[stack[-1]][0] >= level:
            stack.pop()
        if stack:
            children[stack[-1]].append(i)
        else:
            roots.append(i)
        stack.append(i)

    def _build(i: int) -> MiniTocItem:
        level, anchor, title = flat[i]
        return MiniTocItem(
            title=title,
            href=f"#{anchor}",
            level=level,
            items=[_build(c) for c in children[i]],
        )

    return [_build(i) for i in roots]


# -----------------------------------------------------------------------------

async def build_mini_toc_items(
    page: PageView,
    rendered_html: str,
    extractor: MiniTocExtractor = get_mini_toc_items,
) -> Optional[list[MiniTocItem]]:
    """Mini-toc for *page*, or ``None`` when the page does not show one.

    Extractor errors propagate to the caller.
    """
    if not page.show_mini_toc:
        return None
    return list(extractor(rendered_html, page.mini_toc_max_heading_level, ""))


# -----------------------------------------------------------------------------
