#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Rendering step with prerendered augmentations
=============================================
The GraphQL reference pages are rendered as a short intro plus a large
prerendered fragment for the current version.  Each rule below maps a path
suffix to the fragment that gets appended; first match wins.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from typing import Awaitable, Callable

from app.core.timing import timed
from app.schemas import GraphQLFragments, PageView
from app.services.render_state import RenderState


PageRenderer = Callable[[PageView, RenderState], Awaitable[str]]

PRERENDERED_SUFFIXES: tuple[tuple[str, Callable[[GraphQLFragments], str]], ...] = (
    ("graphql/reference/objects",       lambda g: g.objects),
    ("graphql/reference/input-objects", lambda g: g.input_objects),
    ("graphql/reference/mutations",     lambda g: g.mutations),
)


# -----------------------------------------------------------------------------

async def build_rendered_page(state: RenderState, renderer: PageRenderer) -> str:
    """Render ``state.page`` against the context and append a prerendered fragment when the path asks for one."""
    async with timed("render_page", state.path):
        rendered = await renderer(state.page, state)

    for suffix, fragment in PRERENDERED_SUFFIXES:
        if state.path.endswith(suffix):
            return rendered + fragment(state.graphql)
    return rendered


# -----------------------------------------------------------------------------
