#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""Tests for the rendering step and its prerendered GraphQL augmentations."""
# -----------------------------------------------------------------------------

from __future__ import annotations

import pytest

from app.schemas import GraphQLFragments
from app.services.augment import PRERENDERED_SUFFIXES, build_rendered_page
from tests.conftest import make_state


# -----------------------------------------------------------------------------

FRAGMENTS = GraphQLFragments(
    objects="<div>OBJECTS</div>",
    input_objects="<div>INPUT-OBJECTS</div>",
    mutations="<div>MUTATIONS</div>",
)


class FakeRenderer:
    def __init__(self, html: str = "<p>base</p>") -> None:
        self.html = html
        self.calls = 0

    async def __call__(self, page, context) -> str:
        self.calls += 1
        return self.html


# ── Suffix rules ─────────────────────────────────────────────────────────────

@pytest.mark.asyncio
@pytest.mark.parametrize("path, fragment", [
    ("/en/graphql/reference/objects", "<div>OBJECTS</div>"),
    ("/en/graphql/reference/input-objects", "<div>INPUT-OBJECTS</div>"),
    ("/en/enterprise-server@3.5/graphql/reference/mutations", "<div>MUTATIONS</div>"),
])
async def test_known_suffix_appends_fragment(path, fragment):
    state = make_state(path=path, graphql=FRAGMENTS)
    html = await build_rendered_page(state, FakeRenderer())
    assert html == "<p>base</p>" + fragment


@pytest.mark.asyncio
async def test_other_paths_are_unmodified():
    state = make_state(path="/en/graphql/reference/queries", graphql=FRAGMENTS)
    assert await build_rendered_page(state, FakeRenderer()) == "<p>base</p>"


@pytest.mark.asyncio
async def test_suffix_must_match_exactly_at_end():
    state = make_state(path="/en/graphql/reference/objects/extra", graphql=FRAGMENTS)
    assert await build_rendered_page(state, FakeRenderer()) == "<p>base</p>"


@pytest.mark.asyncio
async def test_only_one_fragment_appended():
    state = make_state(path="/en/graphql/reference/objects", graphql=FRAGMENTS)
    html = await build_rendered_page(state, FakeRenderer())
    assert html.count("<div>") == 1


@pytest.mark.asyncio
async def test_renderer_called_once():
    renderer = FakeRenderer()
    await build_rendered_page(make_state(), renderer)
    assert renderer.calls == 1


@pytest.mark.asyncio
async def test_renderer_receives_page_and_context():
    seen = []

    async def recording(page, context):
        seen.append((page, context))
        return ""

    state = make_state(path="/en/enterprise-server@3.5/admin", current_version="enterprise-server@3.5")
    await build_rendered_page(state, recording)
    assert seen == [(state.page, state)]


@pytest.mark.asyncio
async def test_renderer_failure_propagates():
    async def broken(page, context):
        raise RuntimeError("template error")

    with pytest.raises(RuntimeError, match="template error"):
        await build_rendered_page(make_state(), broken)


def test_suffix_table_covers_reference_pages():
    suffixes = [suffix for suffix, _ in PRERENDERED_SUFFIXES]
    assert suffixes == [
        "graphql/reference/objects",
        "graphql/reference/input-objects",
        "graphql/reference/mutations",
    ]
