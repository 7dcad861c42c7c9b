#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Prerendered GraphQL reference fragments
=======================================
The objects / input-objects / mutations reference pages are too large to
render per request, so their HTML is generated offline into::

    {prerendered_root}/{version}/objects.html
    {prerendered_root}/{version}/input-objects.html
    {prerendered_root}/{version}/mutations.html

A missing file yields an empty fragment.  Loaded fragments are kept for the
life of the process; they only change on deploy.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from pathlib import Path

import aiofiles
import aiofiles.os

from app.schemas import GraphQLFragments

log = logging.getLogger(__name__)

_FILES = {
    "objects":       "objects.html",
    "input_objects": "input-objects.html",
    "mutations":     "mutations.html",
}

_loaded: dict[tuple[Path, str], GraphQLFragments] = {}


# -----------------------------------------------------------------------------

async def _read(path: Path) -> str:
    if not await aiofiles.os.path.isfile(path):
        return ""
    async with aiofiles.open(path, "r", encoding="utf-8") as f:
        return await f.read()


async def load_fragments(root: Path, version: str) -> GraphQLFragments:
    """Return the prerendered fragments for *version*."""
    key = (root, version)
    if key not in _loaded:
        fields = {name: await _read(root / version / filename) for name, filename in _FILES.items()}
        if not any(fields.values()):
            log.debug("No prerendered GraphQL fragments for %s under %s", version, root)
        _loaded[key] = GraphQLFragments(**fields)
    return _loaded[key]


def clear_fragment_cache() -> None:
    _loaded.clear()


# -----------------------------------------------------------------------------
