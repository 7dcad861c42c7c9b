#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Version catalog
===============
Built once at startup from ``Settings.versions`` and shared read-only.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from app.core.patterns import VERSION_ID
from app.schemas import VersionCatalogEntry


VersionCatalog = Mapping[str, VersionCatalogEntry]


# -----------------------------------------------------------------------------

def build_catalog(versions: Mapping[str, str]) -> VersionCatalog:
    """``{"enterprise-server@3.5": "Enterprise Server 3.5"}`` → immutable catalog."""
    entries: dict[str, VersionCatalogEntry] = {}
    for version_id, title in versions.items():
        m = VERSION_ID.match(version_id)
        if not m:
            raise ValueError(f"Malformed version id '{version_id}' (expected plan@release)")
        entries[version_id] = VersionCatalogEntry(
            version=version_id,
            version_title=title,
            plan=m.group("plan"),
            release=m.group("release"),
        )
    return MappingProxyType(entries)


# -----------------------------------------------------------------------------
