#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Page <title> composition.

    Homepage                       → "Home"
    default or unknown version     → "Foo - GitHub Docs"
    other version                  → "Foo - GitHub Enterprise Server 3.5 Docs"
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from typing import Mapping, Optional

from app.core.patterns import HOMEPAGE_PATH
from app.schemas import VersionCatalogEntry


DEFAULT_VERSION = "free-pro-team@latest"
BRAND = "GitHub"


# -----------------------------------------------------------------------------

def compose_title(
    title_plain: str,
    path: str,
    current_version: Optional[str],
    catalog: Mapping[str, VersionCatalogEntry],
    site_suffix: str,
    *,
    default_version: str = DEFAULT_VERSION,
    brand: str = BRAND,
) -> str:
    """Return the full ``<title>`` text for a page.  Pure function."""
    if HOMEPAGE_PATH.match(path):
        return title_plain

    entry = catalog.get(current_version) if current_version else None
    if current_version == default_version or entry is None:
        return f"{title_plain} - {site_suffix}"

    # Some plan titles omit the brand, e.g. "Enterprise Server 3.5".
    version_title = entry.version_title
    if brand not in version_title:
        version_title = f"{brand} {version_title}"
    return f"{title_plain} - {version_title} Docs"


# -----------------------------------------------------------------------------
