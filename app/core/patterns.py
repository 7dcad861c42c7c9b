#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
URL patterns shared by the docs route and the render pipeline.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import re


# A bare language root: "/en" or "/en/".  Never gets a <title> suffix.
HOMEPAGE_PATH = re.compile(r"^/[a-z]{2}/?$")

# Leading "/xx" language segment.
LANGUAGE_PREFIX = re.compile(r"^/([a-z]{2})(?=/|$)")

# "plan@release", e.g. "enterprise-server@3.5".
VERSION_ID = re.compile(r"^(?P<plan>[a-z0-9-]+)@(?P<release>[a-z0-9.]+)$")


# -----------------------------------------------------------------------------
