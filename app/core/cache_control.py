#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Cache-Control policies
======================
A policy is an immutable value that knows its directive string and how to set
it on a response header mapping.  Policies are built once at startup and
shared read-only by every request.

    max_age > 0   → "public, max-age=N[, immutable][, stale-…]"
    max_age == 0  → "private, no-store"
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import MutableMapping

log = logging.getLogger(__name__)

ONE_HOUR = 60 * 60
ONE_DAY = 24 * ONE_HOUR


# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CachePolicy:
    max_age: int = ONE_HOUR
    public: bool = True
    immutable: bool = False
    max_age_zero: bool = False
    key: str = "cache-control"
    warn_on_cookies: bool = field(default=True, compare=False)

    @property
    def directive(self) -> str:
        parts: list[str] = []
        if self.max_age:
            if self.public:
                parts.append("public")
            parts.append(f"max-age={self.max_age}")
            if self.immutable:
                parts.append("immutable")
        else:
            parts.extend(["private", "no-store"])
        if self.max_age >= ONE_HOUR:
            parts.append(f"stale-while-revalidate={ONE_HOUR}")
            parts.append(f"stale-if-error={ONE_DAY}")
        if self.max_age_zero:
            parts.append("max-age=0")
        return ", ".join(parts)

    def apply(self, headers: MutableMapping[str, str]) -> None:
        """Set the directive on *headers*, replacing any previous value."""
        if self.warn_on_cookies and any(k.lower() == "set-cookie" for k in headers):
            log.warning("Cache-Control %r set on a response that also sets a cookie",
                        self.directive)
        for existing in [k for k in headers if k.lower() == self.key.lower()]:
            del headers[existing]
        headers[self.key] = self.directive


# -----------------------------------------------------------------------------

def cache_control_factory(
    max_age: int = ONE_HOUR,
    *,
    public: bool = True,
    immutable: bool = False,
    max_age_zero: bool = False,
    key: str = "cache-control",
    warn_on_cookies: bool = True,
) -> CachePolicy:
    """Build a policy.  ``warn_on_cookies`` is normally ``not is_production``."""
    return CachePolicy(
        max_age=max_age,
        public=public,
        immutable=immutable,
        max_age_zero=max_age_zero,
        key=key,
        warn_on_cookies=warn_on_cookies,
    )


# -----------------------------------------------------------------------------
