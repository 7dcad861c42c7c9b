#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Dropped-connection checks.

The render pipeline polls a ``ConnectionMonitor`` at fixed points instead of
being interrupted; once it reports a drop nothing more is written.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from typing import Protocol

from starlette.requests import Request


# -----------------------------------------------------------------------------

class ConnectionMonitor(Protocol):
    async def is_dropped(self) -> bool: ...


class RequestConnectionMonitor:
    """``ConnectionMonitor`` over a Starlette request."""

    def __init__(self, request: Request) -> None:
        self._request = request

    async def is_dropped(self) -> bool:
        return await self._request.is_disconnected()


# -----------------------------------------------------------------------------
