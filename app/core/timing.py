#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Timing helper — wraps a coroutine and logs how long it took, keyed by path.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

@asynccontextmanager
async def timed(name: str, path: str) -> AsyncIterator[None]:
    """Log elapsed milliseconds for the enclosed block at DEBUG level.

    The measurement is logged even when the block raises.
    """
    started = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
        log.debug("%s %s took %.2fms", name, path, elapsed_ms,
                  extra={"path": path, "elapsed_ms": elapsed_ms})


# -----------------------------------------------------------------------------
