#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Terminal actions — what the render pipeline decided the response should be.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from app.services.render_state import RenderState


# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class RespondNotFound:
    state: RenderState


@dataclass(frozen=True)
class RespondEmpty:
    status_code: int = 200


@dataclass(frozen=True)
class RespondJson:
    payload: Any


@dataclass(frozen=True)
class Delegate:
    state: RenderState


TerminalAction = Union[RespondNotFound, RespondEmpty, RespondJson, Delegate]


# -----------------------------------------------------------------------------
