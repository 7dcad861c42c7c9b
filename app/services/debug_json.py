#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
``?json`` render-context introspection (never enabled in production).

    ?json              → advisory message + top-level keys
    ?json=page         → same as bare ?json
    ?json=page.title   → the value at that dotted path, or null
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Optional

from app.services.render_state import RenderState


ADVISORY_MESSAGE = (
    "The full context object is too big to display! Try a dotted path into one "
    "of the keys below, e.g. ?json=page.title. You can also reach nested props "
    "like ?json=site.languages.en"
)


# -----------------------------------------------------------------------------

def resolve_dotted(tree: Any, path: str) -> Optional[Any]:
    """Walk *tree* (dicts, lists, primitives) along ``a.b.0.c``.

    Returns ``None`` for any segment that does not resolve.
    """
    if not path:
        return tree
    head, _, rest = path.partition(".")
    if isinstance(tree, dict):
        if head not in tree:
            return None
        return resolve_dotted(tree[head], rest)
    if isinstance(tree, list):
        if not head.isdigit() or int(head) >= len(tree):
            return None
        return resolve_dotted(tree[int(head)], rest)
    return None


def introspect(state: RenderState, raw_value: Optional[str]) -> Any:
    """Payload for a ``?json`` request."""
    tree = state.to_tree()
    if raw_value and "." in raw_value:
        return resolve_dotted(tree, raw_value)
    return {"message": ADVISORY_MESSAGE, "keys": list(tree.keys())}


# -----------------------------------------------------------------------------
