#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Language variants — the same document's URL in every configured language.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from typing import Mapping

from app.core.patterns import LANGUAGE_PREFIX
from app.schemas import LanguageVariant


# -----------------------------------------------------------------------------

def get_language_variants(path: str, languages: Mapping[str, str]) -> list[LanguageVariant]:
    """Swap the language prefix of *path* for each language in *languages*.

    A path without a language prefix gets one prepended.
    """
    variants = []
    for code, name in languages.items():
        if LANGUAGE_PREFIX.match(path):
            href = LANGUAGE_PREFIX.sub(f"/{code}", path, count=1)
        else:
            href = f"/{code}{path if path.startswith('/') else '/' + path}".rstrip("/")
        variants.append(LanguageVariant(name=name, code=code, href=href))
    return variants


# -----------------------------------------------------------------------------
