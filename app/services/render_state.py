#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Render pipeline values
======================
``RequestDescriptor`` is the slice of the HTTP request the pipeline reads,
plus the header mapping it writes.  ``RenderState`` is the document context;
it is immutable and every pipeline stage produces a new one via ``evolve``.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.schemas import GraphQLFragments, LanguageVariant, MiniTocItem, PageView


# -----------------------------------------------------------------------------

@dataclass
class RequestDescriptor:
    method: str
    path: str
    query: Mapping[str, str] = field(default_factory=dict)
    page_path: Optional[str] = None
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def effective_path(self) -> str:
        return self.page_path or self.path


# -----------------------------------------------------------------------------

class SiteContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    title_suffix: str
    base_url: str = ""
    languages: dict[str, str] = Field(default_factory=dict)


class RenderState(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    current_language: str
    current_version: str
    site: SiteContext
    page: Optional[PageView] = None
    graphql: GraphQLFragments = Field(default_factory=GraphQLFragments)
    redirect_not_found: Optional[str] = None

    # Filled in by the pipeline, in this order.
    language_variants: list[LanguageVariant] = Field(default_factory=list)
    rendered_page: Optional[str] = None
    mini_toc_items: Optional[list[MiniTocItem]] = None
    full_title: Optional[str] = None

    def evolve(self, **update: Any) -> RenderState:
        return self.model_copy(update=update)

    def to_tree(self) -> dict[str, Any]:
        """JSON-compatible nested dict of the whole context."""
        return self.model_dump(mode="json")


# -----------------------------------------------------------------------------
