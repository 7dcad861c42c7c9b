from app.schemas.schemas import (
    PageCreate, PageView, PageSummary, PageResponse,
    RedirectCreate, RedirectEntry,
    VersionCatalogEntry, LanguageVariant,
    MiniTocItem, GraphQLFragments,
    CONTENT_FORMATS, normalize_path, plain_text,
)

__all__ = [
    "PageCreate", "PageView", "PageSummary", "PageResponse",
    "RedirectCreate", "RedirectEntry",
    "VersionCatalogEntry", "LanguageVariant",
    "MiniTocItem", "GraphQLFragments",
    "CONTENT_FORMATS", "normalize_path", "plain_text",
]
