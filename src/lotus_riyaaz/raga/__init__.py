"""Rāga catalog: records, bilingual text resolution and catalog loading."""

from lotus_riyaaz.raga.catalog import (
    FALLBACK_RAGAS,
    Catalog,
    CatalogLoader,
    CatalogSource,
    CatalogUnavailable,
    FallbackPolicy,
    RagaRecord,
    load_catalog,
)
from lotus_riyaaz.raga.text import (
    BilingualText,
    Language,
    LocalizedText,
    PlainText,
    parse_text,
    resolve,
)

__all__ = [
    "BilingualText",
    "Catalog",
    "CatalogLoader",
    "CatalogSource",
    "CatalogUnavailable",
    "FALLBACK_RAGAS",
    "FallbackPolicy",
    "Language",
    "LocalizedText",
    "PlainText",
    "RagaRecord",
    "load_catalog",
    "parse_text",
    "resolve",
]
