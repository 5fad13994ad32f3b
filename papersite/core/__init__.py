"""
Core module - Configuration, schemas, and catalog loading.
"""
from .config import Settings, get_settings
from .catalog import CatalogError, load_catalog, parse_catalog
from .schemas import (
    Unit,
    Paper,
    Subject,
    Catalog,
    SearchQuery,
    ParsedQuery,
    MatchFlags,
    SearchResult,
    SuggestionType,
    SearchSuggestion,
    SearchResponse,
)

__all__ = [
    "Settings",
    "get_settings",
    "CatalogError",
    "load_catalog",
    "parse_catalog",
    "Unit",
    "Paper",
    "Subject",
    "Catalog",
    "SearchQuery",
    "ParsedQuery",
    "MatchFlags",
    "SearchResult",
    "SuggestionType",
    "SearchSuggestion",
    "SearchResponse",
]
