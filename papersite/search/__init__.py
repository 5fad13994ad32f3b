"""
Search module - Query parsing, ranking, suggestions, and trending searches.

Provides:
- parse_search_query: free text -> structured filters
- SearchEngine / search_papers: filtered, scored paper search
- TrendingSearches: decayed record of recent queries
"""
from .query_parser import (
    parse_search_query,
    normalize_search_term,
    get_equivalent_sessions,
    format_parsed_query,
)
from .engine import (
    SearchEngine,
    search_papers,
    calculate_score,
    combine_multi_session_results,
)
from .suggestions import generate_suggestions
from .trending import TrendingSearches, TrendingEntry

__all__ = [
    "parse_search_query",
    "normalize_search_term",
    "get_equivalent_sessions",
    "format_parsed_query",
    "SearchEngine",
    "search_papers",
    "calculate_score",
    "combine_multi_session_results",
    "generate_suggestions",
    "TrendingSearches",
    "TrendingEntry",
]
