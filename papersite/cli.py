"""
papersite search command line.

Usage:
    papersite-search search "phy u1 jan 24"                # Ranked search
    papersite-search search "" --subject Physics --year 2024
    papersite-search search "mech" --session May --session June --json
    papersite-search parse "p1jan21"                       # Show parsed filters
    papersite-search trending                              # Recent popular searches
"""
import argparse
import json
import logging
import sys

from .core.catalog import CatalogError, load_catalog
from .core.config import get_settings, load_dotenv_if_exists
from .core.schemas import SearchQuery
from .search.engine import SearchEngine
from .search.query_parser import format_parsed_query, parse_search_query
from .search.trending import TrendingSearches

logger = logging.getLogger("papersite")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Search past exam papers")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    search_parser = subparsers.add_parser("search", help="Search the paper catalog")
    search_parser.add_argument("query", help='Search text, e.g. "phy u1 jan 24"')
    search_parser.add_argument("--catalog", help="Catalog JSON (default: CATALOG_PATH)")
    search_parser.add_argument("--subject", help="Explicit subject filter")
    search_parser.add_argument("--unit", action="append", default=[], help="Unit filter (repeatable)")
    search_parser.add_argument("--year", type=int, help="Explicit year filter")
    search_parser.add_argument("--session", action="append", default=[], help="Session filter (repeatable)")
    search_parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    search_parser.add_argument("--no-log", action="store_true", help="Do not record in trending searches")

    parse_parser = subparsers.add_parser("parse", help="Show how a query is parsed")
    parse_parser.add_argument("query", help="Search text")

    trending_parser = subparsers.add_parser("trending", help="Show trending searches")
    trending_parser.add_argument("-n", "--limit", type=int, default=10, help="Number of queries")

    return parser


def run_search(args) -> int:
    settings = get_settings()
    catalog_path = args.catalog or settings.paths.catalog
    logger.debug(f"Searching catalog {catalog_path}")

    try:
        catalog = load_catalog(catalog_path)
    except (FileNotFoundError, CatalogError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    query = SearchQuery(
        text=args.query,
        subject=args.subject,
        units=args.unit,
        year=args.year,
        sessions=args.session
    )
    response = SearchEngine(catalog, settings=settings.search).search(query)

    if not args.no_log and args.query.strip():
        TrendingSearches(settings.paths.trending_db, settings=settings.trending).log_search(args.query)

    if args.json:
        print(json.dumps({
            "results": [r.to_dict() for r in response.results],
            "suggestions": [s.model_dump(mode="json") for s in response.suggestions]
        }, indent=2))
        return 0

    if not response.results:
        print("No papers found.")
    for i, result in enumerate(response.results, 1):
        print(f"{i:2}. [{result.score:.3f}] {result.subject.name} {result.unit.name} "
              f"{result.paper.session} {result.paper.year}  {result.paper.title}")
        if result.paper.pdf_url:
            print(f"      {result.paper.pdf_url}")

    if response.suggestions:
        print("\nSuggestions:")
        for suggestion in response.suggestions:
            print(f"  - {suggestion.text}")
    return 0


def run_parse(args) -> int:
    settings = get_settings()
    parsed = parse_search_query(
        args.query,
        min_year=settings.search.min_year,
        max_year=settings.search.max_year
    )
    print(json.dumps(parsed.model_dump(), indent=2))
    summary = format_parsed_query(parsed)
    if summary:
        print(summary)
    return 0


def run_trending(args) -> int:
    settings = get_settings()
    trending = TrendingSearches(settings.paths.trending_db, settings=settings.trending)
    queries = trending.get_trending_searches()[:args.limit]
    if not queries:
        print("No trending searches.")
    for i, query in enumerate(queries, 1):
        print(f"{i:2}. {query}")
    subjects = trending.get_trending_subjects()
    if subjects:
        print(f"\nTrending subjects: {', '.join(subjects)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )
    load_dotenv_if_exists()

    commands = {
        "search": run_search,
        "parse": run_parse,
        "trending": run_trending,
    }
    if args.command not in commands:
        parser.print_help()
        return 1
    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
