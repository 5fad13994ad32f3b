"""
Paper search engine: filtering, scoring and ranking over the catalog.

Provides:
- Merge of explicit filters with filters parsed from the query text
- Filter gates for subject, unit(s), year and session(s)
- Weighted match scoring with a recency boost
- Suggestions when nothing matches
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime

from ..core.config import SearchSettings
from ..core.schemas import (
    Catalog,
    MatchFlags,
    Paper,
    SearchQuery,
    SearchResponse,
    SearchResult,
    Subject,
    Unit,
)
from .query_parser import (
    DEFAULT_MAX_YEAR,
    DEFAULT_MIN_YEAR,
    get_equivalent_sessions,
    normalize_search_term,
    parse_search_query,
)
from .suggestions import generate_suggestions, multi_filter_info

logger = logging.getLogger(__name__)

SCORE_WEIGHTS: dict[str, float] = {
    "text": 0.3,
    "subject": 0.2,
    "unit": 0.2,
    "year": 0.15,
    "session": 0.1,
}

# pdf_url values that do not identify a real file
_PLACEHOLDER_URLS = {"", "#"}


# --------------------------------------------------------
# Matching and scoring
# --------------------------------------------------------

def calculate_score(
    matches: MatchFlags,
    year: int,
    current_year: int | None = None,
    recency_decay: float = 0.1
) -> float:
    """
    Weighted match score multiplied by a recency boost.

    The boost falls linearly from 1.0 for current-year papers to 0 at ten
    years old, so the newest papers score up to twice as high.
    """
    score = 0.0
    total_weight = 0.0
    for key, matched in matches.model_dump().items():
        weight = SCORE_WEIGHTS.get(key, 0.0)
        if matched:
            score += weight
        total_weight += weight

    if total_weight == 0:
        return 0.0

    if current_year is None:
        current_year = datetime.now().year
    year_boost = min(1.0, max(0.0, 1 - (current_year - year) * recency_decay))

    return (score / total_weight) * (1 + year_boost)


def matches_text(search_term: str, paper: Paper, unit: Unit, subject: Subject) -> bool:
    """True if the normalized term occurs in any searchable field (or is empty)."""
    normalized_search = normalize_search_term(search_term)
    if not normalized_search:
        return True

    fields = [paper.title, unit.name, subject.name, paper.session, str(paper.year)]
    if unit.description:
        fields.append(unit.description)

    return any(
        normalized_search in normalize_search_term(f)
        for f in fields if f
    )


def matches_session(paper_session: str, query_sessions: list[str]) -> bool:
    """True if the paper's session is equivalent to any requested session."""
    if not query_sessions:
        return True

    normalized_paper = normalize_search_term(paper_session)
    for query_session in query_sessions:
        for session in get_equivalent_sessions(normalize_search_term(query_session)):
            normalized = normalize_search_term(session)
            if normalized == normalized_paper or normalized in normalized_paper:
                return True
    return False


def matches_unit(unit: Unit, query_units: list[str]) -> bool:
    """True if the unit name equals any requested unit after normalization."""
    if not query_units:
        return True
    unit_name = normalize_search_term(unit.name)
    return any(unit_name == normalize_search_term(q) for q in query_units)


class DuplicateTracker:
    """
    Detects papers listed more than once in a scan.

    The same question paper is often filed under several units. A paper is a
    duplicate when an earlier one shares its file URL, session, year and
    title. Papers without a real URL are never treated as duplicates.
    """

    def __init__(self):
        self._seen: set[tuple[str, int, str, str]] = set()

    def is_duplicate(self, paper: Paper) -> bool:
        if paper.pdf_url in _PLACEHOLDER_URLS:
            return False
        key = (paper.session, paper.year, paper.title, paper.pdf_url)
        if key in self._seen:
            return True
        self._seen.add(key)
        return False


@dataclass(frozen=True)
class EffectiveFilters:
    """Filters after merging explicit values over parsed ones."""
    text: str = ""
    subject: str | None = None
    units: list[str] = field(default_factory=list)
    year: int | None = None
    sessions: list[str] = field(default_factory=list)


def merge_filters(query: SearchQuery, session_variants: list[str] | None = None,
                  min_year: int = DEFAULT_MIN_YEAR,
                  max_year: int = DEFAULT_MAX_YEAR) -> EffectiveFilters:
    """
    Combine explicit filters with those parsed from the query text.

    Explicit values always win. The parsed residual text replaces the raw
    text, so recognised tokens are not text-matched again.
    """
    parsed = parse_search_query(query.text, min_year=min_year, max_year=max_year)

    units = query.unit_filters() or ([parsed.unit] if parsed.unit else [])
    if session_variants:
        sessions = list(session_variants)
    else:
        sessions = query.session_filters() or ([parsed.session] if parsed.session else [])

    return EffectiveFilters(
        text=parsed.text,
        subject=query.subject or parsed.subject,
        units=units,
        year=query.year if query.year is not None else parsed.year,
        sessions=sessions
    )


# --------------------------------------------------------
# Engine
# --------------------------------------------------------

class SearchEngine:
    """
    Ranked paper search over an in-memory catalog.

    Strategy:
    1. Parse the query text and merge with explicit filters
    2. Gate each paper on subject, unit, year and session
    3. Score survivors by weighted matches and recency
    4. Suggest refinements when nothing survives
    """

    def __init__(
        self,
        catalog: Catalog,
        settings: SearchSettings | None = None,
        current_year: int | None = None
    ):
        """
        Initialize search engine.

        Args:
            catalog: Subject catalog (not mutated)
            settings: Result limits, year bounds and recency decay
            current_year: Fixed year for the recency boost (defaults to now)
        """
        self.catalog = catalog
        self.settings = settings or SearchSettings()
        self.current_year = current_year

        logger.debug(
            f"SearchEngine initialized "
            f"({len(catalog.subjects)} subjects, {catalog.paper_count()} papers)"
        )

    def search(
        self,
        query: SearchQuery | str,
        session_variants: list[str] | None = None
    ) -> SearchResponse:
        """
        Search the catalog.

        Args:
            query: SearchQuery or raw text
            session_variants: Sessions to match instead of the query's own

        Returns:
            SearchResponse with ranked results and suggestions
        """
        if isinstance(query, str):
            query = SearchQuery(text=query)

        filters = merge_filters(
            query,
            session_variants,
            min_year=self.settings.min_year,
            max_year=self.settings.max_year
        )

        results = self._collect_results(filters)
        results.sort(key=lambda r: r.score, reverse=True)

        suggestions = []
        if not results:
            suggestions = generate_suggestions(
                self.catalog,
                subject_filter=filters.subject,
                unit_filters=filters.units,
                session_filters=filters.sessions,
                year_filter=filters.year
            )

        info = multi_filter_info(filters.units, filters.sessions)
        if info:
            suggestions.insert(0, info)

        logger.debug(
            f"Search '{query.text}' -> {len(results)} results, "
            f"{len(suggestions)} suggestions"
        )

        return SearchResponse(
            results=results[:self.settings.max_results],
            suggestions=suggestions[:self.settings.max_suggestions]
        )

    def _collect_results(self, filters: EffectiveFilters) -> list[SearchResult]:
        normalized_subject = normalize_search_term(filters.subject) if filters.subject else None
        duplicates = DuplicateTracker()
        results = []

        for subject in self.catalog.subjects.values():
            subject_matches = normalize_search_term(subject.name) == normalized_subject
            if normalized_subject and not subject_matches:
                continue

            for paper in subject.papers:
                if duplicates.is_duplicate(paper):
                    logger.debug(f"Skipping duplicate paper {paper.id}")
                    continue

                unit = subject.find_unit(paper.unit_id)
                if unit is None:
                    logger.debug(f"Skipping paper {paper.id}: unknown unit {paper.unit_id}")
                    continue

                if not matches_unit(unit, filters.units):
                    continue
                if filters.year is not None and paper.year != filters.year:
                    continue
                if not matches_session(paper.session, filters.sessions):
                    continue

                matches = MatchFlags(
                    text=matches_text(filters.text, paper, unit, subject),
                    subject=normalized_subject is None or subject_matches,
                    unit=matches_unit(unit, filters.units),
                    year=filters.year is None or paper.year == filters.year,
                    session=matches_session(paper.session, filters.sessions)
                )

                if matches.any():
                    results.append(SearchResult(
                        paper=paper,
                        unit=unit,
                        subject=subject,
                        matches=matches,
                        score=calculate_score(
                            matches,
                            paper.year,
                            current_year=self.current_year,
                            recency_decay=self.settings.recency_decay
                        )
                    ))

        return results


def search_papers(
    query: SearchQuery | str,
    catalog: Catalog,
    session_variants: list[str] | None = None
) -> SearchResponse:
    """Search the catalog with default settings."""
    return SearchEngine(catalog).search(query, session_variants=session_variants)


def combine_multi_session_results(results: list[SearchResult]) -> list[SearchResult]:
    """
    Collapse results for the same subject, unit and year across sessions.

    The best result of each group is kept and boosted 5% per extra member,
    capped at 20%.
    """
    groups: dict[tuple[str, str, int], list[SearchResult]] = {}
    for result in results:
        key = (result.subject.id, result.unit.id, result.paper.year)
        groups.setdefault(key, []).append(result)

    combined = []
    for group in groups.values():
        group.sort(key=lambda r: r.score, reverse=True)
        top = group[0]
        if len(group) > 1:
            boost = min(1.2, 1 + (len(group) - 1) * 0.05)
            top = top.model_copy(update={"score": top.score * boost})
        combined.append(top)

    combined.sort(key=lambda r: r.score, reverse=True)
    return combined
