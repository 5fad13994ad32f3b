"""
Suggestion generation for searches that return nothing.

Runs as a separate pass after the catalog scan, so suggestions do not
depend on which subject happened to be scanned first.
"""
import logging
from collections import Counter
from typing import Iterable

from ..core.schemas import Catalog, SearchSuggestion, Subject, SuggestionType
from .query_parser import normalize_search_term

logger = logging.getLogger(__name__)

SUBJECT_SCORE = 0.8
UNIT_SCORE = 0.7
SESSION_SCORE = 0.65
REFINEMENT_SCORE = 0.6
YEAR_SCORE = 0.6
INFO_SCORE = 1.0

YEAR_REFINEMENT_TEXT = "Add a year to your search (e.g., 2024)"


def _subject_suggestions(
    subject: Subject,
    subject_filter: str | None,
    unit_filters: list[str],
    session_filters: list[str],
    year_filter: int | None
) -> list[SearchSuggestion]:
    suggestions = []

    if not subject_filter:
        suggestions.append(SearchSuggestion(
            type=SuggestionType.SUBJECT,
            text=f'Try searching in "{subject.name}"',
            value=subject.name,
            score=SUBJECT_SCORE
        ))

    if (subject_filter and not unit_filters
            and subject_filter.lower() in subject.name.lower()):
        for unit in subject.units:
            suggestions.append(SearchSuggestion(
                type=SuggestionType.UNIT,
                text=f'Look in "{unit.name}" unit',
                value=unit.name,
                score=UNIT_SCORE
            ))

    if not session_filters:
        counts = Counter(f"{p.session} {p.year}" for p in subject.papers)
        for session, _ in counts.most_common(2):
            suggestions.append(SearchSuggestion(
                type=SuggestionType.SESSION,
                text=f'Try papers from "{session}"',
                value=session,
                score=SESSION_SCORE
            ))

    if year_filter is None:
        suggestions.append(SearchSuggestion(
            type=SuggestionType.REFINEMENT,
            text=YEAR_REFINEMENT_TEXT,
            value="",
            score=REFINEMENT_SCORE
        ))

        # Two most recent years with papers
        for year in sorted({p.year for p in subject.papers}, reverse=True)[:2]:
            suggestions.append(SearchSuggestion(
                type=SuggestionType.YEAR,
                text=f"Papers from {year}",
                value=str(year),
                score=YEAR_SCORE
            ))

    return suggestions


def rank_suggestions(suggestions: Iterable[SearchSuggestion]) -> list[SearchSuggestion]:
    """Sort by score (stable) and drop repeated display texts, keeping the first."""
    ranked = sorted(suggestions, key=lambda s: s.score, reverse=True)
    seen: set[str] = set()
    unique = []
    for suggestion in ranked:
        if suggestion.text in seen:
            continue
        seen.add(suggestion.text)
        unique.append(suggestion)
    return unique


def generate_suggestions(
    catalog: Catalog,
    subject_filter: str | None = None,
    unit_filters: list[str] | None = None,
    session_filters: list[str] | None = None,
    year_filter: int | None = None
) -> list[SearchSuggestion]:
    """
    Suggest ways to widen or redirect a search that found no papers.

    Subjects excluded by the subject filter are not visited.

    Returns:
        Ranked, de-duplicated suggestions (not truncated)
    """
    unit_filters = unit_filters or []
    session_filters = session_filters or []
    normalized_subject = normalize_search_term(subject_filter) if subject_filter else None

    suggestions: list[SearchSuggestion] = []
    for subject in catalog.subjects.values():
        if normalized_subject and normalize_search_term(subject.name) != normalized_subject:
            continue
        suggestions.extend(_subject_suggestions(
            subject, subject_filter, unit_filters, session_filters, year_filter
        ))

    ranked = rank_suggestions(suggestions)
    logger.debug(f"Generated {len(ranked)} suggestions from {len(suggestions)} candidates")
    return ranked


def multi_filter_info(unit_filters: list[str], session_filters: list[str]) -> SearchSuggestion | None:
    """Info notice shown when several units or sessions are selected at once."""
    if len(unit_filters) <= 1 and len(session_filters) <= 1:
        return None
    return SearchSuggestion(
        type=SuggestionType.INFO,
        text=f"Searching across {len(unit_filters)} units and {len(session_filters)} sessions",
        value="",
        score=INFO_SCORE
    )
