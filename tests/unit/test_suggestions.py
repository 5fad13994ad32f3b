"""
Unit tests for search suggestions.
"""
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from papersite.core.schemas import Catalog, SearchQuery, SearchSuggestion, Subject, SuggestionType
from papersite.search.engine import search_papers
from papersite.search.suggestions import (
    YEAR_REFINEMENT_TEXT,
    generate_suggestions,
    multi_filter_info,
    rank_suggestions,
)


def _types(suggestions):
    return [s.type for s in suggestions]


class TestSuggestionsFromSearch:
    """Suggestions produced by search_papers."""

    def test_no_suggestions_when_results(self, physics_catalog):
        response = search_papers(SearchQuery(text="phy"), physics_catalog)
        assert response.results
        assert response.suggestions == []

    def test_subject_suggestions_first(self, mixed_catalog):
        response = search_papers(SearchQuery(text="", year=2019), mixed_catalog)
        assert response.results == []
        assert _types(response.suggestions)[:2] == [SuggestionType.SUBJECT, SuggestionType.SUBJECT]
        assert response.suggestions[0].text == 'Try searching in "Physics"'
        assert response.suggestions[0].value == "Physics"

    def test_unit_suggestions_for_subject(self, physics_catalog):
        response = search_papers(SearchQuery(text="phy dec 23"), physics_catalog)
        assert response.results == []
        unit_values = [s.value for s in response.suggestions if s.type == SuggestionType.UNIT]
        assert unit_values == ["Unit 1", "Unit 2"]
        assert response.suggestions[0].score == 0.7

    def test_year_refinement(self, physics_catalog):
        response = search_papers(SearchQuery(text="", session="March"), physics_catalog)
        assert response.results == []
        assert _types(response.suggestions) == [
            SuggestionType.SUBJECT, SuggestionType.REFINEMENT, SuggestionType.YEAR, SuggestionType.YEAR
        ]
        assert response.suggestions[1].text == YEAR_REFINEMENT_TEXT
        assert [s.text for s in response.suggestions[2:]] == ["Papers from 2024", "Papers from 2023"]

    def test_suggestions_do_not_depend_on_subject_order(self, physics_catalog):
        empty = Subject(id="empty", name="Economics")
        forward = Catalog(subjects={"empty": empty, **physics_catalog.subjects})
        backward = Catalog(subjects={**physics_catalog.subjects, "empty": empty})
        query = SearchQuery(text="", year=2019)

        texts_forward = {s.text for s in search_papers(query, forward).suggestions}
        texts_backward = {s.text for s in search_papers(query, backward).suggestions}
        assert 'Try searching in "Economics"' in texts_forward
        assert texts_forward == texts_backward

    def test_cap_at_five(self, mixed_catalog):
        response = search_papers(SearchQuery(text="", year=2019), mixed_catalog)
        assert len(response.suggestions) == 5


class TestGenerateSuggestions:
    """Direct tests of the suggestion pass."""

    def test_duplicate_texts_collapse(self, physics_catalog):
        physics = physics_catalog.subjects["physics"]
        catalog = Catalog(subjects={
            "physics": physics,
            "physics-ial": physics.model_copy(update={"id": "physics-ial"}),
        })
        suggestions = generate_suggestions(catalog, year_filter=2019)
        texts = [s.text for s in suggestions]
        assert texts.count('Try searching in "Physics"') == 1
        assert len(texts) == len(set(texts))

    def test_session_suggestions(self, physics_catalog):
        suggestions = generate_suggestions(physics_catalog, subject_filter="Physics",
                                           unit_filters=["Unit 9"], year_filter=2019)
        assert [s.value for s in suggestions] == ["January 2024", "October 2023"]
        assert all(s.type == SuggestionType.SESSION for s in suggestions)

    def test_recent_year_suggestions(self, physics_catalog):
        suggestions = generate_suggestions(physics_catalog, unit_filters=["Unit 9"])
        years = [s for s in suggestions if s.type == SuggestionType.YEAR]
        assert [(s.text, s.value, s.score) for s in years] == [
            ("Papers from 2024", "2024", 0.6),
            ("Papers from 2023", "2023", 0.6),
        ]
        # Sessions outrank the year suggestions
        assert _types(suggestions) == [
            SuggestionType.SUBJECT,
            SuggestionType.SESSION, SuggestionType.SESSION,
            SuggestionType.REFINEMENT,
            SuggestionType.YEAR, SuggestionType.YEAR,
        ]

    def test_year_suggestions_deduplicated_across_subjects(self, mixed_catalog):
        suggestions = generate_suggestions(mixed_catalog, session_filters=["march"])
        years = [s.value for s in suggestions if s.type == SuggestionType.YEAR]
        assert years == ["2024", "2023"]

    def test_subject_filter_limits_visited_subjects(self, mixed_catalog):
        suggestions = generate_suggestions(mixed_catalog, subject_filter="mathematics",
                                           session_filters=["march"], year_filter=2019)
        assert [s.value for s in suggestions] == ["Pure 1", "Mechanics 1"]


def test_rank_suggestions_keeps_first_of_equal_text():
    ranked = rank_suggestions([
        SearchSuggestion(type=SuggestionType.REFINEMENT, text="same", score=0.6),
        SearchSuggestion(type=SuggestionType.SUBJECT, text="same", score=0.8),
        SearchSuggestion(type=SuggestionType.UNIT, text="other", score=0.7),
    ])
    assert [(s.text, s.type) for s in ranked] == [
        ("same", SuggestionType.SUBJECT),
        ("other", SuggestionType.UNIT),
    ]


def test_multi_filter_info():
    assert multi_filter_info(["Unit 1"], ["may"]) is None
    info = multi_filter_info(["Unit 1"], ["may", "june"])
    assert info.type == SuggestionType.INFO
    assert info.text == "Searching across 1 units and 2 sessions"
    assert info.score == 1.0
