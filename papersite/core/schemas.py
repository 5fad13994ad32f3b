"""
Pydantic schemas for the paper catalog and search engine.

Catalog models accept the camelCase keys used by the website's static
subjects JSON (``unitId``, ``pdfUrl``, ``markingSchemeUrl``) as well as their
snake_case field names.
"""
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


# ============================================================
# Catalog
# ============================================================

class Unit(BaseModel):
    """A unit (module) of a subject."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unit identifier, unique within its subject")
    name: str = Field(..., description="Display name (e.g., 'Unit 1', 'Pure 1')")
    description: str | None = Field(None, description="Short topic summary")
    order: int = Field(default=0, description="Display order")


class Paper(BaseModel):
    """A past paper with its marking scheme."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    unit_id: str = Field(..., alias="unitId", description="Owning unit within the same subject")
    year: int
    session: str = Field(..., description="e.g., 'January', 'June', 'October'")
    title: str = ""
    pdf_url: str = Field(default="", alias="pdfUrl")
    marking_scheme_url: str = Field(default="", alias="markingSchemeUrl")


class Subject(BaseModel):
    """A subject with its ordered units and papers."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    units: list[Unit] = Field(default_factory=list)
    papers: list[Paper] = Field(default_factory=list)

    def find_unit(self, unit_id: str) -> Unit | None:
        """Resolve a unit by id, or None if the subject has no such unit."""
        for unit in self.units:
            if unit.id == unit_id:
                return unit
        return None


class Catalog(BaseModel):
    """The full subject catalog. Dict order is search iteration order."""
    model_config = ConfigDict(frozen=True)

    subjects: dict[str, Subject] = Field(default_factory=dict)

    def paper_count(self) -> int:
        return sum(len(s.papers) for s in self.subjects.values())


# ============================================================
# Queries
# ============================================================

class SearchQuery(BaseModel):
    """Search input: free text plus optional explicit filters.

    ``units`` and ``sessions`` are multi-select filters; a single ``unit`` or
    ``session`` is treated as a one-element selection.
    """
    text: str = ""
    subject: str | None = None
    unit: str | None = None
    year: int | None = None
    session: str | None = None
    units: list[str] = Field(default_factory=list)
    sessions: list[str] = Field(default_factory=list)

    def unit_filters(self) -> list[str]:
        if self.units:
            return list(self.units)
        return [self.unit] if self.unit else []

    def session_filters(self) -> list[str]:
        if self.sessions:
            return list(self.sessions)
        return [self.session] if self.session else []


class ParsedQuery(BaseModel):
    """Structured filters extracted from free text."""
    subject: str | None = Field(None, description="Canonical lowercase subject name")
    unit: str | None = Field(None, description="Canonical unit display name")
    year: int | None = None
    session: str | None = Field(None, description="Canonical lowercase month name")
    text: str = Field(default="", description="Input with recognised tokens removed")


# ============================================================
# Results
# ============================================================

class MatchFlags(BaseModel):
    """Which filter dimensions a paper satisfies."""
    text: bool = False
    subject: bool = False
    unit: bool = False
    year: bool = False
    session: bool = False

    def any(self) -> bool:
        return self.text or self.subject or self.unit or self.year or self.session


class SearchResult(BaseModel):
    """A matched paper with its score."""
    paper: Paper
    unit: Unit
    subject: Subject
    matches: MatchFlags
    score: float = Field(..., description="Ordering key only, no fixed scale")

    def to_dict(self) -> dict:
        return {
            "paper_id": self.paper.id,
            "title": self.paper.title,
            "subject": self.subject.name,
            "unit": self.unit.name,
            "year": self.paper.year,
            "session": self.paper.session,
            "pdf_url": self.paper.pdf_url,
            "marking_scheme_url": self.paper.marking_scheme_url,
            "score": self.score,
            "matches": self.matches.model_dump()
        }


class SuggestionType(str, Enum):
    """Kinds of search suggestions."""
    SUBJECT = "subject"
    UNIT = "unit"
    REFINEMENT = "refinement"
    SESSION = "session"
    YEAR = "year"
    INFO = "info"


class SearchSuggestion(BaseModel):
    """A query refinement offered when a search finds nothing."""
    type: SuggestionType
    text: str = Field(..., description="Display text, also the dedup key")
    value: str = Field(default="", description="Value to feed back as an explicit filter")
    score: float


class SearchResponse(BaseModel):
    """Ranked results and suggestions for one search call."""
    results: list[SearchResult] = Field(default_factory=list)
    suggestions: list[SearchSuggestion] = Field(default_factory=list)
