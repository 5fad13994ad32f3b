"""
Free-text query parsing for paper search.

Turns loosely structured queries such as ``"phy u1 jan 24"`` or
``"p1jan21"`` into a ParsedQuery of subject, unit, year and session filters.

Parsing is a fixed sequence of extraction passes over a shrinking token
list. Each pass takes the unconsumed tokens and returns
``(value, remaining_tokens)``, so a token is consumed by at most one
category:

1. year (``24`` or ``2024``)
2. subject alias (``phy`` -> physics)
3. unit alias, scoped to the subject (``u1`` -> Unit 1)
4. month / session (``jan`` -> january)
5. unit substring fallback over the remaining text
6. combined single token (``p1jan21``)

No catalog access happens here; recognition relies only on the static
tables in ``aliases``.
"""
import logging
import re

from ..core.schemas import ParsedQuery
from .aliases import (
    CANONICAL_SUBJECTS,
    MONTH_ALIASES,
    SESSION_EQUIVALENTS,
    STOP_WORDS,
    SUBJECT_ALIASES,
    UNIT_ALIASES,
)

logger = logging.getLogger(__name__)

DEFAULT_MIN_YEAR = 2000
DEFAULT_MAX_YEAR = 2025

_DIGIT_RUN = re.compile(r"\d{2,4}")


def _build_variations() -> list[tuple[re.Pattern, str]]:
    # Subject aliases, then months, then filler words
    variations: dict[str, str] = {}
    variations.update(SUBJECT_ALIASES)
    variations.update(MONTH_ALIASES)
    variations.update({word: "" for word in STOP_WORDS})
    return [
        (re.compile(rf"\b{re.escape(variant)}\b", re.ASCII), replacement)
        for variant, replacement in variations.items()
    ]


_VARIATIONS = _build_variations()


# --------------------------------------------------------
# Normalization
# --------------------------------------------------------

def normalize_search_term(term: str) -> str:
    """
    Normalize a search term for comparison.

    Lowercases and trims, drops filler words (paper, past, exam, ...) and
    rewrites whole-word subject and month aliases to canonical names.
    Applying it twice gives the same result as applying it once.
    """
    term = term.lower().strip()
    for pattern, replacement in _VARIATIONS:
        term = pattern.sub(replacement, term)
    return term.strip()


def get_equivalent_sessions(session: str) -> list[str]:
    """Sessions interchangeable with ``session`` (May and June share papers)."""
    normalized = session.lower()
    return list(SESSION_EQUIVALENTS.get(normalized, [normalized]))


# --------------------------------------------------------
# Extraction passes
# --------------------------------------------------------

def year_from_string(value: str, min_year: int = DEFAULT_MIN_YEAR,
                     max_year: int = DEFAULT_MAX_YEAR) -> int | None:
    """Interpret ``24`` as 2024 and ``2024`` as itself; anything else is None."""
    if not value.isascii() or not value.isdigit():
        return None
    if len(value) == 2:
        return 2000 + int(value)
    if len(value) == 4 and min_year <= int(value) <= max_year:
        return int(value)
    return None


def _without(tokens: list[str], index: int) -> list[str]:
    return tokens[:index] + tokens[index + 1:]


def extract_year(tokens: list[str], min_year: int = DEFAULT_MIN_YEAR,
                 max_year: int = DEFAULT_MAX_YEAR) -> tuple[int | None, list[str]]:
    for i, token in enumerate(tokens):
        year = year_from_string(token, min_year, max_year)
        if year is not None:
            return year, _without(tokens, i)
    return None, tokens


def extract_subject(tokens: list[str]) -> tuple[str | None, list[str]]:
    for i, token in enumerate(tokens):
        if token in SUBJECT_ALIASES:
            return SUBJECT_ALIASES[token], _without(tokens, i)
        if token in CANONICAL_SUBJECTS:
            return token, _without(tokens, i)
    return None, tokens


def extract_unit(tokens: list[str], subject: str | None) -> tuple[str | None, list[str]]:
    unit_aliases = UNIT_ALIASES.get(subject or "")
    if not unit_aliases:
        return None, tokens

    canonical = {name.lower(): name for name in unit_aliases.values()}
    for i, token in enumerate(tokens):
        if token in unit_aliases:
            return unit_aliases[token], _without(tokens, i)
        if token in canonical:
            return canonical[token], _without(tokens, i)
    return None, tokens


def extract_session(tokens: list[str]) -> tuple[str | None, list[str]]:
    months = set(MONTH_ALIASES.values())
    for i, token in enumerate(tokens):
        if token in MONTH_ALIASES:
            return MONTH_ALIASES[token], _without(tokens, i)
        if token in months:
            return token, _without(tokens, i)
    return None, tokens


def extract_unit_fallback(tokens: list[str], subject: str | None) -> tuple[str | None, list[str]]:
    """Find a unit alias anywhere in the remaining text ("mechanics1" -> Unit 1)."""
    unit_aliases = UNIT_ALIASES.get(subject or "")
    if not unit_aliases:
        return None, tokens

    remaining_text = " ".join(tokens)
    for alias, unit in unit_aliases.items():
        if alias in remaining_text:
            return unit, [t for t in tokens if alias not in t]
    return None, tokens


def _match_unit_in_token(token: str, subject: str | None) -> tuple[str | None, str | None]:
    """
    Substring-match a token against the unit tables.

    A known subject keeps its own table. Otherwise the first subject in
    table order with any match wins, which resolves the ambiguous ``p1`` to
    physics Unit 1 rather than mathematics Pure 1. Within a table the last
    matching alias wins.
    """
    tables = [subject] if subject else list(UNIT_ALIASES)
    for candidate in tables:
        matched = None
        for alias, unit in UNIT_ALIASES.get(candidate, {}).items():
            if alias in token:
                matched = unit
        if matched:
            return candidate, matched
    return None, None


def extract_combined(tokens: list[str], parsed: ParsedQuery,
                     min_year: int = DEFAULT_MIN_YEAR,
                     max_year: int = DEFAULT_MAX_YEAR) -> tuple[ParsedQuery, list[str]]:
    """
    Pull unit, session and year out of a single run-together token.

    Only fields still unset are filled. The token is consumed if it yields
    anything.
    """
    if len(tokens) != 1:
        return parsed, tokens

    token = tokens[0]
    updates: dict = {}

    if parsed.unit is None:
        subject, unit = _match_unit_in_token(token, parsed.subject)
        if unit:
            updates["subject"] = subject
            updates["unit"] = unit

    if parsed.session is None:
        session = None
        for alias, month in MONTH_ALIASES.items():
            if alias in token:
                session = month
        if session:
            updates["session"] = session

    if parsed.year is None:
        digits = _DIGIT_RUN.search(token)
        if digits:
            year = year_from_string(digits.group(0), min_year, max_year)
            if year is not None:
                updates["year"] = year

    if not updates:
        return parsed, tokens

    logger.debug(f"Combined token '{token}' -> {updates}")
    return parsed.model_copy(update=updates), []


# --------------------------------------------------------
# Entry points
# --------------------------------------------------------

def parse_search_query(query: str, min_year: int = DEFAULT_MIN_YEAR,
                       max_year: int = DEFAULT_MAX_YEAR) -> ParsedQuery:
    """
    Parse free text into structured search filters.

    Args:
        query: Raw search text
        min_year: Lowest 4-digit year accepted
        max_year: Highest 4-digit year accepted

    Returns:
        ParsedQuery with any recognised filters and the residual text
    """
    tokens = query.lower().split()

    year, tokens = extract_year(tokens, min_year, max_year)
    subject, tokens = extract_subject(tokens)
    unit, tokens = extract_unit(tokens, subject)
    session, tokens = extract_session(tokens)

    if unit is None and subject is not None:
        unit, tokens = extract_unit_fallback(tokens, subject)

    parsed = ParsedQuery(subject=subject, unit=unit, year=year, session=session)
    parsed, tokens = extract_combined(tokens, parsed, min_year, max_year)

    return parsed.model_copy(update={"text": " ".join(tokens)})


def format_parsed_query(parsed: ParsedQuery) -> str:
    """Short summary of recognised filters, e.g. 'physics • Unit 1 • january • 2024'."""
    parts = []
    if parsed.subject:
        parts.append(parsed.subject)
    if parsed.unit:
        parts.append(parsed.unit)
    if parsed.session:
        parts.append(parsed.session)
    if parsed.year:
        parts.append(str(parsed.year))
    return " • ".join(parts)
