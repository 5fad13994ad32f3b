"""
Static alias tables for query parsing and normalization.

Dict order matters: passes that scan a table take matches in table order.
"""

# Sessions that share a paper series
SESSION_EQUIVALENTS: dict[str, list[str]] = {
    "may": ["may", "june"],
    "june": ["may", "june"],
    "january": ["january"],
    "october": ["october"],
}

SUBJECT_ALIASES: dict[str, str] = {
    "phy": "physics",
    "phys": "physics",
    "p": "physics",
    "ph": "physics",
    "physi": "physics",
    "physic": "physics",
    "ch": "chemistry",
    "che": "chemistry",
    "chem": "chemistry",
    "chemi": "chemistry",
    "chemis": "chemistry",
    "chemist": "chemistry",
    "chemistr": "chemistry",
    "bi": "biology",
    "bio": "biology",
    "biol": "biology",
    "biolo": "biology",
    "biolog": "biology",
    "m": "mathematics",
    "ma": "mathematics",
    "mat": "mathematics",
    "math": "mathematics",
    "maths": "mathematics",
    "meth": "mathematics",
    "ac": "accounting",
    "acc": "accounting",
    "account": "accounting",
    "accounti": "accounting",
    "accountin": "accounting",
    "ec": "economics",
    "eco": "economics",
    "econom": "economics",
    "economi": "economics",
    "economis": "economics",
    "economic": "economics",
    "bu": "business",
    "bus": "business",
    "busi": "business",
    "busine": "business",
    "busines": "business",
    "business": "business",
    "businesse": "business",
    "ps": "psychology",
    "psy": "psychology",
    "psyc": "psychology",
    "psych": "psychology",
    "psychol": "psychology",
    "psycholo": "psychology",
    "psycholog": "psychology",
}

CANONICAL_SUBJECTS: frozenset[str] = frozenset(SUBJECT_ALIASES.values())


def _numbered_units(count: int) -> dict[str, str]:
    """u1/unit1 style aliases for subjects whose units are 'Unit 1'..'Unit N'."""
    aliases: dict[str, str] = {}
    for n in range(1, count + 1):
        aliases[f"u{n}"] = f"Unit {n}"
        aliases[f"unit{n}"] = f"Unit {n}"
    return aliases


UNIT_ALIASES: dict[str, dict[str, str]] = {
    "physics": {
        "u1": "Unit 1",
        "unit1": "Unit 1",
        "p1": "Unit 1",
        "mech": "Unit 1",
        "mechanics": "Unit 1",
        "u2": "Unit 2",
        "p2": "Unit 2",
        "unit2": "Unit 2",
        "wave": "Unit 2",
        "waves": "Unit 2",
        "u3": "Unit 3",
        "unit3": "Unit 3",
        "fields": "Unit 3",
        "field": "Unit 3",
        "u4": "Unit 4",
        "unit4": "Unit 4",
        "particles": "Unit 4",
        "particle": "Unit 4",
        "u5": "Unit 5",
        "unit5": "Unit 5",
        "astro": "Unit 5",
        "astronomy": "Unit 5",
        "u6": "Unit 6",
        "unit6": "Unit 6",
        "nuclear": "Unit 6",
    },
    "mathematics": {
        "p1": "Pure 1",
        "pure1": "Pure 1",
        "m1": "Mechanics 1",
        "mech1": "Mechanics 1",
        "s1": "Statistics 1",
        "stat1": "Statistics 1",
        "d1": "Decision 1",
        "dec1": "Decision 1",
        "p2": "Pure 2",
        "pure2": "Pure 2",
        "m2": "Mechanics 2",
        "mech2": "Mechanics 2",
        "s2": "Statistics 2",
        "stat2": "Statistics 2",
        "d2": "Decision 2",
        "dec2": "Decision 2",
        "p3": "Pure 3",
        "pure3": "Pure 3",
        "m3": "Mechanics 3",
        "mech3": "Mechanics 3",
        "s3": "Statistics 3",
        "stat3": "Statistics 3",
        "d3": "Decision 3",
        "dec3": "Decision 3",
        "p4": "Pure 4",
        "pure4": "Pure 4",
        "fp1": "Further Pure 1",
        "furtherpure1": "Further Pure 1",
        "fp2": "Further Pure 2",
        "furtherpure2": "Further Pure 2",
        "fp3": "Further Pure 3",
        "furtherpure3": "Further Pure 3",
    },
    "chemistry": _numbered_units(6),
    "biology": _numbered_units(6),
    "accounting": _numbered_units(4),
    "economics": _numbered_units(6),
    "business": _numbered_units(6),
    "psychology": _numbered_units(6),
}

MONTH_ALIASES: dict[str, str] = {
    "jan": "january",
    "feb": "february",
    "mar": "march",
    "apr": "april",
    "may": "may",
    "jun": "june",
    "jul": "july",
    "aug": "august",
    "sep": "september",
    "sept": "september",
    "oct": "october",
    "nov": "november",
    "dec": "december",
}

# Filler words dropped during normalization
STOP_WORDS: tuple[str, ...] = (
    "paper",
    "papers",
    "past",
    "exam",
    "exams",
    "test",
    "tests",
)
