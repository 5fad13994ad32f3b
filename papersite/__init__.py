"""
papersite - Past-paper search for exam revision

Fuzzy search over a static catalog of subjects, units and past papers:
- Shorthand query parsing ("phy u1 jan 24", "p1jan21")
- Weighted match scoring with a recency boost
- Suggestions when a search finds nothing
- Trending search tracking

Modules:
    core    - Configuration, schemas, catalog loading
    search  - Query parser, search engine, suggestions, trending searches
    cli     - Command-line search over a catalog file
"""

__version__ = "1.0.0"
