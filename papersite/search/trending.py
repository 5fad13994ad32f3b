"""
Trending search tracking.

Provides:
- Per-query use counts with last-used timestamps
- Decayed ranking that keeps only the top entries
- Trending subjects derived from recent queries
"""
import logging
import sqlite3
from pathlib import Path
from dataclasses import dataclass
from datetime import datetime

from ..core.config import TrendingSettings

logger = logging.getLogger(__name__)

# Subjects surfaced as trending, matched by full name or 3-letter prefix
TRENDING_SUBJECTS = ("physics", "chemistry", "mathematics", "biology")


@dataclass
class TrendingEntry:
    """A tracked search query."""
    query: str
    count: int
    last_used: datetime

    def days_old(self, now: datetime) -> float:
        return (now - self.last_used).total_seconds() / 86400

    def decayed_score(self, now: datetime, decay_days: float) -> float:
        """Use count scaled down linearly to zero over ``decay_days``."""
        decay = max(0.0, 1 - self.days_old(now) / decay_days)
        return self.count * decay

    def to_dict(self) -> dict:
        return {
            "query": self.query,
            "count": self.count,
            "last_used": self.last_used.isoformat()
        }


class TrendingSearches:
    """
    SQLite-backed store of recent search queries.

    Only the highest-scoring entries survive each write, so the table stays
    small.
    """

    def __init__(
        self,
        db_path: str | Path = "data/trending.db",
        settings: TrendingSettings | None = None
    ):
        """
        Initialize trending store.

        Args:
            db_path: Path to SQLite database file
            settings: Entry cap and decay window
        """
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.settings = settings or TrendingSettings()

        self._init_db()
        logger.info(f"TrendingSearches initialized at {self.db_path}")

    def _init_db(self):
        """Create tables if they don't exist."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS trending_searches (
                    query TEXT PRIMARY KEY,
                    count INTEGER NOT NULL,
                    last_used TEXT NOT NULL
                )
            """)
            conn.commit()

    def _load(self, conn: sqlite3.Connection) -> list[TrendingEntry]:
        conn.row_factory = sqlite3.Row
        cursor = conn.execute("SELECT query, count, last_used FROM trending_searches")
        return [
            TrendingEntry(
                query=row["query"],
                count=row["count"],
                last_used=datetime.fromisoformat(row["last_used"])
            )
            for row in cursor
        ]

    # --------------------------------------------------------
    # Recording
    # --------------------------------------------------------

    def log_search(self, query: str, now: datetime | None = None) -> TrendingEntry:
        """
        Record a use of ``query`` and prune to the top entries.

        Returns:
            The updated entry for ``query``

        Raises:
            ValueError: If the query is blank
        """
        query = query.strip()
        if not query:
            raise ValueError("Cannot log an empty search query")
        now = now or datetime.now()

        with sqlite3.connect(self.db_path) as conn:
            entries = {e.query: e for e in self._load(conn)}

            entry = entries.get(query)
            if entry:
                entry.count += 1
                entry.last_used = now
            else:
                entry = TrendingEntry(query=query, count=1, last_used=now)
                entries[query] = entry

            ranked = sorted(
                entries.values(),
                key=lambda e: e.decayed_score(now, self.settings.decay_days),
                reverse=True
            )
            kept = ranked[:self.settings.max_entries]

            conn.execute("DELETE FROM trending_searches")
            conn.executemany(
                "INSERT INTO trending_searches (query, count, last_used) VALUES (?, ?, ?)",
                [(e.query, e.count, e.last_used.isoformat()) for e in kept]
            )
            conn.commit()

        dropped = len(ranked) - len(kept)
        if dropped:
            logger.debug(f"Pruned {dropped} trending entries")
        return entry

    # --------------------------------------------------------
    # Queries
    # --------------------------------------------------------

    def get_entries(self) -> list[TrendingEntry]:
        """All stored entries, unordered."""
        with sqlite3.connect(self.db_path) as conn:
            return self._load(conn)

    def get_trending_searches(self, now: datetime | None = None) -> list[str]:
        """Queries used within the decay window, most used first."""
        now = now or datetime.now()
        recent = [
            e for e in self.get_entries()
            if e.days_old(now) <= self.settings.decay_days
        ]
        recent.sort(key=lambda e: e.count, reverse=True)
        return [e.query for e in recent]

    def get_trending_subjects(self, now: datetime | None = None) -> list[str]:
        """Subjects named (or abbreviated to 3 letters) in trending queries."""
        subjects: list[str] = []
        for query in self.get_trending_searches(now):
            words = query.lower().split()
            for subject in TRENDING_SUBJECTS:
                if subject in subjects:
                    continue
                if subject in words or subject[:3] in words:
                    subjects.append(subject)
        return subjects

    def clear(self):
        """Remove all tracked queries."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("DELETE FROM trending_searches")
            conn.commit()
        logger.warning("Trending searches cleared")
