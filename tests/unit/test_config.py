"""
Unit tests for settings.
"""
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from papersite.core.config import SearchSettings, Settings, TrendingSettings


def test_defaults(monkeypatch):
    for name in ("SEARCH_MAX_RESULTS", "SEARCH_MAX_YEAR", "TRENDING_MAX_ENTRIES", "CATALOG_PATH"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings()
    assert settings.search.max_results == 20
    assert settings.search.max_suggestions == 5
    assert settings.search.recency_decay == 0.1
    assert (settings.search.min_year, settings.search.max_year) == (2000, 2025)
    assert settings.trending.max_entries == 10
    assert settings.trending.decay_days == 7.0
    assert settings.paths.catalog == Path("data/subjects.json")


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SEARCH_MAX_RESULTS", "5")
    monkeypatch.setenv("SEARCH_MAX_YEAR", "2030")
    monkeypatch.setenv("TRENDING_DECAY_DAYS", "3")
    assert SearchSettings().max_results == 5
    assert SearchSettings().max_year == 2030
    assert TrendingSettings().decay_days == 3.0


def test_nested_settings_read_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("CATALOG_PATH", str(tmp_path / "catalog.json"))
    assert Settings().paths.catalog == tmp_path / "catalog.json"
