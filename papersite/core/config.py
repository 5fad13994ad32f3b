"""
Central configuration management for papersite search.

Loads settings from environment variables and provides typed access.
"""
from pathlib import Path
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class SearchSettings(BaseSettings):
    """Ranking and result-size settings for the paper search engine.

    The year bounds decide which 4-digit tokens the query parser accepts as
    years. They are static so that parsing stays a pure function of the text.
    """
    max_results: int = Field(default=20, alias="SEARCH_MAX_RESULTS")
    max_suggestions: int = Field(default=5, alias="SEARCH_MAX_SUGGESTIONS")
    recency_decay: float = Field(
        default=0.1,
        alias="SEARCH_RECENCY_DECAY",
        description="Recency bonus lost per year of paper age"
    )
    min_year: int = Field(default=2000, alias="SEARCH_MIN_YEAR")
    max_year: int = Field(default=2025, alias="SEARCH_MAX_YEAR")


class TrendingSettings(BaseSettings):
    """Trending search tracking."""
    max_entries: int = Field(default=10, alias="TRENDING_MAX_ENTRIES")
    decay_days: float = Field(default=7.0, alias="TRENDING_DECAY_DAYS")


class PathSettings(BaseSettings):
    """Path configuration."""
    catalog: Path = Field(default=Path("data/subjects.json"), alias="CATALOG_PATH")
    trending_db: Path = Field(default=Path("data/trending.db"), alias="TRENDING_DB_PATH")


class Settings(BaseSettings):
    """Main settings aggregator."""
    search: SearchSettings = Field(default_factory=SearchSettings)
    trending: TrendingSettings = Field(default_factory=TrendingSettings)
    paths: PathSettings = Field(default_factory=PathSettings)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def load_dotenv_if_exists():
    """Load the project .env file into the environment if it exists."""
    from dotenv import load_dotenv
    env_path = Path(__file__).parent.parent.parent / ".env"
    if env_path.exists():
        load_dotenv(env_path)
