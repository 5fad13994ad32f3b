"""
Static subject catalog loading.

The catalog is a JSON document of the form::

    {"subjects": {"physics": {"id": "physics", "name": "Physics",
                              "units": [...], "papers": [...]}}}

It is loaded once at start-up and treated as read-only afterwards.
"""
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .schemas import Catalog

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when a catalog file cannot be decoded or validated."""


def parse_catalog(data: dict[str, Any]) -> Catalog:
    """Validate raw catalog data into a Catalog."""
    try:
        return Catalog.model_validate(data)
    except ValidationError as e:
        raise CatalogError(f"Invalid catalog data: {e}") from e


def load_catalog(path: str | Path) -> Catalog:
    """
    Load and validate a catalog JSON file.

    Args:
        path: Path to the subjects JSON file

    Returns:
        Validated Catalog

    Raises:
        FileNotFoundError: If the file does not exist
        CatalogError: If the file is not valid JSON or fails validation
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Catalog not found: {path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise CatalogError(f"Catalog {path} is not valid JSON: {e}") from e

    try:
        catalog = parse_catalog(data)
    except CatalogError as e:
        raise CatalogError(f"Catalog {path}: {e}") from e

    logger.info(
        f"Loaded catalog from {path} "
        f"({len(catalog.subjects)} subjects, {catalog.paper_count()} papers)"
    )
    return catalog
