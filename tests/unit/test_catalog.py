"""
Unit tests for catalog loading.
"""
import json
import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from papersite.core.catalog import CatalogError, load_catalog, parse_catalog


class TestParseCatalog:
    """Tests for validating raw catalog data."""

    def test_camel_case_keys(self, catalog_json):
        catalog = parse_catalog(catalog_json)
        paper = catalog.subjects["chemistry"].papers[0]
        assert paper.unit_id == "unit1"
        assert paper.pdf_url == "/chemistry/u1-jan24.pdf"
        assert paper.marking_scheme_url == "/chemistry/u1-jan24-ms.pdf"
        assert catalog.paper_count() == 1

    def test_missing_year(self, catalog_json):
        del catalog_json["subjects"]["chemistry"]["papers"][0]["year"]
        with pytest.raises(CatalogError):
            parse_catalog(catalog_json)

    def test_empty_catalog(self):
        assert parse_catalog({"subjects": {}}).paper_count() == 0

    def test_find_unit(self, catalog_json):
        subject = parse_catalog(catalog_json).subjects["chemistry"]
        assert subject.find_unit("unit1").name == "Unit 1"
        assert subject.find_unit("unit9") is None


class TestLoadCatalog:
    """Tests for reading catalog files."""

    def test_load_file(self, tmp_path, catalog_json):
        path = tmp_path / "subjects.json"
        path.write_text(json.dumps(catalog_json), encoding="utf-8")
        catalog = load_catalog(path)
        assert list(catalog.subjects) == ["chemistry"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_catalog(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CatalogError, match="not valid JSON"):
            load_catalog(path)

    def test_invalid_paper_names_file(self, tmp_path, catalog_json):
        del catalog_json["subjects"]["chemistry"]["papers"][0]["unitId"]
        path = tmp_path / "subjects.json"
        path.write_text(json.dumps(catalog_json), encoding="utf-8")
        with pytest.raises(CatalogError, match="subjects.json"):
            load_catalog(path)

    def test_shipped_catalog(self):
        path = Path(__file__).parent.parent.parent / "data" / "subjects.json"
        catalog = load_catalog(path)
        assert set(catalog.subjects) == {"physics", "mathematics"}
        assert catalog.paper_count() == 4
