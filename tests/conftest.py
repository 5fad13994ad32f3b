"""
Pytest configuration and fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from papersite.core.schemas import Catalog, Paper, Subject, Unit


@pytest.fixture
def physics_catalog():
    """Physics with two units and one paper per unit."""
    return Catalog(subjects={
        "physics": Subject(
            id="physics",
            name="Physics",
            units=[
                Unit(id="unit1", name="Unit 1", order=1, description="Forces and motion"),
                Unit(id="unit2", name="Unit 2", order=2),
            ],
            papers=[
                Paper(
                    id="phys-u1-jan24",
                    unit_id="unit1",
                    year=2024,
                    session="January",
                    title="Physics Unit 1 January 2024",
                    pdf_url="/physics/u1-jan24.pdf",
                    marking_scheme_url="/physics/u1-jan24-ms.pdf"
                ),
                Paper(
                    id="phys-u2-oct23",
                    unit_id="unit2",
                    year=2023,
                    session="October",
                    title="Physics Unit 2 October 2023",
                    pdf_url="/physics/u2-oct23.pdf",
                    marking_scheme_url="/physics/u2-oct23-ms.pdf"
                ),
            ]
        )
    })


@pytest.fixture
def mixed_catalog(physics_catalog):
    """Physics plus a small mathematics subject with May/June papers."""
    mathematics = Subject(
        id="mathematics",
        name="Mathematics",
        units=[
            Unit(id="pure1", name="Pure 1", order=1),
            Unit(id="mech1", name="Mechanics 1", order=2),
        ],
        papers=[
            Paper(id="math-p1-jun23", unit_id="pure1", year=2023, session="June",
                  title="Mathematics Pure 1 June 2023", pdf_url="/maths/p1-jun23.pdf"),
            Paper(id="math-p1-may22", unit_id="pure1", year=2022, session="May",
                  title="Mathematics Pure 1 May 2022", pdf_url="/maths/p1-may22.pdf"),
            Paper(id="math-m1-jan24", unit_id="mech1", year=2024, session="January",
                  title="Mathematics Mechanics 1 January 2024", pdf_url="/maths/m1-jan24.pdf"),
        ]
    )
    subjects = dict(physics_catalog.subjects)
    subjects["mathematics"] = mathematics
    return Catalog(subjects=subjects)


@pytest.fixture
def catalog_json():
    """Raw catalog data as shipped by the website (camelCase keys)."""
    return {
        "subjects": {
            "chemistry": {
                "id": "chemistry",
                "name": "Chemistry",
                "units": [{"id": "unit1", "name": "Unit 1", "order": 1}],
                "papers": [{
                    "id": "chem-u1-jan24",
                    "unitId": "unit1",
                    "year": 2024,
                    "session": "January",
                    "title": "Chemistry Unit 1 January 2024",
                    "pdfUrl": "/chemistry/u1-jan24.pdf",
                    "markingSchemeUrl": "/chemistry/u1-jan24-ms.pdf"
                }]
            }
        }
    }
