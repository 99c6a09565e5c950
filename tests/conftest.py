"""Shared fixtures for catalog, query, and session tests."""

import pytest

from logic.catalog_builder import build_catalog

SAMPLE_LINES = [
    "CSCI100,Introduction to Computer Science",
    "CSCI101,Introduction to Programming in C++,CSCI100",
    "CSCI200,Data Structures,CSCI101",
    "MATH201,Discrete Mathematics",
    "CSCI300,Introduction to Algorithms,CSCI200,MATH201",
    "CSCI301,Advanced Programming in C++,CSCI101",
    "CSCI350,Introduction to Operating Systems,CSCI300",
    "CSCI400,Large Software Development,CSCI301,CSCI350",
]


@pytest.fixture
def sample_lines():
    return list(SAMPLE_LINES)


@pytest.fixture
def sample_catalog():
    """Catalog built from the ABCU sample course list."""
    catalog, warnings = build_catalog(SAMPLE_LINES)
    assert warnings == []
    return catalog


@pytest.fixture
def forward_ref_catalog():
    """
    Catalog where CSCI400 references an undefined course (CSCI999) and a
    course defined later in the file (CSCI350).
    """
    catalog, _ = build_catalog([
        "csci400,Large Software Development,csci350,CSCI999",
        "CSCI350,Introduction to Operating Systems",
    ])
    return catalog


@pytest.fixture
def catalog_file(tmp_path):
    """Write lines to a catalog file and return its path."""
    def _write(lines, name="courses.csv"):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return str(path)
    return _write
