"""
Shared fixtures for the freight_routes test suite.

Distances used across the tests (Σ code points % 3000 + 100):

    London    → Paris      : 1129 → 1229 km  (Road)
    Rotterdam → Singapore  : 1882 → 1982 km  (Road + Sea + Road)
    A         → B          :  131 →  231 km  (Road)
"""

import logging
from pathlib import Path

import pytest


CSV_HEADER = "origin,originCountry,destination,destinationCountry,weightKg"


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def record():
    """A single valid raw record, as a CSV reader would produce it."""
    return {
        "origin": "London",
        "originCountry": "UK",
        "destination": "Paris",
        "destinationCountry": "France",
        "weightKg": "1000",
    }


@pytest.fixture
def mixed_records():
    """Five records: rows 2 and 4 are invalid."""
    return [
        {"origin": "London", "destination": "Paris", "weightKg": "1200"},
        {"origin": "", "destination": "Paris", "weightKg": "10"},
        {"origin": "Rotterdam", "destination": "Singapore", "weightKg": "15000"},
        {"origin": "Lyon", "destination": "Milan", "weightKg": "0"},
        {"origin": "London", "destination": "Paris", "weightKg": "800"},
    ]


@pytest.fixture
def write_csv(tmp_path):
    """Write CSV text to a temporary file and return its path."""
    def _write(text: str, name: str = "shipments.csv") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def shipments_csv(write_csv):
    """Seven data lines: six valid, one without origin, one with a bad weight."""
    return write_csv(
        "\n".join([
            CSV_HEADER,
            "London,UK,Paris,France,1200",
            "London,UK,Paris,France,800.5",
            "Rotterdam,Netherlands,Singapore,Singapore,15000",
            "Hamburg,Germany,Lisbon,Portugal,950",
            "Rotterdam,Netherlands,Singapore,Singapore,12500",
            ",Spain,Madrid,Spain,400",
            "Lyon,France,Milan,Italy,heavy",
        ]) + "\n"
    )


@pytest.fixture
def restore_logging(monkeypatch):
    """Undo root-logger changes made by init_logging()."""
    monkeypatch.delenv("FREIGHT_LOG_LEVEL", raising=False)
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
