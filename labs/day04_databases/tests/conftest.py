"""
Fixtures: a small stand-in for the nycflights13 tables and an open session.
"""

import polars as pl
import pytest

from labs.day04_databases import session as session_module
from labs.day04_databases.session import DatabaseSession

SMALL_TABLES = {
    "airlines": pl.DataFrame(
        {
            "carrier": ["AA", "DL", "UA"],
            "name": ["American Airlines Inc.", "Delta Air Lines Inc.", "United Air Lines Inc."],
        }
    ),
    "airports": pl.DataFrame(
        {
            "faa": ["ATL", "IAH", "MIA"],
            "name": ["Hartsfield Jackson Atlanta Intl", "George Bush Intercontinental", "Miami Intl"],
        }
    ),
    "flights": pl.DataFrame(
        {
            "year": [2013] * 6,
            "month": [1, 1, 1, 2, 2, 3],
            "day": [1, 1, 2, 5, 9, 3],
            "dep_delay": [2.0, 340.0, 30.0, None, 330.0, 5.0],
            "arr_delay": [11.0, 250.0, 20.0, None, 340.0, 9.0],
            "carrier": ["UA", "AA", "UA", "DL", "AA", "UA"],
            "tailnum": ["N14228", "N619AA", "N24211", "N668DN", "N3ALAA", "N14228"],
            "origin": ["EWR", "JFK", "LGA", "LGA", "JFK", "EWR"],
            "dest": ["IAH", "MIA", "IAH", "ATL", "MIA", "IAH"],
            "distance": [1400.0, 1089.0, 1416.0, 762.0, 1089.0, 1400.0],
        }
    ),
    "planes": pl.DataFrame(
        {
            "tailnum": ["N14228", "N24211", "N619AA"],
            "year": [1999, 1998, 1990],
        }
    ),
    "weather": pl.DataFrame(
        {
            "origin": ["EWR", "JFK"],
            "year": [2013, 2013],
            "month": [1, 1],
            "day": [1, 1],
            "temp": [39.02, 39.92],
        }
    ),
}


@pytest.fixture
def small_tables(monkeypatch):
    """Serve the small tables instead of the real sample data"""
    monkeypatch.setattr(session_module, "load_sample_table", SMALL_TABLES.__getitem__)
    return SMALL_TABLES


@pytest.fixture
def session(small_tables):
    """Open in-memory session with all small tables copied in"""
    with DatabaseSession() as db:
        db.copy_sample_tables()
        yield db
