"""
Index list and example SQL for the database lab.
"""

from dataclasses import dataclass, field

IndexColumns = tuple[str, ...]

DELAYED_FLIGHTS_SQL = "SELECT * FROM flights WHERE dep_delay > 240.0 LIMIT 5"


@dataclass(frozen=True)
class TableIndexes:
    """Indexes created after a table is copied in"""

    indexes: list[IndexColumns] = field(default_factory=list)
    unique_indexes: list[IndexColumns] = field(default_factory=list)


SAMPLE_INDEXES: dict[str, TableIndexes] = {
    "airlines": TableIndexes(unique_indexes=[("carrier",)]),
    "airports": TableIndexes(unique_indexes=[("faa",)]),
    "flights": TableIndexes(
        indexes=[("year", "month", "day"), ("carrier",), ("tailnum",), ("dest",)]
    ),
    "planes": TableIndexes(unique_indexes=[("tailnum",)]),
    "weather": TableIndexes(indexes=[("year", "month", "day"), ("origin",)]),
}
