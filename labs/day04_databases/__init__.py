"""
Day 04: Databases

Query an embedded DuckDB database from Python:
- connect, bulk-copy the sample tables with indexes, disconnect
- lazy queries built with Ibis, and the SQL they generate
- literal SQL strings
- what you cannot ask of a query that has not run yet
"""

from .lazy import LazyQuery, UnmaterializedQueryError
from .session import DatabaseSession

__all__ = ["DatabaseSession", "LazyQuery", "UnmaterializedQueryError"]
