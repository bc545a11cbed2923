"""
Data wrangling labs.

Four independent walkthroughs:
- day01_functions: writing a small statistics helper
- day02_iteration: loops and map helpers over table columns
- day03_transform: data-manipulation verbs on the flights sample data
- day04_databases: querying an embedded DuckDB database through Ibis
"""

__version__ = "0.1.0"
