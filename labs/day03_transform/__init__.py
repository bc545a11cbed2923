"""
Day 03: Data Transformation

The core verbs on tidy tables, using the nycflights13 sample data:
- filter / sort / select / with_columns
- group_by + agg summaries
- joins against lookup tables
"""
