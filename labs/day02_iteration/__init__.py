"""
Day 02: Iteration

Apply the same function to every column of a table:
- explicit for-loops with a pre-allocated output
- map helpers (map_columns, map_dbl, map_frame, col_summary)
- the vectorised polars alternative
"""
