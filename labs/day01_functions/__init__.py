"""
Day 01: Writing Functions

Turn a copy-pasted calculation into a function:
- zscale: standardize a numeric column
- the operator precedence pitfall in the first draft
- guarding against non-numeric input
"""
