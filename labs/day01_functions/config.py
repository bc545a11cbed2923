"""
Shared data for the functions and iteration labs.
"""

import numpy as np
import polars as pl

N_ROWS = 10
COLUMNS = ["a", "b", "c", "d"]
SEED = 42


def generate_random_frame(
    n_rows: int = N_ROWS, columns: list[str] | None = None, seed: int | None = SEED
) -> pl.DataFrame:
    """
    Generate a small table of standard-normal columns:
    - one Float64 column per name in `columns`
    - `n_rows` observations each
    """
    if columns is None:
        columns = COLUMNS
    rng = np.random.default_rng(seed)
    return pl.DataFrame({name: rng.standard_normal(n_rows) for name in columns})
