"""
The lab catalogue: number -> (title, run function, config section).
"""

import time
from collections.abc import Callable

from labs.common.config_loader import LabsConfig
from labs.common.logging_config import get_logger
from labs.day01_functions import exp01_writing_functions
from labs.day02_iteration import exp01_iteration
from labs.day03_transform import exp01_verbs
from labs.day04_databases import exp01_database_session

logger = get_logger(__name__)

LABS: dict[int, tuple[str, Callable, str]] = {
    1: ("Writing Functions", exp01_writing_functions.run, "functions"),
    2: ("Iteration", exp01_iteration.run, "functions"),
    3: ("Data Transformation", exp01_verbs.run, "transform"),
    4: ("Database Session", exp01_database_session.run, "database"),
}


def parse_lab_selection(selection: str | None) -> list[int]:
    """
    Turn "1,3" into [1, 3]; None or "" selects every lab.

    Raises:
        ValueError: on non-numeric entries or unknown lab numbers
    """
    if not selection:
        return list(LABS)

    try:
        numbers = [int(x.strip()) for x in selection.split(",")]
    except ValueError:
        raise ValueError(
            f"Invalid format: {selection!r}. Use comma-separated numbers (e.g., '1,3')"
        ) from None

    invalid = [n for n in numbers if n not in LABS]
    if invalid:
        raise ValueError(f"Invalid lab numbers: {invalid}. Valid options: {list(LABS)}")
    return numbers


def run_lab(number: int, config: LabsConfig) -> float:
    """Run one lab with its config section; returns the duration in seconds."""
    name, run_func, section = LABS[number]
    logger.info("lab_started", lab=number, name=name)

    start = time.perf_counter()
    run_func(getattr(config, section))
    duration = time.perf_counter() - start

    logger.info("lab_finished", lab=number, duration_s=round(duration, 3))
    return duration
