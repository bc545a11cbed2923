"""
Prefect flow that runs the selected labs as tasks.
"""

from prefect import flow, task
from prefect.logging import get_run_logger

from labs.common.config_loader import LabsConfig, load_config
from labs.registry import LABS, run_lab


@task(name="run_lab", task_run_name="lab-{number}")
def run_lab_task(number: int, config: LabsConfig) -> float:
    """
    Run one lab inside a Prefect task.

    Args:
        number: Lab number from the catalogue
        config: Loaded labs configuration

    Returns:
        Lab duration in seconds
    """
    logger = get_run_logger()
    logger.info(f"Running lab {number}: {LABS[number][0]}")
    return run_lab(number, config)


@flow(name="labs-walkthrough", log_prints=True)
def labs_flow(numbers: list[int] | None = None, config_path: str | None = None) -> dict[int, float]:
    """
    Run labs one after another; each lab is independent.

    Args:
        numbers: Lab numbers to run (all if None)
        config_path: Path to labs.yaml (uses $LABS_CONFIG if None)

    Returns:
        Duration per lab number
    """
    logger = get_run_logger()
    config = load_config(config_path)
    numbers = numbers or list(LABS)

    logger.info(f"Starting {config.labs.name} v{config.labs.version}: labs {numbers}")

    durations = {number: run_lab_task(number, config) for number in numbers}

    logger.info("All labs completed")
    return durations
