"""
Config loader with Pydantic validation and environment variable interpolation.
"""

import logging
import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, field_validator

SampleTable = Literal["airlines", "airports", "flights", "planes", "weather"]

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "labs.yaml"


class LabsMetaConfig(BaseModel):
    """Course metadata shown in the run_all banner"""

    name: str = "data-wrangling-labs"
    version: str = "1.0"


class FunctionsConfig(BaseModel):
    """Random table used by the functions and iteration labs"""

    n_rows: int = Field(default=10, ge=1, description="Rows in the random table")
    columns: list[str] = Field(
        default=["a", "b", "c", "d"], description="Column names, one standard-normal column each"
    )
    seed: int | None = Field(
        default=42, description="Random seed for reproducibility (null for random)"
    )

    @field_validator("columns")
    @classmethod
    def check_columns(cls, v):
        """Need at least one column and no duplicates"""
        if not v:
            raise ValueError("columns must not be empty")
        if len(set(v)) != len(v):
            raise ValueError(f"Duplicate column names: {v}")
        return v


class TransformConfig(BaseModel):
    """Verb walkthrough settings"""

    delay_threshold: float = Field(
        default=240.0, description="Departure delay (minutes) that counts as a long delay"
    )
    min_flights: int = Field(
        default=20, ge=0, description="Destinations with fewer flights are dropped from summaries"
    )


class DatabaseConfig(BaseModel):
    """Embedded database session settings"""

    database: str = Field(
        default=":memory:", description="DuckDB database; ':memory:' for an ephemeral one"
    )
    tables: list[SampleTable] = Field(
        default=["airlines", "airports", "flights", "planes", "weather"],
        description="Sample tables copied into the database",
    )
    create_indexes: bool = Field(default=True, description="Create the fixed index list")
    preview_rows: int = Field(default=5, ge=1, description="Rows shown by previews")


class LoggingConfig(BaseModel):
    """structlog settings"""

    level: str = Field(default="INFO", description="Log level name or ${LOG_LEVEL}")

    @field_validator("level")
    @classmethod
    def resolve_level(cls, v):
        """Fall back to INFO when $LOG_LEVEL was not set"""
        if v.startswith("${"):
            return "INFO"
        if not isinstance(logging.getLevelName(v.upper()), int):
            raise ValueError(f"Unknown log level: {v}")
        return v.upper()


class LabsConfig(BaseModel):
    """Complete configuration schema"""

    labs: LabsMetaConfig = Field(default_factory=LabsMetaConfig)
    functions: FunctionsConfig = Field(default_factory=FunctionsConfig)
    transform: TransformConfig = Field(default_factory=TransformConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def interpolate_env_vars(data: Any) -> Any:
    """
    Recursively interpolate environment variables in config.
    Supports ${VAR_NAME} syntax.
    """
    if isinstance(data, dict):
        return {k: interpolate_env_vars(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [interpolate_env_vars(item) for item in data]
    elif isinstance(data, str) and data.startswith("${") and data.endswith("}"):
        var_name = data[2:-1]
        return os.environ.get(var_name, data)
    return data


def load_config(config_path: str | None = None) -> LabsConfig:
    """
    Load and validate configuration from YAML file.

    Args:
        config_path: Path to labs.yaml (uses $LABS_CONFIG, then the bundled default, if None)

    Returns:
        Validated LabsConfig object
    """
    if config_path is None:
        config_path = os.environ.get("LABS_CONFIG", str(DEFAULT_CONFIG_PATH))

    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {path}\n"
            f"Try setting LABS_CONFIG environment variable or pass --config"
        )

    with open(path) as f:
        raw_config = yaml.safe_load(f) or {}

    interpolated = interpolate_env_vars(raw_config)

    return LabsConfig(**interpolated)
