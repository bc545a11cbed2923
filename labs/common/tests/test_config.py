"""
Lean tests for configuration validation.
Tests the Pydantic models and config loading logic.
"""

import pytest
from pydantic import ValidationError

from labs.common.config_loader import (
    DEFAULT_CONFIG_PATH,
    DatabaseConfig,
    FunctionsConfig,
    LabsConfig,
    LoggingConfig,
    interpolate_env_vars,
    load_config,
)


class TestFunctionsConfig:
    """Test the random table settings"""

    def test_defaults(self):
        """10 rows of a, b, c, d with seed 42"""
        config = FunctionsConfig()
        assert config.n_rows == 10
        assert config.columns == ["a", "b", "c", "d"]
        assert config.seed == 42

    def test_zero_rows_rejected(self):
        """At least one row"""
        with pytest.raises(ValidationError):
            FunctionsConfig(n_rows=0)

    def test_duplicate_columns_rejected(self):
        """Column names must be unique"""
        with pytest.raises(ValidationError):
            FunctionsConfig(columns=["a", "a"])

    def test_empty_columns_rejected(self):
        """At least one column"""
        with pytest.raises(ValidationError):
            FunctionsConfig(columns=[])


class TestDatabaseConfig:
    """Test database settings"""

    def test_defaults(self):
        """In-memory, all five tables, indexed"""
        config = DatabaseConfig()
        assert config.database == ":memory:"
        assert config.tables == ["airlines", "airports", "flights", "planes", "weather"]
        assert config.create_indexes is True

    def test_unknown_table_rejected(self):
        """Only sample table names"""
        with pytest.raises(ValidationError):
            DatabaseConfig(tables=["flights", "passengers"])


class TestLoggingConfig:
    """Test log level resolution"""

    def test_placeholder_falls_back_to_info(self):
        """Uninterpolated ${LOG_LEVEL} means INFO"""
        assert LoggingConfig(level="${LOG_LEVEL}").level == "INFO"

    def test_level_is_uppercased(self):
        """debug -> DEBUG"""
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_unknown_level_rejected(self):
        """Made-up levels fail validation"""
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")


class TestLabsConfig:
    """Test complete configuration"""

    def test_valid_config(self):
        """Defaults build a complete config"""
        config = LabsConfig()
        assert config.labs.name == "data-wrangling-labs"
        assert config.transform.delay_threshold == 240.0
        assert config.database.preview_rows == 5


class TestEnvInterpolation:
    """Test environment variable interpolation"""

    def test_interpolate_simple_string(self, monkeypatch):
        """Test simple env var interpolation"""
        monkeypatch.setenv("TEST_VAR", "/path/to/db.duckdb")

        result = interpolate_env_vars("${TEST_VAR}")
        assert result == "/path/to/db.duckdb"

    def test_interpolate_nested(self, monkeypatch):
        """Test env var interpolation in nested structures"""
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        data = {"logging": {"level": "${LOG_LEVEL}"}, "tables": ["${LOG_LEVEL}", "flights"]}

        result = interpolate_env_vars(data)
        assert result["logging"]["level"] == "DEBUG"
        assert result["tables"] == ["DEBUG", "flights"]

    def test_missing_env_var(self, monkeypatch):
        """Test missing env var returns original string"""
        monkeypatch.delenv("NONEXISTENT_VAR", raising=False)
        result = interpolate_env_vars("${NONEXISTENT_VAR}")
        assert result == "${NONEXISTENT_VAR}"


class TestConfigLoader:
    """Test config loading from file"""

    def test_load_default_config(self, monkeypatch):
        """The bundled labs.yaml loads and validates"""
        monkeypatch.delenv("LABS_CONFIG", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        assert DEFAULT_CONFIG_PATH.exists()

        config = load_config()
        assert isinstance(config, LabsConfig)
        assert config.labs.name == "data-wrangling-labs"
        assert config.logging.level == "INFO"

    def test_env_var_selects_file(self, monkeypatch, tmp_path):
        """$LABS_CONFIG points at another file"""
        path = tmp_path / "labs.yaml"
        path.write_text("functions:\n  n_rows: 3\ndatabase:\n  tables: [flights]\n")
        monkeypatch.setenv("LABS_CONFIG", str(path))

        config = load_config()
        assert config.functions.n_rows == 3
        assert config.database.tables == ["flights"]

    def test_empty_file_gives_defaults(self, tmp_path):
        """An empty YAML file is a default config"""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(str(path)) == LabsConfig()

    def test_load_nonexistent_config(self):
        """Test loading nonexistent config raises error"""
        with pytest.raises(FileNotFoundError):
            load_config("/nonexistent/config.yaml")
