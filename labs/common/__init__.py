"""
Shared config, logging and console helpers for all labs.
"""

from .config_loader import LabsConfig, load_config
from .logging_config import get_logger, setup_logging

__all__ = ["LabsConfig", "load_config", "get_logger", "setup_logging"]
