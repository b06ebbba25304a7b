"""Configuration and logging helpers."""

from .config_loader import load_config
from .logger import get_logger

__all__ = ["load_config", "get_logger"]
