"""Loads YAML/JSON configuration files and global grid settings."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


def load_config(path: str) -> Dict[str, Any]:
    """Load a YAML or JSON configuration file."""
    path_p = Path(path)
    with open(path_p, "r", encoding="utf-8") as f:
        if path_p.suffix in {".yaml", ".yml"}:
            return yaml.safe_load(f) or {}
        if path_p.suffix == ".json":
            return json.load(f)
        raise ValueError("Unsupported config format")


def load_grid_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Return the grid configuration, or an empty mapping if none exists."""
    if path is None:
        path = Path(__file__).resolve().parents[2] / "configs" / "grid_config.yaml"
    if path.exists():
        return load_config(str(path))
    return {}


GRID_CONFIG: Dict[str, Any] = load_grid_config()
STRICT_INDEX_BOUNDS: bool = bool(GRID_CONFIG.get("strict_index_bounds", True))
LOG_LEVEL: str = str(GRID_CONFIG.get("log_level", "INFO")).upper()
LOG_FILE: Optional[str] = GRID_CONFIG.get("log_file")


def set_strict_index_bounds(value: bool) -> None:
    """Override the flat index bound check at runtime."""
    global STRICT_INDEX_BOUNDS
    STRICT_INDEX_BOUNDS = value
    GRID_CONFIG["strict_index_bounds"] = value


def set_log_level(value: str) -> None:
    """Override the level applied by :func:`get_logger`."""
    global LOG_LEVEL
    LOG_LEVEL = value.upper()
    GRID_CONFIG["log_level"] = LOG_LEVEL
