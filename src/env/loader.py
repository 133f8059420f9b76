# load config/nav.yaml into NavConfig
# src/env/loader.py

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

from nav.pathfinder import FRONTIERS

from .schema import LOG_LEVELS, NavConfig

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_ROOT = PROJECT_ROOT / "config"
NAV_CONFIG_PATH = CONFIG_ROOT / "nav.yaml"


def _load_yaml(path: Path) -> Dict[str, Any]:
    """Load a YAML mapping, failing loudly on anything else."""
    if not path.exists():
        raise FileNotFoundError(f"Missing config file: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected mapping at top of {path}, got {type(data)}")
    return data


def _section(raw: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = raw.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"'{name}' must be a mapping, got {type(section)}")
    return section


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_nav_config(path: Path | None = None) -> NavConfig:
    """
    Main entry point: returns a validated NavConfig.

    An explicit path must exist. Without one, config/nav.yaml is used when
    present (source checkout) and built-in defaults otherwise (installed
    package, where config/ is not shipped).
    """
    if path is None:
        if not NAV_CONFIG_PATH.exists():
            log.debug("No %s; using default NavConfig", NAV_CONFIG_PATH)
            return NavConfig()
        path = NAV_CONFIG_PATH
    raw = _load_yaml(Path(path))
    defaults = NavConfig()

    grid_cfg = _section(raw, "grid")
    search_cfg = _section(raw, "search")
    logging_cfg = _section(raw, "logging")

    config = NavConfig(
        grid_size=grid_cfg.get("size", defaults.grid_size),
        frontier=search_cfg.get("frontier", defaults.frontier),
        log_level=str(logging_cfg.get("level", defaults.log_level)).upper(),
    )
    _validate(config)
    return config


def _validate(config: NavConfig) -> None:
    """Minimal sanity checks for the navigation config."""
    # bool is an int subclass; reject it explicitly
    if not isinstance(config.grid_size, int) or isinstance(config.grid_size, bool):
        raise ValueError(f"grid.size must be an integer, got {config.grid_size!r}")
    if config.grid_size < 1:
        raise ValueError(f"grid.size must be positive, got {config.grid_size}")

    if config.frontier not in FRONTIERS:
        raise ValueError(f"Invalid search.frontier: {config.frontier!r} (expected one of {FRONTIERS})")

    if config.log_level not in LOG_LEVELS:
        raise ValueError(f"Invalid logging.level: {config.log_level!r}")
