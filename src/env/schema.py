# NavConfig dataclass
# src/env/schema.py

from dataclasses import dataclass

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class NavConfig:
    """Resolved navigation settings from config/nav.yaml."""
    grid_size: int = 20        # side length of new empty grids
    frontier: str = "heap"     # "heap" or "linear"
    log_level: str = "INFO"    # one of LOG_LEVELS
