"""Configuration loading for the navigation core."""

from __future__ import annotations

from .loader import load_nav_config
from .schema import NavConfig

__all__ = ["NavConfig", "load_nav_config"]
