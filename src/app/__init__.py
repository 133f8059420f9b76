# src/app/__init__.py
"""
Application support shared by entrypoints.

Exposes:
- configure_logging: one-time root logger setup
"""

from __future__ import annotations

from .logging_config import configure_logging

__all__ = [
    "configure_logging",
]
