# root logger setup for entrypoints
# src/app/logging_config.py
"""
Central logging configuration.

Call configure_logging() from your main entrypoint once, for example:

    from app.logging_config import configure_logging
    configure_logging("DEBUG")

After that, search diagnostics from nav.pathfinder are visible on stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO, Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(
    level: Union[int, str] = logging.INFO,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure root logging if no handlers are attached yet.

    Args:
        level: logging level as an int (logging.DEBUG) or a name ("DEBUG")
        stream: where log lines go; defaults to stdout. Commands that print
            machine-readable output on stdout pass sys.stderr.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    root = logging.getLogger()

    # Don't duplicate handlers if someone already configured logging.
    if root.handlers:
        return

    handler = logging.StreamHandler(stream=stream if stream is not None else sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)
