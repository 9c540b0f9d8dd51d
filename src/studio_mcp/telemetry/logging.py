"""Process-wide logging setup.

stdout carries MCP stdio traffic, so console output always goes to stderr. When a log
directory is configured, records are also appended to a per-day file.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def log_file_path(log_dir: str | Path, now: datetime | None = None) -> Path:
    stamp = (now or datetime.now()).strftime("%Y%m%d")
    return Path(log_dir) / f"studio-mcp-{stamp}.log"


def configure_logging(level: str = "INFO", log_dir: str | Path | None = None) -> Path | None:
    """Install stderr (and optional file) handlers on the ``studio_mcp`` logger tree.

    Returns the log file path when file logging is enabled.
    """
    logger = logging.getLogger("studio_mcp")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_dir is None:
        return None

    path = log_file_path(log_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(path, encoding="utf-8")
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)
    return path
