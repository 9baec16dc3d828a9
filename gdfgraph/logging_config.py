"""
Logging configuration for gdf-graph.

Library modules only create module-level loggers; the command line
front end calls setup_logging() once at startup.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(level: str = "WARNING", log_file: Optional[Path] = None) -> None:
    """
    Route gdf-graph logs to stderr and, optionally, a file.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        log_file: File that also receives every record; parent
            directories are created as needed
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
