"""Logging setup shared by the CLI and the web server."""

import logging
import sys
from pathlib import Path
from typing import List, Optional

DEFAULT_FORMAT = '%(asctime)s - %(threadName)s - %(name)s - %(levelname)s - %(message)s'

# Libraries that log every connection; probes open one per external link
NOISY_LOGGERS = ('urllib3', 'uvicorn.access')


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    format_string: Optional[str] = None
) -> None:
    """Configure the root logger.

    Records go to stderr so that JSON written to stdout by the CLI stays
    parseable.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file receiving a copy of every record
        format_string: Optional custom format string
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=numeric_level,
        format=format_string or DEFAULT_FORMAT,
        handlers=handlers,
        force=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))


def get_logger(name: str) -> logging.Logger:
    """Get a module logger (usually ``get_logger(__name__)``)."""
    return logging.getLogger(name)
