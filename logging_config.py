"""
Logging setup for folderhash.

Console logs go to stderr so they never interleave with a report printed on stdout.
A file handler is added only when a log file is configured.
"""
import logging
import sys
from pathlib import Path
from typing import Optional

import config

# Handlers installed by setup_logging, replaced on the next call
_installed_handlers = []


def setup_logging(
    log_level: str = config.LOG_LEVEL,
    log_file: Optional[str] = config.LOG_FILE,
) -> None:
    """
    Configure the root logger.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to a log file that receives DEBUG and above
    """
    numeric_level = getattr(logging, log_level.upper(), logging.WARNING)

    detailed_formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(threadName)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    simple_formatter = logging.Formatter(
        fmt='%(asctime)s - %(levelname)s - %(name)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(simple_formatter)
    _installed_handlers.append(console_handler)

    root_level = numeric_level
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(detailed_formatter)
        _installed_handlers.append(file_handler)
        root_level = logging.DEBUG

    root_logger.setLevel(root_level)
    for handler in _installed_handlers:
        root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module (typically __name__)."""
    return logging.getLogger(name)
