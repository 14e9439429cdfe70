"""
Logging configuration for the data layer.

Usage:
    from lightbnb.logging_config import setup_logging

    setup_logging()  # Call once at application startup
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from lightbnb.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_logging_configured = False


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    force: bool = False,
) -> None:
    """Configure the ``lightbnb`` logger hierarchy.

    Args:
        level: Log level name. Defaults to settings.log_level.
        log_file: Optional file to log to in addition to stderr.
            Defaults to settings.log_file.
        force: Reconfigure even if already configured.
    """
    global _logging_configured

    if _logging_configured and not force:
        return

    level = (level or settings.log_level).upper()
    numeric_level = getattr(logging, level, logging.INFO)
    log_file = log_file or settings.log_file

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    package_logger = logging.getLogger("lightbnb")
    package_logger.setLevel(numeric_level)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    # SQL echo goes through sqlalchemy.engine; keep it quiet unless debugging
    if not settings.debug:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    _logging_configured = True
