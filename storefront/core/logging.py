"""
Logging setup for the storefront.

Usage:
    from storefront.core.logging import get_logger
    logger = get_logger(__name__)
"""

import logging
import sys
from functools import cache

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level_name: str = "INFO") -> None:
    """Attach a stdout handler to the root logger once and set its level."""
    level = getattr(logging, level_name.upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(level)

    if any(getattr(h, "_storefront", False) for h in root.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._storefront = True
    root.addHandler(handler)

    # SQL echo is noise at INFO
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


@cache
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
