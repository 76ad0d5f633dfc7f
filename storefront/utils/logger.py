"""
Logging setup for the storefront core.

All modules log through children of the "storefront" logger. The level comes
from LOG_LEVEL and can be changed at runtime with set_log_level().
"""
import logging
import os
import sys

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger("storefront")


def _install_stdout_handler(root: logging.Logger, level: str) -> None:
    """Attach a single stdout handler to the package logger."""
    root.setLevel(level)
    if root.handlers:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root.addHandler(handler)


_install_stdout_handler(logger, LOG_LEVEL)

# Keep storefront records out of the root logger
logger.propagate = False


def set_log_level(level: str) -> None:
    """Change the level of the package logger and its handlers."""
    level = level.upper()
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)


def get_logger(name: str = None) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Optional component name, e.g. "search.suggestions"

    Returns:
        "storefront.<name>" logger, or the package logger when name is empty
    """
    if name:
        return logging.getLogger(f"storefront.{name}")
    return logger
