import logging
import sys
from typing import Optional

from common.constants import APP_LOGGER_NAME

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(
    component_name: str,
    log_level: Optional[str] = None
) -> logging.Logger:
    """
    Set up logging configuration for a component.

    All module loggers returned by get_logger() live under the application
    logger, so configuring it once covers the chunker and the CLI.

    Args:
        component_name: Name of the component (e.g., 'cli')
        log_level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to WARNING

    Returns:
        Configured component logger instance
    """
    level = getattr(logging, (log_level or 'WARNING').upper(), logging.WARNING)

    app_logger = logging.getLogger(APP_LOGGER_NAME)
    app_logger.setLevel(level)

    if not app_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        app_logger.addHandler(handler)
        app_logger.propagate = False

    for handler in app_logger.handlers:
        handler.setLevel(level)

    return get_logger(component_name)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the given name under the application logger.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    if name == APP_LOGGER_NAME or name.startswith(f"{APP_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{APP_LOGGER_NAME}.{name}")
