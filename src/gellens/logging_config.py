"""
Logging Configuration
Sets up the 'gellens' logger for scripts and the command-line entry point.
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    capture_warnings: bool = False,
) -> logging.Logger:
    """
    Configures the logger of the 'gellens' namespace.

    Library modules only create module loggers; nothing is emitted until this
    function (or the host application) attaches handlers.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
        capture_warnings: Route warnings (e.g. DomainWarning for out-of-range
            queries) through the 'py.warnings' logger with the same handlers.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("gellens")
    logger.setLevel(level)

    # Calling twice must not duplicate records
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if capture_warnings:
        logging.captureWarnings(True)
        warnings_logger = logging.getLogger("py.warnings")
        warnings_logger.handlers.clear()
        for handler in handlers:
            warnings_logger.addHandler(handler)

    logger.info("Logging initialized.")
    return logger
