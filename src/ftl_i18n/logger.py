"""
Logging configuration helpers.

The library itself only creates module loggers (``logging.getLogger(__name__)``)
and never installs handlers. Applications, and the ``ftl-i18n`` command line
tool, call :func:`setup_logging` once at start-up.

Typical usage example:
    .. code-block:: python

        from ftl_i18n.logger import setup_logging

        setup_logging(app="ftl_i18n", verbosity=2, logger_file="i18n.log")
"""
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

LOG_LEVELS = {
    0: logging.WARNING,
    1: logging.INFO,
    2: logging.DEBUG,
}


def setup_logging(app: str, verbosity: int, logger_file: Optional[Path] = None) -> int:
    """
    Configure logging for ``app`` and its sub-modules.

    :param app: Base logger name (e.g. ``"ftl_i18n"``).
    :type app: str
    :param verbosity: ``0`` -> WARNING, ``1`` -> INFO, ``2`` -> DEBUG.
                      Unknown values map to INFO.
    :type verbosity: int
    :param logger_file: Optional log file, opened in append mode.
    :type logger_file: pathlib.Path, optional
    :return: The numeric level that was applied.
    :rtype: int
    """
    log_level = LOG_LEVELS.get(verbosity, logging.INFO)

    logging_conf = {
        "level": log_level,
        "format": "[%(levelname)s] %(name)s: %(message)s",
        "datefmt": "%Y-%m-%d %H:%M:%S",
    }

    if logger_file:
        logging_conf["filename"] = str(logger_file)
        logging_conf["filemode"] = "a"

    logging.basicConfig(**logging_conf)

    logger.setLevel(log_level)
    logging.getLogger(app).setLevel(log_level)

    # Quiet noisy modules
    logging.getLogger("fluent").setLevel(logging.WARNING)

    return log_level
