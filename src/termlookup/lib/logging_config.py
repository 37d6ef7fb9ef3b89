"""Logging configuration for termlookup.

All package modules log through loggers under the ``termlookup`` namespace.
Output goes to stderr so it never mixes with the report on stdout.
"""

import logging
import sys

PACKAGE_LOGGER = "termlookup"
HANDLER_NAME = "termlookup-stderr"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"

# Third-party loggers that are noisy at DEBUG level
THIRD_PARTY_LOGGERS = ("urllib3", "requests")


def _remove_handler(logger: logging.Logger) -> None:
    for existing in list(logger.handlers):
        if existing.get_name() == HANDLER_NAME:
            logger.removeHandler(existing)


def _install_handler(logger: logging.Logger, handler: logging.Handler) -> None:
    _remove_handler(logger)
    logger.addHandler(handler)


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure the package logger from CLI flags.

    Safe to call more than once; the handler is replaced rather than
    duplicated.

    Args:
        verbose: Emit DEBUG records, including third-party HTTP logs
        quiet: Only emit ERROR records (ignored when verbose is set)
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    logger = logging.getLogger(PACKAGE_LOGGER)
    _install_handler(logger, handler)
    logger.setLevel(level)
    logger.propagate = False

    for name in THIRD_PARTY_LOGGERS:
        third_party = logging.getLogger(name)
        if verbose:
            _install_handler(third_party, handler)
            third_party.setLevel(logging.DEBUG)
        else:
            _remove_handler(third_party)
            third_party.setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for a module.

    Args:
        name: Module name, usually ``__name__``

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
