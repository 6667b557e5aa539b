"""Shared logger used across the package."""
import logging
import os
import sys

LOGGER_NAME = "arithmetic_cli"
LOG_LEVEL_ENV = "ARITHMETIC_CLI_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(LOGGER_NAME)


def configure_logging(verbose: bool = False) -> None:
    """
    Attach a stderr handler to the package logger and set its level.

    stdout is reserved for the single result line, so logs always go to stderr.
    The level is WARNING by default, INFO when ``verbose`` is set, and
    the environment variable ``ARITHMETIC_CLI_LOG_LEVEL`` wins over both.

    :param bool verbose: Enable INFO level logging
    :return: None
    """
    level = logging.INFO if verbose else logging.WARNING

    env_level = os.environ.get(LOG_LEVEL_ENV)
    if env_level:
        # getLevelName returns a string for unknown names
        resolved = logging.getLevelName(env_level.strip().upper())
        if isinstance(resolved, int):
            level = resolved

    # Replace rather than stack handlers when called more than once
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    logger.setLevel(level)
    logger.propagate = False
