"""Logging for the triage CLI.

Progress lines are the tool's user-facing output, so at INFO they are
printed bare. --debug adds timestamps, logger names and PyGithub's
request logging.
"""

import logging
import sys


CLI_FORMAT = "%(message)s"
DEBUG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s - %(message)s"


def setup_logging(debug: bool = False) -> logging.Logger:
    """
    Route renovate_triage logging to stdout.

    Args:
        debug: Verbose output including GitHub requests

    Returns:
        The package logger
    """
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format=DEBUG_FORMAT if debug else CLI_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    logger = logging.getLogger("renovate_triage")
    logger.setLevel(level)
    logging.getLogger("github").setLevel(logging.DEBUG if debug else logging.WARNING)
    return logger


def get_logger(name: str = "renovate_triage") -> logging.Logger:
    return logging.getLogger(name)
