"""Logging setup for the command line and GUI front ends."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "WARNING") -> None:
    """Configure the root logger.

    Args:
        level: Logging level name, e.g. "INFO" or "debug"
    """
    logging.basicConfig(level=getattr(logging, level.upper()), format=LOG_FORMAT)
