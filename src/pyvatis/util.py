"""Utility functions for pyvatis package

This module contains utility functions used by various parts of the codebase.
"""

import logging
import os
import re
import sys
import time
from typing import Optional

# Setup a default logging instance for this module
LOG = logging.getLogger("pyvatis")
LOG.addHandler(logging.NullHandler())

# Sixteen point compass, each sector is 22.5 degrees wide
COMPASS = (
    "N NNE NE ENE E ESE SE SSE S SSW SW WSW W WNW NW NNW"
).split()
NON_NUMERIC = re.compile(r"[A-Z]")


class CustomFormatter(logging.Formatter):
    """A custom log formatter class."""

    def format(self, record):
        """Return a string!"""
        return (
            f"[{time.strftime('%H:%M:%S', time.localtime(record.created))} "
            f"{(record.relativeCreated / 1000.0):6.3f} "
            f"{record.filename}:{record.lineno} {record.funcName}] "
            f"{record.getMessage()}"
        )


def get_test_filepath(name: str) -> str:
    """Helper to get a testing filename, full path."""
    return f"{os.getcwd()}/data/product_examples/{name}"


def get_test_file(name):
    """Helper to get data for test usage."""
    with open(get_test_filepath(name), "rb") as fp:
        return fp.read().decode("utf-8")


def logger(name="pyvatis", level=None):
    """Get pyvatis's logger with a stream handler attached.

    Args:
      name (str): The name of the logger to get, default pyvatis
      level (logging.LEVEL): The log level for this logger, default is
        WARNING for non interactive sessions, INFO otherwise

    Returns:
      logger instance
    """
    ch = logging.StreamHandler()
    ch.setFormatter(CustomFormatter())
    log = logging.getLogger(name)
    log.addHandler(ch)
    if level is None and sys.stdout.isatty():
        level = logging.INFO
    log.setLevel(level if level is not None else logging.WARNING)
    return log


def to_int(text: str) -> Optional[int]:
    """Convert a METAR numeric token into an int.

    A leading ``P`` (more than) is dropped, ``M`` (minus) becomes a sign and
    any other letters are ignored, so ``M05`` is -5 and ``27L`` is 27.

    Returns:
      int or None when no number is present (``//``, ``///``)
    """
    if text is None:
        return None
    cleaned = NON_NUMERIC.sub("", text.replace("P", "").replace("M", "-"))
    if not re.match(r"^-?[0-9]+$", cleaned):
        return None
    return int(cleaned)


def drct2text(drct):
    """Convert an degree value to text representation of direction.

    Args:
      drct (int or float): Value in degrees to convert to text

    Returns:
      str: String representation of the direction, could be `None`

    """
    if drct is None:
        return None
    drct = float(drct)
    if drct > 360 or drct < 0:
        return None
    return COMPASS[int((drct + 11.25) / 22.5) % 16]
