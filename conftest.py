"""Centralized Testing Stuff."""

# third party
import pytest

# This repo
from pyvatis.decoder import MetarDecoder


@pytest.fixture()
def decoder():
    """Yield a lenient decoder with the default settings."""
    return MetarDecoder()
