"""METAR decoding for ATIS generation

pyvatis turns a raw METAR line into a structured report that the ATIS text
and voice builders can query.  The heavy lifting is done by
:class:`pyvatis.decoder.MetarDecoder`, the module level helpers
:func:`decode`, :func:`decode_strict` and :func:`decode_lenient` use a
shared default instance.
"""

import os
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyvatis")
    pkgdir = os.path.dirname(os.path.dirname(os.path.realpath(__file__)))
    if not pkgdir.endswith("site-packages"):
        __version__ += "-dev"
except PackageNotFoundError:
    # package is not installed
    __version__ = "dev"

# Placed after __version__ so that submodules can import it
from pyvatis.decoder import (  # noqa: E402
    MetarDecoder,
    decode,
    decode_lenient,
    decode_strict,
    set_strict_parsing,
)

__all__ = [
    "MetarDecoder",
    "decode",
    "decode_lenient",
    "decode_strict",
    "set_strict_parsing",
]
