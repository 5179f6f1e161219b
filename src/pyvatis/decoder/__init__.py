"""Chunk decoders and the decoder chain that drives them."""

from typing import Optional

from pyvatis.decoder._base import (
    ChunkDecoder,
    ChunkRole,
    DecodedChunk,
    consume_one_chunk,
)
from pyvatis.decoder.metar import MetarDecoder, normalize
from pyvatis.models.metar import DecodedMetar

# Shared by the module level helpers below
_DEFAULT_DECODER = MetarDecoder()


def set_strict_parsing(strict: bool):
    """Change the default strictness of :func:`decode`."""
    _DEFAULT_DECODER.set_strict_parsing(strict)


def decode(raw: str, strict: Optional[bool] = None) -> DecodedMetar:
    """Decode a METAR with the default decoder."""
    return _DEFAULT_DECODER.decode(raw, strict)


def decode_strict(raw: str) -> DecodedMetar:
    """Decode a METAR, stopping at the first bad chunk."""
    return _DEFAULT_DECODER.decode_strict(raw)


def decode_lenient(raw: str) -> DecodedMetar:
    """Decode a METAR, skipping past bad chunks."""
    return _DEFAULT_DECODER.decode_lenient(raw)


__all__ = [
    "ChunkDecoder",
    "ChunkRole",
    "DecodedChunk",
    "MetarDecoder",
    "consume_one_chunk",
    "decode",
    "decode_lenient",
    "decode_strict",
    "normalize",
    "set_strict_parsing",
]
