"""Custom Exceptions."""

from enum import Enum
from typing import Optional


class DecodeErrorKind(str, Enum):
    """How the decoder chain dealt with a failing chunk."""

    def __str__(self):
        """When we want the str repr."""
        return str(self.value)

    MALFORMED_CHUNK = "MALFORMED_CHUNK"
    RECOVERED_VIA_SKIP = "RECOVERED_VIA_SKIP"
    UNRECOVERABLE_IN_STRICT_MODE = "UNRECOVERABLE_IN_STRICT_MODE"


class MetarChunkDecoderException(Exception):
    """A chunk of the METAR did not match the grammar expected at this spot.

    Args:
      message (str): human readable reason.
      remaining_metar (str): the text the chunk decoder was handed.
      new_remaining_metar (str): the text to continue with should the
        caller decide to move on.
      chunk_decoder (str): name of the chunk decoder that failed.
    """

    def __init__(
        self,
        message: str,
        remaining_metar: Optional[str] = None,
        new_remaining_metar: Optional[str] = None,
        chunk_decoder: Optional[str] = None,
    ):
        """constructor"""
        super().__init__(message)
        self.message = message
        self.remaining_metar = remaining_metar
        self.new_remaining_metar = new_remaining_metar
        self.chunk_decoder = chunk_decoder
        # Assigned by the decoder chain once it knows what happened next
        self.kind = DecodeErrorKind.MALFORMED_CHUNK

    @property
    def is_soft(self) -> bool:
        """Was this chunk recovered by skipping a token?"""
        return self.kind == DecodeErrorKind.RECOVERED_VIA_SKIP


class UnitsError(Exception):
    """Exception for bad Units."""
