"""Shared plumbing for the METAR chunk decoders."""

from enum import Enum
from typing import Optional, Tuple

# third party
import regex
from pydantic import BaseModel

# Local
from pyvatis.exceptions import MetarChunkDecoderException
from pyvatis.models.metar import DecodedMetar
from pyvatis.reference import MATCH_TIMEOUT
from pyvatis.util import LOG


class ChunkRole(str, Enum):
    """What the decoder chain needs to know about a chunk decoder."""

    def __str__(self):
        """When we want the str repr."""
        return str(self.value)

    GENERIC = "GENERIC"
    REPORT_STATUS = "REPORT_STATUS"
    VISIBILITY = "VISIBILITY"


class DecodedChunk(BaseModel):
    """The fields a single chunk decoder found."""

    def apply(self, metar: DecodedMetar):
        """Merge this partial result into the report."""
        raise NotImplementedError


def consume_one_chunk(remaining: str) -> str:
    """Discard the leading space delimited token of the text.

    Text without a space after its first character is returned as is.
    """
    pos = remaining.find(" ")
    if pos > 0:
        return remaining[pos + 1 :]
    return remaining


class ChunkDecoder:
    """Base class of the chunk decoders.

    Subclasses provide ``get_regex`` and ``parse``.  Patterns are anchored
    at the start of the remaining text and every group is named.
    """

    name = "chunk"
    role = ChunkRole.GENERIC

    def __init__(self, timeout: float = MATCH_TIMEOUT):
        """constructor"""
        self.timeout = timeout
        self.pattern = regex.compile(self.get_regex())

    def __repr__(self):
        """Representation."""
        return f"<{self.__class__.__name__} {self.name}>"

    def get_regex(self) -> str:
        """Return the pattern this decoder matches."""
        raise NotImplementedError

    def match(self, remaining: str):
        """Run the pattern against the start of the text.

        A match that runs past the timeout counts as no match.
        """
        try:
            return self.pattern.match(remaining, timeout=self.timeout)
        except TimeoutError:
            LOG.warning(
                "%s pattern timed out after %ss on '%s'",
                self.name,
                self.timeout,
                remaining,
            )
            return None

    def consume(self, remaining: str) -> Tuple[Optional[object], str]:
        """Match and return (match or None, text after the match)."""
        m = self.match(remaining)
        if m is None:
            return None, remaining
        return m, remaining[m.end() :]

    def fail(self, message: str, remaining: str, new_remaining=None):
        """Raise the exception for this chunk.

        Args:
          message (str): why things went wrong.
          remaining (str): the text this decoder was handed.
          new_remaining (str): text after the matched prefix, when the
            pattern matched but the values were bad.
        """
        if new_remaining is None or new_remaining == remaining:
            new_remaining = consume_one_chunk(remaining)
        raise MetarChunkDecoderException(
            message,
            remaining_metar=remaining,
            new_remaining_metar=new_remaining,
            chunk_decoder=self.name,
        )

    def parse(
        self, remaining: str, with_cavok: bool = False
    ) -> Tuple[DecodedChunk, str]:
        """Decode the start of the remaining text.

        Returns:
          (DecodedChunk, str) the partial result and the text left over

        Raises:
          MetarChunkDecoderException
        """
        raise NotImplementedError
