"""The METAR decoder chain.

A raw report is normalized and then handed to each chunk decoder in turn,
each one consuming the start of the text it is given.  Problems found along
the way are kept on the returned :class:`DecodedMetar` rather than raised.
"""

from typing import Optional, Sequence

# Local
from pyvatis.decoder._base import ChunkRole, consume_one_chunk
from pyvatis.decoder.atmosphere import (
    PressureChunkDecoder,
    TemperatureChunkDecoder,
)
from pyvatis.decoder.clouds import CloudChunkDecoder
from pyvatis.decoder.header import (
    DatetimeChunkDecoder,
    IcaoChunkDecoder,
    ReportStatusChunkDecoder,
    ReportTypeChunkDecoder,
)
from pyvatis.decoder.trend import TrendChunkDecoder
from pyvatis.decoder.visibility import (
    RunwayVisualRangeChunkDecoder,
    VisibilityChunkDecoder,
)
from pyvatis.decoder.weather import (
    PresentWeatherChunkDecoder,
    RecentWeatherChunkDecoder,
)
from pyvatis.decoder.wind import SurfaceWindChunkDecoder, WindShearChunkDecoder
from pyvatis.exceptions import DecodeErrorKind, MetarChunkDecoderException
from pyvatis.models.metar import DecodedMetar
from pyvatis.reference import (
    CEILING_AMOUNTS,
    MATCH_TIMEOUT,
    REPORT_TERMINATOR,
    VISIBILITY_METERS_CUTOFF,
)
from pyvatis.util import LOG


def normalize(raw: str) -> str:
    """Clean up a raw METAR for the chunk decoders.

    Upper case, drop the trailing ``=``, collapse whitespace and leave
    exactly one trailing space so that every token ends with a space.
    """
    text = raw.upper().strip()
    if text.endswith(REPORT_TERMINATOR):
        text = text[: -len(REPORT_TERMINATOR)]
    return " ".join(text.split()) + " "


class MetarDecoder:
    """Decode METAR text into a :class:`DecodedMetar`.

    Args:
      strict (bool): stop at the first chunk that fails to decode, the
        default is to skip a token and try again.
      timeout (float): seconds allowed for each chunk pattern to match.
      meters_cutoff (int): metric visibility above this many meters is
        flagged as reported in kilometers.
      ceiling_amounts (list): cloud amounts that form a ceiling.
    """

    def __init__(
        self,
        strict: bool = False,
        timeout: float = MATCH_TIMEOUT,
        meters_cutoff: int = VISIBILITY_METERS_CUTOFF,
        ceiling_amounts: Sequence[str] = CEILING_AMOUNTS,
    ):
        """constructor"""
        self.strict = strict
        self._decoders = (
            ReportTypeChunkDecoder(timeout),
            IcaoChunkDecoder(timeout),
            DatetimeChunkDecoder(timeout),
            ReportStatusChunkDecoder(timeout),
            SurfaceWindChunkDecoder(timeout),
            VisibilityChunkDecoder(timeout, meters_cutoff=meters_cutoff),
            RunwayVisualRangeChunkDecoder(timeout),
            PresentWeatherChunkDecoder(timeout),
            CloudChunkDecoder(timeout, ceiling_amounts=ceiling_amounts),
            TemperatureChunkDecoder(timeout),
            PressureChunkDecoder(timeout),
            RecentWeatherChunkDecoder(timeout),
            WindShearChunkDecoder(timeout),
            TrendChunkDecoder(timeout),
        )

    @property
    def decoders(self) -> tuple:
        """The chunk decoders, in the order they run."""
        return self._decoders

    def set_strict_parsing(self, strict: bool):
        """Change the strictness used when ``decode`` is not told."""
        self.strict = strict

    def decode_strict(self, raw: str) -> DecodedMetar:
        """Decode, stopping at the first bad chunk."""
        return self.decode(raw, strict=True)

    def decode_lenient(self, raw: str) -> DecodedMetar:
        """Decode, skipping past bad chunks."""
        return self.decode(raw, strict=False)

    def decode(self, raw: str, strict: Optional[bool] = None) -> DecodedMetar:
        """Decode a METAR.

        Args:
          raw (str): the METAR text.
          strict (bool): override the decoder's strictness for this call.

        Returns:
          DecodedMetar
        """
        strict = self.strict if strict is None else strict
        remaining = normalize(raw)
        metar = DecodedMetar(raw_metar=remaining.strip())
        with_cavok = False
        for chunk_decoder in self._decoders:
            try:
                chunk, remaining = chunk_decoder.parse(remaining, with_cavok)
            except MetarChunkDecoderException as exp:
                if strict:
                    exp.kind = DecodeErrorKind.UNRECOVERABLE_IN_STRICT_MODE
                    metar.add_decoding_exception(exp)
                    LOG.warning(
                        "%s stopped at %s: %s",
                        metar.raw_metar,
                        chunk_decoder.name,
                        exp.message,
                    )
                    break
                chunk, remaining = self._retry(
                    chunk_decoder, exp, metar, with_cavok
                )
                if chunk is None:
                    continue
            chunk.apply(metar)
            if chunk_decoder.role == ChunkRole.REPORT_STATUS and metar.is_nil:
                break
            if chunk_decoder.role == ChunkRole.VISIBILITY:
                with_cavok = bool(metar.cavok)
        return metar

    @staticmethod
    def _retry(chunk_decoder, exp, metar, with_cavok):
        """Try the chunk decoder once more with the first token dropped.

        Returns:
          (DecodedChunk or None, str) the chunk (None when the retry failed
          too) and the text to continue with.
        """
        try:
            chunk, remaining = chunk_decoder.parse(
                consume_one_chunk(exp.remaining_metar), with_cavok
            )
        except MetarChunkDecoderException:
            exp.kind = DecodeErrorKind.MALFORMED_CHUNK
            metar.add_decoding_exception(exp)
            LOG.debug("%s: %s", chunk_decoder.name, exp.message)
            return None, exp.new_remaining_metar
        exp.kind = DecodeErrorKind.RECOVERED_VIA_SKIP
        metar.add_decoding_exception(exp)
        LOG.debug("%s recovered: %s", chunk_decoder.name, exp.message)
        return chunk, remaining
