"""Trend (TEMPO, BECMG, NOSIG) decoder."""

from typing import Optional

# Local
from pyvatis.decoder._base import ChunkDecoder, DecodedChunk
from pyvatis.models.metar import DecodedMetar, TrendForecast, TrendType
from pyvatis.reference import WEATHER_CHARACTERISTICS, WEATHER_TYPES

CHARACTERISTICS_RE = "|".join(WEATHER_CHARACTERISTICS)
TYPES_RE = "|".join(WEATHER_TYPES)
WIND_RE = r"(?:\d{3}|VRB|///)P?(?:[/0-9]{2,3}|//)(?:GP?\d{2,3})?(?:KT|MPS|KPH)"
VISIBILITY_RE = r"(?:CAVOK|\d{4}|[PM]?\d{1,2}SM|(?:\d )?[1357]/\d{1,2}SM)"
WEATHER_RE = (
    rf"(?:NSW|(?:[-+]|VC)?(?:(?:{CHARACTERISTICS_RE})(?:{TYPES_RE}){{0,3}}"
    rf"|(?:{TYPES_RE}){{1,3}}))"
)
CLOUDS_RE = (
    r"(?:(?:NSC|NCD|CLR|SKC) "
    r"|(?:(?:VV|FEW|SCT|BKN|OVC|///)(?:\d{3}|///)(?:CB|TCU|///)? ){1,4})"
)
# A report carries a trend and possibly a second one after it
TREND_GROUPS = 2


def _trend_group(idx: int) -> str:
    """Pattern for one trend group, groups suffixed by idx."""
    return (
        f"(?P<trend{idx}>(?P<indicator{idx}>TEMPO|BECMG|NOSIG) "
        rf"(AT(?P<at{idx}>\d{{4}}) )?"
        rf"(FM(?P<from{idx}>\d{{4}}) )?"
        rf"(TL(?P<until{idx}>\d{{4}}) )?"
        f"((?P<wind{idx}>{WIND_RE}) )?"
        f"((?P<visibility{idx}>{VISIBILITY_RE}) )?"
        f"(?P<weather{idx}>({WEATHER_RE} )+)?"
        f"(?P<clouds{idx}>{CLOUDS_RE})?)"
    )


TREND_RE = (
    "^((TREND )?"
    + _trend_group(0)
    + "".join(f"{_trend_group(i)}?" for i in range(1, TREND_GROUPS))
    + ")?"
)


def _strip(text: Optional[str]) -> Optional[str]:
    """Trim, keeping None."""
    return None if text is None else text.strip()


def _make_trend(m, idx: int) -> Optional[TrendForecast]:
    """Build the trend model for one group of the match."""
    if m.group(f"trend{idx}") is None:
        return None
    return TrendForecast(
        change_indicator=TrendType(m.group(f"indicator{idx}")),
        at_time=m.group(f"at{idx}"),
        from_time=m.group(f"from{idx}"),
        until_time=m.group(f"until{idx}"),
        surface_wind=m.group(f"wind{idx}"),
        prevailing_visibility=m.group(f"visibility{idx}"),
        weather_codes=_strip(m.group(f"weather{idx}")),
        clouds=_strip(m.group(f"clouds{idx}")),
        raw=_strip(m.group(f"trend{idx}")),
    )


class TrendChunk(DecodedChunk):
    """Found trend forecasts."""

    trend_forecast: Optional[TrendForecast] = None
    trend_forecast_future: Optional[TrendForecast] = None

    def apply(self, metar: DecodedMetar):
        """Merge."""
        metar.trend_forecast = self.trend_forecast
        metar.trend_forecast_future = self.trend_forecast_future


class TrendChunkDecoder(ChunkDecoder):
    """Up to two trend groups, optionally after the TREND keyword."""

    name = "trend"

    def get_regex(self):
        """Pattern."""
        return TREND_RE

    def parse(self, remaining, with_cavok=False):
        """Absent trend is fine."""
        m, new_remaining = self.consume(remaining)
        if m is None:
            return TrendChunk(), new_remaining
        chunk = TrendChunk(
            trend_forecast=_make_trend(m, 0),
            trend_forecast_future=_make_trend(m, 1),
        )
        return chunk, new_remaining
