"""Present and recent weather decoders."""

from typing import List, Optional

# Local
from pyvatis.decoder._base import ChunkDecoder, DecodedChunk
from pyvatis.models.metar import DecodedMetar, WeatherPhenomenon
from pyvatis.reference import (
    MISSING_WEATHER,
    WEATHER_CHARACTERISTICS,
    WEATHER_TYPES,
)

CHARACTERISTICS_RE = "|".join(WEATHER_CHARACTERISTICS)
TYPES_RE = "|".join(WEATHER_TYPES)
INTENSITY_RE = r"[-+]|VC"
# A METAR carries at most this many present weather groups
PRESENT_WEATHER_GROUPS = 3


def _weather_group(idx: int) -> str:
    """Pattern for one present weather group, groups suffixed by idx."""
    return (
        f"((?P<raw{idx}>(?P<intensity{idx}>{INTENSITY_RE})?"
        f"(?P<carac{idx}>{CHARACTERISTICS_RE})?"
        f"(?P<type1_{idx}>{TYPES_RE})?"
        f"(?P<type2_{idx}>{TYPES_RE})?"
        f"(?P<type3_{idx}>{TYPES_RE})?) )?"
    )


PRESENT_WEATHER_RE = "^" + "".join(
    _weather_group(i) for i in range(PRESENT_WEATHER_GROUPS)
)
RECENT_WEATHER_RE = (
    f"^RE(?P<carac>{CHARACTERISTICS_RE})?"
    f"(?P<type1>{TYPES_RE})?(?P<type2>{TYPES_RE})?(?P<type3>{TYPES_RE})? "
)


class PresentWeatherChunk(DecodedChunk):
    """Found present weather."""

    present_weather: Optional[List[WeatherPhenomenon]] = None

    def apply(self, metar: DecodedMetar):
        """Merge."""
        metar.present_weather = self.present_weather


class PresentWeatherChunkDecoder(ChunkDecoder):
    """Up to three groups like -SHRA, VCTS or +TSRAGR."""

    name = "present_weather"

    def get_regex(self):
        """Pattern."""
        return PRESENT_WEATHER_RE

    def parse(self, remaining, with_cavok=False):
        """Absent weather is fine, missing (//) groups are dropped."""
        m, new_remaining = self.consume(remaining)
        if m is None:
            return PresentWeatherChunk(), new_remaining
        phenomena = []
        for idx in range(PRESENT_WEATHER_GROUPS):
            raw = m.group(f"raw{idx}")
            if not raw or m.group(f"type1_{idx}") == MISSING_WEATHER:
                continue
            wx = WeatherPhenomenon(
                intensity_proximity=m.group(f"intensity{idx}"),
                characteristics=m.group(f"carac{idx}"),
                raw=raw,
            )
            for typ in range(1, 4):
                code = m.group(f"type{typ}_{idx}")
                if code is not None:
                    wx.add_type(code)
            phenomena.append(wx)
        chunk = PresentWeatherChunk(present_weather=phenomena or None)
        return chunk, new_remaining


class RecentWeatherChunk(DecodedChunk):
    """Found recent weather."""

    recent_weather: Optional[WeatherPhenomenon] = None

    def apply(self, metar: DecodedMetar):
        """Merge."""
        metar.recent_weather = self.recent_weather


class RecentWeatherChunkDecoder(ChunkDecoder):
    """REww group."""

    name = "recent_weather"

    def get_regex(self):
        """Pattern."""
        return RECENT_WEATHER_RE

    def parse(self, remaining, with_cavok=False):
        """Absent recent weather is fine."""
        m, new_remaining = self.consume(remaining)
        if m is None:
            return RecentWeatherChunk(), new_remaining
        wx = WeatherPhenomenon(
            characteristics=m.group("carac"), raw=m.group(0).strip()
        )
        for typ in ("type1", "type2", "type3"):
            if m.group(typ) is not None:
                wx.add_type(m.group(typ))
        return RecentWeatherChunk(recent_weather=wx), new_remaining
