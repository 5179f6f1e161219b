"""Surface wind and wind shear decoders."""

from typing import List, Optional

# third party
import regex

# Local
from pyvatis.decoder._base import ChunkDecoder, DecodedChunk
from pyvatis.models.metar import DecodedMetar, SurfaceWind, Unit, Value
from pyvatis.util import to_int

SURFACE_WIND_RE = (
    r"^(?P<drct>\d{3}|VRB|///)"
    r"P?(?P<speed>[/0-9]{2,3}|//)"
    r"(GP?(?P<gust>\d{2,3}))?"
    r"(?P<unit>KT|MPS|KPH)"
    r"( (?P<varmin>\d{3})V(?P<varmax>\d{3}))? "
)
WINDSHEAR_RE = (
    r"^((?P<all>WS ALL RWY) "
    r"|(?P<runways>(WS R(WY)?\d\d[LCR]? ){1,3}))?"
)
WINDSHEAR_RUNWAY = regex.compile(r"WS R(?:WY)?(?P<runway>\d\d[LCR]?) ")

SPEED_UNITS = {
    "KT": Unit.KNOT,
    "KPH": Unit.KILOMETER_PER_HOUR,
    "MPS": Unit.METER_PER_SECOND,
}


def _in_circle(drct: Optional[int]) -> bool:
    """Is this a valid direction?"""
    return drct is not None and 0 <= drct <= 360


class SurfaceWindChunk(DecodedChunk):
    """Found surface wind."""

    surface_wind: SurfaceWind

    def apply(self, metar: DecodedMetar):
        """Merge."""
        metar.surface_wind = self.surface_wind


class SurfaceWindChunkDecoder(ChunkDecoder):
    """dddff[Gfff]KT [dddVddd]"""

    name = "surface_wind"

    def get_regex(self):
        """Pattern."""
        return SURFACE_WIND_RE

    def parse(self, remaining, with_cavok=False):
        """Surface wind is required."""
        m, new_remaining = self.consume(remaining)
        if m is None:
            self.fail("Bad format for surface wind information", remaining)
        d = m.groupdict()
        if d["drct"] == "///" and d["speed"] == "//":
            self.fail(
                "No information measured for surface wind",
                remaining,
                new_remaining,
            )
        units = SPEED_UNITS[d["unit"]]
        wind = SurfaceWind(speed_unit=units, raw=m.group(0).strip())
        speed = to_int(d["speed"])
        if speed is not None:
            wind.mean_speed = Value(value=speed, units=units)
        if d["drct"] == "VRB":
            wind.variable_direction = True
        elif d["drct"] != "///":
            drct = int(d["drct"])
            if not _in_circle(drct):
                self.fail(
                    "Wind direction should be in [0,360]",
                    remaining,
                    new_remaining,
                )
            wind.mean_direction = Value(value=drct, units=Unit.DEGREE)
        if d["varmin"] is not None:
            varmin = int(d["varmin"])
            varmax = int(d["varmax"])
            if not _in_circle(varmin) or not _in_circle(varmax):
                self.fail(
                    "Wind direction variations should be in [0,360]",
                    remaining,
                    new_remaining,
                )
            wind.direction_variations = (
                Value(value=varmin, units=Unit.DEGREE),
                Value(value=varmax, units=Unit.DEGREE),
            )
        if d["gust"] is not None:
            wind.speed_variations = Value(value=int(d["gust"]), units=units)
        return SurfaceWindChunk(surface_wind=wind), new_remaining


class WindShearChunk(DecodedChunk):
    """Found wind shear."""

    windshear_all_runways: Optional[bool] = None
    windshear_runways: Optional[List[str]] = None

    def apply(self, metar: DecodedMetar):
        """Merge."""
        metar.windshear_all_runways = self.windshear_all_runways
        metar.windshear_runways = self.windshear_runways


class WindShearChunkDecoder(ChunkDecoder):
    """WS ALL RWY or up to three WS Rnn groups."""

    name = "windshear"

    def get_regex(self):
        """Pattern."""
        return WINDSHEAR_RE

    def parse(self, remaining, with_cavok=False):
        """Absent wind shear is fine."""
        m, new_remaining = self.consume(remaining)
        if m is None or m.group(0) == "":
            return WindShearChunk(), new_remaining
        if m.group("all") is not None:
            return WindShearChunk(windshear_all_runways=True), new_remaining
        runways = []
        for rm in WINDSHEAR_RUNWAY.finditer(m.group("runways")):
            qfu = to_int(rm.group("runway"))
            if qfu is None or not 1 <= qfu <= 36:
                self.fail(
                    "Invalid runway QFU runway visual range information",
                    remaining,
                    new_remaining,
                )
            runways.append(rm.group("runway"))
        chunk = WindShearChunk(
            windshear_all_runways=False, windshear_runways=runways
        )
        return chunk, new_remaining
