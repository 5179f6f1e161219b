"""Visibility and runway visual range decoders."""

from typing import List, Optional

# third party
import regex

# Local
from pyvatis.decoder._base import ChunkDecoder, ChunkRole, DecodedChunk
from pyvatis.models.metar import (
    DecodedMetar,
    RunwayVisualRange,
    Tendency,
    Unit,
    Value,
    Visibility,
)
from pyvatis.reference import MATCH_TIMEOUT, VISIBILITY_METERS_CUTOFF
from pyvatis.util import to_int

VISIBILITY_RE = (
    r"^((?P<cavok>CAVOK)"
    r"|(?P<meters>\d{4})(?P<ndv>NDV)?"
    r"( (?P<minimum>\d{4})(?P<direction>N|NE|E|SE|S|SW|W|NW)?)?"
    r"|(?P<sm_prefix>[PM])?(?P<whole>\d{0,2}) ?"
    r"((?P<numerator>[1357])/(?P<denominator>2|4|8|16))?SM"
    r"|(?P<missing>////)) "
)
RVR_ITEM_RE = (
    r"R(?P<runway>\d\d[LCR]?)/"
    r"((?P<min_prefix>[PM])?(?P<minimum>\d{4})V)?"
    r"(?P<prefix>[PM])?(?P<range>\d{4})(?P<feet>FT)?/?(?P<tendency>[UDN]?) "
)
RVR_RE = rf"^(?P<groups>({RVR_ITEM_RE})+)?"
RVR_ITEM = regex.compile(RVR_ITEM_RE)


class VisibilityChunk(DecodedChunk):
    """Found visibility."""

    visibility: Visibility
    cavok: bool = False

    def apply(self, metar: DecodedMetar):
        """Merge."""
        metar.visibility = self.visibility
        metar.cavok = self.cavok


class VisibilityChunkDecoder(ChunkDecoder):
    """CAVOK, metric, statute mile or missing visibility."""

    name = "visibility"
    role = ChunkRole.VISIBILITY

    def __init__(
        self,
        timeout: float = MATCH_TIMEOUT,
        meters_cutoff: int = VISIBILITY_METERS_CUTOFF,
    ):
        """constructor

        Args:
          timeout (float): seconds allowed per match.
          meters_cutoff (int): metric prevailing visibility above this is
            flagged as reported in kilometers.
        """
        super().__init__(timeout)
        self.meters_cutoff = meters_cutoff

    def get_regex(self):
        """Pattern."""
        return VISIBILITY_RE

    def parse(self, remaining, with_cavok=False):
        """Visibility is required."""
        m, new_remaining = self.consume(remaining)
        if m is None:
            self.fail("Bad format for visibility information", remaining)
        d = m.groupdict()
        raw = m.group(0).strip()
        if d["cavok"] is not None:
            vis = Visibility(is_cavok=True, raw=raw)
            return VisibilityChunk(visibility=vis, cavok=True), new_remaining
        vis = Visibility(raw=raw)
        if d["missing"] is not None:
            return VisibilityChunk(visibility=vis), new_remaining
        if d["meters"] is not None:
            meters = int(d["meters"])
            vis.prevailing_visibility = Value(value=meters, units=Unit.METER)
            vis.reported_in_kilometers = meters > self.meters_cutoff
            vis.is_ndv = d["ndv"] is not None
            if d["minimum"] is not None:
                vis.minimum_visibility = Value(
                    value=int(d["minimum"]), units=Unit.METER
                )
                vis.minimum_visibility_direction = d["direction"]
            return VisibilityChunk(visibility=vis), new_remaining
        miles = float(d["whole"] or 0)
        if d["numerator"] is not None:
            miles += int(d["numerator"]) / int(d["denominator"])
        vis.prevailing_visibility = Value(value=miles, units=Unit.STATUTE_MILE)
        return VisibilityChunk(visibility=vis), new_remaining


class RunwayVisualRangeChunk(DecodedChunk):
    """Found runway visual ranges."""

    runways_visual_range: Optional[List[RunwayVisualRange]] = None

    def apply(self, metar: DecodedMetar):
        """Merge."""
        metar.runways_visual_range = self.runways_visual_range


def _make_rvr(d: dict, raw: str) -> RunwayVisualRange:
    """Build the model from one RVR group."""
    units = Unit.FEET if d["feet"] is not None else Unit.METER
    prefixes = (d["min_prefix"], d["prefix"])
    rvr = RunwayVisualRange(
        runway=d["runway"],
        is_less_than="M" in prefixes,
        is_greater_than="P" in prefixes,
        past_tendency=Tendency(d["tendency"]) if d["tendency"] else None,
        raw=raw,
    )
    high = Value(value=int(d["range"]), units=units)
    if d["minimum"] is not None:
        rvr.variable = True
        rvr.visual_range_interval = (
            Value(value=int(d["minimum"]), units=units),
            high,
        )
    else:
        rvr.visual_range = high
    return rvr


class RunwayVisualRangeChunkDecoder(ChunkDecoder):
    """One or more Rnn/nnnn groups."""

    name = "runway_visual_range"

    def get_regex(self):
        """Pattern."""
        return RVR_RE

    def parse(self, remaining, with_cavok=False):
        """Absent RVR is fine."""
        m, new_remaining = self.consume(remaining)
        if m is None or m.group("groups") is None:
            return RunwayVisualRangeChunk(), new_remaining
        runways = []
        for rm in RVR_ITEM.finditer(m.group("groups")):
            qfu = to_int(rm.group("runway"))
            if qfu is None or not 1 <= qfu <= 36:
                self.fail(
                    "Invalid runway QFU runway visual range information",
                    remaining,
                    new_remaining,
                )
            runways.append(_make_rvr(rm.groupdict(), rm.group(0).strip()))
        return (
            RunwayVisualRangeChunk(runways_visual_range=runways),
            new_remaining,
        )
