"""Decoders for the report header: type, station, time and status."""

from typing import Optional

# Local
from pyvatis.decoder._base import ChunkDecoder, ChunkRole, DecodedChunk
from pyvatis.models.metar import DecodedMetar, MetarType

REPORT_TYPE_RE = r"^((?P<type>METAR|SPECI)(?P<cor> COR)? )?"
ICAO_RE = r"^(?P<icao>[A-Z0-9]{4}) "
DATETIME_RE = r"^(?P<day>\d\d)(?P<hour>\d\d)(?P<minute>\d\d)Z "
STATUS_RE = r"^((?P<status>[A-Z]+) )?"


class ReportTypeChunk(DecodedChunk):
    """Found report type."""

    type: Optional[MetarType] = None

    def apply(self, metar: DecodedMetar):
        """Merge."""
        metar.type = self.type


class ReportTypeChunkDecoder(ChunkDecoder):
    """METAR or SPECI, possibly a correction."""

    name = "report_type"

    def get_regex(self):
        """Pattern."""
        return REPORT_TYPE_RE

    def parse(self, remaining, with_cavok=False):
        """Absent report type is fine."""
        m, new_remaining = self.consume(remaining)
        if m is None or m.group("type") is None:
            return ReportTypeChunk(), new_remaining
        text = m.group("type") + (m.group("cor") or "")
        return ReportTypeChunk(type=MetarType(text)), new_remaining


class IcaoChunk(DecodedChunk):
    """Found station identifier."""

    icao: str

    def apply(self, metar: DecodedMetar):
        """Merge."""
        metar.icao = self.icao


class IcaoChunkDecoder(ChunkDecoder):
    """Four character station identifier."""

    name = "icao"

    def get_regex(self):
        """Pattern."""
        return ICAO_RE

    def parse(self, remaining, with_cavok=False):
        """Station is required."""
        m, new_remaining = self.consume(remaining)
        if m is None:
            self.fail(
                "Station ICAO code not found (4 char expected)", remaining
            )
        return IcaoChunk(icao=m.group("icao")), new_remaining


class DatetimeChunk(DecodedChunk):
    """Found observation day and time."""

    day: int
    hour: int
    minute: int

    @property
    def time(self) -> str:
        """The time as said on the ATIS."""
        return f"{self.hour:02d}:{self.minute:02d} UTC"

    def apply(self, metar: DecodedMetar):
        """Merge."""
        metar.day = self.day
        metar.hour = self.hour
        metar.minute = self.minute
        metar.time = self.time


class DatetimeChunkDecoder(ChunkDecoder):
    """The ddhhmmZ group."""

    name = "datetime"

    def get_regex(self):
        """Pattern."""
        return DATETIME_RE

    def parse(self, remaining, with_cavok=False):
        """Observation time is required and must be sane."""
        m, new_remaining = self.consume(remaining)
        if m is None:
            self.fail(
                "Missing or badly formatted day/hour/minute information "
                '("ddhhmmZ" expected)',
                remaining,
            )
        day = int(m.group("day"))
        hour = int(m.group("hour"))
        minute = int(m.group("minute"))
        if not 1 <= day <= 31 or hour > 23 or minute > 59:
            self.fail(
                "Invalid values for day/hour/minute", remaining, new_remaining
            )
        return DatetimeChunk(day=day, hour=hour, minute=minute), new_remaining


class ReportStatusChunk(DecodedChunk):
    """Found report status."""

    status: Optional[str] = None

    def apply(self, metar: DecodedMetar):
        """Merge."""
        metar.status = self.status


class ReportStatusChunkDecoder(ChunkDecoder):
    """AUTO, NIL or some other three letter word."""

    name = "report_status"
    role = ChunkRole.REPORT_STATUS

    def get_regex(self):
        """Pattern."""
        return STATUS_RE

    def parse(self, remaining, with_cavok=False):
        """A NIL report must have nothing after it."""
        m, new_remaining = self.consume(remaining)
        status = None if m is None else m.group("status")
        if status is None:
            return ReportStatusChunk(), new_remaining
        if len(status) != 3 and status != "AUTO":
            self.fail(
                "Invalid report status, expecting AUTO, NIL, or any other "
                "3 letter word",
                remaining,
                new_remaining,
            )
        if status == "NIL" and new_remaining.strip():
            self.fail(
                "No information expected after NIL status",
                remaining,
                new_remaining,
            )
        return ReportStatusChunk(status=status), new_remaining
