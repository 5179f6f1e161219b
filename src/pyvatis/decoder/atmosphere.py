"""Temperature and pressure decoders."""

from typing import Optional

# Local
from pyvatis.decoder._base import ChunkDecoder, DecodedChunk
from pyvatis.models.metar import DecodedMetar, Pressure, Unit, Value
from pyvatis.util import to_int

TEMPERATURE_RE = r"^((?P<air>M?\d\d)?/(?P<dew>M?\d\d)? )?"
PRESSURE_RE = r"^(?P<raw>(?P<unit>Q|A)(?P<value>////|\d{4})) "


class TemperatureChunk(DecodedChunk):
    """Found air and dew point temperature."""

    air_temperature: Optional[Value] = None
    dew_point_temperature: Optional[Value] = None

    def apply(self, metar: DecodedMetar):
        """Merge."""
        metar.air_temperature = self.air_temperature
        metar.dew_point_temperature = self.dew_point_temperature


def _celsius(text: Optional[str]) -> Optional[Value]:
    """M05 is -5C."""
    if text is None:
        return None
    return Value(value=to_int(text), units=Unit.DEGREE_CELSIUS)


class TemperatureChunkDecoder(ChunkDecoder):
    """tt/dd group, M marks values below zero."""

    name = "temperature"

    def get_regex(self):
        """Pattern."""
        return TEMPERATURE_RE

    def parse(self, remaining, with_cavok=False):
        """Absent temperature is fine."""
        m, new_remaining = self.consume(remaining)
        if m is None:
            return TemperatureChunk(), new_remaining
        chunk = TemperatureChunk(
            air_temperature=_celsius(m.group("air")),
            dew_point_temperature=_celsius(m.group("dew")),
        )
        return chunk, new_remaining


class PressureChunk(DecodedChunk):
    """Found pressure."""

    pressure: Optional[Pressure] = None

    def apply(self, metar: DecodedMetar):
        """Merge."""
        metar.pressure = self.pressure


class PressureChunkDecoder(ChunkDecoder):
    """Qnnnn in hectopascal or Annnn in hundredths of inches."""

    name = "pressure"

    def get_regex(self):
        """Pattern."""
        return PRESSURE_RE

    def parse(self, remaining, with_cavok=False):
        """Pressure is required, //// means it was not available."""
        m, new_remaining = self.consume(remaining)
        if m is None:
            self.fail("Atmospheric pressure not found", remaining)
        reported = to_int(m.group("value"))
        if reported is None:
            return PressureChunk(), new_remaining
        if m.group("unit") == "A":
            value = Value(value=reported / 100.0, units=Unit.MERCURY_INCH)
        else:
            value = Value(value=reported, units=Unit.HECTOPASCAL)
        pressure = Pressure(
            unit_tag=m.group("unit"),
            reported_value=reported,
            value=value,
            raw=m.group("raw"),
        )
        return PressureChunk(pressure=pressure), new_remaining
