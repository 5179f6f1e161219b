"""Test the temperature and pressure decoders."""

import pytest

from pyvatis.decoder.atmosphere import (
    PressureChunkDecoder,
    TemperatureChunkDecoder,
)
from pyvatis.exceptions import MetarChunkDecoderException
from pyvatis.models.metar import Unit


@pytest.mark.parametrize(
    "text,air,dew",
    [
        ("24/18 ", 24, 18),
        ("M05/M10 ", -5, -10),
        ("02/M01 ", 2, -1),
        ("24/ ", 24, None),
    ],
)
def test_temperature(text, air, dew):
    """Test temperature and dew point."""
    chunk, remaining = TemperatureChunkDecoder().parse(f"{text}A3000 ")
    assert chunk.air_temperature.value == air
    assert chunk.air_temperature.units == Unit.DEGREE_CELSIUS
    if dew is None:
        assert chunk.dew_point_temperature is None
    else:
        assert chunk.dew_point_temperature.value == dew
    assert remaining == "A3000 "


def test_temperature_absent():
    """Test that no temperature is fine."""
    chunk, remaining = TemperatureChunkDecoder().parse("A3000 ")
    assert chunk.air_temperature is None
    assert chunk.dew_point_temperature is None
    assert remaining == "A3000 "


def test_altimeter():
    """Test inches of mercury."""
    chunk, remaining = PressureChunkDecoder().parse("A3000 RMK AO2 ")
    pres = chunk.pressure
    assert pres.unit_tag == "A"
    assert pres.reported_value == 3000
    assert pres.value.value == pytest.approx(30.0)
    assert pres.value.units == Unit.MERCURY_INCH
    assert pres.value.to(Unit.HECTOPASCAL) == pytest.approx(1015.917)
    assert pres.raw == "A3000"
    assert remaining == "RMK AO2 "


def test_qnh():
    """Test hectopascal."""
    chunk, _ = PressureChunkDecoder().parse("Q1013 NOSIG ")
    assert chunk.pressure.unit_tag == "Q"
    assert chunk.pressure.value.value == 1013
    assert chunk.pressure.value.units == Unit.HECTOPASCAL


def test_pressure_not_available():
    """Test that //// is not an error."""
    chunk, remaining = PressureChunkDecoder().parse("Q//// ")
    assert chunk.pressure is None
    assert remaining == ""


def test_pressure_missing():
    """Test that pressure is required."""
    with pytest.raises(MetarChunkDecoderException) as excinfo:
        PressureChunkDecoder().parse("RMK AO2 ")
    assert excinfo.value.message == "Atmospheric pressure not found"
    assert excinfo.value.new_remaining_metar == "AO2 "
