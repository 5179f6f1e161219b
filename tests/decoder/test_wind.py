"""Test the surface wind and wind shear decoders."""

import pytest

from pyvatis.decoder.wind import SurfaceWindChunkDecoder, WindShearChunkDecoder
from pyvatis.exceptions import MetarChunkDecoderException
from pyvatis.models.metar import Unit


def test_simple_wind():
    """Test the most common wind group."""
    chunk, remaining = SurfaceWindChunkDecoder().parse("18010KT 10SM ")
    wind = chunk.surface_wind
    assert wind.mean_direction.value == 180
    assert wind.mean_direction.units == Unit.DEGREE
    assert wind.mean_speed.value == 10
    assert wind.speed_unit == Unit.KNOT
    assert wind.speed_variations is None
    assert wind.direction_variations is None
    assert not wind.variable_direction
    assert wind.raw == "18010KT"
    assert wind.cardinal_direction == "S"
    assert remaining == "10SM "


def test_variable_wind():
    """Test VRB direction."""
    chunk, _ = SurfaceWindChunkDecoder().parse("VRB03KT 10SM ")
    assert chunk.surface_wind.variable_direction
    assert chunk.surface_wind.mean_direction is None
    assert chunk.surface_wind.mean_speed.value == 3


def test_gust_and_variations():
    """Test a gusting wind with direction variations."""
    chunk, remaining = SurfaceWindChunkDecoder().parse(
        "24015G25KT 210V270 4000 "
    )
    wind = chunk.surface_wind
    assert wind.speed_variations.value == 25
    assert [v.value for v in wind.direction_variations] == [210, 270]
    assert wind.raw == "24015G25KT 210V270"
    assert remaining == "4000 "


def test_meters_per_second():
    """Test the speed conversions."""
    chunk, _ = SurfaceWindChunkDecoder().parse("27005MPS 9999 ")
    wind = chunk.surface_wind
    assert wind.speed_unit == Unit.METER_PER_SECOND
    assert wind.mean_speed_in(Unit.METER_PER_SECOND) == 5
    assert wind.mean_speed_in(Unit.KNOT) == 9
    assert wind.mean_speed_in(Unit.KILOMETER_PER_HOUR) == 18
    assert wind.gust_in(Unit.KNOT) is None


def test_direction_not_measured():
    """Test that /// direction with a speed still decodes the speed."""
    chunk, _ = SurfaceWindChunkDecoder().parse("///10KT 10SM ")
    assert chunk.surface_wind.mean_direction is None
    assert chunk.surface_wind.mean_speed.value == 10


def test_calm():
    """Test a calm wind."""
    chunk, _ = SurfaceWindChunkDecoder().parse("00000KT P6SM ")
    assert chunk.surface_wind.is_calm


@pytest.mark.parametrize(
    "text,message",
    [
        ("/////KT 10SM ", "No information measured for surface wind"),
        ("37010KT 10SM ", "Wind direction should be in [0,360]"),
        (
            "18010KT 200V400 10SM ",
            "Wind direction variations should be in [0,360]",
        ),
        ("180XXKT 10SM ", "Bad format for surface wind information"),
    ],
)
def test_wind_errors(text, message):
    """Test the various ways a wind group is wrong."""
    with pytest.raises(MetarChunkDecoderException) as excinfo:
        SurfaceWindChunkDecoder().parse(text)
    assert excinfo.value.message == message
    assert excinfo.value.new_remaining_metar == "10SM "


def test_windshear_runways():
    """Test wind shear on given runways."""
    chunk, remaining = WindShearChunkDecoder().parse(
        "WS R27L WS RWY09 TEMPO "
    )
    assert chunk.windshear_all_runways is False
    assert chunk.windshear_runways == ["27L", "09"]
    assert remaining == "TEMPO "


def test_windshear_all():
    """Test wind shear on all runways."""
    chunk, remaining = WindShearChunkDecoder().parse("WS ALL RWY ")
    assert chunk.windshear_all_runways
    assert chunk.windshear_runways is None
    assert remaining == ""


def test_windshear_absent():
    """Test that no wind shear leaves things unknown."""
    chunk, remaining = WindShearChunkDecoder().parse("NOSIG ")
    assert chunk.windshear_all_runways is None
    assert chunk.windshear_runways is None
    assert remaining == "NOSIG "


def test_windshear_bad_runway():
    """Test a runway number that can not be."""
    with pytest.raises(MetarChunkDecoderException):
        WindShearChunkDecoder().parse("WS R37 ")
