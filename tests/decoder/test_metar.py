"""Test the METAR decoder chain."""

import pytest

from pyvatis import decode, decode_lenient, decode_strict, set_strict_parsing
from pyvatis.decoder import ChunkRole, MetarDecoder, normalize
from pyvatis.decoder.header import IcaoChunkDecoder
from pyvatis.exceptions import DecodeErrorKind, MetarChunkDecoderException
from pyvatis.models.metar import CloudAmount, MetarType, TrendType, Unit
from pyvatis.util import get_test_file

KJFK = "KJFK 261651Z 18010KT 10SM FEW250 24/18 A3000"
BAD_WIND = "KJFK 261651Z 180XXKT 10SM FEW250 24/18 A3000"


def valid_metars():
    """Our collection of reports without any problems."""
    return get_test_file("METAR/valid.txt").strip().split("\n")


def test_kjfk(decoder):
    """Test a simple US report."""
    metar = decoder.decode(KJFK)
    assert metar.is_valid
    assert metar.raw_metar == KJFK
    assert metar.type is None
    assert metar.icao == "KJFK"
    assert (metar.day, metar.hour, metar.minute) == (26, 16, 51)
    assert metar.time == "16:51 UTC"
    assert metar.status is None
    assert metar.surface_wind.mean_direction.value == 180
    assert metar.surface_wind.mean_speed.value == 10
    assert metar.surface_wind.speed_unit == Unit.KNOT
    assert metar.visibility.prevailing_visibility.value == 10
    assert metar.visibility.prevailing_visibility.units == Unit.STATUTE_MILE
    assert metar.cavok is False
    assert metar.runways_visual_range is None
    assert metar.present_weather is None
    (layer,) = metar.clouds
    assert layer.amount == CloudAmount.FEW
    assert layer.base_height.value == 25000
    assert metar.ceiling is None
    assert metar.air_temperature.value == 24
    assert metar.dew_point_temperature.value == 18
    assert metar.pressure.unit_tag == "A"
    assert metar.pressure.reported_value == 3000
    assert metar.pressure.value.value == pytest.approx(30.0)
    assert metar.recent_weather is None
    assert metar.windshear_all_runways is None
    assert metar.trend_forecast is None


def test_egll(decoder):
    """Test a report with most every group."""
    metar = decoder.decode(get_test_file("METAR/EGLL.txt"))
    assert metar.is_valid
    assert metar.type == MetarType.METAR
    assert metar.status == "AUTO"
    assert metar.surface_wind.speed_variations.value == 25
    assert metar.visibility.minimum_visibility_direction == "SW"
    assert len(metar.runways_visual_range) == 2
    assert len(metar.present_weather) == 2
    assert metar.ceiling.base_height.value == 2500
    assert metar.dew_point_temperature.value == -2
    assert metar.pressure.value.units == Unit.HECTOPASCAL
    assert metar.recent_weather.types == ["RA"]
    assert metar.windshear_runways == ["27L"]
    assert metar.trend_forecast.change_indicator == TrendType.TEMPORARY
    assert not metar.raw_metar.endswith("=")


def test_nil(decoder):
    """Test that a NIL report stops the chain."""
    metar = decoder.decode("KXYZ 261651Z NIL")
    assert metar.is_nil
    assert metar.is_valid
    assert metar.icao == "KXYZ"
    assert metar.surface_wind is None
    assert metar.visibility is None
    assert metar.clouds is None
    assert metar.air_temperature is None
    assert metar.pressure is None


def test_cavok(decoder):
    """Test that CAVOK means clouds are not required."""
    metar = decoder.decode("LFPG 261630Z 27010KT CAVOK 18/09 Q1020 NOSIG")
    assert metar.is_valid
    assert metar.cavok
    assert metar.visibility.is_cavok
    assert metar.clouds is None
    assert metar.air_temperature.value == 18
    assert metar.pressure.value.value == 1020
    assert (
        metar.trend_forecast.change_indicator
        == TrendType.NO_SIGNIFICANT_CHANGES
    )


def test_malformed_wind_lenient(decoder):
    """Test that a bad wind group does not stop the rest."""
    metar = decoder.decode(BAD_WIND)
    assert not metar.is_valid
    assert metar.surface_wind is None
    assert len(metar.decoding_exceptions) == 1
    exp = metar.decoding_exceptions[0]
    assert exp.chunk_decoder == "surface_wind"
    assert exp.kind == DecodeErrorKind.MALFORMED_CHUNK
    assert not exp.is_soft
    assert exp.remaining_metar.startswith("180XXKT")
    assert metar.visibility.prevailing_visibility.value == 10
    assert metar.air_temperature.value == 24
    assert metar.pressure.reported_value == 3000


def test_malformed_wind_strict(decoder):
    """Test that strict decoding stops at the bad wind group."""
    metar = decoder.decode_strict(BAD_WIND)
    assert len(metar.decoding_exceptions) == 1
    exp = metar.decoding_exceptions[0]
    assert exp.kind == DecodeErrorKind.UNRECOVERABLE_IN_STRICT_MODE
    assert metar.icao == "KJFK"
    assert metar.surface_wind is None
    assert metar.visibility is None
    assert metar.air_temperature is None


def test_recovered_via_skip(decoder):
    """Test that a stray token is skipped."""
    metar = decoder.decode(
        "KJFK 261651Z 18010KT BLAH 10SM FEW250 24/18 A3000"
    )
    assert len(metar.decoding_exceptions) == 1
    exp = metar.decoding_exceptions[0]
    assert exp.kind == DecodeErrorKind.RECOVERED_VIA_SKIP
    assert exp.is_soft
    assert exp.message == "Bad format for visibility information"
    assert metar.visibility.prevailing_visibility.value == 10
    assert metar.clouds[0].amount == CloudAmount.FEW
    assert metar.get_decoding_errors() == [exp.message]


def test_missing_everything(decoder):
    """Test that junk does not raise."""
    metar = decoder.decode("HELLO WORLD")
    assert not metar.is_valid
    assert metar.icao is None
    assert metar.decoding_exceptions[0].chunk_decoder == "icao"


def test_empty(decoder):
    """Test an empty report."""
    metar = decoder.decode("")
    assert metar.raw_metar == ""
    assert metar.decoding_exceptions[0].chunk_decoder == "icao"


def test_strict_matches_lenient():
    """Test that strictness does not matter for good reports."""
    for text in valid_metars():
        strict = decode_strict(text)
        lenient = decode_lenient(text)
        assert strict.is_valid, text
        assert lenient.is_valid, text
        assert strict.model_dump() == lenient.model_dump()


def test_idempotent(decoder):
    """Test that decoding the stored raw text gives the same result."""
    for text in valid_metars():
        first = decoder.decode(text)
        second = decoder.decode(first.raw_metar)
        assert first.model_dump() == second.model_dump()


def test_normalize():
    """Test the clean up of raw text."""
    assert normalize("  kjfk 261651z\t 18010kt  a3000= ") == (
        "KJFK 261651Z 18010KT A3000 "
    )
    metar = decode("  kjfk 261651z   18010kt 10sm few250 24/18 a3000=")
    assert metar.raw_metar == KJFK
    assert metar.is_valid


def test_set_strict_parsing():
    """Test the module level default strictness."""
    set_strict_parsing(True)
    try:
        metar = decode(BAD_WIND)
        assert metar.decoding_exceptions[0].kind == (
            DecodeErrorKind.UNRECOVERABLE_IN_STRICT_MODE
        )
        assert decode(BAD_WIND, strict=False).air_temperature.value == 24
    finally:
        set_strict_parsing(False)
    assert decode(BAD_WIND).air_temperature.value == 24


def test_chain():
    """Test the chain order and roles."""
    decoder = MetarDecoder()
    assert isinstance(decoder.decoders, tuple)
    assert len(decoder.decoders) == 14
    roles = [d.role for d in decoder.decoders]
    assert roles[3] == ChunkRole.REPORT_STATUS
    assert roles[5] == ChunkRole.VISIBILITY
    assert [d.name for d in decoder.decoders][:3] == [
        "report_type",
        "icao",
        "datetime",
    ]


def test_meters_cutoff():
    """Test passing the cutoff through the decoder."""
    text = "LFBO 261700Z 31008KT 6000 SCT040 21/12 Q1017"
    assert decode(text).visibility.reported_in_kilometers
    metar = MetarDecoder(meters_cutoff=8000).decode(text)
    assert not metar.visibility.reported_in_kilometers


def test_serialization(decoder):
    """Test that decoding errors are not serialized."""
    metar = decoder.decode(BAD_WIND)
    res = metar.model_dump()
    assert "decoding_exceptions" not in res
    assert res["icao"] == "KJFK"
    assert '"surface_wind":null' in metar.model_dump_json()


class _SlowPattern:
    """A pattern that always times out."""

    def match(self, text, timeout=None):
        """Pretend we ran out of time."""
        raise TimeoutError("regex timed out")


def test_timeout_is_no_match(caplog):
    """Test that a pattern timeout is logged and is a failure."""
    chunk_decoder = IcaoChunkDecoder(timeout=0.01)
    chunk_decoder.pattern = _SlowPattern()
    with pytest.raises(MetarChunkDecoderException):
        chunk_decoder.parse("KJFK 261651Z ")
    assert "timed out" in caplog.text
