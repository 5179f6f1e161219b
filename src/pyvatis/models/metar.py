"""Decoded METAR Data Model."""
# pylint: disable=too-few-public-methods

from enum import Enum
from typing import List, Optional, Sequence, Tuple

# third party
from pydantic import BaseModel, ConfigDict, Field

# Local
from pyvatis import datatypes
from pyvatis.exceptions import MetarChunkDecoderException, UnitsError
from pyvatis.reference import (
    CEILING_AMOUNTS,
    UNLIMITED_VISIBILITY_METERS,
    UNLIMITED_VISIBILITY_STATUTE_MILES,
)
from pyvatis.util import drct2text


class _StrEnum(str, Enum):
    """Enum that prints its value."""

    def __str__(self):
        """When we want the str repr."""
        return str(self.value)


class Unit(_StrEnum):
    """Units found within a METAR."""

    DEGREE_CELSIUS = "deg C"
    DEGREE = "deg"
    KNOT = "kt"
    METER_PER_SECOND = "m/s"
    KILOMETER_PER_HOUR = "km/h"
    METER = "m"
    FEET = "ft"
    STATUTE_MILE = "SM"
    HECTOPASCAL = "hPa"
    MERCURY_INCH = "inHg"


# Unit -> (datatypes class, unit code of that class)
_DATATYPES = {
    Unit.DEGREE_CELSIUS: (datatypes.temperature, "C"),
    Unit.DEGREE: (datatypes.direction, "DEG"),
    Unit.KNOT: (datatypes.speed, "KT"),
    Unit.METER_PER_SECOND: (datatypes.speed, "MPS"),
    Unit.KILOMETER_PER_HOUR: (datatypes.speed, "KMH"),
    Unit.METER: (datatypes.distance, "M"),
    Unit.FEET: (datatypes.distance, "FT"),
    Unit.STATUTE_MILE: (datatypes.distance, "SM"),
    Unit.HECTOPASCAL: (datatypes.pressure, "HPA"),
    Unit.MERCURY_INCH: (datatypes.pressure, "IN"),
}


class MetarType(_StrEnum):
    """Types of reports."""

    METAR = "METAR"
    METAR_COR = "METAR COR"
    SPECI = "SPECI"
    SPECI_COR = "SPECI COR"


class Tendency(_StrEnum):
    """RVR tendency over the past ten minutes."""

    UPWARD = "U"
    DOWNWARD = "D"
    NO_CHANGE = "N"


class CloudAmount(_StrEnum):
    """Cloud cover categories and clear sky sentinels."""

    FEW = "FEW"
    SCATTERED = "SCT"
    BROKEN = "BKN"
    OVERCAST = "OVC"
    VERTICAL_VISIBILITY = "VV"
    NO_SIGNIFICANT_CLOUDS = "NSC"
    NO_CLOUDS_DETECTED = "NCD"
    CLEAR = "CLR"
    SKY_CLEAR = "SKC"


class CloudType(_StrEnum):
    """Convective cloud modifier."""

    CUMULONIMBUS = "CB"
    TOWERING_CUMULUS = "TCU"
    CANNOT_MEASURE = "///"


class TrendType(_StrEnum):
    """Trend change indicator."""

    NO_SIGNIFICANT_CHANGES = "NOSIG"
    BECOMING = "BECMG"
    TEMPORARY = "TEMPO"


class Value(BaseModel):
    """A number with its unit."""

    model_config = ConfigDict(frozen=True)

    value: float
    units: Unit

    def to(self, units: Unit) -> float:
        """Convert this value into other units.

        Raises:
          UnitsError: when the two units do not measure the same thing.
        """
        cls, code = _DATATYPES[self.units]
        other_cls, other_code = _DATATYPES[units]
        if cls is not other_cls:
            raise UnitsError(f"Can not convert {self.units} to {units}")
        return round(float(cls(self.value, code).value(other_code)), 3)

    def __str__(self):
        """When we want the str repr."""
        return f"{self.value:g} {self.units}"


class SurfaceWind(BaseModel):
    """The surface wind group."""

    mean_direction: Optional[Value] = None
    variable_direction: bool = False
    mean_speed: Optional[Value] = None
    speed_variations: Optional[Value] = Field(
        default=None, description="The gust value."
    )
    direction_variations: Optional[Tuple[Value, Value]] = Field(
        default=None, description="(minimum, maximum) direction."
    )
    speed_unit: Optional[Unit] = None
    raw: Optional[str] = None

    @property
    def is_calm(self) -> bool:
        """No wind at all."""
        return (
            self.mean_speed is not None
            and self.mean_speed.value == 0
            and not self.variable_direction
            and (self.mean_direction is None or self.mean_direction.value == 0)
        )

    @property
    def cardinal_direction(self) -> Optional[str]:
        """Sixteen point compass text of the mean direction."""
        if self.mean_direction is None:
            return None
        return drct2text(self.mean_direction.value)

    def mean_speed_in(self, units: Unit) -> Optional[int]:
        """The mean speed truncated to an int in the given units."""
        if self.mean_speed is None:
            return None
        return int(self.mean_speed.to(units))

    def gust_in(self, units: Unit) -> Optional[int]:
        """The gust truncated to an int in the given units."""
        if self.speed_variations is None:
            return None
        return int(self.speed_variations.to(units))


class Visibility(BaseModel):
    """Prevailing and minimum visibility."""

    prevailing_visibility: Optional[Value] = None
    minimum_visibility: Optional[Value] = None
    minimum_visibility_direction: Optional[str] = None
    is_ndv: bool = False
    is_cavok: bool = False
    reported_in_kilometers: bool = Field(
        default=False,
        description="Metric prevailing visibility is above the cutoff.",
    )
    raw: Optional[str] = None

    @property
    def is_unlimited(self) -> bool:
        """Is this the 10km or 10SM (or more) value?"""
        vis = self.prevailing_visibility
        if self.is_cavok:
            return True
        if vis is None:
            return False
        if vis.units == Unit.METER:
            return vis.value >= UNLIMITED_VISIBILITY_METERS
        return vis.value >= UNLIMITED_VISIBILITY_STATUTE_MILES


class RunwayVisualRange(BaseModel):
    """A runway visual range reading."""

    runway: str = Field(..., min_length=2, max_length=3)
    visual_range: Optional[Value] = None
    visual_range_interval: Optional[Tuple[Value, Value]] = None
    variable: bool = False
    is_less_than: bool = Field(
        default=False, description="M prefix, below the lowest reportable."
    )
    is_greater_than: bool = Field(
        default=False, description="P prefix, above the highest reportable."
    )
    past_tendency: Optional[Tendency] = None
    raw: Optional[str] = None


class WeatherPhenomenon(BaseModel):
    """A present or recent weather group."""

    intensity_proximity: Optional[str] = None
    characteristics: Optional[str] = None
    types: List[str] = Field(default_factory=list, max_length=3)
    raw: Optional[str] = None

    def add_type(self, code: str):
        """Append a phenomenon type, at most three are allowed."""
        if len(self.types) >= 3:
            raise ValueError(f"Too many weather types, can not add {code}")
        self.types.append(code)


class CloudLayer(BaseModel):
    """A cloud layer or a clear sky sentinel."""

    amount: Optional[CloudAmount] = None
    base_height: Optional[Value] = None
    type: Optional[CloudType] = None
    raw: Optional[str] = None


class Pressure(BaseModel):
    """The altimeter setting or QNH."""

    unit_tag: str = Field(..., pattern="^[QA]$")
    reported_value: int = Field(..., ge=0, le=9999)
    value: Value
    raw: str


class TrendForecast(BaseModel):
    """A trend group found at the end of the METAR."""

    change_indicator: TrendType
    at_time: Optional[str] = None
    from_time: Optional[str] = None
    until_time: Optional[str] = None
    surface_wind: Optional[str] = None
    prevailing_visibility: Optional[str] = None
    weather_codes: Optional[str] = None
    clouds: Optional[str] = None
    raw: Optional[str] = None


def get_ceiling_layer(
    layers: Optional[Sequence[CloudLayer]],
    amounts: Sequence[str] = CEILING_AMOUNTS,
) -> Optional[CloudLayer]:
    """Find the lowest layer that forms a ceiling.

    Args:
      layers (list): cloud layers to consider.
      amounts (list): cloud amount codes that count toward a ceiling.

    Returns:
      CloudLayer or None
    """
    if not layers:
        return None
    candidates = [
        layer
        for layer in layers
        if layer.amount is not None
        and str(layer.amount) in amounts
        and layer.base_height is not None
        and layer.base_height.value > 0
    ]
    if not candidates:
        return None
    return min(candidates, key=lambda layer: layer.base_height.value)


class DecodedMetar(BaseModel):
    """The result of decoding a METAR.

    Any field left as ``None`` was not decoded and is unknown.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    raw_metar: str
    type: Optional[MetarType] = None
    icao: Optional[str] = Field(default=None, min_length=4, max_length=4)
    day: Optional[int] = Field(default=None, ge=1, le=31)
    hour: Optional[int] = Field(default=None, ge=0, le=23)
    minute: Optional[int] = Field(default=None, ge=0, le=59)
    time: Optional[str] = None
    status: Optional[str] = None
    surface_wind: Optional[SurfaceWind] = None
    visibility: Optional[Visibility] = None
    cavok: Optional[bool] = None
    runways_visual_range: Optional[List[RunwayVisualRange]] = None
    present_weather: Optional[List[WeatherPhenomenon]] = None
    clouds: Optional[List[CloudLayer]] = None
    ceiling: Optional[CloudLayer] = None
    air_temperature: Optional[Value] = None
    dew_point_temperature: Optional[Value] = None
    pressure: Optional[Pressure] = None
    recent_weather: Optional[WeatherPhenomenon] = None
    windshear_all_runways: Optional[bool] = None
    windshear_runways: Optional[List[str]] = None
    trend_forecast: Optional[TrendForecast] = None
    trend_forecast_future: Optional[TrendForecast] = None
    decoding_exceptions: List[MetarChunkDecoderException] = Field(
        default_factory=list, exclude=True
    )

    @property
    def is_valid(self) -> bool:
        """Did every chunk decode without complaint?"""
        return not self.decoding_exceptions

    @property
    def is_nil(self) -> bool:
        """Is this an explicit no data report?"""
        return self.status == "NIL"

    def add_decoding_exception(self, exp: MetarChunkDecoderException):
        """Record a chunk failure."""
        self.decoding_exceptions.append(exp)

    def reset_decoding_exceptions(self):
        """Forget about any chunk failures."""
        self.decoding_exceptions = []

    def get_decoding_errors(self) -> List[str]:
        """Return the messages of the recorded chunk failures."""
        return [exp.message for exp in self.decoding_exceptions]
