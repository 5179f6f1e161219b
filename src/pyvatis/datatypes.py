"""
  Classes Representing the physical quantities found within a METAR

Each class knows a handful of unit codes and converts through one base unit
(meters, meters per second, hectopascals, Celsius, degrees).
"""

import numpy as np

from pyvatis.exceptions import UnitsError


class basetype:
    """Base Object for all our vars"""

    # unit code -> number of base units within one of these units
    factors = {}

    def __init__(self, value, units):
        """constructor with value and units required"""
        if units.upper() not in self.known_units:
            raise UnitsError(
                f"unrecognized {self.__class__.__name__} unit: {units} "
                f"known: {self.known_units}"
            )
        self._units = units.upper()
        if isinstance(value, list):
            self._value = np.ma.array(
                [np.nan if v is None else v for v in value],
                mask=[v is None for v in value],
                dtype=float,
            )
        else:
            self._value = value

    @property
    def known_units(self):
        """The unit codes this datatype understands."""
        return list(self.factors)

    def get_units(self):
        """Returns the units for this current datatype

        Returns:
          (str): the unit of this datatype
        """
        return self._units

    def _check(self, units):
        """Upper case and validate the requested units."""
        units = self._units if units is None else units.upper()
        if units not in self.factors:
            raise UnitsError(
                f"unrecognized {self.__class__.__name__} unit: {units} "
                f"known: {self.known_units}"
            )
        return units

    def value(self, units=None):
        """Convert the value into the provided units"""
        units = self._check(units)
        if units == self._units:
            return self._value
        return self._value * self.factors[self._units] / self.factors[units]


class distance(basetype):
    """Distance, base unit is meters"""

    factors = {
        "M": 1.0,
        "KM": 1000.0,
        "FT": 0.3048,
        "SM": 1609.344,
    }


class speed(basetype):
    """Speed, base unit is meters per second"""

    factors = {
        "MPS": 1.0,
        "KT": 0.514444,
        "KMH": 1 / 3.6,
    }


class pressure(basetype):
    """Pressure, base unit is hectopascal"""

    factors = {
        "HPA": 1.0,
        "MB": 1.0,
        "IN": 33.86389,
    }


class direction(basetype):
    """Direction from North, base unit is degrees"""

    factors = {
        "DEG": 1.0,
        "RAD": 180.0 / np.pi,
    }


class temperature(basetype):
    """Temperature, which needs offsets and not just factors"""

    factors = {"C": None, "F": None, "K": None}

    def value(self, units=None):
        """Convert the value into the provided units"""
        units = self._check(units)
        if units == self._units:
            return self._value
        if self._units == "F":
            celsius = (self._value - 32.0) / 1.8
        elif self._units == "K":
            celsius = self._value - 273.15
        else:
            celsius = self._value
        if units == "K":
            return celsius + 273.15
        if units == "F":
            return celsius * 1.8 + 32.0
        return celsius
