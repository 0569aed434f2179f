"""Measurement categories and their unit symbols.

Every unit is a string-valued enum member, so ``Temperature.CELSIUS == "°C"``
holds and raw symbols coming from callers or configuration files can be
compared directly. Raw strings are turned into members with ``parse_unit``.
"""

from __future__ import annotations

from enum import Enum
from typing import Final

from ..errors import InvalidUnitError


class Wind(str, Enum):
    """Wind speed units."""

    MPH = "mph"
    KMH = "km/h"
    MS = "m/s"
    KT = "kt"


class Temperature(str, Enum):
    """Temperature units."""

    FAHRENHEIT = "°F"
    CELSIUS = "°C"


class Pressure(str, Enum):
    """Barometric pressure units."""

    INHG = "inHg"
    HPA = "hPa"
    BAR = "bar"


class Rain(str, Enum):
    """Rain amount and rate units.

    The console counts rain in tipping bucket clicks ("cups") of 0.2 mm.
    """

    CUPS = "cups"
    MM = "mm"
    IN = "in"


class SolarRadiation(str, Enum):
    """Solar radiation units."""

    WM2 = "W/m²"


class SoilMoisture(str, Enum):
    """Soil moisture units."""

    CB = "cb"


Unit = Wind | Temperature | Pressure | Rain | SolarRadiation | SoilMoisture


class Category(Enum):
    """Measurement category a unit belongs to.

    Values match the keys used by unit configurations.
    """

    PRESSURE = "pressure"
    RAIN = "rain"
    SOIL_MOISTURE = "soilMoisture"
    SOLAR_RADIATION = "solarRadiation"
    TEMPERATURE = "temperature"
    WIND = "wind"

    @property
    def units(self) -> tuple[Unit, ...]:
        """All units of this category."""
        return tuple(_UNIT_TYPES[self])

    @property
    def default_unit(self) -> Unit:
        """Unit the vproweather driver reports values of this category in."""
        return DEFAULT_UNITS[self]


_UNIT_TYPES: Final[dict[Category, type[Enum]]] = {
    Category.PRESSURE: Pressure,
    Category.RAIN: Rain,
    Category.SOIL_MOISTURE: SoilMoisture,
    Category.SOLAR_RADIATION: SolarRadiation,
    Category.TEMPERATURE: Temperature,
    Category.WIND: Wind,
}

DEFAULT_UNITS: Final[dict[Category, Unit]] = {
    Category.PRESSURE: Pressure.INHG,
    Category.RAIN: Rain.CUPS,
    Category.SOIL_MOISTURE: SoilMoisture.CB,
    Category.SOLAR_RADIATION: SolarRadiation.WM2,
    Category.TEMPERATURE: Temperature.FAHRENHEIT,
    Category.WIND: Wind.MPH,
}

# Symbol -> (member, category); members hash like their symbol strings
_UNITS_BY_SYMBOL: Final[dict[str, tuple[Unit, Category]]] = {
    member.value: (member, category)
    for category, unit_type in _UNIT_TYPES.items()
    for member in unit_type
}


def parse_unit(symbol: Unit | str) -> Unit:
    """Return the unit member for a symbol.

    Matching is exact and case-sensitive.

    Raises:
        InvalidUnitError: If the symbol is not a known unit.
    """
    if not isinstance(symbol, str) or symbol not in _UNITS_BY_SYMBOL:
        raise InvalidUnitError(symbol)
    return _UNITS_BY_SYMBOL[symbol][0]


def category_of(unit: Unit | str) -> Category:
    """Return the category a unit belongs to.

    Raises:
        InvalidUnitError: If the unit is not a known unit.
    """
    if not isinstance(unit, str) or unit not in _UNITS_BY_SYMBOL:
        raise InvalidUnitError(unit)
    return _UNITS_BY_SYMBOL[unit][1]
