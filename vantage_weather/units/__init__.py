"""Unit catalog, conversion and unit configurations."""

from .catalog import (
    DEFAULT_UNITS,
    Category,
    Pressure,
    Rain,
    SoilMoisture,
    SolarRadiation,
    Temperature,
    Unit,
    Wind,
    category_of,
    parse_unit,
)
from .config import UnitConfig, UnitPreset
from .convert import convert

__all__ = [
    "DEFAULT_UNITS",
    "Category",
    "Pressure",
    "Rain",
    "SoilMoisture",
    "SolarRadiation",
    "Temperature",
    "Unit",
    "UnitConfig",
    "UnitPreset",
    "Wind",
    "category_of",
    "convert",
    "parse_unit",
]
