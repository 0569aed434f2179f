"""Unit configurations describing the units weather data is converted to.

A configuration holds at most one target unit per category. Categories
without a target unit are left untouched by conversion.

Usage:
    config = UnitConfig.from_preset("eu")
    config.load_from_object({"wind": Wind.MPH})
    flexible_data.apply_units(config)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Final

from ..errors import InvalidUnitError, UnitConfigError
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


class UnitPreset(Enum):
    """Named, complete unit configurations."""

    DEFAULT = "default"
    US = "us"
    EU = "eu"


_PRESETS: Final[dict[UnitPreset, dict[Category, Unit]]] = {
    UnitPreset.DEFAULT: dict(DEFAULT_UNITS),
    UnitPreset.EU: {
        Category.WIND: Wind.KMH,
        Category.RAIN: Rain.MM,
        Category.TEMPERATURE: Temperature.CELSIUS,
        Category.PRESSURE: Pressure.HPA,
        Category.SOLAR_RADIATION: SolarRadiation.WM2,
        Category.SOIL_MOISTURE: SoilMoisture.CB,
    },
    UnitPreset.US: {
        Category.WIND: Wind.MPH,
        Category.RAIN: Rain.IN,
        Category.TEMPERATURE: Temperature.FAHRENHEIT,
        Category.PRESSURE: Pressure.HPA,
        Category.SOLAR_RADIATION: SolarRadiation.WM2,
        Category.SOIL_MOISTURE: SoilMoisture.CB,
    },
}

# Dataclass field name for each category
_FIELD_BY_CATEGORY: Final[dict[Category, str]] = {
    Category.WIND: "wind",
    Category.RAIN: "rain",
    Category.TEMPERATURE: "temperature",
    Category.PRESSURE: "pressure",
    Category.SOLAR_RADIATION: "solar_radiation",
    Category.SOIL_MOISTURE: "soil_moisture",
}

_CATEGORY_BY_KEY: Final[dict[str, Category]] = {
    **{category.value: category for category in Category},
    **{name: category for category, name in _FIELD_BY_CATEGORY.items()},
}


def _parse_preset(preset: UnitPreset | str) -> UnitPreset:
    try:
        return UnitPreset(preset)
    except ValueError as err:
        raise UnitConfigError(f"Unknown unit preset: {preset!r}") from err


def _resolve_category(key: Category | str) -> Category:
    if isinstance(key, Category):
        return key
    category = _CATEGORY_BY_KEY.get(key)
    if category is None:
        raise UnitConfigError(f"Unknown unit category: {key!r}")
    return category


def _checked_unit(category: Category, unit: Unit | str) -> Unit:
    """Parse a unit and make sure it belongs to the given category."""
    try:
        parsed = parse_unit(unit)
    except InvalidUnitError as err:
        raise UnitConfigError(f"Invalid {category.value} unit: {unit!r}") from err
    if category_of(parsed) is not category:
        raise UnitConfigError(
            f"Unit {parsed.value} is not a {category.value} unit"
        )
    return parsed


@dataclass
class UnitConfig:
    """Target units for weather data conversion.

    Attributes:
        wind: Target unit for wind values.
        rain: Target unit for rain values.
        temperature: Target unit for temperature values.
        pressure: Target unit for pressure values.
        solar_radiation: Target unit for solar radiation values.
        soil_moisture: Target unit for soil moisture values.
    """

    wind: Wind | None = None
    rain: Rain | None = None
    temperature: Temperature | None = None
    pressure: Pressure | None = None
    solar_radiation: SolarRadiation | None = None
    soil_moisture: SoilMoisture | None = None

    def __post_init__(self) -> None:
        for category, name in _FIELD_BY_CATEGORY.items():
            unit = getattr(self, name)
            if unit is not None:
                setattr(self, name, _checked_unit(category, unit))

    @classmethod
    def from_preset(cls, preset: UnitPreset | str) -> UnitConfig:
        """Create a configuration holding a preset's units."""
        config = cls()
        config.load_from_preset(preset)
        return config

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> UnitConfig:
        """Create a configuration from a plain mapping.

        An optional ``preset`` key is applied first; all other keys are
        categories whose units override the preset's.

        Raises:
            UnitConfigError: On unknown presets, categories or units.
        """
        config = cls()
        overrides = dict(data)
        if preset := overrides.pop("preset", None):
            config.load_from_preset(preset)
        config.load_from_object(overrides)
        return config

    def load_from_preset(self, preset: UnitPreset | str) -> None:
        """Overwrite all categories with the preset's units."""
        for category, unit in _PRESETS[_parse_preset(preset)].items():
            setattr(self, _FIELD_BY_CATEGORY[category], unit)

    def load_from_object(self, partial: Mapping[Category | str, Unit | str | None]) -> None:
        """Merge units into this configuration.

        Only entries with a value overwrite the current unit; categories
        missing from ``partial`` are left as they are.

        Args:
            partial: Units keyed by ``Category``, category value
                (``"solarRadiation"``) or field name (``"solar_radiation"``).
        """
        for key, unit in partial.items():
            category = _resolve_category(key)
            if unit:
                setattr(self, _FIELD_BY_CATEGORY[category], _checked_unit(category, unit))

    def get(self, category: Category) -> Unit | None:
        """Return the target unit of a category, if configured."""
        return getattr(self, _FIELD_BY_CATEGORY[category])

    def to_dict(self) -> dict[str, str]:
        """Return configured units as ``{category value: symbol}``."""
        result: dict[str, str] = {}
        for category, name in _FIELD_BY_CATEGORY.items():
            unit = getattr(self, name)
            if unit is not None:
                result[category.value] = unit.value
        return result
