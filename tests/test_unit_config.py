"""Tests for unit configurations and presets."""

from __future__ import annotations

import pytest

from vantage_weather.errors import UnitConfigError
from vantage_weather.units import (
    Category,
    Pressure,
    Rain,
    SoilMoisture,
    SolarRadiation,
    Temperature,
    UnitConfig,
    UnitPreset,
    Wind,
)


class TestPresets:
    """Tests for the named presets."""

    def test_default_preset(self) -> None:
        """The default preset holds the driver's units."""
        assert UnitConfig.from_preset("default").to_dict() == {
            "wind": "mph",
            "rain": "cups",
            "temperature": "°F",
            "pressure": "inHg",
            "solarRadiation": "W/m²",
            "soilMoisture": "cb",
        }

    def test_eu_preset(self) -> None:
        """The eu preset holds metric units."""
        config = UnitConfig.from_preset(UnitPreset.EU)
        assert config.wind is Wind.KMH
        assert config.rain is Rain.MM
        assert config.temperature is Temperature.CELSIUS
        assert config.pressure is Pressure.HPA
        assert config.solar_radiation is SolarRadiation.WM2
        assert config.soil_moisture is SoilMoisture.CB

    def test_us_preset_differs_from_default(self) -> None:
        """The us preset only differs from default in pressure and rain."""
        us = UnitConfig.from_preset("us").to_dict()
        default = UnitConfig.from_preset("default").to_dict()
        differing = {key for key in us if us[key] != default[key]}
        assert differing == {"pressure", "rain"}
        assert us["pressure"] == "hPa"
        assert us["rain"] == "in"

    def test_unknown_preset(self) -> None:
        """Unknown presets are rejected."""
        with pytest.raises(UnitConfigError, match="Unknown unit preset"):
            UnitConfig.from_preset("uk")

    def test_load_from_preset_replaces_all(self) -> None:
        """Loading a preset overwrites every category."""
        config = UnitConfig(wind=Wind.KT, pressure=Pressure.BAR)
        config.load_from_preset("us")
        assert config.wind is Wind.MPH
        assert config.pressure is Pressure.HPA
        assert len(config.to_dict()) == 6


class TestUnitConfig:
    """Tests for explicit configurations and merging."""

    def test_empty_config(self) -> None:
        """A new configuration has no target units."""
        config = UnitConfig()
        assert config.to_dict() == {}
        for category in Category:
            assert config.get(category) is None

    def test_explicit_fields(self) -> None:
        """Explicit fields accept members and raw symbols."""
        config = UnitConfig(wind="km/h", temperature=Temperature.CELSIUS)
        assert config.wind is Wind.KMH
        assert config.get(Category.TEMPERATURE) is Temperature.CELSIUS
        assert config.get(Category.RAIN) is None

    def test_field_with_wrong_category(self) -> None:
        """A unit of another category is rejected."""
        with pytest.raises(UnitConfigError, match="not a wind unit"):
            UnitConfig(wind="°C")

    def test_field_with_unknown_unit(self) -> None:
        """Unknown symbols are rejected."""
        with pytest.raises(UnitConfigError, match="Invalid rain unit"):
            UnitConfig(rain="buckets")

    def test_preset_then_merge(self) -> None:
        """Merging after a preset only overrides the given category."""
        config = UnitConfig.from_preset("eu")
        config.load_from_object({"wind": "mph"})
        assert config.to_dict() == {
            "wind": "mph",
            "rain": "mm",
            "temperature": "°C",
            "pressure": "hPa",
            "solarRadiation": "W/m²",
            "soilMoisture": "cb",
        }

    def test_merge_skips_empty_values(self) -> None:
        """Empty entries leave the current unit in place."""
        config = UnitConfig.from_preset("eu")
        config.load_from_object({"wind": None, "rain": ""})
        assert config.wind is Wind.KMH
        assert config.rain is Rain.MM

    def test_merge_key_styles(self) -> None:
        """Categories, category values and field names are all accepted."""
        config = UnitConfig()
        config.load_from_object(
            {
                Category.PRESSURE: Pressure.BAR,
                "solarRadiation": "W/m²",
                "soil_moisture": SoilMoisture.CB,
            }
        )
        assert config.pressure is Pressure.BAR
        assert config.solar_radiation is SolarRadiation.WM2
        assert config.soil_moisture is SoilMoisture.CB

    def test_merge_unknown_key(self) -> None:
        """Unknown categories are rejected."""
        with pytest.raises(UnitConfigError, match="Unknown unit category"):
            UnitConfig().load_from_object({"humidity": "%"})

    def test_from_mapping(self) -> None:
        """A preset key is applied before the explicit units."""
        config = UnitConfig.from_mapping({"temperature": "°F", "preset": "eu"})
        assert config.temperature is Temperature.FAHRENHEIT
        assert config.wind is Wind.KMH

    def test_from_mapping_without_preset(self) -> None:
        """Without a preset only the given categories are configured."""
        config = UnitConfig.from_mapping({"rain": "in"})
        assert config.to_dict() == {"rain": "in"}
