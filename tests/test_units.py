"""Tests for the unit catalog and unit conversion."""

from __future__ import annotations

from itertools import permutations

import pytest

from vantage_weather.errors import IncompatibleUnitsError, InvalidUnitError
from vantage_weather.units import (
    DEFAULT_UNITS,
    Category,
    Pressure,
    Rain,
    SoilMoisture,
    SolarRadiation,
    Temperature,
    Wind,
    category_of,
    convert,
    parse_unit,
)

ALL_UNITS = [unit for category in Category for unit in category.units]
SAME_CATEGORY_PAIRS = [
    pair for category in Category for pair in permutations(category.units, 2)
]
CROSS_CATEGORY_PAIRS = [
    (Wind.MPH, Temperature.CELSIUS),
    (Temperature.FAHRENHEIT, Pressure.HPA),
    (Pressure.BAR, Rain.MM),
    (Rain.CUPS, SolarRadiation.WM2),
    (SolarRadiation.WM2, SoilMoisture.CB),
    (SoilMoisture.CB, Wind.KT),
]


class TestUnitCatalog:
    """Tests for unit symbols and categories."""

    def test_symbols(self) -> None:
        """Unit members compare equal to their symbols."""
        assert Wind.KMH == "km/h"
        assert Wind.MS == "m/s"
        assert Temperature.CELSIUS == "°C"
        assert Pressure.INHG == "inHg"
        assert Rain.CUPS == "cups"
        assert SolarRadiation.WM2 == "W/m²"
        assert SoilMoisture.CB == "cb"

    def test_category_values(self) -> None:
        """Category values match unit configuration keys."""
        assert Category.SOLAR_RADIATION.value == "solarRadiation"
        assert Category.SOIL_MOISTURE.value == "soilMoisture"

    def test_defaults(self) -> None:
        """Each category has the driver's unit as default."""
        assert Category.WIND.default_unit is Wind.MPH
        assert Category.TEMPERATURE.default_unit is Temperature.FAHRENHEIT
        assert Category.PRESSURE.default_unit is Pressure.INHG
        assert Category.RAIN.default_unit is Rain.CUPS
        assert Category.SOLAR_RADIATION.default_unit is SolarRadiation.WM2
        assert Category.SOIL_MOISTURE.default_unit is SoilMoisture.CB
        assert set(DEFAULT_UNITS) == set(Category)

    def test_category_units(self) -> None:
        """Categories enumerate their units."""
        assert Category.WIND.units == (Wind.MPH, Wind.KMH, Wind.MS, Wind.KT)
        assert Category.SOIL_MOISTURE.units == (SoilMoisture.CB,)

    @pytest.mark.parametrize("unit", ALL_UNITS)
    def test_category_of_all_units(self, unit) -> None:
        """category_of is total over the known units, for members and strings."""
        assert unit in category_of(unit).units
        assert category_of(unit.value) is category_of(unit)

    def test_category_of_strings(self) -> None:
        """Raw symbols resolve to their category."""
        assert category_of("°C") is Category.TEMPERATURE
        assert category_of("kt") is Category.WIND
        assert category_of("bar") is Category.PRESSURE
        assert category_of("in") is Category.RAIN

    @pytest.mark.parametrize("symbol", ["kmh", "MPH", "°c", "C", "", " mph", "W/m2"])
    def test_category_of_unknown_symbol(self, symbol: str) -> None:
        """Unknown or differently cased symbols are rejected."""
        with pytest.raises(InvalidUnitError, match="Invalid unit"):
            category_of(symbol)

    @pytest.mark.parametrize("value", [None, 12, ("mph",)])
    def test_category_of_non_string(self, value) -> None:
        """Non-string values are rejected."""
        with pytest.raises(InvalidUnitError):
            category_of(value)

    def test_parse_unit(self) -> None:
        """parse_unit returns enum members."""
        assert parse_unit("km/h") is Wind.KMH
        assert parse_unit(Rain.MM) is Rain.MM
        with pytest.raises(InvalidUnitError) as exc_info:
            parse_unit("furlongs")
        assert exc_info.value.unit == "furlongs"


class TestConvert:
    """Tests for convert()."""

    def test_fahrenheit_to_celsius(self) -> None:
        """0°F is -17.78°C."""
        assert convert(0, "°F", "°C") == pytest.approx(-17.7777777778)

    def test_celsius_to_fahrenheit(self) -> None:
        """100°C is exactly 212°F."""
        assert convert(100, "°C", "°F") == 212

    def test_kmh_to_knots(self) -> None:
        """Knots use the 0.53996 factor."""
        assert convert(1, "km/h", "kt") == pytest.approx(0.53996)
        assert convert(1, "kt", "km/h") == pytest.approx(1.852, rel=1e-4)

    def test_pressure(self) -> None:
        """Pressure conversions use the inHg and bar factors."""
        assert convert(1, Pressure.INHG, Pressure.HPA) == pytest.approx(33.86389)
        assert convert(1013.25, Pressure.HPA, Pressure.BAR) == pytest.approx(1.01325)
        assert convert(1, Pressure.INHG, Pressure.BAR) == pytest.approx(0.03386389)

    def test_rain(self) -> None:
        """Rain clicks are 0.2 mm."""
        assert convert(5, Rain.CUPS, Rain.MM) == pytest.approx(1.0)
        assert convert(127, Rain.CUPS, Rain.IN) == pytest.approx(1.0)
        assert convert(25.4, Rain.MM, Rain.IN) == pytest.approx(1.0)

    def test_wind_direct_matches_pivot(self) -> None:
        """Direct wind factors agree with conversions through km/h."""
        for source, target in [
            (Wind.KT, Wind.MPH),
            (Wind.KT, Wind.MS),
            (Wind.MPH, Wind.MS),
        ]:
            direct = convert(10, source, target)
            pivot = convert(convert(10, source, Wind.KMH), Wind.KMH, target)
            assert direct == pytest.approx(pivot, rel=1e-4)

    @pytest.mark.parametrize("unit", ALL_UNITS)
    def test_identity(self, unit) -> None:
        """Converting to the same unit returns the value unchanged."""
        value = 12.345
        assert convert(value, unit, unit) is value

    @pytest.mark.parametrize(("source", "target"), SAME_CATEGORY_PAIRS)
    def test_round_trip(self, source, target) -> None:
        """Converting there and back returns the original value."""
        assert convert(convert(42.5, source, target), target, source) == pytest.approx(42.5)

    @pytest.mark.parametrize(("source", "target"), CROSS_CATEGORY_PAIRS)
    def test_cross_category_fails(self, source, target) -> None:
        """Units of different categories cannot be converted."""
        with pytest.raises(IncompatibleUnitsError):
            convert(1, source, target)

    def test_error_names_both_units(self) -> None:
        """Conversion errors name both units."""
        with pytest.raises(IncompatibleUnitsError, match="from mph to °C") as exc_info:
            convert(1, Wind.MPH, Temperature.CELSIUS)
        assert exc_info.value.current_unit == "mph"
        assert exc_info.value.target_unit == "°C"

    def test_invalid_unit_fails(self) -> None:
        """Unknown units are rejected before converting."""
        with pytest.raises(InvalidUnitError):
            convert(1, "mph", "furlongs/fortnight")
