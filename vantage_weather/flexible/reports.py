"""Unit structures of the two structured vproweather reports.

All values are in the units the console reports them in (mph, °F, inHg,
rain clicks and W/m²). The layouts match ``restructure_realtime_data`` and
``restructure_highs_and_lows`` in ``vantage_weather.driver.advanced``.
"""

from __future__ import annotations

from ..units.catalog import Pressure, Rain, SolarRadiation, Temperature, Wind
from .weather_data import FlexibleWeatherData, ReadingTree, UnitStructure


def realtime_unit_structure() -> UnitStructure:
    """Return a fresh unit structure for structured realtime data."""
    return {
        "pressure": {
            "current": Pressure.INHG,
        },
        "wind": {
            "speed": {
                "current": Wind.MPH,
                "avg": {
                    "short": Wind.MPH,
                    "long": Wind.MPH,
                },
            },
            "gust": {
                "speed": Wind.MPH,
            },
            "chill": Temperature.FAHRENHEIT,
        },
        "heat_index": Temperature.FAHRENHEIT,
        "thsw_index": Temperature.FAHRENHEIT,
        "temperature": {
            "outside": Temperature.FAHRENHEIT,
            "inside": Temperature.FAHRENHEIT,
        },
        "rain": {
            "rate": Rain.CUPS,
            "quarter": Rain.CUPS,
            "hour": Rain.CUPS,
            "day": Rain.CUPS,
            "month": Rain.CUPS,
            "year": Rain.CUPS,
        },
        "storm": {
            "rain": Rain.CUPS,
        },
        "sun": {
            "solar_radiation": SolarRadiation.WM2,
        },
    }


def _day_low_high(unit: Pressure | Temperature) -> UnitStructure:
    """Day, month and year lows and highs; the day entries carry a time."""
    return {
        "day": {
            "low": {"value": unit},
            "high": {"value": unit},
        },
        "month": {"low": unit, "high": unit},
        "year": {"low": unit, "high": unit},
    }


def _day_extreme(unit: Wind | Temperature | SolarRadiation | Rain) -> UnitStructure:
    """Single day, month and year extreme; the day entry carries a time."""
    return {
        "day": {"value": unit},
        "month": unit,
        "year": unit,
    }


def highs_and_lows_unit_structure() -> UnitStructure:
    """Return a fresh unit structure for structured highs and lows data."""
    return {
        "pressure": _day_low_high(Pressure.INHG),
        "wind": _day_extreme(Wind.MPH),
        "wind_chill": _day_extreme(Temperature.FAHRENHEIT),
        "dewpoint": _day_low_high(Temperature.FAHRENHEIT),
        "heat_index": _day_extreme(Temperature.FAHRENHEIT),
        "solar_radiation": _day_extreme(SolarRadiation.WM2),
        "rain_rate": _day_extreme(Rain.CUPS),
        "temperature": {
            "inside": _day_low_high(Temperature.FAHRENHEIT),
            "outside": _day_low_high(Temperature.FAHRENHEIT),
        },
    }


class FlexibleRealtimeData(FlexibleWeatherData):
    """Structured realtime data that can be converted to other units."""

    def __init__(self, data: ReadingTree) -> None:
        super().__init__(data, realtime_unit_structure())


class FlexibleHighLowData(FlexibleWeatherData):
    """Structured highs and lows data that can be converted to other units."""

    def __init__(self, data: ReadingTree) -> None:
        super().__init__(data, highs_and_lows_unit_structure())
