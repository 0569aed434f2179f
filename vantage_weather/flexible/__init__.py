"""Weather data that can be converted to any unit configuration."""

from .reports import (
    FlexibleHighLowData,
    FlexibleRealtimeData,
    highs_and_lows_unit_structure,
    realtime_unit_structure,
)
from .weather_data import (
    FlexibleWeatherData,
    Reading,
    ReadingTree,
    UnitStructure,
    apply_units,
)

__all__ = [
    "FlexibleHighLowData",
    "FlexibleRealtimeData",
    "FlexibleWeatherData",
    "Reading",
    "ReadingTree",
    "UnitStructure",
    "apply_units",
    "highs_and_lows_unit_structure",
    "realtime_unit_structure",
]
