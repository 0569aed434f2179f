"""Davis Vantage Pro weather station integration with flexible units."""

__version__ = "0.1.0"

from .config import StationConfig, load_station_config
from .driver import AdvancedDriver, DriverOptions, SimpleDriver
from .errors import (
    ConfigLoadError,
    DriverError,
    DriverParseError,
    DriverProcessError,
    DriverTimeout,
    DriverUnavailableError,
    IncompatibleUnitsError,
    InvalidUnitError,
    UnitConfigError,
    UnitError,
    UnitStructureMismatchError,
    VantageWeatherError,
)
from .flexible import (
    FlexibleHighLowData,
    FlexibleRealtimeData,
    FlexibleWeatherData,
    apply_units,
)
from .units import (
    Category,
    Pressure,
    Rain,
    SoilMoisture,
    SolarRadiation,
    Temperature,
    UnitConfig,
    UnitPreset,
    Wind,
    category_of,
    convert,
)

__all__ = [
    "AdvancedDriver",
    "Category",
    "ConfigLoadError",
    "DriverError",
    "DriverOptions",
    "DriverParseError",
    "DriverProcessError",
    "DriverTimeout",
    "DriverUnavailableError",
    "FlexibleHighLowData",
    "FlexibleRealtimeData",
    "FlexibleWeatherData",
    "IncompatibleUnitsError",
    "InvalidUnitError",
    "Pressure",
    "Rain",
    "SimpleDriver",
    "SoilMoisture",
    "SolarRadiation",
    "StationConfig",
    "Temperature",
    "UnitConfig",
    "UnitConfigError",
    "UnitError",
    "UnitPreset",
    "UnitStructureMismatchError",
    "VantageWeatherError",
    "Wind",
    "__version__",
    "apply_units",
    "category_of",
    "convert",
    "load_station_config",
]
