"""Driver layer for the vproweather serial driver.

Components:
- process: runs the driver binary
- parsing: parses the driver's text output
- simple: flat reports with retry/backoff
- advanced: structured and unit-flexible reports
"""

from .advanced import (
    AdvancedDriver,
    restructure_highs_and_lows,
    restructure_realtime_data,
)
from .parsing import parse_driver_output, parse_model_name, parse_station_time
from .process import run_driver
from .simple import DriverOptions, SimpleDriver, fix_wind_chill

__all__ = [
    "AdvancedDriver",
    "DriverOptions",
    "SimpleDriver",
    "fix_wind_chill",
    "parse_driver_output",
    "parse_model_name",
    "parse_station_time",
    "restructure_highs_and_lows",
    "restructure_realtime_data",
    "run_driver",
]
