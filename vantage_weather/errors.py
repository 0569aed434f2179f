"""Error types for Vantage weather station interactions and unit handling."""

from __future__ import annotations

from collections.abc import Sequence


class VantageWeatherError(Exception):
    """Base error for all vantage_weather failures."""


class UnitError(VantageWeatherError):
    """Base error for unit lookup and conversion failures."""


class InvalidUnitError(UnitError):
    """A symbol does not belong to any known unit category."""

    def __init__(self, unit: object) -> None:
        super().__init__(f"Invalid unit ({unit!r})")
        self.unit = unit


class IncompatibleUnitsError(UnitError):
    """No conversion exists between two units."""

    def __init__(self, current_unit: object, target_unit: object) -> None:
        super().__init__(f"Cannot convert from {current_unit} to {target_unit}")
        self.current_unit = current_unit
        self.target_unit = target_unit


class UnitStructureMismatchError(UnitError):
    """A unit structure does not fit the shape of its weather data."""

    def __init__(self, path: Sequence[str], detail: str) -> None:
        location = ".".join(path) or "<root>"
        super().__init__(
            f"Unit structure doesn't fit weather data at '{location}': {detail}"
        )
        self.path = tuple(path)


class UnitConfigError(VantageWeatherError):
    """A unit configuration is invalid."""


class ConfigLoadError(VantageWeatherError):
    """Error loading a configuration file."""


class DriverError(VantageWeatherError):
    """Base error for vproweather driver failures."""


class DriverUnavailableError(DriverError):
    """The driver executable could not be started."""


class DriverTimeout(DriverError):
    """Timeout while waiting for the driver to respond."""


class DriverProcessError(DriverError):
    """The driver exited with a non-zero status."""

    def __init__(self, returncode: int, message: str) -> None:
        super().__init__(message)
        self.returncode = returncode


class DriverParseError(DriverError):
    """The driver's output could not be parsed."""
