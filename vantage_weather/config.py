"""Station configuration loading.

Configuration files are YAML documents with an optional ``driver`` section
(``DriverOptions`` fields) and an optional ``units`` section (a unit preset
and/or per-category units)::

    driver:
      device_url: /dev/ttyUSB0
      delay: 10
    units:
      preset: eu
      wind: mph
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from .driver.simple import DriverOptions
from .errors import ConfigLoadError
from .units.config import UnitConfig

_LOGGER = logging.getLogger(__name__)


@dataclass
class StationConfig:
    """A fully loaded station configuration.

    Attributes:
        driver: Options of the vproweather driver.
        units: Target units for weather data.
    """

    driver: DriverOptions = field(default_factory=DriverOptions)
    units: UnitConfig = field(default_factory=UnitConfig)


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML mapping with error handling."""
    if not path.exists():
        raise ConfigLoadError(f"File not found: {path}")
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as err:
        raise ConfigLoadError(f"Invalid YAML in {path}") from err
    if not isinstance(data, dict):
        raise ConfigLoadError(f"Expected a mapping in {path}")
    return data


def _section(data: dict[str, Any], name: str, path: Path) -> dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigLoadError(f"Section '{name}' in {path} must be a mapping")
    return section


def parse_driver_options(data: dict[str, Any]) -> DriverOptions:
    """Build driver options from a mapping of option names.

    Raises:
        ConfigLoadError: On unknown option names.
    """
    known = {f.name for f in fields(DriverOptions)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigLoadError(f"Unknown driver options: {', '.join(unknown)}")
    return DriverOptions(**data)


def load_driver_options(path: Path) -> DriverOptions:
    """Load driver options from the ``driver`` section of a config file."""
    return parse_driver_options(_section(_load_yaml(path), "driver", path))


def load_unit_config(path: Path) -> UnitConfig:
    """Load a unit configuration from the ``units`` section of a config file.

    Raises:
        ConfigLoadError: If the file cannot be read.
        UnitConfigError: On unknown presets, categories or units.
    """
    return UnitConfig.from_mapping(_section(_load_yaml(path), "units", path))


def load_station_config(path: Path) -> StationConfig:
    """Load a complete station configuration.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Driver options and unit configuration; missing sections use defaults.
    """
    data = _load_yaml(path)
    config = StationConfig(
        driver=parse_driver_options(_section(data, "driver", path)),
        units=UnitConfig.from_mapping(_section(data, "units", path)),
    )
    _LOGGER.debug(
        "Loaded station config from %s: device %s, units %s",
        path,
        config.driver.device_url,
        config.units.to_dict(),
    )
    return config
