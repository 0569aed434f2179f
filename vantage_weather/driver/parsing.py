"""Parsers for the vproweather driver's text output.

The driver prints one ``key = value`` pair per line, e.g.::

    rtBaroCurr = 30.01
    rtIsRaining = no
    rtSunrise = 06:12
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Final

from ..errors import DriverParseError

DriverValue = str | int | float | bool | datetime | None

_INT_RE: Final = re.compile(r"^-?\d+$")
_FLOAT_RE: Final = re.compile(r"^-?\d+\.\d+$")
_DATE_RE: Final = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_CLOCK_RE: Final = re.compile(r"^\d{2}:\d{2}$")

_STATION_TIME_FORMAT: Final = "%A, %B %d, %Y %I:%M %p"


def _strptime(text: str, fmt: str) -> datetime:
    try:
        return datetime.strptime(text, fmt)
    except ValueError as err:
        raise DriverParseError(f"Invalid date or time value: {text!r}") from err


def parse_value(text: str, *, now: datetime | None = None) -> DriverValue:
    """Parse a single driver value.

    ``HH:MM`` clock values are placed on the day of ``now`` (default: today).

    Raises:
        DriverParseError: If a date or clock value is out of range.
    """
    if _INT_RE.match(text):
        return int(text)
    if _FLOAT_RE.match(text):
        return float(text)
    if text == "n/a":
        return None
    if text == "no":
        return False
    if text == "yes":
        return True
    if _DATE_RE.match(text):
        return _strptime(text, "%Y-%m-%d")
    if _CLOCK_RE.match(text):
        clock = _strptime(text, "%H:%M")
        day = now or datetime.now()
        return day.replace(
            hour=clock.hour, minute=clock.minute, second=0, microsecond=0
        )
    return text


def parse_driver_output(text: str, *, now: datetime | None = None) -> dict[str, DriverValue]:
    """Parse the driver's ``key = value`` lines into a flat dict.

    Lines without ``=`` are skipped.
    """
    result: dict[str, DriverValue] = {}
    for line in text.splitlines():
        key, sep, value = line.partition("=")
        if not sep:
            continue
        result[key.strip()] = parse_value(value.strip(), now=now)
    return result


def parse_station_time(text: str) -> datetime:
    """Parse ``DavisTime = Saturday, June 05, 2021  01:37 PM``.

    Raises:
        DriverParseError: If the output holds no valid time.
    """
    _, sep, value = text.partition("=")
    if not sep:
        raise DriverParseError(f"Unexpected time output: {text.strip()!r}")
    try:
        return datetime.strptime(" ".join(value.split()), _STATION_TIME_FORMAT)
    except ValueError as err:
        raise DriverParseError(f"Unexpected time output: {text.strip()!r}") from err


def parse_model_name(text: str) -> str:
    """Parse ``Model: Davis Vantage Pro``.

    Raises:
        DriverParseError: If the output holds no model name.
    """
    _, sep, value = text.partition(":")
    model = value.strip()
    if not sep or not model:
        raise DriverParseError(f"Unexpected model output: {text.strip()!r}")
    return model
