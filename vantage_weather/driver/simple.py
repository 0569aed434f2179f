"""Flat interface to a serially connected Davis Vantage Pro console.

Talks to the console through the vproweather driver, which must be installed
and on the PATH (or configured via ``DriverOptions.executable``).

Usage:
    driver = SimpleDriver(DriverOptions(device_url="/dev/ttyUSB0"))
    realtime = await driver.get_realtime_data()
    print(realtime["rtOutsideTemp"])
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, TypeVar

from ..errors import DriverError
from .parsing import (
    DriverValue,
    parse_driver_output,
    parse_model_name,
    parse_station_time,
)
from .process import run_driver

_LOGGER = logging.getLogger(__name__)

SAMPLES_DIR = Path(__file__).parent / "samples"

_T = TypeVar("_T")


@dataclass
class DriverOptions:
    """Options of the vproweather driver.

    Attributes:
        device_url: Serial device the console is connected to.
        executable: Driver executable name or path.
        delay: Wake-up delay passed to the driver (``--delay``).
        max_tries: Attempts per command before giving up.
        timeout: Seconds to wait for a single driver run.
        retry_base_delay: Base retry delay (seconds).
        retry_max_delay: Maximum retry delay (seconds).
        use_samples: Read canned sample output instead of running the driver.
    """

    device_url: str = "/dev/ttyUSB0"
    executable: str = "vproweather"
    delay: int = 10
    max_tries: int = 20
    timeout: float = 30.0
    retry_base_delay: float = 0.5
    retry_max_delay: float = 10.0
    use_samples: bool = False


class SimpleDriver:
    """Flat driver interface returning the driver's own keys.

    Every command is retried with exponential backoff, as the console often
    fails to wake up on the first attempt.
    """

    def __init__(self, options: DriverOptions | None = None) -> None:
        self.options = options or DriverOptions()

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    async def get_highs_and_lows(self) -> dict[str, DriverValue]:
        """Get the day, month and year highs and lows."""
        data = await self._read("-l", parse_driver_output, sample="highs_and_lows.txt")
        data["time"] = datetime.now()
        return data

    async def get_realtime_data(self) -> dict[str, DriverValue]:
        """Get the currently measured weather data."""
        data = await self._read("-x", parse_driver_output, sample="realtime.txt")
        data["time"] = datetime.now()
        fix_wind_chill(data)
        return data

    async def get_time(self) -> datetime:
        """Get the console's time."""
        return await self._read("--get-time", parse_station_time, sample="time.txt")

    async def synchronize_time(self) -> None:
        """Set the console's time to the system time."""
        if self.options.use_samples:
            return
        await self._run([f"--delay={self.options.delay}", "--set-time"], str)

    async def set_background_light(self, enabled: bool) -> None:
        """Turn the console's backlight on or off."""
        if self.options.use_samples:
            return
        await self._run([f"--bklite-{'on' if enabled else 'off'}"], str)

    async def get_model_name(self) -> str:
        """Get the console's model name."""
        return await self._read("--model", parse_model_name, sample="model.txt")

    # -------------------------------------------------------------------------
    # Internal
    # -------------------------------------------------------------------------

    async def _read(
        self, flag: str, parse: Callable[[str], _T], *, sample: str
    ) -> _T:
        if self.options.use_samples:
            return parse((SAMPLES_DIR / sample).read_text(encoding="utf-8"))
        return await self._run([f"--delay={self.options.delay}", flag], parse)

    async def _run(self, args: list[str], parse: Callable[[str], _T]) -> _T:
        """Run the driver and parse its output, retrying both together."""
        options = self.options

        async def command() -> _T:
            output = await run_driver(
                options.executable,
                [*args, options.device_url],
                timeout=options.timeout,
            )
            return parse(output)

        return await self._with_retries(command, args[-1])

    async def _with_retries(
        self, command: Callable[[], Awaitable[_T]], name: str
    ) -> _T:
        """Run a driver command, retrying with exponential backoff."""
        options = self.options
        attempt = 0
        while True:
            try:
                result = await command()
            except DriverError as err:
                attempt += 1
                if attempt >= options.max_tries:
                    _LOGGER.error(
                        "[%s] %s failed after %d attempts: %s",
                        options.device_url,
                        name,
                        attempt,
                        err,
                    )
                    raise
                delay = min(
                    options.retry_base_delay * (2 ** (attempt - 1)),
                    options.retry_max_delay,
                )
                _LOGGER.warning(
                    "[%s] %s failed (attempt %d/%d), retrying in %.1fs: %s",
                    options.device_url,
                    name,
                    attempt,
                    options.max_tries,
                    delay,
                    err,
                )
                await asyncio.sleep(delay)
            else:
                _LOGGER.debug("[%s] %s succeeded", options.device_url, name)
                return result


def fix_wind_chill(data: dict[str, Any]) -> None:
    """Repair the driver's missing or negative wind chill value.

    The driver reports bogus negative wind chills, so the value is computed
    from outside temperature (°F) and 10 minute gust speed (mph) instead.
    Only works if both are present and non-zero.
    """
    temperature = data.get("rtOutsideTemp")
    gust = data.get("rtWind10mGustMaxSpeed")
    if not temperature or not gust:
        return
    chill = data.get("rtWindChill")
    if chill and chill >= 0:
        return
    chill = 35.74 + 0.6215 * temperature + (0.4275 * temperature - 35.75) * gust**0.16
    data["rtWindChill"] = min(chill, temperature)
