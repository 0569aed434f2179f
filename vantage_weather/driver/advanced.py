"""Structured and unit-flexible reports on top of the simple driver.

The advanced driver holds a ``SimpleDriver`` and regroups its flat
``rt*``/``hl*`` keys into nested reports that pair with the unit structures
in ``vantage_weather.flexible.reports``.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from ..flexible.reports import FlexibleHighLowData, FlexibleRealtimeData
from .simple import DriverOptions, SimpleDriver


def restructure_realtime_data(data: Mapping[str, Any]) -> dict[str, Any]:
    """Regroup flat realtime data into a nested report.

    Missing keys become None.
    """
    get = data.get
    return {
        "time": get("time"),
        "next_archive_record": get("rtNextArchiveRecord"),
        "pressure": {
            "current": get("rtBaroCurr"),
            "trend": get("rtBaroTrend"),
            "image": get("rtBaroTrendImg"),
        },
        "wind": {
            "speed": {
                "current": get("rtWindSpeed"),
                "avg": {
                    "short": get("rtWindAvgSpeed"),
                    "long": get("rtWind2mAvgSpeed"),
                },
            },
            "direction": {
                "degrees": get("rtWindDir"),
                "rose": get("rtWindDirRose"),
            },
            "gust": {
                "speed": get("rtWind10mGustMaxSpeed"),
                "direction": {
                    "degrees": get("rtWind10mGustMaxDir"),
                    "rose": get("rtWind10mGustMaxDirRose"),
                },
            },
            "chill": get("rtWindChill"),
        },
        "humidity": {
            "outside": get("rtOutsideHum"),
            "inside": get("rtInsideHum"),
        },
        "temperature": {
            "outside": get("rtOutsideTemp"),
            "inside": get("rtInsideTemp"),
        },
        "rain": {
            "rate": get("rtRainRate"),
            "is_raining": get("rtIsRaining"),
            "quarter": get("rt15mRain"),
            "hour": get("rtHourRain"),
            "day": get("rtDayRain"),
            "month": get("rtMonthRain"),
            "year": get("rtYearRain"),
        },
        "storm": {
            "rain": get("rtRainStorm"),
            "start_date": get("rtStormStartDate"),
        },
        "sun": {
            "rise": get("rtSunrise"),
            "set": get("rtSunset"),
            "uv_level": get("rtUVLevel"),
            "solar_radiation": get("rtSolarRad"),
            "et": {
                "day": get("rtDayET"),
                "month": get("rtMonthET"),
            },
        },
        "forecast": {
            "text": get("rtForecast"),
            "icon": get("rtForeIcon"),
            "rule": get("rtForeRule"),
        },
        "batteries": {
            "console_voltage_level": get("rtBattVoltage"),
            "transmitter_voltage_level": get("rtXmitBattt"),
        },
        "heat_index": get("rtHeatIndex"),
        "thsw_index": get("rtThswIndex"),
    }


def _day_low_high(data: Mapping[str, Any], prefix: str) -> dict[str, Any]:
    """Lows and highs of ``hl<prefix>{Lo,Hi}{Day,Time,Month,Year}`` keys."""
    get = data.get
    return {
        "day": {
            "low": {
                "value": get(f"hl{prefix}LoDay"),
                "time": get(f"hl{prefix}LoTime"),
            },
            "high": {
                "value": get(f"hl{prefix}HiDay"),
                "time": get(f"hl{prefix}HiTime"),
            },
        },
        "month": {
            "low": get(f"hl{prefix}LoMonth"),
            "high": get(f"hl{prefix}HiMonth"),
        },
        "year": {
            "low": get(f"hl{prefix}LoYear"),
            "high": get(f"hl{prefix}HiYear"),
        },
    }


def _day_extreme(data: Mapping[str, Any], prefix: str) -> dict[str, Any]:
    """Extremes of ``hl<prefix>{Day,Time,Month,Year}`` keys."""
    get = data.get
    return {
        "day": {
            "value": get(f"hl{prefix}Day"),
            "time": get(f"hl{prefix}Time"),
        },
        "month": get(f"hl{prefix}Month"),
        "year": get(f"hl{prefix}Year"),
    }


def restructure_highs_and_lows(data: Mapping[str, Any]) -> dict[str, Any]:
    """Regroup flat highs and lows data into a nested report.

    Missing keys become None.
    """
    return {
        "time": data.get("time"),
        "pressure": _day_low_high(data, "Baro"),
        "wind": _day_extreme(data, "WindHi"),
        "wind_chill": _day_extreme(data, "ChillLo"),
        "dewpoint": _day_low_high(data, "Dew"),
        "heat_index": _day_extreme(data, "HeatHi"),
        "solar_radiation": _day_extreme(data, "SolarHi"),
        "uv_level": _day_extreme(data, "UVHi"),
        "rain_rate": _day_extreme(data, "RainRateHi"),
        "temperature": {
            "inside": _day_low_high(data, "InTemp"),
            "outside": _day_low_high(data, "OutTemp"),
        },
        "humidity": {
            "inside": _day_low_high(data, "InHum"),
        },
    }


class AdvancedDriver:
    """Driver returning structured and unit-flexible reports.

    Usage:
        driver = AdvancedDriver(options=DriverOptions(use_samples=True))
        realtime = await driver.get_flexible_realtime_data()
        realtime.apply_units(UnitConfig.from_preset("eu"))
    """

    def __init__(
        self,
        driver: SimpleDriver | None = None,
        *,
        options: DriverOptions | None = None,
    ) -> None:
        self.driver = driver or SimpleDriver(options)

    async def get_structured_realtime_data(self) -> dict[str, Any]:
        """Get the currently measured weather data as a nested report."""
        return restructure_realtime_data(await self.driver.get_realtime_data())

    async def get_structured_highs_and_lows(self) -> dict[str, Any]:
        """Get the highs and lows as a nested report."""
        return restructure_highs_and_lows(await self.driver.get_highs_and_lows())

    async def get_flexible_realtime_data(self) -> FlexibleRealtimeData:
        """Get the currently measured weather data as flexible weather data."""
        return FlexibleRealtimeData(await self.get_structured_realtime_data())

    async def get_flexible_highs_and_lows(self) -> FlexibleHighLowData:
        """Get the highs and lows as flexible weather data."""
        return FlexibleHighLowData(await self.get_structured_highs_and_lows())

    async def get_time(self) -> datetime:
        """Get the console's time."""
        return await self.driver.get_time()

    async def synchronize_time(self) -> None:
        """Set the console's time to the system time."""
        await self.driver.synchronize_time()

    async def set_background_light(self, enabled: bool) -> None:
        """Turn the console's backlight on or off."""
        await self.driver.set_background_light(enabled)

    async def get_model_name(self) -> str:
        """Get the console's model name."""
        return await self.driver.get_model_name()
