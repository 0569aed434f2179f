"""Pytest configuration and fixtures for vantage_weather tests."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from vantage_weather.driver import DriverOptions


@pytest.fixture
def sample_options() -> DriverOptions:
    """Driver options reading the bundled sample output."""
    return DriverOptions(use_samples=True)


@pytest.fixture
def fast_options() -> DriverOptions:
    """Driver options that retry without waiting."""
    return DriverOptions(max_tries=3, retry_base_delay=0.0, retry_max_delay=0.0)


@pytest.fixture
def mixed_data() -> dict:
    """Mixed weather data with inline (value, unit) annotations."""
    return {
        "temp": [12, "°C"],
        "memo": {"a": 24},
    }


def create_mock_process(
    returncode: int = 0,
    stdout: bytes = b"",
    stderr: bytes = b"",
) -> MagicMock:
    """Create a configured mock asyncio subprocess.

    Args:
        returncode: Exit status reported after communicate()
        stdout: Data returned as standard output
        stderr: Data returned as standard error

    Returns:
        Configured mock process
    """
    process = MagicMock()
    process.returncode = returncode
    process.communicate = AsyncMock(return_value=(stdout, stderr))
    process.wait = AsyncMock(return_value=returncode)
    process.kill = MagicMock()
    return process
