"""Subprocess helpers for running the vproweather driver binary."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from ..errors import (
    DriverProcessError,
    DriverTimeout,
    DriverUnavailableError,
)

_LOGGER = logging.getLogger(__name__)


async def run_driver(
    executable: str,
    args: Sequence[str],
    *,
    timeout: float = 30.0,
) -> str:
    """Run the driver and return its standard output.

    Args:
        executable: Driver executable name or path.
        args: Command line arguments.
        timeout: Seconds to wait for the driver to exit.

    Raises:
        DriverUnavailableError: If the executable cannot be started.
        DriverTimeout: If the driver does not exit in time.
        DriverProcessError: If the driver exits with a non-zero status.
    """
    _LOGGER.debug("Running %s %s", executable, " ".join(args))
    try:
        process = await asyncio.create_subprocess_exec(
            executable,
            *args,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as err:
        raise DriverUnavailableError(f"Cannot start driver '{executable}'") from err

    try:
        stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=timeout)
    except TimeoutError as err:
        await _kill(process)
        raise DriverTimeout(f"Driver did not respond within {timeout}s") from err
    except asyncio.CancelledError:
        _LOGGER.debug("Driver run cancelled, killing %s", executable)
        await _kill(process)
        raise

    if process.returncode != 0:
        message = stderr.decode(errors="replace").strip() or "no error output"
        raise DriverProcessError(
            process.returncode,
            f"Driver exited with status {process.returncode}: {message}",
        )
    return stdout.decode(errors="replace")


async def _kill(process: asyncio.subprocess.Process) -> None:
    try:
        process.kill()
    except ProcessLookupError:
        # Already exited
        return
    await process.wait()
