"""Conversion of values between units of the same category."""

from __future__ import annotations

from collections.abc import Callable
from typing import Final

from ..errors import IncompatibleUnitsError
from .catalog import (
    Pressure,
    Rain,
    Temperature,
    Unit,
    Wind,
    category_of,
    parse_unit,
)

_Conversion = Callable[[float], float]

_CONVERSIONS: Final[dict[tuple[Unit, Unit], _Conversion]] = {
    # Pressure
    (Pressure.HPA, Pressure.INHG): lambda v: v / 33.86389,
    (Pressure.HPA, Pressure.BAR): lambda v: v / 1000,
    (Pressure.INHG, Pressure.HPA): lambda v: v * 33.86389,
    (Pressure.INHG, Pressure.BAR): lambda v: v * 0.03386389,
    (Pressure.BAR, Pressure.HPA): lambda v: v * 1000,
    (Pressure.BAR, Pressure.INHG): lambda v: v / 0.03386389,
    # Temperature
    (Temperature.FAHRENHEIT, Temperature.CELSIUS): lambda v: (v - 32) * (5 / 9),
    (Temperature.CELSIUS, Temperature.FAHRENHEIT): lambda v: v * 1.8 + 32,
    # Wind
    (Wind.KMH, Wind.KT): lambda v: v * 0.53996,
    (Wind.KMH, Wind.MPH): lambda v: v / 1.609344,
    (Wind.KMH, Wind.MS): lambda v: v / 3.6,
    (Wind.KT, Wind.KMH): lambda v: v / 0.53996,
    (Wind.KT, Wind.MPH): lambda v: v * 1.15078,
    (Wind.KT, Wind.MS): lambda v: v * 0.514444444444,
    (Wind.MPH, Wind.KMH): lambda v: v * 1.609344,
    (Wind.MPH, Wind.KT): lambda v: v / 1.15078,
    (Wind.MPH, Wind.MS): lambda v: v * 0.44704,
    (Wind.MS, Wind.KMH): lambda v: v * 3.6,
    (Wind.MS, Wind.KT): lambda v: v / 0.514444444444,
    (Wind.MS, Wind.MPH): lambda v: v / 0.44704,
    # Rain
    (Rain.CUPS, Rain.MM): lambda v: v * 0.2,
    (Rain.CUPS, Rain.IN): lambda v: v / 127,
    (Rain.MM, Rain.CUPS): lambda v: v / 0.2,
    (Rain.MM, Rain.IN): lambda v: v / 25.4,
    (Rain.IN, Rain.CUPS): lambda v: v * 127,
    (Rain.IN, Rain.MM): lambda v: v * 25.4,
}


def convert(value: float, current_unit: Unit | str, target_unit: Unit | str) -> float:
    """Convert a value from one unit to another of the same category.

    Args:
        value: The value to convert.
        current_unit: The value's current unit.
        target_unit: The unit to convert to.

    Returns:
        The converted value; ``value`` itself when both units are equal.

    Raises:
        InvalidUnitError: If either unit is unknown.
        IncompatibleUnitsError: If the units belong to different categories
            or no conversion is defined between them.
    """
    current = parse_unit(current_unit)
    target = parse_unit(target_unit)
    if category_of(current) is not category_of(target):
        raise IncompatibleUnitsError(current.value, target.value)
    if current is target:
        return value

    conversion = _CONVERSIONS.get((current, target))
    if conversion is None:
        raise IncompatibleUnitsError(current.value, target.value)
    return conversion(value)
