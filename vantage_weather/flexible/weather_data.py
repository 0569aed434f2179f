"""Weather data paired with a unit structure that can be converted at will.

A reading tree holds plain values (numbers, strings, booleans, timestamps,
``None`` and nested trees). Its unit structure mirrors (a subset of) the
tree's keys; each leaf is the unit of the reading at the same position and
each nested mapping describes a nested reading tree.

Example:
    data = FlexibleWeatherData.from_mixed_data(
        {
            "temperature_out": [12, Temperature.CELSIUS],
            "wind": {"gust": [12, Wind.MPH], "avg": [3, Wind.MPH]},
            "memo": "passed through untouched",
        }
    )
    data.apply_units(UnitConfig(wind=Wind.KMH))
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime, time
from typing import Any, TypeGuard, Union

from ..errors import UnitStructureMismatchError
from ..units.catalog import Unit, category_of, parse_unit
from ..units.config import UnitConfig
from ..units.convert import convert

Reading = Union[str, int, float, bool, datetime, date, time, None, "ReadingTree"]
ReadingTree = dict[str, Reading]
UnitStructure = dict[str, Union[Unit, "UnitStructure"]]

def _is_number(value: Any) -> TypeGuard[int | float]:
    """Return True for real numbers; booleans are not numbers here."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_nested(value: Any) -> TypeGuard[Mapping[str, Any]]:
    return isinstance(value, Mapping)


def _parse_mixed_data(
    mixed: Mapping[str, Any], path: tuple[str, ...]
) -> tuple[ReadingTree, UnitStructure, bool]:
    """Split mixed data into readings and units.

    Returns:
        The reading tree, the unit structure and whether any unit was found.
    """
    data: ReadingTree = {}
    structure: UnitStructure = {}
    unit_detected = False

    for key, value in mixed.items():
        if isinstance(value, (list, tuple)):
            if len(value) != 2 or not (value[0] is None or _is_number(value[0])):
                raise UnitStructureMismatchError(
                    (*path, key), "expected a (value, unit) pair"
                )
            data[key] = value[0]
            structure[key] = parse_unit(value[1])
            unit_detected = True
        elif _is_nested(value):
            nested_data, nested_structure, nested_detected = _parse_mixed_data(
                value, (*path, key)
            )
            if nested_detected:
                structure[key] = nested_structure
                unit_detected = True
            data[key] = nested_data
        else:
            data[key] = value

    return data, structure, unit_detected


def apply_units(
    config: UnitConfig,
    data: ReadingTree,
    unit_structure: UnitStructure,
    *,
    create_clone: bool = True,
) -> tuple[ReadingTree, UnitStructure]:
    """Convert weather data to match a unit configuration.

    Readings without a unit, non-numeric readings at unit positions and
    categories the configuration leaves empty are passed through unchanged.

    Args:
        config: Desired target units.
        data: Plain weather data.
        unit_structure: Units of ``data``.
        create_clone: Convert copies of both trees and leave the originals
            untouched. When False both trees are updated in place.

    Returns:
        The converted weather data and its updated unit structure.

    Raises:
        UnitStructureMismatchError: If the unit structure expects nested data
            where the weather data holds a plain value or a timestamp.
        InvalidUnitError: If the unit structure holds an unknown unit.
    """
    return _apply_units(config, data, unit_structure, create_clone, ())


def _apply_units(
    config: UnitConfig,
    data: ReadingTree,
    structure: UnitStructure,
    create_clone: bool,
    path: tuple[str, ...],
) -> tuple[ReadingTree, UnitStructure]:
    if create_clone:
        data = dict(data)
        structure = dict(structure)

    for key, value in data.items():
        struct_value = structure.get(key)
        if struct_value is None:
            continue

        if _is_nested(struct_value):
            if not _is_nested(value):
                raise UnitStructureMismatchError(
                    (*path, key),
                    f"expected nested data, got {type(value).__name__}",
                )
            data[key], structure[key] = _apply_units(
                config, value, struct_value, create_clone, (*path, key)
            )
            continue

        if not _is_number(value):
            continue
        current_unit = parse_unit(struct_value)
        target_unit = config.get(category_of(current_unit))
        if target_unit is None or target_unit is current_unit:
            continue
        data[key] = convert(value, current_unit, target_unit)
        structure[key] = target_unit

    return data, structure


class FlexibleWeatherData:
    """Weather data that can be converted to other units.

    Holds a reading tree and its unit structure and keeps both in lockstep
    when converting.

    Attributes:
        data: Plain weather data.
        unit_structure: Units of ``data``.
    """

    def __init__(self, data: ReadingTree, unit_structure: UnitStructure) -> None:
        self.data = data
        self.unit_structure = unit_structure

    @classmethod
    def from_mixed_data(cls, mixed: Mapping[str, Any]) -> FlexibleWeatherData:
        """Create flexible weather data from values annotated inline.

        Annotated values are ``(value, unit)`` pairs; everything else is kept
        as plain data. Nested mappings only get a unit structure entry when
        they contain at least one annotated value.

        Raises:
            UnitStructureMismatchError: If a list is not a ``(value, unit)`` pair.
            InvalidUnitError: If an annotation holds an unknown unit.
        """
        data, structure, _ = _parse_mixed_data(mixed, ())
        return cls(data, structure)

    def apply_units(self, config: UnitConfig) -> None:
        """Convert this weather data in place to match a unit configuration."""
        apply_units(config, self.data, self.unit_structure, create_clone=False)

    def converted(self, config: UnitConfig) -> FlexibleWeatherData:
        """Return a converted copy, leaving this weather data untouched."""
        data, structure = apply_units(
            config, self.data, self.unit_structure, create_clone=True
        )
        return FlexibleWeatherData(data, structure)

    def to_mixed_data(self) -> dict[str, Any]:
        """Return the weather data with units annotated as ``(value, unit)``."""
        return _to_mixed_data(self.data, self.unit_structure)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(data={self.data!r}, "
            f"unit_structure={self.unit_structure!r})"
        )


def _to_mixed_data(data: Mapping[str, Any], structure: Mapping[str, Any]) -> dict[str, Any]:
    mixed: dict[str, Any] = {}
    for key, value in data.items():
        struct_value = structure.get(key)
        if struct_value is None:
            mixed[key] = value
        elif _is_nested(struct_value):
            mixed[key] = _to_mixed_data(value, struct_value) if _is_nested(value) else value
        else:
            mixed[key] = (value, struct_value)
    return mixed
