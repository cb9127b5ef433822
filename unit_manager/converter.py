# unit_manager/converter.py
from __future__ import annotations

from typing import Type, Union

import numpy as np

from .dimensions import (
    Acceleration,
    Bearing,
    Force,
    Length,
    Mass,
    Pressure,
    Speed,
    Temperature,
    Time,
)
from .units import Dimension, Unit, UnitMismatchError, convert

UnitLike = Union[Unit, str]


def coerce_unit(dimension: Type[Dimension], unit: UnitLike) -> Unit:
    """Unit constant or unit string -> unit constant of `dimension`."""
    return dimension.normalize(unit)


def convert_array(values, from_unit: Unit, to_unit: Unit) -> np.ndarray:
    """Elementwise conversion of any array-like; always returns a new float64 array."""
    arr = np.array(values, dtype=float)
    return np.asarray(convert(arr, from_unit, to_unit), dtype=float)


def convert_quantity(value: float, from_unit: UnitLike, to_unit: UnitLike) -> float:
    """
    Convert when at least one side is a unit constant; a string on the other
    side is resolved against that unit's dimension.
    """
    ref = from_unit if isinstance(from_unit, Unit) else to_unit
    if not isinstance(ref, Unit) or ref.dimension is None:
        raise UnitMismatchError("convert_quantity needs at least one unit constant")
    return ref.dimension.convert(value, from_unit, to_unit)


def convert_length(value: float, from_unit: UnitLike, to_unit: UnitLike) -> float:
    return Length.convert(value, from_unit, to_unit)


def convert_mass(value: float, from_unit: UnitLike, to_unit: UnitLike) -> float:
    return Mass.convert(value, from_unit, to_unit)


def convert_time(value: float, from_unit: UnitLike, to_unit: UnitLike) -> float:
    return Time.convert(value, from_unit, to_unit)


def convert_temperature(value: float, from_unit: UnitLike, to_unit: UnitLike) -> float:
    return Temperature.convert(value, from_unit, to_unit)


def convert_speed(value: float, from_unit: UnitLike, to_unit: UnitLike) -> float:
    return Speed.convert(value, from_unit, to_unit)


def convert_force(value: float, from_unit: UnitLike, to_unit: UnitLike) -> float:
    return Force.convert(value, from_unit, to_unit)


def convert_pressure(value: float, from_unit: UnitLike, to_unit: UnitLike) -> float:
    return Pressure.convert(value, from_unit, to_unit)


def convert_bearing(value: float, from_unit: UnitLike, to_unit: UnitLike) -> float:
    return Bearing.convert(value, from_unit, to_unit)


def convert_acceleration(value: float, from_unit: UnitLike, to_unit: UnitLike) -> float:
    return Acceleration.convert(value, from_unit, to_unit)
