# unit_manager/tables.py
from __future__ import annotations

from typing import Type

import pandas as pd

from .units import Dimension, Unit, UnitMismatchError, convert

UNIT_COLUMNS = ["Abbr", "Name", "Name and Abbr", "Factor", "Offset", "Base"]


def units_table(dimension: Type[Dimension]) -> pd.DataFrame:
    """
    One row per unit of `dimension`, in declaration order.
    Factor/Offset are relative to the base unit (see Unit).
    """
    rows = [
        {
            "Abbr": u.abbr,
            "Name": u.name,
            "Name and Abbr": u.name_and_abbr,
            "Factor": float(u.factor),
            "Offset": float(u.offset),
            "Base": u == dimension.default(),
        }
        for u in dimension.units()
    ]
    return pd.DataFrame(rows, columns=UNIT_COLUMNS)


def conversion_table(value: float, unit: Unit) -> pd.DataFrame:
    """`value` (given in `unit`) expressed in every unit of the same dimension."""
    dim = getattr(unit, "dimension", None)
    if dim is None:
        raise UnitMismatchError(f"Not a registered unit: {unit!r}")

    return pd.DataFrame(
        [
            {"Abbr": u.abbr, "Name": u.name, "Value": float(convert(value, unit, u))}
            for u in dim.units()
        ],
        columns=["Abbr", "Name", "Value"],
    )
