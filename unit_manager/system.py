# unit_manager/system.py
from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional, Type, Union

from PySide6.QtCore import QObject, Signal

from .dimensions import DIMENSIONS, Force, Length, dimension_by_label
from .units import Dimension, Unit, UnitMismatchError, convert

log = logging.getLogger(__name__)

DimensionLike = Union[Type[Dimension], str]


def _as_dimension(dimension: DimensionLike) -> Type[Dimension]:
    if isinstance(dimension, type) and issubclass(dimension, Dimension):
        return dimension
    return dimension_by_label(dimension)


class UnitSystem(QObject):
    """
    Active (display) unit per dimension.
    Emits unitsChanged(dimension_label, abbr) when one of them changes.
    Values handed in and out of from_base/to_base are in the dimension's base unit.
    """
    unitsChanged = Signal(str, str)

    def __init__(
        self,
        active: Optional[Mapping[str, str]] = None,
        *,
        length_symbol: Optional[Union[Unit, str]] = None,
        force_symbol: Optional[Union[Unit, str]] = None,
    ):
        super().__init__()
        self._active: Dict[Type[Dimension], Unit] = {d: d.default() for d in DIMENSIONS}
        for label, abbr in (active or {}).items():
            dim = _as_dimension(label)
            self._active[dim] = dim.normalize(abbr)
        if length_symbol:
            self._active[Length] = Length.normalize(length_symbol)
        if force_symbol:
            self._active[Force] = Force.normalize(force_symbol)

    @classmethod
    def from_dict(cls, mapping: Mapping[str, str]) -> "UnitSystem":
        return cls(mapping)

    def as_dict(self) -> Dict[str, str]:
        return {d.label(): u.abbr for d, u in self._active.items()}

    # ---- properties ----
    @property
    def length(self) -> Unit:
        return self._active[Length]

    @property
    def force(self) -> Unit:
        return self._active[Force]

    def unit(self, dimension: DimensionLike) -> Unit:
        return self._active[_as_dimension(dimension)]

    # ---- setters emit ----
    def set_unit(self, unit: Union[Unit, str], dimension: Optional[DimensionLike] = None) -> None:
        if isinstance(unit, Unit):
            dim = unit.dimension
            if dim is None:
                raise UnitMismatchError(f"Not a registered unit: {unit!r}")
            if dimension is not None and _as_dimension(dimension) is not dim:
                raise UnitMismatchError(
                    f"'{unit.abbr}' is a {dim.label()} unit, not {_as_dimension(dimension).label()}"
                )
        elif dimension is None:
            raise UnitMismatchError(f"A dimension is required to resolve unit string {unit!r}")
        else:
            dim = _as_dimension(dimension)

        u = dim.normalize(unit)
        if u != self._active[dim]:
            log.debug("[UnitSystem] %s -> %s", dim.label(), u.abbr)
            self._active[dim] = u
            self.unitsChanged.emit(dim.label(), u.abbr)

    def set_length(self, unit: Union[Unit, str]) -> None:
        self.set_unit(unit, Length)

    def set_force(self, unit: Union[Unit, str]) -> None:
        self.set_unit(unit, Force)

    # ---- base conversions ----
    def from_base(self, value: float, dimension: DimensionLike) -> float:
        dim = _as_dimension(dimension)
        return convert(value, dim.default(), self._active[dim])

    def to_base(self, value: float, dimension: DimensionLike) -> float:
        dim = _as_dimension(dimension)
        return convert(value, self._active[dim], dim.default())

    # ---- any-to-any convenience ----
    def convert_between(self, value: float, from_unit: Unit, to_unit: Unit) -> float:
        return convert(value, from_unit, to_unit)

    def format_value(self, value: float, dimension: DimensionLike, decimals: int = 2) -> str:
        """Base-unit `value` shown in the active unit, e.g. "3.28 ft"."""
        dim = _as_dimension(dimension)
        return f"{self.from_base(value, dim):.{decimals}f} {self._active[dim].abbr}"


# ======================================================================
# Helper mixin for objects that follow the active units
# ======================================================================

class UnitAwareMixin:
    """
    Bind once; `update_units` is called for every dimension on bind and on
    each change. The default implementation sets the abbreviation on every
    label registered in `self.unit_labels[dimension_label]`.
    """
    _units: Optional[UnitSystem] = None

    def bind_units(self, units: Optional[UnitSystem]) -> None:
        self._units = units
        if units is None:
            return
        # initial sync
        for label, abbr in units.as_dict().items():
            self.update_units(label, abbr)
        # subscribe
        units.unitsChanged.connect(self._on_units_changed_proxy)

    def _on_units_changed_proxy(self, dimension: str, abbr: str) -> None:
        self.update_units(dimension, abbr)

    def update_units(self, dimension: str, abbr: str) -> None:
        for lab in getattr(self, "unit_labels", {}).get(dimension, []):
            lab.setText(abbr)
