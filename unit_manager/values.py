# unit_manager/values.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Type, TypeVar, Union

from .units import Dimension, Unit, UnitMismatchError, convert

U = TypeVar("U", bound=Unit)


@dataclass(frozen=True)
class ValueWithUnit(Generic[U]):
    """
    A magnitude paired with the unit it is expressed in.

    The value is stored as given (no conversion on construction); `convert`
    returns a new instance and never touches this one.
    """
    value: float
    unit: U

    def __post_init__(self):
        if not isinstance(self.unit, Unit) or self.unit.dimension is None:
            raise UnitMismatchError(f"Not a registered unit: {self.unit!r}")

    @classmethod
    def parse_unit(
        cls, value: float, unit: str, dimension: Type[Dimension]
    ) -> "ValueWithUnit":
        """Build from a unit string; raises UnknownUnitError if it doesn't resolve."""
        return cls(value, dimension.normalize(unit))

    @property
    def dimension(self) -> Type[Dimension]:
        return self.unit.dimension

    def convert(self, to_unit: Union[U, str]) -> "ValueWithUnit[U]":
        target = self.dimension.normalize(to_unit)
        return ValueWithUnit(convert(self.value, self.unit, target), target)

    def to_base(self) -> "ValueWithUnit[U]":
        return self.convert(self.dimension.default())

    def describe(self) -> str:
        """Unlabelled form; whole numbers print without a decimal point ("Value: 10 Meters (m)")."""
        v = float(self.value)
        shown = f"{v:.0f}" if v.is_integer() else str(v)
        return f"Value: {shown} {self.unit.name} ({self.unit.abbr})"

    def __str__(self) -> str:
        return (
            f"{self.dimension.label()} Value: {self.value:.2f} "
            f"{self.unit.name} ({self.unit.abbr})"
        )
