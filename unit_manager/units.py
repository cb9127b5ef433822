# unit_manager/units.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar, Dict, List, Optional, Tuple, Type, Union

log = logging.getLogger(__name__)


class UnknownUnitError(ValueError):
    pass


class UnitMismatchError(TypeError):
    pass


@dataclass(frozen=True)
class Unit:
    """
    One unit of a dimension.

    factor: base units per one of this unit
    offset: added before scaling (only the affine temperature scales use it)

        base   = (value + offset) * factor
        value  = base / factor - offset
    """
    abbr: str
    name: str
    factor: float = 1.0
    offset: float = 0.0

    # set by Dimension when the unit type is registered
    dimension: ClassVar[Optional[Type["Dimension"]]] = None

    @property
    def name_and_abbr(self) -> str:
        return f"{self.name} ({self.abbr})"

    @property
    def is_base(self) -> bool:
        return self.factor == 1.0 and self.offset == 0.0

    def to_base(self, value):
        return (value + self.offset) * self.factor

    def from_base(self, value):
        return value / self.factor - self.offset

    def convert(self, value, to_unit: "Unit"):
        return convert(value, self, to_unit)

    def __str__(self) -> str:
        return self.name_and_abbr


def _dimension_label(unit: object) -> str:
    dim = getattr(type(unit), "dimension", None)
    return dim.label() if dim is not None else type(unit).__name__


def convert(value, from_unit: Unit, to_unit: Unit):
    """
    Convert `value` from `from_unit` to `to_unit` through the dimension's base unit.

    Both units must belong to the same dimension; anything else is a
    UnitMismatchError. Identical units return `value` untouched.
    """
    if not isinstance(from_unit, Unit) or not isinstance(to_unit, Unit):
        raise UnitMismatchError(
            f"Expected units, got {type(from_unit).__name__} and {type(to_unit).__name__}"
        )
    if type(from_unit) is not type(to_unit):
        raise UnitMismatchError(
            f"Cannot convert {_dimension_label(from_unit)} unit '{from_unit.abbr}' "
            f"to {_dimension_label(to_unit)} unit '{to_unit.abbr}'"
        )
    if from_unit == to_unit:
        return value
    return to_unit.from_base(from_unit.to_base(value))


class Dimension:
    """
    Closed set of interchangeable units, declared as class attributes:

        class Length(Dimension):
            METERS = LengthUnit("m", "Meters")
            FEET   = LengthUnit("ft", "Feet", 0.3048)

    Declaration order is kept. Lookup keys (abbr, name, "name (abbr)") must be
    unique and exactly one unit must be the base (factor 1, offset 0); both
    are checked when the subclass is created.
    """

    unit_type: ClassVar[Type[Unit]]
    _units: ClassVar[Tuple[Unit, ...]] = ()
    _lookup: ClassVar[Dict[str, Unit]] = {}
    _base: ClassVar[Unit]

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        units = tuple(v for v in vars(cls).values() if isinstance(v, Unit))
        if not units:
            raise ValueError(f"Dimension {cls.__name__} declares no units.")

        unit_type = type(units[0])
        if unit_type is Unit:
            raise TypeError(f"{cls.__name__} units need their own Unit subclass.")
        if any(type(u) is not unit_type for u in units):
            raise TypeError(f"{cls.__name__} mixes unit types.")
        if unit_type.dimension is not None:
            raise TypeError(
                f"{unit_type.__name__} already belongs to {unit_type.dimension.__name__}."
            )

        lookup: Dict[str, Unit] = {}
        for u in units:
            for key in (u.abbr, u.name, u.name_and_abbr):
                if key in lookup:
                    raise ValueError(f"Duplicate unit key in {cls.__name__}: {key}")
                lookup[key] = u

        bases = [u for u in units if u.is_base]
        if len(bases) != 1:
            raise ValueError(
                f"{cls.__name__} needs exactly one base unit, found {[u.abbr for u in bases]}"
            )

        cls.unit_type = unit_type
        cls._units = units
        cls._lookup = lookup
        cls._base = bases[0]
        unit_type.dimension = cls

    # ---- registry ----
    @classmethod
    def label(cls) -> str:
        return cls.__name__

    @classmethod
    def units(cls) -> Tuple[Unit, ...]:
        return cls._units

    @classmethod
    def default(cls) -> Unit:
        """The base unit every conversion pivots through."""
        return cls._base

    @classmethod
    def all_names(cls) -> List[str]:
        return [u.name for u in cls._units]

    @classmethod
    def all_abbrs(cls) -> List[str]:
        return [u.abbr for u in cls._units]

    @classmethod
    def all_names_and_abbrs(cls) -> List[str]:
        return [u.name_and_abbr for u in cls._units]

    # ---- lookup ----
    @classmethod
    def parse(cls, text: str) -> Optional[Unit]:
        """
        Exact, case-sensitive match on abbr, name or "name (abbr)".
        Returns None when nothing matches.
        """
        if not isinstance(text, str):
            return None
        return cls._lookup.get(text)

    @classmethod
    def normalize(cls, unit: Union[Unit, str]) -> Unit:
        """Resolve a unit or unit string of this dimension, raising on failure."""
        if isinstance(unit, Unit):
            if type(unit) is not cls.unit_type:
                raise UnitMismatchError(
                    f"'{unit.abbr}' is a {_dimension_label(unit)} unit, not {cls.label()}"
                )
            return unit
        if not isinstance(unit, str):
            raise UnitMismatchError(f"Expected a {cls.label()} unit or string, got {unit!r}")
        found = cls._lookup.get(unit)
        if found is None:
            log.debug("Unresolved %s unit string %r", cls.label(), unit)
            raise UnknownUnitError(
                f"Unknown {cls.label()} unit '{unit}'. Options: {cls.all_abbrs()}"
            )
        return found

    # ---- conversion ----
    @classmethod
    def convert(cls, value, from_unit: Union[Unit, str], to_unit: Union[Unit, str]):
        return convert(value, cls.normalize(from_unit), cls.normalize(to_unit))
