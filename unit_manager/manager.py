# unit_manager/manager.py
from __future__ import annotations

from typing import Optional, Union

from .dimensions import Force, Length, dimension_by_label
from .persistence import ConfigManager
from .system import UnitSystem
from .units import Unit

# Singleton instance
__UNITS: Optional[UnitSystem] = None


def get_unit_manager(config: Optional[ConfigManager] = None) -> UnitSystem:
    """
    Return the global UnitSystem instance (creates on first use).
    When created with a ConfigManager, the stored preferences seed it.
    """
    global __UNITS
    if __UNITS is None:
        if config is not None:
            __UNITS = UnitSystem.from_dict(config.load_unit_preferences()["units"])
        else:
            __UNITS = UnitSystem(length_symbol=Length.FEET, force_symbol=Force.KIPS)
    return __UNITS


def reset_unit_manager() -> None:
    global __UNITS
    __UNITS = None


def set_units(**units: Union[Unit, str]) -> UnitSystem:
    """
    Programmatic update; emits unitsChanged exactly like an interactive change.
        set_units(length="m", temperature=Temperature.CELSIUS)
    """
    u = get_unit_manager()
    for label, unit in units.items():
        if unit:
            u.set_unit(unit, dimension_by_label(label))
    return u
