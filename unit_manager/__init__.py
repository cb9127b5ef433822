# unit_manager/__init__.py

from .units import Unit, Dimension, UnknownUnitError, UnitMismatchError, convert
from .dimensions import (
    DIMENSIONS,
    Acceleration,
    AccelerationUnit,
    Bearing,
    BearingUnit,
    Force,
    ForceUnit,
    Length,
    LengthUnit,
    Mass,
    MassUnit,
    Pressure,
    PressureUnit,
    Speed,
    SpeedUnit,
    Temperature,
    TemperatureUnit,
    Time,
    TimeUnit,
    dimension_by_label,
)
from .converter import (
    coerce_unit,
    convert_acceleration,
    convert_array,
    convert_bearing,
    convert_force,
    convert_length,
    convert_mass,
    convert_pressure,
    convert_quantity,
    convert_speed,
    convert_temperature,
    convert_time,
)
from .values import ValueWithUnit
from .tables import units_table, conversion_table
from .persistence import ConfigManager, ConfigError

__all__ = [
    "Unit",
    "Dimension",
    "UnknownUnitError",
    "UnitMismatchError",
    "convert",
    "DIMENSIONS",
    "Acceleration",
    "AccelerationUnit",
    "Bearing",
    "BearingUnit",
    "Force",
    "ForceUnit",
    "Length",
    "LengthUnit",
    "Mass",
    "MassUnit",
    "Pressure",
    "PressureUnit",
    "Speed",
    "SpeedUnit",
    "Temperature",
    "TemperatureUnit",
    "Time",
    "TimeUnit",
    "dimension_by_label",
    "coerce_unit",
    "convert_acceleration",
    "convert_array",
    "convert_bearing",
    "convert_force",
    "convert_length",
    "convert_mass",
    "convert_pressure",
    "convert_quantity",
    "convert_speed",
    "convert_temperature",
    "convert_time",
    "ValueWithUnit",
    "units_table",
    "conversion_table",
    "ConfigManager",
    "ConfigError",
]
