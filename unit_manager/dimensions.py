# unit_manager/dimensions.py
from __future__ import annotations

import math

from .units import Dimension, Unit

# Exact definitions where one exists (international yard & pound, 1959).
M_PER_IN = 0.0254
M_PER_FT = 0.3048
M_PER_YD = 0.9144
M_PER_MI = 1609.344
M_PER_NMI = 1852.0
KG_PER_LB = 0.45359237
G0 = 9.80665  # standard gravity, m/s²
N_PER_LBF = KG_PER_LB * G0  # 4.4482216152605
PA_PER_ATM = 101_325.0
PA_PER_PSI = N_PER_LBF / M_PER_IN ** 2  # 6894.757293168...


# =============================================================================
# Length (base: m)
# =============================================================================

class LengthUnit(Unit):
    pass


class Length(Dimension):
    MILLIMETERS = LengthUnit("mm", "Millimeters", 0.001)
    CENTIMETERS = LengthUnit("cm", "Centimeters", 0.01)
    METERS = LengthUnit("m", "Meters")
    KILOMETERS = LengthUnit("km", "Kilometers", 1000.0)
    INCHES = LengthUnit("in", "Inches", M_PER_IN)
    FEET = LengthUnit("ft", "Feet", M_PER_FT)
    YARDS = LengthUnit("yd", "Yards", M_PER_YD)
    STATUTE_MILES = LengthUnit("mi", "Statute Miles", M_PER_MI)
    NAUTICAL_MILES = LengthUnit("nmi", "Nautical Miles", M_PER_NMI)


# =============================================================================
# Mass (base: kg)
# =============================================================================

class MassUnit(Unit):
    pass


class Mass(Dimension):
    KILOGRAMS = MassUnit("kg", "Kilograms")
    GRAMS = MassUnit("g", "Grams", 0.001)
    POUNDS = MassUnit("lb", "Pounds", KG_PER_LB)
    OUNCES = MassUnit("oz", "Ounces", KG_PER_LB / 16.0)
    SLUGS = MassUnit("slug", "Slugs", N_PER_LBF / M_PER_FT)  # lbf·s²/ft


# =============================================================================
# Time (base: s)
# =============================================================================

class TimeUnit(Unit):
    pass


class Time(Dimension):
    SECONDS = TimeUnit("s", "Seconds")
    MINUTES = TimeUnit("min", "Minutes", 60.0)
    HOURS = TimeUnit("hr", "Hours", 3600.0)
    DAYS = TimeUnit("d", "Days", 86_400.0)
    WEEKS = TimeUnit("wk", "Weeks", 604_800.0)
    YEARS = TimeUnit("yr", "Years", 31_536_000.0)  # 365-day year


# =============================================================================
# Temperature (base: K); affine scales carry an offset
# =============================================================================

class TemperatureUnit(Unit):
    pass


class Temperature(Dimension):
    KELVIN = TemperatureUnit("K", "Kelvin")
    CELSIUS = TemperatureUnit("°C", "Celsius", 1.0, 273.15)
    FAHRENHEIT = TemperatureUnit("°F", "Fahrenheit", 5.0 / 9.0, 459.67)
    RANKINE = TemperatureUnit("°R", "Rankine", 5.0 / 9.0)


# =============================================================================
# Speed (base: m/s)
# =============================================================================

class SpeedUnit(Unit):
    pass


class Speed(Dimension):
    METERS_PER_SECOND = SpeedUnit("m/s", "Meters per Second")
    KILOMETERS_PER_HOUR = SpeedUnit("km/h", "Kilometers per Hour", 1.0 / 3.6)
    FEET_PER_SECOND = SpeedUnit("ft/s", "Feet per Second", M_PER_FT)
    MILES_PER_HOUR = SpeedUnit("mph", "Miles per Hour", M_PER_MI / 3600.0)
    KNOTS = SpeedUnit("kn", "Knots", M_PER_NMI / 3600.0)


# =============================================================================
# Force (base: N)
# =============================================================================

class ForceUnit(Unit):
    pass


class Force(Dimension):
    NEWTONS = ForceUnit("N", "Newtons")
    KILONEWTONS = ForceUnit("kN", "Kilonewtons", 1000.0)
    POUNDS_FORCE = ForceUnit("lbf", "Pounds Force", N_PER_LBF)
    KIPS = ForceUnit("kip", "Kips", N_PER_LBF * 1000.0)
    KILOGRAMS_FORCE = ForceUnit("kgf", "Kilograms Force", G0)


# =============================================================================
# Pressure (base: Pa)
# =============================================================================

class PressureUnit(Unit):
    pass


class Pressure(Dimension):
    PASCALS = PressureUnit("Pa", "Pascals")
    KILOPASCALS = PressureUnit("kPa", "Kilopascals", 1e3)
    MEGAPASCALS = PressureUnit("MPa", "Megapascals", 1e6)
    BARS = PressureUnit("bar", "Bars", 1e5)
    POUNDS_PER_SQUARE_INCH = PressureUnit("psi", "Pounds per Square Inch", PA_PER_PSI)
    ATMOSPHERES = PressureUnit("atm", "Atmospheres", PA_PER_ATM)
    TORRS = PressureUnit("Torr", "Torrs", PA_PER_ATM / 760.0)


# =============================================================================
# Bearing (base: degrees)
# =============================================================================

class BearingUnit(Unit):
    pass


class Bearing(Dimension):
    DEGREES = BearingUnit("°", "Degrees")
    RADIANS = BearingUnit("rad", "Radians", 180.0 / math.pi)
    GRADIANS = BearingUnit("grad", "Gradians", 0.9)
    MILS = BearingUnit("mil", "Mils", 360.0 / 6400.0)  # NATO mil


# =============================================================================
# Acceleration (base: m/s²)
# =============================================================================

class AccelerationUnit(Unit):
    pass


class Acceleration(Dimension):
    METERS_PER_SECOND_SQUARED = AccelerationUnit("m/s²", "Meters per Second Squared")
    FEET_PER_SECOND_SQUARED = AccelerationUnit("ft/s²", "Feet per Second Squared", M_PER_FT)
    STANDARD_GRAVITY = AccelerationUnit("g", "Standard Gravity", G0)
    GALS = AccelerationUnit("Gal", "Gals", 0.01)


DIMENSIONS = (
    Length,
    Mass,
    Time,
    Temperature,
    Speed,
    Force,
    Pressure,
    Bearing,
    Acceleration,
)


def dimension_by_label(label: str):
    """Case-insensitive lookup of a dimension class by its label ("length" -> Length)."""
    for dim in DIMENSIONS:
        if dim.label().lower() == str(label).lower():
            return dim
    raise KeyError(f"Unknown dimension '{label}'. Options: {[d.label() for d in DIMENSIONS]}")
