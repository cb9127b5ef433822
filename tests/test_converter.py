# tests/test_converter.py

import itertools
import math

import numpy as np
import pytest

from unit_manager import (
    DIMENSIONS,
    Acceleration,
    Bearing,
    Force,
    Length,
    Mass,
    Pressure,
    Speed,
    Temperature,
    Time,
    UnitMismatchError,
    UnknownUnitError,
    convert,
    convert_array,
    convert_force,
    convert_length,
    convert_quantity,
    convert_temperature,
)

SAMPLES = [-40.0, 0.0, 1.0, 123.456, 1.0e6]


def _pairs():
    for dim in DIMENSIONS:
        for a, b in itertools.product(dim.units(), repeat=2):
            yield pytest.param(a, b, id=f"{dim.label()}:{a.abbr}->{b.abbr}")


@pytest.mark.parametrize("a, b", list(_pairs()))
def test_round_trip(a, b):
    for v in SAMPLES:
        back = convert(convert(v, a, b), b, a)
        assert back == pytest.approx(v, rel=1e-9, abs=1e-9)


@pytest.mark.parametrize("dim", DIMENSIONS, ids=lambda d: d.label())
def test_identity_is_exact(dim):
    for u in dim.units():
        for v in SAMPLES + [0.1, 1.0 / 3.0]:
            assert convert(v, u, u) == v
    base = dim.default()
    assert convert(-0.0, base, base) == -0.0
    assert math.copysign(1.0, convert(-0.0, base, base)) == -1.0


# ---- concrete scenarios ----

def test_length_scenarios():
    assert convert(100.0, Length.METERS, Length.KILOMETERS) == pytest.approx(0.1)
    assert convert(100.0, Length.METERS, Length.FEET) == pytest.approx(328.084, rel=1e-6)
    assert convert(100.0, Length.METERS, Length.INCHES) == pytest.approx(3937.0079, rel=1e-7)
    assert convert(1.0, Length.STATUTE_MILES, Length.FEET) == pytest.approx(5280.0)
    assert convert(1.0, Length.NAUTICAL_MILES, Length.METERS) == pytest.approx(1852.0)


def test_mass_scenarios():
    assert convert(100.0, Mass.KILOGRAMS, Mass.GRAMS) == pytest.approx(100000.0)
    assert convert(100.0, Mass.KILOGRAMS, Mass.POUNDS) == pytest.approx(220.462262, rel=1e-8)
    assert convert(1.0, Mass.POUNDS, Mass.OUNCES) == pytest.approx(16.0)
    assert convert(1.0, Mass.SLUGS, Mass.KILOGRAMS) == pytest.approx(14.5939029, rel=1e-7)


def test_time_scenarios():
    assert convert(1.0, Time.HOURS, Time.MINUTES) == pytest.approx(60.0)
    assert convert(2.0, Time.WEEKS, Time.DAYS) == pytest.approx(14.0)
    assert convert(1.0, Time.YEARS, Time.DAYS) == pytest.approx(365.0)


def test_temperature_scenarios():
    assert convert(0.0, Temperature.CELSIUS, Temperature.KELVIN) == pytest.approx(273.15)
    assert convert(32.0, Temperature.FAHRENHEIT, Temperature.KELVIN) == pytest.approx(273.15)
    assert convert(100.0, Temperature.CELSIUS, Temperature.FAHRENHEIT) == pytest.approx(212.0)
    assert convert(-40.0, Temperature.CELSIUS, Temperature.FAHRENHEIT) == pytest.approx(-40.0)
    assert convert(0.0, Temperature.KELVIN, Temperature.RANKINE) == pytest.approx(0.0)
    assert convert(491.67, Temperature.RANKINE, Temperature.CELSIUS) == pytest.approx(0.0, abs=1e-9)


def test_speed_scenarios():
    assert convert(1.0, Speed.METERS_PER_SECOND, Speed.KILOMETERS_PER_HOUR) == pytest.approx(3.6)
    assert convert(1.0, Speed.METERS_PER_SECOND, Speed.MILES_PER_HOUR) == pytest.approx(2.23694, rel=1e-5)
    assert convert(1.0, Speed.KNOTS, Speed.KILOMETERS_PER_HOUR) == pytest.approx(1.852)


def test_force_pressure_bearing_acceleration():
    assert convert(1.0, Force.POUNDS_FORCE, Force.NEWTONS) == pytest.approx(4.44822, rel=1e-6)
    assert convert(1.0, Force.KIPS, Force.POUNDS_FORCE) == pytest.approx(1000.0)
    assert convert(1.0, Force.KILOGRAMS_FORCE, Force.NEWTONS) == pytest.approx(9.80665)
    assert convert(1.0, Pressure.ATMOSPHERES, Pressure.TORRS) == pytest.approx(760.0)
    assert convert(1.0, Pressure.POUNDS_PER_SQUARE_INCH, Pressure.PASCALS) == pytest.approx(6894.76, rel=1e-6)
    assert convert(1.0, Pressure.BARS, Pressure.KILOPASCALS) == pytest.approx(100.0)
    assert convert(math.pi, Bearing.RADIANS, Bearing.DEGREES) == pytest.approx(180.0)
    assert convert(6400.0, Bearing.MILS, Bearing.DEGREES) == pytest.approx(360.0)
    assert convert(100.0, Bearing.GRADIANS, Bearing.DEGREES) == pytest.approx(90.0)
    assert convert(1.0, Acceleration.STANDARD_GRAVITY, Acceleration.FEET_PER_SECOND_SQUARED) == pytest.approx(32.174, rel=1e-4)


# ---- failures ----

def test_cross_dimension_is_a_mismatch():
    with pytest.raises(UnitMismatchError):
        convert(1.0, Mass.KILOGRAMS, Force.NEWTONS)
    with pytest.raises(UnitMismatchError):
        Length.METERS.convert(1.0, Time.SECONDS)
    with pytest.raises(UnitMismatchError):
        convert(1.0, "m", Length.FEET)
    # a TypeError, not a ValueError: it is a programming mistake
    with pytest.raises(TypeError):
        Length.convert(1.0, Length.METERS, Mass.POUNDS)


def test_string_helpers():
    assert convert_length(12.0, "in", "ft") == pytest.approx(1.0)
    assert convert_length(1.0, "Feet", Length.INCHES) == pytest.approx(12.0)
    assert convert_force(1.0, "Kips (kip)", "kN") == pytest.approx(4.4482216152605)
    assert convert_temperature(100.0, "°C", "K") == pytest.approx(373.15)
    with pytest.raises(UnknownUnitError):
        convert_length(1.0, "FT", "m")


def test_convert_quantity_resolves_strings_against_the_unit_side():
    assert convert_quantity(1.0, Length.KILOMETERS, "m") == pytest.approx(1000.0)
    assert convert_quantity(1.0, "kg", Mass.GRAMS) == pytest.approx(1000.0)
    with pytest.raises(UnitMismatchError):
        convert_quantity(1.0, "kg", "g")


def test_convert_array():
    out = convert_array([0.0, 100.0, -40.0], Temperature.CELSIUS, Temperature.FAHRENHEIT)
    assert isinstance(out, np.ndarray)
    assert out.dtype == np.float64
    np.testing.assert_allclose(out, [32.0, 212.0, -40.0])

    same = convert_array([1, 2, 3], Length.METERS, Length.METERS)
    np.testing.assert_array_equal(same, [1.0, 2.0, 3.0])

    x = np.array([1.0, 2.0])
    out = convert_array(x, Length.METERS, Length.METERS)
    assert out is not x
    out[0] = 99.0
    assert x[0] == 1.0

    with pytest.raises(UnitMismatchError):
        convert_array([1.0], Length.METERS, Mass.KILOGRAMS)
