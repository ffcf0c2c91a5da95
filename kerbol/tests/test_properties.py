"""
Property-based tests for the orbital queries.

Invariants checked across the whole catalog:
- Sidereal time always lies in [0, 2pi)
- Sidereal time repeats after one sidereal rotation
- Circular orbit velocity decreases with altitude
"""
import pytest
from hypothesis import given, settings, strategies as st

from kerbol import TWO_PI, get_catalog

CATALOG = get_catalog()
ROTATING = [name for name, body in CATALOG.items() if body.sidereal_rotation > 0]

rotating_bodies = st.sampled_from(ROTATING).map(CATALOG.__getitem__)
all_bodies = st.sampled_from(list(CATALOG)).map(CATALOG.__getitem__)
longitudes = st.floats(min_value=-1.0e3, max_value=1.0e3, allow_nan=False, allow_infinity=False)
times = st.floats(min_value=-1.0e9, max_value=1.0e9, allow_nan=False, allow_infinity=False)


def angular_distance(a, b):
    d = abs(a - b) % TWO_PI
    return min(d, TWO_PI - d)


@given(body=rotating_bodies, longitude=longitudes, time=times)
@settings(max_examples=300)
def test_sidereal_time_in_range(body, longitude, time):
    """Sidereal time always lies in [0, 2pi)."""
    theta = body.sidereal_time_at(longitude, time)
    assert 0.0 <= theta < TWO_PI


@given(body=rotating_bodies, longitude=longitudes, time=times)
def test_sidereal_time_periodic(body, longitude, time):
    """Sidereal time repeats after one sidereal rotation."""
    a = body.sidereal_time_at(longitude, time)
    b = body.sidereal_time_at(longitude, time + body.sidereal_rotation)
    assert angular_distance(a, b) < 1e-6


@given(body=all_bodies,
       f1=st.floats(min_value=-0.99, max_value=1.0e4),
       f2=st.floats(min_value=-0.99, max_value=1.0e4))
def test_circular_velocity_decreases_with_altitude(body, f1, f2):
    """Circular velocity never increases with altitude."""
    low, high = sorted((f1 * body.radius, f2 * body.radius))
    assert body.circular_orbit_velocity(low) >= body.circular_orbit_velocity(high)


@pytest.mark.parametrize("name", ROTATING)
def test_sidereal_time_at_epoch_is_half_pi(name):
    """Sidereal time at epoch and longitude 0 is pi/2."""
    assert CATALOG[name].sidereal_time_at(0.0, 0.0) == pytest.approx(TWO_PI / 4)
