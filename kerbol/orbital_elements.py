"""
Radian view of an Orbit's classical elements.
"""
from typing import NamedTuple


class OrbitalElements(NamedTuple):
    """
    The six classical elements of an Orbit, in SI units and radians.

    ``Orbit`` stores its three orientation angles in degrees as they appear in
    the catalog table; ``Orbit.elements`` converts them so downstream math
    never has to. The reference body is not part of the tuple.

    Examples:
        >>> a, e, i, Omega, omega, M0 = get_catalog().Minimus.orbit.elements
        >>> round(i, 4)  # 6 degrees
        0.1047
    """
    a: float  # m
    e: float
    i: float  # rad, from Orbit.inclination
    Omega: float  # rad, from Orbit.longitude_of_ascending_node
    omega: float  # rad, from Orbit.argument_of_periapsis
    M0: float  # rad, passed through unchanged
