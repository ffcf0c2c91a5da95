from typing import Optional

import numpy as np
import pydantic
from pydantic import ConfigDict, PrivateAttr, computed_field

from kerbol.constants import G, TWO_PI, HALF_PI, SOI_EXPONENT, HOUR, KERBIN_DAY, KERBIN_YEAR
from kerbol.errors import InvalidParameter, UnsupportedOperation
from kerbol.orbit import Orbit

_DERIVED_ATTRIBUTES = frozenset({'_gravitational_parameter', '_sphere_of_influence'})


def _to_output(value):
    """Return python floats for scalar results and arrays otherwise."""
    if np.ndim(value) == 0:
        return float(value)
    return value


class CelestialBody(pydantic.BaseModel):
    """
    Represents a star, planet or moon of the Kerbol system.

    The gravitational parameter and, for orbiting bodies, the sphere of
    influence are derived once at construction. The model is frozen.

    Attributes:
        name: Name of the body (e.g., "Kerbin", "Mun")
        mass: Mass of the body (kg)
        radius: Physical radius of the body (m)
        sidereal_rotation: Sidereal rotation period (s), 0 for a non-rotating body
        orbit: Orbit about the reference body, None for the root star
        gravitational_parameter: G * mass (m^3/s^2)
        sphere_of_influence: Sphere of influence radius (m), None for the root star
    """
    model_config = ConfigDict(frozen=True)

    name: str
    mass: float
    radius: float
    sidereal_rotation: float
    orbit: Optional[Orbit] = None

    _gravitational_parameter: float = PrivateAttr()
    _sphere_of_influence: Optional[float] = PrivateAttr(default=None)

    @pydantic.field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v:
            raise InvalidParameter("name must be a non-empty string")
        return v

    @pydantic.field_validator('mass', 'radius')
    @classmethod
    def validate_positive(cls, v, info):
        if not np.isfinite(v) or v <= 0.0:
            raise InvalidParameter(f"{info.field_name} must be positive and finite, got {v}")
        return v

    @pydantic.field_validator('sidereal_rotation')
    @classmethod
    def validate_sidereal_rotation(cls, v):
        if not np.isfinite(v) or v < 0.0:
            raise InvalidParameter(f"sidereal_rotation must be non-negative and finite, got {v}")
        return v

    @pydantic.field_validator('orbit')
    @classmethod
    def validate_orbit(cls, v):
        if v is not None and not isinstance(v.reference_body, CelestialBody):
            raise InvalidParameter("orbit has no reference body")
        return v

    def model_post_init(self, __context) -> None:
        sphere_of_influence = None
        if self.orbit is not None:
            mass_ratio = self.mass / self.orbit.reference_body.mass
            sphere_of_influence = self.orbit.semi_major_axis * mass_ratio ** SOI_EXPONENT
        # Written straight into the private store; __setattr__ rejects these names
        self.__pydantic_private__.update(
            _gravitational_parameter=G * self.mass,
            _sphere_of_influence=sphere_of_influence,
        )

    def __setattr__(self, name, value):
        if name in _DERIVED_ATTRIBUTES:
            raise AttributeError(f"'{name}' is derived at construction and cannot be assigned")
        super().__setattr__(name, value)

    @computed_field
    @property
    def gravitational_parameter(self) -> float:
        return self._gravitational_parameter

    @computed_field
    @property
    def sphere_of_influence(self) -> Optional[float]:
        return self._sphere_of_influence

    @property
    def parent(self) -> Optional['CelestialBody']:
        """The body this one orbits, or None for the root star."""
        return self.orbit.reference_body if self.orbit is not None else None

    @property
    def depth(self) -> int:
        """Number of orbital levels between this body and the root star."""
        depth = 0
        body = self
        while body.orbit is not None:
            body = body.orbit.reference_body
            depth += 1
        return depth

    def is_root(self) -> bool:
        """Check if this body is the root of the system (has no orbit)"""
        return self.orbit is None

    def circular_orbit_velocity(self, altitude):
        """
        Compute the speed of a circular orbit at the given altitude.

        v = sqrt(mu / (altitude + radius))

        Args:
            altitude: Altitude above the surface (m), a float or numpy array

        Returns:
            Circular orbit speed (m/s), a float for scalar input

        Raises:
            InvalidParameter: If altitude + radius is not positive

        Examples:
            >>> kerbin.circular_orbit_velocity(0.0)  # ~2426 m/s at the surface
            >>> kerbin.circular_orbit_velocity(np.linspace(70e3, 250e3, 10))
        """
        r = np.asarray(altitude, dtype=float) + self.radius
        if np.any(np.isnan(r)) or np.any(r <= 0.0):
            raise InvalidParameter(
                f"{self.name}: altitude must be above -{self.radius:g} m (the body's center), got {altitude}"
            )
        return _to_output(np.sqrt(self.gravitational_parameter / r))

    def escape_velocity(self, altitude=0.0):
        """
        Compute the escape speed at the given altitude (m), in m/s.
        """
        return _to_output(np.sqrt(2.0) * self.circular_orbit_velocity(altitude))

    def surface_gravity(self) -> float:
        """Gravitational acceleration at the surface (m/s^2)"""
        return self.gravitational_parameter / self.radius**2

    def sidereal_time_at(self, longitude, time):
        """
        Compute the local sidereal time at a longitude and epoch.

        theta = (time / sidereal_rotation) * 2pi + pi/2 + longitude, reduced to [0, 2pi)

        Args:
            longitude: Longitude (rad), any real value, float or numpy array
            time: Time past t=0 (s), may be negative, float or numpy array

        Returns:
            Sidereal time (rad) in [0, 2pi), a float for scalar inputs

        Raises:
            UnsupportedOperation: If the body does not rotate (sidereal_rotation == 0)
            InvalidParameter: If longitude or time is not finite, or the rotation count overflows
        """
        if self.sidereal_rotation == 0.0:
            raise UnsupportedOperation(f"{self.name} does not rotate; sidereal time is undefined")

        longitude = np.asarray(longitude, dtype=float)
        time = np.asarray(time, dtype=float)
        if not (np.all(np.isfinite(longitude)) and np.all(np.isfinite(time))):
            raise InvalidParameter("longitude and time must be finite")

        with np.errstate(over='ignore'):
            raw = (time / self.sidereal_rotation) * TWO_PI + HALF_PI + longitude
        if not np.all(np.isfinite(raw)):
            raise InvalidParameter(
                f"{self.name}: time / sidereal_rotation overflows; sidereal time cannot be resolved"
            )
        result = np.fmod(raw, TWO_PI)
        result = np.where(result < 0.0, result + TWO_PI, result)
        # A tiny negative remainder plus 2pi can round up to exactly 2pi
        result = np.where(result >= TWO_PI, 0.0, result)
        return _to_output(result)

    def orbital_period(self, units: str = 's') -> float:
        """
        Compute the orbital period of the body about its reference body.

        The period is calculated using Kepler's third law:
        T = 2π√(a³/μ)

        Args:
            units: Units for the returned period. Options:
                - 's' or 'seconds': Period in seconds (default)
                - 'hour' or 'hours': Period in hours
                - 'day' or 'days': Period in 6-hour Kerbin days
                - 'year' or 'years': Period in 426-day Kerbin years

        Returns:
            Orbital period in the specified units

        Raises:
            UnsupportedOperation: If the body has no orbit
            ValueError: If units is not recognized
        """
        if self.orbit is None:
            raise UnsupportedOperation(f"{self.name} does not orbit another body")

        a = self.orbit.semi_major_axis
        mu = self.orbit.reference_body.gravitational_parameter
        period_seconds = TWO_PI * np.sqrt(a**3 / mu)

        units_lower = units.lower()
        if units_lower in ('s', 'seconds'):
            return float(period_seconds)
        elif units_lower in ('hour', 'hours'):
            return float(period_seconds / HOUR)
        elif units_lower in ('day', 'days'):
            return float(period_seconds / KERBIN_DAY)
        elif units_lower in ('year', 'years'):
            return float(period_seconds / KERBIN_YEAR)
        else:
            raise ValueError(f"Invalid units '{units}'. Must be one of: 's', 'hour', 'day', 'year'")

    def __repr__(self) -> str:
        parent = self.parent.name if self.parent is not None else None
        return f"CelestialBody(name='{self.name}', mass={self.mass:g}, parent={parent!r})"

    def __str__(self) -> str:
        return self.name


Orbit.model_rebuild()
CelestialBody.model_rebuild()
