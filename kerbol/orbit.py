"""
Orbit of a celestial body about its reference body.
"""
from typing import TYPE_CHECKING

import numpy as np
import pydantic
from pydantic import ConfigDict, Field

from kerbol.errors import InvalidParameter
from kerbol.orbital_elements import OrbitalElements

if TYPE_CHECKING:
    from kerbol.bodies import CelestialBody


class Orbit(pydantic.BaseModel):
    """
    Keplerian orbit of a body around a reference body.

    The reference body must already be constructed, so reference bodies are
    always built before their satellites. Angles are in degrees except the
    mean anomaly at epoch, which is in radians.

    Attributes:
        reference_body: The body being orbited
        semi_major_axis: Semi-major axis (m)
        eccentricity: Eccentricity (dimensionless)
        inclination: Inclination (deg)
        longitude_of_ascending_node: Longitude of the ascending node (deg)
        argument_of_periapsis: Argument of periapsis (deg)
        mean_anomaly_at_epoch: Mean anomaly at epoch t=0 (rad)
    """
    model_config = ConfigDict(frozen=True)

    reference_body: 'CelestialBody' = Field(..., repr=False)
    semi_major_axis: float
    eccentricity: float
    inclination: float
    longitude_of_ascending_node: float
    argument_of_periapsis: float
    mean_anomaly_at_epoch: float

    @pydantic.model_validator(mode='before')
    @classmethod
    def validate_reference_body(cls, data):
        from kerbol.bodies import CelestialBody

        if isinstance(data, dict) and not isinstance(data.get('reference_body'), CelestialBody):
            raise InvalidParameter(
                f"Orbit reference_body must be a constructed CelestialBody, "
                f"got {data.get('reference_body')!r}"
            )
        return data

    @property
    def elements(self) -> OrbitalElements:
        """
        The classical orbital elements with every angle in radians.

        Returns:
            OrbitalElements with a in meters and i, Omega, omega, M0 in radians
        """
        return OrbitalElements(
            a=self.semi_major_axis,
            e=self.eccentricity,
            i=float(np.deg2rad(self.inclination)),
            Omega=float(np.deg2rad(self.longitude_of_ascending_node)),
            omega=float(np.deg2rad(self.argument_of_periapsis)),
            M0=self.mean_anomaly_at_epoch,
        )

    def __str__(self) -> str:
        return f"Orbit(about {self.reference_body.name}, a={self.semi_major_axis:g} m, e={self.eccentricity:g})"
