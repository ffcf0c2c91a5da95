"""
The Kerbol system catalog.

The bodies are defined by a literal table of physical constants and orbital
elements and built once, parents before satellites, into a read-only mapping.
"""
from __future__ import annotations

import logging
import threading
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Union

from kerbol.bodies import CelestialBody
from kerbol.errors import InvalidParameter
from kerbol.orbit import Orbit

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BodyDefinition:
    """One row of the catalog table. Orbit columns are None for the root star."""

    name: str
    mass: float  # kg
    radius: float  # m
    sidereal_rotation: float  # s
    parent: Optional[str] = None
    semi_major_axis: Optional[float] = None  # m
    eccentricity: Optional[float] = None
    inclination: Optional[float] = None  # deg
    longitude_of_ascending_node: Optional[float] = None  # deg
    argument_of_periapsis: Optional[float] = None  # deg
    mean_anomaly_at_epoch: Optional[float] = None  # rad


def _planet(name, mass, radius, rotation, parent, a, e, i, lan, argp, m0) -> BodyDefinition:
    return BodyDefinition(
        name=name,
        mass=mass,
        radius=radius,
        sidereal_rotation=rotation,
        parent=parent,
        semi_major_axis=a,
        eccentricity=e,
        inclination=i,
        longitude_of_ascending_node=lan,
        argument_of_periapsis=argp,
        mean_anomaly_at_epoch=m0,
    )


# ---------------------------------------------------------------------------
# Catalog table
# ---------------------------------------------------------------------------
#            name            mass                  radius      rotation           parent    a               e        i      LAN    argP   M0
BODY_DEFINITIONS: Tuple[BodyDefinition, ...] = (
    BodyDefinition('Kerbol', 1.756567e+28, 2.616e+08, 0),
    _planet('Ablate',       8.94276895415044E+18, 13000,   159300.265559099,  'Kerbol', 910000000,      0,       5,     0,     0,     5.09991320798),
    _planet('Moho',         3.6747079e21,         250000,  1210000,           'Kerbol', 5263138304,     0.2,     7.0,   70.0,  15.0,  3.14),
    _planet('Eve',          1.2244127e23,         700000,  80500,             'Kerbol', 9832684544,     0.01,    2.1,   15.0,  0,     3.14),
    _planet('Gilly',        1.2420512e17,         13000,   28255,             'Eve',    31500000,       0.55,    12.0,  80.0,  10.0,  0.9),
    _planet('Kerbin',       5.2915793e22,         600000,  21600,             'Kerbol', 13599840256,    0.0,     0,     0,     0,     3.14),
    _planet('Mun',          9.7600236e20,         200000,  138984.38,         'Kerbin', 12000000,       0.0,     0,     0,     0,     1.7),
    _planet('Minimus',      2.6457897e19,         60000,   40400,             'Kerbin', 47000000,       0.0,     6.0,   78.0,  38.0,  0.9),
    _planet('Duna',         4.5154812e21,         320000,  65517.859,         'Kerbol', 20726155264,    0.051,   0.06,  135.5, 0,     3.14),
    _planet('Ike',          2.7821949e20,         130000,  65517.862,         'Duna',   3200000,        0.03,    0.2,   0,     0,     1.7),
    _planet('Dres',         3.2191322e20,         138000,  34800,             'Kerbol', 40839348203,    0.145,   5.0,   280.0, 90.0,  3.14),
    _planet('Jool',         4.2332635e24,         6000000, 36000,             'Kerbol', 68773560320,    0.05,    1.304, 52.0,  0,     0.1),
    _planet('Laythe',       2.9397663e22,         500000,  52980.879,         'Jool',   27184000,       0,       0,     0,     0,     3.14),
    _planet('Vall',         3.1088028e21,         300000,  105962.09,         'Jool',   43152000,       0,       0,     0,     0,     0.9),
    _planet('Tylo',         4.2332635e22,         600000,  211926.36,         'Jool',   68500000,       0,       0.025, 0,     0,     3.14),
    _planet('Bop',          3.7261536e19,         65000,   544507.4,          'Jool',   128500000,      0.235,   15.0,  10.0,  25.0,  0.9),
    _planet('Pol',          1.0813636e19,         44000,   901902.62,         'Jool',   179890000,      0.17085, 4.25,  2.0,   15.0,  0.9),
    _planet('Eeloo',        1.1149358e21,         210000,  19460,             'Kerbol', 90118820000,    0.26,    6.15,  50.0,  260.0, 3.14),
    _planet('Ascension',    1.90144081510339E+19, 14000,   4040,              'Kerbol', 100000000000,   0.97,    19,    0,     0,     1.827643209),
    _planet('Inaccessible', 3.96868444710818E+18, 15000,   440,               'Kerbol', 125000000000,   0.01,    2,     0,     0,     6.04892620778),
    _planet('Sentar',       5.09314680671058E+23, 6000000, 36000,             'Kerbol', 160000000000,   0,       26,    0,     0,     0),
    _planet('Skelton',      4.51548115036107E+21, 320000,  65517.859375,      'Sentar', 50000000,       0,       160,   0,     0,     0),
    _planet('Erin',         2.9397663009231E+22,  500000,  21600,             'Sentar', 80000000,       0,       15,    0,     0,     0),
    _planet('Ringle',       4.23326347332927E+22, 600000,  491383.972112887,  'Sentar', 120000000,      0,       15,    0,     0,     0),
    _planet('Thud',         1.66155588852263E+23, 600000,  1751403.30360751,  'Sentar', 280000000,      0.25,    20,    0,     0,     0),
)


# Alternate attribute spellings -> catalog names
ATTRIBUTE_ALIASES: Dict[str, str] = {
    'Inaccessable': 'Inaccessible',
}


class Catalog(Mapping):
    """
    Read-only mapping of body name to CelestialBody, iterating in build order.

    Bodies are also reachable as attributes, e.g. ``catalog.Kerbin``. The
    legacy attribute name ``Inaccessable`` resolves to ``Inaccessible``; it is
    accepted for attribute access only and is not a mapping key.
    """

    def __init__(self, bodies: Sequence[CelestialBody]):
        self._bodies: Dict[str, CelestialBody] = {body.name: body for body in bodies}

    def __getitem__(self, name: str) -> CelestialBody:
        return self._bodies[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._bodies)

    def __len__(self) -> int:
        return len(self._bodies)

    def __getattr__(self, name: str) -> CelestialBody:
        # Only called when normal lookup fails
        try:
            return self.__dict__['_bodies'][ATTRIBUTE_ALIASES.get(name, name)]
        except KeyError:
            raise AttributeError(f"Catalog has no body named '{name}'") from None

    def __setattr__(self, name, value):
        if '_bodies' in self.__dict__:
            raise AttributeError("Catalog is read-only")
        super().__setattr__(name, value)

    def __dir__(self):
        return list(super().__dir__()) + list(self._bodies)

    def __repr__(self) -> str:
        return f"Catalog({', '.join(self._bodies)})"

    @property
    def root(self) -> CelestialBody:
        """The body at the root of the orbital hierarchy (the star)."""
        return next(body for body in self._bodies.values() if body.is_root())

    def _resolve(self, body: Union[str, CelestialBody]) -> CelestialBody:
        if isinstance(body, CelestialBody):
            return self._bodies[body.name]
        return self._bodies[body]

    def satellites_of(self, body: Union[str, CelestialBody]) -> List[CelestialBody]:
        """
        The bodies directly orbiting the given body, in build order.

        Args:
            body: Body name or CelestialBody

        Returns:
            List of satellites (empty if the body has none)
        """
        parent = self._resolve(body)
        return [b for b in self._bodies.values() if b.parent is not None and b.parent.name == parent.name]

    def hierarchy(self, body: Union[str, CelestialBody]) -> List[CelestialBody]:
        """
        The chain of bodies from the given body up to the root star.

        Examples:
            >>> [b.name for b in get_catalog().hierarchy('Mun')]
            ['Mun', 'Kerbin', 'Kerbol']
        """
        chain = [self._resolve(body)]
        while chain[-1].parent is not None:
            chain.append(chain[-1].parent)
        return chain


def _build_order(definitions: Sequence[BodyDefinition]) -> List[BodyDefinition]:
    """
    Order the table so that every parent precedes its satellites.

    A table that already lists parents first keeps its order; otherwise rows
    whose parent is not yet placed are deferred to a later pass.
    """
    by_name: Dict[str, BodyDefinition] = {}
    for definition in definitions:
        if definition.name in by_name:
            raise InvalidParameter(f"Duplicate body name '{definition.name}' in catalog table")
        by_name[definition.name] = definition

    roots = [d.name for d in definitions if d.parent is None]
    if len(roots) != 1:
        raise InvalidParameter(f"Catalog table must have exactly one root body, found {roots}")

    for definition in definitions:
        if definition.parent is not None and definition.parent not in by_name:
            raise InvalidParameter(f"{definition.name}: unknown parent body '{definition.parent}'")

    ordered: List[BodyDefinition] = []
    placed = set()
    pending = list(definitions)
    while pending:
        deferred = []
        for definition in pending:
            if definition.parent is None or definition.parent in placed:
                ordered.append(definition)
                placed.add(definition.name)
            else:
                deferred.append(definition)
        if len(deferred) == len(pending):
            names = sorted(d.name for d in deferred)
            raise InvalidParameter(f"Catalog table has an orbital cycle among {names}")
        pending = deferred
    return ordered


def build_catalog(definitions: Sequence[BodyDefinition] = BODY_DEFINITIONS) -> Catalog:
    """
    Build every body in the table, parents before satellites.

    Args:
        definitions: Catalog rows (defaults to the Kerbol system table)

    Returns:
        Catalog mapping body names to CelestialBody objects

    Raises:
        InvalidParameter: If the table is malformed or a row has invalid values
    """
    bodies: Dict[str, CelestialBody] = {}
    for definition in _build_order(definitions):
        orbit = None
        if definition.parent is not None:
            orbit = Orbit(
                reference_body=bodies[definition.parent],
                semi_major_axis=definition.semi_major_axis,
                eccentricity=definition.eccentricity,
                inclination=definition.inclination,
                longitude_of_ascending_node=definition.longitude_of_ascending_node,
                argument_of_periapsis=definition.argument_of_periapsis,
                mean_anomaly_at_epoch=definition.mean_anomaly_at_epoch,
            )
        body = CelestialBody(
            name=definition.name,
            mass=definition.mass,
            radius=definition.radius,
            sidereal_rotation=definition.sidereal_rotation,
            orbit=orbit,
        )
        logger.debug("Built %s (mu=%.6e m^3/s^2, soi=%s m)", body.name,
                     body.gravitational_parameter, body.sphere_of_influence)
        bodies[body.name] = body

    return Catalog(list(bodies.values()))


_catalog: Optional[Catalog] = None
_catalog_lock = threading.Lock()


def get_catalog() -> Catalog:
    """
    Return the shared Kerbol system catalog, building it on first use.

    Returns:
        The process-wide Catalog (the same object on every call)
    """
    global _catalog
    if _catalog is None:
        with _catalog_lock:
            if _catalog is None:
                _catalog = build_catalog()
                logger.info("Kerbol catalog built with %d bodies", len(_catalog))
    return _catalog
