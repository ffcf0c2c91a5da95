from .orbital_elements import OrbitalElements

from .constants import (
    # Constants
    G,
    TWO_PI,
    HALF_PI,
    SOI_EXPONENT,
    HOUR,
    KERBIN_DAY,
    KERBIN_YEAR,
)

from .errors import (
    # Exceptions
    CatalogError,
    InvalidParameter,
    UnsupportedOperation,
)

from .orbit import Orbit

from .bodies import (
    # Body class
    CelestialBody,
)

from .catalog import (
    # Catalog
    BodyDefinition,
    BODY_DEFINITIONS,
    Catalog,
    build_catalog,
    get_catalog,
)

__all__ = [
    # Constants
    "G",
    "TWO_PI",
    "HALF_PI",
    "SOI_EXPONENT",
    "HOUR",
    "KERBIN_DAY",
    "KERBIN_YEAR",

    # Exceptions
    "CatalogError",
    "InvalidParameter",
    "UnsupportedOperation",

    # Named tuples
    "OrbitalElements",

    # Models
    "Orbit",
    "CelestialBody",

    # Catalog
    "BodyDefinition",
    "BODY_DEFINITIONS",
    "Catalog",
    "build_catalog",
    "get_catalog",
]
