"""
Physical and angular constants for the Kerbol system catalog.

This module contains all constants used throughout the catalog.
"""

import numpy as np

# Gravitational constant
G = 6.674e-11  # m^3 / (kg s^2)

# Angles
TWO_PI = 2.0 * np.pi
HALF_PI = 0.5 * np.pi

# Sphere of influence: r_soi = a * (m / M) ** SOI_EXPONENT
SOI_EXPONENT = 0.4

# Time units (seconds)
HOUR = 3600.0
KERBIN_DAY = 6.0 * HOUR  # seconds per Kerbin day
KERBIN_YEAR = 426.0 * KERBIN_DAY  # seconds per Kerbin year
