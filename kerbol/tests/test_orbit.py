"""Tests for Orbit and its radian element view."""
import unittest

import numpy as np
from pydantic import ValidationError

from kerbol import CelestialBody, Orbit, OrbitalElements, InvalidParameter, get_catalog


class TestOrbit(unittest.TestCase):

    def setUp(self):
        self.star = CelestialBody(name='Kerbol', mass=1.756567e+28, radius=2.616e+08, sidereal_rotation=0)

    def test_fields(self):
        """Test that an Orbit keeps its reference body and elements."""
        orbit = Orbit(reference_body=self.star, semi_major_axis=5263138304, eccentricity=0.2,
                      inclination=7.0, longitude_of_ascending_node=70.0, argument_of_periapsis=15.0,
                      mean_anomaly_at_epoch=3.14)
        self.assertIs(orbit.reference_body, self.star)
        self.assertEqual(orbit.semi_major_axis, 5263138304)
        self.assertEqual(orbit.eccentricity, 0.2)
        self.assertEqual(orbit.inclination, 7.0)
        self.assertEqual(orbit.longitude_of_ascending_node, 70.0)
        self.assertEqual(orbit.argument_of_periapsis, 15.0)
        self.assertEqual(orbit.mean_anomaly_at_epoch, 3.14)
        self.assertIn("Kerbol", str(orbit))

    def test_missing_reference_body(self):
        """Test that a None reference body raises InvalidParameter."""
        with self.assertRaises(InvalidParameter) as cm:
            Orbit(reference_body=None, semi_major_axis=1.0e6, eccentricity=0.0, inclination=0.0,
                  longitude_of_ascending_node=0.0, argument_of_periapsis=0.0, mean_anomaly_at_epoch=0.0)
        self.assertIn("reference_body", str(cm.exception))

    def test_reference_body_wrong_type(self):
        """Test that a non-body reference raises InvalidParameter."""
        with self.assertRaises(InvalidParameter):
            Orbit(reference_body='Kerbol', semi_major_axis=1.0e6, eccentricity=0.0, inclination=0.0,
                  longitude_of_ascending_node=0.0, argument_of_periapsis=0.0, mean_anomaly_at_epoch=0.0)

    def test_missing_element(self):
        """Test that a missing element raises ValidationError."""
        with self.assertRaises(ValidationError):
            Orbit(reference_body=self.star, semi_major_axis=1.0e6, eccentricity=0.0, inclination=0.0,
                  longitude_of_ascending_node=0.0, argument_of_periapsis=0.0)

    def test_frozen(self):
        """Test that assigning an element raises ValidationError."""
        orbit = get_catalog().Kerbin.orbit
        with self.assertRaises(ValidationError):
            orbit.eccentricity = 0.5

    def test_elements_in_radians(self):
        """Test that elements converts degrees to radians."""
        elements = get_catalog().Minimus.orbit.elements
        self.assertIsInstance(elements, OrbitalElements)
        self.assertEqual(elements.a, 47000000)
        self.assertEqual(elements.e, 0.0)
        self.assertAlmostEqual(elements.i, np.deg2rad(6.0))
        self.assertAlmostEqual(elements.Omega, np.deg2rad(78.0))
        self.assertAlmostEqual(elements.omega, np.deg2rad(38.0))
        self.assertEqual(elements.M0, 0.9)

    def test_retrograde_inclination(self):
        """Test the radian inclination of a retrograde orbit."""
        elements = get_catalog().Skelton.orbit.elements
        self.assertAlmostEqual(elements.i, 160.0 * np.pi / 180.0)
        self.assertGreater(elements.i, np.pi / 2)


if __name__ == '__main__':
    unittest.main()
