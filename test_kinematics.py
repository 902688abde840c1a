import math
import unittest
import numpy as np
from kinematics import OrbitalKinematics, PhaseClock, elapsed_days, elapsed_years

class TestPhaseClock(unittest.TestCase):

    def test_starts_at_zero(self):
        self.assertEqual(PhaseClock().theta, 0.0)

    def test_only_moves_forward(self):
        clock = PhaseClock()
        clock.advance(0.5)
        clock.advance(-1.0)
        clock.advance(float('nan'))
        clock.advance(float('inf'))
        self.assertAlmostEqual(clock.theta, 0.5)

    def test_instances_are_independent(self):
        a, b = PhaseClock(), PhaseClock()
        a.advance(1.0)
        self.assertEqual(b.theta, 0.0)

class TestOrbitGeometry(unittest.TestCase):

    def test_circular_radius_is_constant(self):
        kin = OrbitalKinematics(2.0, 0.0, 1.26)
        for theta in np.linspace(0, 2 * math.pi, 9):
            self.assertAlmostEqual(kin.radius_at_phase(theta), 2.0)

    def test_periapsis_and_apoapsis(self):
        kin = OrbitalKinematics(1.0, 0.5, 1.26)
        self.assertAlmostEqual(kin.radius_at_phase(0.0), 0.5)      # a(1 - e)
        self.assertAlmostEqual(kin.radius_at_phase(math.pi), 1.5)  # a(1 + e)

    def test_position_in_orbital_plane(self):
        kin = OrbitalKinematics(1.0, 0.2, 1.26)
        pos = kin.position_at_phase(math.pi / 2)
        r = kin.radius_at_phase(math.pi / 2)
        np.testing.assert_array_almost_equal(pos, np.array([0.0, 0.0, r]))
        self.assertEqual(pos[1], 0.0)

    def test_orbit_points_shape_and_closure(self):
        kin = OrbitalKinematics(1.5, 0.3, 1.26)
        points = kin.orbit_points(64)
        self.assertEqual(points.shape, (65, 3))
        np.testing.assert_array_almost_equal(points[0], points[-1])
        np.testing.assert_array_almost_equal(points[0], kin.position_at_phase(0.0))
        np.testing.assert_array_almost_equal(points[16], kin.position_at_phase(math.pi / 2))
        self.assertTrue(np.all(points[:, 1] == 0.0))

class TestPhaseStepping(unittest.TestCase):

    def test_reference_circular_orbit_rate_is_one(self):
        kin = OrbitalKinematics(1.26, 0.0, 1.26)
        self.assertAlmostEqual(kin.phase_rate(0.0), 1.0)
        self.assertAlmostEqual(kin.phase_rate(2.0), 1.0)

    def test_faster_at_periapsis_than_apoapsis(self):
        kin = OrbitalKinematics(1.0, 0.5, 1.26)
        rate_peri = kin.phase_rate(0.0)
        rate_apo = kin.phase_rate(math.pi)
        # Kepler II: rate ~ 1 / r^2, and r_apo / r_peri = 3
        self.assertAlmostEqual(rate_peri / rate_apo, 9.0)

    def test_rate_formula(self):
        a, e, ref = 2.0, 0.3, 1.26
        kin = OrbitalKinematics(a, e, ref)
        theta = 1.1
        r = kin.radius_at_phase(theta)
        expected = (ref / a) * (a / r) ** 2 * math.sqrt(1 - e * e)
        self.assertAlmostEqual(kin.phase_rate(theta), expected)

    def test_tiny_orbit_still_moves(self):
        kin = OrbitalKinematics(1e-13, 0.0, 1.26)
        clock = PhaseClock()
        kin.advance(clock, 1e-12)
        self.assertGreater(clock.theta, 0.0)
        self.assertAlmostEqual(kin.phase_rate(0.0), 1.26e13, delta=1e3)

    def test_radius_floor_bounds_rate(self):
        kin = OrbitalKinematics(1.0, 0.999, 1.0)
        r_peri = kin.radius_at_phase(0.0)
        self.assertLess(r_peri, 0.01)
        expected = 1.0 * (1.0 / 0.01) ** 2 * math.sqrt(1 - 0.999 ** 2)
        self.assertAlmostEqual(kin.phase_rate(0.0), expected)

    def test_advance_moves_clock(self):
        kin = OrbitalKinematics(1.26, 0.0, 1.26)
        clock = PhaseClock()
        kin.advance(clock, 0.25)
        kin.advance(clock, 0.25)
        self.assertAlmostEqual(clock.theta, 0.5)

    def test_advance_ignores_non_positive_delta(self):
        kin = OrbitalKinematics(1.0, 0.1, 1.26)
        clock = PhaseClock()
        kin.advance(clock, 0.0)
        kin.advance(clock, -0.3)
        kin.advance(clock, float('nan'))
        self.assertEqual(clock.theta, 0.0)

class TestElapsedTime(unittest.TestCase):

    def test_one_revolution_is_one_period(self):
        self.assertEqual(elapsed_days(2 * math.pi, 365.0), 365.0)
        self.assertEqual(elapsed_days(2 * math.pi, 3.14159), 3.14159)

    def test_half_revolution(self):
        self.assertAlmostEqual(elapsed_days(math.pi, 100.0), 50.0)

    def test_years(self):
        self.assertAlmostEqual(elapsed_years(2 * math.pi, 365.25), 1.0)

if __name__ == '__main__':
    unittest.main()
