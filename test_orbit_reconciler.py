import unittest
from orbit_reconciler import (is_consistent_with_period, reconcile_semi_major_axis,
                              semi_major_axis_from_period)

class TestKeplerThirdLaw(unittest.TestCase):

    def test_earth(self):
        self.assertAlmostEqual(semi_major_axis_from_period(365.25, 1.0), 1.0)
        self.assertAlmostEqual(semi_major_axis_from_period(365.0, 1.0), 1.0, places=3)

    def test_jupiter_like(self):
        # 11.86 yr around the Sun -> 5.2 AU
        self.assertAlmostEqual(semi_major_axis_from_period(11.862 * 365.25, 1.0), 5.2, places=2)

    def test_mass_scaling(self):
        a1 = semi_major_axis_from_period(100.0, 1.0)
        a8 = semi_major_axis_from_period(100.0, 8.0)
        self.assertAlmostEqual(a8 / a1, 2.0)

    def test_mass_floor(self):
        self.assertAlmostEqual(semi_major_axis_from_period(365.25, 0.0),
                               semi_major_axis_from_period(365.25, 0.1))
        self.assertAlmostEqual(semi_major_axis_from_period(365.25, -3.0),
                               semi_major_axis_from_period(365.25, 0.1))

    def test_huge_period_stays_finite(self):
        self.assertLess(semi_major_axis_from_period(1e300, 1.0), float('inf'))

class TestReconcile(unittest.TestCase):

    def test_consistent_catalog_value_kept(self):
        self.assertEqual(reconcile_semi_major_axis(1.1, 365.25, 1.0), 1.1)

    def test_band_edges(self):
        derived = semi_major_axis_from_period(200.0, 0.8)
        self.assertTrue(is_consistent_with_period(derived * 0.5, derived))
        self.assertTrue(is_consistent_with_period(derived * 2.0, derived))
        self.assertFalse(is_consistent_with_period(derived * 2.01, derived))
        self.assertFalse(is_consistent_with_period(derived * 0.49, derived))

    def test_three_times_derived_is_discarded(self):
        derived = semi_major_axis_from_period(50.0, 0.9)
        self.assertAlmostEqual(reconcile_semi_major_axis(3.0 * derived, 50.0, 0.9), derived)

    def test_one_and_a_half_times_derived_is_accepted(self):
        derived = semi_major_axis_from_period(50.0, 0.9)
        self.assertEqual(reconcile_semi_major_axis(1.5 * derived, 50.0, 0.9), 1.5 * derived)

    def test_placeholder_one_au_rejected_for_short_period(self):
        derived = semi_major_axis_from_period(3.5, 1.0)
        self.assertAlmostEqual(reconcile_semi_major_axis(1.0, 3.5, 1.0), derived)

    def test_missing_catalog_value_uses_derived(self):
        self.assertAlmostEqual(reconcile_semi_major_axis(None, 365.0, 1.0), 1.0, places=3)
        self.assertAlmostEqual(reconcile_semi_major_axis("n/a", 365.0, 1.0), 1.0, places=3)

    def test_unknown_mass_defaults_to_one_solar_mass(self):
        self.assertAlmostEqual(reconcile_semi_major_axis(None, 365.25, None), 1.0)

    def test_without_period_catalog_value_is_taken(self):
        self.assertEqual(reconcile_semi_major_axis(0.3, None, 1.0), 0.3)
        self.assertEqual(reconcile_semi_major_axis(40.0, None, None), 40.0)

    def test_without_period_or_catalog_uses_default_period(self):
        self.assertAlmostEqual(reconcile_semi_major_axis(None, None, None), 1.0, places=3)

    def test_non_positive_catalog_value_ignored(self):
        self.assertAlmostEqual(reconcile_semi_major_axis(0.0, None, 1.0), 1.0, places=3)
        self.assertAlmostEqual(reconcile_semi_major_axis(-2.0, 365.25, 1.0), 1.0)

if __name__ == '__main__':
    unittest.main()
