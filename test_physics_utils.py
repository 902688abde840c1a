import unittest
import numpy as np
from physics_utils import normalize_vector, to_finite_float, clamp

class TestToFiniteFloat(unittest.TestCase):

    def test_numbers_pass_through(self):
        self.assertEqual(to_finite_float(3), 3.0)
        self.assertEqual(to_finite_float(-2.5), -2.5)
        self.assertEqual(to_finite_float(np.float64(1.25)), 1.25)

    def test_numeric_strings_are_parsed(self):
        self.assertEqual(to_finite_float("1.5"), 1.5)
        self.assertEqual(to_finite_float("  42 "), 42.0)

    def test_unusable_values_return_default(self):
        for value in (None, "", "   ", "abc", [], {}, object()):
            self.assertIsNone(to_finite_float(value))
        self.assertEqual(to_finite_float("abc", 7.0), 7.0)

    def test_non_finite_values_return_default(self):
        self.assertIsNone(to_finite_float(float('nan')))
        self.assertIsNone(to_finite_float(float('inf')))
        self.assertIsNone(to_finite_float("-inf"))
        self.assertIsNone(to_finite_float("NaN"))

    def test_booleans_are_not_numbers(self):
        self.assertIsNone(to_finite_float(True))
        self.assertEqual(to_finite_float(False, 9.0), 9.0)

class TestClamp(unittest.TestCase):

    def test_clamp(self):
        self.assertEqual(clamp(5, 0, 1), 1)
        self.assertEqual(clamp(-5, 0, 1), 0)
        self.assertEqual(clamp(0.5, 0, 1), 0.5)

class TestNormalizeVector(unittest.TestCase):

    def test_normalize_typical_vector(self):
        np.testing.assert_array_almost_equal(normalize_vector(np.array([3.0, 4.0])), np.array([0.6, 0.8]))
        np.testing.assert_array_almost_equal(normalize_vector([0.0, -2.0, 0.0]), np.array([0.0, -1.0, 0.0]))

    def test_normalize_zero_vector(self):
        np.testing.assert_array_almost_equal(normalize_vector(np.array([0.0, 0.0, 0.0])), np.zeros(3))
        np.testing.assert_array_almost_equal(normalize_vector(np.array([1e-15, 1e-15])), np.zeros(2))

if __name__ == '__main__':
    unittest.main()
