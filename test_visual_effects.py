import unittest
import numpy as np
import pygame
from config import config
from visual_effects import StarField, circle_points, draw_glow, teff_to_rgb, zone_rings

class TestStarColor(unittest.TestCase):

    def test_cool_star_is_red(self):
        self.assertEqual(teff_to_rgb(2500), (255, 51, 0))

    def test_unknown_temperature_renders_as_sun(self):
        sun = teff_to_rgb(5778)
        self.assertEqual(teff_to_rgb(None), sun)
        self.assertEqual(teff_to_rgb(0), sun)
        self.assertEqual(teff_to_rgb(-300), sun)
        self.assertEqual(teff_to_rgb(float('nan')), sun)

    def test_hot_star_is_blue(self):
        r, g, b = teff_to_rgb(30000)
        self.assertEqual(b, 255)
        self.assertLess(r, b)

    def test_channels_in_range(self):
        for teff in (100, 2000, 3100, 4000, 5800, 7500, 9000, 12000, 25000, 40000, 1e6):
            for channel in teff_to_rgb(teff):
                self.assertTrue(0 <= channel <= 255, teff)
                self.assertIsInstance(channel, int)

class TestZoneGeometry(unittest.TestCase):

    def test_rings(self):
        rings = zone_rings(0.75, 1.77)
        colors = config.Visualization.COLORS
        self.assertEqual(rings[0], (0.0, 0.75, colors['zone_too_close']))
        self.assertEqual(rings[1], (0.75, 1.77, colors['zone_habitable']))
        self.assertEqual(rings[2][0], 1.77)
        self.assertAlmostEqual(rings[2][1], 2.79)
        self.assertEqual(rings[2][2], colors['zone_too_far'])

    def test_circle_points(self):
        points = circle_points(2.0, 32)
        self.assertEqual(points.shape, (33, 3))
        np.testing.assert_allclose(np.linalg.norm(points, axis=1), 2.0)
        self.assertTrue(np.all(points[:, 1] == 0.0))
        self.assertEqual(len(circle_points(1.0)), config.Visualization.ZONE_RING_SEGMENTS + 1)

class TestDrawing(unittest.TestCase):

    def setUp(self):
        self.surface = pygame.Surface((120, 80))

    def test_starfield_is_seeded(self):
        a = StarField(120, 80, star_count=100, seed=7)
        b = StarField(120, 80, star_count=100, seed=7)
        self.assertEqual(sum(len(layer['stars']) for layer in a.star_layers), 100)
        np.testing.assert_array_equal(a.star_layers[0]['stars'][0]['pos'], b.star_layers[0]['stars'][0]['pos'])
        a.draw(self.surface, np.array([0.3, 1.2]))

    def test_glow_brightens_centre(self):
        draw_glow(self.surface, (60, 40), 10, (255, 200, 100))
        self.assertGreater(self.surface.get_at((60, 40)).r, 0)
        self.assertEqual(self.surface.get_at((0, 0)).r, 0)

if __name__ == '__main__':
    unittest.main()
