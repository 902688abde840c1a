import pygame
import numpy as np
import math
import random
from typing import List, Optional, Tuple

from config import config, TWO_PI

# Key points: 2500 red, 4000 orange, 5800 yellow, 7500 white, 12000 blue-white, 25000 blue
TEFF_COLOR_KEYS = [
    (2500.0, (1.0, 0.2, 0.0)),
    (4000.0, (1.0, 0.5, 0.0)),
    (5800.0, (1.0, 0.9, 0.4)),
    (7500.0, (1.0, 0.95, 0.95)),
    (12000.0, (0.8, 0.85, 1.0)),
    (25000.0, (0.5, 0.6, 1.0)),
]
SOLAR_TEFF_K = 5778.0
MIN_TEFF_K = 2000.0
MAX_TEFF_K = 40000.0

def teff_to_rgb(teff_k: Optional[float]) -> Tuple[int, int, int]:
    """Star colour from effective temperature: red -> orange -> yellow -> white -> blue.

    Unknown or non-positive temperatures render as the Sun. Temperatures outside
    the key range extrapolate along the nearest segment, then clamp to 0..255.
    """
    if teff_k is None or not math.isfinite(teff_k) or teff_k <= 0:
        t = SOLAR_TEFF_K
    else:
        t = max(MIN_TEFF_K, min(MAX_TEFF_K, teff_k))

    i = 0
    while i + 1 < len(TEFF_COLOR_KEYS) - 1 and TEFF_COLOR_KEYS[i + 1][0] < t:
        i += 1
    t_a, rgb_a = TEFF_COLOR_KEYS[i]
    t_b, rgb_b = TEFF_COLOR_KEYS[i + 1]
    f = (t - t_a) / (t_b - t_a)
    return tuple(
        max(0, min(255, round(255 * (a + f * (b - a)))))
        for a, b in zip(rgb_a, rgb_b)
    )

def zone_rings(hz_inner: float, hz_outer: float) -> List[Tuple[float, float, Tuple[int, int, int]]]:
    """Concentric bands as (inner radius, outer radius, colour), innermost first.

    Red disk from the star to the inner edge, green habitable ring, then a blue
    band as wide as the habitable zone beyond its outer edge.
    """
    colors = config.Visualization.COLORS
    outer_blue = hz_outer + (hz_outer - hz_inner)
    return [
        (0.0, hz_inner, colors['zone_too_close']),
        (hz_inner, hz_outer, colors['zone_habitable']),
        (hz_outer, outer_blue, colors['zone_too_far']),
    ]

def circle_points(radius: float, segments: int = None) -> np.ndarray:
    """Closed circle of `radius` in the orbital (x-z) plane, shape (segments + 1, 3)."""
    if segments is None:
        segments = config.Visualization.ZONE_RING_SEGMENTS
    angles = np.linspace(0.0, TWO_PI, segments + 1)
    points = np.zeros((segments + 1, 3), dtype=np.float64)
    points[:, 0] = radius * np.cos(angles)
    points[:, 2] = radius * np.sin(angles)
    return points

def draw_glow(surface, pos, radius, color):
    """Additive layered glow around a screen position."""
    if radius <= 1: # Min radius for visibility
        return

    for i in range(3): # Number of glow layers
        layer_radius = radius * (1.0 - i * 0.25)
        layer_alpha = int(120 * (1.0 - i * 0.3))

        if layer_radius > 1 and layer_alpha > 10:
            glow_color_with_alpha = (*color, layer_alpha)
            temp_surface_size = int(layer_radius * 2)
            if temp_surface_size <= 0: continue
            glow_surf = pygame.Surface((temp_surface_size, temp_surface_size), pygame.SRCALPHA)
            pygame.draw.circle(glow_surf, glow_color_with_alpha,
                               (int(layer_radius), int(layer_radius)),
                               int(layer_radius))
            surface.blit(glow_surf,
                         (int(pos[0] - layer_radius), int(pos[1] - layer_radius)),
                         special_flags=pygame.BLEND_RGBA_ADD)

class StarField:
    def __init__(self, width, height, star_count=200, seed=None):
        self.width = width
        self.height = height
        rng = random.Random(seed)

        self.star_layers = [
            {'stars': [], 'speed_factor': 20.0, 'base_brightness': 0.4, 'size': 1, 'count': int(star_count * 0.5)},  # Farthest
            {'stars': [], 'speed_factor': 60.0, 'base_brightness': 0.7, 'size': 1, 'count': int(star_count * 0.3)}, # Mid
            {'stars': [], 'speed_factor': 120.0, 'base_brightness': 1.0, 'size': 2, 'count': int(star_count * 0.2)},  # Near
        ]

        for layer in self.star_layers:
            for _ in range(layer['count']):
                star = {
                    'pos': np.array([rng.uniform(0, width), rng.uniform(0, height)]),
                    'brightness_mod': rng.uniform(0.5, 1.0),
                    'twinkle_phase': rng.uniform(0, 2 * math.pi),
                    'twinkle_speed': rng.uniform(0.002, 0.008)
                }
                layer['stars'].append(star)

    def draw(self, surface, camera_angles=np.array([0.0, 0.0])):
        """Draws the background; `camera_angles` (azimuth, polar) shifts layers for parallax."""
        time_ms = pygame.time.get_ticks()

        for layer in self.star_layers:
            parallax_shift = np.asarray(camera_angles, dtype=float) * layer['speed_factor']

            for star in layer['stars']:
                screen_pos_x = (star['pos'][0] - parallax_shift[0]) % self.width
                screen_pos_y = (star['pos'][1] - parallax_shift[1]) % self.height
                screen_pos_int = (int(screen_pos_x), int(screen_pos_y))

                twinkle_val = (math.sin(time_ms * star['twinkle_speed'] + star['twinkle_phase']) + 1) / 2 # 0 to 1
                current_brightness = layer['base_brightness'] * star['brightness_mod'] * (0.6 + 0.4 * twinkle_val)
                star_rgb_val = int(255 * current_brightness)
                if star_rgb_val < 20: continue # Skip very dim stars

                star_color = (min(255, star_rgb_val), min(255, star_rgb_val), min(255, int(star_rgb_val * 1.05)))
                if layer['size'] <= 1:
                    surface.set_at(screen_pos_int, star_color)
                else:
                    pygame.draw.circle(surface, star_color, screen_pos_int, layer['size'])
