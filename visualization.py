# visualization.py
import pygame
import numpy as np
import math
import logging
from typing import Optional, Tuple

from config import config, ConfigurationError
from info_panel import format_info_lines, format_elapsed
from physics_utils import clamp, normalize_vector
from planetary_system import SimulationState
from visual_effects import StarField, circle_points, draw_glow, teff_to_rgb, zone_rings

WORLD_UP = np.array([0.0, 1.0, 0.0])
NEAR_PLANE_AU = 0.01

class OrbitCamera:
    """Perspective camera on a sphere around the star, always looking at the origin.

    `theta` is the azimuth, `phi` the polar angle measured from +y. Radius and
    polar angle are clamped on every change so the camera never flips over a
    pole or loses the system.
    """

    def __init__(self, system_scale: float):
        vis = config.Visualization
        self.system_scale = max(system_scale, vis.MIN_SYSTEM_SCALE_AU)
        self.min_radius = self.system_scale * vis.CAMERA_MIN_RADIUS_FACTOR
        self.max_radius = self.system_scale * vis.CAMERA_MAX_RADIUS_FACTOR
        self.radius = self.system_scale * vis.CAMERA_INITIAL_RADIUS_FACTOR
        self.theta = math.pi / 4
        self.phi = math.pi / 4
        self.fov_rad = math.radians(vis.FIELD_OF_VIEW_DEG)
        self._clamp()

    @classmethod
    def for_state(cls, state: SimulationState) -> 'OrbitCamera':
        return cls(max(state.hz_outer, state.orbit_radius))

    def _clamp(self):
        min_polar = config.Visualization.CAMERA_MIN_POLAR_RAD
        self.phi = clamp(self.phi, min_polar, math.pi - min_polar)
        self.radius = clamp(self.radius, self.min_radius, self.max_radius)

    def drag(self, dy_px: float):
        self.phi -= dy_px * config.Visualization.DRAG_SENSITIVITY
        self._clamp()

    def zoom(self, wheel_delta: float):
        """Positive `wheel_delta` (scrolling down) moves the camera closer."""
        self.radius *= 1.0 - wheel_delta * config.Visualization.ZOOM_SENSITIVITY
        self._clamp()

    @property
    def position(self) -> np.ndarray:
        return np.array([
            self.radius * math.sin(self.phi) * math.cos(self.theta),
            self.radius * math.cos(self.phi),
            self.radius * math.sin(self.phi) * math.sin(self.theta),
        ])

    def _basis(self):
        eye = self.position
        forward = normalize_vector(-eye)
        right = normalize_vector(np.cross(forward, WORLD_UP))
        up = np.cross(right, forward)
        return eye, forward, right, up

    def focal_length_px(self, screen_height: int) -> float:
        return (screen_height / 2.0) / math.tan(self.fov_rad / 2.0)

    def project(self, point, screen_size: Tuple[int, int]) -> Optional[Tuple[float, float, float]]:
        """
        Projects a world point (AU) to the screen.

        Returns:
            (x, y, depth) in pixels and AU, or None if the point is behind the near plane.
        """
        width, height = screen_size
        eye, forward, right, up = self._basis()
        offset = np.asarray(point, dtype=float) - eye
        depth = float(np.dot(offset, forward))
        if depth <= NEAR_PLANE_AU:
            return None
        focal = self.focal_length_px(height)
        x = width / 2.0 + float(np.dot(offset, right)) * focal / depth
        y = height / 2.0 - float(np.dot(offset, up)) * focal / depth
        return x, y, depth

    def project_radius(self, world_radius: float, depth: float, screen_height: int) -> float:
        return world_radius * self.focal_length_px(screen_height) / depth

class SystemVisualization:
    """Renders one `SimulationState` with pygame.

    Per frame: advance the state by the configured phase step, read the planet
    position, then draw starfield, habitable-zone bands, orbit polyline, star,
    planet and the info panel. Drawing failures are logged and the loop carries
    on; only closing the window (or Esc) stops it.
    """

    def __init__(self, state: SimulationState):
        self.state = state
        self.camera = OrbitCamera.for_state(state)
        self.running = True
        self.dragging = False
        self.frame_count = 0
        self.screen = None
        try:
            pygame.init()
            screen_w = config.Visualization.SCREEN_WIDTH_PX
            screen_h = config.Visualization.SCREEN_HEIGHT_PX
            if not (isinstance(screen_w, int) and screen_w > 0 and isinstance(screen_h, int) and screen_h > 0):
                raise ConfigurationError("SCREEN_WIDTH_PX and SCREEN_HEIGHT_PX must be positive integers.")
            self.screen = pygame.display.set_mode((screen_w, screen_h), pygame.RESIZABLE)
            pygame.display.set_caption(f"Goldilocks - {state.pl_name} ({state.host_name})")
            self.clock = pygame.time.Clock()
            self.font = pygame.font.Font(None, 22)
            self.starfield = StarField(screen_w, screen_h, config.Visualization.STARFIELD_COUNT)
        except (pygame.error, ConfigurationError) as e_init:
            logging.critical(f"Visualization initialization failed: {e_init}", exc_info=True)
            raise

        self.colors = config.Visualization.COLORS
        self.star_color = teff_to_rgb(state.star_teff_k)
        self.zone_overlay = None
        logging.info(f"Visualization ready for {state.pl_name}; star colour {self.star_color}.")

    @property
    def screen_size(self) -> Tuple[int, int]:
        return self.screen.get_size()

    def handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logging.info("QUIT event received via Pygame window. Signaling shutdown.")
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.dragging = True
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                self.dragging = False
            elif event.type == pygame.WINDOWLEAVE:
                self.dragging = False
            elif event.type == pygame.MOUSEMOTION and self.dragging:
                self.camera.drag(event.rel[1])
            elif event.type == pygame.MOUSEWHEEL:
                # pygame reports +y for scrolling up; browsers report +deltaY for scrolling down
                self.camera.zoom(-event.y * config.Visualization.WHEEL_DELTA_PER_NOTCH)
            elif event.type == pygame.VIDEORESIZE:
                self.zone_overlay = None
        return True

    def _project_polyline(self, points):
        projected = [self.camera.project(p, self.screen_size) for p in points]
        if any(p is None for p in projected):
            return None
        return [(p[0], p[1]) for p in projected]

    def _draw_zones(self):
        if self.zone_overlay is None or self.zone_overlay.get_size() != self.screen_size:
            self.zone_overlay = pygame.Surface(self.screen_size)
            self.zone_overlay.set_colorkey((0, 0, 0))
            self.zone_overlay.set_alpha(config.Visualization.ZONE_ALPHA)
        self.zone_overlay.fill((0, 0, 0))
        # Outermost band first; each inner disk paints over the one beyond it
        for _, outer_radius, color in reversed(zone_rings(self.state.hz_inner, self.state.hz_outer)):
            outline = self._project_polyline(circle_points(outer_radius))
            if outline and len(outline) > 2:
                pygame.draw.polygon(self.zone_overlay, color, outline)
        self.screen.blit(self.zone_overlay, (0, 0))

    def _draw_orbit(self):
        outline = self._project_polyline(self.state.get_orbit_points())
        if outline and len(outline) > 1:
            pygame.draw.aalines(self.screen, self.colors['orbit'], False, outline)

    def _draw_body(self, world_pos, world_radius, color, glow=False):
        projected = self.camera.project(world_pos, self.screen_size)
        if projected is None:
            return
        x, y, depth = projected
        radius_px = max(1, int(self.camera.project_radius(world_radius, depth, self.screen_size[1])))
        if glow:
            draw_glow(self.screen, (x, y), radius_px * 2.5, color)
        pygame.draw.circle(self.screen, color, (int(x), int(y)), radius_px)

    def _draw_ui(self):
        lines = format_info_lines(self.state) + [format_elapsed(self.state)]
        padding = 8
        line_height = self.font.get_linesize()
        width = max(self.font.size(line)[0] for line in lines) + 2 * padding
        height = line_height * len(lines) + 2 * padding
        panel = pygame.Surface((width, height), pygame.SRCALPHA)
        panel.fill((*self.colors['ui_bg'], 200))
        for i, line in enumerate(lines):
            text_surface = self.font.render(line, True, self.colors['ui_text'])
            panel.blit(text_surface, (padding, padding + i * line_height))
        self.screen.blit(panel, (10, 10))

    def render_frame(self):
        """Advances the simulation one tick and draws it."""
        self.state.update(config.Visualization.PHASE_STEP_PER_FRAME)
        planet_pos = self.state.get_planet_position()
        try:
            self.screen.fill(self.colors['background'])
            self.starfield.draw(self.screen, np.array([self.camera.theta, self.camera.phi]))
            self._draw_zones()
            self._draw_orbit()
            self._draw_body(np.zeros(3), self.state.star_radius, self.star_color, glow=True)
            self._draw_body(planet_pos, self.state.planet_radius, self.colors['planet'])
            self._draw_ui()
            pygame.display.flip()
        except pygame.error as e_pygame_render:
            logging.error(f"Pygame error during render: {e_pygame_render}. Attempting to continue.", exc_info=True)
        self.frame_count += 1

    def run(self, max_frames: Optional[int] = None):
        try:
            while self.running:
                if not self.handle_events():
                    self.running = False
                    break
                self.render_frame()
                self.clock.tick(config.Visualization.FPS)
                if max_frames is not None and self.frame_count >= max_frames:
                    break
        finally:
            logging.info(f"Visualization closed after {self.frame_count} frames; "
                         f"{format_elapsed(self.state)}")
            pygame.quit()
