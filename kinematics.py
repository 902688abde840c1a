# kinematics.py
import logging
import math
from dataclasses import dataclass

import numpy as np

from config import config, TWO_PI

@dataclass
class PhaseClock:
    """The only mutable piece of a simulation: the orbital phase angle in radians.

    Owned by exactly one `SimulationState`; advanced only through
    `OrbitalKinematics.advance`. Never reset, never decreases.
    """
    theta: float = 0.0

    def advance(self, delta_theta: float):
        if delta_theta > 0 and math.isfinite(delta_theta):
            self.theta += delta_theta

class OrbitalKinematics:
    """
    Position and phase stepping for a planar Kepler ellipse with the star at one focus.

    The orbit is confined to the x-z plane (no inclination). Phase 0 is periapsis.
    Inputs are expected to be sanitized already: `semi_major_axis_au > 0`,
    `0 <= eccentricity < 1`, `reference_radius_au > 0`.
    """

    def __init__(self, semi_major_axis_au: float, eccentricity: float, reference_radius_au: float):
        self.semi_major_axis_au = semi_major_axis_au
        self.eccentricity = eccentricity
        self.reference_radius_au = reference_radius_au
        self.semi_latus_rectum_au = semi_major_axis_au * (1.0 - eccentricity * eccentricity)
        self.sqrt_one_minus_e_sq = math.sqrt(max(0.0, 1.0 - eccentricity * eccentricity))
        self.min_radius_au = semi_major_axis_au * config.Kinematics.MIN_RADIUS_FRACTION

    def radius_at_phase(self, theta: float) -> float:
        """Conic-section polar form r = a(1 - e^2) / (1 + e cos(theta))."""
        return self.semi_latus_rectum_au / (1.0 + self.eccentricity * math.cos(theta))

    def position_at_phase(self, theta: float) -> np.ndarray:
        r = self.radius_at_phase(theta)
        return np.array([r * math.cos(theta), 0.0, r * math.sin(theta)], dtype=np.float64)

    def orbit_points(self, segments: int = None) -> np.ndarray:
        """
        Samples one full revolution as a closed polyline.

        Returns:
            np.ndarray: Shape (segments + 1, 3); the last point repeats the first.
        """
        if segments is None:
            segments = config.Kinematics.ORBIT_SEGMENTS
        thetas = np.linspace(0.0, TWO_PI, segments + 1)
        radii = self.semi_latus_rectum_au / (1.0 + self.eccentricity * np.cos(thetas))
        points = np.zeros((segments + 1, 3), dtype=np.float64)
        points[:, 0] = radii * np.cos(thetas)
        points[:, 2] = radii * np.sin(thetas)
        return points

    def phase_rate(self, theta: float) -> float:
        """
        Angular rate per unit of display time at phase `theta`.

        Kepler II gives d(theta)/dt proportional to 1/r^2, so the planet sweeps
        faster near periapsis and slower near apoapsis. The sqrt(1 - e^2) factor
        keeps the mean rate tied to the orbital period for any eccentricity. The
        reference radius (habitable-zone midpoint) normalizes display speed so
        systems of similar scale animate at comparable speed; a circular orbit at
        the reference radius advances at exactly 1 rad per unit delta.
        """
        a = self.semi_major_axis_au
        r_current = max(self.radius_at_phase(theta), self.min_radius_au)
        # a > 0 and r_current >= MIN_RADIUS_FRACTION * a
        reference_ratio = self.reference_radius_au / a
        area_ratio = (a / r_current) ** 2
        return reference_ratio * area_ratio * self.sqrt_one_minus_e_sq

    def advance(self, clock: PhaseClock, delta_time: float) -> float:
        """Advances `clock` by one tick; non-positive or non-finite deltas are ignored."""
        if not (delta_time > 0 and math.isfinite(delta_time)):
            return clock.theta
        delta_theta = delta_time * self.phase_rate(clock.theta)
        clock.advance(delta_theta)
        if config.Debug.KINEMATICS:
            logging.debug(f"Phase advanced by {delta_theta:.6g} rad to {clock.theta:.6g} rad")
        return clock.theta

def elapsed_days(theta: float, orbital_period_days: float) -> float:
    """Real-world days represented by phase `theta`; one revolution is one period."""
    return (theta / TWO_PI) * orbital_period_days

def elapsed_years(theta: float, orbital_period_days: float) -> float:
    return elapsed_days(theta, orbital_period_days) / config.Kinematics.DAYS_PER_YEAR
