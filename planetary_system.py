# planetary_system.py
import logging
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from config import config
from habitable_zone import HabitableZoneStatus, habitable_zone_au, classify_orbit, luminosity_from_log10
from kinematics import OrbitalKinematics, PhaseClock, elapsed_days, elapsed_years
from orbit_reconciler import reconcile_semi_major_axis
from physics_utils import clamp
from record_fields import canonicalize_record, num_field, optional_num_field, text_field

@dataclass(frozen=True)
class SimulationState:
    """
    One planetary system, ready to animate. 1 unit = 1 AU everywhere.

    Everything here is fixed at construction except the phase clock, which only
    `update()` moves. Create one state per selected catalog record; do not share
    an instance across threads.
    """
    pl_name: str
    host_name: str

    # Orbit geometry
    orbit_au: float
    orbit_eccentricity: float
    eccentricity_known: bool
    orbital_period_days: float

    # Habitable zone
    hz_inner_au: float
    hz_outer_au: float
    habitable_zone_status: HabitableZoneStatus

    # Stellar attributes (None when the catalog has no value)
    star_luminosity: Optional[float]  # L/L_sun
    star_teff_k: Optional[float]
    star_radius_rsun: Optional[float]
    star_mass_msun: Optional[float]

    # Planetary attributes
    planet_radius_re: float
    planet_mass_me: Optional[float]

    # Render-scale radii in AU space
    star_radius: float
    planet_radius: float

    _kinematics: OrbitalKinematics = field(repr=False, compare=False)
    _orbit_points: np.ndarray = field(repr=False, compare=False)
    _clock: PhaseClock = field(default_factory=PhaseClock, repr=False, compare=False)

    @property
    def in_habitable_zone(self) -> bool:
        return self.habitable_zone_status is HabitableZoneStatus.IN

    @property
    def orbit_radius(self) -> float:
        return self.orbit_au

    @property
    def hz_inner(self) -> float:
        return self.hz_inner_au

    @property
    def hz_outer(self) -> float:
        return self.hz_outer_au

    @property
    def phase(self) -> float:
        return self._clock.theta

    def get_orbit_points(self) -> np.ndarray:
        """The trajectory polyline computed at construction; the same read-only array every call."""
        return self._orbit_points

    def radius_at_phase(self, theta: float) -> float:
        return self._kinematics.radius_at_phase(theta)

    def update(self, delta_time: float):
        self._kinematics.advance(self._clock, delta_time)

    def get_planet_position(self) -> np.ndarray:
        return self._kinematics.position_at_phase(self._clock.theta)

    def get_elapsed_days(self) -> float:
        return elapsed_days(self._clock.theta, self.orbital_period_days)

    def get_elapsed_years(self) -> float:
        return elapsed_years(self._clock.theta, self.orbital_period_days)

def create_simulation_from_record(record) -> SimulationState:
    """
    Builds a `SimulationState` from one raw catalog row.

    Deterministic: the same row always yields the same state (apart from the
    fresh phase clock). Missing, non-numeric and non-finite fields fall back to
    `config.Defaults`; a catalog semi-major axis that disagrees with the period
    is replaced by the Kepler-derived value. Never raises.

    Args:
        record: Mapping of catalog column name (either case) to scalar.

    Returns:
        SimulationState: A new, independent state with its own phase clock.
    """
    row = canonicalize_record(record)
    defaults = config.Defaults

    pl_name = text_field(row, "pl_name", defaults.PLANET_NAME)
    host_name = text_field(row, "hostname", defaults.HOST_NAME)

    st_lum = optional_num_field(row, "st_lum")
    st_rad = optional_num_field(row, "st_rad")
    st_teff = optional_num_field(row, "st_teff")
    st_mass = optional_num_field(row, "st_mass")
    pl_rade = num_field(row, "pl_rade", defaults.PLANET_RADIUS_REARTH)
    pl_masse = optional_num_field(row, "pl_masse")
    pl_orbper = optional_num_field(row, "pl_orbper")
    pl_orbeccen = optional_num_field(row, "pl_orbeccen")

    period_known = pl_orbper is not None and pl_orbper > 0
    orbital_period_days = pl_orbper if period_known else defaults.ORBITAL_PERIOD_DAYS
    orbit_au = reconcile_semi_major_axis(
        row.get("pl_orbsmax"),
        pl_orbper if period_known else None,
        st_mass,
    )

    eccentricity_known = pl_orbeccen is not None
    eccentricity = clamp(
        pl_orbeccen if eccentricity_known else defaults.ECCENTRICITY,
        0.0,
        config.Kinematics.MAX_ECCENTRICITY,
    )

    zone = habitable_zone_au(st_lum if st_lum is not None else defaults.LUMINOSITY_LOG10)
    status = classify_orbit(orbit_au, zone)

    scale = config.RenderScale
    star_radius_for_display = st_rad if st_rad is not None else defaults.STAR_RADIUS_RSUN
    star_radius = max(scale.MIN_STAR_RADIUS_AU, star_radius_for_display * scale.SUN_RADIUS_AU)
    planet_radius = max(scale.MIN_PLANET_RADIUS_AU, pl_rade * scale.EARTH_RADIUS_AU)

    kinematics = OrbitalKinematics(orbit_au, eccentricity, zone.midpoint)
    orbit_points = kinematics.orbit_points(config.Kinematics.ORBIT_SEGMENTS)
    orbit_points.flags.writeable = False

    logging.info(
        f"Built simulation for {pl_name} ({host_name}): a={orbit_au:.4g} AU, e={eccentricity:.3g}, "
        f"P={orbital_period_days:.4g} d, HZ=[{zone.inner:.3g}, {zone.outer:.3g}] AU -> {status.value}"
    )

    return SimulationState(
        pl_name=pl_name,
        host_name=host_name,
        orbit_au=orbit_au,
        orbit_eccentricity=eccentricity,
        eccentricity_known=eccentricity_known,
        orbital_period_days=orbital_period_days,
        hz_inner_au=zone.inner,
        hz_outer_au=zone.outer,
        habitable_zone_status=status,
        star_luminosity=luminosity_from_log10(st_lum),
        star_teff_k=st_teff,
        star_radius_rsun=st_rad,
        star_mass_msun=st_mass,
        planet_radius_re=pl_rade,
        planet_mass_me=pl_masse,
        star_radius=star_radius,
        planet_radius=planet_radius,
        _kinematics=kinematics,
        _orbit_points=orbit_points,
    )
