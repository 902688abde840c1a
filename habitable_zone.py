# habitable_zone.py
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from config import config
from physics_utils import to_finite_float

class HabitableZoneStatus(str, Enum):
    """Where an orbit sits relative to the habitable zone."""
    IN = "in"
    TOO_CLOSE = "too-close"
    TOO_FAR = "too-far"

@dataclass(frozen=True)
class HabitableZone:
    inner: float  # AU
    outer: float  # AU

    @property
    def midpoint(self) -> float:
        return (self.inner + self.outer) * 0.5

def luminosity_from_log10(log10_luminosity) -> Optional[float]:
    """Converts log10(L/L_sun) to L/L_sun. Returns None if unknown or if 10^x is not a finite positive number."""
    exponent = to_finite_float(log10_luminosity)
    if exponent is None:
        return None
    try:
        luminosity = math.pow(10.0, exponent)
    except OverflowError:
        return None
    # exponents below about -323 underflow to 0.0
    if not math.isfinite(luminosity) or luminosity <= 0.0:
        return None
    return luminosity

def habitable_zone_au(log10_luminosity) -> HabitableZone:
    """
    Habitable-zone bounds (AU) from stellar luminosity.

    Stellar flux falls off as L/d^2, so the distance receiving a given flux
    scales as sqrt(L). With L in solar units the Sun's conservative bounds are
    scaled directly.

    Args:
        log10_luminosity: log10(L/L_sun) as reported by the catalog (`st_lum`),
                          or None when unknown.

    Returns:
        HabitableZone: inner/outer radii in AU. Unknown luminosity falls back to
                       the Sun-equivalent bounds (L = 1).
    """
    luminosity = luminosity_from_log10(log10_luminosity)
    if luminosity is None:
        luminosity = 1.0
    sqrt_l = math.sqrt(luminosity)
    return HabitableZone(
        inner=config.HabitableZone.INNER_COEFFICIENT * sqrt_l,
        outer=config.HabitableZone.OUTER_COEFFICIENT * sqrt_l,
    )

def classify_orbit(orbit_au: float, zone: HabitableZone) -> HabitableZoneStatus:
    if zone.inner <= orbit_au <= zone.outer:
        return HabitableZoneStatus.IN
    if orbit_au < zone.inner:
        return HabitableZoneStatus.TOO_CLOSE
    return HabitableZoneStatus.TOO_FAR
