# orbit_reconciler.py
import logging
from typing import Optional

from config import config
from physics_utils import to_finite_float

def semi_major_axis_from_period(period_days: float, star_mass_msun: float) -> float:
    """
    Kepler's third law in solar units: a^3 = T^2 * M.

    Args:
        period_days: Orbital period in days.
        star_mass_msun: Host star mass in solar masses. Floored at
                        `config.OrbitReconciliation.MIN_STAR_MASS_MSUN` so very
                        small or bogus masses cannot collapse the cube root.

    Returns:
        Semi-major axis in AU.
    """
    period_years = period_days / config.Kinematics.DAYS_PER_YEAR
    mass = max(config.OrbitReconciliation.MIN_STAR_MASS_MSUN, star_mass_msun)
    # T^(2/3) * M^(1/3) rather than (T^2 * M)^(1/3) so huge periods cannot overflow
    return period_years ** (2.0 / 3.0) * mass ** (1.0 / 3.0)

def is_consistent_with_period(catalog_au: float, derived_au: float) -> bool:
    """True when the catalog value lies within the tolerance band around the derived value."""
    if derived_au <= 0:
        return False
    lower = derived_au * config.OrbitReconciliation.LOWER_TOLERANCE
    upper = derived_au * config.OrbitReconciliation.UPPER_TOLERANCE
    return lower <= catalog_au <= upper

def reconcile_semi_major_axis(catalog_au, period_days=None, star_mass_msun=None) -> float:
    """
    Resolves a semi-major axis consistent with the reported period and stellar mass.

    The archive sometimes carries a stale or placeholder `pl_orbsmax` (1.0 is a
    common one) that disagrees with `pl_orbper` by an order of magnitude. The
    catalog value is kept only inside [0.5x, 2x] of the Kepler-derived value;
    ordinary measurement disagreement passes, gross errors fall back to the
    derived value. This is a consistency gate, not a precision correction.

    Without a reported period there is nothing to check the catalog value
    against, so any positive catalog value is taken as is. With neither field,
    the axis is derived from the default period.

    Args:
        catalog_au: Catalog semi-major axis (AU), or None/non-numeric if absent.
        period_days: Reported orbital period in days, or None if absent or non-positive.
        star_mass_msun: Stellar mass in solar masses, or None (defaults to 1).

    Returns:
        float: The accepted semi-major axis in AU, always positive and finite.
    """
    mass = to_finite_float(star_mass_msun, config.Defaults.STAR_MASS_MSUN)
    candidate: Optional[float] = to_finite_float(catalog_au)
    if candidate is not None and candidate <= 0:
        candidate = None

    period = to_finite_float(period_days)
    if period is None or period <= 0:
        if candidate is not None:
            return candidate
        period = config.Defaults.ORBITAL_PERIOD_DAYS

    derived_au = semi_major_axis_from_period(period, mass)
    if candidate is not None and is_consistent_with_period(candidate, derived_au):
        return candidate

    if candidate is not None and config.Debug.RECONCILIATION:
        logging.debug(
            f"Discarding catalog semi-major axis {candidate} AU: outside "
            f"[{config.OrbitReconciliation.LOWER_TOLERANCE}x, {config.OrbitReconciliation.UPPER_TOLERANCE}x] "
            f"of Kepler-derived {derived_au:.6g} AU (P={period} d, M={mass} Msun)."
        )
    return derived_au
