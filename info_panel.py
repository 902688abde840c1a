# info_panel.py
from typing import List

from record_fields import get_field

PLACEHOLDER = "—"  # em dash shown for missing values

def format_result_line(record) -> str:
    """One search-result row: `<planet> (<host>)`."""
    name = get_field(record, "pl_name")
    host = get_field(record, "hostname")
    return f"{name if name is not None else PLACEHOLDER} ({host if host is not None else PLACEHOLDER})"

def _optional(value, fmt: str, unit: str) -> str:
    if value is None:
        return PLACEHOLDER
    return f"{value:{fmt}}{unit}"

def format_info_lines(state) -> List[str]:
    lines = [
        f"{state.pl_name} ({state.host_name})",
        f"Orbit: {state.orbit_au:.3f} AU | Planet radius: {_optional(state.planet_radius_re, '.2f', ' R⊕')}",
        f"Goldilocks: {state.hz_inner_au:.2f} – {state.hz_outer_au:.2f} AU",
        "In habitable zone" if state.in_habitable_zone else f"Outside habitable zone ({state.habitable_zone_status.value})",
    ]
    if state.eccentricity_known:
        lines.append(f"Eccentricity: {state.orbit_eccentricity:.3f}")
    else:
        lines.append("Eccentricity: unknown (circular orbit shown)")
    lines.append(f"Period: {state.orbital_period_days:.2f} d")
    lines.append(
        "Star: "
        f"T {_optional(state.star_teff_k, '.0f', ' K')}, "
        f"R {_optional(state.star_radius_rsun, '.2f', ' R☉')}, "
        f"M {_optional(state.star_mass_msun, '.2f', ' M☉')}, "
        f"L {_optional(state.star_luminosity, '.3g', ' L☉')}"
    )
    if state.planet_mass_me is not None:
        lines.append(f"Planet mass: {state.planet_mass_me:.2f} M⊕")
    return lines

def format_elapsed(state) -> str:
    return f"Elapsed: {state.get_elapsed_days():.1f} d ({state.get_elapsed_years():.2f} yr)"
