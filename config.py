# config.py
import math
import logging

# Configure basic logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(module)s - %(message)s')

# Fundamental constants (used across different config sections)
DAYS_PER_YEAR = 365.25  # Julian year, used by Kepler III and elapsed-time bookkeeping
TWO_PI = 2.0 * math.pi

class ConfigurationError(Exception):
    """Custom exception for viewer configuration errors.

    Raised by `SimulationConfig.validate()` when settings are invalid or
    inconsistent, which would otherwise produce a non-physical simulation state
    (e.g. an eccentricity cap at or above 1) or an unusable catalog client.

    Attributes:
        message (str): A human-readable explanation of the configuration error.
                       This is the first argument passed to the exception constructor.
    """
    pass

class SimulationConfig:
    """Centralized, hierarchical configuration for the Goldilocks orbit viewer.

    All parameters live in nested static classes (e.g. `SimulationConfig.Catalog`,
    `SimulationConfig.HabitableZone`, `SimulationConfig.Kinematics`). An instance
    named `config` is created at the end of this module, making it globally
    available via `from config import config`.

    `__init__` derives the display step from the frame budget and then calls
    `validate()`, which raises `ConfigurationError` on the first problem found.

    Example Usage:
        >>> from config import config
        >>> print(f"HZ inner coefficient: {config.HabitableZone.INNER_COEFFICIENT}")
        >>> print(f"Orbit polyline segments: {config.Kinematics.ORBIT_SEGMENTS}")
    """

    # --- Catalog Configuration ---
    class Catalog:
        """Configuration for the remote planetary catalog (NASA Exoplanet Archive TAP).

        Attributes:
            TAP_BASE_URL (str): Synchronous TAP endpoint.
            TABLE (str): Table queried (`ps` = Planetary Systems).
            SELECT_COLUMNS (List[str]): Columns requested for every row.
            DEFAULT_FLAG_CLAUSE (str): Always-on WHERE clause selecting the default
                                       parameter set of each planet.
            RANGE_FILTERS (List[Tuple[str, str, str]]): (column, min key, max key)
                                       triples understood by the query builder.
            RESPONSE_FORMAT (str): TAP output format.
            CORS_PROXY_URL (str): Prefix of the fallback relay; the encoded target
                                  URL is appended to it.
            USE_PROXY_FALLBACK (bool): Retry once through the relay when the direct
                                       request fails at the transport level.
            REQUEST_TIMEOUT_SECONDS (float): Per-request timeout.
            RETRY_ATTEMPTS (int): Attempts per route before giving up.
            RETRY_WAIT_MIN_SECONDS (float): Lower bound of exponential backoff.
            RETRY_WAIT_MAX_SECONDS (float): Upper bound of exponential backoff.
        """
        TAP_BASE_URL = "https://exoplanetarchive.ipac.caltech.edu/TAP/sync"
        TABLE = "ps"
        SELECT_COLUMNS = [
            "pl_name", "hostname",
            "st_rad", "st_teff", "st_lum", "st_mass",
            "pl_rade", "pl_masse", "pl_orbsmax", "pl_orbper", "pl_orbeccen", "pl_orbincl",
        ]
        DEFAULT_FLAG_CLAUSE = "default_flag = 1"
        RANGE_FILTERS = [
            ("st_rad", "st_rad_min", "st_rad_max"),
            ("st_teff", "st_teff_min", "st_teff_max"),
            ("pl_orbsmax", "pl_orbsmax_min", "pl_orbsmax_max"),
            ("pl_rade", "pl_rade_min", "pl_rade_max"),
            ("pl_masse", "pl_masse_min", "pl_masse_max"),
            ("pl_orbper", "pl_orbper_min", "pl_orbper_max"),
            ("pl_orbeccen", "pl_orbeccen_min", "pl_orbeccen_max"),
        ]
        RESPONSE_FORMAT = "json"
        CORS_PROXY_URL = "https://api.allorigins.win/raw?url="
        USE_PROXY_FALLBACK = True
        REQUEST_TIMEOUT_SECONDS = 30.0
        RETRY_ATTEMPTS = 3
        RETRY_WAIT_MIN_SECONDS = 2.0
        RETRY_WAIT_MAX_SECONDS = 10.0

    # --- Defaults for missing catalog fields ---
    class Defaults:
        """Values substituted when a catalog record omits a field.

        Attributes:
            PLANET_NAME (str): Placeholder planet name.
            HOST_NAME (str): Placeholder host star name.
            ORBITAL_PERIOD_DAYS (float): Period used when absent or non-positive.
            STAR_RADIUS_RSUN (float): Stellar radius used for render scaling.
            LUMINOSITY_LOG10 (float): log10(L/L_sun) used for the habitable zone (L = 1).
            STAR_MASS_MSUN (float): Stellar mass used by Kepler III when unknown.
            PLANET_RADIUS_REARTH (float): Planet radius used for render scaling.
            ECCENTRICITY (float): Eccentricity used when absent.
        """
        PLANET_NAME = "Planet"
        HOST_NAME = "Star"
        ORBITAL_PERIOD_DAYS = 365.0
        STAR_RADIUS_RSUN = 1.0
        LUMINOSITY_LOG10 = 0.0
        STAR_MASS_MSUN = 1.0
        PLANET_RADIUS_REARTH = 1.0
        ECCENTRICITY = 0.0

    # --- Habitable Zone Configuration ---
    class HabitableZone:
        """Conservative empirical habitable-zone coefficients (AU per sqrt(L/L_sun)).

        Attributes:
            INNER_COEFFICIENT (float): Inner edge for a Sun-like star.
            OUTER_COEFFICIENT (float): Outer edge for a Sun-like star.
        """
        INNER_COEFFICIENT = 0.75
        OUTER_COEFFICIENT = 1.77

    # --- Orbit Reconciliation Configuration ---
    class OrbitReconciliation:
        """Consistency gate between catalog semi-major axis and Kepler III.

        Attributes:
            LOWER_TOLERANCE (float): Smallest accepted catalog/derived ratio.
            UPPER_TOLERANCE (float): Largest accepted catalog/derived ratio.
            MIN_STAR_MASS_MSUN (float): Floor applied to stellar mass before the cube root.
        """
        LOWER_TOLERANCE = 0.5
        UPPER_TOLERANCE = 2.0
        MIN_STAR_MASS_MSUN = 0.1

    # --- Kinematics Configuration ---
    class Kinematics:
        """Configuration for the phase-stepping engine.

        Attributes:
            MAX_ECCENTRICITY (float): Eccentricity cap; keeps every orbit elliptical.
            ORBIT_SEGMENTS (int): Segments of the precomputed trajectory polyline
                                  (the polyline holds ORBIT_SEGMENTS + 1 points).
            MIN_RADIUS_FRACTION (float): Floor of the current radius as a fraction of
                                         the semi-major axis when computing the rate.
            DAYS_PER_YEAR (float): Conversion used for elapsed years.
        """
        MAX_ECCENTRICITY = 0.99
        ORBIT_SEGMENTS = 64
        MIN_RADIUS_FRACTION = 0.01
        DAYS_PER_YEAR = DAYS_PER_YEAR

    # --- Render Scale Configuration ---
    class RenderScale:
        """Body sizes in AU space; exaggerated so bodies stay visible next to the orbit.

        Attributes:
            SUN_RADIUS_AU (float): Display radius per solar radius.
            EARTH_RADIUS_AU (float): Display radius per Earth radius.
            MIN_STAR_RADIUS_AU (float): Display floor for stars.
            MIN_PLANET_RADIUS_AU (float): Display floor for planets.
        """
        SUN_RADIUS_AU = 0.005
        EARTH_RADIUS_AU = 0.00004
        MIN_STAR_RADIUS_AU = 0.012
        MIN_PLANET_RADIUS_AU = 0.008

    # --- Visualization Configuration ---
    class Visualization:
        """Configuration for the pygame renderer.

        Attributes:
            SCREEN_WIDTH_PX (int): Window width in pixels.
            SCREEN_HEIGHT_PX (int): Window height in pixels.
            FPS (int): Target frames per second.
            SECONDS_PER_REFERENCE_ORBIT (float): Wall-clock seconds for one revolution of a
                                                 circular orbit at the habitable-zone midpoint.
            PHASE_STEP_PER_FRAME (float): Delta passed to `update()` each frame; derived in
                                          `SimulationConfig.__init__`.
            FIELD_OF_VIEW_DEG (float): Vertical field of view of the perspective camera.
            DRAG_SENSITIVITY (float): Polar-angle change per dragged pixel.
            ZOOM_SENSITIVITY (float): Relative radius change per wheel unit.
            WHEEL_DELTA_PER_NOTCH (float): Wheel units reported per pygame wheel notch.
            MIN_SYSTEM_SCALE_AU (float): Lower bound on the framing scale.
            CAMERA_MIN_RADIUS_FACTOR (float): Closest camera distance, in system scales.
            CAMERA_MAX_RADIUS_FACTOR (float): Farthest camera distance, in system scales.
            CAMERA_INITIAL_RADIUS_FACTOR (float): Starting camera distance, in system scales.
            CAMERA_MIN_POLAR_RAD (float): Polar clamp away from the poles.
            ZONE_RING_SEGMENTS (int): Segments used to outline habitable-zone rings.
            STARFIELD_COUNT (int): Number of background stars.
            COLORS (Dict[str, Tuple[int, int, int]]): Palette.
        """
        SCREEN_WIDTH_PX = 1280
        SCREEN_HEIGHT_PX = 800
        FPS = 60
        SECONDS_PER_REFERENCE_ORBIT = 20.0
        PHASE_STEP_PER_FRAME = 0.0  # set in __init__
        FIELD_OF_VIEW_DEG = 50.0
        DRAG_SENSITIVITY = 0.0005
        ZOOM_SENSITIVITY = 0.0004
        WHEEL_DELTA_PER_NOTCH = 100.0
        MIN_SYSTEM_SCALE_AU = 0.08
        CAMERA_MIN_RADIUS_FACTOR = 0.5
        CAMERA_MAX_RADIUS_FACTOR = 4.0
        CAMERA_INITIAL_RADIUS_FACTOR = 1.5
        CAMERA_MIN_POLAR_RAD = 0.1
        ZONE_RING_SEGMENTS = 64
        STARFIELD_COUNT = 200
        COLORS = {
            'background': (5, 5, 15),
            'zone_too_close': (204, 68, 68),
            'zone_habitable': (0, 170, 68),
            'zone_too_far': (68, 136, 255),
            'orbit': (255, 255, 255),
            'planet': (255, 255, 255),
            'ui_text': (220, 220, 220),
            'ui_bg': (20, 20, 40),
        }
        ZONE_ALPHA = 128

    # --- Selection Store Configuration ---
    class Selection:
        """Where the single selected catalog record is kept between commands.

        Attributes:
            STORE_PATH (str): JSON file holding the selected record.
        """
        STORE_PATH = "goldilocks_planet.json"

    # --- Debug Configuration ---
    class Debug:
        """Toggles for verbose logging.

        Attributes:
            KINEMATICS (bool): Log every phase advance (very chatty).
            RECONCILIATION (bool): Log catalog semi-major axes rejected by the gate.
            CONFIG_VALIDATION (bool): Log a line once configuration validates.
        """
        KINEMATICS = False
        RECONCILIATION = True
        CONFIG_VALIDATION = True

    def __init__(self):
        """Initializes the `SimulationConfig` instance.

        Derives `Visualization.PHASE_STEP_PER_FRAME` so that a reference orbit takes
        `SECONDS_PER_REFERENCE_ORBIT` seconds at the target FPS (2*pi / 1200 at
        60 FPS and 20 s), then validates every section.

        Raises:
            ConfigurationError: If `self.validate()` detects any issue.
        """
        frames_per_orbit = self.Visualization.FPS * self.Visualization.SECONDS_PER_REFERENCE_ORBIT
        if frames_per_orbit > 0:
            self.Visualization.PHASE_STEP_PER_FRAME = TWO_PI / frames_per_orbit

        self.validate()

    def validate(self):
        """Validates the configuration for consistency and correctness.

        Raises:
            ConfigurationError: If any configuration setting is found to be invalid.
        """
        # Catalog
        if not self.Catalog.TAP_BASE_URL:
            raise ConfigurationError("Catalog.TAP_BASE_URL must not be empty.")
        if not self.Catalog.SELECT_COLUMNS:
            raise ConfigurationError("Catalog.SELECT_COLUMNS must list at least one column.")
        if self.Catalog.REQUEST_TIMEOUT_SECONDS <= 0:
            raise ConfigurationError("Catalog.REQUEST_TIMEOUT_SECONDS must be positive.")
        if self.Catalog.RETRY_ATTEMPTS <= 0:
            raise ConfigurationError("Catalog.RETRY_ATTEMPTS must be positive.")
        if not (0 <= self.Catalog.RETRY_WAIT_MIN_SECONDS <= self.Catalog.RETRY_WAIT_MAX_SECONDS):
            raise ConfigurationError(
                f"Catalog retry wait bounds invalid: min ({self.Catalog.RETRY_WAIT_MIN_SECONDS}) "
                f"must be >= 0 and <= max ({self.Catalog.RETRY_WAIT_MAX_SECONDS})."
            )
        if self.Catalog.USE_PROXY_FALLBACK and not self.Catalog.CORS_PROXY_URL:
            raise ConfigurationError("Catalog.CORS_PROXY_URL must be set when USE_PROXY_FALLBACK is enabled.")
        for column, min_key, max_key in self.Catalog.RANGE_FILTERS:
            if column not in self.Catalog.SELECT_COLUMNS:
                raise ConfigurationError(f"Range filter column '{column}' is not in Catalog.SELECT_COLUMNS.")
            if min_key == max_key:
                raise ConfigurationError(f"Range filter for '{column}' uses the same key for min and max.")

        # Defaults
        if self.Defaults.ORBITAL_PERIOD_DAYS <= 0:
            raise ConfigurationError("Defaults.ORBITAL_PERIOD_DAYS must be positive.")
        if self.Defaults.STAR_MASS_MSUN <= 0:
            raise ConfigurationError("Defaults.STAR_MASS_MSUN must be positive.")
        if self.Defaults.STAR_RADIUS_RSUN <= 0 or self.Defaults.PLANET_RADIUS_REARTH <= 0:
            raise ConfigurationError("Defaults.STAR_RADIUS_RSUN and PLANET_RADIUS_REARTH must be positive.")
        if not (0.0 <= self.Defaults.ECCENTRICITY < 1.0):
            raise ConfigurationError(f"Defaults.ECCENTRICITY ({self.Defaults.ECCENTRICITY}) must be >= 0 and < 1.")

        # Habitable zone
        if not (0 < self.HabitableZone.INNER_COEFFICIENT < self.HabitableZone.OUTER_COEFFICIENT):
            raise ConfigurationError(
                f"HabitableZone coefficients invalid: expected 0 < INNER ({self.HabitableZone.INNER_COEFFICIENT}) "
                f"< OUTER ({self.HabitableZone.OUTER_COEFFICIENT})."
            )

        # Orbit reconciliation
        if not (0 < self.OrbitReconciliation.LOWER_TOLERANCE <= 1.0 <= self.OrbitReconciliation.UPPER_TOLERANCE):
            raise ConfigurationError(
                "OrbitReconciliation tolerances must satisfy 0 < LOWER_TOLERANCE <= 1 <= UPPER_TOLERANCE. "
                f"Current Values: Lower={self.OrbitReconciliation.LOWER_TOLERANCE}, "
                f"Upper={self.OrbitReconciliation.UPPER_TOLERANCE}"
            )
        if self.OrbitReconciliation.MIN_STAR_MASS_MSUN <= 0:
            raise ConfigurationError("OrbitReconciliation.MIN_STAR_MASS_MSUN must be positive.")

        # Kinematics
        if not (0.0 <= self.Kinematics.MAX_ECCENTRICITY < 1.0):
            raise ConfigurationError(
                f"Kinematics.MAX_ECCENTRICITY ({self.Kinematics.MAX_ECCENTRICITY}) must be >= 0 and < 1."
            )
        if self.Kinematics.ORBIT_SEGMENTS <= 0:
            raise ConfigurationError("Kinematics.ORBIT_SEGMENTS must be positive.")
        if not (0 < self.Kinematics.MIN_RADIUS_FRACTION <= 1.0):
            raise ConfigurationError("Kinematics.MIN_RADIUS_FRACTION must be in (0, 1].")
        if self.Kinematics.DAYS_PER_YEAR <= 0:
            raise ConfigurationError("Kinematics.DAYS_PER_YEAR must be positive.")

        # Render scale
        if min(self.RenderScale.SUN_RADIUS_AU, self.RenderScale.EARTH_RADIUS_AU,
               self.RenderScale.MIN_STAR_RADIUS_AU, self.RenderScale.MIN_PLANET_RADIUS_AU) <= 0:
            raise ConfigurationError("All RenderScale radii must be positive.")

        # Visualization
        if self.Visualization.SCREEN_WIDTH_PX <= 0 or self.Visualization.SCREEN_HEIGHT_PX <= 0:
            raise ConfigurationError("Visualization screen dimensions (SCREEN_WIDTH_PX, SCREEN_HEIGHT_PX) must be positive.")
        if self.Visualization.FPS <= 0:
            raise ConfigurationError("Visualization.FPS must be positive.")
        if self.Visualization.SECONDS_PER_REFERENCE_ORBIT <= 0:
            raise ConfigurationError("Visualization.SECONDS_PER_REFERENCE_ORBIT must be positive.")
        if not (0 < self.Visualization.FIELD_OF_VIEW_DEG < 180):
            raise ConfigurationError("Visualization.FIELD_OF_VIEW_DEG must be between 0 and 180 degrees exclusive.")
        if not (0 < self.Visualization.CAMERA_MIN_RADIUS_FACTOR
                <= self.Visualization.CAMERA_INITIAL_RADIUS_FACTOR
                <= self.Visualization.CAMERA_MAX_RADIUS_FACTOR):
            raise ConfigurationError(
                "Camera radius factors must satisfy 0 < MIN <= INITIAL <= MAX. "
                f"Current Values: Min={self.Visualization.CAMERA_MIN_RADIUS_FACTOR}, "
                f"Initial={self.Visualization.CAMERA_INITIAL_RADIUS_FACTOR}, "
                f"Max={self.Visualization.CAMERA_MAX_RADIUS_FACTOR}"
            )
        if not (0 < self.Visualization.CAMERA_MIN_POLAR_RAD < math.pi / 2):
            raise ConfigurationError("Visualization.CAMERA_MIN_POLAR_RAD must be in (0, pi/2).")
        if self.Visualization.ZONE_RING_SEGMENTS < 3:
            raise ConfigurationError("Visualization.ZONE_RING_SEGMENTS must be at least 3.")

        # Selection
        if not self.Selection.STORE_PATH:
            raise ConfigurationError("Selection.STORE_PATH must not be empty.")

        if self.Debug.CONFIG_VALIDATION:
            logging.info("Configuration validated successfully.")


# --- Instantiate the configuration ---
# This makes the config object available for import and runs validation.
# e.g., from config import config
try:
    config = SimulationConfig()
except ConfigurationError as e:
    logging.error(f"FATAL CONFIGURATION ERROR: {e}", exc_info=True)
    raise
