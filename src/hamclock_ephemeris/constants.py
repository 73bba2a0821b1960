"""Fixed constants: time scales, orbital periods, grid and map limits."""

# Time: seconds per unit
SECONDS_PER_MINUTE = 60.0
SECONDS_PER_HOUR = 3600.0
SECONDS_PER_DAY = 86400.0
MINUTES_PER_DAY = 1440.0
NOON_SECONDS_OFFSET = 12.0 * 3600.0  # seconds from midnight to noon

# Julian Day of the Unix epoch (1970-01-01T00:00Z) and of J2000.0
UNIX_EPOCH_JD = 2440587.5
J2000_JD = 2451545.0
DAYS_PER_JULIAN_CENTURY = 36525.0

# rms-julian counts days from 2000-01-01; the Unix epoch is 10957 days earlier.
UNIX_EPOCH_J2000_DAY = -10957

# Angle: degrees per circle
DEGREES_PER_CIRCLE = 360.0
HALF_CIRCLE_DEGREES = 180.0
QUARTER_CIRCLE_DEGREES = 90.0
DEGREES_PER_HOUR_RA = 15.0  # right ascension: 360° / 24 h
MINUTES_OF_TIME_PER_DEGREE = 4.0  # Earth turns 1° every 4 minutes
ARCMIN_PER_DEGREE = 60.0
ARCSEC_PER_DEGREE = 3600.0

# Moon
SYNODIC_MONTH_DAYS = 29.530588861
HALF_SYNODIC_MONTH_DAYS = 14.765294
MOON_ORBIT_INCLINATION_DEG = 5.145396

# Sun: fixed solstice/equinox dates (month, day, name), each at 12:00 UTC
SOLSTICE_EQUINOX_DATES: tuple[tuple[int, int, str], ...] = (
    (3, 20, 'Vernal Equinox'),
    (6, 21, 'Summer Solstice'),
    (9, 22, 'Autumnal Equinox'),
    (12, 21, 'Winter Solstice'),
)
SEASON_DECLINATION_BAND_DEG = 5.0  # calendar month decides inside (-5°, 5°)

# Maidenhead grid: cell sizes in degrees (longitude, latitude)
FIELD_LON_DEG = 20.0
FIELD_LAT_DEG = 10.0
SQUARE_LON_DEG = 2.0
SQUARE_LAT_DEG = 1.0
SUBSQUARE_LON_DEG = 5.0 / 60.0
SUBSQUARE_LAT_DEG = 2.5 / 60.0
FIELD_COUNT = 18
SQUARE_COUNT = 10
SUBSQUARE_COUNT = 24

# Map projection
MERCATOR_MAX_LAT = 85.0511  # Web Mercator pole-singularity guard
MIN_ZOOM = 0.5
MAX_ZOOM = 4.0
DEFAULT_ZOOM = 1.0
DEFAULT_MAP_WIDTH = 800
DEFAULT_MAP_HEIGHT = 500
DEFAULT_GREYLINE_STEP_DEG = 2.0
DEFAULT_GRATICULE_SPACING_DEG = 15.0
DEFAULT_MARKER_RADIUS_PX = 5
