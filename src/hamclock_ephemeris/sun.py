"""Solar ephemeris: declination, equation of time, subsolar point, sunrise/sunset, season.

Low-order formulas (Meeus-style mean elements, accurate to roughly 0.1-1
degree in declination). Results are display estimates, not almanac values.
"""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass

from hamclock_ephemeris.angle_utils import normalize_degrees, signed_difference, wrap_longitude
from hamclock_ephemeris.constants import (
    DEGREES_PER_CIRCLE,
    DEGREES_PER_HOUR_RA,
    MINUTES_OF_TIME_PER_DEGREE,
    NOON_SECONDS_OFFSET,
    QUARTER_CIRCLE_DEGREES,
    SEASON_DECLINATION_BAND_DEG,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    SOLSTICE_EQUINOX_DATES,
)
from hamclock_ephemeris.time_utils import (
    Instant,
    day_of_year,
    instant_from_ymd_hms,
    julian_century,
    start_of_day,
    to_julian_century,
    to_julian_day,
    utc_hours,
    ymd_from_instant,
)

logger = logging.getLogger(__name__)


class Season(enum.Enum):
    """Northern-hemisphere astronomical season."""

    SPRING = 'Spring'
    SUMMER = 'Summer'
    AUTUMN = 'Autumn'
    WINTER = 'Winter'


@dataclass(frozen=True)
class SolarPosition:
    """Solar geometry for one instant and observer."""

    declination_deg: float
    equation_of_time_min: float
    subsolar_lat: float
    subsolar_lon: float
    sunrise: Instant
    sunset: Instant
    solar_noon_jd: float
    is_daylight: bool
    season: Season
    next_solstice_equinox: Instant
    seconds_to_next_solstice_equinox: int

    @property
    def season_name(self) -> str:
        return season_name(self.season)


def _mean_longitude(t: float) -> float:
    """Geometric mean longitude of the sun (degrees, not reduced)."""
    return 280.46646 + 36000.76983 * t + 0.0003032 * t * t


def _mean_anomaly(t: float) -> float:
    """Mean anomaly of the sun (degrees, not reduced)."""
    return 357.52911 + 35999.05029 * t - 0.0001536 * t * t


def _equation_of_center(m: float, t: float) -> float:
    """Equation of center (degrees) for mean anomaly m at century t."""
    m_rad = math.radians(m)
    return (
        (1.914602 - 0.004817 * t - 0.000014 * t * t) * math.sin(m_rad)
        + (0.019993 - 0.000101 * t) * math.sin(2.0 * m_rad)
        + 0.000029 * math.sin(3.0 * m_rad)
    )


def _apparent_longitude(t: float) -> float:
    """Apparent solar longitude in [0, 360), with aberration and nutation terms."""
    l0 = _mean_longitude(t)
    c = _equation_of_center(_mean_anomaly(t), t)
    omega = 125.04 - 1934.136 * t
    return normalize_degrees(l0 + c - 0.00569 - 0.00478 * math.sin(math.radians(omega)))


def _obliquity(t: float) -> float:
    """Mean obliquity of the ecliptic (degrees)."""
    return 23.439291 - 0.0130042 * t - 1.6e-7 * t * t + 5.04e-7 * t * t * t


def _declination_at(t: float) -> float:
    lam = math.radians(_apparent_longitude(t))
    eps = math.radians(_obliquity(t))
    return math.degrees(math.asin(math.sin(eps) * math.sin(lam)))


def _equation_of_time_at(t: float) -> float:
    """Equation of time (minutes) from the century-based day angle."""
    b = math.radians((1.0 - t / 36525.0) * DEGREES_PER_CIRCLE)
    return 229.18 * (
        0.000075
        + 0.001868 * math.cos(b)
        - 0.032077 * math.sin(b)
        - 0.014615 * math.cos(2.0 * b)
        - 0.040849 * math.sin(2.0 * b)
    )


def solar_declination(instant: float) -> float:
    """Solar declination in degrees (within about ±23.44)."""
    return _declination_at(julian_century(instant))


def equation_of_time(instant: float) -> float:
    """Equation of time in minutes."""
    return _equation_of_time_at(julian_century(instant))


def subsolar_longitude(instant: float) -> float:
    """Longitude of the subsolar point in [-180, 180): 0 at 12:00 UTC."""
    return wrap_longitude(utc_hours(instant) / 24.0 * DEGREES_PER_CIRCLE - 180.0)


def is_daylight(observer_lat: float, subsolar_lat: float) -> bool:
    """Coarse daylight test: observer within 90° of latitude from the subsolar point.

    This ignores longitude, so it is true for nearly every observer; callers
    wanting a real day/night answer should compare against sunrise/sunset.
    """
    diff = signed_difference(observer_lat, subsolar_lat)
    return -QUARTER_CIRCLE_DEGREES < diff < QUARTER_CIRCLE_DEGREES


def sunrise_sunset(instant: float, observer_lat: float, observer_lon: float) -> tuple[Instant, Instant]:
    """Approximate sunrise and sunset for the UTC day containing instant.

    Uses the day-of-year Fourier series for declination and equation of time.
    Inside the polar circles the hour angle has no solution: polar day gives
    (instant, instant + 1 day) and polar night gives (instant + 1 day, instant).

    Parameters:
        instant: Unix seconds (UTC).
        observer_lat, observer_lon: Observer in degrees (east positive).

    Returns:
        (sunrise, sunset) as Unix seconds.
    """
    now = int(instant)
    gamma = 2.0 * math.pi * (day_of_year(instant) - 1.0) / 365.0
    decl = (
        0.006918
        - 0.399912 * math.cos(gamma)
        + 0.070257 * math.sin(gamma)
        - 0.006758 * math.cos(2.0 * gamma)
        + 0.000907 * math.sin(2.0 * gamma)
        - 0.002697 * math.cos(3.0 * gamma)
        + 0.00148 * math.sin(3.0 * gamma)
    )
    eot = 229.2 * (
        0.000075
        + 0.001868 * math.cos(gamma)
        - 0.032077 * math.sin(gamma)
        - 0.014615 * math.cos(2.0 * gamma)
        - 0.040849 * math.sin(2.0 * gamma)
    )
    cos_h = -math.tan(math.radians(observer_lat)) * math.tan(decl)
    day = int(SECONDS_PER_DAY)
    if cos_h > 1.0:
        logger.debug('Polar night at latitude %.3f', observer_lat)
        return (now + day, now)
    if cos_h < -1.0:
        logger.debug('Polar day at latitude %.3f', observer_lat)
        return (now, now + day)
    h_deg = math.degrees(math.acos(cos_h))
    solar_noon_min = 720.0 - MINUTES_OF_TIME_PER_DEGREE * observer_lon - eot
    sunrise_min = solar_noon_min - MINUTES_OF_TIME_PER_DEGREE * h_deg
    sunset_min = solar_noon_min + MINUTES_OF_TIME_PER_DEGREE * h_deg
    midnight = start_of_day(instant)
    return (
        midnight + int(sunrise_min * SECONDS_PER_MINUTE),
        midnight + int(sunset_min * SECONDS_PER_MINUTE),
    )


def solar_noon(instant: float, observer_lon: float) -> Instant:
    """Instant of local solar noon on the UTC day containing instant."""
    eot = equation_of_time(instant)
    noon_seconds = (
        NOON_SECONDS_OFFSET
        - (observer_lon / DEGREES_PER_HOUR_RA) * SECONDS_PER_HOUR
        - eot * SECONDS_PER_MINUTE
    )
    return start_of_day(instant) + int(noon_seconds)


def _season_from_month(month: int) -> Season:
    if 3 <= month <= 5:
        return Season.SPRING
    if 6 <= month <= 8:
        return Season.SUMMER
    if 9 <= month <= 11:
        return Season.AUTUMN
    return Season.WINTER


def classify_season(declination_deg: float, month: int) -> Season:
    """Season from declination, with the calendar month deciding near the equinoxes.

    Declination at or beyond ±5° settles Summer or Winter outright; inside the
    (-5°, 5°) band the sun could be heading either way, so the UTC month picks
    Spring, Summer, Autumn or Winter.

    The sun crosses the band in under four weeks, so Spring and Autumn are
    short: in 2025 Spring runs roughly Mar 8 to Apr 1 and Autumn roughly
    Sep 10 to Oct 5, with Summer and Winter covering the rest of the year.
    """
    if declination_deg >= SEASON_DECLINATION_BAND_DEG:
        return Season.SUMMER
    if declination_deg <= -SEASON_DECLINATION_BAND_DEG:
        return Season.WINTER
    return _season_from_month(month)


def season_for(instant: float) -> Season:
    """Season at an instant."""
    _, month, _ = ymd_from_instant(instant)
    return classify_season(solar_declination(instant), month)


def season_name(season: Season) -> str:
    """Human-readable season name ("Spring", "Summer", ...)."""
    return season.value


def next_solstice_equinox(instant: float) -> tuple[Instant, str]:
    """Next fixed-date solstice or equinox strictly after instant.

    Events are Mar 20, Jun 21, Sep 22 and Dec 21, each at 12:00 UTC; after
    the December solstice the search moves to March of the following year.

    Returns:
        (event instant, event name).
    """
    year, _, _ = ymd_from_instant(instant)
    for month, mday, name in SOLSTICE_EQUINOX_DATES:
        event = instant_from_ymd_hms(year, month, mday, 12)
        if event > instant:
            return (event, name)
    month, mday, name = SOLSTICE_EQUINOX_DATES[0]
    return (instant_from_ymd_hms(year + 1, month, mday, 12), name)


def compute_solar_position(
    instant: float,
    observer_lat: float,
    observer_lon: float,
) -> SolarPosition:
    """Compute the full solar state for one instant and observer.

    Parameters:
        instant: Unix seconds (UTC).
        observer_lat: Observer latitude in degrees (-90..90).
        observer_lon: Observer longitude in degrees (-180..180, east positive).

    Returns:
        SolarPosition; never raises for finite input.
    """
    jd = to_julian_day(instant)
    t = to_julian_century(jd)
    declination = _declination_at(t)
    _, month, _ = ymd_from_instant(instant)
    sunrise, sunset = sunrise_sunset(instant, observer_lat, observer_lon)
    event, _ = next_solstice_equinox(instant)
    return SolarPosition(
        declination_deg=declination,
        equation_of_time_min=_equation_of_time_at(t),
        subsolar_lat=declination,
        subsolar_lon=subsolar_longitude(instant),
        sunrise=sunrise,
        sunset=sunset,
        solar_noon_jd=jd + (0.5 - observer_lon / DEGREES_PER_CIRCLE),
        is_daylight=is_daylight(observer_lat, declination),
        season=classify_season(declination, month),
        next_solstice_equinox=event,
        seconds_to_next_solstice_equinox=int(event - int(instant)),
    )
