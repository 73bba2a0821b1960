"""Lunar ephemeris: phase angle, age, illumination, approximate declination and RA.

Mean-element model only: no perturbation terms, so phase timing is good to
about a day and declination/RA are coarse indicators.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

from hamclock_ephemeris.angle_utils import normalize_degrees
from hamclock_ephemeris.constants import (
    DEGREES_PER_CIRCLE,
    DEGREES_PER_HOUR_RA,
    HALF_CIRCLE_DEGREES,
    HALF_SYNODIC_MONTH_DAYS,
    MOON_ORBIT_INCLINATION_DEG,
    SECONDS_PER_DAY,
    SYNODIC_MONTH_DAYS,
)
from hamclock_ephemeris.time_utils import Instant, julian_century


class MoonPhase(enum.Enum):
    """Four-way phase category shown on the clock."""

    NEW = 'New'
    WAXING = 'Waxing'
    FULL = 'Full'
    WANING = 'Waning'


# Upper age bound (days) of each named phase; the last bin runs to a full month.
PHASE_AGE_BINS: tuple[tuple[float, str, MoonPhase], ...] = (
    (1.84, 'New Moon', MoonPhase.NEW),
    (7.38, 'Waxing Crescent', MoonPhase.WAXING),
    (9.23, 'First Quarter', MoonPhase.WAXING),
    (14.77, 'Waxing Gibbous', MoonPhase.WAXING),
    (16.61, 'Full Moon', MoonPhase.FULL),
    (22.15, 'Waning Gibbous', MoonPhase.WANING),
    (23.99, 'Last Quarter', MoonPhase.WANING),
    (SYNODIC_MONTH_DAYS, 'Waning Crescent', MoonPhase.WANING),
)


@dataclass(frozen=True)
class LunarPosition:
    """Lunar phase and position for one instant."""

    age_days: float
    illumination_pct: float
    phase_angle_deg: float
    phase_category: MoonPhase
    phase_name: str
    declination_deg: float
    right_ascension_hr: float
    next_new_moon: Instant
    next_full_moon: Instant


def _moon_mean_longitude(t: float) -> float:
    """Moon's mean longitude L' (degrees, not reduced)."""
    return (
        218.3164477
        + 481267.88123421 * t
        - 0.0015786 * t * t
        + t * t * t / 538841.0
        - t * t * t * t / 65194000.0
    )


def _moon_mean_anomaly(t: float) -> float:
    """Moon's mean anomaly M' (degrees, not reduced)."""
    return (
        134.9634814
        + 477198.8676313 * t
        + 0.0089970 * t * t
        + t * t * t / 69699.0
        - t * t * t * t / 14712000.0
    )


def _sun_mean_longitude(t: float) -> float:
    """Sun's mean longitude in [0, 360)."""
    return normalize_degrees(280.46646 + 36000.76983 * t + 0.0003032 * t * t)


def illumination_from_phase_angle(phase_angle: float) -> float:
    """Illuminated percentage, linear in phase angle (0 at new, 100 at full)."""
    angle = normalize_degrees(phase_angle)
    if angle <= HALF_CIRCLE_DEGREES:
        return angle / HALF_CIRCLE_DEGREES * 100.0
    return (DEGREES_PER_CIRCLE - angle) / HALF_CIRCLE_DEGREES * 100.0


def _phase_bin(age: float) -> tuple[str, MoonPhase]:
    for upper, name, category in PHASE_AGE_BINS:
        if age < upper:
            return (name, category)
    _, name, category = PHASE_AGE_BINS[-1]
    return (name, category)


def phase_name_for_age(age: float) -> str:
    """Eight-way phase name ("New Moon", "Waxing Crescent", ...) for an age in days."""
    return _phase_bin(age)[0]


def phase_category_for_age(age: float) -> MoonPhase:
    """Four-way phase category for an age in days."""
    return _phase_bin(age)[1]


def compute_lunar_position(instant: float) -> LunarPosition:
    """Compute lunar phase and approximate position.

    Parameters:
        instant: Unix seconds (UTC).

    Returns:
        LunarPosition with age in [0, 29.530588861) and illumination in [0, 100].
    """
    t = julian_century(instant)
    moon_lon = _moon_mean_longitude(t)
    moon_anom = _moon_mean_anomaly(t)
    phase_angle = normalize_degrees(moon_lon - _sun_mean_longitude(t))
    age = phase_angle / DEGREES_PER_CIRCLE * SYNODIC_MONTH_DAYS
    name, category = _phase_bin(age)

    # Orbital inclination only; ignores the ecliptic's own tilt.
    declination = math.degrees(
        math.asin(
            math.sin(math.radians(MOON_ORBIT_INCLINATION_DEG))
            * math.sin(math.radians(moon_anom))
        )
    )
    right_ascension = normalize_degrees(moon_lon) / DEGREES_PER_HOUR_RA

    days_to_new = SYNODIC_MONTH_DAYS - age
    days_to_full = (HALF_SYNODIC_MONTH_DAYS - age) % SYNODIC_MONTH_DAYS
    now = int(instant)
    return LunarPosition(
        age_days=age,
        illumination_pct=illumination_from_phase_angle(phase_angle),
        phase_angle_deg=phase_angle,
        phase_category=category,
        phase_name=name,
        declination_deg=declination,
        right_ascension_hr=right_ascension,
        next_new_moon=now + int(days_to_new * SECONDS_PER_DAY),
        next_full_moon=now + int(days_to_full * SECONDS_PER_DAY),
    )


def moon_age(instant: float) -> float:
    """Days since the last new moon."""
    return compute_lunar_position(instant).age_days


def moon_illumination(instant: float) -> float:
    """Illuminated percentage (0-100)."""
    return compute_lunar_position(instant).illumination_pct
