"""Time basis: Unix instants to Julian Day/Century, and UTC calendar helpers.

Calendar arithmetic is delegated to rms-julian, which counts days from
2000-01-01. Instants are POSIX seconds, so every day has exactly 86400
seconds and no leap-second table is needed here.
"""

from __future__ import annotations

import julian

from hamclock_ephemeris.constants import (
    DAYS_PER_JULIAN_CENTURY,
    J2000_JD,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    UNIX_EPOCH_J2000_DAY,
    UNIX_EPOCH_JD,
)

Instant = int  # whole seconds since 1970-01-01T00:00:00Z


def to_julian_day(instant: float) -> float:
    """Convert a Unix instant to Julian Day.

    Parameters:
        instant: Seconds since the Unix epoch (UTC).

    Returns:
        Julian Day (JD 2440587.5 at the Unix epoch).
    """
    return UNIX_EPOCH_JD + instant / SECONDS_PER_DAY


def to_julian_century(jd: float) -> float:
    """Convert Julian Day to Julian centuries since J2000.0."""
    return (jd - J2000_JD) / DAYS_PER_JULIAN_CENTURY


def julian_century(instant: float) -> float:
    """Julian centuries since J2000.0 for a Unix instant."""
    return to_julian_century(to_julian_day(instant))


def day_sec_from_instant(instant: float) -> tuple[int, int]:
    """Split an instant into (day, sec) on the rms-julian day count.

    Parameters:
        instant: Seconds since the Unix epoch; fractional seconds are dropped.

    Returns:
        (day, sec) where day counts days since 2000-01-01 and sec is 0..86399.
    """
    whole = int(instant)
    days, sec = divmod(whole, int(SECONDS_PER_DAY))
    return (days + UNIX_EPOCH_J2000_DAY, sec)


def ymd_from_instant(instant: float) -> tuple[int, int, int]:
    """UTC calendar date (year, month, day) of an instant."""
    day, _ = day_sec_from_instant(instant)
    year, month, mday = julian.ymd_from_day(day)
    return (int(year), int(month), int(mday))


def day_of_year(instant: float) -> int:
    """UTC day of year (1..366) of an instant."""
    day, _ = day_sec_from_instant(instant)
    _, doy = julian.yd_from_day(day)
    return int(doy)


def hms_from_instant(instant: float) -> tuple[int, int, int]:
    """UTC time of day (hour, minute, second) of an instant."""
    _, sec = day_sec_from_instant(instant)
    hour, minute, second = julian.hms_from_sec(sec)
    return (int(hour), int(minute), int(second))


def utc_hours(instant: float) -> float:
    """Hours elapsed since UTC midnight, from whole seconds (0 <= h < 24)."""
    hour, minute, second = hms_from_instant(instant)
    return hour + minute / SECONDS_PER_MINUTE + second / SECONDS_PER_HOUR


def start_of_day(instant: float) -> Instant:
    """Instant of the UTC midnight that begins the instant's day."""
    _, sec = day_sec_from_instant(instant)
    return int(instant) - sec


def instant_from_ymd_hms(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> Instant:
    """Build a Unix instant from a UTC calendar date and time.

    Parameters:
        year, month, day: Calendar date (proleptic Gregorian).
        hour, minute, second: Time of day.

    Returns:
        Whole seconds since the Unix epoch.
    """
    j2000_day = int(julian.day_from_ymd(year, month, day))
    days = j2000_day - UNIX_EPOCH_J2000_DAY
    return (
        days * int(SECONDS_PER_DAY)
        + hour * int(SECONDS_PER_HOUR)
        + minute * int(SECONDS_PER_MINUTE)
        + second
    )


def format_instant(instant: float) -> str:
    """Format an instant as ``YYYY-MM-DD HH:MM:SS`` (UTC)."""
    day, sec = day_sec_from_instant(instant)
    return julian.format_day_sec(day, sec, sep=' ')
