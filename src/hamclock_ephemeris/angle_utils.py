"""Angle normalization, parsing and sexagesimal formatting."""

from __future__ import annotations

import math
import re

from hamclock_ephemeris.constants import (
    DEGREES_PER_CIRCLE,
    HALF_CIRCLE_DEGREES,
    QUARTER_CIRCLE_DEGREES,
)


def normalize_degrees(angle: float) -> float:
    """Reduce an angle to [0, 360)."""
    out = angle % DEGREES_PER_CIRCLE
    # -1e-15 % 360 rounds to 360.0
    if out >= DEGREES_PER_CIRCLE:
        out -= DEGREES_PER_CIRCLE
    return out


def wrap_longitude(lon: float) -> float:
    """Wrap a longitude into [-180, 180)."""
    return normalize_degrees(lon + HALF_CIRCLE_DEGREES) - HALF_CIRCLE_DEGREES


def signed_difference(a: float, b: float) -> float:
    """Return a - b folded into [-180, 180]."""
    diff = a - b
    while diff > HALF_CIRCLE_DEGREES:
        diff -= DEGREES_PER_CIRCLE
    while diff < -HALF_CIRCLE_DEGREES:
        diff += DEGREES_PER_CIRCLE
    return diff


def fold_hour_angle(lon_diff: float) -> float:
    """Reflect a longitude difference in [-180, 180] into [-90, 90].

    Points behind the terminator plane mirror onto the near hemisphere, so
    100° maps to 80° and -170° maps to -10°.
    """
    if lon_diff > QUARTER_CIRCLE_DEGREES:
        return HALF_CIRCLE_DEGREES - lon_diff
    if lon_diff < -QUARTER_CIRCLE_DEGREES:
        return -HALF_CIRCLE_DEGREES - lon_diff
    return lon_diff


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))


def parse_angle(string: str) -> float | None:
    """Parse an angle given as degrees, minutes and seconds.

    Accepts three numbers (deg, m, s), two (deg, m), or one (deg), separated by
    whitespace or colons. Minutes and seconds must be non-negative. A leading
    minus makes the result negative.

    Parameters:
        string: Text such as "51 28 48", "-0:7.5" or "51.48".

    Returns:
        Angle in the units of the first number, or None on parse failure.
    """
    s = string.strip()
    if len(s) == 0:
        return None
    parts = [p for p in re.split(r'[\s:]+', s) if p]
    if len(parts) == 0 or len(parts) > 3:
        return None
    try:
        values = [float(p) for p in parts]
    except ValueError:
        return None
    if not all(math.isfinite(v) for v in values):
        return None
    if any(v < 0 for v in values[1:]):
        return None
    angle = abs(values[0])
    if len(values) >= 2:
        angle += values[1] / 60.0
    if len(values) == 3:
        angle += values[2] / 3600.0
    if s.startswith('-'):
        angle = -angle
    return angle


def dms_string(
    value: float,
    separator: str,
    ndecimal: int = 0,
) -> str:
    """Format an angle as degrees/hours, minutes, seconds.

    Parameters:
        value: Angle in degrees (or hours for right ascension).
        separator: 3-character string of unit marks (e.g. 'hms' or 'dms').
        ndecimal: Decimal places for seconds (0-4).

    Returns:
        Formatted string such as "-23d 26m 12s".
    """
    if len(separator) < 3:
        sep1 = sep2 = sep3 = ' '
    else:
        sep1, sep2, sep3 = separator[0], separator[1], separator[2]
    sign = '-' if value < 0 else ''
    ntens = 10**ndecimal
    units = round(abs(value) * 3600.0 * ntens)
    isec, frac = divmod(units, ntens)
    imin, isec = divmod(isec, 60)
    ideg, imin = divmod(imin, 60)
    sec_text = f'{isec:02d}'
    if ndecimal > 0:
        sec_text += f'.{frac:0{ndecimal}d}'
    return f'{sign}{ideg}{sep1} {imin:02d}{sep2} {sec_text}{sep3}'
