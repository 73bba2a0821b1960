"""Observer location parameters and parsing (values handed in by the location collaborator)."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from hamclock_ephemeris.angle_utils import parse_angle
from hamclock_ephemeris.maidenhead import parse_locator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ObserverLocation:
    """Observer position in decimal degrees (north and east positive)."""

    latitude: float = 0.0
    longitude: float = 0.0

    def __post_init__(self) -> None:
        if not (math.isfinite(self.latitude) and -90.0 <= self.latitude <= 90.0):
            raise ValueError(f'latitude must be in [-90, 90], got {self.latitude!r}')
        if not (math.isfinite(self.longitude) and -180.0 <= self.longitude <= 180.0):
            raise ValueError(f'longitude must be in [-180, 180], got {self.longitude!r}')


_HEMISPHERE_SIGNS: dict[str, float] = {'N': 1.0, 'S': -1.0, 'E': 1.0, 'W': -1.0}


def _parse_coordinate(text: str, hemispheres: str) -> float:
    """Parse one decimal or sexagesimal coordinate with optional hemisphere letter.

    Parameters:
        text: e.g. ``"51.48"``, ``"51 28 48 N"`` or ``"0:07:30W"``.
        hemispheres: The two accepted suffix letters, e.g. ``"NS"``.

    Returns:
        Signed angle in degrees.

    Raises:
        ValueError: If the text cannot be parsed.
    """
    raw = text.strip().upper()
    sign = 1.0
    if raw and raw[-1] in _HEMISPHERE_SIGNS:
        if raw[-1] not in hemispheres:
            raise ValueError(f'Hemisphere {raw[-1]!r} not allowed in {text!r}')
        sign = _HEMISPHERE_SIGNS[raw[-1]]
        raw = raw[:-1].strip()
        if raw.startswith('-'):
            raise ValueError(f'Negative value with hemisphere letter in {text!r}')
    value = parse_angle(raw)
    if value is None:
        raise ValueError(f'Invalid coordinate {text!r}')
    return sign * value


def parse_observer_location(text: str) -> ObserverLocation:
    """Parse ``"lat, lon"`` or ``"lat lon"`` into an ObserverLocation.

    Each coordinate may be decimal or sexagesimal (``"51 28 48 N, 0 0 5 W"``);
    sexagesimal forms must be comma-separated.

    Parameters:
        text: Latitude and longitude.

    Returns:
        Parsed, range-checked observer location.

    Raises:
        ValueError: If the text does not hold exactly two valid coordinates.
    """
    if ',' in text:
        parts = text.split(',')
    else:
        parts = text.split()
    if len(parts) != 2:
        raise ValueError(f'Observer location needs latitude and longitude, got {text!r}')
    latitude = _parse_coordinate(parts[0], 'NS')
    longitude = _parse_coordinate(parts[1], 'EW')
    return ObserverLocation(latitude=latitude, longitude=longitude)


def observer_from_locator(code: str) -> ObserverLocation | None:
    """Observer at the center of a Maidenhead locator cell, or None if invalid."""
    locator = parse_locator(code)
    if locator is None:
        logger.warning('Cannot place observer at invalid locator %r', code)
        return None
    return ObserverLocation(latitude=locator.lat, longitude=locator.lon)
