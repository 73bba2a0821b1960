"""Maidenhead grid locator encoding and decoding.

A 6-character locator such as ``IO91wm`` is built from three pairs, each pair
giving longitude then latitude:

- field: 18 x 18 letters A-R, 20° of longitude by 10° of latitude
- square: 10 x 10 digits 0-9, 2° by 1°
- subsquare: 24 x 24 letters a-x, 5' by 2.5'
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from hamclock_ephemeris.constants import (
    DEGREES_PER_CIRCLE,
    FIELD_COUNT,
    FIELD_LAT_DEG,
    FIELD_LON_DEG,
    HALF_CIRCLE_DEGREES,
    QUARTER_CIRCLE_DEGREES,
    SQUARE_COUNT,
    SQUARE_LAT_DEG,
    SQUARE_LON_DEG,
    SUBSQUARE_COUNT,
    SUBSQUARE_LAT_DEG,
    SUBSQUARE_LON_DEG,
)

logger = logging.getLogger(__name__)

_FIELD_LETTERS = 'ABCDEFGHIJKLMNOPQR'
_SQUARE_DIGITS = '0123456789'
_SUBSQUARE_LETTERS = 'abcdefghijklmnopqrstuvwx'


class InvalidInputError(ValueError):
    """Malformed locator string or out-of-range coordinate."""


@dataclass(frozen=True)
class Locator:
    """A grid locator and the center of the cell it names."""

    code: str
    lat: float
    lon: float


def _index(scaled: float, count: int) -> int:
    """floor(scaled) clamped to [0, count - 1]."""
    return max(0, min(int(math.floor(scaled)), count - 1))


def from_lat_lon(lat: float, lon: float) -> Locator:
    """Encode a coordinate as a 6-character locator.

    Longitude wraps, so 180 and -180 both fall in field A. Latitude 90 is
    placed in the topmost cell (``R``, ``9``, ``x``).

    Parameters:
        lat: Latitude in degrees (-90..90).
        lon: Longitude in degrees, any value.

    Returns:
        Locator with the 6-character code and its subsquare center.

    Raises:
        InvalidInputError: If latitude + 90 falls outside [0, 180] or an input
            is not finite.
    """
    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise InvalidInputError(f'Coordinates must be finite, got ({lat!r}, {lon!r})')
    lat_norm = lat + QUARTER_CIRCLE_DEGREES
    if lat_norm < 0.0 or lat_norm > HALF_CIRCLE_DEGREES:
        raise InvalidInputError(f'Latitude {lat!r} outside [-90, 90]')
    lon_norm = (lon + HALF_CIRCLE_DEGREES) % DEGREES_PER_CIRCLE
    if lon_norm >= DEGREES_PER_CIRCLE:
        lon_norm = 0.0

    field_lon = _index(lon_norm / FIELD_LON_DEG, FIELD_COUNT)
    field_lat = _index(lat_norm / FIELD_LAT_DEG, FIELD_COUNT)
    lon_rem = lon_norm - field_lon * FIELD_LON_DEG
    lat_rem = lat_norm - field_lat * FIELD_LAT_DEG

    sq_lon = _index(lon_rem / SQUARE_LON_DEG, SQUARE_COUNT)
    sq_lat = _index(lat_rem / SQUARE_LAT_DEG, SQUARE_COUNT)
    lon_rem2 = lon_rem - sq_lon * SQUARE_LON_DEG
    lat_rem2 = lat_rem - sq_lat * SQUARE_LAT_DEG

    sub_lon = _index(lon_rem2 * 12.0, SUBSQUARE_COUNT)
    sub_lat = _index(lat_rem2 * 24.0, SUBSQUARE_COUNT)

    code = (
        _FIELD_LETTERS[field_lon]
        + _FIELD_LETTERS[field_lat]
        + _SQUARE_DIGITS[sq_lon]
        + _SQUARE_DIGITS[sq_lat]
        + _SUBSQUARE_LETTERS[sub_lon]
        + _SUBSQUARE_LETTERS[sub_lat]
    )
    center_lon = (
        -HALF_CIRCLE_DEGREES
        + field_lon * FIELD_LON_DEG
        + sq_lon * SQUARE_LON_DEG
        + (sub_lon + 0.5) * SUBSQUARE_LON_DEG
    )
    center_lat = (
        -QUARTER_CIRCLE_DEGREES
        + field_lat * FIELD_LAT_DEG
        + sq_lat * SQUARE_LAT_DEG
        + (sub_lat + 0.5) * SUBSQUARE_LAT_DEG
    )
    return Locator(code=code, lat=center_lat, lon=center_lon)


def _decode(code: str) -> Locator | None:
    """Decode a 2, 4 or 6 character locator to its cell center, or None."""
    if len(code) not in (2, 4, 6):
        return None
    field_lon = _FIELD_LETTERS.find(code[0].upper())
    field_lat = _FIELD_LETTERS.find(code[1].upper())
    if field_lon < 0 or field_lat < 0:
        return None
    lon = -HALF_CIRCLE_DEGREES + field_lon * FIELD_LON_DEG
    lat = -QUARTER_CIRCLE_DEGREES + field_lat * FIELD_LAT_DEG
    if len(code) == 2:
        return Locator(
            code=code[:2].upper(),
            lat=lat + FIELD_LAT_DEG / 2.0,
            lon=lon + FIELD_LON_DEG / 2.0,
        )

    sq_lon = _SQUARE_DIGITS.find(code[2])
    sq_lat = _SQUARE_DIGITS.find(code[3])
    if sq_lon < 0 or sq_lat < 0:
        return None
    lon += sq_lon * SQUARE_LON_DEG
    lat += sq_lat * SQUARE_LAT_DEG
    if len(code) == 4:
        return Locator(
            code=code[:2].upper() + code[2:4],
            lat=lat + SQUARE_LAT_DEG / 2.0,
            lon=lon + SQUARE_LON_DEG / 2.0,
        )

    sub_lon = _SUBSQUARE_LETTERS.find(code[4].lower())
    sub_lat = _SUBSQUARE_LETTERS.find(code[5].lower())
    if sub_lon < 0 or sub_lat < 0:
        return None
    lon += (sub_lon + 0.5) * SUBSQUARE_LON_DEG
    lat += (sub_lat + 0.5) * SUBSQUARE_LAT_DEG
    return Locator(code=code[:2].upper() + code[2:4] + code[4:6].lower(), lat=lat, lon=lon)


def to_lat_lon(code: str) -> Locator:
    """Decode a 4- or 6-character locator to the center of its cell.

    Letters are case-insensitive; the returned code is normalized to
    ``AA00aa`` case.

    Raises:
        InvalidInputError: On wrong length or an out-of-range character.
    """
    if len(code) not in (4, 6):
        raise InvalidInputError(f'Locator must have 4 or 6 characters, got {code!r}')
    locator = _decode(code)
    if locator is None:
        raise InvalidInputError(f'Invalid locator {code!r}')
    return locator


def parse_locator(code: str) -> Locator | None:
    """Decode a locator, returning None instead of raising on bad input."""
    try:
        return to_lat_lon(code.strip())
    except InvalidInputError as e:
        logger.debug('Rejected locator: %s', e)
        return None


def is_valid(code: str) -> bool:
    """Structural check: 4 or 6 characters with the right class at each position.

    Field letters must be uppercase A-R; subsquare letters may be either case.
    to_lat_lon is more lenient and also accepts lowercase fields.
    """
    if len(code) not in (4, 6):
        return False
    if code[0] not in _FIELD_LETTERS or code[1] not in _FIELD_LETTERS:
        return False
    return _decode(code) is not None


def bounding_box(lat1: float, lon1: float, lat2: float, lon2: float) -> Locator:
    """Coarse cell covering two points.

    Returns the shared 4-character square when both points fall in it;
    otherwise the first point's 2-character field. The result is not a
    minimal enclosing box.

    Raises:
        InvalidInputError: If either point cannot be encoded.
    """
    code1 = from_lat_lon(lat1, lon1).code
    code2 = from_lat_lon(lat2, lon2).code
    if code1[:4] == code2[:4]:
        return to_lat_lon(code1[:4])
    field = _decode(code1[:2])
    if field is None:
        raise InvalidInputError(f'Cannot decode field of {code1!r}')
    return field
