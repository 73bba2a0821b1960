"""Tests for observer parameters, angle helpers and engine configuration."""

from __future__ import annotations

import pytest

from hamclock_ephemeris.angle_utils import (
    clamp,
    dms_string,
    fold_hour_angle,
    normalize_degrees,
    parse_angle,
    signed_difference,
    wrap_longitude,
)
from hamclock_ephemeris.config import DEFAULT_CONFIG, EngineConfig
from hamclock_ephemeris.params import (
    ObserverLocation,
    observer_from_locator,
    parse_observer_location,
)


def test_observer_location_validation() -> None:
    """Coordinates outside the globe are rejected."""
    assert ObserverLocation() == ObserverLocation(0.0, 0.0)
    with pytest.raises(ValueError, match='latitude'):
        ObserverLocation(latitude=95.0)
    with pytest.raises(ValueError, match='longitude'):
        ObserverLocation(longitude=-181.0)
    with pytest.raises(ValueError):
        ObserverLocation(latitude=float('nan'))


def test_parse_observer_location_forms() -> None:
    """Decimal, whitespace-separated and sexagesimal forms all parse."""
    loc = parse_observer_location('51.48, -0.01')
    assert (loc.latitude, loc.longitude) == pytest.approx((51.48, -0.01))
    loc = parse_observer_location('40.0 -105.5')
    assert (loc.latitude, loc.longitude) == pytest.approx((40.0, -105.5))
    loc = parse_observer_location('51 28 48 N, 0 0 36 W')
    assert (loc.latitude, loc.longitude) == pytest.approx((51.48, -0.01))
    loc = parse_observer_location('33:52:08S, 151:12:33E')
    assert loc.latitude == pytest.approx(-33.868889)
    assert loc.longitude == pytest.approx(151.209167)


@pytest.mark.parametrize('text', ['abc', '51.48', '95, 0', '51N, 10S', '-5N, 0', '1, 2, 3'])
def test_parse_observer_location_errors(text: str) -> None:
    """Malformed or out-of-range text raises ValueError."""
    with pytest.raises(ValueError):
        parse_observer_location(text)


def test_observer_from_locator() -> None:
    """Observer is placed at the locator cell center."""
    loc = observer_from_locator('FN31')
    assert loc is not None
    assert (loc.latitude, loc.longitude) == pytest.approx((41.5, -73.0))
    assert observer_from_locator('ZZ99') is None


def test_angle_normalization() -> None:
    """Angles reduce into their canonical ranges."""
    assert normalize_degrees(-90.0) == 270.0
    assert normalize_degrees(720.0) == 0.0
    assert normalize_degrees(-1e-15) == 0.0
    assert wrap_longitude(180.0) == -180.0
    assert wrap_longitude(190.0) == pytest.approx(-170.0)
    assert wrap_longitude(-180.0) == -180.0
    assert signed_difference(170.0, -170.0) == pytest.approx(-20.0)
    assert signed_difference(-170.0, 170.0) == pytest.approx(20.0)
    assert fold_hour_angle(100.0) == 80.0
    assert fold_hour_angle(-170.0) == -10.0
    assert fold_hour_angle(45.0) == 45.0
    assert clamp(5.0, 0.0, 1.0) == 1.0


def test_parse_angle() -> None:
    """Sexagesimal text parses to decimal degrees."""
    assert parse_angle('51 28 48') == pytest.approx(51.48)
    assert parse_angle('-0 30') == pytest.approx(-0.5)
    assert parse_angle('12:30') == pytest.approx(12.5)
    assert parse_angle('51.48') == pytest.approx(51.48)
    assert parse_angle('') is None
    assert parse_angle('1 -2') is None
    assert parse_angle('x') is None
    assert parse_angle('1 2 3 4') is None


def test_dms_string() -> None:
    """Angles format with unit marks and zero-padded minutes and seconds."""
    assert dms_string(-23.4367, 'dms') == '-23d 26m 12s'
    assert dms_string(12.5, 'hms') == '12h 30m 00s'
    assert dms_string(1.5 / 3600.0, 'dms', 1) == '0d 00m 01.5s'


def test_engine_config_validation() -> None:
    """Invalid panel sizes, zoom or steps are rejected."""
    assert DEFAULT_CONFIG.map_width == 800
    assert DEFAULT_CONFIG.map_height == 500
    assert DEFAULT_CONFIG.zoom == 1.0
    with pytest.raises(ValueError, match='map size'):
        EngineConfig(map_width=0)
    with pytest.raises(ValueError, match='zoom'):
        EngineConfig(zoom=5.0)
    with pytest.raises(ValueError, match='greyline_step_deg'):
        EngineConfig(greyline_step_deg=0.0)
    with pytest.raises(ValueError, match='graticule_spacing_deg'):
        EngineConfig(graticule_spacing_deg=-1.0)
