"""Tests for the solar ephemeris."""

from __future__ import annotations

import pytest

from hamclock_ephemeris.sun import (
    Season,
    classify_season,
    compute_solar_position,
    equation_of_time,
    is_daylight,
    next_solstice_equinox,
    season_for,
    season_name,
    solar_declination,
    solar_noon,
    subsolar_longitude,
    sunrise_sunset,
)
from hamclock_ephemeris.time_utils import instant_from_ymd_hms, start_of_day, to_julian_day

J2000_NOON_UNIX = 946728000


def test_declination_stays_within_obliquity() -> None:
    """Declination never exceeds about 23.45° over several decades."""
    start = instant_from_ymd_hms(1990, 1, 1)
    for i in range(0, 40 * 365, 5):
        dec = solar_declination(start + i * 86400 + 3 * 3600)
        assert -23.5 <= dec <= 23.5


@pytest.mark.parametrize(
    ('month', 'day', 'expected_dec', 'season'),
    [
        (3, 20, 0.0, Season.SPRING),
        (6, 21, 23.44, Season.SUMMER),
        (9, 22, 0.0, Season.AUTUMN),
        (12, 21, -23.44, Season.WINTER),
    ],
)
def test_solstices_and_equinoxes(
    month: int, day: int, expected_dec: float, season: Season
) -> None:
    """Declination and season at the four cardinal dates of 2025."""
    instant = instant_from_ymd_hms(2025, month, day, 12)
    assert solar_declination(instant) == pytest.approx(expected_dec, abs=2.0)
    assert season_for(instant) == season
    assert compute_solar_position(instant, 0.0, 0.0).season == season


def test_classify_season_band() -> None:
    """Declination decides outside ±5°; the month decides inside."""
    assert classify_season(5.0, 3) == Season.SUMMER
    assert classify_season(10.0, 4) == Season.SUMMER
    assert classify_season(-5.0, 9) == Season.WINTER
    assert classify_season(-2.0, 3) == Season.SPRING
    assert classify_season(2.0, 10) == Season.AUTUMN
    assert classify_season(0.0, 7) == Season.SUMMER
    assert classify_season(0.0, 1) == Season.WINTER
    assert season_name(Season.AUTUMN) == 'Autumn'


def test_equation_of_time_at_j2000() -> None:
    """At J2000.0 the day angle is a full turn."""
    assert equation_of_time(J2000_NOON_UNIX) == pytest.approx(-2.90417, abs=1e-4)


def test_subsolar_longitude() -> None:
    """Subsolar longitude is 0 at noon UTC and wraps into [-180, 180)."""
    midnight = instant_from_ymd_hms(2025, 6, 1)
    assert subsolar_longitude(midnight + 12 * 3600) == pytest.approx(0.0)
    assert subsolar_longitude(midnight) == pytest.approx(-180.0)
    assert subsolar_longitude(midnight + 18 * 3600) == pytest.approx(90.0)
    assert subsolar_longitude(midnight + 6 * 3600) == pytest.approx(-90.0)
    for minute in range(0, 24 * 60, 7):
        lon = subsolar_longitude(midnight + minute * 60)
        assert -180.0 <= lon < 180.0


def test_sunrise_sunset_mid_latitude() -> None:
    """At 40N on the June solstice the day is about 15 hours long."""
    instant = instant_from_ymd_hms(2025, 6, 21, 12)
    midnight = start_of_day(instant)
    sunrise, sunset = sunrise_sunset(instant, 40.0, 0.0)
    assert 4 * 3600 <= sunrise - midnight <= 5 * 3600
    assert 19 * 3600 <= sunset - midnight <= 20 * 3600


def test_sunrise_sunset_polar_sentinels() -> None:
    """Polar day and polar night return the fixed one-day sentinels."""
    instant = instant_from_ymd_hms(2025, 6, 21, 12)
    assert sunrise_sunset(instant, 80.0, 0.0) == (instant, instant + 86400)
    assert sunrise_sunset(instant, -80.0, 0.0) == (instant + 86400, instant)


def test_solar_noon_moves_with_longitude() -> None:
    """Fifteen degrees east brings solar noon one hour earlier."""
    instant = instant_from_ymd_hms(2025, 1, 1, 6)
    assert solar_noon(instant, 0.0) - solar_noon(instant, 15.0) == pytest.approx(3600, abs=1)
    noon = solar_noon(instant, 0.0)
    assert abs(noon - (start_of_day(instant) + 12 * 3600)) < 20 * 60


def test_is_daylight() -> None:
    """Daylight means within 90° of latitude from the subsolar point."""
    assert is_daylight(0.0, 23.0)
    assert is_daylight(51.5, -20.0)
    assert not is_daylight(-80.0, 23.0)
    assert not is_daylight(90.0, -90.0)


def test_next_solstice_equinox() -> None:
    """Next event is strictly in the future and rolls over after December."""
    jan = instant_from_ymd_hms(2025, 1, 15)
    assert next_solstice_equinox(jan) == (
        instant_from_ymd_hms(2025, 3, 20, 12),
        'Vernal Equinox',
    )
    june_event = instant_from_ymd_hms(2025, 6, 21, 12)
    assert next_solstice_equinox(june_event - 1) == (june_event, 'Summer Solstice')
    assert next_solstice_equinox(june_event)[1] == 'Autumnal Equinox'

    next_march = instant_from_ymd_hms(2026, 3, 20, 12)
    dec_event = instant_from_ymd_hms(2025, 12, 21, 12)
    assert next_solstice_equinox(dec_event) == (next_march, 'Vernal Equinox')
    assert next_solstice_equinox(dec_event + 86400)[0] == next_march


def test_compute_solar_position_is_consistent() -> None:
    """All fields come from the same instant."""
    instant = instant_from_ymd_hms(2025, 8, 10, 15, 30)
    pos = compute_solar_position(instant, 41.7, -72.7)
    assert pos.subsolar_lat == pos.declination_deg
    assert pos.declination_deg == solar_declination(instant)
    assert pos.subsolar_lon == subsolar_longitude(instant)
    assert pos.next_solstice_equinox - instant == pos.seconds_to_next_solstice_equinox
    assert pos.seconds_to_next_solstice_equinox > 0
    assert pos.sunrise < pos.sunset
    assert pos.season_name == 'Summer'


def test_solar_noon_julian_day() -> None:
    """Solar noon JD shifts by a quarter day at 90 degrees east."""
    instant = instant_from_ymd_hms(2025, 8, 10)
    pos = compute_solar_position(instant, 0.0, 90.0)
    assert pos.solar_noon_jd == pytest.approx(to_julian_day(instant) + 0.25)


def test_spring_and_autumn_are_short() -> None:
    """The ±5° band leaves Spring and Autumn only a few weeks each."""
    start = instant_from_ymd_hms(2025, 1, 1, 12)
    counts = {season: 0 for season in Season}
    for day in range(365):
        counts[season_for(start + day * 86400)] += 1
    assert 15 <= counts[Season.SPRING] <= 40
    assert 15 <= counts[Season.AUTUMN] <= 40
    assert counts[Season.SUMMER] > 140
    assert counts[Season.WINTER] > 140
    assert season_for(instant_from_ymd_hms(2025, 3, 25, 12)) == Season.SPRING
    assert season_for(instant_from_ymd_hms(2025, 4, 20, 12)) == Season.SUMMER
