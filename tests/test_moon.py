"""Tests for the lunar ephemeris."""

from __future__ import annotations

import pytest

from hamclock_ephemeris.constants import MOON_ORBIT_INCLINATION_DEG, SYNODIC_MONTH_DAYS
from hamclock_ephemeris.moon import (
    MoonPhase,
    compute_lunar_position,
    illumination_from_phase_angle,
    moon_age,
    moon_illumination,
    phase_category_for_age,
    phase_name_for_age,
)

NEW_MOON_2000 = 947182440  # 2000-01-06 18:14 UTC
FULL_MOON_2000 = 948429600  # 2000-01-21 04:40 UTC


def test_ranges_over_two_years() -> None:
    """Age, illumination, declination and RA stay inside their ranges."""
    for i in range(0, 2 * 365 * 24, 7):
        pos = compute_lunar_position(NEW_MOON_2000 + i * 3600 + 17)
        assert 0.0 <= pos.age_days < SYNODIC_MONTH_DAYS
        assert 0.0 <= pos.illumination_pct <= 100.0
        assert abs(pos.declination_deg) <= MOON_ORBIT_INCLINATION_DEG + 1e-9
        assert 0.0 <= pos.right_ascension_hr < 24.0


def test_known_new_and_full_moon() -> None:
    """Mean elements land within a day of real lunations."""
    age = moon_age(NEW_MOON_2000)
    assert min(age, SYNODIC_MONTH_DAYS - age) < 1.0
    assert moon_illumination(NEW_MOON_2000) < 10.0

    full = compute_lunar_position(FULL_MOON_2000)
    assert full.illumination_pct > 90.0
    assert full.phase_name in ('Waxing Gibbous', 'Full Moon')


def test_illumination_is_linear_in_phase_angle() -> None:
    """0 at new, 50 at the quarters, 100 at full."""
    assert illumination_from_phase_angle(0.0) == 0.0
    assert illumination_from_phase_angle(90.0) == pytest.approx(50.0)
    assert illumination_from_phase_angle(180.0) == pytest.approx(100.0)
    assert illumination_from_phase_angle(270.0) == pytest.approx(50.0)
    assert illumination_from_phase_angle(360.0) == 0.0


@pytest.mark.parametrize(
    ('age', 'name', 'category'),
    [
        (0.5, 'New Moon', MoonPhase.NEW),
        (4.0, 'Waxing Crescent', MoonPhase.WAXING),
        (8.0, 'First Quarter', MoonPhase.WAXING),
        (12.0, 'Waxing Gibbous', MoonPhase.WAXING),
        (15.0, 'Full Moon', MoonPhase.FULL),
        (20.0, 'Waning Gibbous', MoonPhase.WANING),
        (23.0, 'Last Quarter', MoonPhase.WANING),
        (29.0, 'Waning Crescent', MoonPhase.WANING),
    ],
)
def test_phase_bins(age: float, name: str, category: MoonPhase) -> None:
    """Each age falls into its named phase and category."""
    assert phase_name_for_age(age) == name
    assert phase_category_for_age(age) == category


def test_next_new_and_full_moon() -> None:
    """Next new and full moon are within one synodic month ahead."""
    month = SYNODIC_MONTH_DAYS * 86400
    for instant in (NEW_MOON_2000 + 3 * 86400, FULL_MOON_2000 + 86400, 1742472000):
        pos = compute_lunar_position(instant)
        assert instant < pos.next_new_moon <= instant + month
        assert instant <= pos.next_full_moon < instant + month
        expected_new = instant + (SYNODIC_MONTH_DAYS - pos.age_days) * 86400
        assert pos.next_new_moon == pytest.approx(expected_new, abs=1)
