"""Astronomical ephemeris and map projection engine for a ham-radio clock.

This package provides the computational core behind the clock's sun/moon panel
and world map:
- Solar ephemeris: declination, equation of time, subsolar point, sunrise/sunset, season
- Lunar ephemeris: phase angle, age, illumination, approximate declination/RA
- Maidenhead grid locator encode/decode
- Mercator map projection with pan/zoom and the greyline (terminator) curve

All formulas are low-order approximations; times are integer UTC seconds and
calendar handling uses rms-julian.
"""

__all__: list[str] = []
