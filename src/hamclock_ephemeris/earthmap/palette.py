"""RGBA colors handed to the presentation layer with each polyline or point."""

from __future__ import annotations

RGBA = tuple[int, int, int, int]

OCEAN: RGBA = (20, 60, 120, 255)
LAND: RGBA = (34, 139, 34, 255)
GRID: RGBA = (64, 64, 96, 255)
PRIME_LINES: RGBA = (128, 128, 160, 200)  # equator and prime meridian
GREYLINE: RGBA = (200, 150, 100, 255)
OBSERVER: RGBA = (0, 255, 0, 255)
SUBSOLAR: RGBA = (255, 255, 0, 255)

BRANCH_COLORS: dict[str, RGBA] = {
    'day': GREYLINE,
    'night': GREYLINE,
    'subsolar': SUBSOLAR,
}

GRATICULE_COLORS: dict[str, RGBA] = {
    'parallel': GRID,
    'meridian': GRID,
    'equator': PRIME_LINES,
    'prime_meridian': PRIME_LINES,
}
