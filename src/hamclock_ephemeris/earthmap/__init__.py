"""World map geometry: Mercator view state, base map, greyline, graticule and marker polylines.

Nothing here draws pixels. Every generator returns integer screen
coordinates, and palette.py holds the RGBA colors the presentation layer
should use for them.
"""

from hamclock_ephemeris.earthmap.basemap import (
    CONTINENT_BOUNDS,
    ScreenRect,
    continent_rects,
    panel_rect,
)
from hamclock_ephemeris.earthmap.greyline import (
    GraticuleLine,
    TerminatorPoint,
    graticule_lines,
    greyline_curve,
    greyline_latitude,
    observer_marker,
    terminator_latitudes,
)
from hamclock_ephemeris.earthmap.projection import (
    ProjectionState,
    ScreenPoint,
    mercator_project,
    mercator_unproject,
)

__all__ = [
    'CONTINENT_BOUNDS',
    'GraticuleLine',
    'ProjectionState',
    'ScreenPoint',
    'ScreenRect',
    'TerminatorPoint',
    'continent_rects',
    'graticule_lines',
    'greyline_curve',
    'greyline_latitude',
    'mercator_project',
    'mercator_unproject',
    'observer_marker',
    'panel_rect',
    'terminator_latitudes',
]
