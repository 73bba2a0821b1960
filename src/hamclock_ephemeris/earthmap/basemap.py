"""Base map layer: ocean background and coarse continent boxes.

Continents are latitude/longitude bounding boxes, not coastlines. Each box is
projected to the screen rectangle spanned by its corners and clipped to the
map panel.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from typing import NamedTuple

from hamclock_ephemeris.earthmap.projection import ProjectionState


class ScreenRect(NamedTuple):
    """Integer screen rectangle (top-left corner and size in pixels)."""

    x: int
    y: int
    width: int
    height: int


# (name, lat_min, lat_max, lon_min, lon_max)
CONTINENT_BOUNDS: tuple[tuple[str, float, float, float, float], ...] = (
    ('North America', 25.0, 50.0, -130.0, -65.0),
    ('South America', -56.0, 13.0, -82.0, -35.0),
    ('Europe', 35.0, 71.0, -11.0, 41.0),
    ('Africa', -35.0, 37.0, -18.0, 52.0),
    ('Asia', -10.0, 77.0, 26.0, 180.0),
    ('Australia', -44.0, -10.0, 113.0, 155.0),
    ('Greenland', 60.0, 84.0, -73.0, -11.0),
)


def panel_rect(projector: ProjectionState) -> ScreenRect:
    """The whole map panel, filled with the ocean color."""
    return ScreenRect(projector.offset_x, projector.offset_y, projector.width, projector.height)


def continent_rects(projector: ProjectionState) -> Iterator[tuple[str, ScreenRect]]:
    """Project the continent boxes to screen rectangles.

    Parameters:
        projector: Current map view.

    Yields:
        (continent name, rectangle) for each box with a non-empty part inside
        the panel, in table order.
    """
    left_edge = float(projector.offset_x)
    top_edge = float(projector.offset_y)
    right_edge = left_edge + projector.width
    bottom_edge = top_edge + projector.height
    for name, lat_min, lat_max, lon_min, lon_max in CONTINENT_BOUNDS:
        north_west = projector.lat_lon_to_screen(lat_max, lon_min)
        south_east = projector.lat_lon_to_screen(lat_min, lon_max)
        left = int(math.floor(max(north_west.x, left_edge)))
        right = int(math.floor(min(south_east.x, right_edge)))
        top = int(math.floor(max(north_west.y, top_edge)))
        bottom = int(math.floor(min(south_east.y, bottom_edge)))
        if right > left and bottom > top:
            yield (name, ScreenRect(left, top, right - left, bottom - top))
