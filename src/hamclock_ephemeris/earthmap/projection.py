"""Mercator map projection with pan/zoom state."""

from __future__ import annotations

import dataclasses
import logging
import math
from dataclasses import dataclass
from typing import NamedTuple

from hamclock_ephemeris.angle_utils import clamp, wrap_longitude
from hamclock_ephemeris.config import EngineConfig
from hamclock_ephemeris.constants import (
    DEFAULT_MAP_HEIGHT,
    DEFAULT_MAP_WIDTH,
    DEFAULT_ZOOM,
    DEGREES_PER_CIRCLE,
    HALF_CIRCLE_DEGREES,
    MAX_ZOOM,
    MERCATOR_MAX_LAT,
    MIN_ZOOM,
)

logger = logging.getLogger(__name__)


class ScreenPoint(NamedTuple):
    """Screen position in pixels and whether it lies inside the map panel."""

    x: float
    y: float
    visible: bool

    def to_pixel(self) -> tuple[int, int]:
        """Integer pixel holding this point."""
        return (int(math.floor(self.x)), int(math.floor(self.y)))


def mercator_project(lat: float, lon: float) -> tuple[float, float]:
    """Project to normalized Mercator coordinates.

    x runs 0..1 from -180° to 180°; y runs 0 at the top (85.05°N) to 1 at the
    bottom. Latitude is clamped to ±85.0511° first.

    Parameters:
        lat, lon: Coordinate in degrees.

    Returns:
        (x, y) normalized map coordinates.
    """
    x = (lon + HALF_CIRCLE_DEGREES) / DEGREES_PER_CIRCLE
    lat_rad = math.radians(clamp(lat, -MERCATOR_MAX_LAT, MERCATOR_MAX_LAT))
    m = math.log(math.tan(math.pi / 4.0 + lat_rad / 2.0)) / math.pi
    return (x, (1.0 - m) / 2.0)


def mercator_unproject(x: float, y: float) -> tuple[float, float]:
    """Inverse of mercator_project: normalized (x, y) to (lat, lon) in degrees."""
    lon = x * DEGREES_PER_CIRCLE - HALF_CIRCLE_DEGREES
    m = 1.0 - 2.0 * y
    lat = math.degrees(2.0 * math.atan(math.exp(m * math.pi)) - math.pi / 2.0)
    return (lat, lon)


@dataclass
class ProjectionState:
    """Map view: panel size and position, center and zoom.

    Owned by one display component. pan() and zoom_by() read-modify-write the
    fields without locking; hand other threads a snapshot() instead.
    """

    width: int = DEFAULT_MAP_WIDTH
    height: int = DEFAULT_MAP_HEIGHT
    center_lat: float = 0.0
    center_lon: float = 0.0
    zoom: float = DEFAULT_ZOOM
    offset_x: int = 0
    offset_y: int = 0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f'map size must be positive, got {self.width}x{self.height}')
        self.zoom = clamp(self.zoom, MIN_ZOOM, MAX_ZOOM)

    @classmethod
    def from_config(cls, config: EngineConfig) -> ProjectionState:
        """Initial view described by an EngineConfig."""
        return cls(
            width=config.map_width,
            height=config.map_height,
            center_lat=config.center_lat,
            center_lon=config.center_lon,
            zoom=config.zoom,
            offset_x=config.offset_x,
            offset_y=config.offset_y,
        )

    def snapshot(self) -> ProjectionState:
        """Independent copy for use by another worker."""
        return dataclasses.replace(self)

    def lat_lon_to_screen(self, lat: float, lon: float) -> ScreenPoint:
        """Map a coordinate to screen pixels.

        Parameters:
            lat, lon: Coordinate in degrees.

        Returns:
            ScreenPoint with fractional pixel position and panel visibility.
        """
        px, py = mercator_project(lat, lon)
        cx, cy = mercator_project(self.center_lat, self.center_lon)
        map_x = (px - cx) * self.width / self.zoom + self.width / 2.0
        map_y = (py - cy) * self.height / self.zoom + self.height / 2.0
        visible = 0.0 <= map_x < self.width and 0.0 <= map_y < self.height
        return ScreenPoint(map_x + self.offset_x, map_y + self.offset_y, visible)

    def screen_to_lat_lon(self, x: float, y: float) -> tuple[float, float]:
        """Map a screen position back to (lat, lon) in degrees.

        Longitude is not wrapped, so points left or right of the world edge
        come back outside [-180, 180).
        """
        cx, cy = mercator_project(self.center_lat, self.center_lon)
        px = (x - self.offset_x - self.width / 2.0) * self.zoom / self.width + cx
        py = (y - self.offset_y - self.height / 2.0) * self.zoom / self.height + cy
        return mercator_unproject(px, py)

    def pan(self, dx: float, dy: float) -> None:
        """Shift the center by a pixel delta.

        Latitude is clamped to the Mercator limit and longitude wrapped into
        [-180, 180).
        """
        lat_per_pixel = HALF_CIRCLE_DEGREES / self.height * self.zoom
        lon_per_pixel = DEGREES_PER_CIRCLE / self.width * self.zoom
        self.center_lat = clamp(
            self.center_lat + dy * lat_per_pixel, -MERCATOR_MAX_LAT, MERCATOR_MAX_LAT
        )
        self.center_lon = wrap_longitude(self.center_lon + dx * lon_per_pixel)

    def zoom_by(self, factor: float) -> float:
        """Multiply the zoom by factor, clamped to [0.5, 4.0]; returns the new zoom."""
        requested = self.zoom * factor
        self.zoom = clamp(requested, MIN_ZOOM, MAX_ZOOM)
        if self.zoom != requested:
            logger.debug('Zoom %.3f clamped to %.3f', requested, self.zoom)
        return self.zoom
