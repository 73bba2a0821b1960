"""Engine configuration: read-only settings injected into each call.

The clock's own configuration collaborator owns persistence and environment
handling; it builds one EngineConfig and passes it in.
"""

from __future__ import annotations

from dataclasses import dataclass

from hamclock_ephemeris.constants import (
    DEFAULT_GRATICULE_SPACING_DEG,
    DEFAULT_GREYLINE_STEP_DEG,
    DEFAULT_MAP_HEIGHT,
    DEFAULT_MAP_WIDTH,
    DEFAULT_MARKER_RADIUS_PX,
    DEFAULT_ZOOM,
    MAX_ZOOM,
    MIN_ZOOM,
)


@dataclass(frozen=True)
class EngineConfig:
    """Map panel geometry and curve sampling settings.

    Attributes:
        map_width, map_height: Map panel size in pixels.
        offset_x, offset_y: Screen position of the panel's top-left corner.
        center_lat, center_lon: Initial map center in degrees.
        zoom: Initial zoom (1.0 shows the whole world).
        greyline_step_deg: Longitude step of the terminator sweep.
        graticule_spacing_deg: Spacing of latitude circles and meridians.
        marker_radius_px: Observer marker radius.
    """

    map_width: int = DEFAULT_MAP_WIDTH
    map_height: int = DEFAULT_MAP_HEIGHT
    offset_x: int = 0
    offset_y: int = 0
    center_lat: float = 0.0
    center_lon: float = 0.0
    zoom: float = DEFAULT_ZOOM
    greyline_step_deg: float = DEFAULT_GREYLINE_STEP_DEG
    graticule_spacing_deg: float = DEFAULT_GRATICULE_SPACING_DEG
    marker_radius_px: int = DEFAULT_MARKER_RADIUS_PX

    def __post_init__(self) -> None:
        if self.map_width <= 0 or self.map_height <= 0:
            raise ValueError(
                f'map size must be positive, got {self.map_width}x{self.map_height}'
            )
        if not MIN_ZOOM <= self.zoom <= MAX_ZOOM:
            raise ValueError(f'zoom must be in [{MIN_ZOOM}, {MAX_ZOOM}], got {self.zoom!r}')
        if self.greyline_step_deg <= 0:
            raise ValueError(f'greyline_step_deg must be positive, got {self.greyline_step_deg!r}')
        if self.graticule_spacing_deg <= 0:
            raise ValueError(
                f'graticule_spacing_deg must be positive, got {self.graticule_spacing_deg!r}'
            )


DEFAULT_CONFIG = EngineConfig()
