"""Per-frame ephemeris snapshot: one instant in, solar/lunar/map data out."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from hamclock_ephemeris.angle_utils import dms_string
from hamclock_ephemeris.config import DEFAULT_CONFIG, EngineConfig
from hamclock_ephemeris.earthmap.basemap import ScreenRect, continent_rects, panel_rect
from hamclock_ephemeris.earthmap.greyline import (
    GraticuleLine,
    TerminatorPoint,
    graticule_lines,
    greyline_curve,
    observer_marker,
)
from hamclock_ephemeris.earthmap.palette import (
    BRANCH_COLORS,
    GRATICULE_COLORS,
    LAND,
    OBSERVER,
    OCEAN,
    RGBA,
)
from hamclock_ephemeris.earthmap.projection import ProjectionState
from hamclock_ephemeris.maidenhead import InvalidInputError, Locator, from_lat_lon
from hamclock_ephemeris.moon import LunarPosition, compute_lunar_position
from hamclock_ephemeris.params import ObserverLocation
from hamclock_ephemeris.sun import SolarPosition, compute_solar_position
from hamclock_ephemeris.time_utils import Instant, format_instant

logger = logging.getLogger(__name__)

Segment = tuple[tuple[int, int], tuple[int, int]]


@dataclass(frozen=True)
class Frame:
    """Everything the display needs for one refresh.

    The map layers (panel, continents, graticule, greyline, marker) are empty
    unless compute_frame was given a projector.
    """

    instant: Instant
    observer: ObserverLocation
    solar: SolarPosition
    lunar: LunarPosition
    locator: Locator | None = None
    panel: ScreenRect | None = None
    continents: tuple[ScreenRect, ...] = field(default_factory=tuple)
    graticule: tuple[GraticuleLine, ...] = field(default_factory=tuple)
    greyline: tuple[TerminatorPoint, ...] = field(default_factory=tuple)
    marker: tuple[Segment, ...] = field(default_factory=tuple)

    def base_rects(self) -> list[tuple[RGBA, ScreenRect]]:
        """Ocean panel then continent boxes, each with its fill color."""
        if self.panel is None:
            return []
        return [(OCEAN, self.panel)] + [(LAND, rect) for rect in self.continents]

    def graticule_polylines(self) -> list[tuple[RGBA, list[tuple[int, int]]]]:
        """Grid lines with their colors, in draw order."""
        return [(GRATICULE_COLORS[line.kind], line.points) for line in self.graticule]

    def greyline_polylines(self) -> list[tuple[RGBA, list[tuple[int, int]]]]:
        """Greyline points grouped by branch, each with its color.

        Returns:
            [(color, points)] for the day branch, night branch and subsolar
            point, in that order; branches with no visible points are omitted.
        """
        out: list[tuple[RGBA, list[tuple[int, int]]]] = []
        for branch in ('day', 'night', 'subsolar'):
            points = [(p.x, p.y) for p in self.greyline if p.branch == branch]
            if points:
                out.append((BRANCH_COLORS[branch], points))
        return out

    def marker_segments(self) -> tuple[RGBA, list[Segment]]:
        """Observer marker segments and their color."""
        return (OBSERVER, list(self.marker))

    def summary(self) -> dict[str, str]:
        """Display strings for the sun/moon panel."""
        solar = self.solar
        lunar = self.lunar
        return {
            'time': format_instant(self.instant) + ' UTC',
            'locator': self.locator.code if self.locator is not None else '',
            'sun_dec': f'Sun Dec: {solar.declination_deg:+.1f}°',
            'eot': f'EoT: {solar.equation_of_time_min:+.1f} min',
            'daylight': 'Daylight' if solar.is_daylight else 'Night',
            'sunrise': format_instant(solar.sunrise)[11:16],
            'sunset': format_instant(solar.sunset)[11:16],
            'season': solar.season_name,
            'moon': f'Moon: {lunar.illumination_pct:.0f}%',
            'moon_phase': lunar.phase_name,
            'moon_age': f'Age: {lunar.age_days:.1f} days',
            'moon_ra': dms_string(lunar.right_ascension_hr, 'hms'),
            'moon_dec': dms_string(lunar.declination_deg, 'dms'),
        }


def compute_frame(
    instant: Instant,
    observer: ObserverLocation,
    projector: ProjectionState | None = None,
    config: EngineConfig = DEFAULT_CONFIG,
) -> Frame:
    """Compute the solar, lunar and map state for one display refresh.

    Parameters:
        instant: Unix seconds (UTC), sampled once for the whole frame.
        observer: Observer location.
        projector: Map view; when given, every map layer is generated on one
            snapshot of it so later pan/zoom calls do not affect this frame.
        config: Engine settings (greyline step, graticule spacing, marker
            radius).

    Returns:
        Frame with all values computed from the same instant.
    """
    solar = compute_solar_position(instant, observer.latitude, observer.longitude)
    lunar = compute_lunar_position(instant)
    try:
        locator: Locator | None = from_lat_lon(observer.latitude, observer.longitude)
    except InvalidInputError as e:
        logger.warning('No grid locator for observer %r: %s', observer, e)
        locator = None

    panel: ScreenRect | None = None
    continents: tuple[ScreenRect, ...] = ()
    graticule: tuple[GraticuleLine, ...] = ()
    greyline: tuple[TerminatorPoint, ...] = ()
    marker: tuple[Segment, ...] = ()
    if projector is not None:
        view = projector.snapshot()
        panel = panel_rect(view)
        continents = tuple(rect for _, rect in continent_rects(view))
        graticule = tuple(graticule_lines(view, config.graticule_spacing_deg))
        greyline = tuple(
            greyline_curve(view, solar.subsolar_lat, solar.subsolar_lon, config.greyline_step_deg)
        )
        marker = tuple(
            observer_marker(view, observer.latitude, observer.longitude, config.marker_radius_px)
        )
    logger.debug(
        'Frame at %s: dec=%.3f subsolar=(%.3f, %.3f) moon age=%.2f, %d greyline points',
        format_instant(instant),
        solar.declination_deg,
        solar.subsolar_lat,
        solar.subsolar_lon,
        lunar.age_days,
        len(greyline),
    )
    return Frame(
        instant=int(instant),
        observer=observer,
        solar=solar,
        lunar=lunar,
        locator=locator,
        panel=panel,
        continents=continents,
        graticule=graticule,
        greyline=greyline,
        marker=marker,
    )
