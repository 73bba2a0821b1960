"""Greyline (day/night terminator), graticule and observer marker geometry.

The terminator is an elliptical approximation, not great-circle geometry:
at each longitude the boundary sits 90·sqrt(1 - (h/90)²) degrees north and
south of the subsolar latitude, h being the hour angle folded into [-90, 90].
It is least accurate near the poles.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from typing import Literal, NamedTuple

import numpy as np

from hamclock_ephemeris.angle_utils import fold_hour_angle
from hamclock_ephemeris.constants import (
    DEFAULT_GRATICULE_SPACING_DEG,
    DEFAULT_GREYLINE_STEP_DEG,
    DEFAULT_MARKER_RADIUS_PX,
    DEGREES_PER_CIRCLE,
    HALF_CIRCLE_DEGREES,
    QUARTER_CIRCLE_DEGREES,
)
from hamclock_ephemeris.earthmap.projection import ProjectionState

logger = logging.getLogger(__name__)

Branch = Literal['day', 'night', 'subsolar']
LineKind = Literal['parallel', 'meridian', 'equator', 'prime_meridian']

# Sampling of graticule polylines (degrees between vertices)
_PARALLEL_LON_STEP = 5.0
_MERIDIAN_LAT_STEP = 2.0
_MERIDIAN_LAT_LIMIT = 85.0
_MARKER_SIDES = 8


class TerminatorPoint(NamedTuple):
    """One on-screen vertex of the greyline."""

    x: int
    y: int
    branch: Branch


class GraticuleLine(NamedTuple):
    """One connected run of an on-screen grid line."""

    kind: LineKind
    points: list[tuple[int, int]]


def _sweep(start: float, stop: float, step: float) -> np.ndarray:
    """start, start+step, ... up to and including stop when it lands on the grid."""
    if step <= 0:
        raise ValueError(f'step must be positive, got {step!r}')
    count = int(math.floor((stop - start) / step + 1e-9)) + 1
    return start + step * np.arange(count, dtype=np.float64)


def terminator_latitudes(
    subsolar_lat: float,
    subsolar_lon: float,
    step_deg: float = DEFAULT_GREYLINE_STEP_DEG,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Geographic terminator: day- and night-side latitude at each swept longitude.

    Parameters:
        subsolar_lat, subsolar_lon: Subsolar point in degrees.
        step_deg: Longitude step; the sweep covers -180..180.

    Returns:
        (lons, day_lats, night_lats) arrays of equal length. Latitudes are not
        clipped and may pass beyond ±90; the projection clamps them.
    """
    lons = _sweep(-HALF_CIRCLE_DEGREES, HALF_CIRCLE_DEGREES, step_deg)
    lon_diff = np.mod(lons - subsolar_lon + HALF_CIRCLE_DEGREES, DEGREES_PER_CIRCLE)
    lon_diff -= HALF_CIRCLE_DEGREES
    hour_angle = np.where(
        lon_diff > QUARTER_CIRCLE_DEGREES,
        HALF_CIRCLE_DEGREES - lon_diff,
        np.where(lon_diff < -QUARTER_CIRCLE_DEGREES, -HALF_CIRCLE_DEGREES - lon_diff, lon_diff),
    )
    ratio = hour_angle / QUARTER_CIRCLE_DEGREES
    lat_offset = QUARTER_CIRCLE_DEGREES * np.sqrt(np.clip(1.0 - ratio * ratio, 0.0, None))
    return (lons, subsolar_lat + lat_offset, subsolar_lat - lat_offset)


def greyline_latitude(subsolar_lat: float, subsolar_lon: float, lon: float) -> tuple[float, float]:
    """Day- and night-side terminator latitudes at a single longitude.

    Returns:
        (day_lat, night_lat) in degrees, unclipped.
    """
    diff = (lon - subsolar_lon + HALF_CIRCLE_DEGREES) % DEGREES_PER_CIRCLE - HALF_CIRCLE_DEGREES
    ratio = fold_hour_angle(diff) / QUARTER_CIRCLE_DEGREES
    offset = QUARTER_CIRCLE_DEGREES * math.sqrt(max(0.0, 1.0 - ratio * ratio))
    return (subsolar_lat + offset, subsolar_lat - offset)


def greyline_curve(
    projector: ProjectionState,
    subsolar_lat: float,
    subsolar_lon: float,
    step_deg: float = DEFAULT_GREYLINE_STEP_DEG,
) -> Iterator[TerminatorPoint]:
    """Generate the on-screen greyline for one frame.

    Yields the day-side branch west to east, then the night-side branch, then
    the subsolar point. Off-screen vertices are skipped. The generator reads
    the projector lazily, so pass a snapshot if the view may change meanwhile.

    Parameters:
        projector: Current map view.
        subsolar_lat, subsolar_lon: Subsolar point in degrees.
        step_deg: Longitude step of the sweep.

    Yields:
        TerminatorPoint with integer pixel coordinates.
    """
    lons, day_lats, night_lats = terminator_latitudes(subsolar_lat, subsolar_lon, step_deg)
    branches: tuple[tuple[Branch, np.ndarray], ...] = (('day', day_lats), ('night', night_lats))
    for branch, lats in branches:
        for lon, lat in zip(lons, lats):
            point = projector.lat_lon_to_screen(float(lat), float(lon))
            if point.visible:
                x, y = point.to_pixel()
                yield TerminatorPoint(x, y, branch)
    sub = projector.lat_lon_to_screen(subsolar_lat, subsolar_lon)
    if sub.visible:
        x, y = sub.to_pixel()
        yield TerminatorPoint(x, y, 'subsolar')


def _visible_runs(
    projector: ProjectionState,
    coords: Iterator[tuple[float, float]],
) -> Iterator[list[tuple[int, int]]]:
    """Split a sampled (lat, lon) line into runs of consecutive visible pixels."""
    run: list[tuple[int, int]] = []
    for lat, lon in coords:
        point = projector.lat_lon_to_screen(lat, lon)
        if point.visible:
            run.append(point.to_pixel())
        elif run:
            if len(run) > 1:
                yield run
            run = []
    if len(run) > 1:
        yield run


def graticule_lines(
    projector: ProjectionState,
    spacing_deg: float = DEFAULT_GRATICULE_SPACING_DEG,
) -> Iterator[GraticuleLine]:
    """Latitude circles and meridians every spacing_deg, then the equator and prime meridian.

    Parameters:
        projector: Current map view.
        spacing_deg: Grid spacing in degrees.

    Yields:
        GraticuleLine polylines of at least two pixels each.
    """
    lon_samples = _sweep(-HALF_CIRCLE_DEGREES, HALF_CIRCLE_DEGREES, _PARALLEL_LON_STEP)
    lat_samples = _sweep(-_MERIDIAN_LAT_LIMIT, _MERIDIAN_LAT_LIMIT, _MERIDIAN_LAT_STEP)

    north = _sweep(spacing_deg, QUARTER_CIRCLE_DEGREES - 1e-6, spacing_deg)
    for lat in np.concatenate((-north[::-1], north)):
        coords = ((float(lat), float(lon)) for lon in lon_samples)
        for run in _visible_runs(projector, coords):
            yield GraticuleLine('parallel', run)

    for lon in _sweep(-HALF_CIRCLE_DEGREES, HALF_CIRCLE_DEGREES - 1e-6, spacing_deg):
        if abs(lon) < 1e-9:
            continue
        coords = ((float(lat), float(lon)) for lat in lat_samples)
        for run in _visible_runs(projector, coords):
            yield GraticuleLine('meridian', run)

    for run in _visible_runs(projector, ((0.0, float(lon)) for lon in lon_samples)):
        yield GraticuleLine('equator', run)
    for run in _visible_runs(projector, ((float(lat), 0.0) for lat in lat_samples)):
        yield GraticuleLine('prime_meridian', run)


def observer_marker(
    projector: ProjectionState,
    lat: float,
    lon: float,
    radius: int = DEFAULT_MARKER_RADIUS_PX,
) -> list[tuple[tuple[int, int], tuple[int, int]]]:
    """Line segments of the observer marker: an octagon plus crosshairs.

    Returns:
        List of ((x1, y1), (x2, y2)) segments; empty when the observer is off-screen.
    """
    point = projector.lat_lon_to_screen(lat, lon)
    if not point.visible:
        logger.debug('Observer (%.3f, %.3f) is off-screen', lat, lon)
        return []
    x, y = point.to_pixel()
    segments: list[tuple[tuple[int, int], tuple[int, int]]] = []
    for i in range(_MARKER_SIDES):
        a1 = 2.0 * math.pi * i / _MARKER_SIDES
        a2 = 2.0 * math.pi * (i + 1) / _MARKER_SIDES
        segments.append(
            (
                (x + int(radius * math.cos(a1)), y + int(radius * math.sin(a1))),
                (x + int(radius * math.cos(a2)), y + int(radius * math.sin(a2))),
            )
        )
    arm = 2 * radius
    segments.append(((x - arm, y), (x + arm, y)))
    segments.append(((x, y - arm), (x, y + arm)))
    return segments
