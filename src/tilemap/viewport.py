"""Viewport computation helpers feeding :class:`~tilemap.projection.Projection`."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from .config import MAX_LONGITUDE, MAXIMUM_ZOOM_LEVEL, MIN_LONGITUDE, MIN_ZOOM_LEVEL
from .errors import InvalidViewportError
from .geometry import BoundingBox, Rect
from .tile_math import map_size, project_geo_to_world, project_world_to_geo

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewState:
    """Describe the camera parameters used for the current paint pass.

    Scroll offsets and both screen rectangles live in the centred world space
    where ``(0, 0)`` is the middle of the map at ``zoom``.
    """

    view_half_width: float
    view_half_height: float
    zoom: float
    scroll_x: float
    scroll_y: float
    bounding_box: BoundingBox
    screen_rect: Rect
    intrinsic_screen_rect: Rect
    orientation: float = 0.0

    @property
    def width(self) -> float:
        return self.view_half_width * 2.0

    @property
    def height(self) -> float:
        return self.view_half_height * 2.0


def _rotated_bounds(rect: Rect, pivot_x: float, pivot_y: float, degrees: float) -> Rect:
    """Return the axis-aligned bounds of ``rect`` rotated about the pivot."""

    if degrees % 360.0 == 0.0:
        return Rect(rect.left, rect.top, rect.right, rect.bottom)

    theta = math.radians(degrees)
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    xs: list[float] = []
    ys: list[float] = []
    for corner_x, corner_y in (
        (rect.left, rect.top),
        (rect.right, rect.top),
        (rect.right, rect.bottom),
        (rect.left, rect.bottom),
    ):
        dx = corner_x - pivot_x
        dy = corner_y - pivot_y
        xs.append(pivot_x + dx * cos_t - dy * sin_t)
        ys.append(pivot_y + dx * sin_t + dy * cos_t)
    return Rect(min(xs), min(ys), max(xs), max(ys))


def _bounding_box(screen_rect: Rect, zoom: float) -> BoundingBox:
    size = map_size(zoom)
    half_world = size / 2.0

    north = project_world_to_geo(0.0, screen_rect.top + half_world, zoom).latitude
    south = project_world_to_geo(0.0, screen_rect.bottom + half_world, zoom).latitude

    # Longitudes are derived linearly so a view straddling the antimeridian
    # keeps ``west <= east`` instead of wrapping back to -180.
    west = (screen_rect.left / size) * 360.0
    east = (screen_rect.right / size) * 360.0
    if east - west >= 360.0:
        west, east = MIN_LONGITUDE, MAX_LONGITUDE
    return BoundingBox(north=north, east=east, south=south, west=west)


def compute_view_state(
    center_latitude: float,
    center_longitude: float,
    zoom: float,
    width: float,
    height: float,
    orientation: float = 0.0,
) -> ViewState:
    """Translate viewport geometry into the snapshot consumed by ``Projection``.

    The viewport owns the invariants the projection relies on: a non-negative
    size and a zoom level that yields a non-empty world no finer than
    ``MAXIMUM_ZOOM_LEVEL``.
    """

    if not (math.isfinite(width) and math.isfinite(height)) or width < 0 or height < 0:
        raise InvalidViewportError(f"Viewport size must be non-negative, got {width}x{height}")
    if not math.isfinite(zoom) or zoom < MIN_ZOOM_LEVEL:
        raise InvalidViewportError(f"Zoom level {zoom} is below the minimum of {MIN_ZOOM_LEVEL}")
    if zoom > MAXIMUM_ZOOM_LEVEL:
        _LOGGER.warning("Clamping zoom %.3f to the maximum level %d", zoom, MAXIMUM_ZOOM_LEVEL)
        zoom = float(MAXIMUM_ZOOM_LEVEL)

    half_world = map_size(zoom) / 2.0
    center = project_geo_to_world(center_latitude, center_longitude, zoom)
    scroll_x = center.x - half_world
    scroll_y = center.y - half_world

    half_width = width / 2.0
    half_height = height / 2.0
    intrinsic = Rect(
        scroll_x - half_width,
        scroll_y - half_height,
        scroll_x + half_width,
        scroll_y + half_height,
    )
    screen_rect = _rotated_bounds(intrinsic, scroll_x, scroll_y, orientation)

    state = ViewState(
        view_half_width=half_width,
        view_half_height=half_height,
        zoom=zoom,
        scroll_x=scroll_x,
        scroll_y=scroll_y,
        bounding_box=_bounding_box(screen_rect, zoom),
        screen_rect=screen_rect,
        intrinsic_screen_rect=intrinsic,
        orientation=orientation,
    )
    _LOGGER.debug(
        "View state at zoom %.3f: scroll=(%.1f, %.1f) size=%sx%s",
        zoom,
        scroll_x,
        scroll_y,
        width,
        height,
    )
    return state


__all__ = ["ViewState", "compute_view_state"]
