"""Per-frame translation between geographic, world and screen coordinates.

*Screen coordinates* have their origin in the centre of the world plane and are
what rendering code draws with.  *Map coordinates* follow the Mercator world
pixel layout with the origin in the north-west corner.  *Intermediate
coordinates* are map coordinates computed once at ``MAXIMUM_ZOOM_LEVEL`` so the
expensive projection can be cached; they are meaningless on screen until
passed through :meth:`Projection.rescale_cached`.

A :class:`Projection` copies everything it needs out of a
:class:`~tilemap.viewport.ViewState` when it is built.  Do not hold on to one
for longer than a single draw: once the viewport scrolls or zooms, the
snapshot silently produces stale results.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import numpy as np

from .config import MAXIMUM_ZOOM_LEVEL
from .geometry import BoundingBox, GeoCoordinate, Rect, ScreenPoint
from .scale_math import scale_down, scale_up
from .tile_math import (
    ground_resolution,
    map_size,
    project_geo_to_world,
    project_geo_to_world_array,
    project_world_to_geo,
)
from .viewport import ViewState

_LOGGER = logging.getLogger(__name__)


def _nearest_copy(value: float, world_size: float, scroll: float) -> float:
    # The subtract check runs first and the add check measures from the
    # possibly updated value; both comparisons are strict.
    if abs(value - scroll) > abs(value - world_size - scroll):
        value -= world_size
    if abs(value - scroll) > abs(value + world_size - scroll):
        value += world_size
    return value


class Projection:
    """Immutable snapshot of the viewport used for a single render pass."""

    __slots__ = (
        "_zoom",
        "_map_size",
        "_world_half_size",
        "_offset_x",
        "_offset_y",
        "_view_half_width",
        "_view_half_height",
        "_scroll_x",
        "_scroll_y",
        "_bounding_box",
        "_screen_rect",
        "_intrinsic_screen_rect",
        "_orientation",
    )

    def __init__(self, view: ViewState) -> None:
        world_size = map_size(view.zoom)
        world_half_size = world_size / 2.0
        fields = {
            "_zoom": view.zoom,
            "_map_size": world_size,
            "_world_half_size": world_half_size,
            "_offset_x": -world_half_size,
            "_offset_y": -world_half_size,
            "_view_half_width": view.view_half_width,
            "_view_half_height": view.view_half_height,
            "_scroll_x": view.scroll_x,
            "_scroll_y": view.scroll_y,
            "_bounding_box": view.bounding_box,
            # The rectangles are mutable, so keep private copies.
            "_screen_rect": Rect(
                view.screen_rect.left,
                view.screen_rect.top,
                view.screen_rect.right,
                view.screen_rect.bottom,
            ),
            "_intrinsic_screen_rect": Rect(
                view.intrinsic_screen_rect.left,
                view.intrinsic_screen_rect.top,
                view.intrinsic_screen_rect.right,
                view.intrinsic_screen_rect.bottom,
            ),
            "_orientation": view.orientation,
        }
        for name, value in fields.items():
            object.__setattr__(self, name, value)
        _LOGGER.debug("Projection snapshot at zoom %.3f (world size %d)", view.zoom, world_size)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(zoom={self._zoom!r}, "
            f"scroll=({self._scroll_x!r}, {self._scroll_y!r}))"
        )

    # ------------------------------------------------------------------
    @property
    def zoom(self) -> float:
        return self._zoom

    @property
    def world_half_size(self) -> float:
        return self._world_half_size

    @property
    def offset_x(self) -> float:
        return self._offset_x

    @property
    def offset_y(self) -> float:
        return self._offset_y

    @property
    def view_half_width(self) -> float:
        return self._view_half_width

    @property
    def view_half_height(self) -> float:
        return self._view_half_height

    @property
    def scroll_x(self) -> float:
        return self._scroll_x

    @property
    def scroll_y(self) -> float:
        return self._scroll_y

    @property
    def bounding_box(self) -> BoundingBox:
        return self._bounding_box

    @property
    def screen_rect(self) -> Rect:
        """Return a copy of the rotated screen rectangle."""

        rect = self._screen_rect
        return Rect(rect.left, rect.top, rect.right, rect.bottom)

    @property
    def intrinsic_screen_rect(self) -> Rect:
        """Return a copy of the unrotated screen rectangle."""

        rect = self._intrinsic_screen_rect
        return Rect(rect.left, rect.top, rect.right, rect.bottom)

    @property
    def orientation(self) -> float:
        return self._orientation

    @property
    def north_east(self) -> GeoCoordinate:
        """Coordinate under the top-right corner of the viewport."""

        return self.from_pixels(self._view_half_width * 2.0, 0.0)

    @property
    def south_west(self) -> GeoCoordinate:
        """Coordinate under the bottom-left corner of the viewport."""

        return self.from_pixels(0.0, self._view_half_height * 2.0)

    # ------------------------------------------------------------------
    def from_pixels(self, x: float, y: float) -> GeoCoordinate:
        """Return the coordinate under viewport pixel ``(x, y)``."""

        rect = self._intrinsic_screen_rect
        return project_world_to_geo(
            rect.left + x + self._world_half_size,
            rect.top + y + self._world_half_size,
            self._zoom,
        )

    def from_viewport_pixels(
        self, x: float, y: float, reuse: Optional[ScreenPoint] = None
    ) -> ScreenPoint:
        """Translate a device-space pixel into screen coordinates."""

        out = reuse if reuse is not None else ScreenPoint()
        out.set(x - self._view_half_width, y - self._view_half_height)
        return out.offset(self._scroll_x, self._scroll_y)

    def to_screen_pixels(
        self, latitude: float, longitude: float, reuse: Optional[ScreenPoint] = None
    ) -> ScreenPoint:
        """Return the screen coordinates of ``(latitude, longitude)``.

        Among the three cyclic copies of the projected point, the one nearest
        the scroll position is chosen on each axis so that features near the
        antimeridian stay next to the viewport instead of jumping a world away.
        """

        out = project_geo_to_world(latitude, longitude, self._zoom, reuse)
        out.offset(self._offset_x, self._offset_y)
        world_size = self._map_size
        return out.set(
            _nearest_copy(out.x, world_size, self._scroll_x),
            _nearest_copy(out.y, world_size, self._scroll_y),
        )

    def to_pixels(
        self, coordinate: GeoCoordinate, reuse: Optional[ScreenPoint] = None
    ) -> ScreenPoint:
        return self.to_screen_pixels(coordinate.latitude, coordinate.longitude, reuse)

    # ------------------------------------------------------------------
    def project_heavy(
        self, latitude: float, longitude: float, reuse: Optional[ScreenPoint] = None
    ) -> ScreenPoint:
        """Perform the expensive half of the projection.

        The result only depends on geography, so it can be cached across frames
        and handed to :meth:`rescale_cached` whenever the view changes.
        """

        return project_geo_to_world(latitude, longitude, MAXIMUM_ZOOM_LEVEL, reuse)

    def rescale_cached(
        self, intermediate: ScreenPoint, reuse: Optional[ScreenPoint] = None
    ) -> ScreenPoint:
        """Turn an intermediate coordinate into screen coordinates.

        Unlike :meth:`to_screen_pixels` no wraparound correction is applied.
        """

        zoom_delta = MAXIMUM_ZOOM_LEVEL - self._zoom
        out = reuse if reuse is not None else ScreenPoint()
        return out.set(
            scale_down(intermediate.x, zoom_delta) + self._offset_x,
            scale_down(intermediate.y, zoom_delta) + self._offset_y,
        )

    def screen_rect_to_intermediate(self, rect: Rect) -> Rect:
        """Map a screen-space rectangle into intermediate coordinates.

        The returned rectangle always satisfies ``left <= right`` and
        ``top <= bottom`` whatever the corner order of ``rect``.
        """

        zoom_delta = MAXIMUM_ZOOM_LEVEL - self._zoom
        x0 = scale_up(rect.left - self._offset_x, zoom_delta)
        x1 = scale_up(rect.right - self._offset_x, zoom_delta)
        y0 = scale_up(rect.bottom - self._offset_y, zoom_delta)
        y1 = scale_up(rect.top - self._offset_y, zoom_delta)
        return Rect(x0, y1, x1, y0).normalized()

    def project_heavy_many(
        self, latitudes: np.ndarray, longitudes: np.ndarray
    ) -> tuple[np.ndarray, np.ndarray]:
        """Batch form of :meth:`project_heavy` for whole polylines."""

        return project_geo_to_world_array(latitudes, longitudes, MAXIMUM_ZOOM_LEVEL)

    def rescale_cached_many(
        self, xs: np.ndarray, ys: np.ndarray
    ) -> tuple[np.ndarray, np.ndarray]:
        """Batch form of :meth:`rescale_cached`."""

        zoom_delta = MAXIMUM_ZOOM_LEVEL - self._zoom
        return (
            scale_down(np.asarray(xs, dtype=np.float64), zoom_delta) + self._offset_x,
            scale_down(np.asarray(ys, dtype=np.float64), zoom_delta) + self._offset_y,
        )

    # ------------------------------------------------------------------
    def meters_to_equator_pixels(self, meters: float) -> float:
        """Convert a ground distance at the equator into pixels at this zoom."""

        return meters / ground_resolution(0.0, self._zoom)


__all__ = ["Projection"]
