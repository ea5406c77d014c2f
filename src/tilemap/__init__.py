"""Coordinate conversions for tiled spherical Mercator maps.

The package re-exports the pieces rendering code usually needs so callers can
write ``from tilemap import Projection, compute_view_state``.
"""

from .config import MAXIMUM_ZOOM_LEVEL, TILE_SIZE
from .errors import InvalidViewportError, QuadKeyError, TileMapError
from .geometry import BoundingBox, GeoCoordinate, Rect, ScreenPoint
from .projection import Projection
from .viewport import ViewState, compute_view_state

__all__ = [
    "BoundingBox",
    "GeoCoordinate",
    "InvalidViewportError",
    "MAXIMUM_ZOOM_LEVEL",
    "Projection",
    "QuadKeyError",
    "Rect",
    "ScreenPoint",
    "TILE_SIZE",
    "TileMapError",
    "ViewState",
    "compute_view_state",
]
