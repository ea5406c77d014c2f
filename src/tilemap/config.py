"""Default configuration values for tilemap."""

from __future__ import annotations

from typing import Final

# Edge length in pixels of a single square map tile.  Every zoom level doubles
# the number of tiles along each axis, so the world measures
# ``TILE_SIZE * 2 ** zoom`` pixels across.
TILE_SIZE: Final[int] = 256

MIN_ZOOM_LEVEL: Final[float] = 0.0

# Reference resolution for intermediate coordinates.  Geometry projected at
# this level is rescaled to the current zoom instead of being re-projected, so
# the value must stay above anything the viewport can reach.
MAXIMUM_ZOOM_LEVEL: Final[int] = 22

# Spherical Mercator diverges at the poles; latitudes are clamped to the range
# that produces a square world before the logarithmic term is evaluated.
MIN_LATITUDE: Final[float] = -85.05112878
MAX_LATITUDE: Final[float] = 85.05112878
MIN_LONGITUDE: Final[float] = -180.0
MAX_LONGITUDE: Final[float] = 180.0

# WGS84 semi-major axis.
EARTH_RADIUS_METERS: Final[float] = 6378137.0

METERS_PER_INCH: Final[float] = 0.0254
DEFAULT_DPI: Final[int] = 96
