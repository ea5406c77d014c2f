"""Spherical Mercator helpers mapping geographic coordinates to world pixels.

World pixels measure ``map_size(zoom)`` along each axis with the origin in the
north-west corner.  The space is cyclic: values outside ``[0, map_size)``
describe another copy of the world and are only reduced to a concrete screen
position by :class:`~tilemap.projection.Projection`.
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from .config import (
    EARTH_RADIUS_METERS,
    MAX_LATITUDE,
    METERS_PER_INCH,
    MIN_LATITUDE,
    TILE_SIZE,
)
from .errors import QuadKeyError
from .geometry import GeoCoordinate, ScreenPoint


def map_size(zoom: float, tile_size: int = TILE_SIZE) -> int:
    """Return the width and height of the world in pixels at ``zoom``."""

    return int(tile_size * (2.0 ** zoom))


def clip(value: float, minimum: float, maximum: float) -> float:
    """Clamp ``value`` into ``[minimum, maximum]``."""

    return min(max(value, minimum), maximum)


def _longitude_fraction(longitude: float) -> float:
    fraction = ((longitude + 180.0) / 360.0) % 1.0
    # ``%`` can round a tiny negative input up to exactly 1.0.
    if fraction >= 1.0:
        return 0.0
    return fraction


def _latitude_fraction(latitude: float) -> float:
    sin_lat = math.sin(math.radians(clip(latitude, MIN_LATITUDE, MAX_LATITUDE)))
    return 0.5 - math.log((1.0 + sin_lat) / (1.0 - sin_lat)) / (4.0 * math.pi)


def project_geo_to_world(
    latitude: float,
    longitude: float,
    zoom: float,
    reuse: Optional[ScreenPoint] = None,
) -> ScreenPoint:
    """Project ``(latitude, longitude)`` to world pixels at ``zoom``.

    Latitude is clamped to the Mercator bounds and longitude is wrapped around
    the globe, so both output axes fall inside ``[0, map_size(zoom))`` for any
    finite input.
    """

    size = map_size(zoom)
    x = _longitude_fraction(longitude) * size
    y = clip(_latitude_fraction(latitude) * size, 0.0, math.nextafter(size, 0.0))
    out = reuse if reuse is not None else ScreenPoint()
    return out.set(x, y)


def project_world_to_geo(x: float, y: float, zoom: float) -> GeoCoordinate:
    """Return the coordinate under world pixel ``(x, y)`` at ``zoom``.

    ``x`` is reduced modulo the world width, yielding a longitude in
    ``[-180, 180)``; ``y`` is clipped to the world so latitude stays finite.
    """

    size = map_size(zoom)
    x_fraction = (x % size) / size - 0.5
    y_fraction = 0.5 - clip(y, 0.0, float(size)) / size

    latitude = 90.0 - 360.0 * math.atan(math.exp(-y_fraction * 2.0 * math.pi)) / math.pi
    longitude = 360.0 * x_fraction
    return GeoCoordinate(latitude, longitude)


def project_geo_to_world_array(
    latitudes: np.ndarray,
    longitudes: np.ndarray,
    zoom: float,
) -> tuple[np.ndarray, np.ndarray]:
    """Vectorised :func:`project_geo_to_world` for coordinate arrays."""

    size = map_size(zoom)
    lat = np.clip(np.asarray(latitudes, dtype=np.float64), MIN_LATITUDE, MAX_LATITUDE)
    lon = np.asarray(longitudes, dtype=np.float64)

    x_fraction = np.mod((lon + 180.0) / 360.0, 1.0)
    x_fraction = np.where(x_fraction >= 1.0, 0.0, x_fraction)

    sin_lat = np.sin(np.radians(lat))
    y_fraction = 0.5 - np.log((1.0 + sin_lat) / (1.0 - sin_lat)) / (4.0 * math.pi)

    xs = x_fraction * size
    ys = np.clip(y_fraction * size, 0.0, np.nextafter(float(size), 0.0))
    return xs, ys


def ground_resolution(latitude: float, zoom: float) -> float:
    """Return how many meters on the ground one pixel covers at ``latitude``."""

    latitude = clip(latitude, MIN_LATITUDE, MAX_LATITUDE)
    return (
        math.cos(math.radians(latitude))
        * 2.0
        * math.pi
        * EARTH_RADIUS_METERS
        / map_size(zoom)
    )


def map_scale(latitude: float, zoom: float, dpi: float) -> float:
    """Return the ``1:N`` scale denominator for a display of ``dpi`` dots per inch."""

    return ground_resolution(latitude, zoom) * dpi / METERS_PER_INCH


def world_to_tile(x: float, y: float, tile_size: int = TILE_SIZE) -> tuple[int, int]:
    """Return the indices of the tile containing world pixel ``(x, y)``."""

    return int(math.floor(x / tile_size)), int(math.floor(y / tile_size))


def tile_to_world(tile_x: int, tile_y: int, tile_size: int = TILE_SIZE) -> tuple[int, int]:
    """Return the world pixel of the north-west corner of a tile."""

    return tile_x * tile_size, tile_y * tile_size


def tile_to_quad_key(tile_x: int, tile_y: int, zoom: int) -> str:
    """Encode tile indices as a quad key with one digit per zoom level."""

    digits = []
    for level in range(zoom, 0, -1):
        digit = 0
        mask = 1 << (level - 1)
        if tile_x & mask:
            digit += 1
        if tile_y & mask:
            digit += 2
        digits.append(str(digit))
    return "".join(digits)


def quad_key_to_tile(quad_key: str) -> tuple[int, int, int]:
    """Decode a quad key into ``(tile_x, tile_y, zoom)``."""

    tile_x = tile_y = 0
    zoom = len(quad_key)
    for index, char in enumerate(quad_key):
        mask = 1 << (zoom - index - 1)
        if char == "0":
            continue
        if char == "1":
            tile_x |= mask
        elif char == "2":
            tile_y |= mask
        elif char == "3":
            tile_x |= mask
            tile_y |= mask
        else:
            raise QuadKeyError(f"Invalid quad key digit {char!r} in {quad_key!r}")
    return tile_x, tile_y, zoom


__all__ = [
    "clip",
    "ground_resolution",
    "map_scale",
    "map_size",
    "project_geo_to_world",
    "project_geo_to_world_array",
    "project_world_to_geo",
    "quad_key_to_tile",
    "tile_to_quad_key",
    "tile_to_world",
    "world_to_tile",
]
