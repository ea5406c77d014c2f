"""Value types shared by the projection helpers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class GeoCoordinate:
    """A WGS84 position expressed in degrees."""

    latitude: float
    longitude: float

    def __iter__(self) -> Iterator[float]:
        yield self.latitude
        yield self.longitude


@dataclass
class ScreenPoint:
    """Mutable ``(x, y)`` pair used for world, intermediate and screen pixels.

    Instances double as caller-owned output buffers: the projection helpers
    overwrite the fields of a ``reuse`` point in place and hand the same object
    back, which keeps per-tile loops from allocating a fresh point per call.
    """

    x: float = 0.0
    y: float = 0.0

    def set(self, x: float, y: float) -> "ScreenPoint":
        self.x = x
        self.y = y
        return self

    def offset(self, dx: float, dy: float) -> "ScreenPoint":
        self.x += dx
        self.y += dy
        return self

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass
class Rect:
    """Axis-aligned rectangle in pixel space.

    The edges are stored exactly as given.  Call :meth:`normalized` when the
    corners may arrive in any order.
    """

    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center(self) -> ScreenPoint:
        return ScreenPoint((self.left + self.right) / 2.0, (self.top + self.bottom) / 2.0)

    def set(self, left: float, top: float, right: float, bottom: float) -> "Rect":
        self.left = left
        self.top = top
        self.right = right
        self.bottom = bottom
        return self

    def offset(self, dx: float, dy: float) -> "Rect":
        self.left += dx
        self.right += dx
        self.top += dy
        self.bottom += dy
        return self

    def normalized(self) -> "Rect":
        """Return a copy whose edges satisfy ``left <= right`` and ``top <= bottom``."""

        return Rect(
            min(self.left, self.right),
            min(self.top, self.bottom),
            max(self.left, self.right),
            max(self.top, self.bottom),
        )

    def contains(self, x: float, y: float) -> bool:
        """Return ``True`` when ``(x, y)`` lies inside the half-open rectangle."""

        return self.left <= x < self.right and self.top <= y < self.bottom


@dataclass(frozen=True)
class BoundingBox:
    """Geographic extent delimited by its four edges in degrees."""

    north: float
    east: float
    south: float
    west: float

    @classmethod
    def from_coordinates(cls, coordinates: Iterable[GeoCoordinate]) -> "BoundingBox":
        """Return the smallest box enclosing ``coordinates``."""

        points = list(coordinates)
        if not points:
            raise ValueError("Cannot build a bounding box from an empty sequence")
        latitudes = [point.latitude for point in points]
        longitudes = [point.longitude for point in points]
        return cls(
            north=max(latitudes),
            east=max(longitudes),
            south=min(latitudes),
            west=min(longitudes),
        )

    @property
    def center(self) -> GeoCoordinate:
        return GeoCoordinate((self.north + self.south) / 2.0, (self.east + self.west) / 2.0)

    @property
    def latitude_span(self) -> float:
        return abs(self.north - self.south)

    @property
    def longitude_span(self) -> float:
        return abs(self.east - self.west)

    def contains(self, latitude: float, longitude: float) -> bool:
        """Return ``True`` when the position lies inside the box.

        Longitudes are compared cyclically, so a box stored as ``-185..-175``
        also contains ``179``.
        """

        if not self.south <= latitude <= self.north:
            return False
        span = self.east - self.west
        if span >= 360.0:
            return True
        return (longitude - self.west) % 360.0 <= span


__all__ = ["BoundingBox", "GeoCoordinate", "Rect", "ScreenPoint"]
