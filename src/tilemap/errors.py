"""Custom exception hierarchy for tilemap."""

from __future__ import annotations


class TileMapError(Exception):
    """Base class for all custom errors raised by tilemap."""


class InvalidViewportError(TileMapError):
    """Raised when viewport geometry cannot produce a usable world size."""


class QuadKeyError(TileMapError):
    """Raised when a quad key contains characters other than ``0``-``3``."""


__all__ = ["InvalidViewportError", "QuadKeyError", "TileMapError"]
