"""Power-of-two rescaling between zoom levels.

Zoom levels may be fractional, so the factors are computed with floating point
exponentiation rather than bit shifts.  Both helpers accept plain floats as
well as numpy arrays.
"""

from __future__ import annotations

from typing import TypeVar

import numpy as np

Scalable = TypeVar("Scalable", float, np.ndarray)


def scale_down(value: Scalable, zoom_delta: float) -> Scalable:
    """Divide ``value`` by ``2 ** zoom_delta``."""

    return value / (2.0 ** zoom_delta)


def scale_up(value: Scalable, zoom_delta: float) -> Scalable:
    """Multiply ``value`` by ``2 ** zoom_delta``; the inverse of :func:`scale_down`."""

    return value * (2.0 ** zoom_delta)


__all__ = ["scale_down", "scale_up"]
