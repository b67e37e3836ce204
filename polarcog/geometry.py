"""Polar coordinates, weighted items and their centre of gravity."""

from __future__ import annotations

import math
import warnings
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class PolarCoord:
    """A point given by radius and angle in radians."""

    r: float
    theta: float


@dataclass(frozen=True)
class Item:
    """A weight placed at a polar location."""

    weight: float
    location: PolarCoord


def _to_cartesian(point: PolarCoord) -> tuple[float, float]:
    return point.r * math.cos(point.theta), point.r * math.sin(point.theta)


def center_of_gravity(items: Iterable[Item]) -> PolarCoord:
    """Return the weighted centre of gravity of *items* in polar form.

    If the total weight is zero the centre is undefined: a RuntimeWarning
    is issued and the origin is returned.
    """
    sum_wx = 0.0
    sum_wy = 0.0
    total_weight = 0.0
    for item in items:
        x, y = _to_cartesian(item.location)
        sum_wx += item.weight * x
        sum_wy += item.weight * y
        total_weight += item.weight

    if total_weight == 0.0:
        warnings.warn(
            "Total weight is zero. Center of gravity is undefined.",
            RuntimeWarning,
            stacklevel=2,
        )
        return PolarCoord(0.0, 0.0)

    x_cog = sum_wx / total_weight
    y_cog = sum_wy / total_weight
    return PolarCoord(math.hypot(x_cog, y_cog), math.atan2(y_cog, x_cog))