"""Pure snapping math: align fling distances and idle releases to item edges."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class GestureAxis(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class LeadingItemGeometry:
    """Leading item on the active axis, in viewport coordinates.

    `offset` is <= 0 while the item is partially scrolled past the leading
    edge; `extent` is the item's uniform size (> 0).
    """

    offset: float
    extent: float


@dataclass(frozen=True)
class SnapRequest:
    """Smooth scroll delta for the host to run."""

    dx: int = 0
    dy: int = 0

    @classmethod
    def along(cls, axis: GestureAxis, delta: int) -> "SnapRequest":
        if axis is GestureAxis.VERTICAL:
            return cls(dx=0, dy=int(delta))
        return cls(dx=int(delta), dy=0)

    @property
    def is_noop(self) -> bool:
        return self.dx == 0 and self.dy == 0


def adjust_distance(distance: float, direction: int, geometry: LeadingItemGeometry) -> int:
    """Round `distance` down to whole extents, then align the leading item.

    Forward travel carries the leading item's far edge onto the viewport
    boundary, backward travel carries its near edge back onto it.
    """
    rows = math.floor(distance / geometry.extent)
    if direction > 0:
        residual = geometry.extent + geometry.offset
    else:
        residual = -geometry.offset
    return int(rows * geometry.extent + residual)


def idle_release_snap_delta(geometry: LeadingItemGeometry) -> int:
    """Scroll delta to the nearer edge of the leading item.

    Compares against half the extent in whole pixels, so an odd extent goes
    forward when the offset is exactly `extent // 2`.
    """
    if int(geometry.extent) // 2 > abs(geometry.offset):
        return int(geometry.offset)
    return int(geometry.extent + geometry.offset)


def evaluate_idle_release_snap(axis: GestureAxis, geometry: LeadingItemGeometry | None) -> SnapRequest | None:
    if geometry is None:
        return None
    return SnapRequest.along(axis, idle_release_snap_delta(geometry))
