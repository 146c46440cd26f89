"""Fling correction pipeline: projected distance -> snapped distance -> velocity."""

from __future__ import annotations

from dataclasses import dataclass

from snapview.widgets.fling_physics import PhysicalCoefficients, projected_distance, velocity_for_distance
from snapview.widgets.snap_distance_service import (
    GestureAxis,
    SnapRequest,
    adjust_distance,
    evaluate_idle_release_snap,
)


def _sign(value) -> int:
    return (value > 0) - (value < 0)


@dataclass(frozen=True)
class FlingPlan:
    """Corrected fling on one axis.

    `distance` is the snapped travel (unsigned, before applying the fling
    direction), or None when the velocity was left uncorrected.
    """
    axis: GestureAxis
    velocity: int
    distance: int | None


class SnapFlingCoordinator:
    """Corrects fling velocities so flings come to rest on an item edge."""

    def __init__(self, coefficients: PhysicalCoefficients, resolver, *,
                 snapping_enabled: bool = True, log_flow=None):
        self.coefficients = coefficients
        self.resolver = resolver
        self.snapping_enabled = bool(snapping_enabled)
        self._log_flow = log_flow

    def _log(self, message: str, **kwargs):
        if self._log_flow is not None:
            self._log_flow("SNAP", message, **kwargs)

    def snapped_distance(self, distance: float, direction: int, axis: GestureAxis) -> int | None:
        """Snap `distance` against the current leading item; None if none is laid out."""
        geometry = self.resolver.leading_item_geometry(axis)
        if geometry is None:
            self._log(f"No leading item on {axis.value} axis; skipping adjustment")
            return None
        return adjust_distance(distance, direction, geometry)

    def adjust_for_leading_item(self, distance: float, direction: int, axis: GestureAxis) -> int:
        """Like `snapped_distance`, but 0 when no leading item is laid out."""
        snapped = self.snapped_distance(distance, direction, axis)
        return 0 if snapped is None else snapped

    def _correct(self, axis: GestureAxis, raw_velocity: int) -> tuple[int, int | None]:
        if not self.snapping_enabled or raw_velocity == 0:
            return raw_velocity, None
        direction = _sign(raw_velocity)
        distance = projected_distance(raw_velocity, self.coefficients)
        snapped = self.snapped_distance(distance, direction, axis)
        if snapped is None:
            return raw_velocity, None
        if snapped == 0:
            self._log(f"{axis.value} fling {raw_velocity} already ends on an edge; not moving")
            return 0, 0
        corrected = velocity_for_distance(snapped, self.coefficients) * direction
        self._log(
            f"{axis.value} fling {raw_velocity} -> {corrected} "
            f"(distance {distance:.1f} -> {snapped})"
        )
        return corrected, snapped

    def correct_fling_velocity(self, axis: GestureAxis, raw_velocity: int) -> int:
        """Return the velocity that lands the fling on an item edge.

        Same sign as `raw_velocity`, or 0 when the leading item is already
        aligned and the snapped distance is zero. Returned unchanged when
        snapping is off, when the velocity is zero, or when no leading item
        can be resolved.
        """
        return self._correct(axis, raw_velocity)[0]

    def plan_fling(self, velocity_x: int, velocity_y: int) -> FlingPlan | None:
        """Corrected velocity and snapped target for the one axis that flings.

        Vertical wins when both components are non-zero.
        """
        if velocity_y != 0:
            axis, raw_velocity = GestureAxis.VERTICAL, velocity_y
        elif velocity_x != 0:
            axis, raw_velocity = GestureAxis.HORIZONTAL, velocity_x
        else:
            return None
        velocity, distance = self._correct(axis, raw_velocity)
        return FlingPlan(axis=axis, velocity=velocity, distance=distance)

    def correct_fling(self, velocity_x: int, velocity_y: int) -> tuple[int, int]:
        """Correct one axis only; vertical wins when both components are non-zero."""
        plan = self.plan_fling(velocity_x, velocity_y)
        if plan is None:
            return velocity_x, velocity_y
        if plan.axis is GestureAxis.VERTICAL:
            return velocity_x, plan.velocity
        return plan.velocity, velocity_y

    def evaluate_idle_release_snap(self) -> SnapRequest | None:
        """Nearest-edge scroll for a release that did not turn into a fling."""
        if not self.snapping_enabled:
            return None
        axis = self.resolver.orientation()
        request = evaluate_idle_release_snap(axis, self.resolver.leading_item_geometry(axis))
        if request is None:
            self._log("Idle release without a leading item; no snap")
        else:
            self._log(f"Idle release snap by ({request.dx}, {request.dy})")
        return request
