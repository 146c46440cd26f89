"""Fling physics: velocity <-> distance along the deceleration spline."""

from __future__ import annotations

import math
from dataclasses import dataclass

GRAVITY_EARTH = 9.80665  # m/s^2
INCHES_PER_METER = 39.37
LOOK_AND_FEEL_TUNING = 0.84
DEFAULT_SCROLL_FRICTION = 0.015

DECELERATION_RATE = math.log(0.78) / math.log(0.9)
INFLEXION = 0.35  # Tension lines cross at (INFLEXION, 1)

_START_TENSION = 0.5
_END_TENSION = 1.0
_P1 = _START_TENSION * INFLEXION
_P2 = 1.0 - _END_TENSION * (1.0 - INFLEXION)
_SPLINE_SAMPLES = 100


@dataclass(frozen=True)
class PhysicalCoefficients:
    """Density-dependent constants for one view; rebuild when density changes."""

    friction: float
    physical_coeff: float

    def __post_init__(self):
        if self.friction <= 0.0 or self.physical_coeff <= 0.0:
            raise ValueError(
                f"Coefficients must be positive (friction={self.friction}, "
                f"physical_coeff={self.physical_coeff})"
            )

    @classmethod
    def from_density(cls, density: float, friction: float = DEFAULT_SCROLL_FRICTION) -> "PhysicalCoefficients":
        ppi = float(density) * 160.0
        return cls(
            friction=float(friction),
            physical_coeff=GRAVITY_EARTH * INCHES_PER_METER * ppi * LOOK_AND_FEEL_TUNING,
        )

    @property
    def scale(self) -> float:
        return self.friction * self.physical_coeff


def _spline_deceleration(velocity: float, coefficients: PhysicalCoefficients) -> float:
    return math.log(INFLEXION * abs(velocity) / coefficients.scale)


def projected_distance(velocity: float, coefficients: PhysicalCoefficients) -> float:
    """Distance a fling started at `velocity` travels before coming to rest.

    `velocity` must be non-zero.
    """
    l = _spline_deceleration(velocity, coefficients)
    return coefficients.scale * math.exp(DECELERATION_RATE / (DECELERATION_RATE - 1.0) * l)


def velocity_for_distance(distance: float, coefficients: PhysicalCoefficients) -> int:
    """Inverse of `projected_distance`, biased up by one so the simulator never stops short.

    `distance` must be non-zero.
    """
    velocity = math.exp(
        math.log(abs(distance) / coefficients.scale) * (DECELERATION_RATE - 1.0) / DECELERATION_RATE
        + math.log(coefficients.scale / INFLEXION)
    )
    return int(velocity) + 1


def fling_duration_ms(velocity: float, coefficients: PhysicalCoefficients) -> int:
    """How long the spline simulator needs to cover `projected_distance(velocity)`."""
    l = _spline_deceleration(velocity, coefficients)
    return int(1000.0 * math.exp(l / (DECELERATION_RATE - 1.0)))


def _build_spline_positions() -> list[float]:
    positions = []
    x_min = 0.0
    for i in range(_SPLINE_SAMPLES):
        alpha = i / _SPLINE_SAMPLES
        x_max = 1.0
        while True:
            x = x_min + (x_max - x_min) / 2.0
            coef = 3.0 * x * (1.0 - x)
            tx = coef * ((1.0 - x) * _P1 + x * _P2) + x * x * x
            if abs(tx - alpha) < 1e-5:
                break
            if tx > alpha:
                x_max = x
            else:
                x_min = x
        positions.append(coef * ((1.0 - x) * _START_TENSION + x) + x * x * x)
    positions.append(1.0)
    return positions


_SPLINE_POSITIONS = _build_spline_positions()


def spline_position(t: float) -> float:
    """Normalized distance covered at normalized time `t` of a fling."""
    t = max(0.0, min(1.0, float(t)))
    index = min(int(_SPLINE_SAMPLES * t), _SPLINE_SAMPLES - 1)
    t_inf = index / _SPLINE_SAMPLES
    t_sup = (index + 1) / _SPLINE_SAMPLES
    d_inf = _SPLINE_POSITIONS[index]
    d_sup = _SPLINE_POSITIONS[index + 1]
    return d_inf + (t - t_inf) * (d_sup - d_inf) / (t_sup - t_inf)
