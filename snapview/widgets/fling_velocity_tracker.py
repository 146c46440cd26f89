from collections import deque
from typing import NamedTuple


class DragSample(NamedTuple):
    """Scroll position at a point in time (ms)."""
    x: float
    y: float
    timestamp: float


def fling_thresholds(density: float, min_dp: float = 50.0, max_dp: float = 8000.0) -> tuple[float, float]:
    """Minimum and maximum fling velocity in px/s for a display density."""
    density = max(0.1, float(density))
    return float(min_dp) * density, float(max_dp) * density


class FlingVelocityTracker:
    """Estimates release velocity from the last few drag samples."""

    def __init__(self, max_velocity: float, window_ms: float = 100.0):
        self.max_velocity = abs(float(max_velocity))
        self.window_ms = max(1.0, float(window_ms))
        self.samples: deque[DragSample] = deque(maxlen=32)

    def clear(self):
        self.samples.clear()

    def add_sample(self, x: float, y: float, now_ms: float):
        self.samples.append(DragSample(float(x), float(y), float(now_ms)))
        self._trim_old_samples(now_ms)

    def _trim_old_samples(self, now_ms: float):
        cutoff = now_ms - self.window_ms
        # Keep at least two samples so a slow final move still yields a velocity.
        while len(self.samples) > 2 and self.samples[0].timestamp < cutoff:
            self.samples.popleft()

    def _clamp(self, velocity: float) -> float:
        m = self.max_velocity
        return max(-m, min(velocity, m))

    def compute_velocity(self, now_ms: float) -> tuple[float, float]:
        """Velocity of the scroll position in px/s, (0, 0) if the pointer rested."""
        if len(self.samples) < 2:
            return 0.0, 0.0
        first = self.samples[0]
        last = self.samples[-1]
        if now_ms - last.timestamp > self.window_ms:
            return 0.0, 0.0
        elapsed = last.timestamp - first.timestamp
        if elapsed <= 0:
            return 0.0, 0.0
        vx = (last.x - first.x) * 1000.0 / elapsed
        vy = (last.y - first.y) * 1000.0 / elapsed
        return self._clamp(vx), self._clamp(vy)
