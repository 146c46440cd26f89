"""Runs flings and snap scrolls on a scrollbar."""

import math

from PySide6.QtCore import QAbstractAnimation, QEasingCurve, QObject, QVariantAnimation, Signal

from snapview.widgets.fling_physics import PhysicalCoefficients, fling_duration_ms, projected_distance, spline_position


class FlingAnimator(QObject):
    """Drives one scrollbar along the deceleration spline or an ease-out snap."""

    finished = Signal()

    def __init__(self, scroll_bar, parent=None):
        super().__init__(parent)
        self._scroll_bar = scroll_bar
        self._start_value = 0
        self._delta = 0
        self._use_spline = True
        self._animation = QVariantAnimation(self)
        self._animation.setStartValue(0.0)
        self._animation.setEndValue(1.0)
        self._animation.valueChanged.connect(self._on_progress)
        self._animation.finished.connect(self._on_finished)

    @property
    def scroll_bar(self):
        return self._scroll_bar

    def is_running(self) -> bool:
        return self._animation.state() == QAbstractAnimation.State.Running

    def stop(self):
        """Stop without emitting `finished`; the caller owns the state change."""
        if self.is_running():
            self._animation.blockSignals(True)
            self._animation.stop()
            self._animation.blockSignals(False)

    def start(self, velocity: int, coefficients: PhysicalCoefficients,
              distance: int | None = None) -> int:
        """Fling with `velocity` px/s; returns the total scroll delta.

        When `distance` is given the fling travels exactly that far in the
        direction of `velocity`; the duration still follows the velocity.
        """
        self.stop()
        if velocity == 0:
            return 0
        direction = 1 if velocity > 0 else -1
        if distance is None:
            distance = projected_distance(velocity, coefficients)
        delta = int(distance) * direction
        duration = max(1, fling_duration_ms(velocity, coefficients))
        self._run(delta, duration, use_spline=True)
        return delta

    def smooth_scroll_by(self, delta: int, duration_ms: int = 250):
        self.stop()
        if delta == 0:
            return
        self._run(int(delta), max(1, int(duration_ms)), use_spline=False)

    def _run(self, delta: int, duration_ms: int, *, use_spline: bool):
        self._start_value = int(self._scroll_bar.value())
        self._delta = delta
        self._use_spline = use_spline
        self._animation.setDuration(duration_ms)
        self._animation.setEasingCurve(
            QEasingCurve.Type.Linear if use_spline else QEasingCurve.Type.OutCubic
        )
        self._animation.start()

    def _on_progress(self, progress):
        t = float(progress)
        fraction = spline_position(t) if self._use_spline else t
        # Truncate toward the start so the last frame lands exactly on the target.
        offset = math.trunc(self._delta * fraction) if t < 1.0 else self._delta
        self._scroll_bar.setValue(self._start_value + offset)

    def _on_finished(self):
        self._scroll_bar.setValue(self._start_value + self._delta)
        self.finished.emit()
