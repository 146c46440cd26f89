from snapview.widgets.snapped_list_shared import *  # noqa: F401,F403


class SnappedListViewScrollMixin:
    """Drag-to-scroll, fling and idle-release snapping for SnappedListView."""

    def _scroll_bar_for(self, axis: GestureAxis):
        if axis is GestureAxis.VERTICAL:
            return self.verticalScrollBar()
        return self.horizontalScrollBar()

    def _scroll_position(self) -> tuple[int, int]:
        return int(self.horizontalScrollBar().value()), int(self.verticalScrollBar().value())

    def _set_scroll_state(self, state: ScrollState):
        if state == self._scroll_state:
            return
        self._scroll_state = state
        self.scroll_state_changed.emit(state)

    def scroll_state(self) -> ScrollState:
        return self._scroll_state

    def _stop_animations(self):
        for animator in self._animators.values():
            animator.stop()

    def mousePressEvent(self, event):
        """Catch a running fling and start tracking a possible drag."""
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return

        caught_settling = self._scroll_state == ScrollState.SETTLING
        self._stop_animations()
        self._set_scroll_state(ScrollState.IDLE)

        self._press_pos = event.position().toPoint()
        self._press_scroll = self._scroll_position()
        self._drag_axis = self._snap_coordinator.resolver.orientation()
        self._velocity_tracker.clear()
        x, y = self._press_scroll
        self._velocity_tracker.add_sample(x, y, self._gesture_clock.elapsed())

        if caught_settling:
            # A press that stops a fling must not also select an item.
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event):
        if self._press_pos is None or not (event.buttons() & Qt.MouseButton.LeftButton):
            super().mouseMoveEvent(event)
            return

        delta = event.position().toPoint() - self._press_pos
        along = delta.y() if self._drag_axis is GestureAxis.VERTICAL else delta.x()
        if self._scroll_state != ScrollState.DRAGGING:
            if abs(along) < QApplication.startDragDistance():
                event.accept()
                return
            self._set_scroll_state(ScrollState.DRAGGING)

        press_x, press_y = self._press_scroll
        start = press_y if self._drag_axis is GestureAxis.VERTICAL else press_x
        self._scroll_bar_for(self._drag_axis).setValue(start - along)
        x, y = self._scroll_position()
        self._velocity_tracker.add_sample(x, y, self._gesture_clock.elapsed())
        event.accept()

    def mouseReleaseEvent(self, event):
        if self._press_pos is None or event.button() != Qt.MouseButton.LeftButton:
            super().mouseReleaseEvent(event)
            return

        self._press_pos = None
        if self._scroll_state == ScrollState.DRAGGING:
            velocity_x, velocity_y = self._velocity_tracker.compute_velocity(self._gesture_clock.elapsed())
            if not self.fling(int(velocity_x), int(velocity_y)):
                self._set_scroll_state(ScrollState.IDLE)
            event.accept()
        else:
            super().mouseReleaseEvent(event)

        if self._scroll_state == ScrollState.IDLE:
            self._snap_on_idle_release()

    def fling(self, velocity_x: int, velocity_y: int) -> bool:
        """Start a fling, corrected so it stops on an item edge.

        Components below the minimum fling velocity are dropped; returns False
        when nothing is left to fling, or when the leading item is already on
        the edge the fling would snap to.
        """
        if abs(velocity_x) < self._min_fling_velocity:
            velocity_x = 0
        if abs(velocity_y) < self._min_fling_velocity:
            velocity_y = 0
        if velocity_x == 0 and velocity_y == 0:
            return False

        self._log_flow("FLING", f"fling({velocity_x}, {velocity_y})")
        plan = self._snap_coordinator.plan_fling(velocity_x, velocity_y)
        self._log_flow("FLING", f"adjusted {plan.axis.value} fling {plan.velocity}")
        if plan.velocity == 0:
            return False

        self._set_scroll_state(ScrollState.SETTLING)
        delta = self._animators[plan.axis].start(
            plan.velocity, self._snap_coordinator.coefficients, distance=plan.distance)
        self._log_flow("FLING", f"{plan.axis.value} fling scrolls by {delta}")
        return True

    def _snap_on_idle_release(self):
        """Scroll to the nearer edge of the leading item after a release without fling."""
        request = self._snap_coordinator.evaluate_idle_release_snap()
        if request is None or request.is_noop:
            return
        duration = get_int_setting('snap_scroll_duration_ms')
        self._log_flow("IDLE", f"Snap to closest edge by ({request.dx}, {request.dy})")
        self._set_scroll_state(ScrollState.SETTLING)
        if request.dy != 0:
            self._animators[GestureAxis.VERTICAL].smooth_scroll_by(request.dy, duration)
        else:
            self._animators[GestureAxis.HORIZONTAL].smooth_scroll_by(request.dx, duration)

    def _on_settled(self):
        if not any(animator.is_running() for animator in self._animators.values()):
            self._set_scroll_state(ScrollState.IDLE)
