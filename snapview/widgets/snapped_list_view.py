from snapview.widgets.snapped_list_shared import *  # noqa: F401,F403
from snapview.widgets.snapped_list_view_scroll_mixin import SnappedListViewScrollMixin


class SnappedListView(SnappedListViewScrollMixin, QListView):
    """List view whose flings and drags always end with an item edge on the viewport edge.

    Fling correction assumes every item has the same height when scrolling
    vertically, or the same width when scrolling horizontally.
    """

    scroll_state_changed = Signal(object)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setVerticalScrollMode(QAbstractItemView.ScrollMode.ScrollPerPixel)
        self.setHorizontalScrollMode(QAbstractItemView.ScrollMode.ScrollPerPixel)
        self.setUniformItemSizes(True)
        self.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)

        self._flow_log_last = {}
        self._scroll_state = ScrollState.IDLE
        self._press_pos = None
        self._press_scroll = (0, 0)
        self._drag_axis = GestureAxis.VERTICAL
        self._gesture_clock = QElapsedTimer()
        self._gesture_clock.start()
        self._screen_signal_connected = False

        density = self._display_density()
        self._density = density
        self._min_fling_velocity, self._max_fling_velocity = self._fling_limits(density)
        self._velocity_tracker = FlingVelocityTracker(self._max_fling_velocity)
        self._snap_coordinator = SnapFlingCoordinator(
            PhysicalCoefficients.from_density(density, get_float_setting('scroll_friction')),
            make_leading_item_resolver(self),
            snapping_enabled=get_bool_setting('snapping_enabled'),
            log_flow=self._log_flow,
        )
        self._animators = {
            GestureAxis.VERTICAL: FlingAnimator(self.verticalScrollBar(), self),
            GestureAxis.HORIZONTAL: FlingAnimator(self.horizontalScrollBar(), self),
        }
        for animator in self._animators.values():
            animator.finished.connect(self._on_settled)

        settings.change.connect(self._on_setting_changed)

    def _log_flow(self, component: str, message: str, *, level: str = "DEBUG",
                  throttle_key: str | None = None, every_s: float | None = None):
        """Timestamped, optionally throttled trace logging for snapping diagnostics."""
        if not get_bool_setting('snap_trace_logs'):
            return
        now = time.time()
        if throttle_key and every_s is not None:
            last = self._flow_log_last.get(throttle_key, 0.0)
            if (now - last) < every_s:
                return
            self._flow_log_last[throttle_key] = now
        ts = time.strftime("%H:%M:%S", time.localtime(now)) + f".{int((now % 1) * 1000):03d}"
        print(f"[{ts}][TRACE][{component}][{level}] {message}")

    def enable_snapping(self, enabled: bool):
        """Enable or disable snapping for flings and idle releases."""
        self._snap_coordinator.snapping_enabled = bool(enabled)

    def is_snapping_enabled(self) -> bool:
        return self._snap_coordinator.snapping_enabled

    def setViewMode(self, mode):
        super().setViewMode(mode)
        self._snap_coordinator.resolver = make_leading_item_resolver(self)

    def _display_density(self) -> float:
        screen = self.screen() or QApplication.primaryScreen()
        if screen is None:
            return 1.0
        # Density 1.0 corresponds to a 160 dpi display.
        return max(0.1, float(screen.logicalDotsPerInch()) / 160.0)

    def _fling_limits(self, density: float) -> tuple[float, float]:
        return fling_thresholds(
            density,
            get_float_setting('min_fling_velocity_dp'),
            get_float_setting('max_fling_velocity_dp'),
        )

    def _refresh_physical_coefficients(self, *_args):
        """Rebuild density-dependent coefficients, e.g. after moving to another screen."""
        density = self._display_density()
        self._density = density
        self._snap_coordinator.coefficients = PhysicalCoefficients.from_density(
            density, get_float_setting('scroll_friction'))
        self._min_fling_velocity, self._max_fling_velocity = self._fling_limits(density)
        self._velocity_tracker.max_velocity = self._max_fling_velocity
        self._log_flow("SNAP", f"Coefficients refreshed for density {density:.2f}")

    def showEvent(self, event):
        super().showEvent(event)
        if self._screen_signal_connected:
            return
        window_handle = self.window().windowHandle()
        if window_handle is not None:
            window_handle.screenChanged.connect(self._refresh_physical_coefficients)
            self._screen_signal_connected = True
            self._refresh_physical_coefficients()

    def _on_setting_changed(self, key, value):
        if key == 'snapping_enabled':
            self.enable_snapping(get_bool_setting('snapping_enabled'))
        elif key in ('scroll_friction', 'min_fling_velocity_dp', 'max_fling_velocity_dp'):
            self._refresh_physical_coefficients()
