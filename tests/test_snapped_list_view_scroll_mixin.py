from snapview.widgets import snapped_list_view_scroll_mixin as mixin_module
from snapview.widgets.fling_correction_coordinator import SnapFlingCoordinator
from snapview.widgets.fling_physics import PhysicalCoefficients
from snapview.widgets.snap_distance_service import GestureAxis, LeadingItemGeometry
from snapview.widgets.snapped_list_shared import ScrollState
from snapview.widgets.snapped_list_view_scroll_mixin import SnappedListViewScrollMixin


class FakeSignal:
    def __init__(self):
        self.emitted = []

    def emit(self, value):
        self.emitted.append(value)


class FakeAnimator:
    def __init__(self):
        self.flings = []
        self.distances = []
        self.snaps = []
        self.running = False

    def start(self, velocity, coefficients, distance=None):
        self.flings.append(velocity)
        self.distances.append(distance)
        self.running = True
        return velocity // 10

    def smooth_scroll_by(self, delta, duration_ms=250):
        self.snaps.append((delta, duration_ms))
        self.running = True

    def stop(self):
        self.running = False

    def is_running(self):
        return self.running


class FakeResolver:
    def __init__(self, geometry, orientation=GestureAxis.VERTICAL):
        self.geometry = geometry
        self._orientation = orientation

    def orientation(self):
        return self._orientation

    def leading_item_geometry(self, axis):
        return self.geometry


class FakeView(SnappedListViewScrollMixin):
    def __init__(self, geometry, *, orientation=GestureAxis.VERTICAL, snapping_enabled=True):
        self.scroll_state_changed = FakeSignal()
        self._scroll_state = ScrollState.IDLE
        self._min_fling_velocity = 50.0
        self._snap_coordinator = SnapFlingCoordinator(
            PhysicalCoefficients.from_density(1.0),
            FakeResolver(geometry, orientation),
            snapping_enabled=snapping_enabled,
        )
        self._animators = {
            GestureAxis.VERTICAL: FakeAnimator(),
            GestureAxis.HORIZONTAL: FakeAnimator(),
        }
        self.log_messages = []

    def _log_flow(self, component, message, **kwargs):
        self.log_messages.append((component, message))


def test_fling_below_minimum_velocity_is_rejected():
    view = FakeView(LeadingItemGeometry(offset=-10, extent=100))

    assert view.fling(30, -49) is False
    assert view.scroll_state() == ScrollState.IDLE
    assert view._animators[GestureAxis.VERTICAL].flings == []


def test_fling_animates_corrected_vertical_velocity():
    view = FakeView(LeadingItemGeometry(offset=-10, extent=100))
    expected = view._snap_coordinator.correct_fling_velocity(GestureAxis.VERTICAL, 3000)
    plan = view._snap_coordinator.plan_fling(0, 3000)

    assert view.fling(800, 3000) is True

    assert view._animators[GestureAxis.VERTICAL].flings == [expected]
    assert view._animators[GestureAxis.VERTICAL].distances == [plan.distance]
    assert view._animators[GestureAxis.HORIZONTAL].flings == []
    assert view.scroll_state() == ScrollState.SETTLING
    assert view.scroll_state_changed.emitted == [ScrollState.SETTLING]


def test_fling_uses_horizontal_animator_for_horizontal_only_velocity():
    view = FakeView(LeadingItemGeometry(offset=-10, extent=100), orientation=GestureAxis.HORIZONTAL)

    assert view.fling(-2000, 10) is True

    flings = view._animators[GestureAxis.HORIZONTAL].flings
    assert len(flings) == 1 and flings[0] < 0


def test_fling_with_snapping_disabled_keeps_raw_velocity():
    view = FakeView(LeadingItemGeometry(offset=-10, extent=100), snapping_enabled=False)

    view.fling(0, -4321)

    assert view._animators[GestureAxis.VERTICAL].flings == [-4321]


def test_idle_release_snaps_to_nearer_edge(monkeypatch):
    monkeypatch.setattr(mixin_module, "get_int_setting", lambda key: 180)
    view = FakeView(LeadingItemGeometry(offset=-70, extent=100))

    view._snap_on_idle_release()

    assert view._animators[GestureAxis.VERTICAL].snaps == [(30, 180)]
    assert view.scroll_state() == ScrollState.SETTLING


def test_idle_release_on_aligned_item_does_not_scroll(monkeypatch):
    monkeypatch.setattr(mixin_module, "get_int_setting", lambda key: 180)
    view = FakeView(LeadingItemGeometry(offset=0, extent=100))

    view._snap_on_idle_release()

    assert view._animators[GestureAxis.VERTICAL].snaps == []
    assert view.scroll_state() == ScrollState.IDLE


def test_settled_animation_returns_to_idle():
    view = FakeView(LeadingItemGeometry(offset=-10, extent=100))
    view.fling(0, 3000)

    view._animators[GestureAxis.VERTICAL].running = False
    view._on_settled()

    assert view.scroll_state() == ScrollState.IDLE
    assert view.scroll_state_changed.emitted == [ScrollState.SETTLING, ScrollState.IDLE]


def test_short_backward_fling_from_aligned_item_stays_put():
    view = FakeView(LeadingItemGeometry(offset=0, extent=96))

    assert view.fling(0, -300) is False

    assert view._animators[GestureAxis.VERTICAL].flings == []
    assert view.scroll_state() == ScrollState.IDLE
