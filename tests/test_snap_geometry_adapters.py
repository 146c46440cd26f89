import pytest
from PySide6.QtCore import QRect, QSize, QStringListModel
from PySide6.QtWidgets import QAbstractItemView, QApplication, QListView

from snapview.widgets.snap_distance_service import GestureAxis, LeadingItemGeometry
from snapview.widgets.snap_geometry_adapters import (
    GridLayoutAdapter,
    ListLayoutAdapter,
    make_leading_item_resolver,
)
from snapview.widgets.snapped_list_shared import FixedExtentDelegate


class FakeIndex:
    def __init__(self, row=-1):
        self.row = row

    def isValid(self):
        return self.row >= 0


class FakeScrollBar:
    def __init__(self, value=0):
        self._value = value

    def value(self):
        return self._value


class FakeModel:
    def __init__(self, rows):
        self._rows = rows

    def rowCount(self):
        return self._rows


class FakeView:
    def __init__(self, *, flow=QListView.Flow.TopToBottom, view_mode=QListView.ViewMode.ListMode,
                 spacing=0, hits=None, rects=None, grid=QSize(), rows=10, v_value=0, h_value=0):
        self._flow = flow
        self._view_mode = view_mode
        self._spacing = spacing
        self._hits = hits or {}
        self._rects = rects or {}
        self._grid = grid
        self._model = FakeModel(rows) if rows is not None else None
        self._v_bar = FakeScrollBar(v_value)
        self._h_bar = FakeScrollBar(h_value)
        self.looked_up = []

    def flow(self):
        return self._flow

    def viewMode(self):
        return self._view_mode

    def spacing(self):
        return self._spacing

    def indexAt(self, point):
        self.looked_up.append((point.x(), point.y()))
        return FakeIndex(self._hits.get((point.x(), point.y()), -1))

    def visualRect(self, index):
        return self._rects.get(index.row, QRect())

    def gridSize(self):
        return self._grid

    def model(self):
        return self._model

    def verticalScrollBar(self):
        return self._v_bar

    def horizontalScrollBar(self):
        return self._h_bar


def test_list_adapter_vertical_geometry():
    view = FakeView(hits={(0, 0): 3}, rects={3: QRect(0, -30, 200, 100)})
    adapter = ListLayoutAdapter(view)

    assert adapter.orientation() is GestureAxis.VERTICAL
    assert adapter.leading_item_geometry(GestureAxis.VERTICAL) == LeadingItemGeometry(offset=-30, extent=100)


def test_list_adapter_horizontal_geometry():
    view = FakeView(flow=QListView.Flow.LeftToRight, hits={(0, 0): 5}, rects={5: QRect(-40, 0, 120, 80)})
    adapter = ListLayoutAdapter(view)

    assert adapter.orientation() is GestureAxis.HORIZONTAL
    assert adapter.leading_item_geometry(GestureAxis.HORIZONTAL) == LeadingItemGeometry(offset=-40, extent=120)


def test_list_adapter_without_visible_item_returns_none():
    view = FakeView(hits={})
    assert ListLayoutAdapter(view).leading_item_geometry(GestureAxis.VERTICAL) is None


def test_list_adapter_without_item_rect_returns_none():
    view = FakeView(hits={(0, 0): 1}, rects={})
    assert ListLayoutAdapter(view).leading_item_geometry(GestureAxis.VERTICAL) is None


def test_list_adapter_looks_past_spacing_gap():
    # Item 2 starts 2px below the origin, after a 4px gap.
    view = FakeView(spacing=4, hits={(4, 4): 2}, rects={2: QRect(4, 2, 200, 96)})
    adapter = ListLayoutAdapter(view)

    geometry = adapter.leading_item_geometry(GestureAxis.VERTICAL)

    assert view.looked_up == [(4, 0), (4, 4)]
    assert geometry == LeadingItemGeometry(offset=-2, extent=100)


def test_list_adapter_looks_inside_cross_axis_margin():
    view = FakeView(flow=QListView.Flow.LeftToRight, spacing=4,
                    hits={(0, 4): 7}, rects={7: QRect(-26, 4, 96, 96)})

    geometry = ListLayoutAdapter(view).leading_item_geometry(GestureAxis.HORIZONTAL)

    assert view.looked_up == [(0, 4)]
    assert geometry == LeadingItemGeometry(offset=-30, extent=100)


def test_grid_adapter_uses_grid_pitch_and_scroll_value():
    view = FakeView(view_mode=QListView.ViewMode.IconMode, flow=QListView.Flow.LeftToRight,
                    grid=QSize(120, 110), v_value=250)
    adapter = GridLayoutAdapter(view)

    assert adapter.orientation() is GestureAxis.VERTICAL
    assert adapter.leading_item_geometry(GestureAxis.VERTICAL) == LeadingItemGeometry(offset=-30, extent=110)


def test_grid_adapter_horizontal_axis():
    view = FakeView(view_mode=QListView.ViewMode.IconMode, flow=QListView.Flow.TopToBottom,
                    grid=QSize(120, 110), h_value=360)
    adapter = GridLayoutAdapter(view)

    assert adapter.orientation() is GestureAxis.HORIZONTAL
    assert adapter.leading_item_geometry(GestureAxis.HORIZONTAL) == LeadingItemGeometry(offset=0, extent=120)


def test_grid_adapter_needs_items_and_grid():
    empty = FakeView(view_mode=QListView.ViewMode.IconMode, grid=QSize(100, 100), rows=0)
    no_model = FakeView(view_mode=QListView.ViewMode.IconMode, grid=QSize(100, 100), rows=None)
    no_grid = FakeView(view_mode=QListView.ViewMode.IconMode, grid=QSize())

    assert GridLayoutAdapter(empty).leading_item_geometry(GestureAxis.VERTICAL) is None
    assert GridLayoutAdapter(no_model).leading_item_geometry(GestureAxis.VERTICAL) is None
    assert GridLayoutAdapter(no_grid).leading_item_geometry(GestureAxis.VERTICAL) is None


def test_resolver_follows_view_mode():
    assert isinstance(make_leading_item_resolver(FakeView()), ListLayoutAdapter)
    grid_view = FakeView(view_mode=QListView.ViewMode.IconMode)
    assert isinstance(make_leading_item_resolver(grid_view), GridLayoutAdapter)


def _spaced_list_view(flow, axis):
    view = QListView()
    view.setModel(QStringListModel([f"Item {i}" for i in range(30)], view))
    view.setFlow(flow)
    view.setSpacing(4)
    view.setVerticalScrollMode(QAbstractItemView.ScrollMode.ScrollPerPixel)
    view.setHorizontalScrollMode(QAbstractItemView.ScrollMode.ScrollPerPixel)
    view.setItemDelegate(FixedExtentDelegate(view, 96, axis))
    view.resize(400, 320)
    view.show()
    view.doItemsLayout()
    QApplication.processEvents()
    return view


@pytest.mark.parametrize(
    "flow, axis",
    [
        (QListView.Flow.TopToBottom, GestureAxis.VERTICAL),
        (QListView.Flow.LeftToRight, GestureAxis.HORIZONTAL),
    ],
)
@pytest.mark.parametrize("scroll_value, row", [(50, 0), (102, 1)])
def test_list_adapter_resolves_real_spaced_list_view(qapp, flow, axis, scroll_value, row):
    view = _spaced_list_view(flow, axis)
    model = view.model()
    if axis is GestureAxis.VERTICAL:
        scroll_bar, start_of = view.verticalScrollBar(), QRect.top
    else:
        scroll_bar, start_of = view.horizontalScrollBar(), QRect.left
    scroll_bar.setValue(scroll_value)
    QApplication.processEvents()
    pitch = start_of(view.visualRect(model.index(1, 0))) - start_of(view.visualRect(model.index(0, 0)))
    leading_start = start_of(view.visualRect(model.index(row, 0)))

    geometry = ListLayoutAdapter(view).leading_item_geometry(axis)

    assert scroll_bar.value() == scroll_value
    assert geometry == LeadingItemGeometry(offset=leading_start - 4, extent=pitch)
    assert -pitch < geometry.offset <= 0
    view.deleteLater()
