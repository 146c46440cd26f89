from __future__ import annotations

from typing import Protocol

from PySide6.QtCore import QPoint
from PySide6.QtWidgets import QListView

from snapview.widgets.snap_distance_service import GestureAxis, LeadingItemGeometry


class LeadingItemResolver(Protocol):
    """What the snapping core needs from a layout: the first visible item's geometry."""

    def orientation(self) -> GestureAxis:
        ...

    def leading_item_geometry(self, axis: GestureAxis) -> LeadingItemGeometry | None:
        ...


class ListLayoutAdapter:
    """Resolves the leading item of a QListView in ListMode."""

    def __init__(self, view):
        self._view = view

    def orientation(self) -> GestureAxis:
        if self._view.flow() == QListView.Flow.LeftToRight:
            return GestureAxis.HORIZONTAL
        return GestureAxis.VERTICAL

    def _first_visible_index(self, axis: GestureAxis):
        # Items sit `spacing` in from the cross-axis edge, and the origin can
        # fall in the gap between two items along the flow.
        spacing = max(0, int(self._view.spacing()))
        if axis is GestureAxis.VERTICAL:
            points = [QPoint(spacing, 0), QPoint(spacing, spacing)]
        else:
            points = [QPoint(0, spacing), QPoint(spacing, spacing)]
        index = self._view.indexAt(points[0])
        if index.isValid() or spacing <= 0:
            return index
        return self._view.indexAt(points[1])

    def leading_item_geometry(self, axis: GestureAxis) -> LeadingItemGeometry | None:
        index = self._first_visible_index(axis)
        if not index.isValid():
            return None
        rect = self._view.visualRect(index)
        if rect.isEmpty():
            return None
        spacing = max(0, int(self._view.spacing()))
        if axis is GestureAxis.VERTICAL:
            return LeadingItemGeometry(offset=rect.top() - spacing, extent=rect.height() + spacing)
        return LeadingItemGeometry(offset=rect.left() - spacing, extent=rect.width() + spacing)


class GridLayoutAdapter:
    """Resolves the leading row (or column) of a QListView in IconMode with a fixed grid."""

    def __init__(self, view):
        self._view = view

    def orientation(self) -> GestureAxis:
        # Wrapping left-to-right stacks rows, so the grid scrolls vertically.
        if self._view.flow() == QListView.Flow.LeftToRight:
            return GestureAxis.VERTICAL
        return GestureAxis.HORIZONTAL

    def leading_item_geometry(self, axis: GestureAxis) -> LeadingItemGeometry | None:
        model = self._view.model()
        if model is None or model.rowCount() <= 0:
            return None
        grid = self._view.gridSize()
        if not grid.isValid():
            return None
        if axis is GestureAxis.VERTICAL:
            pitch = int(grid.height())
            value = int(self._view.verticalScrollBar().value())
        else:
            pitch = int(grid.width())
            value = int(self._view.horizontalScrollBar().value())
        if pitch <= 0:
            return None
        return LeadingItemGeometry(offset=-(value % pitch), extent=pitch)


def make_leading_item_resolver(view) -> LeadingItemResolver:
    if view.viewMode() == QListView.ViewMode.IconMode:
        return GridLayoutAdapter(view)
    return ListLayoutAdapter(view)
