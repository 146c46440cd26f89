import time
from enum import Enum

from PySide6.QtCore import QElapsedTimer, QSize, Qt, Signal
from PySide6.QtGui import QColor, QPen
from PySide6.QtWidgets import (QAbstractItemView, QApplication, QListView,
                               QStyle, QStyledItemDelegate)

from snapview.utils.settings import (get_bool_setting, get_float_setting,
                                     get_int_setting, settings)
from snapview.widgets.fling_animator import FlingAnimator
from snapview.widgets.fling_correction_coordinator import SnapFlingCoordinator
from snapview.widgets.fling_physics import PhysicalCoefficients
from snapview.widgets.fling_velocity_tracker import (FlingVelocityTracker,
                                                     fling_thresholds)
from snapview.widgets.snap_distance_service import GestureAxis
from snapview.widgets.snap_geometry_adapters import make_leading_item_resolver


class ScrollState(Enum):
    IDLE = 'idle'
    DRAGGING = 'dragging'
    SETTLING = 'settling'


class FixedExtentDelegate(QStyledItemDelegate):
    """Paints every item with the same size so snapping stays exact."""

    def __init__(self, parent, extent: int, axis: GestureAxis):
        super().__init__(parent)
        self.extent = max(1, int(extent))
        self.axis = axis

    def sizeHint(self, option, index):
        if self.axis is GestureAxis.VERTICAL:
            # Stretch rows across the viewport; only the height is uniform.
            return QSize(max(1, self.parent().viewport().width()), self.extent)
        return QSize(self.extent, self.extent)

    def paint(self, painter, option, index):
        painter.save()
        shade = 235 if index.row() % 2 == 0 else 215
        painter.fillRect(option.rect, QColor(shade, shade, 245))
        if option.state & QStyle.StateFlag.State_Selected:
            painter.fillRect(option.rect, option.palette.highlight())
        painter.setPen(QPen(QColor(160, 160, 180)))
        painter.drawRect(option.rect.adjusted(0, 0, -1, -1))
        painter.setPen(QPen(option.palette.text().color()))
        painter.drawText(option.rect, Qt.AlignmentFlag.AlignCenter, str(index.data() or ''))
        painter.restore()
