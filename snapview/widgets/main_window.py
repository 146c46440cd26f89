from PySide6.QtCore import QSize, QStringListModel
from PySide6.QtGui import QAction, QCloseEvent
from PySide6.QtWidgets import (QApplication, QComboBox, QLabel, QListView,
                               QMainWindow, QToolBar)

from snapview.utils.settings import (LAYOUT_MODES, get_bool_setting,
                                     get_int_setting, get_layout_mode,
                                     settings)
from snapview.widgets.snap_distance_service import GestureAxis
from snapview.widgets.snapped_list_shared import FixedExtentDelegate, ScrollState
from snapview.widgets.snapped_list_view import SnappedListView

LAYOUT_MODE_LABELS = {
    'vertical_list': 'Vertical list',
    'horizontal_list': 'Horizontal list',
    'grid': 'Grid',
}


class MainWindow(QMainWindow):
    def __init__(self, app: QApplication):
        super().__init__()
        self.app = app
        self.setWindowTitle('SnapView')

        item_count = max(1, get_int_setting('demo_item_count'))
        self.item_extent = max(8, get_int_setting('demo_item_extent'))
        self.list_model = QStringListModel([f'Item {i + 1}' for i in range(item_count)], self)

        self.list_view = SnappedListView(self)
        self.list_view.setModel(self.list_model)
        self.list_view.scroll_state_changed.connect(self._on_scroll_state_changed)
        self.setCentralWidget(self.list_view)

        self.state_label = QLabel(ScrollState.IDLE.value)
        self.statusBar().addPermanentWidget(self.state_label)

        self.create_toolbar()
        self.apply_layout_mode(get_layout_mode())

        self.resize(self.item_extent * 6, self.item_extent * 7)
        geometry = settings.value('geometry')
        if geometry is not None:
            self.restoreGeometry(geometry)

    def create_toolbar(self):
        toolbar = QToolBar('Main toolbar', self)
        toolbar.setObjectName('Main toolbar')
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        self.snapping_action = QAction('Snapping', self)
        self.snapping_action.setCheckable(True)
        self.snapping_action.setChecked(get_bool_setting('snapping_enabled'))
        # The view follows the setting through the settings change signal.
        self.snapping_action.toggled.connect(
            lambda checked: settings.setValue('snapping_enabled', checked))
        toolbar.addAction(self.snapping_action)
        toolbar.addSeparator()

        self.layout_mode_combo_box = QComboBox()
        for mode in LAYOUT_MODES:
            self.layout_mode_combo_box.addItem(LAYOUT_MODE_LABELS[mode], mode)
        self.layout_mode_combo_box.setCurrentIndex(LAYOUT_MODES.index(get_layout_mode()))
        self.layout_mode_combo_box.currentIndexChanged.connect(
            lambda index: self.apply_layout_mode(self.layout_mode_combo_box.itemData(index)))
        toolbar.addWidget(QLabel('Layout: '))
        toolbar.addWidget(self.layout_mode_combo_box)

    def apply_layout_mode(self, mode: str):
        view = self.list_view
        extent = self.item_extent
        view.setGridSize(QSize())
        if mode == 'grid':
            view.setViewMode(QListView.ViewMode.IconMode)
            view.setFlow(QListView.Flow.LeftToRight)
            view.setWrapping(True)
            view.setMovement(QListView.Movement.Static)
            view.setResizeMode(QListView.ResizeMode.Adjust)
            view.setGridSize(QSize(extent, extent))
            axis = GestureAxis.HORIZONTAL  # square cells
        elif mode == 'horizontal_list':
            view.setViewMode(QListView.ViewMode.ListMode)
            view.setFlow(QListView.Flow.LeftToRight)
            view.setWrapping(False)
            axis = GestureAxis.HORIZONTAL
        else:
            view.setViewMode(QListView.ViewMode.ListMode)
            view.setFlow(QListView.Flow.TopToBottom)
            view.setWrapping(False)
            axis = GestureAxis.VERTICAL
        view.setSpacing(0)
        view.setItemDelegate(FixedExtentDelegate(view, extent, axis))
        view.scrollToTop()
        settings.setValue('demo_layout_mode', mode)
        self.statusBar().showMessage(f'{LAYOUT_MODE_LABELS[mode]}, item extent {extent}px', 3000)

    def _on_scroll_state_changed(self, state: ScrollState):
        self.state_label.setText(state.value)

    def closeEvent(self, event: QCloseEvent):
        """Save the window geometry before closing."""
        settings.setValue('geometry', self.saveGeometry())
        super().closeEvent(event)
