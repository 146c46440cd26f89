import logging
import os
import sys
import traceback
import warnings
from datetime import datetime

from PySide6.QtWidgets import QApplication, QMessageBox

from snapview.utils.settings import settings
from snapview.widgets.main_window import MainWindow

CRASH_LOG_PATH = os.path.abspath('snapview_crash.log')


def _append_crash_log(title: str, exc_info):
    """Append a timestamped crash entry to the crash log."""
    ts = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
    try:
        with open(CRASH_LOG_PATH, 'a', encoding='utf-8') as f:
            f.write("\n" + "=" * 80 + "\n")
            f.write(f"{ts} | {title}\n")
            f.write("=" * 80 + "\n")
            f.writelines(traceback.format_exception(*exc_info))
            f.write("\n")
    except OSError as log_error:
        print(f"[CRASH] Failed to write crash log: {log_error}")
    print(f"[CRASH] Details written to: {CRASH_LOG_PATH}")


def install_crash_handlers():
    """Log unhandled exceptions to the crash log before the default hook runs."""
    def _unhandled_exception(exc_type, exc_value, exc_traceback):
        _append_crash_log("UNHANDLED EXCEPTION", (exc_type, exc_value, exc_traceback))
        sys.__excepthook__(exc_type, exc_value, exc_traceback)

    sys.excepthook = _unhandled_exception


def suppress_warnings():
    """Suppress all warnings when not in a development environment."""
    environment = os.getenv('SNAPVIEW_ENVIRONMENT')
    if environment == 'development':
        print('Running in development environment.')
        settings.setValue('snap_trace_logs', True)
        return
    logging.basicConfig(level=logging.ERROR)
    warnings.simplefilter('ignore')


def run_gui():
    app = QApplication([])
    # The application name is shown in the taskbar.
    app.setApplicationName('SnapView')
    # The application display name is shown in the title bar.
    app.setApplicationDisplayName('SnapView')
    app.setStyle('Fusion')

    main_window = MainWindow(app)
    main_window.show()
    return int(app.exec())


def main():
    suppress_warnings()
    install_crash_handlers()
    try:
        return run_gui()
    except Exception as exception:
        _append_crash_log("TOP-LEVEL EXCEPTION", sys.exc_info())
        error_message_box = QMessageBox()
        error_message_box.setWindowTitle('Error')
        error_message_box.setIcon(QMessageBox.Icon.Critical)
        error_message_box.setText(str(exception))
        error_message_box.setDetailedText(traceback.format_exc())
        error_message_box.exec()
        return 1


if __name__ == '__main__':
    sys.exit(main())
