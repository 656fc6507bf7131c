import sys
import os
import logging

# Configure logging
logging.basicConfig(
    level=logging.WARNING,  # Only show warnings and errors
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)  # Output to console
    ]
)

# Add editor/src to path so imports work when running directly
if __name__ == "__main__":
    current_dir = os.path.dirname(os.path.abspath(__file__))
    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

# PyQt5 import/s
from PyQt5 import QtWidgets
from PyQt5.QtWidgets import QMainWindow, QApplication
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QPalette, QColor

# Component imports
from components.status_notifier import StatusNotifier

# Service imports
from services.editor_session import EditorSession

# Utility imports
from utils.logger import set_notifier

from constants import APP_TITLE, PREVIEW_MAX_WIDTH

# Action imports
from actions.file_actions import FileActions
from actions.transform_actions import TransformActions

# Mixin imports
from main_window import ConfigMixin, EventMixin, MenuMixin, UISetupMixin

from version import get_version


class HatOverlayEditor(MenuMixin, EventMixin, ConfigMixin, UISetupMixin, QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle(APP_TITLE)
        self.resize(PREVIEW_MAX_WIDTH + 120, 820)
        self.setMinimumSize(640, 760)

        # Settings (last directories, overlay directory override)
        self._init_config()

        # One editing session per window (model, drag controller, photo, exports)
        self.session = EditorSession(overlay_dir=self.overlay_dir)

        # Transient toast channel; every success/error goes through it
        self.notifier = StatusNotifier(self)
        set_notifier(self.notifier.show)

        # Install event filter on application to catch arrow keys globally
        QApplication.instance().installEventFilter(self)

        # Initialize action handlers (composition pattern)
        self.file_actions = FileActions(self)
        self.transform_actions = TransformActions(self)

        self.setup_ui()
        self._update_window_title()

    def closeEvent(self, event):
        """Detach the notifier so late export callbacks don't touch a dead window"""
        set_notifier(None)
        QApplication.instance().removeEventFilter(self)
        super().closeEvent(event)


def main():
    """Main entry point for the Hat Overlay Editor application"""
    app = QtWidgets.QApplication(sys.argv)
    app.setApplicationName(APP_TITLE)
    app.setApplicationVersion(get_version())

    # Use Fusion style with dark palette
    app.setStyle("Fusion")

    dark_palette = QPalette()
    dark_palette.setColor(QPalette.Window, QColor(31, 31, 35))
    dark_palette.setColor(QPalette.WindowText, Qt.white)
    dark_palette.setColor(QPalette.Base, QColor(25, 25, 25))
    dark_palette.setColor(QPalette.AlternateBase, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.ToolTipBase, Qt.white)
    dark_palette.setColor(QPalette.ToolTipText, Qt.white)
    dark_palette.setColor(QPalette.Text, Qt.white)
    dark_palette.setColor(QPalette.Button, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.ButtonText, Qt.white)
    dark_palette.setColor(QPalette.Highlight, QColor(255, 107, 43))
    dark_palette.setColor(QPalette.HighlightedText, Qt.black)

    app.setPalette(dark_palette)

    window = HatOverlayEditor()
    window.show()

    # Optional photo path on the command line
    if len(sys.argv) > 1 and os.path.isfile(sys.argv[1]):
        window.file_actions.load_photo(sys.argv[1])

    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
