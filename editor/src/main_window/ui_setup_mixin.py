"""UI setup for HatOverlayEditor"""

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QCheckBox
from PyQt5.QtCore import Qt

from components.bottom_bar import BottomBar
from components.canvas_area import CanvasArea
from components.status_notifier import StatusToast
from components.ui_helpers import create_command_button
from constants import APP_TITLE


class UISetupMixin:
    """UI initialization and component wiring"""

    def setup_ui(self):
        """Initialize and wire up all UI components"""
        self._create_menu_bar()

        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        main_layout = QVBoxLayout(central_widget)
        main_layout.setContentsMargins(24, 16, 24, 16)
        main_layout.setSpacing(12)

        # Header: title, upload button, seasonal toggle
        header = QHBoxLayout()
        title = QLabel(APP_TITLE)
        title.setStyleSheet("font-size: 20px; font-weight: 700;")
        header.addWidget(title)
        header.addStretch()

        self.upload_btn = create_command_button("Upload Photo", "Choose a photo (Ctrl+O)")
        self.upload_btn.clicked.connect(self.file_actions.upload_photo)
        header.addWidget(self.upload_btn)

        self.seasonal_checkbox = QCheckBox("Christmas Mode")
        self.seasonal_checkbox.setCursor(Qt.PointingHandCursor)
        self.seasonal_checkbox.toggled.connect(self.transform_actions.set_seasonal_mode)
        header.addWidget(self.seasonal_checkbox)

        main_layout.addLayout(header)

        # Center preview container
        self.canvas_area = CanvasArea(self.session, self)
        main_layout.addWidget(self.canvas_area, 0, Qt.AlignHCenter)

        # Command bar
        self.bottom_bar = BottomBar(self)
        main_layout.addWidget(self.bottom_bar, 0, Qt.AlignHCenter)

        main_layout.addStretch()

        # Transient toast floats over the central widget
        self.toast = StatusToast(self.notifier, central_widget)

        # Keep controls in step with the model
        self.session.model.add_listener(self._sync_controls)
        self._sync_controls()

    def _sync_controls(self):
        """Refresh enabled states and toggles after any change"""
        model = self.session.model
        self.bottom_bar.sync_from_model()
        self._update_menu_actions()

        if self.seasonal_checkbox.isChecked() != model.seasonal_mode:
            self.seasonal_checkbox.blockSignals(True)
            self.seasonal_checkbox.setChecked(model.seasonal_mode)
            self.seasonal_checkbox.blockSignals(False)
