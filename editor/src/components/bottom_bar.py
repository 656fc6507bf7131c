"""Bottom bar component - rotate, scale, flip, reset and save commands"""
from PyQt5.QtWidgets import QFrame, QHBoxLayout, QLabel

from components.ui_helpers import create_command_button, create_styled_combo_box
from models.overlay import OverlayAsset


class BottomBar(QFrame):
	"""Command bar under the preview container"""

	OVERLAY_CHOICES = [
		("Hat facing right", OverlayAsset.DEFAULT_RIGHT),
		("Hat facing left", OverlayAsset.DEFAULT_LEFT),
	]

	def __init__(self, main_window):
		"""Initialize bottom bar

		Args:
			main_window: Parent HatOverlayEditor instance (owns the actions)
		"""
		super().__init__()
		self.main_window = main_window

		self.setStyleSheet("QFrame { background-color: #f3f4f6; border-radius: 12px; }")
		self.setMaximumWidth(800)

		self._setup_ui()

	def _setup_ui(self):
		"""Setup the bottom bar UI"""
		layout = QHBoxLayout(self)
		layout.setContentsMargins(16, 12, 16, 12)
		layout.setSpacing(10)

		actions = self.main_window.transform_actions

		self.rotate_left_btn = create_command_button("⟲ Rotate Left", "Rotate 15° counter-clockwise (Q)")
		self.rotate_left_btn.clicked.connect(lambda: actions.rotate('left'))
		layout.addWidget(self.rotate_left_btn)

		self.rotate_right_btn = create_command_button("⟳ Rotate Right", "Rotate 15° clockwise (E)")
		self.rotate_right_btn.clicked.connect(lambda: actions.rotate('right'))
		layout.addWidget(self.rotate_right_btn)

		self.scale_up_btn = create_command_button("+ Scale Up", "Grow by 10% (+)")
		self.scale_up_btn.clicked.connect(lambda: actions.scale('up'))
		layout.addWidget(self.scale_up_btn)

		self.scale_down_btn = create_command_button("- Scale Down", "Shrink by 10% (-)")
		self.scale_down_btn.clicked.connect(lambda: actions.scale('down'))
		layout.addWidget(self.scale_down_btn)

		self.flip_btn = create_command_button("↔ Flip", "Mirror horizontally (F)")
		self.flip_btn.clicked.connect(actions.toggle_flip)
		layout.addWidget(self.flip_btn)

		self.reset_btn = create_command_button("Reset", "Restore default placement (R)", accent='reset')
		self.reset_btn.clicked.connect(actions.reset)
		layout.addWidget(self.reset_btn)

		self.save_btn = create_command_button("Save Image", "Export at full resolution (Ctrl+S)")
		self.save_btn.clicked.connect(self.main_window.file_actions.export_image)
		layout.addWidget(self.save_btn)

		layout.addSpacing(12)

		overlay_label = QLabel("Hat:")
		overlay_label.setStyleSheet("font-size: 11px; border: none;")
		layout.addWidget(overlay_label)

		self.overlay_combo = create_styled_combo_box([text for text, _ in self.OVERLAY_CHOICES])
		self.overlay_combo.setFixedWidth(130)
		self.overlay_combo.currentIndexChanged.connect(self._on_overlay_changed)
		layout.addWidget(self.overlay_combo)

		layout.addStretch()

	def _on_overlay_changed(self, index):
		"""Handle overlay dropdown change"""
		_, asset = self.OVERLAY_CHOICES[index]
		self.main_window.transform_actions.select_overlay(asset)

	def sync_from_model(self):
		"""Enable/disable buttons from the session state"""
		session = self.main_window.session
		model = session.model

		self.save_btn.setEnabled(session.has_photo)
		self.flip_btn.setEnabled(model.can_flip)
		self.overlay_combo.setEnabled(not model.seasonal_mode)

		if not model.seasonal_mode:
			index = [asset for _, asset in self.OVERLAY_CHOICES].index(model.overlay)
			if index != self.overlay_combo.currentIndex():
				self.overlay_combo.blockSignals(True)
				self.overlay_combo.setCurrentIndex(index)
				self.overlay_combo.blockSignals(False)
