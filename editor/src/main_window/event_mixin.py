"""Window event handlers for HatOverlayEditor"""

from PyQt5.QtWidgets import QLineEdit, QComboBox, QAbstractItemView
from PyQt5.QtCore import Qt, QEvent

from constants import ARROW_KEY_MOVE_NORMAL, ARROW_KEY_MOVE_FAST


ARROW_DIRECTIONS = {
	Qt.Key_Left: (-1, 0),
	Qt.Key_Right: (1, 0),
	Qt.Key_Up: (0, -1),
	Qt.Key_Down: (0, 1),
}


class EventMixin:
	"""Window event handlers (resize, eventFilter, keyPress, close)"""

	def resizeEvent(self, event):
		"""Keep the toast pinned to the bottom-right corner"""
		super().resizeEvent(event)
		if hasattr(self, 'toast') and self.toast.isVisible():
			self.toast._reposition()

	def eventFilter(self, obj, event):
		"""Capture arrow keys before child widgets (buttons, combo) consume them"""
		if event.type() == QEvent.KeyPress and event.key() in ARROW_DIRECTIONS:
			# Leave text entry and open dropdowns alone
			if isinstance(obj, (QLineEdit, QComboBox, QAbstractItemView)):
				return False
			if not self.isActiveWindow():
				return False

			move_amount = ARROW_KEY_MOVE_FAST if event.modifiers() & Qt.ShiftModifier else ARROW_KEY_MOVE_NORMAL
			dx, dy = ARROW_DIRECTIONS[event.key()]
			self.session.model.nudge(dx * move_amount, dy * move_amount)

			# Consume the event so child widgets don't process it
			return True

		# Let all other events pass through
		return False

	def keyPressEvent(self, event):
		"""Handle single-key transform shortcuts"""
		if event.modifiers() & (Qt.ControlModifier | Qt.AltModifier):
			super().keyPressEvent(event)
			return

		key = event.key()
		# Q / E for rotate
		if key == Qt.Key_Q:
			self.transform_actions.rotate('left')
		elif key == Qt.Key_E:
			self.transform_actions.rotate('right')
		# +/- for scale (= shares the + key on most layouts)
		elif key in (Qt.Key_Plus, Qt.Key_Equal):
			self.transform_actions.scale('up')
		elif key in (Qt.Key_Minus, Qt.Key_Underscore):
			self.transform_actions.scale('down')
		# F for flip
		elif key == Qt.Key_F:
			self.transform_actions.toggle_flip()
		# R for reset
		elif key == Qt.Key_R:
			self.transform_actions.reset()
		else:
			super().keyPressEvent(event)
			return
		event.accept()

	def closeEvent(self, event):
		"""Save config before closing"""
		self._save_config()
		event.accept()
