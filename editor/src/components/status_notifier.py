"""Status notifier - transient feedback with auto-dismiss"""
from PyQt5.QtWidgets import QLabel
from PyQt5.QtCore import QObject, QTimer, Qt, pyqtSignal

from constants import STATUS_TIMEOUT_MS
from models.notification import Notification, Severity


class StatusNotifier(QObject):
	"""Holds the current message and clears it after a fixed window.

	Exactly one timer is pending at a time; every new message restarts it.
	"""

	messageShown = pyqtSignal(str, str)  # message, severity value
	messageCleared = pyqtSignal()

	def __init__(self, parent=None, timeout_ms=STATUS_TIMEOUT_MS):
		super().__init__(parent)
		self.current = None

		self._timer = QTimer(self)
		self._timer.setSingleShot(True)
		self._timer.setInterval(timeout_ms)
		self._timer.timeout.connect(self.clear)

	def show(self, message, severity=Severity.SUCCESS):
		"""Show a message, cancelling the previous dismiss timer"""
		severity = Severity(severity)
		self.current = Notification(message, severity)
		self._timer.start()  # restarts if already active
		self.messageShown.emit(message, severity.value)

	def clear(self):
		self._timer.stop()
		if self.current is None:
			return
		self.current = None
		self.messageCleared.emit()

	def is_pending(self):
		return self._timer.isActive()


class StatusToast(QLabel):
	"""Bottom-right toast label bound to a StatusNotifier"""

	STYLES = {
		Severity.ERROR.value: "background-color: #ef4444;",
		Severity.SUCCESS.value: "background-color: #16a34a;",
	}

	def __init__(self, notifier, parent=None):
		super().__init__(parent)
		self.setAlignment(Qt.AlignCenter)
		self.setAttribute(Qt.WA_TransparentForMouseEvents)
		self.hide()

		notifier.messageShown.connect(self._on_shown)
		notifier.messageCleared.connect(self.hide)

	def _on_shown(self, message, severity):
		self.setText(message)
		self.setStyleSheet(
			"QLabel { color: white; font-weight: 500; padding: 10px 20px; border-radius: 8px; "
			+ self.STYLES.get(severity, "") + " }"
		)
		self.adjustSize()
		self._reposition()
		self.show()
		self.raise_()

	def _reposition(self):
		parent = self.parentWidget()
		if parent is None:
			return
		x = parent.width() - self.width() - 32
		y = parent.height() - self.height() - 80
		self.move(max(0, x), max(0, y))
