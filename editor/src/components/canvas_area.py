"""Preview container - letterboxed photo with the draggable overlay on top"""
import logging

# PyQt5 imports
from PyQt5.QtWidgets import QFrame, QSizePolicy
from PyQt5.QtCore import Qt, QEvent, QRectF, QSize, QByteArray, QBuffer, QIODevice
from PyQt5.QtGui import QPainter, QPixmap, QImageReader, QColor, QPen

from constants import (
	PREVIEW_MAX_WIDTH, PREVIEW_HEIGHT, PREVIEW_BACKGROUND,
	PREVIEW_BORDER, PREVIEW_BORDER_SEASONAL,
)
from services.preview_renderer import preview_transform, photo_display_rect

logger = logging.getLogger(__name__)


def photo_to_qimage(photo):
	"""Decode NativeImage bytes for display, honouring EXIF orientation"""
	buffer = QBuffer()
	buffer.setData(QByteArray(photo.data))
	buffer.open(QIODevice.ReadOnly)
	reader = QImageReader(buffer)
	reader.setAutoTransform(True)
	image = reader.read()
	buffer.close()
	return image


class CanvasArea(QFrame):
	"""Fixed-height preview container

	Forwards mouse and touch streams to the session's InteractionController
	and repaints whenever the model changes.
	"""

	def __init__(self, session, parent=None):
		super().__init__(parent)
		self.session = session
		self.setMaximumWidth(PREVIEW_MAX_WIDTH)
		self.setFixedHeight(PREVIEW_HEIGHT)
		self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)
		self.setAttribute(Qt.WA_AcceptTouchEvents)
		self.setCursor(Qt.ArrowCursor)

		self._photo_pixmap = None
		self._photo_source = None  # NativeImage the pixmap was built from
		self._overlay_pixmaps = {}  # path -> QPixmap (null if missing)

		session.model.add_listener(self.update)

	# ========================================
	# Geometry
	# ========================================

	def sizeHint(self):
		return QSize(PREVIEW_MAX_WIDTH, PREVIEW_HEIGHT)

	def minimumSizeHint(self):
		return QSize(PREVIEW_MAX_WIDTH // 2, PREVIEW_HEIGHT)

	def display_size(self):
		"""Rendered container size, None while not laid out"""
		if not self.isVisible() or self.width() <= 0 or self.height() <= 0:
			return None
		return (self.width(), self.height())

	def _overlay_pixmap(self):
		path = self.session.overlay_path
		key = str(path)
		if key not in self._overlay_pixmaps:
			pixmap = QPixmap(key)
			if pixmap.isNull():
				logger.warning("Overlay image not found or unreadable: %s", path)
			self._overlay_pixmaps[key] = pixmap
		return self._overlay_pixmaps[key]

	def _current_preview(self):
		pixmap = self._overlay_pixmap()
		if pixmap.isNull():
			return None
		return preview_transform(
			self.session.model.transform,
			(pixmap.width(), pixmap.height()),
			(self.width(), self.height()),
		)

	def refresh_photo(self):
		"""Rebuild the photo pixmap after an upload"""
		photo = self.session.photo
		if photo is self._photo_source:
			return
		self._photo_source = photo
		self._photo_pixmap = QPixmap.fromImage(photo_to_qimage(photo)) if photo else None
		self.update()

	# ========================================
	# Painting
	# ========================================

	def paintEvent(self, event):
		painter = QPainter(self)
		painter.setRenderHint(QPainter.Antialiasing, True)
		painter.setRenderHint(QPainter.SmoothPixmapTransform, True)

		painter.fillRect(self.rect(), QColor(PREVIEW_BACKGROUND))

		# Photo, contain-fit
		if self._photo_pixmap is not None and not self._photo_pixmap.isNull():
			x, y, w, h = photo_display_rect(
				(self._photo_pixmap.width(), self._photo_pixmap.height()),
				(self.width(), self.height()),
			)
			painter.drawPixmap(QRectF(x, y, w, h), self._photo_pixmap, QRectF(self._photo_pixmap.rect()))

		# Overlay
		preview = self._current_preview()
		if preview is not None:
			painter.save()
			painter.setTransform(preview.to_qtransform(), True)
			painter.drawPixmap(0, 0, self._overlay_pixmap())
			painter.restore()

		# Border
		border = PREVIEW_BORDER_SEASONAL if self.session.model.seasonal_mode else PREVIEW_BORDER
		painter.setPen(QPen(QColor(border), 3))
		painter.drawRoundedRect(QRectF(self.rect()).adjusted(1.5, 1.5, -1.5, -1.5), 12, 12)
		painter.end()

	# ========================================
	# Mouse
	# ========================================

	def _hits_overlay(self, x, y):
		preview = self._current_preview()
		return preview is not None and preview.contains(x, y)

	def mousePressEvent(self, event):
		"""Start dragging when the press lands on the overlay"""
		if event.button() == Qt.LeftButton and self._hits_overlay(event.x(), event.y()):
			self.session.interaction.pointer_down(event.x(), event.y())
			self.setCursor(Qt.SizeAllCursor)
			event.accept()
			return
		super().mousePressEvent(event)

	def mouseMoveEvent(self, event):
		# The implicit grab holds back leaveEvent while a button is down
		if self.session.interaction.is_dragging and not self.rect().contains(event.pos()):
			self.session.interaction.pointer_leave()
			self.setCursor(Qt.ArrowCursor)
			event.accept()
			return
		if self.session.interaction.pointer_move(event.x(), event.y()):
			event.accept()
			return
		super().mouseMoveEvent(event)

	def mouseReleaseEvent(self, event):
		self.session.interaction.pointer_up()
		self.setCursor(Qt.ArrowCursor)
		super().mouseReleaseEvent(event)

	def leaveEvent(self, event):
		self.session.interaction.pointer_leave()
		self.setCursor(Qt.ArrowCursor)
		super().leaveEvent(event)

	# ========================================
	# Touch
	# ========================================

	def event(self, event):
		"""Route QTouchEvents to the interaction controller"""
		event_type = event.type()
		if event_type not in (QEvent.TouchBegin, QEvent.TouchUpdate, QEvent.TouchEnd, QEvent.TouchCancel):
			return super().event(event)

		interaction = self.session.interaction
		if event_type in (QEvent.TouchEnd, QEvent.TouchCancel):
			if event_type == QEvent.TouchEnd:
				interaction.touch_end()
			else:
				interaction.touch_cancel()
			event.accept()
			return True

		touches = [
			(point.pos().x(), point.pos().y())
			for point in event.touchPoints()
			if point.state() != Qt.TouchPointReleased
		]
		states = {point.state() for point in event.touchPoints()}

		if Qt.TouchPointReleased in states:
			# Any lifted finger ends the drag, even if others remain
			interaction.touch_end()
		elif Qt.TouchPointPressed in states:
			if len(touches) == 1 and self._hits_overlay(*touches[0]):
				interaction.touch_start(touches)
		else:
			interaction.touch_move(touches)
		event.accept()
		return True
