"""File operations for the main window - upload and export"""
import os
import logging

from PyQt5.QtWidgets import QFileDialog

from constants import MSG_IMAGE_SAVED, MSG_SAVE_FAILED
from utils.logger import loggerNotify, loggerSuccess

logger = logging.getLogger(__name__)

IMAGE_FILTER = "Images (*.png *.jpg *.jpeg *.gif *.bmp *.webp *.tif *.tiff);;All Files (*)"


class FileActions:
	"""Handles all file menu operations"""

	def __init__(self, main_window):
		"""Initialize with reference to main window

		Args:
			main_window: The HatOverlayEditor main window instance
		"""
		self.main_window = main_window

	def upload_photo(self):
		"""Pick a photo and load it into the session"""
		filename, _ = QFileDialog.getOpenFileName(
			self.main_window,
			"Upload Photo",
			self.main_window.last_open_dir,
			IMAGE_FILTER
		)
		if not filename:
			return
		self.load_photo(filename)

	def load_photo(self, filename):
		"""Load a photo from disk; rejected files leave the editor unchanged

		Returns:
			True if the photo replaced the current one
		"""
		if not self.main_window.session.upload_file(filename):
			return False

		self.main_window.canvas_area.refresh_photo()
		self.main_window.remember_open_dir(filename)
		self.main_window._update_window_title()
		self.main_window._sync_controls()
		return True

	def export_image(self):
		"""Composite at native resolution, then offer the result as a save"""
		display_size = self.main_window.canvas_area.display_size()
		return self.main_window.session.start_export(display_size, on_result=self._offer_save)

	def _offer_save(self, result):
		"""Save dialog pre-filled with the fixed export file name

		Args:
			result: ExportResult from the finished job
		"""
		suggested = os.path.join(self.main_window.last_export_dir, result.file_name)
		filename, _ = QFileDialog.getSaveFileName(
			self.main_window,
			"Save Image",
			suggested,
			"PNG Files (*.png)"
		)
		if not filename:
			logger.debug("Export save cancelled")
			return

		# Ensure .png extension
		if not filename.lower().endswith('.png'):
			filename += '.png'

		self.write_result(result, filename)

	def write_result(self, result, filename):
		"""Write an ExportResult to disk and report the outcome"""
		try:
			result.save(filename)
		except OSError as e:
			loggerNotify(e, MSG_SAVE_FAILED)
			return False

		self.main_window.remember_export_dir(filename)
		loggerSuccess(MSG_IMAGE_SAVED)
		return True
