"""Overlay transformation commands - rotate, scale, flip, reset, overlay choice"""
from utils.logger import loggerRaise


class TransformActions:
	"""Handles overlay transformation commands from buttons, menus and keys"""

	def __init__(self, main_window):
		"""Initialize with reference to main window

		Args:
			main_window: The HatOverlayEditor main window instance
		"""
		self.main_window = main_window

	@property
	def model(self):
		return self.main_window.session.model

	def rotate(self, direction):
		"""Rotate one step

		Args:
			direction: 'left' or 'right'
		"""
		try:
			self.model.rotate(direction)
		except ValueError as e:
			loggerRaise(e, "Unknown rotate command")

	def scale(self, direction):
		"""Scale one step

		Args:
			direction: 'up' or 'down'
		"""
		try:
			self.model.scale(direction)
		except ValueError as e:
			loggerRaise(e, "Unknown scale command")

	def toggle_flip(self):
		"""Mirror horizontally (no-op in Christmas mode)"""
		self.model.toggle_flip()

	def reset(self):
		"""Restore default placement, ending any drag"""
		self.main_window.session.reset()

	def set_seasonal_mode(self, enabled):
		"""Enter or leave Christmas mode"""
		if bool(enabled) != self.model.seasonal_mode:
			self.model.set_seasonal_mode(enabled)

	def select_overlay(self, asset):
		"""Switch to another overlay variant"""
		if asset != self.model.overlay:
			self.model.select_overlay(asset)
