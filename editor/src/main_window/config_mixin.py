"""Configuration management for HatOverlayEditor"""

import os
import json
import logging

from constants import CONFIG_FILE_NAME, APP_TITLE
from utils.path_resolver import get_config_dir
from utils.logger import loggerNotify

logger = logging.getLogger(__name__)


class ConfigMixin:
	"""User configuration file: last used directories and overlay directory"""

	CONFIG_KEYS = ('last_open_dir', 'last_export_dir', 'overlay_dir')

	def _init_config(self):
		"""Resolve config paths and load stored settings"""
		self.config_dir = str(get_config_dir())
		self.config_file = os.path.join(self.config_dir, CONFIG_FILE_NAME)
		self.last_open_dir = ""
		self.last_export_dir = ""
		self.overlay_dir = None
		self._load_config()

	def _load_config(self):
		"""Load settings from config file, ignoring unknown keys"""
		if not os.path.exists(self.config_file):
			return
		try:
			with open(self.config_file, 'r', encoding='utf-8') as f:
				config = json.load(f)
		except (OSError, ValueError) as e:
			# A broken config only costs the remembered directories
			loggerNotify(e, "Error loading config")
			return

		if not isinstance(config, dict):
			logger.warning("Ignoring config that is not a JSON object: %s", self.config_file)
			return

		self.last_open_dir = config.get('last_open_dir') or ""
		self.last_export_dir = config.get('last_export_dir') or ""
		self.overlay_dir = config.get('overlay_dir') or None

		# Filter out directories that no longer exist
		if self.last_open_dir and not os.path.isdir(self.last_open_dir):
			self.last_open_dir = ""
		if self.last_export_dir and not os.path.isdir(self.last_export_dir):
			self.last_export_dir = ""

	def _save_config(self):
		"""Save settings to config file"""
		config = {
			'last_open_dir': self.last_open_dir,
			'last_export_dir': self.last_export_dir,
			'overlay_dir': self.overlay_dir,
		}
		try:
			# Create config directory if it doesn't exist
			os.makedirs(self.config_dir, exist_ok=True)
			with open(self.config_file, 'w', encoding='utf-8') as f:
				json.dump(config, f, indent=2)
		except OSError as e:
			loggerNotify(e, "Error saving config")

	def remember_open_dir(self, filepath):
		"""Store the directory of an uploaded photo"""
		self.last_open_dir = os.path.dirname(os.path.abspath(filepath))
		self._save_config()

	def remember_export_dir(self, filepath):
		"""Store the directory an export was written to"""
		self.last_export_dir = os.path.dirname(os.path.abspath(filepath))
		self._save_config()

	def _update_window_title(self):
		"""Update window title with the loaded photo name"""
		photo = self.session.photo
		if photo is not None and photo.name:
			self.setWindowTitle(f"{photo.name} - {APP_TITLE}")
		else:
			self.setWindowTitle(APP_TITLE)
