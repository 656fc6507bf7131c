"""Path resolver for handling differences between development and frozen executable environments.

This module provides utility functions to locate application resources like the
overlay images in both development (running from source) and production
(PyInstaller frozen executable) environments.
"""

import sys
import os
from pathlib import Path


def get_base_dir() -> Path:
    """Get the base directory for the application.

    In frozen mode (PyInstaller executable), returns the directory containing the .exe file.
    In development mode, returns the project root directory (parent of editor/).

    Returns:
        Path: Base directory path
    """
    if getattr(sys, 'frozen', False):
        return Path(os.path.dirname(sys.executable))
    else:
        # Running as script - this file is in editor/src/utils/
        return Path(__file__).resolve().parent.parent.parent.parent


def get_assets_dir() -> Path:
    """Get the assets directory (next to executable or in project root)"""
    return get_base_dir() / "assets"


def get_overlay_dir(override=None) -> Path:
    """Get the directory holding the overlay PNGs.

    Args:
        override: Optional directory from the user config

    Returns:
        Path: override if given, else assets/overlays
    """
    if override:
        return Path(override).expanduser()
    return get_assets_dir() / "overlays"


def get_overlay_path(asset, overlay_dir=None) -> Path:
    """Get the file path for an OverlayAsset variant"""
    return get_overlay_dir(overlay_dir) / asset.file_name


def get_config_dir() -> Path:
    """Per-user configuration directory (~/.hat_overlay)"""
    from constants import CONFIG_DIR_NAME
    return Path(os.path.expanduser("~")) / CONFIG_DIR_NAME
