"""
Hat Overlay Editor - Data Models

This module contains the data model classes for overlay placement.
This is the MODEL in MVC architecture.

Public API: Import TransformModel, Transform, Vec2, OverlayAsset, NativeImage
"""

from .transform import Transform, Vec2
from .overlay import OverlayAsset
from .photo import NativeImage, load_native_image
from .editor_model import TransformModel
from .notification import Notification, Severity

__all__ = [
    'Transform', 'Vec2', 'OverlayAsset', 'NativeImage', 'load_native_image',
    'TransformModel', 'Notification', 'Severity',
]
