"""Overlay asset variants (the hats that can be placed on a photo)."""
from enum import Enum

from constants import OVERLAY_FILE_RIGHT, OVERLAY_FILE_LEFT, OVERLAY_FILE_SEASONAL


class OverlayAsset(Enum):
    """Closed set of overlay images.

    The value is the PNG file name inside the overlay directory.
    """
    DEFAULT_RIGHT = OVERLAY_FILE_RIGHT
    DEFAULT_LEFT = OVERLAY_FILE_LEFT
    SEASONAL = OVERLAY_FILE_SEASONAL

    @property
    def file_name(self):
        return self.value

    @property
    def is_seasonal(self):
        return self is OverlayAsset.SEASONAL

    @classmethod
    def from_name(cls, name):
        """Look up a variant by CLI-friendly name ('right', 'left', 'seasonal')"""
        aliases = {
            'right': cls.DEFAULT_RIGHT,
            'left': cls.DEFAULT_LEFT,
            'seasonal': cls.SEASONAL,
            'christmas': cls.SEASONAL,
        }
        try:
            return aliases[name.lower()]
        except KeyError:
            raise ValueError(f"Unknown overlay '{name}'") from None
