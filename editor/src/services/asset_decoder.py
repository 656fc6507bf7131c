"""
Asset decoding for export.

Decodes the uploaded photo bytes and the overlay PNG into Pillow images.
DecodeWorker runs both decodes on a QThread so the GUI stays responsive;
its signals are delivered back on the GUI thread.
"""

import io
import logging
from pathlib import Path

from PyQt5.QtCore import QThread, pyqtSignal
from PIL import Image, ImageOps, UnidentifiedImageError

from utils.errors import AssetLoadFailure

logger = logging.getLogger(__name__)


def decode_photo(photo):
    """Decode a NativeImage to an RGBA Pillow image, EXIF orientation applied

    Raises:
        AssetLoadFailure: If the bytes cannot be decoded
    """
    try:
        with Image.open(io.BytesIO(photo.data)) as img:
            img = ImageOps.exif_transpose(img)
            return img.convert('RGBA')
    except (UnidentifiedImageError, OSError, Image.DecompressionBombError) as e:
        raise AssetLoadFailure(f"Could not decode photo '{photo.name}': {e}") from e


def decode_overlay(path):
    """Decode an overlay PNG to an RGBA Pillow image

    Raises:
        AssetLoadFailure: If the file is missing or cannot be decoded
    """
    path = Path(path)
    try:
        with Image.open(path) as img:
            return img.convert('RGBA')
    except (UnidentifiedImageError, OSError) as e:
        raise AssetLoadFailure(f"Could not decode overlay {path}: {e}") from e


class DecodeWorker(QThread):
    """Worker thread decoding the photo and overlay for one export."""

    decoded = pyqtSignal(object, object)  # photo image, overlay image
    failed = pyqtSignal(object)           # AssetLoadFailure

    def __init__(self, photo, overlay_path, parent=None):
        super().__init__(parent)
        self.photo = photo
        self.overlay_path = Path(overlay_path)

    def run(self):
        """Decode both assets, emitting exactly one of decoded/failed."""
        try:
            base = decode_photo(self.photo)
            overlay = decode_overlay(self.overlay_path)
        except AssetLoadFailure as e:
            logger.warning("Export decode failed: %s", e)
            self.failed.emit(e)
            return
        logger.debug("Decoded photo %s and overlay %s", base.size, overlay.size)
        self.decoded.emit(base, overlay)
