"""Uploaded photo (the native image the overlay is composited onto)."""
import io
import logging
from dataclasses import dataclass

from PIL import Image, ImageOps, UnidentifiedImageError

from constants import ACCEPTED_MIME_PREFIX, MSG_UNREADABLE_IMAGE
from utils.errors import InvalidFileType, AssetLoadFailure

_logger = logging.getLogger('NativeImage')


@dataclass(frozen=True)
class NativeImage:
    """Photo bytes plus intrinsic size.

    Width/height are measured after EXIF orientation is applied, so they
    match what the preview shows. The raw bytes are kept so an export can
    decode the photo again off the GUI thread.
    """
    data: bytes
    mime_type: str
    width: int
    height: int
    name: str = ''

    @property
    def size(self):
        return (self.width, self.height)

    @property
    def aspect(self):
        return self.width / self.height


def is_accepted_mime(mime_type):
    return bool(mime_type) and mime_type.startswith(ACCEPTED_MIME_PREFIX)


def load_native_image(data, mime_type, name=''):
    """Validate and measure an uploaded blob

    Args:
        data: Raw file bytes
        mime_type: Declared MIME type of the blob
        name: Display name (file name), informational only

    Returns:
        NativeImage

    Raises:
        InvalidFileType: If mime_type does not start with image/
        AssetLoadFailure: If Pillow cannot decode the bytes
    """
    if not is_accepted_mime(mime_type):
        raise InvalidFileType(f"Rejected upload '{name}' with type {mime_type!r}")

    try:
        with Image.open(io.BytesIO(data)) as img:
            img = ImageOps.exif_transpose(img)
            width, height = img.size
    except (UnidentifiedImageError, OSError, Image.DecompressionBombError) as e:
        raise AssetLoadFailure(f"Could not decode '{name}': {e}", MSG_UNREADABLE_IMAGE) from e

    if width <= 0 or height <= 0:
        raise AssetLoadFailure(f"Image '{name}' has no pixels", MSG_UNREADABLE_IMAGE)

    _logger.debug(f"Loaded photo {name} ({width}x{height}, {mime_type})")
    return NativeImage(data=bytes(data), mime_type=mime_type, width=width, height=height, name=name)
