"""
Hat Overlay Editor - Editor Session

Coordinates the model, the drag controller, the loaded photo and exports.
Widgets call into the session; the session turns editor errors into
transient notifications so none of them is fatal.
"""

import logging
import mimetypes
from pathlib import Path

from constants import MSG_IMAGE_LOADED, MSG_UNREADABLE_IMAGE
from models.editor_model import TransformModel
from models.photo import load_native_image
from services.export_compositor import ExportCompositor
from services.interaction_controller import InteractionController
from utils.errors import EditorError, AssetLoadFailure
from utils.logger import loggerNotify, loggerSuccess
from utils.path_resolver import get_overlay_path

logger = logging.getLogger(__name__)

# Older Pythons have no WebP entry in the mimetypes table
mimetypes.add_type('image/webp', '.webp')


class EditorSession:
    """One editing session (one window)"""

    def __init__(self, overlay_dir=None):
        self.model = TransformModel()
        self.interaction = InteractionController(self.model)
        self.compositor = ExportCompositor()
        self.photo = None
        self.overlay_dir = overlay_dir

    # ========================================
    # Upload
    # ========================================

    def upload(self, data, mime_type, name=''):
        """Load a photo blob

        Returns:
            True if the photo was replaced, False if rejected (state untouched)
        """
        try:
            photo = load_native_image(data, mime_type, name)
        except EditorError as e:
            loggerNotify(e)
            return False

        # Transform is kept so the hat stays where the user put it
        self.photo = photo
        loggerSuccess(MSG_IMAGE_LOADED)
        return True

    def upload_file(self, path):
        """Load a photo from disk, guessing its MIME type from the file name"""
        path = Path(path)
        mime_type, _ = mimetypes.guess_type(path.name)
        try:
            data = path.read_bytes()
        except OSError as e:
            loggerNotify(AssetLoadFailure(f"Cannot read {path}: {e}", MSG_UNREADABLE_IMAGE))
            return False
        return self.upload(data, mime_type or '', path.name)

    @property
    def has_photo(self):
        return self.photo is not None

    # ========================================
    # Commands
    # ========================================

    def reset(self):
        """Restore default placement and end any drag in progress"""
        self.interaction.cancel()
        self.model.reset()

    @property
    def overlay_path(self):
        return get_overlay_path(self.model.overlay, self.overlay_dir)

    # ========================================
    # Export
    # ========================================

    def start_export(self, display_size, on_result=None):
        """Start an export of the current state

        Args:
            display_size: Preview container (width, height), None if not laid out
            on_result: Called with the ExportResult when compositing finishes

        Returns:
            The started ExportJob, or None if the export was refused up front
        """
        try:
            job = self.compositor.start_export(
                self.photo, self.overlay_path, self.model.transform, display_size
            )
        except EditorError as e:
            loggerNotify(e)
            return None

        logger.debug("Export started for %s", self.photo.name)
        job.failed.connect(loggerNotify)
        if on_result is not None:
            job.finished.connect(on_result)
        return job

    def export_now(self, display_size):
        """Synchronous export; errors propagate as EditorError"""
        return self.compositor.export_sync(
            self.photo, self.overlay_path, self.model.transform, display_size
        )
