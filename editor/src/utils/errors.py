"""Editor error kinds.

Every error here is recoverable: it is reported as a transient notification
and leaves the editing state untouched.
"""

from constants import MSG_INVALID_FILE, MSG_UPLOAD_FIRST, MSG_SAVE_FAILED


class EditorError(Exception):
    """Base class for user-facing editor errors

    Attributes:
        user_message: Short text shown in the status toast
    """
    default_message = MSG_SAVE_FAILED

    def __init__(self, detail=None, user_message=None):
        super().__init__(detail or user_message or self.default_message)
        self.user_message = user_message or self.default_message


class InvalidFileType(EditorError):
    """Uploaded blob is not declared as image/*"""
    default_message = MSG_INVALID_FILE


class MissingInput(EditorError):
    """Export requested without a photo or without container metrics"""
    default_message = MSG_UPLOAD_FIRST


class AssetLoadFailure(EditorError):
    """Photo or overlay could not be decoded"""
    default_message = MSG_SAVE_FAILED


class RenderContextUnavailable(EditorError):
    """Output raster could not be allocated"""
    default_message = MSG_SAVE_FAILED
