"""
Hat Overlay Editor - Constants and Configuration

This module contains all constant values used throughout the application:
- Transform defaults and step sizes
- Scale constraints
- Overlay asset file names
- Preview container geometry
- Export and notification settings
"""

# ======================================================================
# TRANSFORM DEFAULTS
# ======================================================================
# Position is a display-space pixel offset from the container center.

DEFAULT_POSITION_X = 0.0
DEFAULT_POSITION_Y = 0.0
DEFAULT_ROTATION = 0.0
DEFAULT_SCALE = 1.0
DEFAULT_FLIP_HORIZONTAL = False

# ======================================================================
# ROTATION
# ======================================================================

# Degrees added per rotate command (left is negative)
# Rotation is additive and never wrapped to [0, 360)
ROTATION_STEP = 15.0

# ======================================================================
# SCALE CONSTRAINTS
# ======================================================================

SCALE_MIN = 0.1
SCALE_MAX = 7.0

# Multiplicative factors per scale command
SCALE_UP_FACTOR = 1.1
SCALE_DOWN_FACTOR = 0.9

# ======================================================================
# LAYER MOVEMENT CONSTANTS
# ======================================================================
# Display pixels to move the overlay when using arrow keys
ARROW_KEY_MOVE_NORMAL = 1.0
ARROW_KEY_MOVE_FAST = 10.0   # With Shift modifier

# ======================================================================
# OVERLAY ASSETS
# ======================================================================

OVERLAY_FILE_RIGHT = 'right-hat.png'
OVERLAY_FILE_LEFT = 'left-hat.png'
OVERLAY_FILE_SEASONAL = 'christmas-hat.png'

# Overlay is shown this wide in the preview, height follows its aspect ratio
OVERLAY_NOMINAL_WIDTH = 100.0

# ======================================================================
# PREVIEW CONTAINER
# ======================================================================

PREVIEW_MAX_WIDTH = 800
PREVIEW_HEIGHT = 600
PREVIEW_BACKGROUND = '#f3f4f6'
PREVIEW_BORDER = '#ff6b2b'
PREVIEW_BORDER_SEASONAL = '#ef4444'

# ======================================================================
# UPLOAD / EXPORT
# ======================================================================

ACCEPTED_MIME_PREFIX = 'image/'
EXPORT_FILE_NAME = 'you-are-a-partner-now.png'
EXPORT_FORMAT = 'PNG'

# ======================================================================
# NOTIFICATIONS
# ======================================================================

STATUS_TIMEOUT_MS = 1000

MSG_IMAGE_LOADED = 'Image loaded successfully'
MSG_IMAGE_SAVED = 'Image saved successfully'
MSG_INVALID_FILE = 'Please select an image file'
MSG_UPLOAD_FIRST = 'Please upload an image first'
MSG_UNREADABLE_IMAGE = 'Could not read image'
MSG_SAVE_FAILED = 'Error saving image'

# ======================================================================
# CONFIG FILE
# ======================================================================

CONFIG_DIR_NAME = '.hat_overlay'
CONFIG_FILE_NAME = 'config.json'

APP_TITLE = 'Hat Overlay Editor'
