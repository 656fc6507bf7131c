"""UI components for the Hat Overlay Editor

- canvas_area: preview container with the draggable overlay
- bottom_bar: rotate/scale/flip/reset/save command bar
- status_notifier: transient success/error toast
"""

from .bottom_bar import BottomBar
from .canvas_area import CanvasArea
from .status_notifier import StatusNotifier, StatusToast

__all__ = [
    'BottomBar',
    'CanvasArea',
    'StatusNotifier',
    'StatusToast',
]
