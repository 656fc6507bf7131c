"""
Hat Overlay Editor - Interaction Controller

Converts pointer and touch gesture streams into overlay position updates.

Drag state lives here as an explicit state machine instead of loose
'is dragging' flags on the canvas, so it can be driven and tested without
any widget.

States:
    IDLE     -> DRAGGING  pointer-down over the overlay, or touch-start with
                          exactly one active touch
    DRAGGING -> DRAGGING  move: position = pointer - reference_delta
    DRAGGING -> IDLE      pointer-up, pointer-leave, touch-end, touch-cancel
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence, Tuple

from models.transform import Vec2

Point = Tuple[float, float]


class DragState(Enum):
    IDLE = 'idle'
    DRAGGING = 'dragging'


@dataclass
class DragContext:
    """State captured when a drag starts.

    reference_delta is pointer - position at drag start, so the overlay keeps
    its offset from the pointer instead of jumping to it.
    """
    source: str  # 'pointer' or 'touch'
    reference_delta: Vec2 = field(default_factory=lambda: Vec2(0.0, 0.0))


class InteractionController:
    """Drag state machine driving TransformModel.set_position()"""

    def __init__(self, model):
        self._logger = logging.getLogger('InteractionController')
        self.model = model
        self.drag_context: Optional[DragContext] = None

    # ========================================
    # State
    # ========================================

    @property
    def state(self) -> DragState:
        return DragState.DRAGGING if self.drag_context else DragState.IDLE

    @property
    def is_dragging(self) -> bool:
        return self.drag_context is not None

    @property
    def reference_delta(self) -> Optional[Vec2]:
        if self.drag_context is None:
            return None
        return self.drag_context.reference_delta

    def _begin(self, source, x, y):
        self.drag_context = DragContext(source=source, reference_delta=Vec2(x, y) - self.model.position)
        self._logger.debug(f"Drag start ({source}) delta={tuple(self.drag_context.reference_delta)}")

    def _move_to(self, x, y):
        delta = self.drag_context.reference_delta
        self.model.set_position(x - delta.x, y - delta.y)

    def cancel(self):
        """Force Idle (used by reset and when the container goes away)"""
        if self.drag_context is not None:
            self._logger.debug("Drag end")
        self.drag_context = None

    # ========================================
    # Pointer (mouse)
    # ========================================

    def pointer_down(self, x, y):
        """Pointer pressed over the overlay. Starts a drag."""
        self._begin('pointer', x, y)

    def pointer_move(self, x, y):
        """Pointer moved anywhere the container still delivers events"""
        if self.drag_context is None:
            return False
        self._move_to(x, y)
        return True

    def pointer_up(self):
        self.cancel()

    def pointer_leave(self):
        """Pointer left the preview container"""
        self.cancel()

    # ========================================
    # Touch
    # ========================================

    def touch_start(self, touches: Sequence[Point]):
        """Touch began over the overlay

        Only a single active touch (re)starts a drag, measuring the reference
        delta from touches[0]. Extra fingers leave the current drag as is.
        """
        if len(touches) != 1:
            return False
        x, y = touches[0]
        self._begin('touch', x, y)
        return True

    def touch_move(self, touches: Sequence[Point]):
        """Touch moved. Ignored unless dragging with exactly one touch."""
        if self.drag_context is None or len(touches) != 1:
            return False
        x, y = touches[0]
        self._move_to(x, y)
        return True

    def touch_end(self):
        self.cancel()

    def touch_cancel(self):
        self.cancel()
