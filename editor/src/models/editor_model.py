"""
Hat Overlay Editor - Transform Model

THE MODEL in the MVC architecture. Owns overlay placement state.

This class handles:
- Position (absolute set and arrow-key nudge)
- Rotation in fixed steps (unbounded, never normalized)
- Multiplicative scale with clamping
- Horizontal flip
- Overlay asset selection and seasonal mode
- Reset to defaults

The model is INDEPENDENT of UI:
- No Qt imports
- No rendering logic
- No drag state (that's InteractionController)

Usage:
    model = TransformModel()
    model.rotate('right')
    model.scale('up')
    model.set_position(30, -12)
    snapshot = model.snapshot()
"""

import logging
from typing import Callable, List

from models.overlay import OverlayAsset
from models.transform import Transform, Vec2
from constants import (
    ROTATION_STEP, SCALE_MIN, SCALE_MAX,
    SCALE_UP_FACTOR, SCALE_DOWN_FACTOR,
)


def clamp_scale(value: float) -> float:
    return max(SCALE_MIN, min(SCALE_MAX, value))


class TransformModel:
    """Overlay placement state with validated mutators"""

    def __init__(self):
        self._logger = logging.getLogger('TransformModel')
        self._transform = Transform()
        # rotation = base + steps * ROTATION_STEP, so opposite steps cancel exactly
        self._rotation_base = self._transform.rotation
        self._rotation_steps = 0
        self._overlay = OverlayAsset.DEFAULT_RIGHT
        self._seasonal = False
        self._listeners: List[Callable[[], None]] = []

    # ========================================
    # Listeners
    # ========================================

    def add_listener(self, callback: Callable[[], None]):
        """Register a callback invoked after every mutation"""
        if callback not in self._listeners:
            self._listeners.append(callback)

    def remove_listener(self, callback: Callable[[], None]):
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify(self):
        for callback in list(self._listeners):
            callback()

    # ========================================
    # Query API
    # ========================================

    @property
    def transform(self) -> Transform:
        """Live transform (read-only by convention; use snapshot() to keep a copy)"""
        return self._transform

    @property
    def position(self) -> Vec2:
        return Vec2(self._transform.position.x, self._transform.position.y)

    @property
    def rotation(self) -> float:
        return self._transform.rotation

    @property
    def scale_factor(self) -> float:
        return self._transform.scale

    @property
    def flip_x(self) -> bool:
        return self._transform.flip_x

    @property
    def overlay(self) -> OverlayAsset:
        return self._overlay

    @property
    def seasonal_mode(self) -> bool:
        return self._seasonal

    @property
    def can_flip(self) -> bool:
        return not self._seasonal

    def snapshot(self) -> Transform:
        """Independent copy of the current transform"""
        return self._transform.copy()

    # ========================================
    # Transform Operations
    # ========================================

    def rotate(self, direction: str):
        """Rotate by one step

        Args:
            direction: 'left' (-15 degrees) or 'right' (+15 degrees)

        Raises:
            ValueError: If direction is not 'left' or 'right'
        """
        if direction == 'left':
            step = -1
        elif direction == 'right':
            step = 1
        else:
            raise ValueError(f"Unknown rotate direction '{direction}'")

        self._rotation_steps += step
        self._transform.rotation = self._rotation_base + self._rotation_steps * ROTATION_STEP
        self._logger.debug(f"Rotate {direction}: {self._transform.rotation}")
        self._notify()

    def scale(self, direction: str):
        """Scale by one multiplicative step, clamped to [SCALE_MIN, SCALE_MAX]

        Args:
            direction: 'up' (x1.1) or 'down' (x0.9)

        Raises:
            ValueError: If direction is not 'up' or 'down'
        """
        if direction == 'up':
            factor = SCALE_UP_FACTOR
        elif direction == 'down':
            factor = SCALE_DOWN_FACTOR
        else:
            raise ValueError(f"Unknown scale direction '{direction}'")

        self._transform.scale = clamp_scale(self._transform.scale * factor)
        self._logger.debug(f"Scale {direction}: {self._transform.scale}")
        self._notify()

    def set_position(self, x: float, y: float):
        """Set the display-space offset from the container center"""
        self._transform.position = Vec2(x, y)
        self._notify()

    def nudge(self, dx: float, dy: float):
        """Move relative to the current position (arrow keys)"""
        pos = self._transform.position
        self.set_position(pos.x + dx, pos.y + dy)

    def toggle_flip(self):
        """Mirror horizontally. Ignored while seasonal mode is active."""
        if self._seasonal:
            self._logger.debug("Flip ignored in seasonal mode")
            return
        self._transform.flip_x = not self._transform.flip_x
        self._logger.debug(f"Flip: {self._transform.flip_x}")
        self._notify()

    def set_transform(self, transform: Transform):
        """Replace the whole placement (headless rendering)

        Scale is clamped and the flip is dropped while seasonal mode is
        active, so the model invariants hold for any input.
        """
        self._transform = Transform(
            position=Vec2(transform.position.x, transform.position.y),
            rotation=transform.rotation,
            scale=clamp_scale(transform.scale),
            flip_x=transform.flip_x and not self._seasonal,
        )
        self._rotation_base = self._transform.rotation
        self._rotation_steps = 0
        self._logger.debug(f"Set transform: {self._transform}")
        self._notify()

    def reset(self):
        """Restore default placement. Overlay selection and seasonal mode are kept."""
        self._transform = Transform()
        self._rotation_base = self._transform.rotation
        self._rotation_steps = 0
        self._logger.debug("Reset transform")
        self._notify()

    # ========================================
    # Overlay Selection
    # ========================================

    def set_seasonal_mode(self, enabled: bool):
        """Enter or leave seasonal mode

        Entering forces the seasonal overlay and clears the flip.
        Leaving restores the default right-facing overlay.
        """
        enabled = bool(enabled)
        self._seasonal = enabled
        if enabled:
            self._overlay = OverlayAsset.SEASONAL
            self._transform.flip_x = False
        else:
            self._overlay = OverlayAsset.DEFAULT_RIGHT
        self._logger.debug(f"Seasonal mode: {enabled}")
        self._notify()

    def select_overlay(self, asset: OverlayAsset):
        """Activate an overlay variant

        Selecting the seasonal variant is the same as enabling seasonal mode.
        Selecting a default variant leaves seasonal mode.
        """
        if asset.is_seasonal:
            self.set_seasonal_mode(True)
            return
        self._seasonal = False
        self._overlay = asset
        self._logger.debug(f"Overlay: {asset.name}")
        self._notify()
