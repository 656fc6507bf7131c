"""Transform data structures for overlay placement."""
from dataclasses import dataclass, field

from constants import (
    DEFAULT_POSITION_X, DEFAULT_POSITION_Y,
    DEFAULT_ROTATION, DEFAULT_SCALE, DEFAULT_FLIP_HORIZONTAL,
)


@dataclass
class Vec2:
    """2D vector for coordinate pairs.

    Used for any x/y coordinate pair across different spaces:
    - Display pixels (offset from the preview container center)
    - Native pixels (photo at its own resolution)
    - Pointer coordinates delivered by Qt
    """
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = vec2"""
        return iter((self.x, self.y))

    def __sub__(self, other):
        return Vec2(self.x - other.x, self.y - other.y)


@dataclass
class Transform:
    """Overlay placement state: position, rotation, uniform scale and flip.

    - position: display-space pixel offset from the container center
    - rotation: degrees, additive and never normalized
    - scale: uniform zoom factor, clamped by TransformModel to [0.1, 7]
    - flip_x: horizontal mirror, independent of the active overlay asset
    """
    position: Vec2 = field(default_factory=lambda: Vec2(DEFAULT_POSITION_X, DEFAULT_POSITION_Y))
    rotation: float = DEFAULT_ROTATION
    scale: float = DEFAULT_SCALE
    flip_x: bool = DEFAULT_FLIP_HORIZONTAL

    def copy(self):
        """Independent snapshot (position is not shared)"""
        return Transform(
            position=Vec2(self.position.x, self.position.y),
            rotation=self.rotation,
            scale=self.scale,
            flip_x=self.flip_x,
        )

    def is_default(self):
        return self == Transform()
