"""
Hat Overlay Editor - Preview Renderer

Maps the model transform to a display-space visual transform for the live
preview, plus the contain-fit rectangle the photo is drawn into.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from services.export_compositor import letterbox_size
from utils import transform_math


@dataclass(frozen=True)
class PreviewTransform:
    """Display-space overlay placement

    Attributes:
        matrix: 3x3 affine mapping overlay image pixels to container pixels
        draw_size: Overlay (width, height) in display pixels before scaling
        intrinsic_size: Overlay image (width, height)
    """
    matrix: np.ndarray
    draw_size: Tuple[float, float]
    intrinsic_size: Tuple[int, int]

    def to_qtransform(self):
        """Convert to a QTransform for QPainter.setTransform()"""
        from PyQt5.QtGui import QTransform
        m = self.matrix
        # QTransform uses row vectors: (m11, m12, m21, m22, dx, dy)
        return QTransform(m[0, 0], m[1, 0], m[0, 1], m[1, 1], m[0, 2], m[1, 2])

    def contains(self, x, y):
        """Hit test a container point against the transformed overlay rectangle"""
        u, v = transform_math.apply(np.linalg.inv(self.matrix), x, y)
        intrinsic_w, intrinsic_h = self.intrinsic_size
        return 0.0 <= u <= intrinsic_w and 0.0 <= v <= intrinsic_h


def preview_transform(transform, overlay_size, container_size):
    """Build the preview placement

    Composition: center in the container, translate by position, rotate,
    then scale by (scale * flip, scale).

    Args:
        transform: Transform to display
        overlay_size: Overlay image (width, height)
        container_size: Preview container (width, height)

    Returns:
        PreviewTransform
    """
    container_w, container_h = container_size
    placement = transform_math.placement_matrix(
        transform, (container_w / 2.0, container_h / 2.0)
    )
    draw_size = transform_math.overlay_draw_size(overlay_size)
    matrix = transform_math.overlay_image_matrix(placement, overlay_size, draw_size)
    return PreviewTransform(matrix=matrix, draw_size=draw_size, intrinsic_size=tuple(overlay_size))


def photo_display_rect(native_size, container_size):
    """Contain-fit rectangle of the photo inside the container

    Returns:
        (x, y, width, height) in container pixels, centered
    """
    container_w, container_h = container_size
    displayed_w, displayed_h = letterbox_size(native_size, container_size)
    return (
        (container_w - displayed_w) / 2.0,
        (container_h - displayed_h) / 2.0,
        displayed_w,
        displayed_h,
    )
