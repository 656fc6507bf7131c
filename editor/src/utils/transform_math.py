"""
Hat Overlay Editor - Transform Math Utilities

Affine composition shared by the live preview and the export compositor.

The overlay placement is always composed in the same order:
    origin -> translate(position * ratio) -> rotate -> flip -> uniform scale

The preview uses ratio (1, 1) and the container center as origin. The export
uses the display->native pixel ratios and the photo center. Keeping one
routine for both guarantees the exported hat lands where the preview showed it.

Matrices are 3x3 numpy arrays acting on column vectors (x, y, 1).
"""

import math

import numpy as np

from constants import OVERLAY_NOMINAL_WIDTH


def translation(tx, ty):
    return np.array([
        [1.0, 0.0, tx],
        [0.0, 1.0, ty],
        [0.0, 0.0, 1.0],
    ])


def rotation(degrees):
    theta = math.radians(degrees)
    c, s = math.cos(theta), math.sin(theta)
    return np.array([
        [c, -s, 0.0],
        [s, c, 0.0],
        [0.0, 0.0, 1.0],
    ])


def scaling(sx, sy):
    return np.array([
        [sx, 0.0, 0.0],
        [0.0, sy, 0.0],
        [0.0, 0.0, 1.0],
    ])


def placement_matrix(transform, origin, ratio=(1.0, 1.0)):
    """Compose the overlay placement affine

    Y axis points down (screen/raster convention), so a positive rotation
    turns clockwise on screen.

    Args:
        transform: Transform (position, rotation, scale, flip_x)
        origin: (x, y) where position (0, 0) maps to
        ratio: (scale_x, scale_y) display->native pixel ratio applied to the
            position offset only

    Returns:
        3x3 numpy array mapping overlay-centered coordinates to target pixels
    """
    ratio_x, ratio_y = ratio
    origin_x, origin_y = origin
    flip = -1.0 if transform.flip_x else 1.0

    return (
        translation(origin_x + transform.position.x * ratio_x,
                    origin_y + transform.position.y * ratio_y)
        @ rotation(transform.rotation)
        @ scaling(flip, 1.0)
        @ scaling(transform.scale, transform.scale)
    )


def overlay_draw_size(intrinsic_size, ratio_x=1.0, nominal_width=OVERLAY_NOMINAL_WIDTH):
    """Overlay width/height before the placement transform

    Width is the nominal display width converted by ratio_x; height follows the
    overlay's own aspect ratio, never stretched independently.

    Args:
        intrinsic_size: (width, height) of the overlay image file
        ratio_x: Horizontal display->native ratio (1.0 for the preview)

    Returns:
        (width, height) in target pixels
    """
    intrinsic_w, intrinsic_h = intrinsic_size
    if intrinsic_w <= 0 or intrinsic_h <= 0:
        raise ValueError(f"Overlay has invalid size {intrinsic_size}")
    width = nominal_width * ratio_x
    height = width * intrinsic_h / intrinsic_w
    return width, height


def overlay_image_matrix(placement, intrinsic_size, draw_size):
    """Map overlay image pixels (0..iw, 0..ih) to target pixels

    Centers the drawn rectangle on the placement origin and resamples the
    intrinsic image to the draw size in the same affine.
    """
    intrinsic_w, intrinsic_h = intrinsic_size
    draw_w, draw_h = draw_size
    return (
        placement
        @ translation(-draw_w / 2.0, -draw_h / 2.0)
        @ scaling(draw_w / intrinsic_w, draw_h / intrinsic_h)
    )


def apply(matrix, x, y):
    """Transform a single point"""
    px, py, _ = matrix @ np.array([x, y, 1.0])
    return float(px), float(py)


def pil_affine_coefficients(matrix):
    """Coefficients for PIL's Image.transform(AFFINE)

    PIL samples the source for every output pixel, so it expects the
    inverse mapping (output -> input) as a flat 6-tuple.
    """
    inverse = np.linalg.inv(matrix)
    return tuple(float(v) for v in inverse[:2, :].flatten())
