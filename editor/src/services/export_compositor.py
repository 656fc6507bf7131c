"""
Hat Overlay Editor - Export Compositor

Converts the display-space overlay placement into native-space drawing
instructions and flattens photo + overlay into one PNG at the photo's
native resolution.

Pipeline:
1. Validate inputs (photo loaded, container metrics known) before any
   asynchronous work
2. Snapshot the transform so later drags cannot affect this export
3. Decode photo and overlay (DecodeWorker thread, or inline for run_sync)
4. Allocate a W x H raster and copy the photo into it
5. Contain-fit the photo into the preview container to get the displayed
   size, then the independent display->native ratios scale_x / scale_y
6. Compose origin(W/2, H/2) -> translate(position * ratio) -> rotate ->
   flip -> uniform scale, and draw the overlay (100 display px wide,
   converted by scale_x) centered on that origin
7. Encode as PNG under the fixed export file name
"""

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

import numpy as np
from PyQt5.QtCore import QObject, pyqtSignal, pyqtSlot
from PIL import Image

from constants import EXPORT_FILE_NAME, EXPORT_FORMAT
from models.photo import NativeImage
from models.transform import Transform
from services.asset_decoder import DecodeWorker, decode_photo, decode_overlay
from utils import transform_math
from utils.errors import EditorError, MissingInput, RenderContextUnavailable, AssetLoadFailure

logger = logging.getLogger(__name__)


# ========================================
# Geometry
# ========================================

def letterbox_size(native_size, display_size):
    """Size of the photo when contain-fit into the preview container

    Args:
        native_size: Photo (W, H)
        display_size: Container (width, height)

    Returns:
        (displayed_width, displayed_height)
    """
    native_w, native_h = native_size
    container_w, container_h = display_size
    container_aspect = container_w / container_h
    image_aspect = native_w / native_h

    if container_aspect > image_aspect:
        # Container relatively wider: height is bound
        displayed_h = container_h
        displayed_w = displayed_h * image_aspect
    else:
        displayed_w = container_w
        displayed_h = displayed_w / image_aspect
    return displayed_w, displayed_h


def display_to_native_ratio(native_size, display_size):
    """Per-axis display->native pixel ratio (scale_x, scale_y)

    Both axes are computed independently; contain-fit keeps them close but
    they are not assumed equal.
    """
    native_w, native_h = native_size
    displayed_w, displayed_h = letterbox_size(native_size, display_size)
    return native_w / displayed_w, native_h / displayed_h


@dataclass(frozen=True)
class ExportPlan:
    """Native-space drawing instructions for one export"""
    canvas_size: Tuple[int, int]
    displayed_size: Tuple[float, float]
    ratio: Tuple[float, float]
    draw_size: Tuple[float, float]
    placement: np.ndarray
    matrix: np.ndarray


def plan_export(native_size, overlay_size, transform, display_size):
    """Compute the native-space overlay placement

    Args:
        native_size: Photo (W, H)
        overlay_size: Overlay image (width, height)
        transform: Transform snapshot in display space
        display_size: Preview container (width, height)

    Returns:
        ExportPlan
    """
    native_w, native_h = native_size
    displayed = letterbox_size(native_size, display_size)
    ratio = (native_w / displayed[0], native_h / displayed[1])

    placement = transform_math.placement_matrix(
        transform, (native_w / 2.0, native_h / 2.0), ratio
    )
    draw_size = transform_math.overlay_draw_size(overlay_size, ratio[0])
    matrix = transform_math.overlay_image_matrix(placement, overlay_size, draw_size)

    return ExportPlan(
        canvas_size=(int(native_w), int(native_h)),
        displayed_size=displayed,
        ratio=ratio,
        draw_size=draw_size,
        placement=placement,
        matrix=matrix,
    )


# ========================================
# Raster
# ========================================

def composite(base, overlay, plan):
    """Flatten photo + transformed overlay into one RGBA raster

    The photo is copied pixel for pixel, never resampled.

    Raises:
        RenderContextUnavailable: If the output raster cannot be allocated
        AssetLoadFailure: If the decoded photo does not match the planned size
    """
    if base.size != plan.canvas_size:
        raise AssetLoadFailure(f"Decoded photo is {base.size}, expected {plan.canvas_size}")

    try:
        canvas = Image.new('RGBA', plan.canvas_size, (0, 0, 0, 0))
        layer = overlay.transform(
            plan.canvas_size,
            Image.Transform.AFFINE,
            data=transform_math.pil_affine_coefficients(plan.matrix),
            resample=Image.Resampling.BICUBIC,
        )
    except (ValueError, MemoryError) as e:
        raise RenderContextUnavailable(f"Cannot allocate {plan.canvas_size} raster: {e}") from e

    canvas.paste(base.convert('RGBA'), (0, 0))

    return Image.alpha_composite(canvas, layer)


def encode_png(image):
    buffer = io.BytesIO()
    image.save(buffer, EXPORT_FORMAT)
    return buffer.getvalue()


@dataclass
class ExportResult:
    """Flattened raster at the photo's native size"""
    image: Image.Image
    file_name: str = EXPORT_FILE_NAME

    @property
    def size(self):
        return self.image.size

    def encode(self):
        return encode_png(self.image)

    def save(self, path):
        path = Path(path)
        path.write_bytes(self.encode())
        logger.info("Export saved to %s", path)
        return path


@dataclass(frozen=True)
class ExportRequest:
    """Everything an export needs, captured when it is invoked"""
    photo: NativeImage
    overlay_path: Path
    transform: Transform
    display_size: Tuple[float, float]


def validate_export_inputs(photo, display_size):
    """Raise MissingInput when there is nothing to export

    Checked synchronously so no decode is ever started for an invalid export.
    """
    if photo is None:
        raise MissingInput("Export requested with no photo loaded")
    if display_size is None:
        raise MissingInput("Export requested before the preview was laid out")
    width, height = display_size
    if width <= 0 or height <= 0:
        raise MissingInput(f"Preview container has no size ({width}x{height})")


def render_export(request, base, overlay):
    """Synchronous compositing step once both assets are decoded"""
    plan = plan_export(request.photo.size, overlay.size, request.transform, request.display_size)
    logger.debug(
        "Export plan: canvas=%s ratio=(%.4f, %.4f) overlay=%.1fx%.1f",
        plan.canvas_size, plan.ratio[0], plan.ratio[1], plan.draw_size[0], plan.draw_size[1],
    )
    return ExportResult(image=composite(base, overlay, plan))


# ========================================
# Jobs
# ========================================

class ExportJob(QObject):
    """One export invocation.

    The request is a snapshot; the job decodes on a DecodeWorker thread and
    composites on the thread that owns the job (the GUI thread).
    """

    finished = pyqtSignal(object)  # ExportResult
    failed = pyqtSignal(object)    # EditorError

    def __init__(self, request: ExportRequest, parent=None):
        super().__init__(parent)
        self.request = request
        self._worker: Optional[DecodeWorker] = None
        self.done = False

    def start(self):
        """Begin decoding in the background"""
        self._worker = DecodeWorker(self.request.photo, self.request.overlay_path)
        self._worker.decoded.connect(self._on_decoded)
        self._worker.failed.connect(self._on_failed)
        self._worker.start()

    def run_sync(self):
        """Decode and composite inline (headless use)

        Raises:
            EditorError: AssetLoadFailure or RenderContextUnavailable
        """
        base = decode_photo(self.request.photo)
        overlay = decode_overlay(self.request.overlay_path)
        return render_export(self.request, base, overlay)

    @pyqtSlot(object, object)
    def _on_decoded(self, base, overlay):
        self._join_worker()
        try:
            result = render_export(self.request, base, overlay)
        except EditorError as e:
            logger.warning("Export failed: %s", e)
            self._finish(self.failed, e)
            return
        self._finish(self.finished, result)

    @pyqtSlot(object)
    def _on_failed(self, error):
        self._join_worker()
        self._finish(self.failed, error)

    def _join_worker(self):
        if self._worker is not None:
            self._worker.wait()

    def _finish(self, signal, payload):
        self.done = True
        signal.emit(payload)


class ExportCompositor:
    """Creates export jobs from the live editor state.

    Concurrent exports are not serialized; each job produces its own result.
    """

    def __init__(self):
        self._jobs = []

    @property
    def active_jobs(self):
        return list(self._jobs)

    def create_request(self, photo, overlay_path, transform, display_size):
        """Validate and snapshot the export inputs

        Raises:
            MissingInput: If no photo is loaded or the container has no size
        """
        validate_export_inputs(photo, display_size)
        return ExportRequest(
            photo=photo,
            overlay_path=Path(overlay_path),
            transform=transform.copy(),
            display_size=(float(display_size[0]), float(display_size[1])),
        )

    def start_export(self, photo, overlay_path, transform, display_size):
        """Start an asynchronous export

        Returns:
            ExportJob (already started); connect to finished/failed

        Raises:
            MissingInput: Before any decode is started
        """
        request = self.create_request(photo, overlay_path, transform, display_size)
        job = ExportJob(request)
        self._jobs.append(job)
        job.finished.connect(lambda _result, j=job: self._release(j))
        job.failed.connect(lambda _error, j=job: self._release(j))
        job.start()
        return job

    def export_sync(self, photo, overlay_path, transform, display_size):
        """Validate, snapshot and composite without threads"""
        request = self.create_request(photo, overlay_path, transform, display_size)
        return ExportJob(request).run_sync()

    def _release(self, job):
        if job in self._jobs:
            self._jobs.remove(job)
