"""
Export compositor tests.

Covers the letterbox geometry, the native-space placement, pixel placement
in the flattened raster, and the asynchronous job lifecycle (snapshot
isolation, failure reporting). Asynchronous tests use qtbot to spin the
event loop until the job signals.
"""
import numpy as np
import pytest
from PIL import Image

from conftest import HAT_COLOR, HAT_LEFT_COLOR, PHOTO_COLOR, HAT_SIZE, is_color
from constants import EXPORT_FILE_NAME, MSG_SAVE_FAILED, MSG_UPLOAD_FIRST
from models.notification import Severity
from models.transform import Transform, Vec2
from services import export_compositor
from services.export_compositor import (
    letterbox_size, display_to_native_ratio, plan_export, composite,
    ExportCompositor,
)
from services.preview_renderer import preview_transform
from utils.errors import AssetLoadFailure, MissingInput, RenderContextUnavailable


# ══════════════════════════════════════════════════════════════════════════
# Letterbox Geometry
# ══════════════════════════════════════════════════════════════════════════

class TestLetterbox:

    def test_matching_aspect(self):
        assert letterbox_size((1600, 1200), (800, 600)) == (800, 600)
        assert display_to_native_ratio((1600, 1200), (800, 600)) == (2.0, 2.0)

    def test_width_bound(self):
        assert letterbox_size((1000, 500), (800, 800)) == (800, 400)
        assert display_to_native_ratio((1000, 500), (800, 800)) == (1.25, 1.25)

    def test_height_bound(self):
        # Portrait photo in a landscape container
        displayed_w, displayed_h = letterbox_size((600, 1200), (800, 600))
        assert displayed_h == 600
        assert displayed_w == pytest.approx(300)

    def test_ratios_computed_per_axis(self):
        ratio_x, ratio_y = display_to_native_ratio((1001, 333), (640, 600))
        displayed_w, displayed_h = letterbox_size((1001, 333), (640, 600))
        assert ratio_x == 1001 / displayed_w
        assert ratio_y == 333 / displayed_h


# ══════════════════════════════════════════════════════════════════════════
# Export Plan
# ══════════════════════════════════════════════════════════════════════════

class TestExportPlan:

    def test_default_placement_centered(self):
        plan = plan_export((1600, 1200), HAT_SIZE, Transform(), (800, 600))
        assert plan.canvas_size == (1600, 1200)
        assert plan.ratio == (2.0, 2.0)
        # 100 display px wide, converted to native
        assert plan.draw_size == (200.0, 100.0)
        np.testing.assert_allclose(plan.placement[:2, 2], [800.0, 600.0])

    def test_position_scaled_by_ratio(self):
        transform = Transform(position=Vec2(10, -20))
        plan = plan_export((1600, 1200), HAT_SIZE, transform, (800, 600))
        np.testing.assert_allclose(plan.placement[:2, 2], [820.0, 560.0])

    def test_matches_preview_at_unit_ratio(self):
        transform = Transform(position=Vec2(37, -12), rotation=-45, scale=1.7, flip_x=True)
        plan = plan_export((800, 600), HAT_SIZE, transform, (800, 600))
        preview = preview_transform(transform, HAT_SIZE, (800, 600))

        assert plan.ratio == (1.0, 1.0)
        np.testing.assert_allclose(plan.matrix, preview.matrix)

    def test_height_follows_overlay_aspect(self):
        plan = plan_export((1000, 500), (300, 450), Transform(), (800, 800))
        assert plan.draw_size == (125.0, pytest.approx(187.5))


# ══════════════════════════════════════════════════════════════════════════
# Raster Compositing
# ══════════════════════════════════════════════════════════════════════════

class TestComposite:

    @pytest.fixture
    def base(self):
        return Image.new('RGBA', (800, 600), PHOTO_COLOR)

    @pytest.fixture
    def hat(self):
        return Image.new('RGBA', HAT_SIZE, HAT_COLOR)

    def render(self, base, hat, transform, display=(400, 300)):
        plan = plan_export(base.size, hat.size, transform, display)
        return composite(base, hat, plan)

    def test_output_at_native_size(self, base, hat):
        result = self.render(base, hat, Transform())
        assert result.size == (800, 600)
        assert result.mode == 'RGBA'

    def test_default_hat_centered(self, base, hat):
        # Ratio 2: hat is 200x100 native pixels around (400, 300)
        result = self.render(base, hat, Transform())
        assert is_color(result.getpixel((400, 300)), HAT_COLOR)
        assert is_color(result.getpixel((310, 300)), HAT_COLOR)
        assert is_color(result.getpixel((290, 300)), PHOTO_COLOR)
        assert is_color(result.getpixel((400, 255)), HAT_COLOR)
        assert is_color(result.getpixel((400, 245)), PHOTO_COLOR)

    def test_position_offset(self, base, hat):
        result = self.render(base, hat, Transform(position=Vec2(10, -20)))
        assert is_color(result.getpixel((420, 260)), HAT_COLOR)
        assert is_color(result.getpixel((330, 260)), HAT_COLOR)
        assert is_color(result.getpixel((310, 260)), PHOTO_COLOR)

    def test_rotation_quarter_turn(self, base, hat):
        result = self.render(base, hat, Transform(rotation=90))
        assert is_color(result.getpixel((400, 210)), HAT_COLOR)
        assert is_color(result.getpixel((310, 300)), PHOTO_COLOR)

    def test_uniform_scale(self, base, hat):
        result = self.render(base, hat, Transform(scale=2.0))
        assert is_color(result.getpixel((210, 300)), HAT_COLOR)
        assert is_color(result.getpixel((400, 210)), HAT_COLOR)

    def test_flip_mirrors(self, base):
        hat = Image.new('RGBA', HAT_SIZE, HAT_LEFT_COLOR)
        hat.paste(Image.new('RGBA', (50, 50), HAT_COLOR), (0, 0))

        plain = self.render(base, hat, Transform())
        flipped = self.render(base, hat, Transform(flip_x=True))

        assert is_color(plain.getpixel((350, 300)), HAT_COLOR)
        assert is_color(flipped.getpixel((350, 300)), HAT_LEFT_COLOR)
        assert is_color(flipped.getpixel((450, 300)), HAT_COLOR)

    def test_raster_allocation_failure(self, base, hat, monkeypatch):
        def no_memory(*args, **kwargs):
            raise MemoryError("out of memory")
        monkeypatch.setattr(export_compositor.Image, 'new', no_memory)

        plan = plan_export(base.size, hat.size, Transform(), (400, 300))
        with pytest.raises(RenderContextUnavailable) as exc_info:
            composite(base, hat, plan)
        assert exc_info.value.user_message == MSG_SAVE_FAILED

    def test_photo_never_resampled(self, base, hat):
        plan = plan_export((1600, 1200), hat.size, Transform(), (400, 300))
        with pytest.raises(AssetLoadFailure) as exc_info:
            composite(base, hat, plan)
        assert exc_info.value.user_message == MSG_SAVE_FAILED


# ══════════════════════════════════════════════════════════════════════════
# Synchronous Export
# ══════════════════════════════════════════════════════════════════════════

class TestExportSync:

    def test_result(self, loaded_session):
        result = loaded_session.export_now((400, 300))
        assert result.file_name == EXPORT_FILE_NAME
        assert result.size == (800, 600)
        assert result.encode().startswith(b'\x89PNG')

    def test_save_writes_png(self, loaded_session, tmp_path):
        path = loaded_session.export_now((400, 300)).save(tmp_path / 'out.png')
        with Image.open(path) as saved:
            assert saved.size == (800, 600)
            assert is_color(saved.getpixel((400, 300)), HAT_COLOR)

    def test_missing_overlay(self, loaded_session, tmp_path):
        loaded_session.overlay_dir = str(tmp_path / 'nowhere')
        with pytest.raises(AssetLoadFailure) as exc_info:
            loaded_session.export_now((400, 300))
        assert exc_info.value.user_message == MSG_SAVE_FAILED

    @pytest.mark.parametrize("display", [None, (0, 300), (400, -1)])
    def test_missing_container_metrics(self, loaded_session, display):
        with pytest.raises(MissingInput):
            loaded_session.export_now(display)

    def test_request_snapshots_transform(self, loaded_session):
        compositor = ExportCompositor()
        request = compositor.create_request(
            loaded_session.photo, loaded_session.overlay_path,
            loaded_session.model.transform, (400, 300),
        )
        loaded_session.model.set_position(99, 99)
        assert request.transform.position == Vec2(0, 0)


# ══════════════════════════════════════════════════════════════════════════
# Asynchronous Export Jobs
# ══════════════════════════════════════════════════════════════════════════

class TestExportJob:

    def test_no_photo_reports_missing_input_without_decoding(self, session, notifications, monkeypatch):
        started = []
        monkeypatch.setattr(export_compositor, 'DecodeWorker',
                            lambda *args, **kwargs: started.append(args))

        job = session.start_export((400, 300))

        assert job is None
        assert started == []
        assert session.compositor.active_jobs == []
        assert notifications[-1].message == MSG_UPLOAD_FIRST
        assert notifications[-1].severity is Severity.ERROR

    def test_finishes_with_result(self, qtbot, loaded_session):
        results = []
        job = loaded_session.start_export((400, 300), on_result=results.append)

        with qtbot.waitSignal(job.finished, timeout=5000):
            pass

        assert job.done
        assert len(results) == 1
        assert results[0].size == (800, 600)
        assert loaded_session.compositor.active_jobs == []

    def test_drag_during_decode_does_not_affect_export(self, qtbot, loaded_session):
        job = loaded_session.start_export((400, 300))

        # Drag far away before the decode completes
        loaded_session.interaction.pointer_down(0, 0)
        loaded_session.interaction.pointer_move(150, 120)

        with qtbot.waitSignal(job.finished, timeout=5000) as blocker:
            pass

        result = blocker.args[0]
        assert loaded_session.model.position == Vec2(150, 120)
        assert is_color(result.image.getpixel((400, 300)), HAT_COLOR)
        assert is_color(result.image.getpixel((700, 540)), PHOTO_COLOR)

    def test_decode_failure_reported(self, qtbot, loaded_session, notifications, tmp_path):
        loaded_session.overlay_dir = str(tmp_path / 'nowhere')
        job = loaded_session.start_export((400, 300))

        with qtbot.waitSignal(job.failed, timeout=5000) as blocker:
            pass

        assert isinstance(blocker.args[0], AssetLoadFailure)
        assert notifications[-1].message == MSG_SAVE_FAILED
        assert notifications[-1].severity is Severity.ERROR
        # Editing state is untouched and a retry is possible
        assert loaded_session.has_photo
        assert loaded_session.model.transform.is_default()

    def test_overlapping_exports_each_finish(self, qtbot, loaded_session):
        first = loaded_session.start_export((400, 300))
        loaded_session.model.set_position(50, 0)
        second = loaded_session.start_export((400, 300))

        with qtbot.waitSignals([first.finished, second.finished], timeout=5000):
            pass

        assert first.request.transform.position == Vec2(0, 0)
        assert second.request.transform.position == Vec2(50, 0)
