"""
Shared fixtures for Hat Overlay Editor tests.

Provides a fresh model and session, generated photo/overlay PNGs and a
capture of every transient notification.
"""
import sys
import os
import io
import pytest

# Run widgets without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Ensure editor/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'editor', 'src'))

from PIL import Image


# ── Sample colors ───────────────────────────────────────────────────────

PHOTO_COLOR = (0, 0, 255, 255)       # solid blue photo
HAT_COLOR = (255, 0, 0, 255)         # solid red hat
HAT_LEFT_COLOR = (0, 255, 0, 255)    # left variant is green
SEASONAL_COLOR = (255, 255, 255, 255)

HAT_SIZE = (100, 50)


def make_png(size, color=PHOTO_COLOR, mode='RGBA', fmt='PNG', **save_kwargs):
    """Encode a solid-color image and return the bytes"""
    image = Image.new(mode, size, color if mode == 'RGBA' else color[:3])
    buffer = io.BytesIO()
    image.save(buffer, fmt, **save_kwargs)
    return buffer.getvalue()


def is_color(pixel, color, tolerance=16):
    """Compare RGB channels with a little slack for resampling"""
    return all(abs(a - b) <= tolerance for a, b in zip(pixel[:3], color[:3]))


@pytest.fixture(autouse=True)
def _detach_notifier():
    """No test leaks its notifier into the next one"""
    from utils.logger import set_notifier
    set_notifier(None)
    yield
    set_notifier(None)


@pytest.fixture
def notifications():
    """List collecting every Notification reported through utils.logger"""
    from models.notification import Notification, Severity
    from utils.logger import set_notifier

    captured = []
    set_notifier(lambda message, severity: captured.append(Notification(message, Severity(severity))))
    return captured


@pytest.fixture
def model():
    """Fresh default TransformModel"""
    from models.editor_model import TransformModel
    return TransformModel()


@pytest.fixture
def overlay_dir(tmp_path):
    """Directory with the three hat variants as small solid PNGs"""
    directory = tmp_path / 'overlays'
    directory.mkdir()
    Image.new('RGBA', HAT_SIZE, HAT_COLOR).save(directory / 'right-hat.png')
    Image.new('RGBA', HAT_SIZE, HAT_LEFT_COLOR).save(directory / 'left-hat.png')
    Image.new('RGBA', HAT_SIZE, SEASONAL_COLOR).save(directory / 'christmas-hat.png')
    return directory


@pytest.fixture
def split_overlay_dir(tmp_path):
    """Right hat is red on its left half and green on its right half"""
    directory = tmp_path / 'split_overlays'
    directory.mkdir()
    image = Image.new('RGBA', HAT_SIZE, HAT_LEFT_COLOR)
    image.paste(Image.new('RGBA', (HAT_SIZE[0] // 2, HAT_SIZE[1]), HAT_COLOR), (0, 0))
    image.save(directory / 'right-hat.png')
    return directory


@pytest.fixture
def photo_bytes():
    """800x600 blue PNG"""
    return make_png((800, 600))


@pytest.fixture
def photo_file(tmp_path, photo_bytes):
    path = tmp_path / 'portrait.png'
    path.write_bytes(photo_bytes)
    return path


@pytest.fixture
def session(overlay_dir):
    """EditorSession reading hats from the generated overlay directory"""
    from services.editor_session import EditorSession
    return EditorSession(overlay_dir=str(overlay_dir))


@pytest.fixture
def loaded_session(session, photo_bytes):
    """Session with the 800x600 photo already uploaded"""
    assert session.upload(photo_bytes, 'image/png', 'portrait.png')
    return session
