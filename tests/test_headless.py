"""
Headless CLI tests: argument parsing and end-to-end compositing to disk.
"""
import pytest
from PIL import Image

from conftest import HAT_COLOR, PHOTO_COLOR, SEASONAL_COLOR, is_color
import headless


# ══════════════════════════════════════════════════════════════════════════
# Argument Parsing
# ══════════════════════════════════════════════════════════════════════════

class TestArguments:

    def test_defaults(self):
        args = headless.build_parser().parse_args(['me.jpg'])
        assert args.output == 'you-are-a-partner-now.png'
        assert args.overlay == 'right'
        assert args.container == (800.0, 600.0)
        assert (args.x, args.y, args.rotation, args.scale, args.flip) == (0.0, 0.0, 0.0, 1.0, False)

    def test_container_parsing(self):
        args = headless.build_parser().parse_args(['me.jpg', '--container', '640X480'])
        assert args.container == (640.0, 480.0)

    @pytest.mark.parametrize("value", ['800', '0x600', 'wide'])
    def test_bad_container(self, value):
        with pytest.raises(SystemExit):
            headless.build_parser().parse_args(['me.jpg', '--container', value])


# ══════════════════════════════════════════════════════════════════════════
# End To End
# ══════════════════════════════════════════════════════════════════════════

class TestHeadlessExport:

    def test_default_export(self, photo_file, overlay_dir, tmp_path):
        output = tmp_path / 'out.png'
        code = headless.main([
            str(photo_file), '-o', str(output), '--overlay-dir', str(overlay_dir),
            '--container', '400x300',
        ])
        assert code == 0
        with Image.open(output) as result:
            assert result.size == (800, 600)
            assert is_color(result.getpixel((400, 300)), HAT_COLOR)

    def test_position_and_seasonal(self, photo_file, overlay_dir, tmp_path, capsys):
        output = tmp_path / 'festive.png'
        code = headless.main([
            str(photo_file), '-o', str(output), '--overlay-dir', str(overlay_dir),
            '--overlay', 'seasonal', '--flip', '--x', '100', '--y', '-50',
            '--container', '400x300',
        ])
        assert code == 0
        assert '--flip is ignored' in capsys.readouterr().out
        with Image.open(output) as result:
            # Ratio 2: center moves by (200, -100)
            assert is_color(result.getpixel((600, 200)), SEASONAL_COLOR)
            assert is_color(result.getpixel((400, 300)), PHOTO_COLOR)

    def test_missing_photo(self, tmp_path):
        assert headless.main([str(tmp_path / 'nope.jpg')]) == 1

    def test_not_an_image(self, tmp_path):
        path = tmp_path / 'notes.txt'
        path.write_text('hello')
        assert headless.main([str(path)]) == 1

    def test_missing_overlay(self, photo_file, tmp_path, capsys):
        code = headless.main([
            str(photo_file), '-o', str(tmp_path / 'out.png'), '--overlay-dir', str(tmp_path / 'none'),
        ])
        assert code == 1
        assert 'Error saving image' in capsys.readouterr().out
