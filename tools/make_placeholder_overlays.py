"""
Draw placeholder hat overlays so a fresh checkout can run the editor.

Writes three transparent PNGs into assets/overlays (or the given directory):

    right-hat.png      party hat leaning right
    left-hat.png       the same hat mirrored
    christmas-hat.png  red cone, white brim and pompom

Shapes are drawn at 4x and downsampled for smooth edges. Replace the files
with real artwork of any size; the editor only relies on the aspect ratio.
"""

from pathlib import Path
from typing import Tuple

from PIL import Image, ImageDraw, ImageOps

HAT_SIZE = (400, 320)
SUPERSAMPLE = 4

PARTY_COLORS = {
    'cone': (255, 107, 43, 255),
    'stripe': (255, 209, 102, 255),
    'brim': (109, 40, 217, 255),
    'pompom': (255, 255, 255, 255),
}

CHRISTMAS_COLORS = {
    'cone': (220, 38, 38, 255),
    'brim': (250, 250, 250, 255),
    'pompom': (250, 250, 250, 255),
}


def _canvas() -> Tuple[Image.Image, ImageDraw.ImageDraw, int, int]:
    width, height = HAT_SIZE[0] * SUPERSAMPLE, HAT_SIZE[1] * SUPERSAMPLE
    image = Image.new('RGBA', (width, height), (0, 0, 0, 0))
    return image, ImageDraw.Draw(image), width, height


def _finish(image: Image.Image) -> Image.Image:
    return image.resize(HAT_SIZE, Image.Resampling.LANCZOS)


def draw_party_hat() -> Image.Image:
    """Cone leaning to the right with diagonal stripes"""
    image, draw, w, h = _canvas()
    base_y = int(h * 0.82)
    tip = (int(w * 0.72), int(h * 0.10))
    left, right = (int(w * 0.16), base_y), (int(w * 0.84), base_y)

    draw.polygon([left, tip, right], fill=PARTY_COLORS['cone'])

    # Stripes: bands between interpolated points on both cone edges
    for t0, t1 in ((0.18, 0.30), (0.45, 0.57), (0.72, 0.80)):
        def edge(a, t):
            return (a[0] + (tip[0] - a[0]) * t, a[1] + (tip[1] - a[1]) * t)
        draw.polygon([edge(left, t0), edge(left, t1), edge(right, t1), edge(right, t0)],
                     fill=PARTY_COLORS['stripe'])

    brim_h = int(h * 0.10)
    draw.rounded_rectangle([int(w * 0.10), base_y - brim_h // 2, int(w * 0.90), base_y + brim_h // 2],
                           radius=brim_h // 2, fill=PARTY_COLORS['brim'])

    r = int(w * 0.05)
    draw.ellipse([tip[0] - r, tip[1] - r, tip[0] + r, tip[1] + r], fill=PARTY_COLORS['pompom'])
    return _finish(image)


def draw_christmas_hat() -> Image.Image:
    """Floppy red cone with a white brim and pompom"""
    image, draw, w, h = _canvas()
    base_y = int(h * 0.78)
    tip = (int(w * 0.86), int(h * 0.30))

    draw.polygon([(int(w * 0.14), base_y), (int(w * 0.50), int(h * 0.08)), tip,
                  (int(w * 0.60), int(h * 0.30)), (int(w * 0.86), base_y)],
                 fill=CHRISTMAS_COLORS['cone'])

    brim_h = int(h * 0.16)
    draw.rounded_rectangle([int(w * 0.08), base_y - brim_h // 2, int(w * 0.92), base_y + brim_h // 2],
                           radius=brim_h // 2, fill=CHRISTMAS_COLORS['brim'])

    r = int(w * 0.065)
    draw.ellipse([tip[0] - r, tip[1] - r, tip[0] + r, tip[1] + r], fill=CHRISTMAS_COLORS['pompom'])
    return _finish(image)


def make_overlays(output_dir: Path):
    output_dir.mkdir(parents=True, exist_ok=True)
    right = draw_party_hat()
    hats = {
        'right-hat.png': right,
        'left-hat.png': ImageOps.mirror(right),
        'christmas-hat.png': draw_christmas_hat(),
    }
    for name, image in hats.items():
        path = output_dir / name
        image.save(path, 'PNG')
        print(f"Created: {path} {image.size}")


if __name__ == '__main__':
    import argparse

    default_dir = Path(__file__).resolve().parent.parent / 'assets' / 'overlays'
    parser = argparse.ArgumentParser(description='Draw placeholder hat overlays')
    parser.add_argument('output', type=Path, nargs='?', default=default_dir,
                        help=f'Output directory (default: {default_dir})')
    args = parser.parse_args()

    make_overlays(args.output)
