"""Headless Hat Renderer - CLI entry point.

Composites a hat overlay onto a photo at the photo's native resolution,
using the same placement math as the editor's Save Image, without opening
a window.

Position is given in preview pixels (offset from the preview container
center), exactly as the editor stores it, so --container must match the
preview size the placement was chosen in.

Usage:
    python editor/src/headless.py <photo> [-o OUTPUT] [--overlay right|left|seasonal]
                                  [--x X] [--y Y] [--rotation DEG] [--scale S]
                                  [--flip] [--container WxH] [-v]

Examples:
    python editor/src/headless.py me.jpg
    python editor/src/headless.py me.jpg --x 40 --y -180 --rotation 15 --scale 1.6
    python editor/src/headless.py me.jpg --overlay seasonal -o festive.png
"""

import sys
import os
import argparse
import logging

# Add editor/src to path so imports work
_src_dir = os.path.dirname(os.path.abspath(__file__))
if _src_dir not in sys.path:
    sys.path.insert(0, _src_dir)

from constants import EXPORT_FILE_NAME, PREVIEW_MAX_WIDTH, PREVIEW_HEIGHT


def _parse_container(value: str):
    """Parse a 'WIDTHxHEIGHT' container size for argparse."""
    try:
        width, height = (float(part) for part in value.lower().split('x'))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Container must look like 800x600, got '{value}'")
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f"Container size must be positive, got '{value}'")
    return width, height


def build_parser():
    from version import get_version

    parser = argparse.ArgumentParser(
        description='Place a hat on a photo and export it as PNG (headless).',
    )
    parser.add_argument(
        'photo',
        help='Path to the photo (any format Pillow can read).',
    )
    parser.add_argument(
        '-o', '--output',
        default=EXPORT_FILE_NAME,
        help=f'Output PNG path (default: ./{EXPORT_FILE_NAME}).',
    )
    parser.add_argument(
        '--overlay',
        default='right',
        choices=['right', 'left', 'seasonal'],
        help='Hat variant (seasonal disables --flip).',
    )
    parser.add_argument('--x', type=float, default=0.0, help='Horizontal offset in preview pixels.')
    parser.add_argument('--y', type=float, default=0.0, help='Vertical offset in preview pixels.')
    parser.add_argument('--rotation', type=float, default=0.0, help='Rotation in degrees (clockwise).')
    parser.add_argument('--scale', type=float, default=1.0, help='Uniform scale, clamped to [0.1, 7].')
    parser.add_argument('--flip', action='store_true', help='Mirror the hat horizontally.')
    parser.add_argument(
        '--container',
        type=_parse_container,
        default=(float(PREVIEW_MAX_WIDTH), float(PREVIEW_HEIGHT)),
        help=f'Preview container size the position refers to (default: {PREVIEW_MAX_WIDTH}x{PREVIEW_HEIGHT}).',
    )
    parser.add_argument(
        '--overlay-dir',
        default=None,
        help='Directory holding the hat PNGs (default: assets/overlays).',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging.',
    )
    parser.add_argument('--version', action='version', version=get_version())
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    # Logging
    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    from models.overlay import OverlayAsset
    from models.transform import Transform, Vec2
    from services.editor_session import EditorSession
    from utils.errors import EditorError

    photo_path = os.path.abspath(args.photo)
    output_path = os.path.abspath(args.output)

    if not os.path.isfile(photo_path):
        print(f"Error: Photo not found: {photo_path}")
        return 1

    session = EditorSession(overlay_dir=args.overlay_dir)

    # Rejections are reported on stderr by the session
    if not session.upload_file(photo_path):
        return 1

    session.model.select_overlay(OverlayAsset.from_name(args.overlay))
    session.model.set_transform(Transform(
        position=Vec2(args.x, args.y),
        rotation=args.rotation,
        scale=args.scale,
        flip_x=args.flip,
    ))
    if args.flip and not session.model.flip_x:
        print("Note: --flip is ignored for the seasonal hat.")

    print(f"Compositing {os.path.basename(photo_path)} "
          f"({session.photo.width}x{session.photo.height}) ...")
    try:
        result = session.export_now(args.container)
        result.save(output_path)
    except EditorError as e:
        print(f"Error: {e.user_message} ({e})")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1
    except OSError as e:
        print(f"Error: Cannot write {output_path}: {e}")
        return 1

    print(f"Done. Saved {result.size[0]}x{result.size[1]} image to {output_path}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
