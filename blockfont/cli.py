"""Command line interface for block font rendering.

Usage:
    blockfont render "Hello" --font blocky --scale 2 --align center
    blockfont render "Hi" --color 31 --gradient '#0000FF' --gradient-direction left-right
    blockfont render "Hi" --shadow --shadow-x 2 --shadow-y 1 --shadow-style dark
    blockfont render "Hi" --no-color --preview hi.png --pixel-size 8
    blockfont -v --log-file render.log render "Hi"
    blockfont fonts
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from . import config
from .api.services import RenderService
from .colors import ANSI_COLOR_MAP, colorize
from .domain.options import (
    GradientDirection,
    GradientOptions,
    HorizontalAlignment,
    InvalidOptionError,
    RenderOptions,
    ShadowOptions,
    ShadowStyle,
)
from .loader import FontLoadError, list_fonts
from .log import configure_logging
from .utils.rendering import canvas_to_image

logger = logging.getLogger(__name__)


def _create_argument_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog='blockfont',
        description='Render text as half-block ANSI art'
    )
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--log-file', default=None,
                        help='Write a DEBUG log to this file')
    subparsers = parser.add_subparsers(dest='command', required=True)

    render = subparsers.add_parser('render', help='Render text')
    render.add_argument('text', help='Text to render (use \\n for line breaks)')
    render.add_argument('--font', '-f', default=config.DEFAULT_FONT,
                        help=f'Font name (default: {config.DEFAULT_FONT})')
    render.add_argument('--scale', '-s', type=float, default=config.DEFAULT_SCALE,
                        choices=config.SUPPORTED_SCALES,
                        help='Scale factor: 0.5, 1, 2 or 4 (default: 1)')
    render.add_argument('--char-spacing', type=int, default=config.DEFAULT_CHAR_SPACING,
                        help=f'Columns between characters (default: {config.DEFAULT_CHAR_SPACING})')
    render.add_argument('--word-spacing', type=int, default=config.DEFAULT_WORD_SPACING,
                        help=f'Extra columns between words (default: {config.DEFAULT_WORD_SPACING})')
    render.add_argument('--line-spacing', type=int, default=config.DEFAULT_LINE_SPACING,
                        help=f'Blank rows between lines (default: {config.DEFAULT_LINE_SPACING})')
    render.add_argument('--align', '-a', default='left',
                        choices=[a.value for a in HorizontalAlignment],
                        help='Line alignment (default: left)')
    render.add_argument('--color', '-c', default=config.DEFAULT_TEXT_COLOR,
                        help='Text color: hex or ANSI code '
                             f'({", ".join(ANSI_COLOR_MAP)})')
    render.add_argument('--gradient', default=None,
                        help='Gradient end color; enables the gradient')
    render.add_argument('--gradient-direction', default=GradientDirection.UP_DOWN.value,
                        choices=[d.value for d in GradientDirection],
                        help='Gradient direction (default: up-down)')
    render.add_argument('--shadow', action='store_true',
                        help='Draw a drop shadow')
    render.add_argument('--shadow-x', type=int, default=1,
                        help='Shadow horizontal offset (default: 1)')
    render.add_argument('--shadow-y', type=int, default=1,
                        help='Shadow vertical offset (default: 1)')
    render.add_argument('--shadow-style', default=ShadowStyle.MEDIUM.value,
                        choices=[s.value for s in ShadowStyle],
                        help='Shadow shade (default: medium)')
    render.add_argument('--no-color', action='store_true',
                        help='Print the monochrome canvas without ANSI colors')
    render.add_argument('--preview', metavar='PNG', default=None,
                        help='Also save the canvas as a black and white PNG image')
    render.add_argument('--pixel-size', type=int, default=4,
                        help='Image pixels per canvas pixel in the preview (default: 4)')

    subparsers.add_parser('fonts', help='List available fonts')
    return parser


def options_from_args(args: argparse.Namespace) -> RenderOptions:
    """Build RenderOptions from parsed ``render`` arguments."""
    return RenderOptions(
        scale_factor=args.scale,
        char_spacing=args.char_spacing,
        word_spacing=args.word_spacing,
        line_spacing=args.line_spacing,
        alignment=HorizontalAlignment(args.align),
        text_color=args.color,
        gradient=GradientOptions(
            enabled=args.gradient is not None,
            end_color=args.gradient or config.DEFAULT_TEXT_COLOR,
            direction=GradientDirection(args.gradient_direction),
        ),
        shadow=ShadowOptions(
            enabled=args.shadow,
            horizontal_offset=args.shadow_x,
            vertical_offset=args.shadow_y,
            style=ShadowStyle(args.shadow_style),
        ),
    )


def _render_command(args: argparse.Namespace) -> int:
    service = RenderService()
    options = options_from_args(args)
    text = args.text.replace('\\n', '\n')
    canvas = service.render_canvas(text, args.font, options)
    if args.preview:
        if args.pixel_size < 1:
            raise InvalidOptionError(f"--pixel-size must be at least 1, got {args.pixel_size}")
        canvas_to_image(canvas, pixel_size=args.pixel_size).save(args.preview)
        logger.info("Saved preview of %d canvas lines to %s", len(canvas), args.preview)
    lines = canvas if args.no_color else colorize(canvas, options)
    for line in lines:
        print(line)
    return 0


def _fonts_command(args: argparse.Namespace) -> int:
    for name in list_fonts():
        print(name)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI.

    Returns:
        Process exit status: 0 on success, 1 when a font cannot be loaded, options
        are invalid or the preview image cannot be written.
    """
    parser = _create_argument_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose, log_file=args.log_file)

    try:
        if args.command == 'fonts':
            return _fonts_command(args)
        return _render_command(args)
    except (FontLoadError, InvalidOptionError, OSError) as e:
        logger.debug("Command %s failed: %s", args.command, e)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
