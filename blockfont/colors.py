"""Color resolution and ANSI compositing of rendered canvases.

The render pipeline produces a monochrome canvas; this module turns it into
terminal output with 24-bit foreground colors. Compositing is a pure function
of ``(canvas, options)``:

    - solid text color, or a two-stop gradient along one of four directions;
    - an optional drop shadow: a shifted copy of the text drawn with a shade
      character (``░ ▒ ▓``) in a dimmed text color, visible only where the
      text itself has no ink.

Colors are given as hex strings (``#RRGGBB``, ``#RGB``, ``#`` optional) or as
ANSI foreground codes from :data:`ANSI_COLOR_MAP`.

Example:
    Colorizing a canvas::

        from blockfont.colors import colorize
        from blockfont.domain import RenderOptions, GradientOptions

        options = RenderOptions(text_color='31',
                                gradient=GradientOptions(enabled=True, end_color='#0000FF'))
        for line in colorize(canvas, options):
            print(line)
"""

from __future__ import annotations

import logging
import re
from types import MappingProxyType
from typing import List, Optional, Sequence, Tuple

from . import config
from .domain.options import GradientDirection, RenderOptions

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]

# ANSI foreground codes to hex
ANSI_COLOR_MAP = MappingProxyType({
    '30': '#000000',  # Black
    '31': '#CD3131',  # Red
    '32': '#0DBC79',  # Green
    '33': '#E5E510',  # Yellow
    '34': '#2472C8',  # Blue
    '35': '#BC3FBC',  # Magenta
    '36': '#11A8CD',  # Cyan
    '37': '#E5E5E5',  # White
    '90': '#808080',  # Gray
    '91': '#FF9999',  # Bright Red
    '92': '#99FF99',  # Bright Green
    '93': '#FFFF99',  # Bright Yellow
    '94': '#66BBFF',  # Bright Blue
    '95': '#FF99FF',  # Bright Magenta
    '96': '#99FFFF',  # Bright Cyan
    '97': '#FFFFFF',  # Bright White
})

RESET = '\x1b[0m'
SHADOW_DIM = 0.4

_HEX_RE = re.compile(r'^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')


class InvalidColorError(ValueError):
    """Raised when a color string is neither hex nor a known ANSI code."""


def parse_hex(value: str) -> RGB:
    """Parse a hex color into an RGB tuple.

    Raises:
        InvalidColorError: If the value is not ``#RGB`` or ``#RRGGBB``.
    """
    match = _HEX_RE.match(value.strip()) if isinstance(value, str) else None
    if not match:
        raise InvalidColorError(f"Invalid hex color: {value!r}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = ''.join(d * 2 for d in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def to_hex(rgb: RGB) -> str:
    return '#{:02X}{:02X}{:02X}'.format(*rgb)


def resolve_color(value: Optional[str], default: str = config.DEFAULT_TEXT_COLOR,
                  color_map=ANSI_COLOR_MAP) -> str:
    """Normalize a color to ``#RRGGBB``.

    Args:
        value: Hex string or ANSI code.
        default: Returned when value is empty or invalid.
        color_map: ANSI code table to consult.

    Returns:
        Uppercase ``#RRGGBB`` string.
    """
    if not value:
        return default
    if value in color_map:
        return color_map[value]
    try:
        return to_hex(parse_hex(value))
    except InvalidColorError:
        logger.warning("Invalid color %r, using %s", value, default)
        return default


def interpolate(start: RGB, end: RGB, t: float) -> RGB:
    """Linear interpolation between two colors, ``t`` clamped to [0, 1]."""
    t = min(1.0, max(0.0, t))
    return tuple(int(round(s + (e - s) * t)) for s, e in zip(start, end))


def dim(rgb: RGB, factor: float = SHADOW_DIM) -> RGB:
    return tuple(int(round(c * factor)) for c in rgb)


def _gradient_position(direction: GradientDirection, x: int, y: int,
                       width: int, height: int) -> float:
    if direction in (GradientDirection.LEFT_RIGHT, GradientDirection.RIGHT_LEFT):
        t = x / (width - 1) if width > 1 else 0.0
        return 1.0 - t if direction is GradientDirection.RIGHT_LEFT else t
    t = y / (height - 1) if height > 1 else 0.0
    return 1.0 - t if direction is GradientDirection.DOWN_UP else t


def _sgr(rgb: RGB) -> str:
    return '\x1b[38;2;{};{};{}m'.format(*rgb)


def colorize(canvas: Sequence[str], options: Optional[RenderOptions] = None) -> List[str]:
    """Composite color, gradient and shadow onto a monochrome canvas.

    Args:
        canvas: Canvas lines of half-block cells.
        options: Render options; only the color fields are read.

    Returns:
        Lines with 24-bit ANSI color sequences. Lines that carry ink end with
        a reset sequence. With a shadow, the canvas grows by the absolute
        shadow offsets.
    """
    options = options or RenderOptions()
    width = max((len(line) for line in canvas), default=0)
    height = len(canvas)
    if width == 0:
        return list(canvas)

    text_rgb = parse_hex(resolve_color(options.text_color))
    gradient = options.gradient
    end_rgb = parse_hex(resolve_color(gradient.end_color)) if gradient.enabled else text_rgb

    shadow = options.shadow
    dx = shadow.horizontal_offset if shadow.enabled else 0
    dy = shadow.vertical_offset if shadow.enabled else 0
    text_x, text_y = max(0, -dx), max(0, -dy)
    out_width, out_height = width + abs(dx), height + abs(dy)

    def text_cell(x: int, y: int) -> str:
        cy, cx = y - text_y, x - text_x
        if 0 <= cy < height and 0 <= cx < len(canvas[cy]):
            return canvas[cy][cx]
        return ' '

    def shadow_ink(x: int, y: int) -> bool:
        if not shadow.enabled:
            return False
        return text_cell(x - dx, y - dy) != ' '

    result = []
    for y in range(out_height):
        parts = []
        current = None
        for x in range(out_width):
            cell = text_cell(x, y)
            if cell != ' ':
                if gradient.enabled:
                    t = _gradient_position(gradient.direction, x - text_x, y - text_y, width, height)
                    rgb = interpolate(text_rgb, end_rgb, t)
                else:
                    rgb = text_rgb
            elif shadow_ink(x, y):
                cell = shadow.style.char
                rgb = dim(text_rgb)
            else:
                parts.append(' ')
                continue
            if rgb != current:
                parts.append(_sgr(rgb))
                current = rgb
            parts.append(cell)
        if current is not None:
            parts.append(RESET)
        result.append(''.join(parts))
    return result
