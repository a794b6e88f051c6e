"""Canvas alignment by padding.

Vertical alignment places a block of lines inside a taller canvas by filling
the remaining rows with empty lines; horizontal alignment pads a single line
with spaces up to the canvas width. Inputs that already fill the canvas are
returned as-is.

Line width is measured in terminal cells with ``wcwidth``, so wide
characters count as two columns.
"""

from __future__ import annotations
from typing import List, Sequence

from wcwidth import wcswidth

from ..domain.options import HorizontalAlignment, VerticalAlignment


def cell_width(line: str) -> int:
    """Terminal cell width of a line.

    Falls back to the code point count when the line holds characters
    ``wcwidth`` cannot measure (control characters).
    """
    width = wcswidth(line)
    return width if width >= 0 else len(line)


def align_vertical(
    lines: Sequence[str],
    canvas_height: int,
    mode: VerticalAlignment = VerticalAlignment.TOP,
) -> List[str]:
    """Place lines inside a canvas of ``canvas_height`` rows.

    Args:
        lines: Block of text lines.
        canvas_height: Target row count.
        mode: TOP, MIDDLE or BOTTOM. MIDDLE puts the extra row of an odd
            padding at the bottom.

    Returns:
        A new list of exactly ``canvas_height`` lines, or the input lines
        when they already fill the canvas.
    """
    mode = VerticalAlignment(mode)
    if len(lines) >= canvas_height:
        return list(lines)

    padding = canvas_height - len(lines)
    if mode is VerticalAlignment.MIDDLE:
        top_padding = padding // 2
    elif mode is VerticalAlignment.BOTTOM:
        top_padding = padding
    else:
        top_padding = 0

    result = [''] * canvas_height
    result[top_padding:top_padding + len(lines)] = lines
    return result


def align_horizontal(
    line: str,
    canvas_width: int,
    mode: HorizontalAlignment = HorizontalAlignment.LEFT,
) -> str:
    """Pad a line with spaces to ``canvas_width`` cells.

    Args:
        line: Single text line.
        canvas_width: Target width in cells.
        mode: LEFT pads on the right, RIGHT pads on the left, CENTER splits
            the padding with the odd column going to the right.

    Returns:
        The padded line, or the input line when it is already wide enough.
    """
    mode = HorizontalAlignment(mode)
    width = cell_width(line)
    if width >= canvas_width:
        return line

    padding = canvas_width - width
    if mode is HorizontalAlignment.CENTER:
        left_padding = padding // 2
    elif mode is HorizontalAlignment.RIGHT:
        left_padding = padding
    else:
        left_padding = 0
    right_padding = padding - left_padding

    return ' ' * left_padding + line + ' ' * right_padding


def align_block(
    lines: Sequence[str],
    canvas_width: int,
    mode: HorizontalAlignment = HorizontalAlignment.LEFT,
) -> List[str]:
    """Apply :func:`align_horizontal` to every line of a block."""
    return [align_horizontal(line, canvas_width, mode) for line in lines]
