"""Canvas rasterization utilities.

This module turns a monochrome canvas (the list of half-block lines produced
by the render service) into pixel data for inspection and previews.

The module provides the following functions:
    canvas_to_mask: Unpack a canvas into a boolean pixel mask.
    canvas_to_image: Draw the mask as a PIL image, one block per pixel.
    get_canvas_bbox: Bounding box of the ink in a canvas.

Example usage:
    Previewing a render::

        from blockfont.api import RenderService
        from blockfont.utils.rendering import canvas_to_image

        canvas = RenderService().render_canvas('Hi', 'blocky')
        img = canvas_to_image(canvas, pixel_size=4)
        img.show()
"""

from __future__ import annotations
from typing import Optional, Sequence, Tuple

import numpy as np
from PIL import Image

from .packing import unpack


def canvas_to_mask(canvas: Sequence[str]) -> np.ndarray:
    """Unpack canvas lines into a boolean pixel mask.

    Lines of different widths are right-padded with off pixels, so the
    mask is always rectangular.

    Args:
        canvas: Monochrome canvas lines made of half-block cells.

    Returns:
        bool array of shape ``(2 * len(canvas), width)``.
    """
    return unpack(canvas).astype(bool)


def canvas_to_image(
    canvas: Sequence[str],
    pixel_size: int = 1,
    foreground: Tuple[int, int, int] = (255, 255, 255),
    background: Tuple[int, int, int] = (0, 0, 0),
) -> Image.Image:
    """Render a canvas as an RGB image.

    Each pixel of the unpacked canvas becomes a ``pixel_size`` square.

    Args:
        canvas: Monochrome canvas lines.
        pixel_size: Edge length in image pixels of one canvas pixel.
        foreground: RGB color of ink pixels.
        background: RGB color of empty pixels.

    Returns:
        PIL image. An empty canvas gives a 1x1 background image.
    """
    mask = canvas_to_mask(canvas)
    if mask.size == 0:
        return Image.new('RGB', (1, 1), background)

    if pixel_size > 1:
        mask = np.repeat(np.repeat(mask, pixel_size, axis=0), pixel_size, axis=1)

    rgb = np.empty(mask.shape + (3,), dtype=np.uint8)
    rgb[...] = background
    rgb[mask] = foreground
    return Image.fromarray(rgb)


def get_canvas_bbox(canvas: Sequence[str]) -> Optional[Tuple[int, int, int, int]]:
    """Get the pixel bounding box of the ink in a canvas.

    Returns:
        ``(x_min, y_min, x_max, y_max)`` inclusive pixel coordinates, or None
        when the canvas has no ink.
    """
    mask = canvas_to_mask(canvas)
    if not mask.any():
        return None
    rows = np.any(mask, axis=1)
    cols = np.any(mask, axis=0)
    y_min, y_max = np.where(rows)[0][[0, -1]]
    x_min, x_max = np.where(cols)[0][[0, -1]]
    return int(x_min), int(y_min), int(x_max), int(y_max)
