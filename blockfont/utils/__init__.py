"""Utility functions for block font processing.

This package provides low-level helpers used throughout blockfont:

Modules:
    packing: Conversion between half-block glyph rows and pixel matrices.
    rendering: Canvas rasterization to numpy masks and PIL images.
    text: Grapheme splitting and font key lookup.
"""

from .packing import ink_mask, pack, unpack
from .rendering import canvas_to_image, canvas_to_mask, get_canvas_bbox
from .text import graphemes, iter_graphemes, lookup_key

__all__ = [
    'pack', 'unpack', 'ink_mask',
    'canvas_to_mask', 'canvas_to_image', 'get_canvas_bbox',
    'iter_graphemes', 'graphemes', 'lookup_key',
]
