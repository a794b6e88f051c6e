"""Glyph analysis and transforms.

Modules:
    scaling: Pixel-level glyph scaling (0.5x, 1x, 2x, 4x).
    baseline: Font-wide baseline estimation and per-glyph descender metrics.
    kerning: Collision-based spacing between adjacent glyphs.
"""

from .baseline import (
    analyze_font,
    analyze_glyph,
    compute_baseline,
    first_ink_row,
    last_ink_row,
    pad_to_height,
)
from .kerning import compute_kerning, has_collision, ink_coordinates
from .scaling import (
    downscale_pixels,
    scale_glyph,
    scale_multiplier,
    scale_pixels,
    upscale_pixels,
)

__all__ = [
    'scale_glyph', 'scale_pixels', 'scale_multiplier', 'upscale_pixels', 'downscale_pixels',
    'compute_baseline', 'analyze_glyph', 'analyze_font', 'pad_to_height',
    'first_ink_row', 'last_ink_row',
    'compute_kerning', 'has_collision', 'ink_coordinates',
]
