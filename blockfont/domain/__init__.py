"""Domain objects for block font rendering.

This module provides the value objects shared by the transform pipeline:

Glyph classes:
    FontData: Immutable character-to-glyph mapping of a loaded font.
    DescenderInfo: Descender metrics of a glyph relative to the baseline.

Option classes:
    RenderOptions: Layout and color settings of a render.
    GradientOptions, ShadowOptions: Color compositing settings.
    HorizontalAlignment, VerticalAlignment, TextAlignment: Alignment modes.
    GradientDirection, ShadowStyle: Compositing enumerations.

Example usage:
    Working with fonts::

        from blockfont.domain import FontData, glyph_width

        font = FontData.from_dict('demo', {'I': ['█', '█']})
        print(glyph_width(font['I']))  # 1
"""

from .glyph import (
    DescenderInfo,
    FontData,
    Glyph,
    glyph_width,
    has_ink,
    is_blank_row,
    normalize_glyph,
)
from .options import (
    GradientDirection,
    GradientOptions,
    HorizontalAlignment,
    InvalidOptionError,
    RenderOptions,
    ShadowOptions,
    ShadowStyle,
    TextAlignment,
    VerticalAlignment,
)

__all__ = [
    'Glyph', 'FontData', 'DescenderInfo',
    'glyph_width', 'has_ink', 'is_blank_row', 'normalize_glyph',
    'RenderOptions', 'GradientOptions', 'ShadowOptions', 'InvalidOptionError',
    'HorizontalAlignment', 'VerticalAlignment', 'TextAlignment',
    'GradientDirection', 'ShadowStyle',
]
