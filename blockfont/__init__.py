"""Block font rendering package.

Renders text as multi-line ANSI art built from half-block characters
(``█ ▀ ▄`` and space). Each glyph comes from a bitmap font resource and goes
through a geometric pipeline: pixel-level scaling, baseline alignment,
collision-based kerning and canvas alignment. Color compositing is applied
last.

The package is organized into the following modules:
    domain: Value objects (FontData, DescenderInfo, RenderOptions, enums).
    utils: Half-block packing, canvas rasterization and text helpers.
    analysis: Glyph scaling, baseline/descender analysis and kerning.
    layout: Vertical and horizontal canvas alignment.
    loader: Font discovery and ``.bit`` file loading.
    colors: ANSI color table, gradients and shadows.
    api: RenderService tying the pipeline together.
    cli: ``blockfont`` command line entry point.

Example usage:
    Render text with the bundled font::

        from blockfont import render_text

        for line in render_text('Hello', 'blocky', scale_factor=2.0):
            print(line)

    Working with the pipeline pieces::

        from blockfont import load_font, scale_glyph, compute_kerning

        font = load_font('blocky')
        a, v = scale_glyph(font['A'], 2), scale_glyph(font['V'], 2)
        print(compute_kerning(a, v))

Attributes:
    __version__ (str): Package version string.
    __all__ (list): List of public symbols exported by this package.
"""

from .analysis import (
    analyze_glyph,
    compute_baseline,
    compute_kerning,
    pad_to_height,
    scale_glyph,
)
from .api import RenderService, render_text
from .colors import ANSI_COLOR_MAP, InvalidColorError, colorize
from .domain import (
    DescenderInfo,
    FontData,
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
from .layout import align_horizontal, align_vertical
from .loader import FontLoadError, FontNotFoundError, FontParseError, list_fonts, load_font
from .utils import pack, unpack

__all__ = [
    # Domain objects
    'FontData', 'DescenderInfo', 'RenderOptions', 'GradientOptions', 'ShadowOptions',
    'HorizontalAlignment', 'VerticalAlignment', 'TextAlignment',
    'GradientDirection', 'ShadowStyle',
    # Pipeline
    'pack', 'unpack', 'scale_glyph', 'compute_baseline', 'analyze_glyph',
    'pad_to_height', 'compute_kerning', 'align_vertical', 'align_horizontal',
    # Collaborators
    'load_font', 'list_fonts', 'colorize', 'ANSI_COLOR_MAP',
    'RenderService', 'render_text',
    # Errors
    'FontLoadError', 'FontNotFoundError', 'FontParseError',
    'InvalidColorError', 'InvalidOptionError',
]

__version__ = '1.0.0'
