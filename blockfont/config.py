"""Shared configuration for the block font pipeline.

This module centralizes the constants used by:
    - blockfont.analysis (scaling, baseline estimation)
    - blockfont.api.services (render defaults)
    - blockfont.loader (font discovery)
    - blockfont.cli

Having these values in one place keeps the renderer, the CLI and the tests
working from the same defaults.
"""

import os
from pathlib import Path

# Half-block cell alphabet
FULL_BLOCK = '█'
UPPER_HALF_BLOCK = '▀'
LOWER_HALF_BLOCK = '▄'
EMPTY_CELL = ' '

# Shadow shading characters, lightest to darkest
LIGHT_SHADE = '░'
MEDIUM_SHADE = '▒'
DARK_SHADE = '▓'

# Supported scale factors (0.5x, 1x, 2x, 4x)
SUPPORTED_SCALES = (0.5, 1.0, 2.0, 4.0)
DEFAULT_SCALE = 1.0

# Lowercase letters that usually sit on the baseline without descenders
BASELINE_SAMPLE_CHARS = ('a', 'e', 'o', 'x', 'n', 'm', 's', 'c')

# Baseline row used when a font has none of the sample letters
DEFAULT_BASELINE = 5

# Spacing ranges and defaults (in cells / rows)
MIN_CHAR_SPACING = 0
MAX_CHAR_SPACING = 10
MIN_WORD_SPACING = 0
MAX_WORD_SPACING = 20
MIN_LINE_SPACING = 0
MAX_LINE_SPACING = 10

DEFAULT_CHAR_SPACING = 2
DEFAULT_WORD_SPACING = 2
DEFAULT_LINE_SPACING = 1

# Width of a space at 1x for fonts without a space glyph
DEFAULT_SPACE_WIDTH = 2

# Shadow offset range (in cells)
MIN_SHADOW_OFFSET = -5
MAX_SHADOW_OFFSET = 5

DEFAULT_TEXT_COLOR = '#FFFFFF'

# Font files
FONT_EXTENSION = '.bit'
FONTS_DIR_ENV = 'BLOCKFONT_FONTS_DIR'
BUNDLED_FONTS_DIR = Path(__file__).parent / 'fonts'
DEFAULT_FONT = 'blocky'


def fonts_dir_override():
    """Return the fonts directory from the environment, if set."""
    value = os.environ.get(FONTS_DIR_ENV)
    return Path(value) if value else None
