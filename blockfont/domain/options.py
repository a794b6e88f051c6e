"""Render options and alignment enumerations.

The option objects describe how a text block is laid out (scale, spacing,
alignment) and how the resulting canvas is colored (text color, gradient,
shadow). Layout code reads the first group, ``blockfont.colors`` reads the
second.

Example usage:
    Building options for a centered, double-size render::

        from blockfont.domain.options import RenderOptions, TextAlignment

        options = RenderOptions(scale_factor=2.0, alignment=TextAlignment.CENTER)
        options.validate()
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

from .. import config


class InvalidOptionError(ValueError):
    """Raised when render options fall outside their supported ranges."""


class VerticalAlignment(Enum):
    TOP = 'top'
    MIDDLE = 'middle'
    BOTTOM = 'bottom'


class HorizontalAlignment(Enum):
    LEFT = 'left'
    CENTER = 'center'
    RIGHT = 'right'


# Text alignment of a multi-line block is horizontal alignment per line.
TextAlignment = HorizontalAlignment


class GradientDirection(Enum):
    UP_DOWN = 'up-down'
    DOWN_UP = 'down-up'
    LEFT_RIGHT = 'left-right'
    RIGHT_LEFT = 'right-left'


class ShadowStyle(Enum):
    LIGHT = 'light'
    MEDIUM = 'medium'
    DARK = 'dark'

    @property
    def char(self) -> str:
        """Shade character used to draw this shadow style."""
        return {
            ShadowStyle.LIGHT: config.LIGHT_SHADE,
            ShadowStyle.MEDIUM: config.MEDIUM_SHADE,
            ShadowStyle.DARK: config.DARK_SHADE,
        }[self]


@dataclass
class GradientOptions:
    """Two-stop color gradient from the text color to ``end_color``."""
    enabled: bool = False
    end_color: str = config.DEFAULT_TEXT_COLOR
    direction: GradientDirection = GradientDirection.UP_DOWN


@dataclass
class ShadowOptions:
    """Drop shadow drawn behind the text at a cell offset."""
    enabled: bool = False
    horizontal_offset: int = 1
    vertical_offset: int = 1
    style: ShadowStyle = ShadowStyle.MEDIUM


@dataclass
class RenderOptions:
    """Configuration for rendering a text block.

    Attributes:
        scale_factor: One of 0.5, 1, 2 or 4.
        char_spacing: Extra columns between adjacent glyphs, added to the
            kerning adjustment.
        word_spacing: Extra columns at each space between words.
        line_spacing: Blank rows between text lines.
        alignment: Horizontal alignment of each line within the block.
        text_color: Text color as hex string or ANSI code.
        gradient: Gradient settings; the gradient starts at text_color.
        shadow: Drop shadow settings.
    """
    scale_factor: float = config.DEFAULT_SCALE
    char_spacing: int = config.DEFAULT_CHAR_SPACING
    word_spacing: int = config.DEFAULT_WORD_SPACING
    line_spacing: int = config.DEFAULT_LINE_SPACING
    alignment: HorizontalAlignment = HorizontalAlignment.LEFT
    text_color: str = config.DEFAULT_TEXT_COLOR
    gradient: GradientOptions = field(default_factory=GradientOptions)
    shadow: ShadowOptions = field(default_factory=ShadowOptions)

    def validate(self) -> RenderOptions:
        """Check option ranges, returning self.

        The scaling code passes unsupported factors through unchanged, so
        this is where a bad factor gets caught.

        Raises:
            InvalidOptionError: If the scale factor is unsupported, a spacing
                value is negative or above its maximum, or a shadow offset
                is out of range.
        """
        try:
            factor = float(self.scale_factor)
        except (TypeError, ValueError):
            factor = None
        if factor not in config.SUPPORTED_SCALES:
            raise InvalidOptionError(
                f"Unsupported scale factor {self.scale_factor!r}; "
                f"expected one of {', '.join(f'{s:g}' for s in config.SUPPORTED_SCALES)}"
            )
        _check_range('char_spacing', self.char_spacing,
                     config.MIN_CHAR_SPACING, config.MAX_CHAR_SPACING)
        _check_range('word_spacing', self.word_spacing,
                     config.MIN_WORD_SPACING, config.MAX_WORD_SPACING)
        _check_range('line_spacing', self.line_spacing,
                     config.MIN_LINE_SPACING, config.MAX_LINE_SPACING)
        if self.shadow.enabled:
            _check_range('shadow.horizontal_offset', self.shadow.horizontal_offset,
                         config.MIN_SHADOW_OFFSET, config.MAX_SHADOW_OFFSET)
            _check_range('shadow.vertical_offset', self.shadow.vertical_offset,
                         config.MIN_SHADOW_OFFSET, config.MAX_SHADOW_OFFSET)
        return self


def _check_range(name: str, value: int, low: int, high: int) -> None:
    if not isinstance(value, int) or not low <= value <= high:
        raise InvalidOptionError(f"{name} must be an integer in [{low}, {high}], got {value!r}")
