"""Service layer for rendering text with block fonts.

This module wires the transform pipeline together:

    font glyph -> scale -> bottom-pad to the font's glyph height
               -> kern against the previous glyph (+ char spacing)
               -> assemble lines (+ word spacing, line spacing)
               -> align every line inside the block
               -> color compositing

The render service memoizes the font-wide baseline analysis per
``(font, scale_factor)``. The cache is filled without holding the lock while
computing: two threads may compute the same entry, the first one published
wins, and readers never wait on a computation.

Example usage:
    Rendering text::

        from blockfont.api.services import RenderService
        from blockfont.domain import RenderOptions, TextAlignment

        service = RenderService()
        lines = service.render('Hello\\nWorld', 'blocky',
                               RenderOptions(alignment=TextAlignment.CENTER))
        print('\\n'.join(lines))
"""

from __future__ import annotations
import logging
import re
import threading
from dataclasses import dataclass, replace
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from .. import config
from ..analysis.baseline import analyze_glyph, compute_baseline, pad_to_height
from ..analysis.kerning import compute_kerning
from ..analysis.scaling import scale_glyph
from ..colors import colorize
from ..domain.glyph import DescenderInfo, FontData, glyph_width
from ..domain.options import RenderOptions
from ..layout.alignment import align_block, cell_width
from ..loader import load_font
from ..utils.text import iter_graphemes, lookup_key

_logger = logging.getLogger(__name__)

FontLike = Union[FontData, str]

# Text lines end at \n, \r\n or a bare \r
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class ScaledFontMetrics:
    """Font-wide layout data for one scale factor.

    Attributes:
        baseline: Baseline row of the scaled font.
        descenders: DescenderInfo per character.
        glyph_height: Row count every glyph is padded to.
        glyphs: Scaled glyph rows per character.
    """
    baseline: int
    descenders: Mapping[str, DescenderInfo]
    glyph_height: int
    glyphs: Mapping[str, Tuple[str, ...]]


def build_font_metrics(font: FontData, scale_factor: float) -> ScaledFontMetrics:
    """Scale every glyph of a font and measure it against the baseline."""
    baseline = compute_baseline(font, scale_factor)
    glyphs = {char: tuple(scale_glyph(rows, scale_factor)) for char, rows in font.characters.items()}
    descenders = {char: analyze_glyph(rows, baseline) for char, rows in glyphs.items()}
    glyph_height = max((info.total_height for info in descenders.values()), default=0)
    return ScaledFontMetrics(baseline, descenders, glyph_height, glyphs)


class RenderService:
    """Renders text into block-art lines.

    Attributes:
        font_loader: Callable resolving a font name to FontData.
    """

    def __init__(self, font_loader: Optional[Callable[[str], FontData]] = None):
        self.font_loader = font_loader or load_font
        self._metrics: Dict[Tuple[FontData, float], ScaledFontMetrics] = {}
        self._lock = threading.Lock()

    def _resolve_font(self, font: FontLike) -> FontData:
        if isinstance(font, FontData):
            return font
        return self.font_loader(font)

    def font_metrics(self, font: FontLike, scale_factor: float = 1.0) -> ScaledFontMetrics:
        """Memoized :func:`build_font_metrics`."""
        font = self._resolve_font(font)
        key = (font, float(scale_factor))
        metrics = self._metrics.get(key)
        if metrics is not None:
            return metrics

        metrics = build_font_metrics(font, scale_factor)
        _logger.debug("font_metrics: font=%r scale=%s baseline=%d height=%d",
                      font.name, scale_factor, metrics.baseline, metrics.glyph_height)
        with self._lock:
            return self._metrics.setdefault(key, metrics)

    def clear_cache(self) -> None:
        with self._lock:
            self._metrics.clear()

    def render_line(self, text: str, font: FontLike, options: RenderOptions) -> List[str]:
        """Render one line of text (no newlines) into glyph-height rows.

        Glyphs are bottom-padded to the font's glyph height so they share the
        baseline. Adjacent glyphs are separated by their kerning adjustment
        plus ``char_spacing``; a space advances by its own width plus
        ``word_spacing`` and is never kerned against. Characters missing from
        the font are skipped.

        Returns:
            Rows of equal cell width.
        """
        font = self._resolve_font(font)
        metrics = self.font_metrics(font, options.scale_factor)
        height = metrics.glyph_height
        grid: List[List[str]] = [[] for _ in range(height)]

        cursor = 0
        previous: Optional[Sequence[str]] = None
        previous_end = 0
        for cluster in iter_graphemes(text):
            key = lookup_key(font, cluster)
            if cluster.isspace():
                space_width = glyph_width(metrics.glyphs[key]) if key is not None else \
                    self._default_space_width(options.scale_factor)
                cursor = max(cursor, previous_end) + space_width + options.word_spacing
                previous = None
                previous_end = cursor
                continue
            if key is None:
                _logger.debug("render_line: font=%r has no glyph for %r, skipped", font.name, cluster)
                continue

            glyph = pad_to_height(metrics.glyphs[key], height)
            if previous is not None:
                cursor = previous_end + compute_kerning(previous, glyph) + options.char_spacing
            cursor = max(cursor, 0)
            self._stamp(grid, glyph, cursor)
            previous = glyph
            previous_end = cursor + glyph_width(glyph)

        width = max(previous_end, max((len(row) for row in grid), default=0))
        return [''.join(row).ljust(width) for row in grid]

    @staticmethod
    def _default_space_width(scale_factor: float) -> int:
        return max(1, int(config.DEFAULT_SPACE_WIDTH * scale_factor))

    @staticmethod
    def _stamp(grid: List[List[str]], glyph: Sequence[str], x: int) -> None:
        # Ink overwrites whatever is below it, spaces never do.
        for row_index, row in enumerate(glyph[:len(grid)]):
            target = grid[row_index]
            end = x + len(row)
            if len(target) < end:
                target.extend(' ' * (end - len(target)))
            for offset, cell in enumerate(row):
                if cell != ' ':
                    target[x + offset] = cell

    def render_canvas(self, text: str, font: FontLike,
                      options: Optional[RenderOptions] = None) -> List[str]:
        """Render text into a monochrome canvas.

        Args:
            text: Text to render; ``\\n``, ``\\r\\n`` or ``\\r`` separate lines.
            font: FontData or a font name for the font loader.
            options: Layout options. Validated before use.

        Returns:
            Canvas lines of equal width, each text line aligned inside the
            block according to ``options.alignment``, text lines separated by
            ``options.line_spacing`` blank rows.

        Raises:
            InvalidOptionError: If options are out of range.
            FontLoadError: If a font name cannot be loaded.
        """
        options = (options or RenderOptions()).validate()
        font = self._resolve_font(font)

        lines: List[str] = []
        for index, text_line in enumerate(_LINE_BREAK.split(text)):
            if index > 0:
                lines.extend([''] * options.line_spacing)
            lines.extend(self.render_line(text_line, font, options))

        width = max((cell_width(line) for line in lines), default=0)
        return align_block(lines, width, options.alignment)

    def render(self, text: str, font: FontLike,
               options: Optional[RenderOptions] = None) -> List[str]:
        """Render text and composite colors onto it."""
        options = options or RenderOptions()
        return colorize(self.render_canvas(text, font, options), options)


_default_service = RenderService()


def render_text(text: str, font: FontLike = config.DEFAULT_FONT,
                options: Optional[RenderOptions] = None, color: bool = True,
                **overrides) -> List[str]:
    """Render text with the shared service.

    Args:
        text: Text to render.
        font: FontData or font name.
        options: Base options; keyword overrides replace individual fields.
        color: When False, return the monochrome canvas.

    Example:
        >>> lines = render_text('Hi', 'blocky', scale_factor=2.0, color=False)
    """
    options = replace(options or RenderOptions(), **overrides)
    if color:
        return _default_service.render(text, font, options)
    return _default_service.render_canvas(text, font, options)
