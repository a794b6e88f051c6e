"""Baseline estimation and descender analysis.

Glyphs in a bitmap font have different heights: ``g`` and ``p`` reach below
the line that ``a`` and ``x`` sit on. To line glyphs up, a single font-wide
baseline row is estimated from lowercase letters that normally have no
descender, then every glyph is measured against it.

The analysis is scale dependent (scaling moves the last ink row), so the
baseline is computed per ``(font, scale_factor)``; callers cache it, see
:class:`blockfont.api.services.RenderService`.

Example usage:
    Analyzing a font::

        from blockfont.analysis.baseline import compute_baseline, analyze_glyph

        baseline = compute_baseline(font, 1.0)
        info = analyze_glyph(font['g'], baseline)
        if info.has_descender:
            print(f"'g' drops {info.descender_height} rows below the baseline")
"""

from __future__ import annotations
import logging
from typing import Dict, List, Optional, Sequence

from .. import config
from ..domain.glyph import DescenderInfo, FontData, is_blank_row
from .scaling import scale_glyph

logger = logging.getLogger(__name__)


def first_ink_row(glyph: Sequence[str]) -> int:
    """Index of the first row with ink, or -1 for a blank glyph."""
    for row_index, row in enumerate(glyph):
        if not is_blank_row(row):
            return row_index
    return -1


def last_ink_row(glyph: Sequence[str]) -> int:
    """Index of the last row with ink, or -1 for a blank glyph."""
    for row_index in range(len(glyph) - 1, -1, -1):
        if not is_blank_row(glyph[row_index]):
            return row_index
    return -1


def compute_baseline(
    font_data: FontData,
    scale_factor: float = 1.0,
    sample_chars: Sequence[str] = config.BASELINE_SAMPLE_CHARS,
    default_baseline: int = config.DEFAULT_BASELINE,
) -> int:
    """Estimate the font-wide baseline row.

    Each sample character present in the font is scaled and its last ink
    row collected. The baseline is the truncated mean of those rows.

    Args:
        font_data: Font to analyze.
        scale_factor: Scale the glyphs will be rendered at.
        sample_chars: Characters expected to sit on the baseline.
        default_baseline: Row returned when no sample character has ink.

    Returns:
        Baseline row index in scaled glyph rows.
    """
    positions: List[int] = []
    for char in sample_chars:
        glyph = font_data.get(char)
        if glyph is None:
            continue
        row = last_ink_row(scale_glyph(glyph, scale_factor))
        if row >= 0:
            positions.append(row)

    if not positions:
        logger.debug("compute_baseline: font=%r has no sample glyphs, using default %d",
                     font_data.name, default_baseline)
        return default_baseline

    baseline = sum(positions) // len(positions)
    logger.debug("compute_baseline: font=%r scale=%s samples=%d baseline=%d",
                 font_data.name, scale_factor, len(positions), baseline)
    return baseline


def analyze_glyph(glyph: Sequence[str], baseline_row: int) -> DescenderInfo:
    """Measure a glyph's descender against the baseline row.

    Args:
        glyph: Scaled glyph rows.
        baseline_row: Font-wide baseline from :func:`compute_baseline`.

    Returns:
        DescenderInfo for the glyph. A glyph without rows reports all zeros;
        a glyph without ink reports ``baseline_height == total_height``.
    """
    height = len(glyph)
    if height == 0:
        return DescenderInfo()

    last_row = last_ink_row(glyph)
    if last_row == -1:
        return DescenderInfo(
            has_descender=False,
            baseline_height=height,
            descender_height=0,
            total_height=height,
        )

    return DescenderInfo(
        has_descender=last_row > baseline_row,
        baseline_height=baseline_row + 1,
        descender_height=max(0, last_row - baseline_row),
        total_height=height,
    )


def analyze_font(
    font_data: FontData,
    scale_factor: float = 1.0,
    baseline_row: Optional[int] = None,
) -> Dict[str, DescenderInfo]:
    """Descender info for every glyph of a font.

    Args:
        font_data: Font to analyze.
        scale_factor: Scale the glyphs will be rendered at.
        baseline_row: Precomputed baseline. Computed when omitted.

    Returns:
        Mapping from character to DescenderInfo.
    """
    if baseline_row is None:
        baseline_row = compute_baseline(font_data, scale_factor)
    return {
        char: analyze_glyph(scale_glyph(glyph, scale_factor), baseline_row)
        for char, glyph in font_data.characters.items()
    }


def pad_to_height(glyph: Sequence[str], max_height: int) -> List[str]:
    """Bottom-pad a glyph with empty rows up to ``max_height``.

    The padding rows are empty strings rather than spaces, so they add no
    width. Top rows are untouched, which keeps glyphs aligned on the
    baseline.
    """
    if len(glyph) >= max_height:
        return list(glyph)
    return list(glyph) + [''] * (max_height - len(glyph))
