"""Automatic kerning between adjacent glyphs.

The resolver picks the tightest horizontal adjustment in ``{-1, 0, +1}``
cells at which the right glyph's ink does not collide with the left glyph's
ink. Collision uses a permissive "smart buffer" test instead of strict
zero-contact: a lone diagonal touch is accepted, direct overlap or
concentrated/horizontal contact is not.

Coordinates are held in a doubled integer space (``x2 = 2x``, ``y2 = 2y``).
When the two glyphs differ in height by an odd number of rows, the lower half
of the right glyph is shifted by half a cell, which is exactly ``+1`` in the
doubled space, so no floating point comparisons are needed.

Collision rules for one ink cell of the right glyph at ``(x, y)``:
    1. Direct overlap: a left ink cell on the same row closer than one cell.
    2. Adjacency: for each of the 8 neighbour positions around ``(x, y)``,
       every left ink cell closer than one cell on both axes scores 1, and
       3 when the neighbour is purely horizontal. A total of 3 or more is a
       collision.

Example usage:
    Kerning a pair::

        from blockfont.analysis.kerning import compute_kerning

        spacing = compute_kerning(font['A'], font['V'])
        # -1, 0 or 1 columns relative to butting the glyph boxes together
"""

from __future__ import annotations
import logging
from typing import Sequence

import numpy as np

from ..domain.glyph import glyph_width, normalize_glyph
from ..utils.packing import ink_mask

logger = logging.getLogger(__name__)

# Spacing candidates, tightest first
KERNING_CANDIDATES = (-1, 0, 1)
FALLBACK_SPACING = 1

# Weighted neighbour hits needed to call a near miss a collision
CONFLICT_THRESHOLD = 3
HORIZONTAL_WEIGHT = 3

# Eight neighbours as (dx, dy)
NEIGHBOR_OFFSETS = tuple(
    (dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)
)


def ink_coordinates(glyph: Sequence[str]) -> np.ndarray:
    """Ink cell coordinates of a glyph in doubled space.

    Returns:
        int array of shape ``(N, 2)`` holding ``(2x, 2y)`` per ink cell.
    """
    ys, xs = np.nonzero(ink_mask(glyph))
    return np.column_stack((xs * 2, ys * 2)).astype(np.int64)


def _cell_collides(a_ink: np.ndarray, x2: int, y2: int) -> bool:
    ax = a_ink[:, 0]
    ay = a_ink[:, 1]

    if np.any((np.abs(ax - x2) < 2) & (ay == y2)):
        return True

    conflicts = 0
    for dx, dy in NEIGHBOR_OFFSETS:
        hits = int(np.count_nonzero(
            (np.abs(ax - (x2 + 2 * dx)) < 2) & (np.abs(ay - (y2 + 2 * dy)) < 2)
        ))
        conflicts += hits * (HORIZONTAL_WEIGHT if dy == 0 else 1)
    return conflicts >= CONFLICT_THRESHOLD


def has_collision(glyph_a: Sequence[str], glyph_b: Sequence[str], spacing: int) -> bool:
    """Check whether ``glyph_b`` placed ``spacing`` columns after ``glyph_a`` collides.

    Both glyphs are normalized to the taller height with space-filled rows
    before testing, so widths are preserved.

    Args:
        glyph_a: Left glyph rows.
        glyph_b: Right glyph rows.
        spacing: Columns between the right edge of A's box and B's left edge.
            Negative values tuck B under A.

    Returns:
        True when any ink cell of B collides with A's ink.
    """
    height_a, height_b = len(glyph_a), len(glyph_b)
    height = max(height_a, height_b)
    a = normalize_glyph(glyph_a, height)
    b = normalize_glyph(glyph_b, height)
    width_a = glyph_width(a)

    a_ink = ink_coordinates(a)
    if a_ink.size == 0:
        return False

    half_shift = (height_a - height_b) % 2 != 0
    for x2_b, y2_b in ink_coordinates(b):
        y_b = int(y2_b) // 2
        x2 = 2 * (width_a + spacing) + int(x2_b)
        if half_shift and y_b >= height // 2:
            x2 += 1
        if _cell_collides(a_ink, x2, int(y2_b)):
            return True
    return False


def compute_kerning(glyph_a: Sequence[str], glyph_b: Sequence[str]) -> int:
    """Smallest safe spacing between two glyphs.

    Args:
        glyph_a: Left glyph rows.
        glyph_b: Right glyph rows.

    Returns:
        -1, 0 or 1. Returns 0 when either glyph has no ink (a space, an
        empty bitmap), and 1 when every candidate collides.
    """
    if not ink_mask(glyph_a).any() or not ink_mask(glyph_b).any():
        return 0

    for spacing in KERNING_CANDIDATES:
        if not has_collision(glyph_a, glyph_b, spacing):
            return spacing

    logger.debug("compute_kerning: all candidates collide, using %d", FALLBACK_SPACING)
    return FALLBACK_SPACING
