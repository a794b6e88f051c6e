"""Conversion between half-block glyph rows and binary pixel matrices.

Every glyph cell packs two vertical pixels into one of four characters::

    '█'  full block        top on,  bottom on
    '▀'  upper half block  top on,  bottom off
    '▄'  lower half block  top off, bottom on
    ' '  space             top off, bottom off

so a glyph of ``n`` rows unpacks to a ``2n``-row pixel matrix. The functions
in this module never raise on malformed input: unrecognized cells and the
missing cells of short rows read as "off".

Example usage:
    Round trip through the pixel grid::

        from blockfont.utils.packing import pack, unpack

        pixels = unpack(['█▀', '▄ '])
        # array([[1, 1],
        #        [1, 0],
        #        [0, 0],
        #        [1, 0]], dtype=uint8)
        assert pack(pixels) == ['█▀', '▄ ']
"""

from __future__ import annotations
from typing import List, Sequence

import numpy as np

from ..config import EMPTY_CELL, FULL_BLOCK, LOWER_HALF_BLOCK, UPPER_HALF_BLOCK

# (top, bottom) pixel pair for each recognized cell
CELL_PIXELS = {
    FULL_BLOCK: (1, 1),
    UPPER_HALF_BLOCK: (1, 0),
    LOWER_HALF_BLOCK: (0, 1),
}

# Indexed by top * 2 + bottom
PIXEL_CELLS = np.array([EMPTY_CELL, LOWER_HALF_BLOCK, UPPER_HALF_BLOCK, FULL_BLOCK])


def unpack(glyph_rows: Sequence[str]) -> np.ndarray:
    """Expand half-block rows into a binary pixel matrix.

    Args:
        glyph_rows: Glyph rows made of half-block cells. Rows may have
            different lengths.

    Returns:
        uint8 array of shape ``(2 * len(glyph_rows), width)`` where width is
        the longest row. Returns an empty ``(0, 0)`` array when there are no
        rows or every row is empty.
    """
    width = max((len(row) for row in glyph_rows), default=0)
    if width == 0:
        return np.zeros((0, 0), dtype=np.uint8)

    pixels = np.zeros((len(glyph_rows) * 2, width), dtype=np.uint8)
    for y, row in enumerate(glyph_rows):
        for x, cell in enumerate(row):
            top, bottom = CELL_PIXELS.get(cell, (0, 0))
            pixels[2 * y, x] = top
            pixels[2 * y + 1, x] = bottom
    return pixels


def pack(pixels) -> List[str]:
    """Fold a binary pixel matrix back into half-block rows.

    Args:
        pixels: 2D array-like of 0/1 (or bool) values. Any non-zero value
            counts as "on".

    Returns:
        List of glyph rows, one per pair of pixel rows. An odd row count is
        handled by treating the missing bottom row as off. Empty input
        returns an empty list.
    """
    grid = np.asarray(pixels)
    if grid.ndim != 2 or grid.size == 0:
        return []

    grid = grid != 0
    if grid.shape[0] % 2:
        grid = np.vstack([grid, np.zeros((1, grid.shape[1]), dtype=bool)])

    codes = grid[0::2].astype(np.intp) * 2 + grid[1::2].astype(np.intp)
    return [''.join(PIXEL_CELLS[row]) for row in codes]


def ink_mask(glyph_rows: Sequence[str]) -> np.ndarray:
    """Cell-resolution ink mask of a glyph.

    A cell is ink when it is neither a space nor NUL. Short rows are padded
    with non-ink cells up to the widest row.

    Returns:
        bool array of shape ``(len(glyph_rows), width)``.
    """
    width = max((len(row) for row in glyph_rows), default=0)
    mask = np.zeros((len(glyph_rows), width), dtype=bool)
    for y, row in enumerate(glyph_rows):
        for x, cell in enumerate(row):
            mask[y, x] = cell not in (EMPTY_CELL, '\x00')
    return mask
