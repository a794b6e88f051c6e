"""Glyph scaling on the unpacked pixel grid.

Glyphs are scaled at pixel resolution rather than cell resolution: the
half-block rows are unpacked to a binary matrix (two pixel rows per glyph
row), resized, and packed back. This keeps half-cell strokes intact at every
supported factor.

Scale factors map to integer multipliers:

    ======  ==========  =====================================
    factor  multiplier  method
    ======  ==========  =====================================
    0.5     -2          max-pool 2x2 blocks (any pixel on)
    1       1           identity
    2       2           nearest-neighbour block replication
    4       4           nearest-neighbour block replication
    ======  ==========  =====================================

Any other factor leaves the glyph unchanged. Callers that want unsupported
factors rejected validate :class:`~blockfont.domain.RenderOptions` first.

Example usage:
    Scaling a glyph::

        from blockfont.analysis.scaling import scale_glyph

        scale_glyph(['█▀'], 2)
        # ['████', '██  ']  (4 pixel rows packed into 2 glyph rows)
"""

from __future__ import annotations
import logging
from typing import List, Optional, Sequence

import numpy as np

from ..utils.packing import pack, unpack

logger = logging.getLogger(__name__)

SCALE_MULTIPLIERS = {
    0.5: -2,
    1.0: 1,
    2.0: 2,
    4.0: 4,
}


def scale_multiplier(scale_factor: float) -> Optional[int]:
    """Integer multiplier for a scale factor, or None if unsupported."""
    try:
        return SCALE_MULTIPLIERS.get(float(scale_factor))
    except (TypeError, ValueError):
        return None


def upscale_pixels(pixels: np.ndarray, factor: int) -> np.ndarray:
    """Replicate every pixel into a ``factor x factor`` block."""
    return np.repeat(np.repeat(pixels, factor, axis=1), factor, axis=0)


def downscale_pixels(pixels: np.ndarray, by: int) -> np.ndarray:
    """Shrink a pixel matrix by OR-pooling ``by x by`` blocks.

    A destination pixel is on when any source pixel of its block is on, so
    one-pixel strokes survive the reduction. Trailing rows/columns that do
    not fill a whole block are dropped.

    Args:
        pixels: 2D binary matrix.
        by: Block edge length (>= 1).

    Returns:
        Matrix of shape ``(h // by, w // by)``, or a single off pixel when
        either dimension would be zero.
    """
    height, width = pixels.shape
    new_height, new_width = height // by, width // by
    if new_height == 0 or new_width == 0:
        return np.zeros((1, 1), dtype=pixels.dtype)

    cropped = pixels[:new_height * by, :new_width * by]
    blocks = cropped.reshape(new_height, by, new_width, by)
    return blocks.max(axis=(1, 3))


def scale_pixels(pixels: np.ndarray, multiplier: int) -> np.ndarray:
    """Scale a pixel matrix by an integer multiplier.

    Args:
        pixels: 2D binary matrix.
        multiplier: ``k > 1`` upscales by k, ``-k`` downscales by k, and
            1, 0 or -1 return the input unchanged.
    """
    if pixels.size == 0 or multiplier in (-1, 0, 1):
        return pixels
    if multiplier > 1:
        return upscale_pixels(pixels, multiplier)
    return downscale_pixels(pixels, -multiplier)


def scale_glyph(glyph: Sequence[str], scale_factor: float) -> List[str]:
    """Scale a half-block glyph.

    Args:
        glyph: Glyph rows.
        scale_factor: One of 0.5, 1, 2, 4.

    Returns:
        Scaled glyph rows. The input is returned unchanged for factor 1, an
        empty glyph, or an unsupported factor.
    """
    if not glyph or scale_factor == 1:
        return glyph

    multiplier = scale_multiplier(scale_factor)
    if multiplier is None:
        logger.debug("scale_glyph: unsupported scale factor %r, glyph left unchanged", scale_factor)
        return glyph

    pixels = unpack(glyph)
    if pixels.size == 0:
        return glyph

    return pack(scale_pixels(pixels, multiplier))
