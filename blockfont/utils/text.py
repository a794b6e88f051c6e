"""Text helpers for character lookup."""

from __future__ import annotations
import unicodedata
from typing import Iterator, List

ZERO_WIDTH_JOINER = '\u200d'


def _extends_cluster(char: str) -> bool:
    # Combining marks, variation selectors and emoji modifiers attach to
    # the preceding character.
    if unicodedata.combining(char):
        return True
    code = ord(char)
    return (
        0xFE00 <= code <= 0xFE0F
        or 0x1F3FB <= code <= 0x1F3FF
        or unicodedata.category(char) in ('Mn', 'Me')
    )


def iter_graphemes(text: str) -> Iterator[str]:
    """Split text into user-perceived characters.

    Combining marks, variation selectors and zero-width-joiner sequences
    stay attached to their base character, so ``'e\\u0301'`` is yielded as
    one key. This covers the clusters bitmap fonts actually carry; full
    UAX #29 segmentation is not attempted.
    """
    cluster = ''
    join_next = False
    for char in text:
        if cluster and (join_next or char == ZERO_WIDTH_JOINER or _extends_cluster(char)):
            cluster += char
            join_next = char == ZERO_WIDTH_JOINER
            continue
        if cluster:
            yield cluster
        cluster = char
        join_next = False
    if cluster:
        yield cluster


def graphemes(text: str) -> List[str]:
    """List form of :func:`iter_graphemes`."""
    return list(iter_graphemes(text))


def lookup_key(font, cluster: str):
    """Find the font key for a grapheme cluster.

    Tries the cluster as-is, then its NFC form, then its base character.
    Returns None when the font has none of them.
    """
    if cluster in font:
        return cluster
    composed = unicodedata.normalize('NFC', cluster)
    if composed in font:
        return composed
    if cluster[0] in font:
        return cluster[0]
    return None
