"""Glyph value objects for block font rendering."""

from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

# A glyph is a sequence of rows of half-block cells.
Glyph = Sequence[str]


def glyph_width(glyph: Glyph) -> int:
    """Width in cells of the widest row."""
    return max((len(row) for row in glyph), default=0)


def is_blank_row(row: str) -> bool:
    """True when a row carries no ink."""
    return all(cell == ' ' for cell in row)


def has_ink(glyph: Glyph) -> bool:
    """True when any cell of the glyph is neither space nor NUL."""
    return any(cell not in (' ', '\x00') for row in glyph for cell in row)


def normalize_glyph(glyph: Glyph, height: Optional[int] = None) -> List[str]:
    """Right-pad rows to a common width and bottom-pad to ``height``.

    Rows are padded with spaces up to the widest row. When ``height``
    exceeds the row count, space-filled rows of the same width are appended
    so the result stays rectangular.
    """
    width = glyph_width(glyph)
    rows = [row.ljust(width) for row in glyph]
    if height is not None and height > len(rows):
        rows.extend(' ' * width for _ in range(height - len(rows)))
    return rows


@dataclass(frozen=True)
class DescenderInfo:
    """Descender metrics of one glyph relative to a font-wide baseline.

    Attributes:
        has_descender: True when the glyph's last ink row lies below the
            baseline row.
        baseline_height: Rows from the top down to and including the baseline.
            Equal to total_height for glyphs with no ink.
        descender_height: Rows of ink below the baseline, 0 otherwise.
        total_height: Row count of the analyzed glyph.
        vertical_offset: Extra vertical shift; always 0 for bottom-padded
            layout.
    """
    has_descender: bool = False
    baseline_height: int = 0
    descender_height: int = 0
    total_height: int = 0
    vertical_offset: int = 0


@dataclass(frozen=True)
class FontData:
    """Immutable character-to-glyph mapping of a loaded font.

    Keys are whole grapheme clusters, so multi-codepoint characters such as
    ``'e\\u0301'`` are looked up as one key. Glyph rows are stored as tuples
    and the mapping is exposed read-only.

    Example:
        >>> font = FontData.from_dict('demo', {'A': ['█▀█', '█▀█']})
        >>> font['A']
        ('█▀█', '█▀█')
        >>> 'B' in font
        False
    """
    name: str
    characters: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)
    author: str = ''
    license: str = ''

    def __post_init__(self):
        frozen = {str(char): tuple(rows) for char, rows in self.characters.items()}
        object.__setattr__(self, 'characters', MappingProxyType(frozen))

    @classmethod
    def from_dict(cls, name: str, characters: Dict[str, Iterable[str]], **meta) -> FontData:
        """Build from a plain ``{char: [rows]}`` dictionary."""
        return cls(name=name, characters={c: tuple(rows) for c, rows in characters.items()}, **meta)

    def __contains__(self, char: object) -> bool:
        return char in self.characters

    def __getitem__(self, char: str) -> Tuple[str, ...]:
        return self.characters[char]

    def __iter__(self) -> Iterator[str]:
        return iter(self.characters)

    def __len__(self) -> int:
        return len(self.characters)

    def get(self, char: str, default=None):
        return self.characters.get(char, default)

    @property
    def max_height(self) -> int:
        """Tallest glyph row count in the font."""
        return max((len(rows) for rows in self.characters.values()), default=0)

    def __hash__(self) -> int:
        return hash((self.name, len(self.characters)))
