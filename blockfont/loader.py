"""Font discovery and loading.

Fonts are ``.bit`` files: JSON documents mapping characters to glyph rows::

    {
        "name": "blocky",
        "author": "...",
        "license": "...",
        "characters": {
            "A": ["▄▀▄", "█▀█", "▀ ▀"],
            ...
        }
    }

Fonts are looked up by name in the first existing directory of:
    1. the ``BLOCKFONT_FONTS_DIR`` environment variable,
    2. ``./fonts`` in the working directory,
    3. the fonts bundled with the package.

Loaded fonts are cached per file path and returned as immutable
:class:`~blockfont.domain.FontData`, safe to share between threads.

Example:
    Load a font and render a glyph::

        from blockfont.loader import load_font, list_fonts

        print(list_fonts())          # ['blocky', 'tiny']
        font = load_font('Blocky')   # case variations are tried
        print('\\n'.join(font['A']))
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional

from . import config
from .domain.glyph import FontData

logger = logging.getLogger(__name__)

_cache: Dict[Path, FontData] = {}
_cache_lock = threading.Lock()


class FontLoadError(Exception):
    """Base class for font loading failures."""


class FontNotFoundError(FontLoadError):
    """No font file matches the requested name."""


class FontParseError(FontLoadError):
    """A font file exists but is not a valid font resource."""


def find_fonts_dir() -> Path:
    """Locate the directory fonts are loaded from.

    Raises:
        FontNotFoundError: If no candidate directory exists.
    """
    candidates = [config.fonts_dir_override(), Path.cwd() / 'fonts', config.BUNDLED_FONTS_DIR]
    for candidate in candidates:
        if candidate is not None and candidate.is_dir():
            return candidate
    raise FontNotFoundError("No fonts directory found")


def _name_variations(name: str) -> List[str]:
    variations = [name, name.lower(), name.upper(), name.lower().title()]
    return list(dict.fromkeys(variations))


def resolve_font_path(name: str, fonts_dir: Optional[Path] = None) -> Path:
    """Find the ``.bit`` file for a font name.

    Raises:
        FontNotFoundError: If no case variation of the name exists.
    """
    fonts_dir = Path(fonts_dir) if fonts_dir is not None else find_fonts_dir()
    for variation in _name_variations(name):
        path = fonts_dir / f"{variation}{config.FONT_EXTENSION}"
        if path.is_file():
            return path
    raise FontNotFoundError(f"Font '{name}' not found in {fonts_dir}")


def parse_font(payload: Any, name: str) -> FontData:
    """Build FontData from a decoded font document.

    Args:
        payload: Decoded JSON document.
        name: Fallback name when the document has none.

    Raises:
        FontParseError: If the document structure is invalid.
    """
    if not isinstance(payload, dict):
        raise FontParseError(f"Font '{name}': expected a JSON object")

    characters = payload.get('characters')
    if not isinstance(characters, dict):
        raise FontParseError(f"Font '{name}': missing 'characters' mapping")

    glyphs = {}
    for char, rows in characters.items():
        if not isinstance(rows, list) or not all(isinstance(row, str) for row in rows):
            raise FontParseError(f"Font '{name}': glyph {char!r} must be a list of strings")
        glyphs[char] = rows

    if not glyphs:
        logger.warning("Font '%s' defines no characters", name)

    return FontData.from_dict(
        str(payload.get('name') or name),
        glyphs,
        author=str(payload.get('author', '')),
        license=str(payload.get('license', '')),
    )


def load_font_file(path: Path) -> FontData:
    """Load and parse a ``.bit`` file, bypassing the name lookup.

    Raises:
        FontNotFoundError: If the file cannot be read.
        FontParseError: If the file is not valid JSON or not a font.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding='utf-8')
    except OSError as e:
        raise FontNotFoundError(f"Cannot read font file {path}: {e}") from e

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise FontParseError(f"Font file {path} is not valid JSON: {e}") from e

    return parse_font(payload, path.stem)


def load_font(name: str, fonts_dir: Optional[Path] = None) -> FontData:
    """Load a font by name.

    Args:
        name: Font name, matched case-insensitively against file stems.
        fonts_dir: Directory to search. Defaults to :func:`find_fonts_dir`.

    Returns:
        The cached FontData for the resolved file.

    Raises:
        FontNotFoundError: If the font does not exist.
        FontParseError: If the font file is malformed.
    """
    path = resolve_font_path(name, fonts_dir).resolve()
    with _cache_lock:
        cached = _cache.get(path)
    if cached is not None:
        return cached

    font = load_font_file(path)
    logger.info("Loaded font '%s' (%d glyphs) from %s", font.name, len(font), path)
    with _cache_lock:
        return _cache.setdefault(path, font)


def list_fonts(fonts_dir: Optional[Path] = None) -> List[str]:
    """Names of the available fonts, sorted."""
    fonts_dir = Path(fonts_dir) if fonts_dir is not None else find_fonts_dir()
    return sorted(p.stem for p in fonts_dir.glob(f"*{config.FONT_EXTENSION}") if p.is_file())


def clear_cache() -> None:
    """Forget all loaded fonts."""
    with _cache_lock:
        _cache.clear()
